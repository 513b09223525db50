"""Command execution data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandResult:
    """Result of a single ssh process invocation."""

    exit_code: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        """True if the process exited with status 0."""
        return self.exit_code == 0
