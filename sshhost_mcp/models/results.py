"""Operation result records.

Each operation produces its own result variant carrying only the fields
relevant to it. ``to_dict`` renders the wire shape stored as a resource.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Literal


def format_timestamp(moment: datetime) -> str:
    """Render an aware datetime as UTC ISO-8601 with milliseconds and a Z suffix."""
    moment = moment.astimezone(UTC)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_timestamp() -> str:
    """Get the current UTC time as ISO-8601 with millisecond precision."""
    return format_timestamp(datetime.now(UTC))


@dataclass
class OperationLog:
    """Append-only buffer of human-readable progress notes."""

    entries: list[str] = field(default_factory=list)

    def __call__(self, message: str) -> None:
        """Append a note."""
        self.entries.append(message)

    def __len__(self) -> int:
        return len(self.entries)

    def render(self) -> str:
        """Join notes into the newline-separated text stored with results."""
        return "\n".join(self.entries)


@dataclass(frozen=True)
class ExecResult:
    """Result of running a command on a remote host."""

    stdout: str
    stderr: str
    exit_code: int
    command: str
    host: str
    logs: str
    timestamp: str = field(default_factory=utc_timestamp)
    kind: Literal["exec"] = "exec"

    def to_dict(self) -> dict[str, Any]:
        """Render the wire representation."""
        return {
            "kind": self.kind,
            "stdout": self.stdout,
            "stderr": self.stderr,
            "exitCode": self.exit_code,
            "command": self.command,
            "host": self.host,
            "logs": self.logs,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class UploadResult:
    """Result of copying a local file to a remote host."""

    source: str
    dest: str
    host: str
    logs: str
    success: bool = True
    timestamp: str = field(default_factory=utc_timestamp)
    kind: Literal["upload"] = "upload"

    def to_dict(self) -> dict[str, Any]:
        """Render the wire representation."""
        return {
            "kind": self.kind,
            "source": self.source,
            "dest": self.dest,
            "host": self.host,
            "success": self.success,
            "logs": self.logs,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class ConnectResult:
    """Result of waiting for a host to accept SSH connections."""

    host: str
    logs: str
    connected: bool = True
    timestamp: str = field(default_factory=utc_timestamp)
    kind: Literal["connect"] = "connect"

    def to_dict(self) -> dict[str, Any]:
        """Render the wire representation."""
        return {
            "kind": self.kind,
            "connected": self.connected,
            "host": self.host,
            "logs": self.logs,
            "timestamp": self.timestamp,
        }


OperationResult = ExecResult | UploadResult | ConnectResult
