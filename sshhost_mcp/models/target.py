"""Connection target data models."""

from dataclasses import dataclass

from sshhost_mcp.utils.validation import validate_host, validate_user


@dataclass(frozen=True)
class ConnectionTarget:
    """Remote machine and login identity for one operation."""

    host: str
    user: str = "root"

    def __post_init__(self) -> None:
        """Reject empty or placeholder hosts before any process is spawned."""
        validate_host(self.host)
        validate_user(self.user)

    @property
    def destination(self) -> str:
        """Get the ``user@host`` string passed to ssh/scp."""
        return f"{self.user}@{self.host}"

    def remote_path(self, path: str) -> str:
        """Get the ``user@host:path`` string passed to scp.

        IPv6 literals are bracketed (``user@[fe80::1]:path``) so scp does not
        split the address at its first colon.
        """
        host = self.host
        if ":" in host and not host.startswith("["):
            host = f"[{host}]"
        return f"{self.user}@{host}:{path}"
