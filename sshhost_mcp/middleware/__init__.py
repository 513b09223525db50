"""SSH Host MCP middleware components."""

from sshhost_mcp.middleware.base import SSHHostMiddleware
from sshhost_mcp.middleware.errors import ErrorHandlingMiddleware
from sshhost_mcp.middleware.logging import LoggingMiddleware

__all__ = [
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
    "SSHHostMiddleware",
]
