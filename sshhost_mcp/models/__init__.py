"""Data models for SSH Host MCP."""

from sshhost_mcp.models.command import CommandResult
from sshhost_mcp.models.results import (
    ConnectResult,
    ExecResult,
    OperationLog,
    OperationResult,
    UploadResult,
    format_timestamp,
)
from sshhost_mcp.models.target import ConnectionTarget

__all__ = [
    "CommandResult",
    "ConnectResult",
    "ConnectionTarget",
    "ExecResult",
    "OperationLog",
    "OperationResult",
    "UploadResult",
    "format_timestamp",
]
