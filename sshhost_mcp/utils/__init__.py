"""Utilities for SSH Host MCP."""

from sshhost_mcp.utils.console import ColorfulFormatter, MCPRequestFormatter
from sshhost_mcp.utils.validation import (
    InvalidTargetError,
    is_valid_ssh_host,
    validate_host,
    validate_user,
)

__all__ = [
    "ColorfulFormatter",
    "InvalidTargetError",
    "is_valid_ssh_host",
    "MCPRequestFormatter",
    "validate_host",
    "validate_user",
]
