"""MCP tools for SSH Host MCP."""

from sshhost_mcp.tools.ssh import exec_command, upload_file, wait_for_connection

__all__ = ["exec_command", "upload_file", "wait_for_connection"]
