"""SSH Host MCP: run commands, upload files and wait for hosts over ssh/scp."""

__version__ = "2026.2.18"
