"""MCP resources for SSH Host MCP."""

from sshhost_mcp.resources.results import list_results_resource, result_resource

__all__ = ["list_results_resource", "result_resource"]
