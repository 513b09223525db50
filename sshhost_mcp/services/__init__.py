"""Services for SSH Host MCP."""

from sshhost_mcp.services.errors import (
    CommandError,
    CommandTimeoutError,
    ReachabilityError,
    SSHHostError,
    TransferError,
)
from sshhost_mcp.services.invoker import build_ssh_args, ssh_exec, ssh_exec_raw
from sshhost_mcp.services.operations import execute, upload, wait_for_connection
from sshhost_mcp.services.poller import wait_for_ssh
from sshhost_mcp.services.state import (
    get_config,
    get_store,
    reset_state,
    set_config,
    set_store,
)
from sshhost_mcp.services.store import ResultStore, StoredResource
from sshhost_mcp.services.transfer import build_scp_args, scp_upload

__all__ = [
    "CommandError",
    "CommandTimeoutError",
    "ReachabilityError",
    "ResultStore",
    "SSHHostError",
    "StoredResource",
    "TransferError",
    "build_scp_args",
    "build_ssh_args",
    "execute",
    "get_config",
    "get_store",
    "reset_state",
    "scp_upload",
    "set_config",
    "set_store",
    "ssh_exec",
    "ssh_exec_raw",
    "upload",
    "wait_for_connection",
    "wait_for_ssh",
]
