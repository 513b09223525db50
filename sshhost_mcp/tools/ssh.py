"""SSH host tools: run a command, upload a file, wait for a host.

Each tool merges the connection arguments (host, user) into a
ConnectionTarget, runs one operation, writes the result to the store and
returns the handle alongside the result.
"""

import logging
from typing import TYPE_CHECKING, Annotated, Any

from pydantic import Field

from sshhost_mcp.models import ConnectionTarget
from sshhost_mcp.services import get_config, get_store, operations

if TYPE_CHECKING:
    from sshhost_mcp.models import OperationResult

logger = logging.getLogger(__name__)

RESULT_RESOURCE = "result"

Host = Annotated[str, Field(description="SSH hostname or IP")]
User = Annotated[
    str | None,
    Field(description="SSH user (defaults to SSHHOST_DEFAULT_USER, normally root)"),
]


def _target(host: str, user: str | None) -> ConnectionTarget:
    return ConnectionTarget(host=host, user=user or get_config().default_user)


def _publish(result: "OperationResult") -> dict[str, Any]:
    """Write a result to the store and build the tool response."""
    handle = get_store().write(RESULT_RESOURCE, result)
    return {"dataHandles": [handle], "result": result.to_dict()}


async def exec_command(
    host: Host,
    command: Annotated[str, Field(description="Command to execute")],
    user: User = None,
    timeout: Annotated[float, Field(description="Timeout in seconds", gt=0)] = 60,
) -> dict[str, Any]:
    """Run a command over SSH and return stdout/stderr/exitCode.

    Fails if the command exits with a non-zero status; the error carries
    the tail of stderr.
    """
    target = _target(host, user)
    result = await operations.execute(target, command, timeout=timeout)
    return _publish(result)


async def upload_file(
    host: Host,
    source: Annotated[str, Field(description="Local source path")],
    dest: Annotated[str, Field(description="Remote destination path")],
    user: User = None,
) -> dict[str, Any]:
    """Upload a local file to a remote host via scp."""
    target = _target(host, user)
    result = await operations.upload(target, source, dest)
    return _publish(result)


async def wait_for_connection(
    host: Host,
    user: User = None,
    timeout: Annotated[float, Field(description="Timeout in seconds", ge=0)] = 60,
) -> dict[str, Any]:
    """Poll SSH until the host is reachable.

    Fails if the host does not answer within ``timeout`` seconds.
    """
    target = _target(host, user)
    result = await operations.wait_for_connection(target, timeout=timeout)
    return _publish(result)
