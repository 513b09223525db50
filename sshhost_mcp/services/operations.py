"""Remote host operations: execute, upload, wait for connection.

Each operation builds its own progress log, delegates to the invoker,
transfer or poller, and returns a result record stamped with the
current time. Failures propagate unchanged.
"""

import logging
from typing import TYPE_CHECKING

from sshhost_mcp.models import ConnectResult, ExecResult, OperationLog, UploadResult
from sshhost_mcp.services.errors import ReachabilityError
from sshhost_mcp.services.invoker import ssh_exec
from sshhost_mcp.services.poller import wait_for_ssh
from sshhost_mcp.services.state import get_config
from sshhost_mcp.services.transfer import scp_upload

if TYPE_CHECKING:
    from sshhost_mcp.config import Config
    from sshhost_mcp.models import ConnectionTarget

logger = logging.getLogger(__name__)

# Commands longer than this are shortened in progress logs
LOG_COMMAND_WIDTH = 120


def _shorten(command: str, width: int = LOG_COMMAND_WIDTH) -> str:
    if len(command) > width:
        return command[:width] + "..."
    return command


async def execute(
    target: "ConnectionTarget",
    command: str,
    timeout: float | None = None,
    config: "Config | None" = None,
) -> ExecResult:
    """Run a command on a remote host.

    Args:
        target: Remote host and user
        command: Command line to run
        timeout: Seconds to wait for completion (defaults to config)
        config: Configuration (defaults to global config)

    Returns:
        ExecResult with stdout, stderr and exit code.

    Raises:
        CommandError: If the command exits non-zero or times out
    """
    config = config or get_config()
    if timeout is None:
        timeout = config.command_timeout

    log = OperationLog()
    log(f"Running command on {target.destination}: {_shorten(command)}")
    logger.info("exec on %s: %s", target.destination, _shorten(command, 50))

    result = await ssh_exec(
        target,
        command,
        timeout=timeout,
        connect_timeout=config.connect_timeout,
        ssh_binary=config.ssh_binary,
        error_tail_chars=config.error_tail_chars,
    )
    log(
        f"Command completed (stdout: {len(result.stdout)} bytes, "
        f"stderr: {len(result.stderr)} bytes)"
    )

    return ExecResult(
        stdout=result.stdout,
        stderr=result.stderr,
        exit_code=result.exit_code,
        command=command,
        host=target.host,
        logs=log.render(),
    )


async def upload(
    target: "ConnectionTarget",
    source: str,
    dest: str,
    config: "Config | None" = None,
) -> UploadResult:
    """Copy a local file to a remote host.

    Raises:
        TransferError: If the source is missing or scp fails
    """
    config = config or get_config()

    log = OperationLog()
    log(f"Uploading {source} to {target.remote_path(dest)}")
    logger.info("upload %s -> %s", source, target.remote_path(dest))

    await scp_upload(
        target,
        source,
        dest,
        connect_timeout=config.connect_timeout,
        scp_binary=config.scp_binary,
    )
    log("Upload complete")

    return UploadResult(
        source=source,
        dest=dest,
        host=target.host,
        success=True,
        logs=log.render(),
    )


async def wait_for_connection(
    target: "ConnectionTarget",
    timeout: float | None = None,
    poll_interval: float | None = None,
    config: "Config | None" = None,
) -> ConnectResult:
    """Wait until a remote host accepts SSH connections.

    Args:
        target: Remote host and user
        timeout: Seconds to keep probing (defaults to config)
        poll_interval: Seconds between probes (defaults to config)
        config: Configuration (defaults to global config)

    Returns:
        ConnectResult with connected=True.

    Raises:
        ReachabilityError: If the host never answered before the deadline
    """
    config = config or get_config()
    if timeout is None:
        timeout = config.wait_timeout
    if poll_interval is None:
        poll_interval = config.poll_interval

    log = OperationLog()
    log(f"Waiting for SSH on {target.destination} (up to {timeout:g}s)")

    connected = await wait_for_ssh(
        target,
        timeout,
        poll_interval,
        connect_timeout=config.connect_timeout,
        ssh_binary=config.ssh_binary,
    )
    if not connected:
        raise ReachabilityError(target.host, timeout)

    log("SSH connection established")

    return ConnectResult(
        host=target.host,
        connected=True,
        logs=log.render(),
    )
