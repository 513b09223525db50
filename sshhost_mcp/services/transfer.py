"""File upload through the system scp binary."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from sshhost_mcp.services.errors import TransferError
from sshhost_mcp.services.invoker import (
    DEFAULT_CONNECT_TIMEOUT,
    connection_options,
    run_process,
)

if TYPE_CHECKING:
    from sshhost_mcp.models import ConnectionTarget

logger = logging.getLogger(__name__)


def build_scp_args(
    target: "ConnectionTarget",
    source: str,
    dest: str,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    scp_binary: str = "scp",
) -> list[str]:
    """Build the argument list for copying ``source`` to ``dest`` on ``target``."""
    return [
        scp_binary,
        *connection_options(connect_timeout),
        source,
        target.remote_path(dest),
    ]


async def scp_upload(
    target: "ConnectionTarget",
    source: str,
    dest: str,
    *,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    scp_binary: str = "scp",
) -> bool:
    """Copy a local file to a remote host.

    Args:
        target: Remote host and user
        source: Local source path
        dest: Remote destination path
        connect_timeout: Seconds allowed for the initial connection
        scp_binary: Name or path of the scp executable

    Returns:
        True on success.

    Raises:
        TransferError: If the source is missing or scp exits non-zero
    """
    remote = target.remote_path(dest)

    if not Path(source).exists():
        raise TransferError(source, remote, f"{source}: No such file or directory")

    args = build_scp_args(target, source, dest, connect_timeout, scp_binary)
    result = await run_process(args)

    if not result.ok:
        logger.debug("scp %s -> %s failed (exit %d)", source, remote, result.exit_code)
        raise TransferError(source, remote, result.stderr)

    logger.debug("scp %s -> %s completed", source, remote)
    return True
