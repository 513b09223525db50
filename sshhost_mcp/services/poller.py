"""Poll a host until it accepts SSH connections."""

import asyncio
import logging
import time
from typing import TYPE_CHECKING

from sshhost_mcp.services.invoker import DEFAULT_CONNECT_TIMEOUT, ssh_exec_raw

if TYPE_CHECKING:
    from sshhost_mcp.models import CommandResult, ConnectionTarget

logger = logging.getLogger(__name__)

PROBE_COMMAND = "echo ready"
PROBE_MARKER = "ready"
DEFAULT_POLL_INTERVAL = 3.0


def is_ready(result: "CommandResult") -> bool:
    """Check whether a probe result shows a usable SSH session."""
    return result.ok and result.stdout.strip() == PROBE_MARKER


async def wait_for_ssh(
    target: "ConnectionTarget",
    timeout: float = 60,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    *,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    ssh_binary: str = "ssh",
) -> bool:
    """Probe ``target`` at a fixed cadence until it answers or time runs out.

    Each probe runs ``echo ready`` over ssh. The first probe with exit
    status 0 and trimmed output ``ready`` ends the wait. There is no
    backoff. A probe that hangs is bounded by ``connect_timeout``, so the
    total wait may overrun ``timeout`` by about that much.

    Args:
        target: Remote host and user
        timeout: Seconds before giving up; 0 or less returns immediately
        poll_interval: Seconds to sleep between probes
        connect_timeout: Seconds allowed for each probe's connection
        ssh_binary: Name or path of the ssh executable

    Returns:
        True if the host answered before the deadline, False otherwise.
    """
    deadline = time.monotonic() + timeout
    attempts = 0

    while time.monotonic() < deadline:
        attempts += 1
        result = await ssh_exec_raw(
            target,
            PROBE_COMMAND,
            connect_timeout=connect_timeout,
            ssh_binary=ssh_binary,
        )
        if is_ready(result):
            logger.info(
                "SSH ready on %s after %d probe(s)", target.destination, attempts
            )
            return True

        logger.debug(
            "Probe %d on %s not ready (exit %d)",
            attempts,
            target.destination,
            result.exit_code,
        )
        await asyncio.sleep(poll_interval)

    logger.warning(
        "SSH not reachable on %s after %d probe(s) in %ss",
        target.destination,
        attempts,
        timeout,
    )
    return False
