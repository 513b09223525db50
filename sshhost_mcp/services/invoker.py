"""Remote command execution through the system ssh binary."""

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING

from sshhost_mcp.models import CommandResult
from sshhost_mcp.services.errors import CommandError, CommandTimeoutError

if TYPE_CHECKING:
    from sshhost_mcp.models import ConnectionTarget

logger = logging.getLogger(__name__)

DEFAULT_CONNECT_TIMEOUT = 10
DEFAULT_ERROR_TAIL_CHARS = 500

# Exit status a shell reports for a missing executable
EXIT_NOT_FOUND = 127


def connection_options(connect_timeout: int = DEFAULT_CONNECT_TIMEOUT) -> list[str]:
    """Options shared by ssh and scp invocations.

    Host keys are neither checked nor persisted, and the initial TCP
    connection attempt is bounded by ``connect_timeout`` seconds.
    """
    return [
        "-o", "StrictHostKeyChecking=no",
        "-o", "UserKnownHostsFile=/dev/null",
        "-o", f"ConnectTimeout={connect_timeout}",
    ]


def build_ssh_args(
    target: "ConnectionTarget",
    command: str,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    ssh_binary: str = "ssh",
) -> list[str]:
    """Build the argument list for running ``command`` on ``target``.

    Args:
        target: Remote host and user
        command: Command line passed verbatim to the remote shell
        connect_timeout: Seconds allowed for the initial connection
        ssh_binary: Name or path of the ssh executable

    Returns:
        Argument vector suitable for ``create_subprocess_exec``
    """
    return [
        ssh_binary,
        *connection_options(connect_timeout),
        target.destination,
        command,
    ]


def decode_output(data: bytes | None) -> str:
    """Decode captured process output as UTF-8 text."""
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


def tail(text: str, limit: int) -> str:
    """Get the last ``limit`` characters of ``text``."""
    if limit <= 0:
        return ""
    return text[-limit:]


async def run_process(args: list[str], timeout: float | None = None) -> CommandResult:
    """Spawn a process, wait for it, and collect its decoded output.

    Args:
        args: Argument vector, executable first
        timeout: Seconds to wait before killing the process (None waits forever)

    Returns:
        CommandResult with exit code and decoded stdout/stderr.
        A missing executable yields exit code 127 instead of raising.

    Raises:
        TimeoutError: If the process was killed after ``timeout`` seconds
        CancelledError: If the awaiting task was cancelled (process is killed)
    """
    logger.debug("Spawning %s (%d args)", args[0], len(args))
    try:
        proc = await asyncio.create_subprocess_exec(
            *args,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except FileNotFoundError as e:
        logger.error("Executable not found: %s", args[0])
        return CommandResult(
            exit_code=EXIT_NOT_FOUND,
            stdout="",
            stderr=f"{args[0]}: {e.strerror or 'command not found'}",
        )

    try:
        stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except (TimeoutError, asyncio.CancelledError):
        # Reap the child on timeout and on cancellation of the awaiting task
        if proc.returncode is None:
            with contextlib.suppress(ProcessLookupError):
                proc.kill()
        await proc.wait()
        raise

    returncode = proc.returncode if proc.returncode is not None else -1
    return CommandResult(
        exit_code=returncode,
        stdout=decode_output(stdout),
        stderr=decode_output(stderr),
    )


async def ssh_exec_raw(
    target: "ConnectionTarget",
    command: str,
    *,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    ssh_binary: str = "ssh",
) -> CommandResult:
    """Run a command over ssh without checking its exit status.

    Used where a non-zero exit is expected, such as probing a host that
    is still booting.

    Returns:
        CommandResult regardless of exit status.
    """
    args = build_ssh_args(target, command, connect_timeout, ssh_binary)
    return await run_process(args)


async def ssh_exec(
    target: "ConnectionTarget",
    command: str,
    *,
    timeout: float | None = None,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    ssh_binary: str = "ssh",
    error_tail_chars: int = DEFAULT_ERROR_TAIL_CHARS,
) -> CommandResult:
    """Run a command over ssh and require a zero exit status.

    Args:
        target: Remote host and user
        command: Command line to run
        timeout: Seconds to wait for completion (None waits forever)
        connect_timeout: Seconds allowed for the initial connection
        ssh_binary: Name or path of the ssh executable
        error_tail_chars: How much trailing stderr to keep in errors

    Returns:
        CommandResult with exit code 0.

    Raises:
        CommandError: If the process exits non-zero
        CommandTimeoutError: If the process exceeds ``timeout``
    """
    args = build_ssh_args(target, command, connect_timeout, ssh_binary)
    try:
        result = await run_process(args, timeout=timeout)
    except TimeoutError as e:
        logger.warning(
            "Command on %s timed out after %ss", target.destination, timeout
        )
        raise CommandTimeoutError(timeout or 0, command) from e

    if not result.ok:
        logger.debug(
            "Command on %s failed (exit %d)", target.destination, result.exit_code
        )
        raise CommandError(
            result.exit_code,
            tail(result.stderr, error_tail_chars),
            command,
        )

    return result
