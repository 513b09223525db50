"""Errors raised by remote host operations."""


class SSHHostError(Exception):
    """Base class for remote host operation failures."""


class CommandError(SSHHostError):
    """Remote command exited with a non-zero status."""

    def __init__(self, exit_code: int, stderr_tail: str, command: str = ""):
        """Initialize command error.

        Args:
            exit_code: Exit status of the ssh process
            stderr_tail: Trailing portion of captured stderr
            command: Command that was run
        """
        self.exit_code = exit_code
        self.stderr_tail = stderr_tail
        self.command = command
        super().__init__(f"SSH command failed (exit {exit_code}): {stderr_tail}")


class CommandTimeoutError(CommandError):
    """Remote command did not finish within its timeout."""

    def __init__(self, timeout: float, command: str = ""):
        """Initialize timeout error.

        Args:
            timeout: Seconds allowed before the process was killed
            command: Command that was run
        """
        self.timeout = timeout
        super().__init__(-1, f"command timed out after {timeout}s", command)


class TransferError(SSHHostError):
    """File transfer to a remote host failed."""

    def __init__(self, source: str, dest: str, stderr: str):
        """Initialize transfer error.

        Args:
            source: Local source path
            dest: Remote destination (``user@host:path``)
            stderr: Decoded scp error output
        """
        self.source = source
        self.dest = dest
        self.stderr = stderr
        super().__init__(f"scp failed: {stderr}")


class ReachabilityError(SSHHostError):
    """Host did not accept SSH connections before the deadline."""

    def __init__(self, host: str, timeout: float):
        """Initialize reachability error.

        Args:
            host: Host that was polled
            timeout: Seconds spent polling
        """
        self.host = host
        self.timeout = timeout
        super().__init__(f"SSH not reachable on {host} after {timeout:g}s")
