"""Configuration management for SSH Host MCP."""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """SSH Host MCP configuration.

    Every field can be overridden by an ``SSHHOST_*`` environment variable,
    applied in ``__post_init__``. Invalid values are ignored with a warning.
    """

    default_user: str = "root"
    connect_timeout: int = 10
    command_timeout: int = 60
    wait_timeout: int = 60
    poll_interval: float = 3.0
    error_tail_chars: int = 500
    ssh_binary: str = "ssh"
    scp_binary: str = "scp"
    result_history: int = 10
    # Transport configuration
    transport: str = "http"  # "http" or "stdio"
    http_host: str = "0.0.0.0"
    http_port: int = 8000
    # Middleware configuration
    log_payloads: bool = False
    slow_threshold_ms: float = 1000.0
    include_traceback: bool = False

    def __post_init__(self) -> None:
        """Apply environment variable overrides."""
        if user := os.getenv("SSHHOST_DEFAULT_USER", "").strip():
            self.default_user = user

        for attr, key in (
            ("connect_timeout", "SSHHOST_CONNECT_TIMEOUT"),
            ("command_timeout", "SSHHOST_COMMAND_TIMEOUT"),
            ("wait_timeout", "SSHHOST_WAIT_TIMEOUT"),
            ("error_tail_chars", "SSHHOST_ERROR_TAIL_CHARS"),
            ("result_history", "SSHHOST_RESULT_HISTORY"),
        ):
            val = self._get_env_int(key)
            if val is None:
                continue
            if val <= 0:
                logger.warning(
                    "%s must be > 0, got %d. Using default: %d",
                    key,
                    val,
                    getattr(self, attr),
                )
                continue
            setattr(self, attr, val)

        if poll := os.getenv("SSHHOST_POLL_INTERVAL"):
            try:
                interval = float(poll)
            except ValueError:
                logger.warning("Invalid number for SSHHOST_POLL_INTERVAL: %s", poll)
            else:
                if interval > 0:
                    self.poll_interval = interval
                else:
                    logger.warning(
                        "SSHHOST_POLL_INTERVAL must be > 0, got %s", poll
                    )

        if ssh_binary := os.getenv("SSHHOST_SSH_BINARY"):
            self.ssh_binary = ssh_binary

        if scp_binary := os.getenv("SSHHOST_SCP_BINARY"):
            self.scp_binary = scp_binary

        # Transport configuration
        transport = os.getenv("SSHHOST_TRANSPORT", "").lower()
        if transport in ("http", "stdio"):
            self.transport = transport

        if http_host := os.getenv("SSHHOST_HTTP_HOST"):
            self.http_host = http_host

        http_port = self._get_env_int("SSHHOST_HTTP_PORT")
        if http_port is not None:
            self.http_port = http_port

        # Middleware configuration
        self.log_payloads = self._get_env_bool("SSHHOST_LOG_PAYLOADS", self.log_payloads)
        self.include_traceback = self._get_env_bool(
            "SSHHOST_INCLUDE_TRACEBACK", self.include_traceback
        )
        if slow := os.getenv("SSHHOST_SLOW_THRESHOLD_MS"):
            try:
                self.slow_threshold_ms = float(slow)
            except ValueError:
                logger.warning("Invalid number for SSHHOST_SLOW_THRESHOLD_MS: %s", slow)

        logger.debug(
            "Config initialized: transport=%s, default_user=%s, "
            "connect_timeout=%d, command_timeout=%d, wait_timeout=%d, "
            "poll_interval=%.1f, error_tail_chars=%d",
            self.transport,
            self.default_user,
            self.connect_timeout,
            self.command_timeout,
            self.wait_timeout,
            self.poll_interval,
            self.error_tail_chars,
        )

    @staticmethod
    def _get_env_int(key: str) -> int | None:
        """Get integer from environment.

        Args:
            key: Environment variable key

        Returns:
            Parsed integer, or None if unset or invalid
        """
        value = os.getenv(key)
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s", key, value)
            return None

    @staticmethod
    def _get_env_bool(key: str, default: bool) -> bool:
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")
