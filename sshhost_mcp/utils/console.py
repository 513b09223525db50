"""Colorful console logging formatter."""

import logging
import os
import re
from datetime import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# ANSI color codes
COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "bright_black": "\033[90m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
    "bright_yellow": "\033[93m",
    "bright_blue": "\033[94m",
    "bright_magenta": "\033[95m",
    "bright_cyan": "\033[96m",
    "bg_red": "\033[41m",
}

LEVEL_COLORS = {
    "DEBUG": COLORS["bright_black"],
    "INFO": COLORS["bright_green"],
    "WARNING": COLORS["bright_yellow"],
    "ERROR": COLORS["bright_red"],
    "CRITICAL": COLORS["bg_red"] + COLORS["white"] + COLORS["bold"],
}

# Component colors for logger names
COMPONENT_COLORS = {
    "sshhost_mcp.server": COLORS["bright_cyan"],
    "sshhost_mcp.services.invoker": COLORS["bright_magenta"],
    "sshhost_mcp.services.poller": COLORS["bright_magenta"],
    "sshhost_mcp.services.transfer": COLORS["bright_magenta"],
    "sshhost_mcp.services": COLORS["bright_blue"],
    "sshhost_mcp.tools": COLORS["bright_blue"],
    "sshhost_mcp.resources": COLORS["cyan"],
    "sshhost_mcp.middleware": COLORS["yellow"],
    "sshhost_mcp.config": COLORS["green"],
    "default": COLORS["white"],
}

DESTINATION_PATTERN = re.compile(r"(\b[\w.\-]+@[\w.\-:]+)")
DURATION_PATTERN = re.compile(r"(\d+\.?\d*ms)")
EXIT_PATTERN = re.compile(r"(exit \d+)")


def _resolve_timezone() -> ZoneInfo:
    name = os.getenv("SSHHOST_LOG_TZ", "UTC")
    try:
        return ZoneInfo(name)
    except ZoneInfoNotFoundError:
        return ZoneInfo("UTC")


class ColorfulFormatter(logging.Formatter):
    """Colorful log formatter with component highlighting.

    Timestamps are rendered in the zone named by ``SSHHOST_LOG_TZ``
    (default UTC).
    """

    def __init__(self, use_colors: bool = True) -> None:
        """Initialize the formatter.

        Args:
            use_colors: Whether to use ANSI colors.
        """
        super().__init__()
        self.use_colors = use_colors
        self.tz = _resolve_timezone()

    def _colorize(self, text: str, color: str) -> str:
        if not self.use_colors:
            return text
        return f"{color}{text}{COLORS['reset']}"

    def _get_component_color(self, name: str) -> str:
        # Longest prefix wins so services.invoker beats services
        matches = [
            prefix
            for prefix in COMPONENT_COLORS
            if prefix != "default" and name.startswith(prefix)
        ]
        if not matches:
            return COMPONENT_COLORS["default"]
        return COMPONENT_COLORS[max(matches, key=len)]

    def _format_timestamp(self, record: logging.LogRecord) -> str:
        dt = datetime.fromtimestamp(record.created, tz=self.tz)
        return f"{dt.strftime('%H:%M:%S')}.{int(record.msecs):03d} {dt.strftime('%m/%d')}"

    def _format_level(self, record: logging.LogRecord) -> str:
        level = record.levelname
        color = LEVEL_COLORS.get(level, COLORS["white"])
        return self._colorize(f"{level:<8}", color)

    def _format_component(self, record: logging.LogRecord) -> str:
        name = record.name
        if name.startswith("sshhost_mcp."):
            name = name[len("sshhost_mcp.") :]
        color = self._get_component_color(record.name)
        return self._colorize(f"{name:<20}", color)

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with colors and timestamp."""
        timestamp = self._colorize(self._format_timestamp(record), COLORS["dim"])
        level = self._format_level(record)
        component = self._format_component(record)
        sep = self._colorize("|", COLORS["dim"])
        message = self._highlight_message(record.getMessage())

        line = f"{timestamp} {sep} {level} {sep} {component} {sep} {message}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line

    def _highlight_message(self, message: str) -> str:
        """Highlight destinations, durations and exit codes."""
        if not self.use_colors:
            return message

        if "@" in message:
            message = DESTINATION_PATTERN.sub(
                f"{COLORS['bright_magenta']}\\1{COLORS['reset']}", message
            )

        if "ms" in message:
            message = DURATION_PATTERN.sub(
                f"{COLORS['bright_yellow']}\\1{COLORS['reset']}", message
            )

        if "exit" in message:
            message = EXIT_PATTERN.sub(
                f"{COLORS['bright_red']}\\1{COLORS['reset']}", message
            )

        return message


class MCPRequestFormatter(ColorfulFormatter):
    """Extended formatter with event markers in the left gutter."""

    def format(self, record: logging.LogRecord) -> str:
        """Format with a marker derived from the message wording."""
        base = super().format(record)

        if not self.use_colors:
            return base

        message = record.getMessage().lower()

        if "starting" in message or "ready" in message:
            return f"{COLORS['bright_green']}>>>{COLORS['reset']} {base}"
        elif "shutting down" in message or "shutdown" in message:
            return f"{COLORS['bright_red']}<<<{COLORS['reset']} {base}"
        elif "error" in message or "failed" in message:
            return f"{COLORS['bright_red']}!!{COLORS['reset']}  {base}"
        elif "slow" in message or "not reachable" in message:
            return f"{COLORS['bright_yellow']}!{COLORS['reset']}   {base}"
        elif "completed" in message or "established" in message:
            return f"{COLORS['bright_green']}OK{COLORS['reset']}  {base}"
        elif "spawning" in message or "uploading" in message:
            return f"{COLORS['bright_cyan']}+{COLORS['reset']}   {base}"

        return f"    {base}"
