"""Tests for the console log formatter."""

import logging

from sshhost_mcp.utils.console import ColorfulFormatter, MCPRequestFormatter


def _record(name: str, msg: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, msg, None, None)


def test_plain_format_has_level_component_and_message() -> None:
    """Without colors the line is plain text with shortened component."""
    formatter = ColorfulFormatter(use_colors=False)

    line = formatter.format(_record("sshhost_mcp.services.poller", "probe 1"))

    assert "INFO" in line
    assert "services.poller" in line
    assert "sshhost_mcp.services" not in line
    assert line.endswith("probe 1")


def test_colored_format_highlights_destination() -> None:
    """user@host destinations are wrapped in color codes."""
    formatter = ColorfulFormatter(use_colors=True)

    line = formatter.format(_record("sshhost_mcp.services", "exec on root@10.0.0.5"))

    assert "\033[95mroot@10.0.0.5\033[0m" in line


def test_component_color_prefers_longest_prefix() -> None:
    """Specific module colors win over package colors."""
    formatter = ColorfulFormatter(use_colors=True)

    assert formatter._get_component_color("sshhost_mcp.services.invoker") == "\033[95m"
    assert formatter._get_component_color("sshhost_mcp.services.store") == "\033[94m"


def test_request_formatter_marks_failures() -> None:
    """Failure messages get the error marker."""
    formatter = MCPRequestFormatter(use_colors=True)

    line = formatter.format(_record("sshhost_mcp.tools", "upload failed"))

    assert line.startswith("\033[91m!!")


def test_request_formatter_plain_has_no_marker() -> None:
    """Without colors no marker is added."""
    formatter = MCPRequestFormatter(use_colors=False)

    line = formatter.format(_record("sshhost_mcp.tools", "upload failed"))

    assert not line.startswith("!!")
