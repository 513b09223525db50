"""Tests for operation result records."""

import re

from sshhost_mcp.models import ConnectResult, ExecResult, OperationLog, UploadResult

ISO_UTC = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


def test_operation_log_appends_in_order() -> None:
    """OperationLog keeps notes in order and joins them with newlines."""
    log = OperationLog()
    log("first")
    log("second")

    assert len(log) == 2
    assert log.render() == "first\nsecond"


def test_operation_log_empty_renders_empty_string() -> None:
    """An empty log renders as an empty string."""
    assert OperationLog().render() == ""


def test_exec_result_wire_shape() -> None:
    """ExecResult renders camelCase exitCode and a UTC timestamp."""
    result = ExecResult(
        stdout="hi\n",
        stderr="",
        exit_code=0,
        command="echo hi",
        host="10.0.0.5",
        logs="Running command",
    )

    data = result.to_dict()

    assert data["kind"] == "exec"
    assert data["exitCode"] == 0
    assert data["stdout"] == "hi\n"
    assert data["command"] == "echo hi"
    assert ISO_UTC.match(data["timestamp"])
    assert "source" not in data
    assert "connected" not in data


def test_upload_result_wire_shape() -> None:
    """UploadResult carries only upload fields."""
    data = UploadResult(
        source="/tmp/a", dest="/srv/a", host="web1", logs=""
    ).to_dict()

    assert data["kind"] == "upload"
    assert data["success"] is True
    assert set(data) == {"kind", "source", "dest", "host", "success", "logs", "timestamp"}


def test_connect_result_wire_shape() -> None:
    """ConnectResult carries only connection fields."""
    data = ConnectResult(host="web1", logs="").to_dict()

    assert data["kind"] == "connect"
    assert data["connected"] is True
    assert set(data) == {"kind", "connected", "host", "logs", "timestamp"}
