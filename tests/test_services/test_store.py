"""Tests for the in-memory result store."""

from datetime import timedelta

import pytest

from sshhost_mcp.models import ConnectResult, ExecResult
from sshhost_mcp.services.store import ResultStore


def _exec(command: str = "echo hi") -> ExecResult:
    return ExecResult(
        stdout="hi\n", stderr="", exit_code=0, command=command, host="web1", logs=""
    )


def test_write_returns_handle_and_get_reads_back() -> None:
    """A written result can be read back by its handle."""
    store = ResultStore()

    handle = store.write("result", _exec())
    stored = store.get(handle)

    name, _, suffix = handle.partition("-")
    assert name == "result"
    assert len(suffix) == 32
    assert ":" not in handle
    assert stored.kind == "exec"
    assert stored.version == 1
    assert stored.data["exitCode"] == 0


def test_handles_are_unique() -> None:
    """Every write gets a fresh handle and version."""
    store = ResultStore()

    first = store.write("result", _exec())
    second = store.write("result", _exec())

    assert first != second
    assert store.get(second).version == 2


def test_history_limit_evicts_oldest() -> None:
    """Only the newest `history` results per name are kept."""
    store = ResultStore(history=3)
    handles = [store.write("result", _exec(f"echo {i}")) for i in range(5)]

    assert len(store) == 3
    for handle in handles[:2]:
        with pytest.raises(KeyError):
            store.get(handle)
    assert [r.data["command"] for r in store.list()] == ["echo 4", "echo 3", "echo 2"]


def test_history_is_per_name() -> None:
    """Eviction of one name does not touch another."""
    store = ResultStore(history=1)
    other = store.write("probe", ConnectResult(host="web1", logs=""))
    store.write("result", _exec())
    store.write("result", _exec())

    assert store.get(other).kind == "connect"
    assert len(store.list("result")) == 1


def test_get_unknown_handle_raises() -> None:
    """Unknown handles raise KeyError."""
    with pytest.raises(KeyError, match="Unknown result handle"):
        ResultStore().get("result-missing")


def test_invalid_history_rejected() -> None:
    """history must be positive."""
    with pytest.raises(ValueError):
        ResultStore(history=0)


def test_clear_empties_store() -> None:
    """clear removes everything and restarts versions."""
    store = ResultStore()
    store.write("result", _exec())
    store.clear()

    assert len(store) == 0
    handle = store.write("result", _exec())
    assert store.get(handle).version == 1


def test_written_at_is_utc_like_result_timestamps() -> None:
    """Store metadata uses the same UTC Z format as result timestamps."""
    store = ResultStore()
    stored = store.get(store.write("result", _exec()))

    assert stored.written_at.utcoffset() == timedelta(0)
    written_at = stored.to_dict()["writtenAt"]
    assert written_at.endswith("Z")
    assert len(written_at) == len(stored.data["timestamp"])
