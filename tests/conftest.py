"""Shared fixtures for SSH Host MCP tests."""

import os
from collections.abc import Callable, Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest

from sshhost_mcp.services import reset_state


@pytest.fixture(autouse=True)
def clean_state(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test with fresh global state and no SSHHOST_* overrides."""
    for key in list(os.environ):
        if key.startswith("SSHHOST_"):
            monkeypatch.delenv(key)
    reset_state()
    yield
    reset_state()


@pytest.fixture
def fake_process() -> Callable[..., MagicMock]:
    """Factory for mock processes returned by create_subprocess_exec."""

    def make(stdout: bytes = b"", stderr: bytes = b"", returncode: int = 0) -> MagicMock:
        proc = MagicMock()
        proc.communicate = AsyncMock(return_value=(stdout, stderr))
        proc.returncode = returncode
        proc.kill = MagicMock()
        proc.wait = AsyncMock(return_value=returncode)
        return proc

    return make
