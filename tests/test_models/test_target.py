"""Tests for ConnectionTarget."""

import dataclasses

import pytest

from sshhost_mcp.models import ConnectionTarget
from sshhost_mcp.utils.validation import InvalidTargetError


def test_target_defaults_to_root() -> None:
    """User defaults to root."""
    target = ConnectionTarget(host="10.0.0.5")
    assert target.user == "root"
    assert target.destination == "root@10.0.0.5"


def test_target_remote_path() -> None:
    """remote_path joins destination and path for scp."""
    target = ConnectionTarget(host="web1", user="deploy")
    assert target.remote_path("/srv/app.tar") == "deploy@web1:/srv/app.tar"


def test_target_remote_path_brackets_ipv6() -> None:
    """IPv6 literals are bracketed so scp finds the path separator."""
    target = ConnectionTarget(host="fe80::1")
    assert target.remote_path("/tmp/x") == "root@[fe80::1]:/tmp/x"
    assert target.destination == "root@fe80::1"


def test_target_is_immutable() -> None:
    """Targets cannot be changed after creation."""
    target = ConnectionTarget(host="web1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        target.host = "web2"  # type: ignore[misc]


@pytest.mark.parametrize("host", ["", "null", "undefined"])
def test_target_rejects_placeholder_hosts(host: str) -> None:
    """Empty and placeholder hosts are rejected."""
    with pytest.raises(InvalidTargetError):
        ConnectionTarget(host=host)


def test_target_rejects_empty_user() -> None:
    """An empty user is rejected."""
    with pytest.raises(InvalidTargetError):
        ConnectionTarget(host="web1", user="")
