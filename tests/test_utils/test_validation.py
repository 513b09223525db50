"""Tests for connection target validation."""

import pytest

from sshhost_mcp.utils.validation import (
    InvalidTargetError,
    is_valid_ssh_host,
    validate_host,
    validate_user,
)


@pytest.mark.parametrize(
    "host",
    ["10.0.0.5", "web1", "web1.example.com", "fe80::1"],
)
def test_is_valid_ssh_host_accepts_real_hosts(host: str) -> None:
    """Hostnames and IP addresses are valid."""
    assert is_valid_ssh_host(host) is True


@pytest.mark.parametrize("host", [None, "", "null", "undefined", "None", 42])
def test_is_valid_ssh_host_rejects_placeholders(host: object) -> None:
    """Missing values and template placeholders are invalid."""
    assert is_valid_ssh_host(host) is False


@pytest.mark.parametrize(
    "host",
    ["web1;rm -rf /", "web1 && id", "$(whoami)", "-oProxyCommand=id", "a/b"],
)
def test_validate_host_rejects_injection(host: str) -> None:
    """Hosts with shell metacharacters or option prefixes are rejected."""
    with pytest.raises(InvalidTargetError):
        validate_host(host)


def test_validate_host_rejects_long_names() -> None:
    """Host names longer than 253 characters are rejected."""
    with pytest.raises(InvalidTargetError, match="too long"):
        validate_host("a" * 254)


def test_validate_user_accepts_plain_names() -> None:
    """Plain login names pass through."""
    assert validate_user("deploy") == "deploy"


@pytest.mark.parametrize("user", ["", "a@b", "-l", "root;id"])
def test_validate_user_rejects_bad_names(user: str) -> None:
    """Empty or unsafe login names are rejected."""
    with pytest.raises(InvalidTargetError):
        validate_user(user)


def test_invalid_target_error_is_value_error() -> None:
    """InvalidTargetError can be caught as ValueError."""
    assert issubclass(InvalidTargetError, ValueError)
