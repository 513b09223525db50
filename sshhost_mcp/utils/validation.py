"""Connection target validation utilities."""

from typing import Final


class InvalidTargetError(ValueError):
    """Connection target is empty, a placeholder, or unsafe."""

    pass


# Values that leak in from unset template variables upstream
PLACEHOLDER_HOSTS: Final[frozenset[str]] = frozenset({"null", "undefined", "none"})

# Characters that could enable injection into the ssh destination argument
SUSPICIOUS_CHARS: Final[list[str]] = ["/", "\\", ";", "&", "|", "$", "`", " ", "\n", "\r", "\x00"]


def is_valid_ssh_host(host: object) -> bool:
    """Check whether a value can be used as an SSH host.

    Args:
        host: Candidate host value

    Returns:
        False for non-strings, empty strings, and placeholder values
    """
    if not host or not isinstance(host, str):
        return False
    return host.lower() not in PLACEHOLDER_HOSTS


def validate_host(host: str) -> str:
    """Validate a host name or IP address.

    Args:
        host: The host name to validate

    Returns:
        Validated host name

    Raises:
        InvalidTargetError: If host name is invalid
    """
    if not is_valid_ssh_host(host):
        raise InvalidTargetError(f"Invalid SSH host: {host!r}")

    if len(host) > 253:
        raise InvalidTargetError(f"Host name too long: {len(host)} chars")

    if host.startswith("-"):
        raise InvalidTargetError(f"Host cannot start with '-': {host!r}")

    for char in SUSPICIOUS_CHARS:
        if char in host:
            raise InvalidTargetError(f"Host contains invalid characters: {host!r}")

    return host


def validate_user(user: str) -> str:
    """Validate an SSH login name.

    Raises:
        InvalidTargetError: If user is empty or contains invalid characters
    """
    if not user or not isinstance(user, str):
        raise InvalidTargetError(f"Invalid SSH user: {user!r}")

    if user.startswith("-") or "@" in user:
        raise InvalidTargetError(f"User contains invalid characters: {user!r}")

    for char in SUSPICIOUS_CHARS:
        if char in user:
            raise InvalidTargetError(f"User contains invalid characters: {user!r}")

    return user
