"""Global state management for SSH Host MCP."""

from sshhost_mcp.config import Config
from sshhost_mcp.services.store import ResultStore

# Global state (initialized on first access)
_config: Config | None = None
_store: ResultStore | None = None


def get_config() -> Config:
    """Get or create config."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def get_store() -> ResultStore:
    """Get or create the result store."""
    global _store
    if _store is None:
        _store = ResultStore(history=get_config().result_history)
    return _store


def reset_state() -> None:
    """Reset global state for testing.

    Clears the singleton instances so tests start with fresh state.
    Should only be used in test fixtures.
    """
    global _config, _store
    _config = None
    _store = None


def set_config(config: Config) -> None:
    """Set the global config instance.

    Args:
        config: Config instance to use globally.
    """
    global _config
    _config = config


def set_store(store: ResultStore) -> None:
    """Set the global result store instance.

    Args:
        store: ResultStore instance to use globally.
    """
    global _store
    _store = store
