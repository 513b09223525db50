"""In-memory store for operation results.

Results are written under a resource name and addressed afterwards by an
opaque handle. Only the newest ``history`` versions of each name are kept.
"""

import logging
import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from sshhost_mcp.models.results import format_timestamp

if TYPE_CHECKING:
    from sshhost_mcp.models import OperationResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredResource:
    """A result written to the store."""

    handle: str
    name: str
    kind: str
    version: int
    data: dict[str, Any]
    written_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_dict(self) -> dict[str, Any]:
        """Render the stored record with its metadata."""
        return {
            "handle": self.handle,
            "name": self.name,
            "kind": self.kind,
            "version": self.version,
            "writtenAt": format_timestamp(self.written_at),
            "data": self.data,
        }


class ResultStore:
    """Bounded store of operation results keyed by handle."""

    def __init__(self, history: int = 10) -> None:
        """Initialize the store.

        Args:
            history: Versions kept per resource name (must be > 0)
        """
        if history <= 0:
            raise ValueError(f"history must be > 0, got {history}")
        self.history = history
        self._resources: OrderedDict[str, StoredResource] = OrderedDict()
        self._versions: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._resources)

    def write(self, name: str, result: "OperationResult") -> str:
        """Store a result and return its handle.

        Args:
            name: Resource name (e.g. "result")
            result: Operation result to store

        Returns:
            Opaque handle for reading the result back
        """
        version = self._versions.get(name, 0) + 1
        self._versions[name] = version

        handle = f"{name}-{uuid.uuid4().hex}"
        self._resources[handle] = StoredResource(
            handle=handle,
            name=name,
            kind=result.kind,
            version=version,
            data=result.to_dict(),
        )
        logger.debug("Stored %s v%d as %s", name, version, handle)

        self._evict(name)
        return handle

    def _evict(self, name: str) -> None:
        """Drop the oldest versions of ``name`` beyond the history limit."""
        handles = [h for h, r in self._resources.items() if r.name == name]
        for handle in handles[: max(0, len(handles) - self.history)]:
            del self._resources[handle]
            logger.debug("Evicted %s", handle)

    def get(self, handle: str) -> StoredResource:
        """Get a stored result.

        Raises:
            KeyError: If the handle is unknown or was evicted
        """
        try:
            return self._resources[handle]
        except KeyError:
            raise KeyError(f"Unknown result handle: {handle}") from None

    def list(self, name: str | None = None) -> list[StoredResource]:
        """List stored results newest first, optionally filtered by name."""
        resources = reversed(self._resources.values())
        return [r for r in resources if name is None or r.name == name]

    def clear(self) -> None:
        """Remove all stored results."""
        self._resources.clear()
        self._versions.clear()
