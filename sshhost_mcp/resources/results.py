"""Read stored operation results back by handle."""

import json
import logging

from fastmcp.exceptions import ResourceError

from sshhost_mcp.models.results import format_timestamp
from sshhost_mcp.services import get_store

logger = logging.getLogger(__name__)


async def result_resource(handle: str) -> str:
    """Read a stored operation result.

    Args:
        handle: Handle returned in a tool's ``dataHandles``

    Returns:
        The stored record as JSON.

    Raises:
        ResourceError: If the handle is unknown or was evicted
    """
    store = get_store()
    try:
        stored = store.get(handle)
    except KeyError as e:
        raise ResourceError(
            f"Unknown result handle '{handle}'. "
            f"The newest {store.history} results per resource are kept."
        ) from e
    return json.dumps(stored.to_dict(), indent=2)


async def list_results_resource() -> str:
    """List stored results, newest first."""
    stored = get_store().list()
    if not stored:
        return "No stored results."

    lines = ["Stored results:"]
    for r in stored:
        host = r.data.get("host", "?")
        lines.append(
            f"  {r.handle} [{r.kind}] {host} v{r.version} "
            f"at {r.data.get('timestamp') or format_timestamp(r.written_at)}"
        )
    return "\n".join(lines)
