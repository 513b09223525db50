"""SSH Host MCP FastMCP server.

Thin wrapper that wires the MCP server to tools and resources.
All operation logic lives in the services/ modules.
"""

import logging
import os
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from sshhost_mcp.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from sshhost_mcp.resources import list_results_resource, result_resource
from sshhost_mcp.services import get_config, get_store
from sshhost_mcp.tools import exec_command, upload_file, wait_for_connection
from sshhost_mcp.utils.console import MCPRequestFormatter

NOISY_LOGGERS = [
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
    "httpcore",
    "fastmcp",
    "starlette",
    "anyio",
]


def _configure_logging() -> None:
    """Configure colorful logging for the sshhost_mcp package.

    Called at module load time so logging is ready however the server
    is started.
    """
    log_level = os.getenv("SSHHOST_LOG_LEVEL", "INFO").upper()
    use_colors = os.getenv("SSHHOST_LOG_COLORS", "true").lower() != "false"

    if not sys.stderr.isatty():
        use_colors = False

    package_logger = logging.getLogger("sshhost_mcp")
    package_logger.setLevel(getattr(logging, log_level, logging.INFO))

    # Only add handler if not already configured
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(MCPRequestFormatter(use_colors=use_colors))
        package_logger.addHandler(handler)
        package_logger.propagate = False

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


_configure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """Log startup settings and drop stored results on shutdown."""
    config = get_config()
    store = get_store()
    logger.info(
        "SSH Host MCP server starting (ssh=%s, scp=%s, connect_timeout=%ds)",
        config.ssh_binary,
        config.scp_binary,
        config.connect_timeout,
    )
    logger.info("SSH Host MCP server ready to accept connections")

    try:
        yield {"store": store}
    finally:
        logger.info(
            "SSH Host MCP server shutting down (%d stored result(s))", len(store)
        )
        store.clear()


def configure_middleware(server: FastMCP) -> None:
    """Configure middleware stack for the server.

    Adds middleware in order: ErrorHandling -> Logging.

    Args:
        server: The FastMCP server to configure.
    """
    config = get_config()

    # First added = innermost
    server.add_middleware(
        ErrorHandlingMiddleware(include_traceback=config.include_traceback)
    )
    server.add_middleware(
        LoggingMiddleware(
            include_payloads=config.log_payloads,
            slow_threshold_ms=config.slow_threshold_ms,
        )
    )


def create_server() -> FastMCP:
    """Create and configure the MCP server with middleware, tools and resources.

    Returns:
        Configured FastMCP server instance
    """
    server = FastMCP("sshhost_mcp", lifespan=app_lifespan)

    configure_middleware(server)

    server.tool(name="exec")(exec_command)
    server.tool(name="upload")(upload_file)
    server.tool(name="waitForConnection")(wait_for_connection)

    server.resource(
        "result://{handle}",
        name="result",
        description="SSH operation result",
        mime_type="application/json",
    )(result_resource)
    server.resource(
        "results://list",
        name="results",
        description="Stored SSH operation results, newest first",
        mime_type="text/plain",
    )(list_results_resource)

    @server.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> PlainTextResponse:
        """Health check endpoint."""
        client_host = request.client.host if request.client else "unknown"
        logger.debug("Health check from %s", client_host)
        return PlainTextResponse("OK")

    return server


# Default server instance
mcp = create_server()
