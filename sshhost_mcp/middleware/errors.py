"""Error handling middleware for consistent error logging."""

import logging
import traceback
from collections import defaultdict
from typing import Any

from fastmcp.server.middleware import MiddlewareContext

from sshhost_mcp.middleware.base import SSHHostMiddleware
from sshhost_mcp.services.errors import CommandError


class ErrorHandlingMiddleware(SSHHostMiddleware):
    """Middleware that logs and counts failed requests, then re-raises.

    Example:
        >>> server.add_middleware(ErrorHandlingMiddleware(include_traceback=True))
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_traceback: bool = False,
    ) -> None:
        """Initialize error handling middleware.

        Args:
            logger: Optional custom logger.
            include_traceback: Whether to include full traceback in logs.
        """
        super().__init__(logger=logger)
        self.include_traceback = include_traceback
        self._error_counts: dict[str, int] = defaultdict(int)

    def get_error_stats(self) -> dict[str, int]:
        """Get error counts keyed by exception type name."""
        return dict(self._error_counts)

    def reset_stats(self) -> None:
        """Reset error statistics."""
        self._error_counts.clear()

    def _describe(self, error: Exception) -> str:
        # Remote stderr already sits in the message; the exit code is the useful extra
        if isinstance(error, CommandError):
            return f"{error} [exit_code={error.exit_code}]"
        return str(error)

    async def on_message(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Log and count errors raised while handling a request.

        Raises:
            Exception: Re-raises the original exception after logging.
        """
        try:
            return await call_next(context)

        except Exception as e:
            error_type = type(e).__name__
            method = context.method

            self._error_counts[error_type] += 1

            if self.include_traceback:
                self.logger.error(
                    "Error in %s: %s: %s\n%s",
                    method,
                    error_type,
                    self._describe(e),
                    traceback.format_exc(),
                )
            else:
                self.logger.error(
                    "Error in %s: %s: %s",
                    method,
                    error_type,
                    self._describe(e),
                )

            raise
