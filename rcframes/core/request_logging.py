"""Request logging middleware for observability.

Logs method, path, status and duration only. Headers and query strings are
never logged because they carry the caller's RevenueCat token and project.
"""

import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log HTTP requests and responses."""

    def __init__(
        self,
        app,
        exclude_paths: list[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.exclude_paths = exclude_paths or []

    async def dispatch(self, request: Request, call_next) -> Response:
        """Log request and response details."""
        if request.url.path in self.exclude_paths:
            return await call_next(request)

        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id

        start_time = time.time()
        logger.info(
            f"[{request_id}] {request.method} {request.url.path} "
            f"ua={request.headers.get('user-agent', 'unknown')[:50]}",
            extra={"request_id": request_id},
        )

        try:
            response = await call_next(request)
            duration_ms = (time.time() - start_time) * 1000

            logger.info(
                f"[{request_id}] {response.status_code} "
                f"duration={duration_ms:.1f}ms",
                extra={"request_id": request_id},
            )

            response.headers["X-Request-ID"] = request_id

            return response

        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(
                f"[{request_id}] ERROR {type(e).__name__}: {str(e)[:100]} "
                f"duration={duration_ms:.1f}ms",
                extra={"request_id": request_id},
            )
            raise
