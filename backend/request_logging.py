"""
API request logging middleware.

Logs one line per /api request with method, path, status and duration:

    POST /api/workouts/generate 200 in 812ms
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

MAX_LOG_LINE_LENGTH = 80


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs API calls matching a path prefix."""

    def __init__(self, app: ASGIApp, path_prefix: str = "/api") -> None:
        super().__init__(app)
        self.path_prefix = path_prefix

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        if not path.startswith(self.path_prefix):
            return await call_next(request)

        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = int((time.perf_counter() - start) * 1000)

        line = f"{request.method} {path} {response.status_code} in {elapsed_ms}ms"
        if len(line) > MAX_LOG_LINE_LENGTH:
            line = line[: MAX_LOG_LINE_LENGTH - 1] + "…"
        logger.info(line)
        return response
