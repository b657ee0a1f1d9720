"""Access logging middleware."""

import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request: method, path, status, duration, client."""

    def __init__(self, app, logger: logging.Logger = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger("url_shortener.web")

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        self.logger.info(
            f"{request.method} {request.url.path} {response.status_code} "
            f"{duration_ms:.2f}ms - {client_ip}"
        )

        return response
