"""
Noteful API — Access Log Middleware
====================================

One line per request on the `noteful.access` logger:

    POST /notes 201 3.2ms [1f3a9c0d] from 127.0.0.1

Level follows the status class (5xx ERROR, 4xx WARNING, else INFO). Paths in
`skip_paths` (the health probe by default) are not logged. Bodies are never
logged; note content is user data.
"""

import logging
import time
from typing import Iterable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from noteful_api.middleware.request_id import request_id_var

logger = logging.getLogger("noteful.access")

DEFAULT_SKIP_PATHS = ("/health",)


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    def __init__(self, app: ASGIApp, skip_paths: Iterable[str] = DEFAULT_SKIP_PATHS):
        super().__init__(app)
        self.skip_paths = frozenset(skip_paths)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.skip_paths:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        client = request.client.host if request.client else "-"
        logger.log(
            level_for_status(response.status_code),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            request_id_var.get(),
            client,
        )
        return response
