"""
Item Service — Request Logging Middleware
===========================================

What:  One access log line per HTTP request.
How:   Times the downstream call and logs method, path, status, duration,
       request ID and client IP, at a level chosen by status class.
Who:   Applied to every request via Starlette middleware, inside
       RequestIDMiddleware so the request ID is already set.

What we log vs what we DON'T log:
    ✅ Log: method, path, status, duration, IP, request ID
    ❌ Don't log: request bodies
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from itemservice.middleware.request_id import request_id_var

logger = logging.getLogger("itemservice.access")

# Probed every few seconds by orchestrators; not worth a log line each
SKIPPED_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs structured information about each HTTP request and response.

    Levels:
        5xx → ERROR
        4xx → WARNING
        2xx/3xx → INFO
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
