"""
CashCard Service — Request Logging Middleware
===============================================

What:  One access log line per HTTP request.
How:   Measures the time spent in the rest of the chain and logs method,
       path, status, duration, request ID and client address on the
       `cashcard.access` logger.

Log levels by status:
    5xx → ERROR, 4xx → WARNING, everything else → INFO.
    A 404 on GET /cashcards/{id} is routine for clients probing ids, but it
    is still a client error and logged as one.

Not logged: request bodies and query strings (amounts are customer data).

Exceptions that escape the app become an empty 500 here, inside the
request ID middleware, so they are logged with a traceback, get an access
line and still carry X-Request-ID.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from cashcard.middleware.request_id import request_id_var

logger = logging.getLogger("cashcard.access")
error_logger = logging.getLogger(__name__)

# Probed every few seconds by load balancers; not worth a log line each
SKIPPED_PATHS = {"/health"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and duration of each request, and turns
    unhandled exceptions into an empty 500."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")

        try:
            response = await call_next(request)
        except Exception:
            # The app-level Exception handler sits outside RequestIDMiddleware
            error_logger.exception("Unhandled error on %s %s", request.method, path)
            response = Response(status_code=HTTP_500_INTERNAL_SERVER_ERROR)

        if path in SKIPPED_PATHS:
            return response

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
            "%s %s %d %.1fms from %s",
            request.method,
            path,
            status,
            duration_ms,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
