"""
BirdAPI: Access Middleware
===========================

What:  Tags each request with an ID and writes one access log line for it.
How:   The client's X-Request-ID header is reused when present, otherwise a
       short UUID is generated. The ID is kept in a ContextVar so exception
       handlers can put it in error bodies, and it is echoed on the response.
       The log line names the store variant that served the request, so
       memory and SQL deployments can be told apart in shared logs.

Log level follows the status class:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Request bodies are never logged.
"""

import logging
import time
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("birdapi.access")

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Assigns a request ID and logs method, path, status and store per request."""

    # Polled by container health checks; too noisy to log
    SKIPPED_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        # 8 chars is enough for correlation and stays readable in logs
        rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())[:8]
        request_id_var.set(rid)

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid

        path = request.url.path
        if path in self.SKIPPED_PATHS:
            return response

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        store = request.app.state.store.name
        client_ip = request.client.host if request.client else "unknown"

        logger.log(
            log_level,
            "%s %s %d %.1fms store=%s [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            store,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "store": store,
                "client_ip": client_ip,
            },
        )

        return response
