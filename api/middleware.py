"""
Per-request id, latency header and access log
"""

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"
LATENCY_HEADER = "X-API-Latency-ms"

logger = logging.getLogger("api.access")


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Tags each request with an id (the caller's X-Request-ID when sent)
    available to handlers as `request.state.request_id`, echoes it back
    with the handling latency and writes one access log line.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
        request.state.request_id = request_id
        started = time.perf_counter()

        response = await call_next(request)

        latency_ms = int((time.perf_counter() - started) * 1000)
        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[LATENCY_HEADER] = str(latency_ms)

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            f"[{request_id}] {request.method} {request.url.path} -> {response.status_code} ({latency_ms}ms)"
        )
        return response
