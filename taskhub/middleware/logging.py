"""
Request logging middleware for FastAPI using Loguru.

Every request gets an ``X-Request-ID`` and one log record at the custom
``REQUEST`` level once the response is ready.
"""

import time
import uuid
from contextvars import ContextVar

from fastapi import Request, Response
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from taskhub.core.logging import REQUEST_LEVEL

# Context variable to store request ID across async context
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def client_ip_from(request: Request) -> str:
    """Client IP, preferring the first ``X-Forwarded-For`` hop."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
    return request.client.host if request.client else "unknown"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency of every request."""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        token = request_id_var.set(request_id)
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers["X-Request-ID"] = request_id
        process_time_ms = round((time.perf_counter() - start_time) * 1000, 2)

        logger.log(
            REQUEST_LEVEL,
            "{method} {path} {status_code} {process_time_ms}ms {client_ip} {request_id}",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            process_time_ms=process_time_ms,
            client_ip=client_ip_from(request),
            request_id=request_id,
        )
        return response


def add_logging_middleware(app) -> None:
    """Add the request logging middleware to the FastAPI application."""
    app.add_middleware(RequestLoggingMiddleware)
