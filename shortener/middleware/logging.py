"""
Request logging middleware.

Every request gets one access line on the "url_shortener" logger:

    <request id> METHOD PATH STATUS TIMEms IP:client

The request id is taken from an incoming X-Request-ID header (so a proxy's
id can be followed through our logs) or generated when absent, and is
returned to the caller in X-Request-ID next to X-Process-Time.
"""

import logging
import re
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from shortener.core.logging_config import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)

REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"

# Incoming ids are echoed into logs and headers, so keep them short and inert
_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def get_client_ip(request: Request) -> str:
    """Client address, preferring the first X-Forwarded-For hop."""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def get_request_id(request: Request) -> str:
    """Reuse a well-formed incoming request id, otherwise mint a new one."""
    incoming = request.headers.get(REQUEST_ID_HEADER, "")
    if _REQUEST_ID_PATTERN.match(incoming):
        return incoming
    return uuid.uuid4().hex


class LoggingMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id and logs it once the response is ready."""

    async def dispatch(self, request: Request, call_next):
        request_id = get_request_id(request)
        request.state.request_id = request_id
        start_time = time.perf_counter()

        response = await call_next(request)

        elapsed = time.perf_counter() - start_time
        logger.info(
            f"{request_id} {request.method} {request.url.path} "
            f"{response.status_code} {elapsed * 1000:.2f}ms "
            f"IP:{get_client_ip(request)}"
        )

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[PROCESS_TIME_HEADER] = f"{elapsed:.6f}"
        return response


def add_logging_middleware(app):
    app.add_middleware(LoggingMiddleware)
