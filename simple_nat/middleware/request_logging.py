"""
Request logging middleware.

Each request gets a trace id, either the caller's X-Trace-ID header (so a
batch client can correlate its own logs) or a fresh uuid4. The id is stored on
request.state for the exception handler and echoed back in the response.
"""
import logging
import time
import uuid
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

TRACE_HEADER = "X-Trace-ID"
MAX_TRACE_ID_LENGTH = 64


def resolve_trace_id(request: Request) -> str:
    """Reuse a short printable inbound trace id, otherwise mint one."""
    supplied = request.headers.get(TRACE_HEADER, "").strip()
    if supplied and len(supplied) <= MAX_TRACE_ID_LENGTH and supplied.isprintable():
        return supplied
    return str(uuid.uuid4())


def level_for_status(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and latency for every request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        trace_id = resolve_trace_id(request)
        request.state.trace_id = trace_id
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.exception(
                f"[{trace_id}] {request.method} {request.url.path} failed after {elapsed_ms:.1f}ms"
            )
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.log(
            level_for_status(response.status_code),
            f"[{trace_id}] {request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
        )
        response.headers[TRACE_HEADER] = trace_id
        return response
