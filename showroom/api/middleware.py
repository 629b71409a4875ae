"""Request context middleware.

Every request gets an ID (taken from ``X-Request-ID`` or generated) that is
stored on ``request.state``, bound into structlog's context for the
duration of the request, and echoed back on the response.

Unhandled exceptions are not caught here. They propagate to the
application's exception handler, which renders the 500 body.
"""

import time
from typing import Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind request ID, method and path to every log line of a request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.warning(
                "Request aborted by unhandled exception",
                duration_ms=_elapsed_ms(started),
            )
            raise

        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            "Request completed",
            status_code=response.status_code,
            duration_ms=_elapsed_ms(started),
        )
        structlog.contextvars.unbind_contextvars("request_id", "method", "path")
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def setup_middleware(app: FastAPI) -> None:
    """Install request context middleware on the application."""
    app.add_middleware(RequestContextMiddleware)
