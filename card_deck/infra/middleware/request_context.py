"""
Request context middleware for structured logging.
"""

from __future__ import annotations

import time
from typing import Callable
from uuid import uuid4

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from card_deck.infra.config.logging_config import bind_context, clear_context, get_logger

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds request_id, path and method into the structlog context.

    Every request logs ``request.start`` and ``request.end`` with its
    duration; server errors end at warning level. The request id is taken
    from the incoming X-Request-ID header when present and echoed back.
    """

    async def dispatch(self, request: Request, call_next: Callable[[Request], Response]) -> Response:  # type: ignore[override]
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        bind_context(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        )
        log = get_logger("http")
        log.info(
            "request.start",
            client_ip=request.client.host if request.client else None,
        )

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:  # pragma: no cover
            log.exception("request.error", error=str(exc))
            raise
        else:
            duration_ms = round((time.perf_counter() - started) * 1000, 2)
            response.headers[REQUEST_ID_HEADER] = request_id
            emit = log.warning if response.status_code >= 500 else log.info
            emit(
                "request.end",
                status_code=response.status_code,
                duration_ms=duration_ms,
            )
            return response
        finally:
            clear_context()
