"""Correlation ids for HTTP inflection calls."""
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from declension.core.logging import api_logger, bind_context, clear_context, new_correlation_id

CORRELATION_HEADER = "X-Correlation-ID"

log = api_logger()


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Tags every event of a request with one correlation id and echoes it back.

    The id comes from the client's header when present so a host page can
    match its own logs against ours.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or new_correlation_id()
        clear_context()
        bind_context(correlation_id=correlation_id)
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            log.exception("request_crashed", route=request.url.path)
            clear_context()
            raise

        response.headers[CORRELATION_HEADER] = correlation_id
        emit = log.info if response.status_code < 400 else log.warning
        emit(
            "request_served",
            route=request.url.path,
            status=response.status_code,
            elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        clear_context()
        return response
