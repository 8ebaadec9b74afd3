"""Middlewares de la API: correlation ID y logging de requests."""

from collections.abc import Awaitable, Callable
import time
import uuid

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from gastos_tracker.core.logging import get_logger


logger = get_logger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

CallNext = Callable[[Request], Awaitable[Response]]


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """
    Propaga el header X-Correlation-ID o genera uno nuevo.

    El ID queda en el contexto de loguru durante el request y se devuelve
    en la respuesta.
    """

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex[:8]

        with logger.contextualize(correlation_id=correlation_id):
            response = await call_next(request)

        response.headers[CORRELATION_HEADER] = correlation_id
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Loggea método, path, status y duración de cada request."""

    EXCLUDE_PATHS = {"/", "/health", "/docs", "/openapi.json"}

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        if request.url.path in self.EXCLUDE_PATHS:
            return await call_next(request)

        method = request.method
        path = request.url.path
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(f"{method} {path} - ERROR ({duration_ms:.2f}ms): {e!s}")
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        log = logger.info if response.status_code < 400 else logger.warning
        log(f"{method} {path} - {response.status_code} ({duration_ms:.2f}ms)")
        return response


def setup_middlewares(app: FastAPI) -> None:
    """
    Registra los middlewares.

    Starlette ejecuta primero el último agregado, así que CorrelationId va
    al final para que el logging ya tenga el ID.
    """
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationIdMiddleware)
