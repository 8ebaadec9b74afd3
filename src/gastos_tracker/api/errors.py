"""
Manejo centralizado de errores para FastAPI.

Define las excepciones de la API y los handlers que las convierten en un
`ErrorResponse` uniforme.
"""

from datetime import UTC, datetime
from typing import Any, cast

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.types import ExceptionHandler

from gastos_tracker.config.settings import settings
from gastos_tracker.core.logging import get_logger
from gastos_tracker.services.expense_message_service import AMOUNT_NOT_FOUND_MESSAGE


logger = get_logger(__name__)


# =============================================================================
# Excepciones
# =============================================================================


class AppException(Exception):
    """Excepción base de la API."""

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class NotFoundError(AppException):
    """Recurso no encontrado."""

    def __init__(
        self,
        resource: str,
        resource_id: str | None = None,
        code: str | None = None,
    ) -> None:
        message = f"{resource} no encontrada"
        if resource_id:
            message = f"{resource} con ID '{resource_id}' no encontrada"

        super().__init__(
            message=message,
            code=code or f"{resource.upper().replace(' ', '_')}_NOT_FOUND",
            status_code=status.HTTP_404_NOT_FOUND,
        )


class ValidationError(AppException):
    """Datos de entrada válidos en forma pero no procesables."""

    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=code,
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            details=details,
        )


class AmountNotFoundError(ValidationError):
    """El mensaje no tiene ningún monto positivo."""

    def __init__(self, mensaje: str) -> None:
        super().__init__(
            message=AMOUNT_NOT_FOUND_MESSAGE,
            code="AMOUNT_NOT_FOUND",
            details={"mensaje": mensaje},
        )


# =============================================================================
# Modelo de respuesta
# =============================================================================


class ErrorResponse(BaseModel):
    """Respuesta de error estandarizada."""

    error: str
    code: str
    details: dict[str, Any] = {}
    path: str | None = None
    timestamp: str | None = None


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    code: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error=error,
            code=code,
            details=details or {},
            path=request.url.path,
            timestamp=datetime.now(UTC).isoformat(),
        ).model_dump(),
    )


# =============================================================================
# Exception handlers
# =============================================================================


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handler para excepciones de la aplicación."""
    logger.warning(f"AppException: {exc.code} en {request.url.path}")
    return _error_response(request, exc.status_code, exc.message, exc.code, exc.details)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handler para HTTPException estándar (404 de rutas, 405, etc)."""
    return _error_response(request, exc.status_code, str(exc.detail), f"HTTP_{exc.status_code}")


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Handler para errores de validación del body."""
    formatted_errors = [
        {
            "field": ".".join(str(x) for x in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]

    logger.warning(f"Validation error en {request.url.path}: {len(formatted_errors)} errores")
    return _error_response(
        request,
        status.HTTP_422_UNPROCESSABLE_CONTENT,
        "Error de validación en los datos enviados",
        "VALIDATION_ERROR",
        {"errors": formatted_errors},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handler para excepciones no manejadas.

    En producción no expone detalles internos.
    """
    logger.opt(exception=exc).error(
        f"Unhandled exception en {request.url.path}: {type(exc).__name__}: {exc}"
    )

    details: dict[str, Any] = {}
    if not settings.is_production():
        details = {"type": type(exc).__name__, "message": str(exc)}

    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Error interno del servidor",
        "INTERNAL_ERROR",
        details,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Registra los exception handlers en la app."""
    # add_exception_handler espera Callable[[Request, Exception], ...]
    app.add_exception_handler(AppException, cast(ExceptionHandler, app_exception_handler))
    app.add_exception_handler(HTTPException, cast(ExceptionHandler, http_exception_handler))
    app.add_exception_handler(
        RequestValidationError, cast(ExceptionHandler, validation_exception_handler)
    )
    app.add_exception_handler(Exception, cast(ExceptionHandler, unhandled_exception_handler))
