"""
Logging de la aplicación con Loguru.

Se configura al importar el módulo:

- Consola: formato legible con colores en development, una línea JSON por
  evento en el resto de los entornos.
- Archivos rotados en `LOGS_DIRECTORY`: log general, solo errores y el
  log de clasificaciones (un registro por descripción clasificada).

Las clasificaciones viajan como campos extra (`tier`, `subcategory`,
`score`), así que el sink JSON y el archivo de clasificaciones los
escriben como columnas propias y no solo dentro del mensaje.
"""

import json
from pathlib import Path
import sys
from typing import TYPE_CHECKING, Any

from loguru import logger


if TYPE_CHECKING:
    from loguru import Logger, Record

from gastos_tracker.config.settings import settings


SERVICE_NAME = "gastos-tracker"

# Marca en `extra` que identifica un registro de clasificación
CLASSIFICATION_MARKER = "classification"

CLASSIFICATION_FIELDS = ("tier", "subcategory", "score")

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

_FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level: <8} | "
    "{process} | "
    "{name}:{function}:{line} | "
    "{message}"
)

_CLASSIFICATION_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{extra[tier]: <15} | "
    "{extra[subcategory]} | "
    "{extra[score]} | "
    "{extra[description]}"
)


def json_serializer(record: "Record | dict[str, Any]") -> str:
    """
    Convierte un record en una línea JSON.

    El `correlation_id` del request sale como `trace_id`. Los campos de
    clasificación quedan agrupados bajo `classification`.
    """
    payload: dict[str, Any] = {
        "ts": record["time"].strftime("%Y-%m-%dT%H:%M:%S.%fZ"),
        "level": record["level"].name,
        "service": SERVICE_NAME,
        "msg": record["message"],
        "module": record["name"],
        "function": record["function"],
        "line": record["line"],
    }

    extra = dict(record.get("extra") or {})
    if "correlation_id" in extra:
        extra["trace_id"] = extra.pop("correlation_id")
    if extra.pop(CLASSIFICATION_MARKER, False):
        payload[CLASSIFICATION_MARKER] = {
            field: extra.pop(field, None) for field in (*CLASSIFICATION_FIELDS, "description")
        }
    payload.update(extra)

    exception = record["exception"]
    if exception:
        payload["error"] = {
            "type": exception.type.__name__ if exception.type else None,
            "message": str(exception.value) if exception.value else None,
        }

    return json.dumps(payload, default=str)


def json_sink(message: Any) -> None:
    """Escribe el record serializado en stdout."""
    print(json_serializer(message.record), flush=True)  # noqa: T201


def _is_classification(record: "Record") -> bool:
    return bool(record["extra"].get(CLASSIFICATION_MARKER))


def _add_rotating_file(filename: str, **options: Any) -> None:
    logger.add(
        Path(settings.logs_directory) / filename,
        rotation=settings.log_rotation,
        compression="zip",
        encoding="utf-8",
        **options,
    )


def setup_logging() -> None:
    """Reemplaza los handlers de loguru por los sinks de la aplicación."""
    logger.remove()
    Path(settings.logs_directory).mkdir(parents=True, exist_ok=True)

    if settings.is_development():
        logger.add(
            sys.stdout,
            format=_CONSOLE_FORMAT,
            level=settings.log_level,
            colorize=True,
            backtrace=True,
            diagnose=True,
        )
    else:
        logger.add(json_sink, level=settings.log_level, backtrace=False, diagnose=False)

    _add_rotating_file(
        "gastos_tracker_{time:YYYY-MM-DD}.log",
        format=_FILE_FORMAT,
        level=settings.log_level,
        retention=settings.log_retention,
        backtrace=True,
        diagnose=True,
    )
    _add_rotating_file(
        "errors_{time:YYYY-MM-DD}.log",
        format=_FILE_FORMAT + "\n{exception}",
        level="ERROR",
        retention=settings.log_retention,
        backtrace=True,
        diagnose=True,
    )
    # Auditoría de aciertos y fallbacks, se conserva más tiempo
    _add_rotating_file(
        "classifications_{time:YYYY-MM-DD}.log",
        format=_CLASSIFICATION_FORMAT,
        level="INFO",
        retention="6 months",
        filter=_is_classification,
    )

    logger.info(
        f"Sistema de logging configurado - Nivel: {settings.log_level} - "
        f"Entorno: {settings.environment}"
    )


def get_logger(name: str) -> "Logger":
    """
    Logger de loguru con el nombre del módulo en `extra["name"]`.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Mensaje de log")
    """
    return logger.bind(name=name)


def log_classification(
    description: str,
    subcategory: str | None,
    tier: str,
    score: int,
) -> None:
    """
    Registra una clasificación en el log de clasificaciones.

    Args:
        description: Descripción del gasto tal como la escribió el usuario
        subcategory: Subcategoría asignada
        tier: Nivel que resolvió la clasificación (local, remote_fallback, default)
        score: Puntaje obtenido (0 para niveles sin puntaje)

    Example:
        >>> log_classification("almuerzo restaurante", "Restaurantes", "local", 20)
    """
    logger.bind(
        **{CLASSIFICATION_MARKER: True},
        tier=tier,
        subcategory=subcategory,
        score=score,
        description=description,
    ).info(f"[{tier.upper()}] {subcategory} ({score}) - {description}")


setup_logging()

__all__ = ["logger", "get_logger", "json_serializer", "log_classification", "setup_logging"]
