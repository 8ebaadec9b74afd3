"""Módulo core con funcionalidades fundamentales del proyecto."""

from gastos_tracker.core.constants import (
    DEFAULT_DESCRIPTION,
    FUZZY_SIMILARITY_THRESHOLD,
    MIN_SCORE,
    SCORE_EXACT,
    SCORE_FUZZY,
    SCORE_SUBSTRING,
)
from gastos_tracker.core.database import Base, get_session
from gastos_tracker.core.logging import get_logger


__all__ = [
    # Constants
    "DEFAULT_DESCRIPTION",
    "FUZZY_SIMILARITY_THRESHOLD",
    "MIN_SCORE",
    "SCORE_EXACT",
    "SCORE_FUZZY",
    "SCORE_SUBSTRING",
    # Database
    "Base",
    "get_session",
    # Logging
    "get_logger",
]
