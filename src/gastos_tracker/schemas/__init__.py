"""Estructuras de datos internas del pipeline."""

from gastos_tracker.schemas.expense import (
    ClassificationResult,
    KeywordEntry,
    ParsedExpense,
    ProcessedExpense,
    SubcategoryMatch,
)


__all__ = [
    "ClassificationResult",
    "KeywordEntry",
    "ParsedExpense",
    "ProcessedExpense",
    "SubcategoryMatch",
]
