"""Schemas Pydantic para la API."""

from gastos_tracker.api.schemas.category import (
    CategoryListResponse,
    CategoryResponse,
    PaymentMethodListResponse,
    PaymentMethodResponse,
    SubcategoryResponse,
)
from gastos_tracker.api.schemas.expense import ExpenseParseRequest, ExpenseParseResponse


__all__ = [
    "CategoryListResponse",
    "CategoryResponse",
    "ExpenseParseRequest",
    "ExpenseParseResponse",
    "PaymentMethodListResponse",
    "PaymentMethodResponse",
    "SubcategoryResponse",
]
