"""Modelos de base de datos - Gastos Tracker."""

from gastos_tracker.models.category import Category, Subcategory
from gastos_tracker.models.enums import ClassificationTier, PaymentMethodType
from gastos_tracker.models.payment_method import PaymentMethod


__all__ = [
    # Models
    "Category",
    "PaymentMethod",
    "Subcategory",
    # Enums
    "ClassificationTier",
    "PaymentMethodType",
]
