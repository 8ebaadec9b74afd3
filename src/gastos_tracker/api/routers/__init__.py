"""Routers FastAPI - Gastos Tracker."""

from gastos_tracker.api.routers import categories, expenses, payment_methods


__all__ = ["categories", "expenses", "payment_methods"]
