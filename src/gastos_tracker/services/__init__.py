"""Servicios de parsing y clasificación de gastos."""

from gastos_tracker.services.classification_orchestrator import (
    ClassificationOrchestrator,
    SubcategoryLookup,
)
from gastos_tracker.services.keyword_scorer import score_keywords
from gastos_tracker.services.local_classifier import LocalClassifier
from gastos_tracker.services.payment_method_matcher import (
    PaymentMethodMatcher,
    PaymentMethodSource,
    StaticPaymentMethodSource,
)
from gastos_tracker.services.synonym_catalog import SynonymCatalog, get_synonym_catalog


__all__ = [
    "ClassificationOrchestrator",
    "LocalClassifier",
    "PaymentMethodMatcher",
    "PaymentMethodSource",
    "StaticPaymentMethodSource",
    "SubcategoryLookup",
    "SynonymCatalog",
    "get_synonym_catalog",
    "score_keywords",
]
