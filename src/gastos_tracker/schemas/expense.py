"""Resultados del pipeline de parsing y clasificación de mensajes."""

from dataclasses import dataclass
from decimal import Decimal

from gastos_tracker.models.enums import ClassificationTier


@dataclass(frozen=True)
class ParsedExpense:
    """
    Mensaje de gasto segmentado.

    `amount` es None solo si el mensaje no tiene ningún número positivo
    antes del separador de medio de pago. `description` nunca está vacía.
    """

    amount: Decimal | None
    description: str
    payment_method_name: str


@dataclass(frozen=True)
class KeywordEntry:
    """Un nombre (subcategoría o medio de pago) con sus keywords."""

    name: str
    keywords: tuple[str, ...]


@dataclass(frozen=True)
class SubcategoryMatch:
    """Subcategoría encontrada por la búsqueda remota de keywords."""

    id: str
    name: str


@dataclass(frozen=True)
class ClassificationResult:
    """
    Resultado etiquetado de la clasificación.

    - LOCAL: `score` es el puntaje del catálogo de sinónimos
    - REMOTE_FALLBACK: trae `subcategory_id`, `score` es 0
    - DEFAULT: `subcategory_name` es la subcategoría por defecto
    """

    subcategory_name: str | None
    score: int
    tier: ClassificationTier
    subcategory_id: str | None = None


@dataclass(frozen=True)
class ProcessedExpense:
    """Mensaje parseado junto con su clasificación (None si no hubo monto)."""

    parsed: ParsedExpense
    classification: ClassificationResult | None

    @property
    def has_amount(self) -> bool:
        """True si se detectó un monto."""
        return self.parsed.amount is not None
