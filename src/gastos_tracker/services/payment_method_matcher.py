"""Reconocimiento del medio de pago indicado al final de un mensaje."""

from typing import Protocol

from gastos_tracker.config.settings import settings
from gastos_tracker.core.constants import MIN_SCORE
from gastos_tracker.core.logging import get_logger
from gastos_tracker.schemas.expense import KeywordEntry
from gastos_tracker.services.keyword_scorer import best_match
from gastos_tracker.utils.text import extract_words


logger = get_logger(__name__)


# Ordenado por nombre, igual que el catálogo de la BD: ante empate gana el primero
DEFAULT_PAYMENT_METHODS: tuple[KeywordEntry, ...] = (
    KeywordEntry("Efectivo", ("efectivo", "cash", "billete", "contado")),
    KeywordEntry("Mercado Pago", ("mercadopago", "mercado pago", "billetera")),
    KeywordEntry(
        "Tarjeta de crédito",
        ("credito", "tarjeta credito", "visa", "mastercard", "amex", "cuotas"),
    ),
    KeywordEntry("Tarjeta de débito", ("debito", "tarjeta", "tarjeta debito", "maestro")),
    KeywordEntry("Transferencia", ("transferencia", "transfer", "cbu", "alias")),
)


class PaymentMethodSource(Protocol):
    """Fuente del catálogo de medios de pago activos."""

    def get_active_payment_methods(self) -> list[KeywordEntry]: ...


class StaticPaymentMethodSource:
    """Catálogo de medios de pago incluido con la aplicación."""

    def __init__(self, methods: tuple[KeywordEntry, ...] = DEFAULT_PAYMENT_METHODS) -> None:
        self.methods = methods

    def get_active_payment_methods(self) -> list[KeywordEntry]:
        return list(self.methods)


class PaymentMethodMatcher:
    """
    Reconoce el medio de pago a partir de la pista del usuario.

    Usa el mismo scoring y umbral que el clasificador de subcategorías.
    Sin pista, sin match o si la fuente falla, devuelve el medio por defecto.
    """

    def __init__(
        self,
        source: PaymentMethodSource | None = None,
        default: str | None = None,
    ) -> None:
        self.source = source if source is not None else StaticPaymentMethodSource()
        self.default = default or settings.default_payment_method

    def match(self, hint: str | None) -> str:
        """
        Nombre del medio de pago para una pista de texto libre.

        Args:
            hint: Texto después del separador, o None si el mensaje no lo tiene

        Returns:
            Nombre del medio de pago reconocido o el medio por defecto

        Examples:
            >>> PaymentMethodMatcher().match(" Tarjeta de credito")
            'Tarjeta de crédito'
            >>> PaymentMethodMatcher().match(None)
            'Efectivo'
        """
        words = extract_words(hint)
        if not words:
            return self.default

        try:
            methods = self.source.get_active_payment_methods()
        except Exception as e:
            logger.warning(f"No se pudo obtener el catálogo de medios de pago: {e}")
            return self.default

        name, score = best_match(words, ((m.name, m.keywords) for m in methods))
        if name is None or score < MIN_SCORE:
            logger.debug(f"Medio de pago no reconocido en '{hint}', se usa {self.default}")
            return self.default

        logger.debug(f"Medio de pago: '{hint}' → {name} ({score})")
        return name
