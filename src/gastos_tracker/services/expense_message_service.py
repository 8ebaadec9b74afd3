"""Servicio que procesa un mensaje de gasto de punta a punta."""

from gastos_tracker.config.settings import settings
from gastos_tracker.core.logging import get_logger
from gastos_tracker.models.enums import ClassificationTier
from gastos_tracker.parsers.expense_message_parser import ExpenseMessageParser
from gastos_tracker.schemas.expense import ProcessedExpense
from gastos_tracker.services.classification_orchestrator import (
    ClassificationOrchestrator,
    SubcategoryLookup,
)
from gastos_tracker.services.payment_method_matcher import (
    PaymentMethodMatcher,
    PaymentMethodSource,
)
from gastos_tracker.utils.formatting import capitalize_sentence, format_currency


logger = get_logger(__name__)


AMOUNT_NOT_FOUND_MESSAGE = (
    "❌ No pude detectar el monto.\n\nEjemplo: `50 almuerzo en restaurante`"
)


class ExpenseMessageService:
    """
    Parsea y clasifica mensajes de gastos.

    Servicio sin estado: cada mensaje se procesa de forma independiente,
    así que una misma instancia puede atender varios mensajes a la vez.
    """

    def __init__(
        self,
        parser: ExpenseMessageParser | None = None,
        orchestrator: ClassificationOrchestrator | None = None,
    ) -> None:
        self.parser = parser or ExpenseMessageParser()
        self.orchestrator = orchestrator or ClassificationOrchestrator()

    @classmethod
    def from_sources(
        cls,
        subcategory_lookup: SubcategoryLookup | None = None,
        payment_source: PaymentMethodSource | None = None,
    ) -> "ExpenseMessageService":
        """
        Arma el servicio con las fuentes externas dadas.

        Args:
            subcategory_lookup: Búsqueda remota de keywords (se ignora si
                `remote_fallback_enabled` está apagado)
            payment_source: Catálogo de medios de pago (por defecto el estático)
        """
        remote = subcategory_lookup if settings.remote_fallback_enabled else None
        return cls(
            parser=ExpenseMessageParser(PaymentMethodMatcher(payment_source)),
            orchestrator=ClassificationOrchestrator(remote=remote),
        )

    def process(self, message: str | None) -> ProcessedExpense:
        """
        Procesa un mensaje de gasto.

        Si no hay monto no se clasifica: el mensaje se rechaza antes.

        Args:
            message: Texto del usuario

        Returns:
            ProcessedExpense con classification=None si no hubo monto
        """
        parsed = self.parser.parse(message)

        if parsed.amount is None:
            logger.info(f"Mensaje sin monto: '{message}'")
            return ProcessedExpense(parsed=parsed, classification=None)

        classification = self.orchestrator.classify(parsed.description)
        return ProcessedExpense(parsed=parsed, classification=classification)

    @staticmethod
    def build_reply(result: ProcessedExpense) -> str:
        """
        Texto de respuesta para el usuario.

        Args:
            result: Resultado de `process`

        Returns:
            Confirmación del gasto, o el pedido de monto si no se detectó
        """
        if not result.has_amount or result.classification is None:
            return AMOUNT_NOT_FOUND_MESSAGE

        parsed = result.parsed
        classification = result.classification
        origin = (
            "detectada automáticamente"
            if classification.tier != ClassificationTier.DEFAULT
            else "sin clasificar"
        )

        return "\n".join(
            [
                "✅ *Gasto registrado*",
                "",
                f"📂 Categoría: {classification.subcategory_name} ({origin})",
                f"💰 Monto: {format_currency(parsed.amount)}",
                f"📝 Descripción: {capitalize_sentence(parsed.description)}",
                f"💳 Medio de pago: {parsed.payment_method_name}",
            ]
        )
