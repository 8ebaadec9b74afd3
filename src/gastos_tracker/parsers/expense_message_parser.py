"""Parser de mensajes de gastos escritos en lenguaje natural."""

from decimal import Decimal

from gastos_tracker.core.constants import DEFAULT_DESCRIPTION, PAYMENT_SEPARATOR
from gastos_tracker.core.logging import get_logger
from gastos_tracker.schemas.expense import ParsedExpense
from gastos_tracker.services.payment_method_matcher import PaymentMethodMatcher
from gastos_tracker.utils.parser_utils import ParserUtils


logger = get_logger(__name__)


class ExpenseMessageParser:
    """
    Separa un mensaje en monto, descripción y medio de pago.

    Formatos aceptados:
    - "50 almuerzo en restaurante"
    - "25,50 uber a casa. Tarjeta"
    - "15 farmacia. Efectivo"

    Lo que sigue al primer punto es la pista de medio de pago, por eso
    los decimales se escriben con coma.
    """

    def __init__(self, payment_matcher: PaymentMethodMatcher | None = None) -> None:
        self.payment_matcher = payment_matcher or PaymentMethodMatcher()

    def parse(self, message: str | None) -> ParsedExpense:
        """
        Parsea un mensaje de gasto.

        El primer número positivo es el monto; las palabras anteriores se
        descartan y todas las posteriores forman la descripción.

        Args:
            message: Texto tal cual lo escribió el usuario

        Returns:
            ParsedExpense con amount=None si no se encontró monto

        Examples:
            >>> ExpenseMessageParser().parse("50 almuerzo")
            ParsedExpense(amount=Decimal('50'), description='almuerzo', payment_method_name='Efectivo')
        """
        if not message or not isinstance(message, str):
            return ParsedExpense(
                amount=None,
                description=DEFAULT_DESCRIPTION,
                payment_method_name=self.payment_matcher.match(None),
            )

        main_part, separator, rest = message.partition(PAYMENT_SEPARATOR)
        payment_part = rest if separator else None

        amount: Decimal | None = None
        description: list[str] = []

        for token in main_part.split():
            if amount is not None:
                description.append(token)
                continue

            value = ParserUtils.parse_amount_token(token)
            if value is not None and value > 0:
                amount = value

        payment_method = self.payment_matcher.match(payment_part)

        parsed = ParsedExpense(
            amount=amount,
            description=" ".join(description) or DEFAULT_DESCRIPTION,
            payment_method_name=payment_method,
        )
        logger.debug(f"Mensaje parseado: {parsed}")
        return parsed
