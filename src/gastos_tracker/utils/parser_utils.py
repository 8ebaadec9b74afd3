"""Utilidades compartidas para parsear mensajes de gastos."""

from decimal import Decimal, InvalidOperation
import re
import sys


# Prefijo numérico más largo: "12", "12.", "12.5", ".5"
_NUMBER_PREFIX_RE = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")

# Un monto mayor al máximo float no es finito y se descarta
MAX_AMOUNT = Decimal(sys.float_info.max)


class ParserUtils:
    """Métodos de utilidad para extraer datos de mensajes de texto libre."""

    @staticmethod
    def parse_amount_token(token: str) -> Decimal | None:
        """
        Interpreta una palabra del mensaje como monto.

        Descarta todo lo que no sea dígito, punto o coma, toma la primera
        coma como separador decimal y lee el prefijo numérico más largo.

        Args:
            token: Palabra del mensaje, ej: "$25,50" o "uber"

        Returns:
            Decimal con el valor, o None si la palabra no tiene número
            o el número excede MAX_AMOUNT

        Examples:
            >>> ParserUtils.parse_amount_token("25,50")
            Decimal('25.50')
            >>> ParserUtils.parse_amount_token("$1500")
            Decimal('1500')
            >>> ParserUtils.parse_amount_token("1,234,5")
            Decimal('1.234')
            >>> ParserUtils.parse_amount_token("uber") is None
            True
            >>> ParserUtils.parse_amount_token("9" * 400) is None
            True
        """
        cleaned = re.sub(r"[^0-9.,]", "", token).replace(",", ".", 1)

        match = _NUMBER_PREFIX_RE.match(cleaned)
        if not match:
            return None

        try:
            value = Decimal(match.group())
        except InvalidOperation:
            return None

        if not value.is_finite() or value > MAX_AMOUNT:
            return None
        return value
