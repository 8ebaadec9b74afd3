"""Formato de montos y textos para las respuestas al usuario."""

from decimal import Decimal

from gastos_tracker.core.constants import CURRENCY_SYMBOL


def format_currency(amount: Decimal | float | int) -> str:
    """
    Formatea un monto con separador de miles "." y decimal ",".

    Examples:
        >>> format_currency(Decimal("1234.5"))
        '$ 1.234,50'
        >>> format_currency(50)
        '$ 50,00'
    """
    formatted = f"{Decimal(str(amount)):,.2f}"
    formatted = formatted.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{CURRENCY_SYMBOL} {formatted}"


def capitalize_sentence(sentence: str) -> str:
    """
    Pone en mayúscula la primera letra y el resto en minúsculas.

    Examples:
        >>> capitalize_sentence("  ALMUERZO en Restaurante ")
        'Almuerzo en restaurante'
    """
    trimmed = sentence.strip().lower()
    if not trimmed:
        return sentence
    return trimmed[0].upper() + trimmed[1:]
