"""Tests para el reconocimiento de medios de pago."""

from unittest.mock import MagicMock

import pytest

from gastos_tracker.schemas.expense import KeywordEntry
from gastos_tracker.services.payment_method_matcher import (
    DEFAULT_PAYMENT_METHODS,
    PaymentMethodMatcher,
    StaticPaymentMethodSource,
)


@pytest.fixture
def matcher() -> PaymentMethodMatcher:
    return PaymentMethodMatcher()


class TestPaymentMethodMatcher:
    """Tests para PaymentMethodMatcher.match."""

    @pytest.mark.parametrize(
        ("hint", "expected"),
        [
            (" Tarjeta de credito", "Tarjeta de crédito"),
            (" débito", "Tarjeta de débito"),
            (" Tarjeta", "Tarjeta de crédito"),
            (" mercado pago", "Mercado Pago"),
            (" transferencia", "Transferencia"),
            (" EFECTIVO", "Efectivo"),
            (" visa", "Tarjeta de crédito"),
        ],
    )
    def test_recognizes(self, matcher: PaymentMethodMatcher, hint: str, expected: str) -> None:
        assert matcher.match(hint) == expected

    @pytest.mark.parametrize("hint", [None, "", "   ", " de la", " xyzxyz"])
    def test_default_when_no_match(self, matcher: PaymentMethodMatcher, hint: str | None) -> None:
        assert matcher.match(hint) == "Efectivo"

    def test_custom_default(self) -> None:
        matcher = PaymentMethodMatcher(default="Billetera")
        assert matcher.match(None) == "Billetera"

    def test_failing_source_falls_back(self) -> None:
        """Si la fuente falla se usa el medio por defecto."""
        source = MagicMock()
        source.get_active_payment_methods.side_effect = RuntimeError("BD caída")

        matcher = PaymentMethodMatcher(source=source)

        assert matcher.match(" tarjeta") == "Efectivo"
        source.get_active_payment_methods.assert_called_once()

    def test_source_not_queried_without_hint(self) -> None:
        source = MagicMock()
        PaymentMethodMatcher(source=source).match(None)
        source.get_active_payment_methods.assert_not_called()

    def test_custom_source(self) -> None:
        source = StaticPaymentMethodSource((KeywordEntry("Cheque", ("cheque",)),))
        matcher = PaymentMethodMatcher(source=source)

        assert matcher.match(" cheque") == "Cheque"
        assert matcher.match(" tarjeta") == "Efectivo"


def test_static_source_returns_default_catalog() -> None:
    methods = StaticPaymentMethodSource().get_active_payment_methods()
    assert [m.name for m in methods] == [m.name for m in DEFAULT_PAYMENT_METHODS]
    assert methods[0].name == "Efectivo"
