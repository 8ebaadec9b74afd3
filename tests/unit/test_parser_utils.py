"""Tests para ParserUtils."""

from decimal import Decimal

import pytest

from gastos_tracker.utils.parser_utils import ParserUtils


class TestParseAmountToken:
    """Tests para parse_amount_token."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("50", Decimal("50")),
            ("25,50", Decimal("25.50")),
            ("$1500", Decimal("1500")),
            ("12abc", Decimal("12")),
            ("1,234,5", Decimal("1.234")),
            ("-5", Decimal("5")),
            ("1.", Decimal("1")),
            (",5", Decimal("0.5")),
            ("0", Decimal("0")),
        ],
    )
    def test_parses_leading_number(self, token: str, expected: Decimal) -> None:
        assert ParserUtils.parse_amount_token(token) == expected

    @pytest.mark.parametrize("token", ["uber", "", ".", ",", "$", "a.b"])
    def test_no_number(self, token: str) -> None:
        assert ParserUtils.parse_amount_token(token) is None

    def test_overflowing_number_is_rejected(self) -> None:
        """Un número mayor que el máximo float no es un monto finito."""
        assert ParserUtils.parse_amount_token("9" * 400) is None
        assert ParserUtils.parse_amount_token("2" + "0" * 308) is None

    def test_large_number_within_range(self) -> None:
        assert ParserUtils.parse_amount_token("1" + "0" * 20) == Decimal("1e20")
