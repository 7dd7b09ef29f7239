"""Unit tests for the money helpers."""

from decimal import Decimal

import pytest

from orderpricing.domain.exceptions import ValidationError
from orderpricing.domain.model.money import digit_width, format_money, round2, to_decimal


class TestRound2:

    def test_half_rounds_up(self):
        assert round2(Decimal("2.345")) == Decimal("2.35")

    def test_half_rounds_away_from_zero_for_negatives(self):
        assert round2(Decimal("-2.345")) == Decimal("-2.35")

    def test_below_half_rounds_down(self):
        assert round2(Decimal("2.3449")) == Decimal("2.34")

    def test_pads_to_two_places(self):
        assert str(round2(Decimal("7"))) == "7.00"


class TestToDecimal:

    def test_from_string(self):
        assert to_decimal("25.99") == Decimal("25.99")

    def test_from_int(self):
        assert to_decimal(10) == Decimal("10")

    def test_from_float_is_exact(self):
        assert to_decimal(0.1) == Decimal("0.1")

    def test_decimal_passes_through(self):
        value = Decimal("1.50")
        assert to_decimal(value) is value

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            to_decimal("ten dollars")

    def test_infinity_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            to_decimal("Infinity")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            to_decimal(True)


class TestFormatMoney:

    def test_formatting(self):
        assert format_money(Decimal("15")) == "$15.00"
        assert format_money(Decimal("9.5")) == "$9.50"

    def test_absent_amount(self):
        assert format_money(None) == "-"


class TestDigitWidth:

    def test_counts_integer_and_fraction_digits(self):
        assert digit_width(Decimal("123.45")) == 5
        assert digit_width(Decimal("0.005")) == 4
        assert digit_width(Decimal("1e27")) == 28
        assert digit_width(100) == 3
