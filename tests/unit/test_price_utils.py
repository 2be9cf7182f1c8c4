"""
Tests for price_utils — amount parsing and two-decimal formatting.
"""

from decimal import Decimal

from utils.price_utils import parse_amount, format_price


class TestParseAmount:
    """Tests for parse_amount()"""

    def test_parses_string(self):
        assert parse_amount("50.00") == Decimal("50.00")

    def test_parses_int_and_float(self):
        assert parse_amount(60) == Decimal("60")
        assert parse_amount(12.5) == Decimal("12.5")

    def test_strips_whitespace(self):
        assert parse_amount("  7.10 ") == Decimal("7.10")

    def test_none_and_empty_are_missing(self):
        assert parse_amount(None) is None
        assert parse_amount("") is None
        assert parse_amount("   ") is None

    def test_non_numeric_is_none(self):
        assert parse_amount("abc") is None
        assert parse_amount({"amount": "1"}) is None

    def test_non_finite_is_none(self):
        assert parse_amount("NaN") is None
        assert parse_amount("Infinity") is None
        assert parse_amount(float("inf")) is None

    def test_bool_is_not_an_amount(self):
        assert parse_amount(True) is None


class TestFormatPrice:
    """Tests for format_price()"""

    def test_pads_to_two_decimals(self):
        assert format_price("50", "USD") == "50.00"
        assert format_price(60, "USD") == "60.00"

    def test_rounds_half_up(self):
        assert format_price("10.005", "USD") == "10.01"
        assert format_price("10.004", "USD") == "10.00"

    def test_idempotent_on_formatted_values(self):
        for value in ("0.00", "19.99", "1234.50"):
            assert format_price(value, "EUR") == value
            assert format_price(format_price(value, "EUR"), "EUR") == value

    def test_currency_does_not_change_precision(self):
        assert format_price("1000", "JPY") == "1000.00"

    def test_unparseable_returns_none_not_nan(self):
        assert format_price("not-a-price", "USD") is None
        assert format_price(None, "USD") is None

    def test_negative_zero_normalized(self):
        assert format_price("-0.001", "USD") == "0.00"

    def test_exponent_notation(self):
        assert format_price("1E+2", "USD") == "100.00"
