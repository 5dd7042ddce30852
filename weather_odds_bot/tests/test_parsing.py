"""
Tests for best-effort label parsing.
"""

import pytest

from weather_odds_bot.polymarket.parsing import parse_leading_int, parse_digits, clean_text


class TestParseLeadingInt:
    """Probability and price labels."""

    @pytest.mark.parametrize("text,expected", [
        ("45%", 45),
        ("46¢", 46),
        ("12.5¢", 12),
        ("  7 %", 7),
        ("-3", -3),
    ])
    def test_leading_integer(self, text, expected):
        assert parse_leading_int(text) == expected

    @pytest.mark.parametrize("text", [None, "", "   ", "<1%", "abc", "¢50"])
    def test_malformed_is_zero(self, text):
        assert parse_leading_int(text) == 0


class TestParseDigits:
    """Volume labels."""

    def test_strips_currency_and_separators(self):
        assert parse_digits("$1,234,567 Vol.") == 1234567

    def test_plain_number(self):
        assert parse_digits("500") == 500

    @pytest.mark.parametrize("text", [None, "", "Vol.", "$ -"])
    def test_no_digits_is_zero(self, text):
        assert parse_digits(text) == 0


class TestCleanText:

    def test_trims(self):
        assert clean_text("  15°C \n") == "15°C"

    def test_missing_uses_default(self):
        assert clean_text(None, default="None") == "None"

    def test_blank_uses_default(self):
        assert clean_text("   ", default="None") == "None"
        assert clean_text("") == ""
