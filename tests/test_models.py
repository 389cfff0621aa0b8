"""
Tests for the models module.

This module contains tests for the shared value types and the currency
helpers.
"""

import pytest
from decimal import Decimal

from bank_accounts.models import (AccountType, OperationResult, format_currency,
                                  parse_currency, to_decimal)


class TestAccountType:
    """Test AccountType enum."""

    def test_account_types(self):
        """Test all account type values."""
        assert AccountType.SAVINGS.value == "savings"
        assert AccountType.CHECKING.value == "checking"
        assert AccountType.PREMIUM.value == "premium"
        assert AccountType.STUDENT.value == "student"


class TestOperationResult:
    """Test OperationResult."""

    def test_truthiness_follows_ok(self):
        assert OperationResult(True, "done")
        assert not OperationResult(False, "rejected")

    def test_balance_after_defaults_to_none(self):
        result = OperationResult(False, "Account not found: X")
        assert result.balance_after is None

    def test_result_is_immutable(self):
        result = OperationResult(True, "done", Decimal('1.00'))
        with pytest.raises(AttributeError):
            result.ok = False


class TestToDecimal:
    """Test amount conversion."""

    def test_decimal_passthrough(self):
        amount = Decimal('12.34')
        assert to_decimal(amount) is amount

    def test_float_has_no_binary_noise(self):
        assert to_decimal(0.1) == Decimal('0.1')

    def test_int_and_str(self):
        assert to_decimal(500) == Decimal('500')
        assert to_decimal("5000.01") == Decimal('5000.01')

    def test_invalid_amount(self):
        with pytest.raises(ValueError, match="Invalid amount"):
            to_decimal("abc")

    @pytest.mark.parametrize("value", [
        "nan", "sNaN", "Infinity", "-inf", float("inf"), Decimal("NaN"),
    ])
    def test_non_finite_amount(self, value):
        with pytest.raises(ValueError, match="Invalid amount"):
            to_decimal(value)


class TestCurrency:
    """Test currency formatting and parsing."""

    def test_format_currency_positive(self):
        assert format_currency(Decimal('1234.56')) == "$1,234.56"

    def test_format_currency_rounds_to_cents(self):
        assert format_currency(Decimal('200')) == "$200.00"
        assert format_currency(Decimal('20.004')) == "$20.00"

    def test_format_currency_negative(self):
        assert format_currency(Decimal('-335')) == "-$335.00"

    def test_parse_currency_simple_number(self):
        assert parse_currency("123.45") == Decimal('123.45')

    def test_parse_currency_complex_format(self):
        assert parse_currency(" $1,234.56 ") == Decimal('1234.56')

    def test_parse_currency_invalid_input(self):
        with pytest.raises(ValueError, match="Invalid amount"):
            parse_currency("abc123")

    @pytest.mark.parametrize("amount_str", ["nan", "$Infinity"])
    def test_parse_currency_non_finite(self, amount_str):
        with pytest.raises(ValueError, match="Invalid amount"):
            parse_currency(amount_str)

    def test_parse_currency_empty_input(self):
        with pytest.raises(ValueError, match="Invalid amount"):
            parse_currency("  ")
