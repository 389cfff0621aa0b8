"""
Data models for the bank accounts package.

This module contains the value types shared by accounts and the bank registry.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional


class AccountType(Enum):
    """Types of bank accounts."""
    SAVINGS = "savings"
    CHECKING = "checking"
    PREMIUM = "premium"
    STUDENT = "student"


@dataclass(frozen=True)
class OperationResult:
    """Outcome of an account or bank operation.

    Rejected operations leave state unchanged and carry the reason in
    ``message`` with ``ok`` set to False.
    """

    ok: bool
    message: str
    balance_after: Optional[Decimal] = None

    def __bool__(self) -> bool:
        return self.ok


def to_decimal(value) -> Decimal:
    """Convert an amount to Decimal without float noise."""
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError):
            raise ValueError(f"Invalid amount: {value}")

    # NaN and Infinity parse but are not amounts
    if not result.is_finite():
        raise ValueError(f"Invalid amount: {value}")
    return result


def format_currency(amount: Decimal) -> str:
    """Format currency for display."""
    amount = to_decimal(amount)
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"


def parse_currency(amount_str: str) -> Decimal:
    """Parse currency input."""
    # Remove $ and commas
    clean_str = amount_str.replace('$', '').replace(',', '').strip()
    if not clean_str:
        raise ValueError(f"Invalid amount: {amount_str}")
    return to_decimal(clean_str)
