"""
Bank Accounts

Account types with their own deposit, withdrawal and interest rules,
held by a bank registry supporting lookup, transfers and batch interest.
"""

__version__ = "0.1.0"

from typing import Iterable

from .models import AccountType, OperationResult, format_currency, parse_currency
from .accounts import (
    Account,
    SavingsAccount,
    CheckingAccount,
    PremiumAccount,
    StudentAccount,
    create_account,
)
from .bank import Bank
from .config import Settings
from .logging_config import setup_logging
from .cli import main


def create_bank(accounts: Iterable[Account] = ()) -> Bank:
    """
    Create a Bank instance.

    Args:
        accounts: Accounts to register, in order

    Returns:
        Bank instance
    """
    return Bank(accounts)


__all__ = [
    "Account",
    "SavingsAccount",
    "CheckingAccount",
    "PremiumAccount",
    "StudentAccount",
    "AccountType",
    "OperationResult",
    "Bank",
    "Settings",
    "create_account",
    "create_bank",
    "format_currency",
    "parse_currency",
    "setup_logging",
    "main"
]
