"""Shared fixtures for the bank accounts tests."""

import logging

import pytest

from bank_accounts import (Bank, CheckingAccount, PremiumAccount,
                           SavingsAccount, StudentAccount)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo any logging setup done by a test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    package_level = logging.getLogger("bank_accounts").level
    yield
    # pytest's own capture handlers are subclasses and manage themselves
    for handler in root_logger.handlers[:]:
        if handler not in handlers and type(handler) is logging.StreamHandler:
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)
    logging.getLogger("bank_accounts").setLevel(package_level)


@pytest.fixture
def bank():
    """Create a bank holding one account of each type."""
    return Bank([
        SavingsAccount("S1", "Alice", 1000),
        CheckingAccount("C1", "Bob", 200),
        PremiumAccount("P1", "Carol", 15000),
        StudentAccount("T1", "Dave", 3000),
    ])
