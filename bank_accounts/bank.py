"""
Bank registry for the bank accounts package.

This module contains the business logic that operates across accounts:
lookup, transfers and batch interest.
"""

import logging
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple

from .accounts import Account
from .models import OperationResult, format_currency, to_decimal


class Bank:
    """Owns bank accounts in insertion order."""

    def __init__(self, accounts: Iterable[Account] = ()):
        """Initialize bank with optional existing accounts."""
        self.logger = logging.getLogger(__name__)
        self._accounts: List[Account] = []
        for account in accounts:
            self.add_account(account)

    def __len__(self) -> int:
        return len(self._accounts)

    @property
    def accounts(self) -> Tuple[Account, ...]:
        """Accounts in insertion order."""
        return tuple(self._accounts)

    def add_account(self, account: Account) -> OperationResult:
        """Add an account. Duplicate ids are not checked."""
        self._accounts.append(account)
        message = f"Account created for {account.holder_name}"
        self.logger.info(message)
        return OperationResult(True, message, account.balance)

    def find_account(self, account_id: str) -> Optional[Account]:
        """Find the first account with the given id."""
        for account in self._accounts:
            if account.account_id == account_id:
                return account

        self.logger.warning("Account not found: %s", account_id)
        return None

    def transfer(self, from_account_id: str, to_account_id: str, amount) -> OperationResult:
        """Transfer money between accounts.

        The destination is credited only after the source withdrawal
        succeeded, and only when the destination would accept the deposit.
        """
        amount = to_decimal(amount)

        from_account = self.find_account(from_account_id)
        to_account = self.find_account(to_account_id)

        if from_account is None:
            return OperationResult(False, f"Account not found: {from_account_id}")
        if to_account is None:
            return OperationResult(False, f"Account not found: {to_account_id}")

        # A self-transfer deposits into the balance left by its own withdrawal
        if from_account is not to_account:
            reason = to_account.can_deposit(amount)
            if reason:
                self.logger.warning("Transfer to %s rejected: %s", to_account_id, reason)
                return OperationResult(False, f"Transfer failed: {reason}", from_account.balance)

        balance_before = from_account.balance
        withdrawal = from_account.withdraw(amount)
        if not withdrawal.ok:
            self.logger.warning("Transfer from %s rejected: %s", from_account_id, withdrawal.message)
            return OperationResult(False, f"Transfer failed: {withdrawal.message}", from_account.balance)

        deposit = to_account.deposit(amount)
        if not deposit.ok:
            from_account.reverse_withdrawal(balance_before)
            self.logger.error("Transfer deposit to %s failed, withdrawal from %s reversed: %s",
                              to_account_id, from_account_id, deposit.message)
            return OperationResult(False, f"Transfer failed: {deposit.message}", from_account.balance)

        message = (f"Transferred {format_currency(amount)} from "
                   f"{from_account.holder_name} to {to_account.holder_name}")
        self.logger.info(message)
        return OperationResult(True, message, from_account.balance)

    def apply_monthly_interest(self) -> List[OperationResult]:
        """Apply interest to every interest-bearing account."""
        results = []
        for account in list(self._accounts):
            if account.is_interest_bearing:
                results.append(account.calculate_interest())
        return results

    def reset_withdrawal_period(self) -> None:
        """Start a new withdrawal period on every account."""
        for account in list(self._accounts):
            account.reset_period()
        self.logger.info("Withdrawal period reset for %d accounts", len(self._accounts))

    def total_balance(self) -> Decimal:
        """Sum of all account balances."""
        return sum((account.balance for account in self._accounts), Decimal('0.00'))

    def show_all_accounts(self) -> str:
        """Render every account in insertion order."""
        lines = ["=====  All Bank Accounts ====="]
        for account in self._accounts:
            lines.append("")
            lines.append(account.describe())
        return "\n".join(lines)

