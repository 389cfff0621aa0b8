"""
Account types for the bank accounts package.

Each account type carries its own deposit, withdrawal and interest policy
on top of the shared identity and balance state in ``Account``.
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from .models import AccountType, OperationResult, format_currency, to_decimal


logger = logging.getLogger(__name__)


class Account(ABC):
    """Base bank account holding identity and balance."""

    account_type: AccountType
    # Accounts earn interest only when the type defines a rate.
    interest_rate: Optional[Decimal] = None
    allows_overdraft = False

    def __init__(self, account_id: str, holder_name: str, balance=Decimal('0.00')):
        """Initialize account with immutable identity and an opening balance."""
        if not account_id or not str(account_id).strip():
            raise ValueError("Account id cannot be empty")
        if not holder_name or not str(holder_name).strip():
            raise ValueError("Holder name cannot be empty")

        opening_balance = to_decimal(balance)
        if opening_balance < 0:
            raise ValueError("Opening balance cannot be negative")

        self._account_id = account_id
        self._holder_name = holder_name
        self._balance = opening_balance

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(account_id={self._account_id!r}, "
                f"holder_name={self._holder_name!r}, balance={self._balance!r})")

    @property
    def account_id(self) -> str:
        return self._account_id

    @property
    def holder_name(self) -> str:
        return self._holder_name

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def is_interest_bearing(self) -> bool:
        return self.interest_rate is not None

    def _set_balance(self, value, allow_negative: bool = False) -> bool:
        """Store a new balance, refusing negative values unless allowed."""
        value = to_decimal(value)
        if value < 0 and not allow_negative:
            logger.warning("Balance cannot be negative: %s rejected for account %s",
                           value, self._account_id)
            return False
        self._balance = value
        return True

    def _success(self, message: str) -> OperationResult:
        logger.info("%s: %s", self._account_id, message)
        return OperationResult(True, message, self._balance)

    def _reject(self, message: str) -> OperationResult:
        logger.warning("%s: %s", self._account_id, message)
        return OperationResult(False, message, self._balance)

    def _credit(self, amount: Decimal) -> OperationResult:
        self._set_balance(self._balance + amount, allow_negative=self.allows_overdraft)
        return self._success(f"Deposited {format_currency(amount)} to {self._holder_name}")

    def _debit(self, amount: Decimal) -> OperationResult:
        self._set_balance(self._balance - amount, allow_negative=self.allows_overdraft)
        return self._success(f"Withdrawn {format_currency(amount)} from {self._holder_name}")

    @staticmethod
    def _invalid_amount(amount: Decimal) -> Optional[str]:
        if amount <= 0:
            return "Amount must be positive"
        return None

    def can_deposit(self, amount) -> Optional[str]:
        """Return the reason a deposit would be rejected, or None."""
        return self._invalid_amount(to_decimal(amount))

    def deposit(self, amount) -> OperationResult:
        """Deposit money to the account."""
        amount = to_decimal(amount)
        reason = self.can_deposit(amount)
        if reason:
            return self._reject(reason)
        return self._credit(amount)

    @abstractmethod
    def withdraw(self, amount) -> OperationResult:
        """Withdraw money from the account."""

    def calculate_interest(self) -> OperationResult:
        """Calculate and add interest on the current balance."""
        if not self.is_interest_bearing:
            return self._reject(f"{self.account_type.value.capitalize()} accounts do not earn interest")

        interest = self._balance * self.interest_rate
        self._set_balance(self._balance + interest)
        return self._success(f"Interest of {format_currency(interest)} added to {self._holder_name}")

    def reverse_withdrawal(self, balance_before) -> None:
        """Restore the balance held before a withdrawal, fees included."""
        self._set_balance(balance_before, allow_negative=self.allows_overdraft)
        logger.info("%s: withdrawal reversed, balance restored to %s",
                    self._account_id, format_currency(self._balance))

    def reset_period(self) -> None:
        """Start a new withdrawal period. Only rate-limited accounts keep counters."""

    def describe(self) -> str:
        """Display lines for the account."""
        return (f"Account No: {self._account_id}\n"
                f"Holder: {self._holder_name}\n"
                f"Balance: {format_currency(self._balance)}")


class SavingsAccount(Account):
    """Interest-bearing account with a balance floor and a withdrawal limit."""

    account_type = AccountType.SAVINGS
    interest_rate = Decimal('0.02')
    MIN_BALANCE = Decimal('500')
    MAX_WITHDRAWALS_PER_PERIOD = 3

    def __init__(self, account_id: str, holder_name: str, balance=Decimal('0.00')):
        super().__init__(account_id, holder_name, balance)
        self.withdraw_count = 0

    def withdraw(self, amount) -> OperationResult:
        amount = to_decimal(amount)
        reason = self._invalid_amount(amount)
        if reason:
            return self._reject(reason)

        # Limit is checked before the floor
        if self.withdraw_count >= self.MAX_WITHDRAWALS_PER_PERIOD:
            return self._reject(
                f"You have reached your {self.MAX_WITHDRAWALS_PER_PERIOD}-withdrawal limit this period!")
        if self._balance - amount < self.MIN_BALANCE:
            return self._reject(
                f"Cannot withdraw below minimum balance of {format_currency(self.MIN_BALANCE)}")

        result = self._debit(amount)
        self.withdraw_count += 1
        return result

    def reverse_withdrawal(self, balance_before) -> None:
        super().reverse_withdrawal(balance_before)
        self.withdraw_count = max(self.withdraw_count - 1, 0)

    def reset_period(self) -> None:
        self.withdraw_count = 0


class CheckingAccount(Account):
    """Account allowing unlimited overdraft at a flat fee per overdrawn withdrawal."""

    account_type = AccountType.CHECKING
    allows_overdraft = True
    OVERDRAFT_FEE = Decimal('35')

    def withdraw(self, amount) -> OperationResult:
        amount = to_decimal(amount)
        reason = self._invalid_amount(amount)
        if reason:
            return self._reject(reason)

        new_balance = self._balance - amount
        messages = []
        if new_balance < 0:
            new_balance -= self.OVERDRAFT_FEE
            messages.append(f"Overdraft! {format_currency(self.OVERDRAFT_FEE)} fee applied.")
        self._set_balance(new_balance, allow_negative=self.allows_overdraft)
        messages.append(f"Withdrawn {format_currency(amount)} from {self._holder_name}")
        return self._success(" ".join(messages))


class PremiumAccount(Account):
    """High-rate interest account that cannot be overdrawn."""

    account_type = AccountType.PREMIUM
    interest_rate = Decimal('0.05')
    # Advisory only, withdrawals are checked against zero.
    MIN_BALANCE = Decimal('10000')

    def withdraw(self, amount) -> OperationResult:
        amount = to_decimal(amount)
        reason = self._invalid_amount(amount)
        if reason:
            return self._reject(reason)

        if self._balance - amount < 0:
            return self._reject("Insufficient balance!")
        return self._debit(amount)


class StudentAccount(Account):
    """Account with a balance ceiling."""

    account_type = AccountType.STUDENT
    MAX_BALANCE = Decimal('5000')

    def can_deposit(self, amount) -> Optional[str]:
        amount = to_decimal(amount)
        reason = self._invalid_amount(amount)
        if reason:
            return reason
        if self._balance + amount > self.MAX_BALANCE:
            return f"Cannot exceed maximum balance of {format_currency(self.MAX_BALANCE)}"
        return None

    def withdraw(self, amount) -> OperationResult:
        amount = to_decimal(amount)
        reason = self._invalid_amount(amount)
        if reason:
            return self._reject(reason)

        if amount > self._balance:
            return self._reject("Not enough balance to withdraw!")
        return self._debit(amount)


ACCOUNT_CLASSES = {
    AccountType.SAVINGS: SavingsAccount,
    AccountType.CHECKING: CheckingAccount,
    AccountType.PREMIUM: PremiumAccount,
    AccountType.STUDENT: StudentAccount,
}


def create_account(account_type: AccountType, account_id: str, holder_name: str,
                   balance=Decimal('0.00')) -> Account:
    """
    Create an account of the given type.

    Args:
        account_type: Type of account to open
        account_id: Account number, unique within a bank
        holder_name: Account holder name
        balance: Opening balance

    Returns:
        Account instance for the requested type
    """
    if not isinstance(account_type, AccountType):
        account_type = AccountType(account_type)
    return ACCOUNT_CLASSES[account_type](account_id, holder_name, balance)
