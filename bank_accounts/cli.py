"""
CLI interface for the bank accounts package.

This module provides a command-line interface that drives the bank registry
and renders the results of its operations.
"""

import click
from decimal import Decimal
from typing import Optional

from .accounts import (ACCOUNT_CLASSES, CheckingAccount, PremiumAccount,
                       SavingsAccount, StudentAccount)
from .bank import Bank
from .config import LOG_LEVELS, Settings
from .logging_config import LOG_FORMATS, setup_logging
from .models import OperationResult, format_currency, parse_currency


class BankCLI:
    """CLI wrapper for bank operations."""

    def __init__(self, bank: Optional[Bank] = None):
        """Initialize CLI with a bank."""
        self.bank = bank if bank is not None else Bank()

    def format_currency(self, amount: Decimal) -> str:
        """Format currency for display."""
        return format_currency(amount)

    def parse_currency(self, amount_str: str) -> Decimal:
        """Parse currency input."""
        return parse_currency(amount_str)

    def echo_result(self, result: OperationResult) -> None:
        """Render an operation result."""
        if result.ok:
            click.echo(f"✅ {result.message}")
        else:
            click.echo(f"❌ {result.message}")

    def load_sample_accounts(self) -> None:
        """Register the sample accounts used by the demo."""
        for account in (
            SavingsAccount("Saving Acc-101", "Shyam", Decimal('1000')),
            CheckingAccount("Checking Acc-102", "Chakra", Decimal('200')),
            PremiumAccount("Premium Acc-103", "Pujan", Decimal('15000')),
            StudentAccount("Student Acc-104", "Samir", Decimal('3000')),
        ):
            self.echo_result(self.bank.add_account(account))

    def show_all_accounts(self) -> None:
        click.echo(f"\n{self.bank.show_all_accounts()}")
        click.echo(f"\nTotal: {self.format_currency(self.bank.total_balance())}")


@click.group()
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default=None, help='Log level (default: BANK_LOG_LEVEL or WARNING)')
@click.option('--log-format', type=click.Choice(LOG_FORMATS),
              default=None, help='Log format (default: BANK_LOG_FORMAT or standard)')
@click.pass_context
def cli(ctx, log_level, log_format):
    """Bank Accounts CLI"""
    try:
        settings = Settings.load()
    except ValueError as e:
        raise click.UsageError(str(e))

    if log_level:
        settings.log_level = log_level.upper()
    if log_format:
        settings.log_format = log_format

    setup_logging(settings.log_level, settings.log_format)
    ctx.ensure_object(dict)
    ctx.obj['settings'] = settings
    ctx.obj['cli'] = BankCLI()


@cli.command()
@click.option('--transfer-amount', default='1000.00',
              help='Amount to transfer from the premium to the savings account')
@click.pass_context
def demo(ctx, transfer_amount):
    """Run the sample account sequence."""
    bank_cli = ctx.obj['cli']

    try:
        amount = bank_cli.parse_currency(transfer_amount)

        bank_cli.load_sample_accounts()
        bank_cli.show_all_accounts()

        click.echo(f"\n🔄 Transactions")
        bank = bank_cli.bank
        bank_cli.echo_result(bank.find_account("Saving Acc-101").withdraw(Decimal('200')))
        bank_cli.echo_result(bank.find_account("Checking Acc-102").withdraw(Decimal('500')))
        bank_cli.echo_result(bank.find_account("Premium Acc-103").deposit(Decimal('2000')))
        bank_cli.echo_result(bank.find_account("Student Acc-104").deposit(Decimal('2500')))
        bank_cli.echo_result(bank.transfer("Premium Acc-103", "Saving Acc-101", amount))
        bank_cli.show_all_accounts()

        click.echo(f"\n💎 Monthly Interest")
        for result in bank.apply_monthly_interest():
            bank_cli.echo_result(result)
        bank_cli.show_all_accounts()

    except ValueError as e:
        click.echo(f"❌ Error: {e}", err=True)


@cli.command()
@click.pass_context
def policies(ctx):
    """Show the policy of each account type."""
    bank_cli = ctx.obj['cli']

    click.echo(f"{'Type':<10} {'Interest':<10} {'Rules'}")
    click.echo(f"{'-'*60}")
    for account_type, account_class in ACCOUNT_CLASSES.items():
        rate = account_class.interest_rate
        rate_str = f"{rate * 100:.0f}%" if rate is not None else "-"

        rules = []
        if account_class is SavingsAccount:
            rules.append(f"min balance {bank_cli.format_currency(account_class.MIN_BALANCE)}")
            rules.append(f"{account_class.MAX_WITHDRAWALS_PER_PERIOD} withdrawals per period")
        elif account_class is CheckingAccount:
            rules.append(f"overdraft fee {bank_cli.format_currency(account_class.OVERDRAFT_FEE)}")
        elif account_class is PremiumAccount:
            rules.append("no overdraft")
        elif account_class is StudentAccount:
            rules.append(f"max balance {bank_cli.format_currency(account_class.MAX_BALANCE)}")

        click.echo(f"{account_type.value:<10} {rate_str:<10} {', '.join(rules)}")


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
