"""
CLI interface for the bank ledger.

This module provides a command-line interface running the scripted ledger
scenario against an in-memory ledger.
"""

import click
import logging
from decimal import Decimal

from .events import EventJournal, LedgerEvent, fan_out, log_event
from .ledger import Ledger
from .models import to_amount


LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']


class BankCLI:
    """CLI wrapper for ledger operations."""

    def __init__(self):
        """Initialize CLI with an empty ledger."""
        self.journal = EventJournal()
        self.ledger = Ledger(sink=fan_out(self.journal, log_event, self.echo_event))

    def echo_event(self, event: LedgerEvent) -> None:
        """Print an event as it happens."""
        click.echo(event.describe())

    def format_currency(self, amount: Decimal) -> str:
        """Format currency for display."""
        return f"${amount:,.2f}"

    def parse_currency(self, amount_str: str) -> Decimal:
        """Parse currency input."""
        # Remove $ and commas
        clean_str = str(amount_str).replace('$', '').replace(',', '').strip()
        return to_amount(clean_str)


@click.group()
@click.option('--log-level', default='WARNING', envvar='BANK_LEDGER_LOG_LEVEL',
              type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help='Logging level')
@click.pass_context
def cli(ctx, log_level):
    """Bank Ledger CLI"""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s %(name)s %(levelname)s %(message)s'
    )
    ctx.ensure_object(dict)
    ctx.obj['cli'] = BankCLI()


@cli.command()
@click.option('--transfer-amount', default='200', help='Amount John Doe sends to Jane Smith')
@click.option('--interest-rate', default='3', help='Interest rate in percent')
@click.pass_context
def demo(ctx, transfer_amount, interest_rate):
    """Run the sample ledger scenario."""
    bank_cli = ctx.obj['cli']
    ledger = bank_cli.ledger

    try:
        amount = bank_cli.parse_currency(transfer_amount)
        rate = bank_cli.parse_currency(interest_rate)

        ledger.add_customer("John Doe", 1000)
        ledger.add_customer("Jane Smith", 500)

        ledger.transfer_funds("John Doe", "Jane Smith", amount)

        ledger.calculate_interest(rate)

        click.echo(f"\n💰 Final Balances")
        click.echo(f"{'='*50}")
        for name in ("John Doe", "Jane Smith"):
            account = ledger.get_customer_by_name(name)
            click.echo(f"{account.name}'s balance: {bank_cli.format_currency(account.balance)}")

    except ValueError as e:
        click.echo(f"❌ Error: {e}", err=True)
        ctx.exit(1)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
