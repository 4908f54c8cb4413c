"""
Tests for the CLI module.

This module contains tests for the BankCLI class and the demo command,
including input parsing, output formatting, and error handling.
"""

import pytest
from decimal import Decimal
from click.testing import CliRunner

from bank_ledger.cli import BankCLI, cli, main
from bank_ledger.events import EventKind
from bank_ledger.ledger import Ledger


class TestBankCLI:
    """Test BankCLI class methods."""

    @pytest.fixture
    def bank_cli(self):
        """Create a BankCLI instance for testing."""
        return BankCLI()

    def test_bank_cli_initialization(self, bank_cli):
        assert isinstance(bank_cli.ledger, Ledger)
        assert len(bank_cli.ledger) == 0
        assert len(bank_cli.journal) == 0

    def test_ledger_events_reach_journal(self, bank_cli):
        bank_cli.ledger.add_customer("John Doe", 10)

        assert [event.kind for event in bank_cli.journal] == [EventKind.CUSTOMER_ADDED]

    def test_format_currency(self, bank_cli):
        assert bank_cli.format_currency(Decimal('1234.56')) == "$1,234.56"
        assert bank_cli.format_currency(Decimal('0')) == "$0.00"
        assert bank_cli.format_currency(Decimal('824.0000')) == "$824.00"

    def test_parse_currency(self, bank_cli):
        assert bank_cli.parse_currency("123.45") == Decimal('123.45')
        assert bank_cli.parse_currency("$1,234.56") == Decimal('1234.56')
        assert bank_cli.parse_currency("  200  ") == Decimal('200')

    @pytest.mark.parametrize("value", ["abc", "", "12.3.4", "nan", "inf", "-Infinity"])
    def test_parse_currency_invalid(self, bank_cli, value):
        with pytest.raises(ValueError, match="Invalid amount"):
            bank_cli.parse_currency(value)


class TestCLICommands:
    """Test click commands."""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    def test_help(self, runner):
        result = runner.invoke(cli, ['--help'])

        assert result.exit_code == 0
        assert "Bank Ledger CLI" in result.output
        assert "demo" in result.output

    def test_demo(self, runner):
        result = runner.invoke(cli, ['demo'])

        assert result.exit_code == 0
        assert "New customer added: John Doe" in result.output
        assert "New customer added: Jane Smith" in result.output
        assert "Transferred $200.00 from John Doe to Jane Smith" in result.output
        assert "John Doe earned interest of $24.00" in result.output
        assert "Jane Smith earned interest of $21.00" in result.output
        assert "John Doe's balance: $824.00" in result.output
        assert "Jane Smith's balance: $721.00" in result.output

    def test_demo_custom_options(self, runner):
        result = runner.invoke(cli, ['demo', '--transfer-amount', '500', '--interest-rate', '10'])

        assert result.exit_code == 0
        assert "John Doe's balance: $550.00" in result.output
        assert "Jane Smith's balance: $1,100.00" in result.output

    def test_demo_fails_fast_on_ledger_error(self, runner):
        result = runner.invoke(cli, ['demo', '--transfer-amount', '5000'])

        assert result.exit_code == 1
        assert "❌ Error: Insufficient funds" in result.output
        assert "earned interest" not in result.output
        assert "Final Balances" not in result.output

    def test_demo_rejects_non_positive_rate(self, runner):
        result = runner.invoke(cli, ['demo', '--interest-rate', '0'])

        assert result.exit_code == 1
        assert "Invalid interest amount" in result.output

    def test_demo_rejects_bad_amount(self, runner):
        result = runner.invoke(cli, ['demo', '--transfer-amount', 'lots'])

        assert result.exit_code == 1
        assert "Invalid amount: lots" in result.output
        assert "New customer added" not in result.output

    @pytest.mark.parametrize("option", ["--transfer-amount", "--interest-rate"])
    @pytest.mark.parametrize("value", ["nan", "inf", "Infinity"])
    def test_demo_rejects_non_finite_amount(self, runner, option, value):
        result = runner.invoke(cli, ["demo", option, value])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert f"❌ Error: Invalid amount: {value}" in result.output
        assert "New customer added" not in result.output

    def test_log_level_option(self, runner):
        result = runner.invoke(cli, ['--log-level', 'debug', 'demo'])
        assert result.exit_code == 0

    def test_log_level_from_environment(self, runner):
        result = runner.invoke(cli, ['demo'], env={'BANK_LEDGER_LOG_LEVEL': 'INFO'})
        assert result.exit_code == 0

    def test_invalid_log_level(self, runner):
        result = runner.invoke(cli, ['--log-level', 'LOUD', 'demo'])
        assert result.exit_code == 2

    def test_main_is_callable(self):
        assert callable(main)
