"""
Exceptions for the bank ledger.

All ledger errors derive from ValueError so callers can keep catching
ValueError around account operations.
"""

from decimal import Decimal
from typing import Optional


class LedgerError(ValueError):
    """Base class for ledger errors."""


class InvalidAmount(LedgerError):
    """A monetary amount is not strictly positive."""

    def __init__(self, message: str, amount: Optional[Decimal] = None):
        super().__init__(message)
        self.amount = amount


class InsufficientFunds(InvalidAmount):
    """A withdrawal exceeds the available balance."""

    def __init__(self, message: str, amount: Optional[Decimal] = None,
                 balance: Optional[Decimal] = None):
        super().__init__(message, amount)
        self.balance = balance


class NotFound(LedgerError):
    """No account is registered under the given name."""

    def __init__(self, name: str):
        super().__init__(f"Customer not found: {name}")
        self.name = name


class DuplicateCustomer(LedgerError):
    """A customer with the same name is already registered."""

    def __init__(self, name: str):
        super().__init__(f"Customer already exists: {name}")
        self.name = name


class InvalidName(LedgerError):
    """Customer name is empty."""
