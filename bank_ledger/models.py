"""
Data models for the bank ledger.

This module contains the Account record and its balance-changing operations.
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Union

from .events import EventKind, EventSink, LedgerEvent, discard_event
from .exceptions import InsufficientFunds, InvalidAmount


Amount = Union[Decimal, int, float, str]


def to_amount(value: Amount) -> Decimal:
    """Coerce a number or numeric string to a finite Decimal."""
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise InvalidAmount(f"Invalid amount: {value}")

    if not amount.is_finite():
        raise InvalidAmount(f"Invalid amount: {value}", amount)

    return amount


@dataclass
class Account:
    """A customer's named balance."""

    name: str = ""
    balance: Decimal = Decimal('0.00')
    notify: EventSink = field(default=discard_event, repr=False, compare=False)

    def __post_init__(self):
        """Ensure balance is a Decimal."""
        self.balance = to_amount(self.balance)

    def can_withdraw(self, amount: Amount) -> bool:
        """Check if withdrawal is possible without going below zero."""
        amount = to_amount(amount)
        return 0 < amount <= self.balance

    def deposit(self, amount: Amount) -> None:
        """Deposit money to account."""
        amount = to_amount(amount)

        if amount <= 0:
            raise InvalidAmount(f"Invalid deposit amount: {amount}", amount)

        self.balance += amount
        self.notify(LedgerEvent(EventKind.DEPOSIT, self.name, amount))

    def withdraw(self, amount: Amount) -> None:
        """Withdraw money from account."""
        amount = to_amount(amount)

        if amount <= 0:
            raise InvalidAmount(f"Invalid withdrawal amount: {amount}", amount)

        if not self.can_withdraw(amount):
            raise InsufficientFunds(
                f"Insufficient funds. Available: {self.balance}, requested: {amount}",
                amount,
                self.balance
            )

        self.balance -= amount
        self.notify(LedgerEvent(EventKind.WITHDRAWAL, self.name, amount))
