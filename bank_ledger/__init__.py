"""
Bank Ledger

A small in-memory banking ledger with a CLI demo.
Supports customer registration, deposits, withdrawals, transfers and interest.
"""

__version__ = "0.1.0"
__author__ = "Developer"
__email__ = "dev@example.com"

from typing import Optional

from .events import EventJournal, EventKind, EventSink, LedgerEvent, fan_out, log_event
from .exceptions import (
    DuplicateCustomer,
    InsufficientFunds,
    InvalidAmount,
    InvalidName,
    LedgerError,
    NotFound,
)
from .models import Account
from .ledger import Ledger
from .cli import main


def create_ledger(sink: Optional[EventSink] = None) -> Ledger:
    """
    Create an empty Ledger.

    Args:
        sink: Callable receiving every LedgerEvent; events are logged if omitted

    Returns:
        Ledger instance
    """
    return Ledger(sink)


__all__ = [
    "Account",
    "Ledger",
    "LedgerEvent",
    "EventKind",
    "EventJournal",
    "fan_out",
    "log_event",
    "LedgerError",
    "InvalidAmount",
    "InsufficientFunds",
    "NotFound",
    "DuplicateCustomer",
    "InvalidName",
    "create_ledger",
    "main"
]
