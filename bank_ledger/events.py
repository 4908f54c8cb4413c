"""
Ledger notifications.

Accounts and the ledger report what they did as LedgerEvent values passed to
a sink. A sink is any callable accepting one event; this module provides a
logging sink, an in-memory journal and a helper to combine sinks.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Callable, Iterator, List, Optional


logger = logging.getLogger(__name__)


class EventKind(Enum):
    """Kinds of ledger events."""
    CUSTOMER_ADDED = "customer_added"
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    TRANSFER = "transfer"
    INTEREST = "interest"


@dataclass
class LedgerEvent:
    """Something that happened to an account."""

    kind: EventKind
    account_name: str
    amount: Decimal = Decimal('0.00')
    counterparty: Optional[str] = None  # Destination of a transfer
    timestamp: Optional[datetime] = None

    def __post_init__(self):
        if self.timestamp is None:
            self.timestamp = datetime.now()

        if not isinstance(self.amount, Decimal):
            self.amount = Decimal(str(self.amount))

    def describe(self) -> str:
        """Human readable one-line description."""
        amount = f"${self.amount:,.2f}"

        if self.kind == EventKind.CUSTOMER_ADDED:
            return f"New customer added: {self.account_name}"
        if self.kind == EventKind.DEPOSIT:
            return f"{self.account_name} deposited {amount}"
        if self.kind == EventKind.WITHDRAWAL:
            return f"{self.account_name} withdrew {amount}"
        if self.kind == EventKind.TRANSFER:
            return f"Transferred {amount} from {self.account_name} to {self.counterparty}"
        return f"{self.account_name} earned interest of {amount}"


EventSink = Callable[[LedgerEvent], None]


def log_event(event: LedgerEvent) -> None:
    """Sink that writes events to the module logger."""
    logger.info(event.describe())


def discard_event(event: LedgerEvent) -> None:
    """Sink that ignores events."""


class EventJournal:
    """In-memory sink keeping every event in emission order."""

    def __init__(self):
        """Start with no events."""
        self.events: List[LedgerEvent] = []

    def __call__(self, event: LedgerEvent) -> None:
        """Record an event."""
        self.events.append(event)

    def __iter__(self) -> Iterator[LedgerEvent]:
        """Iterate events in emission order."""
        return iter(self.events)

    def __len__(self) -> int:
        """Number of recorded events."""
        return len(self.events)

    def for_account(self, name: str) -> List[LedgerEvent]:
        """Events concerning an account, including incoming transfers."""
        return [
            event for event in self.events
            if event.account_name == name or event.counterparty == name
        ]

    def of_kind(self, kind: EventKind) -> List[LedgerEvent]:
        """Events of a single kind."""
        return [event for event in self.events if event.kind == kind]

    def clear(self) -> None:
        """Forget all recorded events."""
        self.events.clear()


def fan_out(*sinks: EventSink) -> EventSink:
    """Combine several sinks into one, called in the given order."""

    def sink(event: LedgerEvent) -> None:
        for target in sinks:
            target(event)

    return sink
