"""
Ledger for the bank ledger system.

This module contains the business logic composing account operations:
registration, lookup, transfers and interest accrual.
"""

import logging
from decimal import Decimal
from typing import Dict, Iterator, List, Optional, Tuple

from .events import EventKind, EventSink, LedgerEvent, log_event
from .exceptions import DuplicateCustomer, InvalidAmount, InvalidName, NotFound
from .models import Account, Amount, to_amount


logger = logging.getLogger(__name__)


class Ledger:
    """Owns customer accounts and the operations spanning them."""

    def __init__(self, sink: Optional[EventSink] = None):
        """Initialize an empty ledger reporting events to sink."""
        self.sink = sink if sink is not None else log_event
        self._accounts: List[Account] = []

    def __len__(self) -> int:
        """Number of registered accounts."""
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        """Iterate accounts in registration order."""
        return iter(self._accounts)

    def __contains__(self, name: str) -> bool:
        """Check if a customer is registered under name."""
        return any(account.name == name for account in self._accounts)

    @property
    def accounts(self) -> Tuple[Account, ...]:
        """Accounts in registration order."""
        return tuple(self._accounts)

    def add_customer(self, name: str, initial_deposit: Amount) -> Account:
        """Register a new customer with a positive opening balance."""
        initial_deposit = to_amount(initial_deposit)

        if not name or not name.strip():
            raise InvalidName("Customer name cannot be empty")

        if initial_deposit <= 0:
            raise InvalidAmount(
                f"Invalid initial deposit amount: {initial_deposit}", initial_deposit
            )

        if name in self:
            raise DuplicateCustomer(name)

        account = Account(name=name, balance=initial_deposit, notify=self.sink)
        self._accounts.append(account)
        self.sink(LedgerEvent(EventKind.CUSTOMER_ADDED, name, initial_deposit))

        return account

    def get_customer_by_name(self, name: str) -> Account:
        """Get the account registered under name."""
        for account in self._accounts:
            if account.name == name:
                return account

        raise NotFound(name)

    def get_balance(self, name: str) -> Decimal:
        """Get account balance."""
        return self.get_customer_by_name(name).balance

    def total_holdings(self) -> Decimal:
        """Sum of all balances."""
        return sum((account.balance for account in self._accounts), Decimal('0.00'))

    def transfer_funds(self, from_name: str, to_name: str, amount: Amount) -> None:
        """Transfer money between customers.

        The source is debited before the destination is credited, so a
        rejected withdrawal leaves both balances untouched.
        """
        amount = to_amount(amount)

        from_account = self.get_customer_by_name(from_name)
        to_account = self.get_customer_by_name(to_name)

        from_account.withdraw(amount)
        to_account.deposit(amount)

        self.sink(LedgerEvent(EventKind.TRANSFER, from_name, amount, counterparty=to_name))

    def calculate_interest(self, rate_percent: Amount) -> Dict[str, Decimal]:
        """Credit every account with interest on its current balance.

        Args:
            rate_percent: Interest rate as a percentage, e.g. 3 for 3%

        Returns:
            Interest credited per customer name, in registration order

        Raises:
            InvalidAmount: if the interest for any account would not be
                positive; no account is credited in that case
        """
        rate = to_amount(rate_percent) / Decimal('100')

        for account in self._accounts:
            interest = account.balance * rate
            if interest <= 0:
                raise InvalidAmount(
                    f"Invalid interest amount for {account.name}: {interest}", interest
                )

        credited = {}
        for account in self._accounts:
            interest = account.balance * rate
            account.deposit(interest)
            self.sink(LedgerEvent(EventKind.INTEREST, account.name, interest))
            credited[account.name] = interest

        logger.debug("Interest at %s%% credited to %d accounts", rate_percent, len(credited))
        return credited
