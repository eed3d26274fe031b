"""Point-in-time account balances."""

from datetime import date
from decimal import Decimal
from typing import Optional

from gstledger.domain.account import AccountRegistry
from gstledger.domain.money import ZERO


class BalanceCalculator:
    """Replay the journal to compute signed account balances."""

    def __init__(self, journal, registry: AccountRegistry):
        self.journal = journal
        self.registry = registry

    def balance_as_of(self, account_code: str, as_of: Optional[date] = None) -> Decimal:
        """Balance of ``account_code`` including every entry dated on or before ``as_of``.

        Debit-normal accounts (bank, assets, inventory, expenses, COGS) grow with
        debits, all others with credits. Unknown codes have a zero balance.
        """
        account = self.registry.lookup(account_code)
        if account is None:
            return ZERO
        if as_of is None:
            as_of = date.today()

        balance = ZERO
        for entry in self.journal.entries:
            if entry.date > as_of or not entry.references(account_code):
                continue
            debits = entry.debit_amount_for(account_code)
            credits = entry.credit_amount_for(account_code)
            balance += debits - credits if account.is_debit_normal else credits - debits
        return balance

    def statement_variance(self, bank_code: str, as_of: Optional[date] = None) -> Optional[Decimal]:
        """Computed bank balance minus the balance the statement last reported.

        Uses the latest entry on ``bank_code`` dated on or before ``as_of``.

        Returns:
            The difference, or None when no entry touches the account
        """
        if as_of is None:
            as_of = date.today()
        latest = None
        for entry in self.journal.entries:
            if entry.date <= as_of and entry.references(bank_code):
                if latest is None or entry.date >= latest.date:
                    latest = entry
        if latest is None:
            return None
        return self.balance_as_of(bank_code, as_of) - latest.bank_balance
