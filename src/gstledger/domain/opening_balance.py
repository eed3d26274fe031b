"""Opening balance entries for newly seen bank accounts."""

from datetime import timedelta
from decimal import Decimal
from typing import Optional

from gstledger.domain.account import AccountRegistry
from gstledger.domain.entities import LedgerEntry, SplitLine
from gstledger.domain.money import ZERO
from gstledger.domain.validation import bank_account_code
from gstledger.logging_config import get_logger

logger = get_logger("domain.opening_balance")


class OpeningBalanceBootstrapper:
    """Synthesise the opening balance the first time a bank account is posted to.

    The opening entry is dated the day before the first transaction and moves
    the balance the bank held before that transaction in from owner's equity.
    """

    def __init__(self, journal, registry: AccountRegistry, owners_equity_account_code: str):
        """Initialize opening balance bootstrapper.

        Args:
            journal: General journal the opening entry is appended to
            registry: Account registry used to find the bank leg and its name
            owners_equity_account_code: Account that funds the opening balance
        """
        self.journal = journal
        self.registry = registry
        self.owners_equity_account_code = owners_equity_account_code

    def is_first_transaction(self, bank_code: str) -> bool:
        """True when no journal entry references ``bank_code`` yet."""
        return not any(entry.references(bank_code) for entry in self.journal.entries)

    @staticmethod
    def prior_balance(entry: LedgerEntry, bank_code: str) -> Decimal:
        """Bank balance before ``entry``, derived from the balance reported after it."""
        movement = entry.debit_amount_for(bank_code) - entry.credit_amount_for(bank_code)
        return entry.bank_balance - movement

    def build_opening_entry(self, entry: LedgerEntry) -> Optional[LedgerEntry]:
        """Opening entry for ``entry``'s bank account, or None when it would be zero."""
        bank_code = bank_account_code(entry, self.registry)
        prior = self.prior_balance(entry, bank_code)
        if prior == ZERO:
            return None

        bank = self.registry.lookup(bank_code)
        bank_name = bank.name if bank is not None else bank_code
        amount = abs(prior)
        equity_line = [SplitLine(self.owners_equity_account_code, amount)]
        bank_line = [SplitLine(bank_code, amount)]
        if prior > 0:
            debit_lines, credit_lines = bank_line, equity_line
        else:
            debit_lines, credit_lines = equity_line, bank_line

        return LedgerEntry(
            date=entry.date - timedelta(days=1),
            description=f"Opening Balance - {bank_name}",
            debit_lines=debit_lines,
            credit_lines=credit_lines,
            bank_balance=prior,
        )

    def maybe_bootstrap(self, entry: LedgerEntry) -> Optional[LedgerEntry]:
        """Append an opening entry if ``entry`` is the first for its bank account.

        Returns:
            The appended opening entry, or None if nothing was appended
        """
        bank_code = bank_account_code(entry, self.registry)
        if not self.is_first_transaction(bank_code):
            return None

        opening = self.build_opening_entry(entry)
        if opening is None:
            logger.debug("Bank account %s starts from a zero balance; no opening entry", bank_code)
            return None

        self.journal.append(opening)
        logger.info(
            "Recorded opening balance of $%s for bank account %s on %s",
            opening.bank_balance,
            bank_code,
            opening.date.isoformat(),
        )
        return opening
