"""Reconciliation of candidate entries against the journal and bank statements."""

from gstledger.domain.account import AccountRegistry
from gstledger.domain.entities import LedgerEntry
from gstledger.domain.errors import (
    IntegrityViolationError,
    ValidationError,
    bank_leg_changed,
    untraceable_entry,
)
from gstledger.domain.matching import TransactionMatcher
from gstledger.domain.opening_balance import OpeningBalanceBootstrapper
from gstledger.domain.validation import validate_entry
from gstledger.logging_config import get_logger

logger = get_logger("domain.reconciliation")


class ReconciliationEngine:
    """Append entries to the journal without duplicating statement rows.

    An entry is appended only while the statements hold more rows for its bank
    transaction than the journal already records. Legitimately repeated
    transactions are therefore all kept, and re-running an import is a no-op.
    Rows must be offered one at a time, each appended before the next is
    evaluated.
    """

    def __init__(
        self,
        journal,
        registry: AccountRegistry,
        matcher: TransactionMatcher,
        bootstrapper: OpeningBalanceBootstrapper,
    ):
        """Initialize reconciliation engine.

        Args:
            journal: General journal service
            registry: Account registry used to validate bank legs
            matcher: Counts journal and statement occurrences of a transaction
            bootstrapper: Adds opening balances for newly seen bank accounts
        """
        self.journal = journal
        self.registry = registry
        self.matcher = matcher
        self.bootstrapper = bootstrapper

    def try_append(self, entry: LedgerEntry) -> bool:
        """Append ``entry`` unless the journal already records it.

        Returns:
            True if appended, False if suppressed as a duplicate

        Raises:
            ValidationError: If the entry does not touch exactly one bank account
            IntegrityViolationError: If no statement row backs the entry
        """
        bank_code = validate_entry(entry, self.registry)

        source_count = self.matcher.count_source_matches(entry)
        if source_count == 0:
            raise IntegrityViolationError(untraceable_entry(entry.date, entry.description, entry.amount, bank_code))

        self.bootstrapper.maybe_bootstrap(entry)

        journal_count = self.matcher.count_journal_matches(entry)
        if source_count <= journal_count:
            logger.debug(
                "Skipped duplicate '%s' on %s for $%s (statement rows: %d, journal entries: %d)",
                entry.description,
                entry.date.isoformat(),
                entry.amount,
                source_count,
                journal_count,
            )
            return False

        self.journal.append(entry)
        logger.info("Appended '%s' on %s for $%s", entry.description, entry.date.isoformat(), entry.amount)
        return True

    def update(self, old_entry: LedgerEntry, new_entry: LedgerEntry) -> bool:
        """Replace ``old_entry`` with ``new_entry``, keeping its id.

        Returns:
            False if ``old_entry`` is not in the journal

        Raises:
            ValidationError: If the replacement changes the bank leg or balance
        """
        if self.journal.get_entry(old_entry.entry_id) is None:
            return False

        old_bank = validate_entry(old_entry, self.registry)
        new_bank = validate_entry(new_entry, self.registry)
        same_leg = (
            old_bank == new_bank
            and old_entry.debit_amount_for(old_bank) == new_entry.debit_amount_for(new_bank)
            and old_entry.credit_amount_for(old_bank) == new_entry.credit_amount_for(new_bank)
            and old_entry.bank_balance == new_entry.bank_balance
        )
        if not same_leg:
            raise ValidationError(bank_leg_changed(old_entry.entry_id))

        if new_entry.entry_id != old_entry.entry_id:
            new_entry = LedgerEntry(
                entry_id=old_entry.entry_id,
                date=new_entry.date,
                description=new_entry.description,
                debit_lines=new_entry.debit_lines,
                credit_lines=new_entry.credit_lines,
                bank_balance=new_entry.bank_balance,
                notes=new_entry.notes,
            )
        return self.journal.replace(old_entry.entry_id, new_entry)

    def remove(self, entry: LedgerEntry) -> bool:
        """Delete ``entry`` from the journal.

        Meant for manual corrections only.

        Returns:
            False if the entry is not in the journal
        """
        removed = self.journal.remove(entry.entry_id)
        if removed:
            logger.info("Removed entry %s ('%s' on %s)", entry.entry_id, entry.description, entry.date.isoformat())
        return removed
