"""Categorisation domain service."""

from typing import Optional

from gstledger.domain.entities import LedgerEntry
from gstledger.domain.errors import NotFoundError, ValidationError, entry_not_found
from gstledger.domain.journal import GeneralJournalService
from gstledger.domain.posting import PostingBuilder, PostingResult
from gstledger.domain.reconciliation import ReconciliationEngine


class CategorizationService:
    """Service for moving imported entries onto their proper accounts."""

    def __init__(
        self,
        journal: GeneralJournalService,
        builder: PostingBuilder,
        engine: ReconciliationEngine,
        uncategorized_account_code: str,
    ):
        """Initialize categorization service.

        Args:
            journal: General journal service
            builder: Posting builder used to recompute the GST split
            engine: Reconciliation engine through which entries are replaced
            uncategorized_account_code: Account holding entries not yet categorised
        """
        self.journal = journal
        self.builder = builder
        self.engine = engine
        self.uncategorized_account_code = uncategorized_account_code

    def recategorize(self, entry_id: str, account_code: str, notes: Optional[str] = None) -> PostingResult:
        """Post an entry's non-bank side to ``account_code``.

        Args:
            entry_id: Id of the entry to change
            account_code: New account code for the non-bank side
            notes: Replacement notes; None keeps the existing notes

        Returns:
            Posting result for the replacement entry; a warning result means
            the account code is not in the chart of accounts

        Raises:
            NotFoundError: If no entry has that id
            ValidationError: If the entry has no single bank leg or the
                replacement cannot be stored
        """
        entry = self.journal.get_entry(entry_id)
        if entry is None:
            raise NotFoundError(entry_not_found(entry_id))

        result = self.builder.rebuild(entry, account_code, notes=notes)
        if not self.engine.update(entry, result.entry):
            raise ValidationError(f"Journal entry {entry_id} could not be replaced")
        return result

    def uncategorized_entries(self) -> list[LedgerEntry]:
        """Entries whose non-bank side is still on the uncategorised account."""
        return self.journal.entries_by_account(self.uncategorized_account_code)
