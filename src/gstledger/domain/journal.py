"""General journal store."""

from datetime import date
from typing import Optional

from gstledger.database.base import Database
from gstledger.domain.account import AccountRegistry
from gstledger.domain.entities import LedgerEntry
from gstledger.domain.errors import (
    DomainError,
    JournalLoadError,
    NotFoundError,
    ValidationError,
    ambiguous_entry_id,
    corrupt_entry,
    entry_not_found,
)
from gstledger.domain.validation import validate_entry
from gstledger.logging_config import get_logger

logger = get_logger("domain.journal")


class GeneralJournalService:
    """Canonical ordered collection of journal entries.

    Entries live in memory and are mirrored to the database after every
    mutation. A mutation whose save fails is rolled back in memory before the
    error propagates, so callers never observe an unsaved entry.
    """

    def __init__(self, db: Database, registry: AccountRegistry, exporter=None):
        """Initialize general journal service.

        Args:
            db: Database instance
            registry: Account registry used to validate bank legs on load
            exporter: Optional object with an ``export(entries)`` method that
                regenerates the companion flat export after each save
        """
        self.db = db
        self.registry = registry
        self.exporter = exporter
        self._entries: Optional[list[LedgerEntry]] = None

    def load(self) -> list[LedgerEntry]:
        """(Re)load every entry from the database.

        Raises:
            JournalLoadError: If a stored entry is unbalanced or does not touch
                exactly one bank account after sanitizing
        """
        entries = self.db.load_entries()
        for position, entry in enumerate(entries):
            try:
                validate_entry(entry, self.registry)
            except DomainError as e:
                raise JournalLoadError(corrupt_entry(position, entry.description, e)) from e
        self._entries = list(entries)
        logger.debug("Loaded %d journal entries", len(self._entries))
        return list(self._entries)

    def _loaded(self) -> list[LedgerEntry]:
        if self._entries is None:
            self.load()
        return self._entries

    @property
    def entries(self) -> tuple[LedgerEntry, ...]:
        """Snapshot of the journal in its current order."""
        return tuple(self._loaded())

    def save(self) -> bool:
        """Sort entries by date and persist them, then refresh the export."""
        saved = self._write()
        self._export()
        return saved

    def _write(self) -> bool:
        entries = self._loaded()
        # Stable sort keeps same-day entries in insertion order.
        entries.sort(key=lambda entry: entry.date)
        return self.db.save_entries(list(entries))

    def _export(self) -> None:
        if self.exporter is None:
            return
        try:
            self.exporter.export(list(self._entries))
        except OSError:
            # The journal is already committed; the next save rewrites the export.
            logger.exception("Failed to refresh the journal export")

    def append(self, entry: LedgerEntry) -> None:
        """Append an entry and persist the journal.

        Raises:
            ValidationError: If an entry with the same id is already stored
        """
        entries = self._loaded()
        if any(existing.entry_id == entry.entry_id for existing in entries):
            raise ValidationError(f"Journal entry {entry.entry_id} is already recorded")
        snapshot = list(entries)
        entries.append(entry)
        self._persist(snapshot)

    def replace(self, entry_id: str, new_entry: LedgerEntry) -> bool:
        """Swap the entry with ``entry_id`` for ``new_entry``.

        Returns:
            False if no entry has that id
        """
        entries = self._loaded()
        for index, existing in enumerate(entries):
            if existing.entry_id == entry_id:
                snapshot = list(entries)
                entries[index] = new_entry
                self._persist(snapshot)
                return True
        return False

    def remove(self, entry_id: str) -> bool:
        """Delete the entry with ``entry_id``.

        Returns:
            False if no entry has that id
        """
        entries = self._loaded()
        for index, existing in enumerate(entries):
            if existing.entry_id == entry_id:
                snapshot = list(entries)
                del entries[index]
                self._persist(snapshot)
                return True
        return False

    def _persist(self, snapshot: list[LedgerEntry]) -> None:
        try:
            self._write()
        except Exception:
            self._entries = snapshot
            raise
        self._export()

    def get_entry(self, entry_id: str) -> Optional[LedgerEntry]:
        """Get an entry by its id, or None if it is not in the journal."""
        for entry in self._loaded():
            if entry.entry_id == entry_id:
                return entry
        return None

    def resolve_entry_id(self, prefix: str) -> LedgerEntry:
        """Find the entry whose id starts with ``prefix``.

        Raises:
            NotFoundError: If no entry matches
            ValidationError: If more than one entry matches
        """
        prefix = prefix.strip().lower()
        matches = [entry for entry in self._loaded() if prefix and entry.entry_id.startswith(prefix)]
        if not matches:
            raise NotFoundError(entry_not_found(prefix))
        if len(matches) > 1:
            raise ValidationError(ambiguous_entry_id(prefix, len(matches)))
        return matches[0]

    def entries_by_account(self, account_code: str) -> list[LedgerEntry]:
        """Entries with a debit or credit line on ``account_code``."""
        return [entry for entry in self._loaded() if entry.references(account_code)]

    def entries_by_date_range(self, start: Optional[date] = None, end: Optional[date] = None) -> list[LedgerEntry]:
        """Entries dated within ``start`` and ``end``, both inclusive.

        Either bound may be None to leave that side open.
        """
        return [
            entry
            for entry in self._loaded()
            if (start is None or entry.date >= start) and (end is None or entry.date <= end)
        ]

    def unknown_account_codes(self) -> dict[str, int]:
        """Account codes used in the journal but missing from the registry.

        Returns:
            Mapping of code to the number of entries using it
        """
        unknown: dict[str, int] = {}
        for entry in self._loaded():
            for code in entry.account_codes():
                if self.registry.lookup(code) is None:
                    unknown[code] = unknown.get(code, 0) + 1
        return dict(sorted(unknown.items()))
