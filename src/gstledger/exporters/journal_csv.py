"""Flat CSV export of the general journal."""

import csv
import io
from pathlib import Path
from typing import Iterable

from gstledger.domain.entities import LedgerEntry
from gstledger.logging_config import get_logger

logger = get_logger("exporters.journal_csv")

HEADER = ["Date", "Description", "Debit Total", "Credit Total", "Notes"]


class JournalCsvExporter:
    """Write one summary row per journal entry.

    The file is rewritten in full on every export so it always mirrors the
    stored journal.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def build_csv(self, entries: Iterable[LedgerEntry]) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(HEADER)
        for entry in entries:
            writer.writerow(
                [
                    entry.date.isoformat(),
                    entry.description,
                    f"{entry.debit_total:.2f}",
                    f"{entry.credit_total:.2f}",
                    entry.notes,
                ]
            )
        return buffer.getvalue()

    def export(self, entries: Iterable[LedgerEntry]) -> Path:
        entries = list(entries)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(self.build_csv(entries), encoding="utf-8")
        tmp_path.replace(self.path)
        logger.debug("Exported %d journal entries to %s", len(entries), self.path)
        return self.path
