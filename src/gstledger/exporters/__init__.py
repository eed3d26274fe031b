"""Companion exports of the general journal."""

from gstledger.exporters.journal_csv import JournalCsvExporter

__all__ = ["JournalCsvExporter"]
