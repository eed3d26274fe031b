"""Composition root wiring the ledger engine together."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from gstledger.config import LedgerSettings
from gstledger.database.base import Database
from gstledger.domain.account import ChartOfAccountsService
from gstledger.domain.balance import BalanceCalculator
from gstledger.domain.bank_statement import BankRowSource, BankStatementService
from gstledger.domain.categorization import CategorizationService
from gstledger.domain.entities import LedgerEntry
from gstledger.domain.import_service import StatementImportService
from gstledger.domain.journal import GeneralJournalService
from gstledger.domain.matching import ScanningTransactionMatcher
from gstledger.domain.opening_balance import OpeningBalanceBootstrapper
from gstledger.domain.posting import PostingBuilder
from gstledger.domain.reconciliation import ReconciliationEngine
from gstledger.domain.tax import TaxSplitCalculator
from gstledger.exporters.journal_csv import JournalCsvExporter


@dataclass
class Ledger:
    """Every ledger component for one company data set."""

    settings: LedgerSettings
    accounts: ChartOfAccountsService
    journal: GeneralJournalService
    statements: BankRowSource
    tax_calculator: TaxSplitCalculator
    builder: PostingBuilder
    bootstrapper: OpeningBalanceBootstrapper
    engine: ReconciliationEngine
    balances: BalanceCalculator
    importer: StatementImportService
    categorizer: CategorizationService

    def try_append(self, entry: LedgerEntry) -> bool:
        return self.engine.try_append(entry)

    def update(self, old_entry: LedgerEntry, new_entry: LedgerEntry) -> bool:
        return self.engine.update(old_entry, new_entry)

    def remove(self, entry: LedgerEntry) -> bool:
        return self.engine.remove(entry)

    def balance_as_of(self, account_code: str, as_of: Optional[date] = None) -> Decimal:
        return self.balances.balance_as_of(account_code, as_of)

    def entries_by_account(self, account_code: str) -> list[LedgerEntry]:
        return self.journal.entries_by_account(account_code)

    def entries_by_date_range(self, start: Optional[date] = None, end: Optional[date] = None) -> list[LedgerEntry]:
        return self.journal.entries_by_date_range(start, end)


def create_ledger(
    db: Database,
    settings: Optional[LedgerSettings] = None,
    row_source: Optional[BankRowSource] = None,
) -> Ledger:
    """Build a ledger from a database and settings.

    Args:
        db: Database holding the chart of accounts and the journal
        settings: Account codes and paths; defaults to LedgerSettings()
        row_source: Source of statement rows for reconciliation; defaults to
            a BankStatementService reading ``settings.inputs_dir``

    Returns:
        Wired Ledger
    """
    if settings is None:
        settings = LedgerSettings()

    accounts = ChartOfAccountsService(db)
    exporter = JournalCsvExporter(settings.export_path) if settings.export_path else None
    journal = GeneralJournalService(db, accounts, exporter=exporter)
    if row_source is None:
        row_source = BankStatementService(settings.inputs_dir, accounts)

    tax_calculator = TaxSplitCalculator(accounts, settings.gst_clearing_account_code, settings.gst_rate)
    builder = PostingBuilder(accounts, tax_calculator)
    bootstrapper = OpeningBalanceBootstrapper(journal, accounts, settings.owners_equity_account_code)
    matcher = ScanningTransactionMatcher(journal, row_source, accounts)
    engine = ReconciliationEngine(journal, accounts, matcher, bootstrapper)

    return Ledger(
        settings=settings,
        accounts=accounts,
        journal=journal,
        statements=row_source,
        tax_calculator=tax_calculator,
        builder=builder,
        bootstrapper=bootstrapper,
        engine=engine,
        balances=BalanceCalculator(journal, accounts),
        importer=StatementImportService(row_source, builder, engine, settings.uncategorized_account_code),
        categorizer=CategorizationService(journal, builder, engine, settings.uncategorized_account_code),
    )
