"""Domain layer for gstledger.

Services are exported lazily: the database layer imports domain entities, and
the services import the database layer.
"""

_EXPORTS = {
    "ChartOfAccountsService": "gstledger.domain.account",
    "AccountRegistry": "gstledger.domain.account",
    "TaxSplitCalculator": "gstledger.domain.tax",
    "PostingBuilder": "gstledger.domain.posting",
    "Posted": "gstledger.domain.posting",
    "PostedWithWarning": "gstledger.domain.posting",
    "GeneralJournalService": "gstledger.domain.journal",
    "OpeningBalanceBootstrapper": "gstledger.domain.opening_balance",
    "ReconciliationEngine": "gstledger.domain.reconciliation",
    "ScanningTransactionMatcher": "gstledger.domain.matching",
    "BalanceCalculator": "gstledger.domain.balance",
    "BankStatementService": "gstledger.domain.bank_statement",
    "InMemoryRowSource": "gstledger.domain.bank_statement",
    "StatementImportService": "gstledger.domain.import_service",
    "CategorizationService": "gstledger.domain.categorization",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name):
    if name in _EXPORTS:
        import importlib

        return getattr(importlib.import_module(_EXPORTS[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
