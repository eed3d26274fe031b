"""Bank statement import domain service."""

from dataclasses import replace
from typing import Any, Iterable, Optional

from gstledger.domain.entities import BankImportFile
from gstledger.domain.errors import ValidationError
from gstledger.domain.posting import PostingBuilder
from gstledger.domain.reconciliation import ReconciliationEngine
from gstledger.logging_config import get_logger

logger = get_logger("domain.import_service")

UNCATEGORIZED_REASON = "Imported - needs categorization"


class StatementImportService:
    """Post statement rows to the journal through the reconciliation engine."""

    def __init__(
        self,
        statements,
        builder: PostingBuilder,
        engine: ReconciliationEngine,
        uncategorized_account_code: str,
    ):
        """Initialize statement import service.

        Args:
            statements: BankStatementService providing the loaded files
            builder: Posting builder turning rows into entries
            engine: Reconciliation engine that appends or suppresses entries
            uncategorized_account_code: Account for rows with no account yet
        """
        self.statements = statements
        self.builder = builder
        self.engine = engine
        self.uncategorized_account_code = uncategorized_account_code

    def import_statements(self, files: Optional[Iterable[BankImportFile]] = None) -> dict[str, Any]:
        """Import rows one at a time, in file order.

        Args:
            files: Statement files to import; defaults to every loaded file

        Returns:
            Dict with import statistics:
            - imported: number of entries appended
            - skipped: number of rows already in the journal
            - warnings: posting warnings (e.g. unresolved account codes)
            - errors: rows that could not be posted, plus file-level read errors

        Raises:
            IntegrityViolationError: If an entry cannot be traced to a statement row
        """
        if files is None:
            files = self.statements.loaded_files()

        imported = 0
        skipped = 0
        warnings = []
        errors = []

        for import_file in files:
            errors.extend(import_file.errors)
            for row in import_file.rows:
                if not row.assigned_account_code.strip():
                    row = replace(
                        row,
                        assigned_account_code=self.uncategorized_account_code,
                        reason=row.reason or UNCATEGORIZED_REASON,
                    )
                try:
                    result = self.builder.build(row)
                    appended = self.engine.try_append(result.entry)
                except ValidationError as e:
                    errors.append(f"{row.date.isoformat()} '{row.description}': {e}")
                    continue

                if appended:
                    imported += 1
                    if result.warning:
                        warnings.append(result.warning)
                else:
                    skipped += 1

        logger.info("Statement import finished: %d imported, %d skipped, %d errors", imported, skipped, len(errors))
        return {
            "imported": imported,
            "skipped": skipped,
            "warnings": warnings,
            "errors": errors,
        }
