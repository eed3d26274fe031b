"""Bank statement loading domain service."""

import csv
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Optional

from gstledger.domain.account import AccountRegistry
from gstledger.domain.entities import BankImportFile, RawBankRow
from gstledger.domain.errors import ValidationError
from gstledger.domain.money import to_money
from gstledger.logging_config import get_logger
from gstledger.utils.amount_parser import parse_amount
from gstledger.utils.date_parser import parse_statement_date

logger = get_logger("domain.bank_statement")

REQUIRED_COLUMNS = ("date", "description", "debit", "credit", "balance")


class BankRowSource(ABC):
    """Supplies every statement row currently loaded."""

    @abstractmethod
    def all_raw_rows(self) -> list[RawBankRow]:
        """Return the rows of all loaded statements."""
        pass

    @abstractmethod
    def loaded_files(self) -> list[BankImportFile]:
        """Return the loaded statements, one per file."""
        pass


class InMemoryRowSource(BankRowSource):
    """Row source backed by a plain list of rows."""

    def __init__(self, rows: Iterable[RawBankRow] = ()):
        self.rows = list(rows)

    def add(self, *rows: RawBankRow) -> None:
        self.rows.extend(rows)

    def all_raw_rows(self) -> list[RawBankRow]:
        return list(self.rows)

    def loaded_files(self) -> list[BankImportFile]:
        """Group the rows into one file per bank account, in first-seen order."""
        grouped: dict[str, list[RawBankRow]] = {}
        for row in self.rows:
            grouped.setdefault(row.bank_account_code, []).append(row)
        return [BankImportFile(bank_account_code=code, rows=tuple(rows)) for code, rows in grouped.items()]


class BankStatementService(BankRowSource):
    """Service for reading bank statement CSV files.

    Each statement file is named after the bank account it belongs to, e.g.
    ``001.csv`` holds rows for account ``001``. Files are expected to have a
    header row with ``date``, ``description``, ``debit``, ``credit`` and
    ``balance`` columns; optional ``account`` and ``reason`` columns carry a
    pre-assigned account code and a note.
    """

    def __init__(self, inputs_dir: Path, registry: AccountRegistry):
        """Initialize bank statement service.

        Args:
            inputs_dir: Directory holding ``<bank code>.csv`` statement files
            registry: Account registry used to check that bank codes exist
        """
        self.inputs_dir = Path(inputs_dir)
        self.registry = registry
        self._files: Optional[dict[str, BankImportFile]] = None

    def load_files(self) -> list[BankImportFile]:
        """(Re)read every statement file in the input directory.

        Files whose name is not a Bank account code are skipped with a warning.
        A file that cannot be read as a statement is kept with no rows and the
        reason in its ``errors``. A missing input directory yields no files.
        """
        files: dict[str, BankImportFile] = {}
        if not self.inputs_dir.is_dir():
            logger.warning("Statement directory %s does not exist", self.inputs_dir)
        else:
            for csv_path in sorted(self.inputs_dir.glob("*.csv")):
                bank_code = csv_path.stem
                account = self.registry.lookup(bank_code)
                if account is None or not account.is_bank:
                    logger.warning("Skipped %s: '%s' is not a bank account code", csv_path.name, bank_code)
                    continue
                try:
                    files[str(csv_path)] = self._read_file(csv_path, bank_code)
                except ValidationError as e:
                    logger.warning("Skipped %s: %s", csv_path.name, e)
                    files[str(csv_path)] = BankImportFile(
                        bank_account_code=bank_code, rows=(), source=str(csv_path), errors=(str(e),)
                    )
        self._files = files
        return list(files.values())

    def load_single_file(self, csv_file_path: str, bank_code: Optional[str] = None) -> BankImportFile:
        """Read one statement file and add it to the loaded statements.

        Args:
            csv_file_path: Path to the statement CSV
            bank_code: Bank account code; defaults to the file name stem

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValidationError: If the bank code is not a Bank account
        """
        csv_path = Path(csv_file_path)
        if not csv_path.exists():
            raise FileNotFoundError(f"Statement file not found: {csv_file_path}")

        bank_code = bank_code or csv_path.stem
        account = self.registry.lookup(bank_code)
        if account is None or not account.is_bank:
            raise ValidationError(f"'{bank_code}' is not a bank account code")

        if self._files is None:
            self._files = {}
        import_file = self._read_file(csv_path, bank_code)
        self._files[str(csv_path)] = import_file
        return import_file

    def loaded_files(self) -> list[BankImportFile]:
        """Statement files loaded so far, reading the input directory on first use."""
        if self._files is None:
            self.load_files()
        return list(self._files.values())

    def all_raw_rows(self) -> list[RawBankRow]:
        rows = []
        for import_file in self.loaded_files():
            rows.extend(import_file.rows)
        return rows

    def _read_file(self, csv_path: Path, bank_code: str) -> BankImportFile:
        rows = []
        errors = []
        with open(csv_path, "r", encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f)
            if reader.fieldnames is None:
                return BankImportFile(bank_account_code=bank_code, rows=(), source=str(csv_path))
            reader.fieldnames = [name.strip().lower() for name in reader.fieldnames]
            missing = [col for col in REQUIRED_COLUMNS if col not in reader.fieldnames]
            if missing:
                raise ValidationError(f"Statement {csv_path.name} is missing columns: {', '.join(missing)}")

            for row_num, record in enumerate(reader, start=2):  # Header is row 1
                values = {key: (value or "").strip() for key, value in record.items() if key is not None}
                if not any(values.values()):
                    continue
                try:
                    rows.append(self._to_row(values, bank_code))
                except ValidationError as e:
                    errors.append(f"{csv_path.name} row {row_num}: {e}")

        rows.sort(key=lambda row: row.date)
        for message in errors:
            logger.warning(message)
        return BankImportFile(
            bank_account_code=bank_code,
            rows=tuple(rows),
            source=str(csv_path),
            errors=tuple(errors),
        )

    @staticmethod
    def _to_row(values: dict[str, str], bank_code: str) -> RawBankRow:
        if not values["date"]:
            raise ValidationError("Missing date")
        if not values["balance"]:
            raise ValidationError("Missing balance")
        row = RawBankRow(
            date=parse_statement_date(values["date"]),
            description=values["description"],
            debit_text=values["debit"],
            credit_text=values["credit"],
            running_balance=to_money(parse_amount(values["balance"])),
            bank_account_code=bank_code,
            assigned_account_code=values.get("account", ""),
            reason=values.get("reason", ""),
        )
        if row.gross_amount <= 0:
            raise ValidationError(f"Amount must be positive, got {row.gross_amount}")
        return row
