"""Turn bank statement rows into balanced journal entries."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from gstledger.domain.account import AccountRegistry
from gstledger.domain.entities import LedgerEntry, RawBankRow, SplitLine
from gstledger.domain.errors import ValidationError, unresolved_account_code
from gstledger.domain.tax import TaxSplitCalculator
from gstledger.domain.validation import bank_account_code
from gstledger.logging_config import get_logger

logger = get_logger("domain.posting")


@dataclass(frozen=True)
class Posted:
    """An entry built without any caveats."""

    entry: LedgerEntry

    @property
    def warning(self) -> Optional[str]:
        return None


@dataclass(frozen=True)
class PostedWithWarning:
    """An entry built fail-open; ``reason`` says what was assumed."""

    entry: LedgerEntry
    reason: str

    @property
    def warning(self) -> Optional[str]:
        return self.reason


PostingResult = Union[Posted, PostedWithWarning]


class PostingBuilder:
    """Build journal entries from statement rows, applying the GST split."""

    def __init__(self, registry: AccountRegistry, tax_calculator: TaxSplitCalculator):
        """Initialize posting builder.

        Args:
            registry: Account registry used to resolve account codes
            tax_calculator: Calculator for splitting GST out of gross amounts
        """
        self.registry = registry
        self.tax_calculator = tax_calculator

    def build(self, row: RawBankRow) -> PostingResult:
        """Build a balanced entry for one statement row.

        Money leaving the bank debits the categorised account (and GST
        clearing) and credits the bank. Money entering the bank does the
        reverse. An unknown account code is posted without a GST split and
        reported as a warning.

        Raises:
            ValidationError: If the row has no usable amount or no account code
        """
        account_code = row.assigned_account_code.strip()
        if not account_code:
            raise ValidationError(
                f"Statement row '{row.description}' on {row.date.isoformat()} has no account code"
            )
        if account_code == row.bank_account_code:
            raise ValidationError(
                f"Statement row '{row.description}' on {row.date.isoformat()} is categorised to its own "
                f"bank account {account_code}"
            )

        gross = row.gross_amount
        if gross <= 0:
            raise ValidationError(
                f"Statement row '{row.description}' on {row.date.isoformat()} has non-positive amount {gross}"
            )

        debit_lines, credit_lines = self._sides(account_code, row.bank_account_code, gross, row.is_money_out)
        entry = LedgerEntry(
            date=row.date,
            description=row.description,
            debit_lines=debit_lines,
            credit_lines=credit_lines,
            bank_balance=row.running_balance,
            notes=row.reason,
        )
        return self._result(entry, account_code)

    def rebuild(self, entry: LedgerEntry, account_code: str, notes: Optional[str] = None) -> PostingResult:
        """Re-post an existing entry to a different account.

        The bank leg, bank balance, date, description and id are kept; the
        other side is recomputed with the GST split for ``account_code``.

        Raises:
            ValidationError: If the entry has no single bank leg, or the new
                account is the bank account itself
        """
        bank_code = bank_account_code(entry, self.registry)
        if account_code == bank_code:
            raise ValidationError(f"Cannot categorise entry {entry.entry_id} to its own bank account {bank_code}")

        money_out = entry.credit_amount_for(bank_code) > 0
        debit_lines, credit_lines = self._sides(account_code, bank_code, entry.amount, money_out)
        rebuilt = LedgerEntry(
            entry_id=entry.entry_id,
            date=entry.date,
            description=entry.description,
            debit_lines=debit_lines,
            credit_lines=credit_lines,
            bank_balance=entry.bank_balance,
            notes=entry.notes if notes is None else notes,
        )
        return self._result(rebuilt, account_code)

    def _sides(
        self, account_code: str, bank_code: str, gross: Decimal, money_out: bool
    ) -> tuple[list[SplitLine], list[SplitLine]]:
        split = self.tax_calculator.split(account_code, gross)
        bank_line = [SplitLine(bank_code, gross)]
        if money_out:
            return split, bank_line
        return bank_line, split

    def _result(self, entry: LedgerEntry, account_code: str) -> PostingResult:
        if self.registry.lookup(account_code) is not None:
            return Posted(entry)
        reason = unresolved_account_code(account_code, entry.description)
        logger.warning(reason)
        return PostedWithWarning(entry, reason)
