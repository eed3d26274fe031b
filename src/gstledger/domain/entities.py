"""Domain model entities for gstledger.

These are pure data classes representing bookkeeping concepts, independent of
the database schema. Entries and lines are immutable; a categorised entry is a
new LedgerEntry that keeps the original's ``entry_id``.
"""

import uuid
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from gstledger.domain.errors import (
    UnbalancedEntryError,
    ValidationError,
    invalid_split_amount,
)
from gstledger.domain.money import BALANCE_TOLERANCE, ZERO, to_decimal, to_money
from gstledger.utils.amount_parser import parse_amount


class AccountCategory(str, Enum):
    """Account types found in the chart of accounts."""

    BANK = "Bank"
    CURRENT_ASSET = "Current Asset"
    FIXED_ASSET = "Fixed Asset"
    INVENTORY = "Inventory"
    CURRENT_LIABILITY = "Current Liability"
    EQUITY = "Equity"
    REVENUE = "Revenue"
    OTHER_INCOME = "Other Income"
    COGS = "COGS"
    EXPENSE = "Expense"
    DEPRECIATION = "Depreciation"

    @classmethod
    def from_label(cls, label: str) -> "AccountCategory":
        """Parse a category label, accepting enum names and display values."""
        normalized = label.strip().lower().replace("_", " ").replace("-", " ")
        for category in cls:
            if normalized in (category.value.lower(), category.name.lower().replace("_", " ")):
                return category
        raise ValidationError(f"Unknown account category '{label}'")


class TaxTreatment(str, Enum):
    """GST treatment of an account."""

    GST_ON_INCOME = "GST on Income"
    GST_ON_EXPENSES = "GST on Expenses"
    GST_FREE_EXPENSES = "GST Free Expenses"
    BAS_EXCLUDED = "BAS Excluded"
    GST_ON_CAPITAL = "GST on Capital"

    @classmethod
    def from_label(cls, label: str) -> "TaxTreatment":
        """Parse a tax treatment label, accepting enum names and display values."""
        normalized = label.strip().lower().replace("_", " ").replace("-", " ")
        for treatment in cls:
            if normalized in (treatment.value.lower(), treatment.name.lower().replace("_", " ")):
                return treatment
        raise ValidationError(f"Unknown tax treatment '{label}'")


DEBIT_NORMAL_CATEGORIES = frozenset(
    {
        AccountCategory.BANK,
        AccountCategory.CURRENT_ASSET,
        AccountCategory.FIXED_ASSET,
        AccountCategory.INVENTORY,
        AccountCategory.EXPENSE,
        AccountCategory.COGS,
    }
)


@dataclass(frozen=True)
class Account:
    """Chart of accounts entry."""

    code: str
    name: str
    category: AccountCategory
    tax_applicable: bool = False
    tax_treatment: TaxTreatment = TaxTreatment.BAS_EXCLUDED

    @property
    def is_bank(self) -> bool:
        return self.category is AccountCategory.BANK

    @property
    def is_debit_normal(self) -> bool:
        """True when the balance increases with debits."""
        return self.category in DEBIT_NORMAL_CATEGORIES


@dataclass(frozen=True)
class SplitLine:
    """One debit or credit line of a journal entry.

    Amounts keep their full Decimal precision and must be positive.
    """

    account_code: str
    amount: Decimal

    def __post_init__(self):
        amount = to_decimal(self.amount)
        if amount <= 0:
            raise ValidationError(invalid_split_amount(self.account_code, amount))
        object.__setattr__(self, "amount", amount)


def new_entry_id() -> str:
    """Return a fresh synthetic identifier for a journal entry."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class LedgerEntry:
    """Balanced general journal entry.

    ``bank_balance`` is the bank balance the source statement reported after
    this transaction. ``notes`` is free text and may carry a supplier hint.
    """

    date: date
    description: str
    debit_lines: tuple[SplitLine, ...]
    credit_lines: tuple[SplitLine, ...]
    bank_balance: Decimal
    notes: str = ""
    entry_id: str = field(default_factory=new_entry_id)

    def __post_init__(self):
        object.__setattr__(self, "debit_lines", tuple(self.debit_lines))
        object.__setattr__(self, "credit_lines", tuple(self.credit_lines))
        object.__setattr__(self, "bank_balance", to_money(self.bank_balance))
        if not self.debit_lines or not self.credit_lines:
            raise ValidationError(
                f"Entry '{self.description}' on {self.date.isoformat()} needs at least one debit and one credit line"
            )
        if not self.is_balanced:
            raise UnbalancedEntryError(self.date, self.description, self.debit_total, self.credit_total)

    @property
    def debit_total(self) -> Decimal:
        return sum((line.amount for line in self.debit_lines), ZERO)

    @property
    def credit_total(self) -> Decimal:
        return sum((line.amount for line in self.credit_lines), ZERO)

    @property
    def is_balanced(self) -> bool:
        return abs(self.debit_total - self.credit_total) <= BALANCE_TOLERANCE

    @property
    def amount(self) -> Decimal:
        """Entry total (the common debit and credit total) in cents."""
        return to_money(self.debit_total)

    @property
    def lines(self) -> tuple[SplitLine, ...]:
        return self.debit_lines + self.credit_lines

    def account_codes(self) -> set[str]:
        """Return every account code used on either side."""
        return {line.account_code for line in self.lines}

    def references(self, account_code: str) -> bool:
        return any(line.account_code == account_code for line in self.lines)

    def debit_amount_for(self, account_code: str) -> Decimal:
        return sum((line.amount for line in self.debit_lines if line.account_code == account_code), ZERO)

    def credit_amount_for(self, account_code: str) -> Decimal:
        return sum((line.amount for line in self.credit_lines if line.account_code == account_code), ZERO)


@dataclass(frozen=True)
class RawBankRow:
    """One row of an imported bank statement.

    Exactly one of ``debit_text`` (money leaving the bank) and ``credit_text``
    (money entering the bank) is populated. ``assigned_account_code`` is the
    account the row is categorised to; ``reason`` is copied into entry notes.
    """

    date: date
    description: str
    debit_text: str
    credit_text: str
    running_balance: Decimal
    bank_account_code: str
    assigned_account_code: str = ""
    reason: str = ""

    @property
    def is_money_out(self) -> bool:
        return bool(self.debit_text and self.debit_text.strip())

    @property
    def is_money_in(self) -> bool:
        return bool(self.credit_text and self.credit_text.strip())

    @property
    def gross_amount(self) -> Decimal:
        """Parse whichever amount column is populated.

        Raises:
            ValidationError: If neither or both columns are populated, or the
                populated column is not a number
        """
        if self.is_money_out == self.is_money_in:
            raise ValidationError(
                f"Statement row '{self.description}' on {self.date.isoformat()} must have exactly one "
                "of debit or credit populated"
            )
        text = self.debit_text if self.is_money_out else self.credit_text
        return to_money(parse_amount(text))


@dataclass(frozen=True)
class BankImportFile:
    """Rows parsed from one bank statement file."""

    bank_account_code: str
    rows: tuple[RawBankRow, ...]
    source: Optional[str] = None
    errors: tuple[str, ...] = ()
