"""Tests for domain entities."""

import pytest
from datetime import date
from decimal import Decimal

from gstledger.domain.entities import (
    Account,
    AccountCategory,
    LedgerEntry,
    RawBankRow,
    SplitLine,
    TaxTreatment,
)
from gstledger.domain.errors import UnbalancedEntryError, ValidationError


def _entry(**overrides):
    values = dict(
        date=date(2024, 7, 1),
        description="Office Supplies",
        debit_lines=[SplitLine("420", Decimal("100.00")), SplitLine("506", Decimal("10.00"))],
        credit_lines=[SplitLine("001", Decimal("110.00"))],
        bank_balance=Decimal("890.00"),
    )
    values.update(overrides)
    return LedgerEntry(**values)


class TestAccount:
    """Tests for Account entity."""

    def test_debit_normal_categories(self):
        """Assets and expenses grow with debits, everything else with credits."""
        assert Account("001", "Cheque", AccountCategory.BANK).is_debit_normal
        assert Account("420", "Office", AccountCategory.EXPENSE).is_debit_normal
        assert Account("310", "Purchases", AccountCategory.COGS).is_debit_normal
        assert not Account("200", "Sales", AccountCategory.REVENUE).is_debit_normal
        assert not Account("970", "Equity", AccountCategory.EQUITY).is_debit_normal
        assert not Account("506", "GST", AccountCategory.CURRENT_LIABILITY).is_debit_normal
        assert not Account("710", "Depreciation", AccountCategory.DEPRECIATION).is_debit_normal

    def test_account_immutability(self):
        """Test that Account entities are immutable."""
        account = Account("001", "Cheque", AccountCategory.BANK)
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            account.name = "New Name"

    def test_category_from_label(self):
        assert AccountCategory.from_label("Current Liability") is AccountCategory.CURRENT_LIABILITY
        assert AccountCategory.from_label("current_asset") is AccountCategory.CURRENT_ASSET
        assert AccountCategory.from_label("bank") is AccountCategory.BANK
        with pytest.raises(ValidationError):
            AccountCategory.from_label("Imaginary")

    def test_tax_treatment_from_label(self):
        assert TaxTreatment.from_label("GST on Expenses") is TaxTreatment.GST_ON_EXPENSES
        assert TaxTreatment.from_label("bas_excluded") is TaxTreatment.BAS_EXCLUDED
        with pytest.raises(ValidationError):
            TaxTreatment.from_label("VAT")


class TestSplitLine:
    """Tests for SplitLine entity."""

    def test_amount_not_rounded(self):
        assert SplitLine("420", Decimal("10.005")).amount == Decimal("10.005")
        assert SplitLine("420", 0.1).amount == Decimal("0.1")
        assert SplitLine("506", Decimal("0.004")).amount == Decimal("0.004")

    @pytest.mark.parametrize("amount", [Decimal("0"), Decimal("-5.00"), Decimal("-0.004")])
    def test_non_positive_amount_rejected(self, amount):
        with pytest.raises(ValidationError):
            SplitLine("420", amount)


class TestLedgerEntry:
    """Tests for LedgerEntry entity."""

    def test_balanced_entry(self):
        entry = _entry()
        assert entry.is_balanced
        assert entry.amount == Decimal("110.00")
        assert entry.debit_total == entry.credit_total
        assert entry.account_codes() == {"420", "506", "001"}

    def test_lines_stored_as_tuples(self):
        entry = _entry()
        assert isinstance(entry.debit_lines, tuple)
        assert isinstance(entry.credit_lines, tuple)

    def test_unbalanced_entry_rejected(self):
        """The error names the entry and both totals."""
        with pytest.raises(UnbalancedEntryError) as exc_info:
            _entry(credit_lines=[SplitLine("001", Decimal("100.00"))])
        message = str(exc_info.value)
        assert "Office Supplies" in message
        assert "2024-07-01" in message
        assert "$110.00" in message
        assert "$100.00" in message

    def test_empty_side_rejected(self):
        with pytest.raises(ValidationError):
            _entry(debit_lines=[])

    def test_amounts_per_account(self):
        entry = _entry()
        assert entry.debit_amount_for("420") == Decimal("100.00")
        assert entry.credit_amount_for("420") == Decimal("0.00")
        assert entry.credit_amount_for("001") == Decimal("110.00")
        assert entry.references("506")
        assert not entry.references("999")

    def test_unrounded_split_balances(self):
        tax = Decimal("100.00") * Decimal("0.10") / Decimal("1.10")
        entry = _entry(
            debit_lines=[SplitLine("420", Decimal("100.00") - tax), SplitLine("506", tax)],
            credit_lines=[SplitLine("001", Decimal("100.00"))],
        )
        assert entry.is_balanced
        assert entry.amount == Decimal("100.00")

    def test_entry_ids_are_unique(self):
        assert _entry().entry_id != _entry().entry_id

    def test_bank_balance_rounded(self):
        assert _entry(bank_balance=Decimal("12.345")).bank_balance == Decimal("12.35")


class TestRawBankRow:
    """Tests for RawBankRow entity."""

    def _row(self, debit="", credit=""):
        return RawBankRow(
            date=date(2024, 7, 1),
            description="Coffee",
            debit_text=debit,
            credit_text=credit,
            running_balance=Decimal("100.00"),
            bank_account_code="001",
        )

    def test_money_out(self):
        row = self._row(debit="$1,100.50")
        assert row.is_money_out
        assert not row.is_money_in
        assert row.gross_amount == Decimal("1100.50")

    def test_money_in(self):
        row = self._row(credit="250")
        assert row.is_money_in
        assert row.gross_amount == Decimal("250.00")

    @pytest.mark.parametrize("debit,credit", [("", ""), ("10.00", "10.00"), ("  ", "")])
    def test_gross_amount_needs_exactly_one_side(self, debit, credit):
        with pytest.raises(ValidationError):
            self._row(debit=debit, credit=credit).gross_amount
