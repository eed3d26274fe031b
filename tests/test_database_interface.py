"""Tests for the SQLAlchemy database implementation."""

import pytest
from datetime import date
from decimal import Decimal

from gstledger.database.base import Database
from gstledger.domain.entities import AccountCategory, LedgerEntry, SplitLine, TaxTreatment
from gstledger.domain.errors import ConflictError


def _entry(description, on=date(2024, 7, 1)):
    return LedgerEntry(
        date=on,
        description=description,
        debit_lines=[SplitLine("404", Decimal("10.00"))],
        credit_lines=[SplitLine("001", Decimal("10.00"))],
        bank_balance=Decimal("90.00"),
    )


def test_implements_interface(temp_db):
    assert isinstance(temp_db, Database)


def test_create_and_get_account(temp_db):
    code = temp_db.create_account(
        code="420",
        name="Office Supplies",
        category=AccountCategory.EXPENSE,
        tax_applicable=True,
        tax_treatment=TaxTreatment.GST_ON_EXPENSES,
    )
    assert code == "420"

    account = temp_db.get_account("420")
    assert account.name == "Office Supplies"
    assert account.tax_applicable is True
    assert temp_db.get_account("999") is None


def test_duplicate_account_code(temp_db):
    temp_db.create_account(code="001", name="Cheque", category=AccountCategory.BANK)
    with pytest.raises(ConflictError):
        temp_db.create_account(code="001", name="Other", category=AccountCategory.BANK)


def test_list_accounts_filtered(seeded_db):
    banks = seeded_db.list_accounts(category=AccountCategory.BANK)
    assert [acc.code for acc in banks] == ["001", "002"]
    assert len(seeded_db.list_accounts()) == 9


def test_save_replaces_journal(temp_db):
    temp_db.save_entries([_entry("One"), _entry("Two")])
    temp_db.save_entries([_entry("Three")])

    assert [entry.description for entry in temp_db.load_entries()] == ["Three"]


def test_load_keeps_saved_order(temp_db):
    entries = [_entry("B", date(2024, 7, 2)), _entry("A", date(2024, 7, 1))]
    temp_db.save_entries(entries)
    assert [entry.description for entry in temp_db.load_entries()] == ["B", "A"]


def test_empty_journal(temp_db):
    assert temp_db.load_entries() == []
    assert temp_db.save_entries([]) is True
