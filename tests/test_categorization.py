"""Tests for the categorisation workflow."""

import pytest
from decimal import Decimal

from gstledger.domain.errors import NotFoundError
from gstledger.domain.posting import Posted, PostedWithWarning
from gstledger.utils.supplier_note_parser import extract_supplier

from conftest import BANK, GST_CLEARING, MEALS, OFFICE_SUPPLIES, UNCATEGORIZED, make_row


@pytest.fixture
def imported(ledger, row_source):
    """Ledger with two uncategorised statement rows imported."""
    row_source.add(
        make_row(description="Officeworks", debit="110.00", balance="890.00"),
        make_row(description="Cafe", debit="22.00", balance="868.00", reason="Supplier: Cafe Roma (confidence: 85%)"),
    )
    ledger.importer.import_statements()
    return ledger


def test_uncategorized_entries(imported):
    entries = imported.categorizer.uncategorized_entries()
    assert [entry.description for entry in entries] == ["Officeworks", "Cafe"]


def test_recategorize_applies_gst(imported):
    entry = imported.categorizer.uncategorized_entries()[0]

    result = imported.categorizer.recategorize(entry.entry_id, OFFICE_SUPPLIES)

    assert isinstance(result, Posted)
    updated = imported.journal.get_entry(entry.entry_id)
    assert [(line.account_code, line.amount) for line in updated.debit_lines] == [
        (OFFICE_SUPPLIES, Decimal("100.00")),
        (GST_CLEARING, Decimal("10.00")),
    ]
    assert updated.credit_lines == entry.credit_lines
    assert updated.notes == entry.notes
    assert [e.description for e in imported.categorizer.uncategorized_entries()] == ["Cafe"]


def test_recategorize_twice(imported):
    entry = imported.categorizer.uncategorized_entries()[0]
    imported.categorizer.recategorize(entry.entry_id, OFFICE_SUPPLIES)
    imported.categorizer.recategorize(entry.entry_id, MEALS, notes="Team lunch")

    updated = imported.journal.get_entry(entry.entry_id)
    assert {line.account_code for line in updated.debit_lines} == {MEALS, GST_CLEARING}
    assert updated.notes == "Team lunch"
    assert imported.balance_as_of(OFFICE_SUPPLIES) == Decimal("0.00")


def test_recategorize_unknown_code_warns(imported):
    entry = imported.categorizer.uncategorized_entries()[0]
    result = imported.categorizer.recategorize(entry.entry_id, "888")

    assert isinstance(result, PostedWithWarning)
    assert imported.journal.get_entry(entry.entry_id).debit_lines[0].account_code == "888"


def test_recategorize_missing_entry(imported):
    with pytest.raises(NotFoundError):
        imported.categorizer.recategorize("does-not-exist", MEALS)


def test_recategorize_back_to_uncategorised(imported):
    entry = imported.categorizer.uncategorized_entries()[0]
    imported.categorizer.recategorize(entry.entry_id, MEALS)
    imported.categorizer.recategorize(entry.entry_id, UNCATEGORIZED)
    assert len(imported.categorizer.uncategorized_entries()) == 2
    assert imported.balance_as_of(BANK) == Decimal("868.00")


def test_extract_supplier():
    assert extract_supplier("Supplier: Cafe Roma (confidence: 85%)") == ("Cafe Roma", 0.85)
    assert extract_supplier("paid cash. Supplier: A & B Pty Ltd (confidence: 100%) checked") == ("A & B Pty Ltd", 1.0)
    assert extract_supplier("Imported - needs categorization") is None
    assert extract_supplier("") is None
    assert extract_supplier(None) is None
