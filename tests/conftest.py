"""Shared pytest fixtures for gstledger tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest
from click.testing import CliRunner

from gstledger.config import LedgerSettings
from gstledger.database.factories import create_sqlite_database
from gstledger.domain.bank_statement import InMemoryRowSource
from gstledger.domain.entities import AccountCategory, RawBankRow, TaxTreatment
from gstledger.ledger import create_ledger

BANK = "001"
SAVINGS = "002"
OFFICE_SUPPLIES = "420"
MEALS = "425"
BANK_FEES = "404"
SALES = "200"
GST_CLEARING = "506"
OWNERS_EQUITY = "970"
UNCATEGORIZED = "999"


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def seeded_db(temp_db):
    """Temporary database with a small chart of accounts."""
    accounts = [
        (BANK, "Business Cheque", AccountCategory.BANK, False, TaxTreatment.BAS_EXCLUDED),
        (SAVINGS, "Business Savings", AccountCategory.BANK, False, TaxTreatment.BAS_EXCLUDED),
        (SALES, "Sales", AccountCategory.REVENUE, True, TaxTreatment.GST_ON_INCOME),
        (BANK_FEES, "Bank Fees", AccountCategory.EXPENSE, False, TaxTreatment.GST_FREE_EXPENSES),
        (OFFICE_SUPPLIES, "Office Supplies", AccountCategory.EXPENSE, True, TaxTreatment.GST_ON_EXPENSES),
        (MEALS, "Meals", AccountCategory.EXPENSE, True, TaxTreatment.GST_ON_EXPENSES),
        (GST_CLEARING, "GST Clearing", AccountCategory.CURRENT_LIABILITY, False, TaxTreatment.BAS_EXCLUDED),
        (OWNERS_EQUITY, "Owner's Equity", AccountCategory.EQUITY, False, TaxTreatment.BAS_EXCLUDED),
        (UNCATEGORIZED, "Uncategorised", AccountCategory.EXPENSE, False, TaxTreatment.BAS_EXCLUDED),
    ]
    for code, name, category, gst, treatment in accounts:
        temp_db.create_account(code=code, name=name, category=category, tax_applicable=gst, tax_treatment=treatment)
    return temp_db


@pytest.fixture
def cli_runner():
    """Create a CliRunner for CLI command tests."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path):
    """Ledger settings pointing at temporary input and export paths."""
    return LedgerSettings(inputs_dir=tmp_path / "inputs", export_path=tmp_path / "journal.csv")


@pytest.fixture
def row_source():
    """Empty in-memory statement row source."""
    return InMemoryRowSource()


@pytest.fixture
def ledger(seeded_db, settings, row_source):
    """Ledger wired to the seeded database and the in-memory row source."""
    return create_ledger(seeded_db, settings, row_source=row_source)


def make_row(
    description="Office Supplies",
    debit="",
    credit="",
    balance="890.00",
    on=date(2024, 7, 1),
    bank=BANK,
    account="",
    reason="",
):
    """Build a statement row with sensible defaults."""
    return RawBankRow(
        date=on,
        description=description,
        debit_text=debit,
        credit_text=credit,
        running_balance=Decimal(balance),
        bank_account_code=bank,
        assigned_account_code=account,
        reason=reason,
    )
