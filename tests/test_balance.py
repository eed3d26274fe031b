"""Tests for the balance calculator."""

from datetime import date
from decimal import Decimal

from gstledger.domain.entities import LedgerEntry, SplitLine

from conftest import BANK, GST_CLEARING, OFFICE_SUPPLIES, OWNERS_EQUITY, SALES, make_row


def _append_row(ledger, row_source, row):
    row_source.add(row)
    return ledger.try_append(ledger.builder.build(row).entry)


def test_opening_plus_deposit(ledger, row_source):
    """Opening balance of 500 and a deposit of 200 leaves 700 in the bank."""
    _append_row(ledger, row_source, make_row(description="Deposit", credit="200.00", balance="700.00", account=SALES))

    assert ledger.balance_as_of(BANK, date(2024, 6, 30)) == Decimal("500.00")
    assert ledger.balance_as_of(BANK, date(2024, 7, 31)) == Decimal("700.00")


def test_balance_ignores_later_entries(ledger, row_source):
    _append_row(ledger, row_source, make_row(debit="110.00", balance="890.00", account=OFFICE_SUPPLIES))
    _append_row(
        ledger,
        row_source,
        make_row(description="Stapler", debit="22.00", balance="868.00", on=date(2024, 8, 1), account=OFFICE_SUPPLIES),
    )

    assert ledger.balance_as_of(BANK, date(2024, 7, 31)) == Decimal("890.00")
    assert ledger.balance_as_of(BANK, date(2024, 8, 1)) == Decimal("868.00")


def test_credit_normal_accounts(ledger, row_source):
    """GST collected and paid nets on the clearing liability."""
    _append_row(ledger, row_source, make_row(description="Sale", credit="330.00", balance="330.00", account=SALES))
    _append_row(
        ledger,
        row_source,
        make_row(description="Paper", debit="110.00", balance="220.00", on=date(2024, 7, 2), account=OFFICE_SUPPLIES),
    )

    as_of = date(2024, 7, 31)
    assert ledger.balance_as_of(SALES, as_of) == Decimal("300.00")
    assert ledger.balance_as_of(GST_CLEARING, as_of) == Decimal("20.00")
    assert ledger.balance_as_of(OFFICE_SUPPLIES, as_of) == Decimal("100.00")
    assert ledger.balance_as_of(BANK, as_of) == Decimal("220.00")


def test_equity_credit_normal(ledger, row_source):
    _append_row(ledger, row_source, make_row(debit="10.00", balance="90.00", account=OFFICE_SUPPLIES))
    assert ledger.balance_as_of(OWNERS_EQUITY, date(2024, 7, 31)) == Decimal("100.00")


def test_unknown_account_is_zero(ledger):
    assert ledger.balance_as_of("4242", date(2024, 7, 31)) == Decimal("0")


def test_defaults_to_today(ledger, row_source):
    _append_row(ledger, row_source, make_row(credit="50.00", balance="50.00", account=SALES))
    assert ledger.balance_as_of(BANK) == Decimal("50.00")


def test_statement_variance(ledger, row_source):
    _append_row(ledger, row_source, make_row(debit="110.00", balance="890.00", account=OFFICE_SUPPLIES))
    assert ledger.balances.statement_variance(BANK, date(2024, 7, 31)) == Decimal("0.00")


def test_statement_variance_detects_drift(ledger, seeded_db):
    """An entry whose reported balance disagrees with the journal shows up."""
    journal = ledger.journal
    journal.append(
        LedgerEntry(
            date=date(2024, 7, 1),
            description="Manual deposit",
            debit_lines=[SplitLine(BANK, Decimal("100.00"))],
            credit_lines=[SplitLine(OWNERS_EQUITY, Decimal("100.00"))],
            bank_balance=Decimal("120.00"),
        )
    )
    assert ledger.balances.statement_variance(BANK, date(2024, 7, 31)) == Decimal("-20.00")
    assert ledger.balances.statement_variance("002", date(2024, 7, 31)) is None
