"""Tests for opening balance bootstrapping."""

from datetime import date
from decimal import Decimal

from gstledger.domain.entities import SplitLine

from conftest import BANK, BANK_FEES, OWNERS_EQUITY, SAVINGS, SALES, make_row


def test_positive_prior_balance_debits_bank(ledger):
    """Balance 890 after paying 110 means 1000 was there before."""
    entry = ledger.builder.build(make_row(debit="110.00", balance="890.00", account=BANK_FEES)).entry

    opening = ledger.bootstrapper.maybe_bootstrap(entry)

    assert opening.date == date(2024, 6, 30)
    assert opening.description == "Opening Balance - Business Cheque"
    assert list(opening.debit_lines) == [SplitLine(BANK, Decimal("1000.00"))]
    assert list(opening.credit_lines) == [SplitLine(OWNERS_EQUITY, Decimal("1000.00"))]
    assert ledger.journal.entries == (opening,)


def test_negative_prior_balance_debits_equity(ledger):
    """An overdrawn account opens with equity debited and the bank credited."""
    entry = ledger.builder.build(make_row(credit="50.00", balance="-100.00", account=SALES)).entry

    opening = ledger.bootstrapper.maybe_bootstrap(entry)

    assert list(opening.debit_lines) == [SplitLine(OWNERS_EQUITY, Decimal("150.00"))]
    assert list(opening.credit_lines) == [SplitLine(BANK, Decimal("150.00"))]
    assert opening.bank_balance == Decimal("-150.00")


def test_only_first_transaction_bootstraps(ledger, row_source):
    first = make_row(debit="110.00", balance="890.00", account=BANK_FEES)
    row_source.add(first)
    ledger.try_append(ledger.builder.build(first).entry)

    later = ledger.builder.build(make_row(debit="10.00", balance="880.00", account=BANK_FEES)).entry
    assert ledger.bootstrapper.maybe_bootstrap(later) is None
    assert len(ledger.journal.entries) == 2


def test_each_bank_account_bootstraps_once(ledger):
    cheque = ledger.builder.build(make_row(debit="10.00", balance="90.00", account=BANK_FEES)).entry
    savings = ledger.builder.build(make_row(credit="5.00", balance="505.00", bank=SAVINGS, account=SALES)).entry

    assert ledger.bootstrapper.maybe_bootstrap(cheque) is not None
    opening = ledger.bootstrapper.maybe_bootstrap(savings)

    assert opening.description == "Opening Balance - Business Savings"
    assert list(opening.debit_lines) == [SplitLine(SAVINGS, Decimal("500.00"))]


def test_zero_prior_balance_adds_nothing(ledger):
    entry = ledger.builder.build(make_row(credit="250.00", balance="250.00", account=SALES)).entry
    assert ledger.bootstrapper.maybe_bootstrap(entry) is None
    assert ledger.journal.entries == ()
