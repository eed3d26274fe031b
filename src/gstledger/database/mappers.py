"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the journal tables can change
without touching the ledger engine.
"""

from gstledger.domain import entities as domain
from gstledger.domain.errors import DomainError, JournalLoadError, corrupt_entry
from gstledger.database.models import (
    Account as ORMAccount,
    JournalEntry as ORMJournalEntry,
    JournalLine as ORMJournalLine,
    DEBIT,
    CREDIT,
)
from gstledger.utils.journal_sanitizer import sanitize_lines


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        code=orm_account.code,
        name=orm_account.name,
        category=domain.AccountCategory(orm_account.category),
        tax_applicable=bool(orm_account.tax_applicable),
        tax_treatment=domain.TaxTreatment(orm_account.tax_treatment),
    )


def entry_to_domain(orm_entry: ORMJournalEntry) -> domain.LedgerEntry:
    """Convert SQLAlchemy JournalEntry model to domain LedgerEntry entity.

    Non-positive split lines are dropped. An entry that is still invalid after
    that raises JournalLoadError.
    """
    ordered = sorted(orm_entry.lines, key=lambda line: line.position)
    debits = sanitize_lines(
        [(line.account_code, line.amount) for line in ordered if line.side == DEBIT],
        DEBIT,
        orm_entry.date,
        orm_entry.description,
    )
    credits = sanitize_lines(
        [(line.account_code, line.amount) for line in ordered if line.side == CREDIT],
        CREDIT,
        orm_entry.date,
        orm_entry.description,
    )

    try:
        return domain.LedgerEntry(
            entry_id=orm_entry.entry_id,
            date=orm_entry.date,
            description=orm_entry.description,
            debit_lines=[domain.SplitLine(code, amount) for code, amount in debits],
            credit_lines=[domain.SplitLine(code, amount) for code, amount in credits],
            bank_balance=orm_entry.bank_balance,
            notes=orm_entry.notes or "",
        )
    except DomainError as e:
        raise JournalLoadError(corrupt_entry(orm_entry.position, orm_entry.description, e)) from e


def entry_to_orm(entry: domain.LedgerEntry, position: int) -> ORMJournalEntry:
    """Convert domain LedgerEntry entity to a new SQLAlchemy JournalEntry model."""
    orm_entry = ORMJournalEntry(
        entry_id=entry.entry_id,
        position=position,
        date=entry.date,
        description=entry.description,
        bank_balance=entry.bank_balance,
        notes=entry.notes,
    )
    line_position = 0
    for side, lines in ((DEBIT, entry.debit_lines), (CREDIT, entry.credit_lines)):
        for line in lines:
            orm_entry.lines.append(
                ORMJournalLine(
                    side=side,
                    position=line_position,
                    account_code=line.account_code,
                    amount=line.amount,
                )
            )
            line_position += 1
    return orm_entry
