"""Shared domain error messages and error types."""

from datetime import date
from decimal import Decimal


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class IntegrityViolationError(DomainError):
    """A ledger invariant was broken; the operation must stop.

    These are never recovered locally. The message identifies the offending
    entry so the journal can be reconciled by hand.
    """


class UnbalancedEntryError(IntegrityViolationError):
    """Debit and credit totals of an entry differ."""

    def __init__(self, entry_date: date, description: str, debit_total: Decimal, credit_total: Decimal):
        self.entry_date = entry_date
        self.description = description
        self.debit_total = debit_total
        self.credit_total = credit_total
        super().__init__(
            f"Entry '{description}' on {entry_date.isoformat()} does not balance: "
            f"debits ${debit_total:,.2f} != credits ${credit_total:,.2f}"
        )


class JournalLoadError(DomainError):
    """Persisted journal data is structurally corrupt."""


def account_not_found(code: str) -> str:
    """Return message for missing account."""
    return f"Account '{code}' not found"


def duplicate_account_code(code: str) -> str:
    """Return message for duplicate account code."""
    return f"Account with code '{code}' already exists"


def entry_not_found(entry_id: str) -> str:
    """Return message for missing journal entry."""
    return f"Journal entry {entry_id} not found"


def ambiguous_entry_id(prefix: str, count: int) -> str:
    """Return message when an entry id prefix matches several entries."""
    return f"Entry id '{prefix}' is ambiguous: it matches {count} entries"


def invalid_split_amount(account_code: str, amount: Decimal) -> str:
    """Return message for a split line with a non-positive amount."""
    return f"Split line for account '{account_code}' must have a positive amount, got {amount}"


def bank_leg_count(entry_date: date, description: str, amount: Decimal, bank_codes: list[str]) -> str:
    """Return message when an entry does not touch exactly one bank account."""
    found = ", ".join(bank_codes) if bank_codes else "none"
    return (
        f"Entry '{description}' on {entry_date.isoformat()} for ${amount:,.2f} must touch "
        f"exactly one bank account (found: {found})"
    )


def untraceable_entry(entry_date: date, description: str, amount: Decimal, bank_code: str) -> str:
    """Return message when no statement row backs an entry being appended."""
    return (
        f"No matching statement rows found for '{description}' on {entry_date.isoformat()} "
        f"with amount ${amount:,.2f} in bank account {bank_code}. "
        "This indicates a data integrity issue."
    )


def bank_leg_changed(entry_id: str) -> str:
    """Return message when an update tries to alter the bank leg."""
    return f"Replacement for entry {entry_id} must keep the same bank leg and bank balance"


def unresolved_account_code(code: str, description: str) -> str:
    """Return warning text for an account code missing from the chart of accounts."""
    return f"Account code '{code}' for '{description}' is not in the chart of accounts; no GST split applied"


def corrupt_entry(position: int, description: str, cause: Exception) -> str:
    """Return message for a persisted entry that could not be loaded."""
    return f"Journal entry #{position} ('{description}') is corrupt: {cause}"
