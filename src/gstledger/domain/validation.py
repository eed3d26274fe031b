"""Bank-leg checks for journal entries."""

from gstledger.domain.account import AccountRegistry
from gstledger.domain.entities import LedgerEntry, SplitLine
from gstledger.domain.errors import ValidationError, bank_leg_count


def bank_codes_in(entry: LedgerEntry, registry: AccountRegistry) -> list[str]:
    """Return the distinct bank-category codes used by an entry, sorted."""
    codes = set()
    for code in entry.account_codes():
        account = registry.lookup(code)
        if account is not None and account.is_bank:
            codes.add(code)
    return sorted(codes)


def bank_account_code(entry: LedgerEntry, registry: AccountRegistry) -> str:
    """Return the code of the entry's bank leg.

    Raises:
        ValidationError: If the entry does not touch exactly one bank account
    """
    codes = bank_codes_in(entry, registry)
    if len(codes) != 1:
        raise ValidationError(bank_leg_count(entry.date, entry.description, entry.amount, codes))
    return codes[0]


def validate_entry(entry: LedgerEntry, registry: AccountRegistry) -> str:
    """Check the bank-leg rule and return the bank account code."""
    return bank_account_code(entry, registry)


def non_bank_lines(entry: LedgerEntry, bank_code: str) -> tuple[list[SplitLine], list[SplitLine]]:
    """Split lines of an entry that are not on its bank leg, as (debits, credits)."""
    debits = [line for line in entry.debit_lines if line.account_code != bank_code]
    credits = [line for line in entry.credit_lines if line.account_code != bank_code]
    return debits, credits
