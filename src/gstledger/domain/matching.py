"""Transaction matching used to keep statement imports idempotent.

Two notions of equality are used. A *same bank transaction* match compares
date, description, amount and bank account only, so an entry still matches
its statement row after it has been categorised to a different account. An
*exact* match additionally requires the non-bank lines to be identical.
"""

from abc import ABC, abstractmethod
from collections import Counter
from typing import Iterable

from gstledger.domain.account import AccountRegistry
from gstledger.domain.entities import LedgerEntry, RawBankRow
from gstledger.domain.money import to_money
from gstledger.domain.validation import bank_codes_in, non_bank_lines
from gstledger.utils.amount_parser import try_parse_amount


def _bank_code_or_none(entry: LedgerEntry, registry: AccountRegistry):
    codes = bank_codes_in(entry, registry)
    return codes[0] if len(codes) == 1 else None


def is_same_bank_transaction(a: LedgerEntry, b: LedgerEntry, registry: AccountRegistry) -> bool:
    """True when both entries record the same movement on the same bank account."""
    if a.date != b.date or a.description != b.description or a.amount != b.amount:
        return False
    bank = _bank_code_or_none(a, registry)
    return bank is not None and bank == _bank_code_or_none(b, registry)


def _line_signature(lines) -> Counter:
    return Counter((line.account_code, to_money(line.amount)) for line in lines)


def is_exact_match(a: LedgerEntry, b: LedgerEntry, registry: AccountRegistry) -> bool:
    """Same bank transaction posted to the same non-bank accounts and amounts."""
    if not is_same_bank_transaction(a, b, registry):
        return False
    bank = _bank_code_or_none(a, registry)
    a_debits, a_credits = non_bank_lines(a, bank)
    b_debits, b_credits = non_bank_lines(b, bank)
    return _line_signature(a_debits) == _line_signature(b_debits) and _line_signature(
        a_credits
    ) == _line_signature(b_credits)


def row_matches_entry(row: RawBankRow, entry: LedgerEntry, bank_code: str) -> bool:
    """True when a statement row is the source of ``entry``'s bank movement.

    Rows with unparseable amounts never match.
    """
    if row.bank_account_code != bank_code or row.date != entry.date or row.description != entry.description:
        return False
    text = row.debit_text if row.is_money_out else row.credit_text
    amount = try_parse_amount(text)
    return amount is not None and to_money(amount) == entry.amount


class TransactionMatcher(ABC):
    """Counts occurrences of a bank transaction in the journal and the statements."""

    @abstractmethod
    def count_journal_matches(self, entry: LedgerEntry) -> int:
        """Number of journal entries that are the same bank transaction as ``entry``."""
        pass

    @abstractmethod
    def count_source_matches(self, entry: LedgerEntry) -> int:
        """Number of loaded statement rows that ``entry`` could have come from."""
        pass


class ScanningTransactionMatcher(TransactionMatcher):
    """Matcher that rescans the journal and every statement row on each call."""

    def __init__(self, journal, row_source, registry: AccountRegistry):
        """Initialize scanning matcher.

        Args:
            journal: Object exposing ``entries`` (the general journal)
            row_source: Object exposing ``all_raw_rows()``
            registry: Account registry used to find bank legs
        """
        self.journal = journal
        self.row_source = row_source
        self.registry = registry

    def count_journal_matches(self, entry: LedgerEntry) -> int:
        return sum(1 for existing in self.journal.entries if is_same_bank_transaction(existing, entry, self.registry))

    def count_source_matches(self, entry: LedgerEntry) -> int:
        bank = _bank_code_or_none(entry, self.registry)
        if bank is None:
            return 0
        return sum(1 for row in self.row_source.all_raw_rows() if row_matches_entry(row, entry, bank))


def find_exact_duplicates(entries: Iterable[LedgerEntry], registry: AccountRegistry) -> list[list[LedgerEntry]]:
    """Group entries that are exact matches of one another.

    Only groups with two or more members are returned, in journal order.
    """
    groups: list[list[LedgerEntry]] = []
    for entry in entries:
        for group in groups:
            if is_exact_match(group[0], entry, registry):
                group.append(entry)
                break
        else:
            groups.append([entry])
    return [group for group in groups if len(group) > 1]
