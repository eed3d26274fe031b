"""Sanitizing of split lines read back from persisted journal data."""

from datetime import date
from decimal import Decimal
from typing import Iterable

from gstledger.logging_config import get_logger

logger = get_logger("utils.journal_sanitizer")


def sanitize_lines(
    lines: Iterable[tuple[str, Decimal]],
    side: str,
    entry_date: date,
    description: str,
) -> list[tuple[str, Decimal]]:
    """Drop split lines whose amount is zero or negative.

    External tools occasionally write such lines into the journal. They carry
    no value, so they are removed with a warning instead of failing the load.

    Args:
        lines: (account_code, amount) pairs in their stored order
        side: "debit" or "credit", used in the warning
        entry_date: Date of the owning entry, used in the warning
        description: Description of the owning entry, used in the warning

    Returns:
        The pairs with a positive amount, order preserved
    """
    kept = []
    for account_code, amount in lines:
        if amount is None or amount <= 0:
            logger.warning(
                "Dropped %s split on account %s with invalid amount %s for '%s' on %s",
                side,
                account_code,
                amount,
                description,
                entry_date,
            )
            continue
        kept.append((account_code, amount))
    return kept
