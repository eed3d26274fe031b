"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
from typing import Optional
import re

from gstledger.domain.errors import ValidationError


def parse_amount(amount_str: str) -> Decimal:
    """Parse a statement amount string into a Decimal.

    Handles the formats banks put in debit/credit/balance columns:
    - "110.00"
    - "$110.00"
    - "-42.10"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValidationError: If amount string cannot be parsed
    """
    if amount_str is None or not amount_str.strip():
        raise ValidationError("Empty amount string")

    amount_str = amount_str.strip()

    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    amount_str = re.sub(r"[$€£¥\s]", "", amount_str).replace(",", "")

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValidationError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValidationError(f"Could not parse amount '{amount_str}'")
    return -amount if is_negative else amount


def try_parse_amount(amount_str: Optional[str]) -> Optional[Decimal]:
    """Parse an amount, returning None instead of raising on bad input."""
    try:
        return parse_amount(amount_str)
    except ValidationError:
        return None
