"""Money helpers shared by the ledger engine."""

from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

# Debit and credit totals are compared within this tolerance.
BALANCE_TOLERANCE = Decimal("1e-9")


def to_money(value) -> Decimal:
    """Convert a number to a Decimal rounded to whole cents.

    Floats are routed through ``str`` so that ``0.1`` becomes ``Decimal("0.10")``
    rather than its binary expansion.
    """
    if isinstance(value, float):
        value = str(value)
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def to_decimal(value) -> Decimal:
    """Convert a number to a Decimal without rounding it.

    Floats are routed through ``str`` as in ``to_money``.
    """
    if isinstance(value, float):
        value = str(value)
    return Decimal(value)


# Australian GST, applied to tax-inclusive amounts.
DEFAULT_GST_RATE = Decimal("0.10")
