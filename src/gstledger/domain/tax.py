"""GST splitting of tax-inclusive amounts."""

from decimal import Decimal, localcontext

from gstledger.domain.account import AccountRegistry
from gstledger.domain.entities import SplitLine
from gstledger.domain.money import DEFAULT_GST_RATE, to_decimal

# Enough digits to hold gross - tax without rounding the difference.
NET_PRECISION = 60


class TaxSplitCalculator:
    """Decompose a gross amount into net and GST lines.

    The GST line always goes to the tax-clearing account. Whether it ends up
    on the debit or credit side is decided by the caller. Amounts are kept at
    full Decimal precision; they are only rounded to cents for display.
    """

    def __init__(
        self,
        registry: AccountRegistry,
        tax_clearing_account_code: str,
        rate: Decimal = DEFAULT_GST_RATE,
    ):
        """Initialize tax split calculator.

        Args:
            registry: Account registry used to check tax applicability
            tax_clearing_account_code: Account receiving the GST component
            rate: GST rate the gross amount is inclusive of
        """
        self.registry = registry
        self.tax_clearing_account_code = tax_clearing_account_code
        self.rate = Decimal(rate)

    def tax_component(self, gross: Decimal) -> Decimal:
        """GST contained in a tax-inclusive amount, ``gross * rate / (1 + rate)``."""
        gross = to_decimal(gross)
        return gross * self.rate / (1 + self.rate)

    def is_tax_applicable(self, account_code: str) -> bool:
        account = self.registry.lookup(account_code)
        return account is not None and account.tax_applicable

    def split(self, account_code: str, gross: Decimal) -> list[SplitLine]:
        """Split ``gross`` for a posting on ``account_code``.

        Returns a single line when the account is unknown or not tax
        applicable. Otherwise returns the net line on the account followed by
        the GST line on the tax-clearing account; net + tax equals gross.
        """
        gross = to_decimal(gross)
        if not self.is_tax_applicable(account_code):
            return [SplitLine(account_code, gross)]

        tax = self.tax_component(gross)
        with localcontext() as ctx:
            ctx.prec = NET_PRECISION
            net = gross - tax
        return [SplitLine(account_code, net), SplitLine(self.tax_clearing_account_code, tax)]
