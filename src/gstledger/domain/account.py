"""Chart of accounts domain service."""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from gstledger.database.base import Database
from gstledger.domain.entities import Account, AccountCategory, TaxTreatment
from gstledger.domain.errors import ConflictError, ValidationError, duplicate_account_code
from gstledger.logging_config import get_logger

logger = get_logger("domain.account")


class AccountRegistry(ABC):
    """Read-only chart of accounts as seen by the ledger engine."""

    @abstractmethod
    def lookup(self, code: str) -> Optional[Account]:
        """Get an account by code, or None if it is unknown."""
        pass

    @abstractmethod
    def by_category(self, category: AccountCategory) -> list[Account]:
        """List accounts of one category."""
        pass


class ChartOfAccountsService(AccountRegistry):
    """Read-mostly registry of accounts keyed by code.

    Lookups are served from a cache that is refreshed whenever an account is
    created through this service.
    """

    def __init__(self, db: Database):
        """Initialize chart of accounts service.

        Args:
            db: Database instance
        """
        self.db = db
        self._accounts: Optional[dict[str, Account]] = None

    def _cache(self) -> dict[str, Account]:
        if self._accounts is None:
            self._accounts = {acc.code: acc for acc in self.db.list_accounts()}
        return self._accounts

    def refresh(self) -> None:
        """Drop cached accounts so the next lookup reads the database."""
        self._accounts = None

    def lookup(self, code: str) -> Optional[Account]:
        """Get an account by code, or None if it is not in the chart."""
        return self._cache().get(code)

    def by_category(self, category: AccountCategory) -> list[Account]:
        """List accounts of one category, ordered by code."""
        return sorted(
            (acc for acc in self._cache().values() if acc.category is category),
            key=lambda acc: acc.code,
        )

    def bank_codes(self) -> frozenset[str]:
        """Codes of every Bank-category account."""
        return frozenset(acc.code for acc in self.by_category(AccountCategory.BANK))

    def list_accounts(self) -> list[Account]:
        """List all accounts ordered by code."""
        return sorted(self._cache().values(), key=lambda acc: acc.code)

    def create_account(
        self,
        code: str,
        name: str,
        category: AccountCategory,
        tax_applicable: bool = False,
        tax_treatment: TaxTreatment = TaxTreatment.BAS_EXCLUDED,
    ) -> Account:
        """Create a new account.

        Args:
            code: Unique account code (e.g. "001", "400")
            name: Account name
            category: Account category
            tax_applicable: Whether GST applies to postings on this account
            tax_treatment: GST treatment

        Returns:
            The created account

        Raises:
            ValidationError: If code or name is empty
            ConflictError: If an account with the same code exists
        """
        code = code.strip()
        name = name.strip()
        if not code:
            raise ValidationError("Account code must not be empty")
        if not name:
            raise ValidationError("Account name must not be empty")
        if self.lookup(code) is not None:
            raise ConflictError(duplicate_account_code(code))

        self.db.create_account(
            code=code,
            name=name,
            category=category,
            tax_applicable=tax_applicable,
            tax_treatment=tax_treatment,
        )
        self.refresh()
        return self.lookup(code)

    def load_from_json(self, json_path: str) -> dict[str, int]:
        """Import accounts from a chart-of-accounts JSON file.

        The file holds a list of objects with ``code``, ``name``, ``type``,
        ``gst`` and ``gstType`` keys. Unknown types fall back to Expense and
        unknown GST types to BAS Excluded. Codes that already exist are skipped.

        Returns:
            Dict with ``created`` and ``skipped`` counts

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValidationError: If the file is not a list of account objects
        """
        path = Path(json_path)
        if not path.exists():
            raise FileNotFoundError(f"Chart of accounts file not found: {json_path}")

        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValidationError(f"Chart of accounts file is not valid JSON: {e}")
        if not isinstance(payload, list):
            raise ValidationError("Chart of accounts file must contain a list of accounts")

        created = 0
        skipped = 0
        for item in payload:
            if not isinstance(item, dict) or not item.get("code") or not item.get("name"):
                raise ValidationError(f"Invalid account record: {item!r}")

            code = str(item["code"]).strip()
            if self.lookup(code) is not None:
                skipped += 1
                continue

            self.create_account(
                code=code,
                name=str(item["name"]),
                category=_category_or_default(item.get("type")),
                tax_applicable=bool(item.get("gst", False)),
                tax_treatment=_treatment_or_default(item.get("gstType")),
            )
            created += 1

        logger.info("Loaded chart of accounts from %s: %d created, %d skipped", path, created, skipped)
        return {"created": created, "skipped": skipped}


def _category_or_default(label: Optional[str]) -> AccountCategory:
    if not label:
        return AccountCategory.EXPENSE
    try:
        return AccountCategory.from_label(label)
    except ValidationError:
        logger.warning("Unknown account type '%s', defaulting to Expense", label)
        return AccountCategory.EXPENSE


def _treatment_or_default(label: Optional[str]) -> TaxTreatment:
    if not label:
        return TaxTreatment.BAS_EXCLUDED
    try:
        return TaxTreatment.from_label(label)
    except ValidationError:
        logger.warning("Unknown GST type '%s', defaulting to BAS Excluded", label)
        return TaxTreatment.BAS_EXCLUDED
