"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from gstledger.domain.entities import Account, AccountCategory, LedgerEntry, TaxTreatment


class Database(ABC):
    """Abstract database interface for gstledger.

    Holds the chart of accounts and the canonical ordered journal. The journal
    is always loaded and saved as a whole.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    @abstractmethod
    def create_account(
        self,
        code: str,
        name: str,
        category: AccountCategory,
        tax_applicable: bool = False,
        tax_treatment: TaxTreatment = TaxTreatment.BAS_EXCLUDED,
    ) -> str:
        """Create a new account. Returns the account code."""
        pass

    @abstractmethod
    def get_account(self, code: str) -> Optional[Account]:
        """Get account by code."""
        pass

    @abstractmethod
    def list_accounts(self, category: Optional[AccountCategory] = None) -> list[Account]:
        """List accounts ordered by code, optionally filtered by category."""
        pass

    # Journal operations
    @abstractmethod
    def load_entries(self) -> list[LedgerEntry]:
        """Load every journal entry in stored order.

        Raises:
            JournalLoadError: If a stored entry is structurally corrupt
        """
        pass

    @abstractmethod
    def save_entries(self, entries: list[LedgerEntry]) -> bool:
        """Replace the stored journal with ``entries`` in one transaction."""
        pass
