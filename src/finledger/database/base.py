"""Abstract ledger store interface."""

from abc import ABC, abstractmethod

# Import the service module directly to avoid circular import through domain/__init__.py
from finledger.domain.ledger import LedgerService


class LedgerStore(ABC):
    """Abstract store that saves and loads whole ledgers.

    A store holds one snapshot. The in-memory LedgerService stays the only
    place where ledger rules are applied; the store only copies state in
    and out.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the store."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize storage schema (create tables)."""
        pass

    @abstractmethod
    def load_ledger(self) -> LedgerService:
        """Load the stored ledger, or an empty one if nothing is stored."""
        pass

    @abstractmethod
    def save_ledger(self, ledger: LedgerService) -> None:
        """Replace the stored snapshot with the ledger's current state."""
        pass
