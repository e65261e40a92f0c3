"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from finova.domain.entities import Transaction


class Database(ABC):
    """Abstract transaction store for finova.

    Implementations return transactions in stored order (ascending id), which
    is the order the trend and ledger reports walk them in.
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

    @abstractmethod
    def create_transaction(
        self,
        owner: str,
        date: date,
        debit: str,
        credit: str,
        amount: Decimal,
        narration: str = "",
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def replace_transaction(
        self,
        transaction_id: int,
        date: date,
        debit: str,
        credit: str,
        amount: Decimal,
        narration: str = "",
    ) -> None:
        """Overwrite every field of a transaction, keeping its ID and owner."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction."""
        pass

    @abstractmethod
    def list_transactions(self, owner: str) -> list[Transaction]:
        """List an owner's transactions in stored order."""
        pass

    @abstractmethod
    def count_transactions(self, owner: str) -> int:
        """Count an owner's transactions."""
        pass
