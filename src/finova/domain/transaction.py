"""Transaction domain service."""

from dataclasses import replace
from datetime import date
from decimal import Decimal
from logging import Logger
from typing import Optional

from finova.database.base import Database
from finova.domain.balances import validate_transaction
from finova.domain.chart import DEFAULT_CHART, ChartOfAccounts
from finova.domain.entities import Transaction as TransactionEntity
from finova.domain.errors import (
    InvalidTransactionError,
    NotFoundError,
    account_not_selectable,
    missing_field,
    transaction_not_found,
)
from finova.utils.logging_utils import get_app_logger

CENT = Decimal("0.01")


class TransactionService:
    """Service for recording, replacing and deleting journal entries.

    Entries are validated here, before they reach storage, so the report
    builders only ever see well-formed transactions against known accounts.
    """

    def __init__(
        self,
        db: Database,
        chart: ChartOfAccounts = DEFAULT_CHART,
        logger: Optional[Logger] = None,
    ):
        """Initialize transaction service.

        Args:
            db: Database instance
            chart: Chart of accounts entries must post to
            logger: Optional logger; defaults to the application logger
        """
        self.db = db
        self.chart = chart
        self._logger = logger or get_app_logger(__name__)

    def _validate(
        self,
        owner: str,
        date: Optional[date],
        debit: str,
        credit: str,
        amount: Decimal,
    ) -> Decimal:
        """Validate an entry and return its amount rounded to cents.

        Amounts are stored with two decimal places, so the positivity check
        runs on the rounded value.
        """
        if not owner:
            raise InvalidTransactionError(missing_field("owner"))
        if date is None:
            raise InvalidTransactionError(missing_field("date"))
        if amount is not None:
            amount = Decimal(amount).quantize(CENT)
        validate_transaction(
            TransactionEntity(
                id=0, owner=owner, date=date, debit=debit, credit=credit, amount=amount
            )
        )
        for account_id in (debit, credit):
            # Hidden accounts are derived by reports, never posted to
            if self.chart.require(account_id).hidden:
                raise InvalidTransactionError(account_not_selectable(account_id))
        return amount

    def record_transaction(
        self,
        owner: str,
        date: date,
        debit: str,
        credit: str,
        amount: Decimal,
        narration: str = "",
    ) -> int:
        """Record a new journal entry.

        Args:
            owner: Ledger owner
            date: Entry date
            debit: Account id debited
            credit: Account id credited
            amount: Positive amount
            narration: Free-text description

        Returns:
            Transaction ID

        Raises:
            InvalidTransactionError: If a field is missing, debit equals credit,
                an account is hidden, or the amount rounded to cents is not
                positive
            UnknownAccountError: If debit or credit is not in the chart
        """
        amount = self._validate(owner, date, debit, credit, amount)
        transaction_id = self.db.create_transaction(
            owner=owner,
            date=date,
            debit=debit,
            credit=credit,
            amount=amount,
            narration=narration or "",
        )
        self._logger.info(
            f"Recorded transaction {transaction_id} for {owner}: "
            f"{debit} Dr / {credit} Cr {amount}"
        )
        return transaction_id

    def get_transaction(
        self, transaction_id: int, owner: Optional[str] = None
    ) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID
            owner: If given, transactions of other owners are treated as missing

        Returns:
            Transaction entity or None if not found
        """
        txn = self.db.get_transaction(transaction_id)
        if txn is None or (owner is not None and txn.owner != owner):
            return None
        return txn

    def require_transaction(self, transaction_id: int, owner: str) -> TransactionEntity:
        """Get an owner's transaction or raise NotFoundError."""
        txn = self.get_transaction(transaction_id, owner=owner)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def replace_transaction(
        self,
        transaction_id: int,
        owner: str,
        date: Optional[date] = None,
        debit: Optional[str] = None,
        credit: Optional[str] = None,
        amount: Optional[Decimal] = None,
        narration: Optional[str] = None,
    ) -> TransactionEntity:
        """Replace an entry in place, keeping its ID and stored position.

        Fields left as None keep their current value. The merged entry is
        validated like a new one.

        Returns:
            The stored transaction after the replace

        Raises:
            NotFoundError: If the owner has no transaction with this ID
            InvalidTransactionError: If the merged entry is invalid
            UnknownAccountError: If debit or credit is not in the chart
        """
        current = self.require_transaction(transaction_id, owner)
        merged = TransactionEntity(
            id=current.id,
            owner=current.owner,
            date=date if date is not None else current.date,
            debit=debit if debit is not None else current.debit,
            credit=credit if credit is not None else current.credit,
            amount=amount if amount is not None else current.amount,
            narration=narration if narration is not None else current.narration,
        )
        merged = replace(
            merged,
            amount=self._validate(
                merged.owner, merged.date, merged.debit, merged.credit, merged.amount
            ),
        )
        self.db.replace_transaction(
            transaction_id=merged.id,
            date=merged.date,
            debit=merged.debit,
            credit=merged.credit,
            amount=merged.amount,
            narration=merged.narration,
        )
        self._logger.info(f"Replaced transaction {transaction_id} for {owner}")
        return merged

    def delete_transaction(self, transaction_id: int, owner: str) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If the owner has no transaction with this ID
        """
        self.require_transaction(transaction_id, owner)
        self.db.delete_transaction(transaction_id)
        self._logger.info(f"Deleted transaction {transaction_id} for {owner}")

    def list_transactions(self, owner: str) -> list[TransactionEntity]:
        """List an owner's transactions in stored order."""
        return self.db.list_transactions(owner)
