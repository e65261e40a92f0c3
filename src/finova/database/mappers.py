"""Mapper functions to convert between domain models and SQLAlchemy models."""

from decimal import Decimal

from finova.domain import entities as domain
from finova.database.models import Transaction as ORMTransaction


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        owner=orm_transaction.owner,
        date=orm_transaction.date,
        debit=orm_transaction.debit,
        credit=orm_transaction.credit,
        amount=Decimal(orm_transaction.amount),
        narration=orm_transaction.narration or "",
    )
