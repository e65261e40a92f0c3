"""Shared domain error messages and error types."""

from decimal import Decimal


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class InvalidTransactionError(ValidationError):
    """Transaction breaks a double-entry invariant."""


class UnknownAccountError(NotFoundError):
    """Account id is not part of the chart of accounts."""


def account_not_found(account_id: str) -> str:
    """Return message for an account id outside the chart."""
    return f"Account '{account_id}' not found in chart of accounts"


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def same_debit_credit(account_id: str) -> str:
    """Return message for a transaction posting to one account on both sides."""
    return f"Debit and credit accounts cannot be the same ('{account_id}')"


def non_positive_amount(amount: Decimal) -> str:
    """Return message for a zero or negative amount."""
    return f"Amount must be positive, got {amount}"


def missing_field(field_name: str) -> str:
    """Return message for a required transaction field left empty."""
    return f"Transaction field '{field_name}' is required"


def duplicate_account_id(account_id: str) -> str:
    """Return message for a chart declaring the same id twice."""
    return f"Account id '{account_id}' is declared more than once"


def account_not_selectable(account_id: str) -> str:
    """Return message for an entry posting to a hidden account."""
    return f"Account '{account_id}' is not selectable for journal entries"
