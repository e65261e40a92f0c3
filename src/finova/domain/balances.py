"""Balance aggregation and net profit."""

from decimal import Decimal
from typing import Iterable, Mapping

from finova.domain.chart import ChartOfAccounts
from finova.domain.entities import Transaction
from finova.domain.errors import (
    InvalidTransactionError,
    missing_field,
    non_positive_amount,
    same_debit_credit,
)

ZERO = Decimal("0")


def validate_transaction(txn: Transaction) -> None:
    """Check the double-entry invariants of a transaction.

    Raises:
        InvalidTransactionError: If an account is missing, both sides post to
            the same account, or the amount is not positive
    """
    for field_name in ("debit", "credit"):
        if not getattr(txn, field_name):
            raise InvalidTransactionError(missing_field(field_name))
    if txn.debit == txn.credit:
        raise InvalidTransactionError(same_debit_credit(txn.debit))
    if txn.amount is None or txn.amount <= 0:
        raise InvalidTransactionError(non_positive_amount(txn.amount))


def apply_transaction(balances: dict[str, Decimal], txn: Transaction) -> None:
    """Post a transaction into a running balance map in place."""
    validate_transaction(txn)
    balances[txn.debit] = balances.get(txn.debit, ZERO) + txn.amount
    balances[txn.credit] = balances.get(txn.credit, ZERO) - txn.amount


def calculate_balances(transactions: Iterable[Transaction]) -> dict[str, Decimal]:
    """Fold transactions into net balances per account id.

    Debits increase and credits decrease a balance. Accounts without postings
    are absent from the result. Ids outside the chart of accounts are kept;
    they simply never appear in a report.
    """
    balances: dict[str, Decimal] = {}
    for txn in transactions:
        apply_transaction(balances, txn)
    return balances


def calculate_net_profit(
    chart: ChartOfAccounts, balances: Mapping[str, Decimal]
) -> Decimal:
    """Net profit over trading and P&L accounts.

    Revenues carry credit (negative) balances and expenses debit (positive)
    ones, so the negated sum is positive when revenues exceed expenses.
    """
    profit = ZERO
    for account in chart.profit_accounts:
        profit -= balances.get(account.id, ZERO)
    return profit


def unknown_account_ids(
    chart: ChartOfAccounts, balances: Mapping[str, Decimal]
) -> list[str]:
    """Return balance keys the chart does not declare, sorted."""
    return sorted(account_id for account_id in balances if account_id not in chart)
