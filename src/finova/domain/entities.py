"""Domain model entities for finova.

These are pure data classes representing bookkeeping concepts, independent of
the database schema. Report results are plain frozen data as well, so the
rendering layer only ever formats values computed by the domain layer.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class AccountType(str, Enum):
    """Natural balance type of an account."""

    ASSET = "asset"
    LIABILITY = "liability"
    REVENUE = "revenue"
    EXPENSE = "expense"


class AccountCategory(str, Enum):
    """Report an account belongs to."""

    BALANCE_SHEET = "balance-sheet"
    TRADING = "trading"
    PL = "pl"


class RowKind(str, Enum):
    """Kind of a report row."""

    ACCOUNT = "account"
    BALANCING = "balancing"


class PositionVerdict(str, Enum):
    """Financial position classification."""

    BALANCED = "BALANCED"
    POSITIVE = "POSITIVE"
    NEGATIVE = "NEGATIVE"


@dataclass(frozen=True)
class Account:
    """Chart of accounts entry."""

    id: str
    name: str
    account_type: AccountType
    category: AccountCategory
    hidden: bool = False


@dataclass(frozen=True)
class Transaction:
    """Double-entry journal transaction."""

    id: int
    owner: str
    date: date
    debit: str
    credit: str
    amount: Decimal
    narration: str = ""


@dataclass(frozen=True)
class ReportRow:
    """Display row with the amount placed in one column.

    Amounts are absolute values; the side is conveyed by which column is set.
    """

    name: str
    debit: Optional[Decimal] = None
    credit: Optional[Decimal] = None
    account_id: Optional[str] = None
    kind: RowKind = RowKind.ACCOUNT


@dataclass(frozen=True)
class TrialBalance:
    """Trial balance report."""

    rows: tuple[ReportRow, ...]
    total_debit: Decimal
    total_credit: Decimal
    tolerance: Decimal = Decimal("0.01")

    @property
    def difference(self) -> Decimal:
        """Return the absolute difference between the column totals."""
        return abs(self.total_debit - self.total_credit)

    @property
    def is_balanced(self) -> bool:
        return self.difference < self.tolerance


@dataclass(frozen=True)
class TradingStatement:
    """Trading account, closed with the gross profit or loss carried down."""

    rows: tuple[ReportRow, ...]
    total_debit: Decimal
    total_credit: Decimal
    gross_profit: Decimal


@dataclass(frozen=True)
class ProfitLossStatement:
    """Profit and loss account, closed with the net profit or loss."""

    rows: tuple[ReportRow, ...]
    total_debit: Decimal
    total_credit: Decimal
    net_profit: Decimal


@dataclass(frozen=True)
class TradingPLReport:
    """Trading statement chained into the profit and loss statement."""

    trading: TradingStatement
    profit_loss: ProfitLossStatement

    @property
    def gross_profit(self) -> Decimal:
        return self.trading.gross_profit

    @property
    def net_profit(self) -> Decimal:
        return self.profit_loss.net_profit


@dataclass(frozen=True)
class BalanceSheetLine:
    """Single line on one side of the balance sheet."""

    account_id: str
    name: str
    amount: Decimal


@dataclass(frozen=True)
class FinancialPosition:
    """Assets compared to liabilities excluding owner's capital.

    Attributes:
        verdict: BALANCED, POSITIVE or NEGATIVE.
        amount: Surplus for POSITIVE, shortfall (absolute) for NEGATIVE,
            zero for BALANCED.
        pure_liabilities: Liabilities total used for the comparison.
    """

    verdict: PositionVerdict
    amount: Decimal
    pure_liabilities: Decimal


@dataclass(frozen=True)
class BalanceSheet:
    """Balance sheet with its footing check and position verdict."""

    assets: tuple[BalanceSheetLine, ...]
    liabilities: tuple[BalanceSheetLine, ...]
    total_assets: Decimal
    total_liabilities_capital: Decimal
    position: FinancialPosition
    tolerance: Decimal = Decimal("0.01")

    @property
    def difference(self) -> Decimal:
        """Return the absolute difference between the two sides."""
        return abs(self.total_assets - self.total_liabilities_capital)

    @property
    def is_balanced(self) -> bool:
        return self.difference < self.tolerance


@dataclass(frozen=True)
class TrendPoint:
    """Cumulative net profit after a transaction."""

    date: date
    cumulative_profit: Decimal


@dataclass(frozen=True)
class LedgerEntry:
    """Posting in an account ledger with the running balance."""

    date: date
    transaction_id: int
    particular: str
    debit: Decimal
    credit: Decimal
    balance: Decimal


@dataclass(frozen=True)
class DashboardSummary:
    """Headline figures of the dashboard."""

    total_assets: Decimal
    total_liabilities: Decimal
    net_profit: Decimal


@dataclass(frozen=True)
class LedgerReports:
    """Every report computed from one transaction snapshot."""

    trial_balance: TrialBalance
    trading_pl: TradingPLReport
    balance_sheet: BalanceSheet
    profit_trend: tuple[TrendPoint, ...]
    dashboard: DashboardSummary
    balances: dict[str, Decimal] = field(default_factory=dict)
