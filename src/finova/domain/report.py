"""Report domain service."""

from decimal import Decimal
from logging import Logger
from typing import Optional

from finova.database.base import Database
from finova.domain.balances import (
    calculate_balances,
    calculate_net_profit,
    unknown_account_ids,
)
from finova.domain.chart import DEFAULT_CHART, ChartOfAccounts
from finova.domain.entities import (
    BalanceSheet,
    DashboardSummary,
    LedgerEntry,
    LedgerReports,
    TradingPLReport,
    Transaction,
    TrendPoint,
    TrialBalance,
)
from finova.domain.reports import (
    TREND_POINTS,
    build_balance_sheet,
    build_dashboard_summary,
    build_ledger,
    build_profit_trend,
    build_trading_pl,
    build_trial_balance,
)
from finova.utils.logging_utils import get_app_logger


class ReportService:
    """Service building reports from an owner's stored transactions.

    Each call loads the full transaction list and rebuilds from scratch;
    nothing is cached between calls.
    """

    def __init__(
        self,
        db: Database,
        chart: ChartOfAccounts = DEFAULT_CHART,
        logger: Optional[Logger] = None,
    ):
        """Initialize report service.

        Args:
            db: Database instance
            chart: Chart of accounts reports iterate over
            logger: Optional logger; defaults to the application logger
        """
        self.db = db
        self.chart = chart
        self._logger = logger or get_app_logger(__name__)

    def load(self, owner: str) -> list[Transaction]:
        """Load an owner's transaction snapshot in stored order."""
        return self.db.list_transactions(owner)

    def balances(self, owner: str) -> dict[str, Decimal]:
        """Compute the balance map for an owner."""
        return self._balances(self.load(owner))

    def _balances(self, transactions: list[Transaction]) -> dict[str, Decimal]:
        balances = calculate_balances(transactions)
        unknown = unknown_account_ids(self.chart, balances)
        if unknown:
            self._logger.warning(
                f"Balances posted to accounts outside the chart are not reported: "
                f"{', '.join(unknown)}"
            )
        return balances

    def trial_balance(self, owner: str) -> TrialBalance:
        """Build the trial balance for an owner."""
        report = build_trial_balance(self.chart, self.balances(owner))
        self._warn_unbalanced("Trial balance", report.is_balanced, report.difference)
        return report

    def trading_pl(self, owner: str) -> TradingPLReport:
        """Build the trading and profit and loss statements for an owner."""
        return build_trading_pl(self.chart, self.balances(owner))

    def balance_sheet(self, owner: str) -> BalanceSheet:
        """Build the balance sheet for an owner."""
        report = build_balance_sheet(self.chart, self.balances(owner))
        self._warn_unbalanced("Balance sheet", report.is_balanced, report.difference)
        return report

    def profit_trend(self, owner: str, limit: int = TREND_POINTS) -> tuple[TrendPoint, ...]:
        """Build the cumulative profit trend for an owner."""
        return build_profit_trend(self.chart, self.load(owner), limit=limit)

    def ledger(self, owner: str, account_id: str) -> tuple[LedgerEntry, ...]:
        """Build one account's ledger for an owner.

        Raises:
            UnknownAccountError: If the chart does not declare the account
        """
        return build_ledger(self.chart, self.load(owner), account_id)

    def dashboard(self, owner: str) -> DashboardSummary:
        """Build the dashboard figures for an owner."""
        return build_dashboard_summary(self.chart, self.balances(owner))

    def build_all(self, owner: str) -> LedgerReports:
        """Build every report from a single snapshot."""
        transactions = self.load(owner)
        balances = self._balances(transactions)
        net_profit = calculate_net_profit(self.chart, balances)
        trial_balance = build_trial_balance(self.chart, balances)
        balance_sheet = build_balance_sheet(self.chart, balances, net_profit)
        self._warn_unbalanced(
            "Trial balance", trial_balance.is_balanced, trial_balance.difference
        )
        self._warn_unbalanced(
            "Balance sheet", balance_sheet.is_balanced, balance_sheet.difference
        )
        self._logger.debug(
            f"Built reports for {owner} from {len(transactions)} transactions"
        )
        return LedgerReports(
            trial_balance=trial_balance,
            trading_pl=build_trading_pl(self.chart, balances),
            balance_sheet=balance_sheet,
            profit_trend=build_profit_trend(self.chart, transactions),
            dashboard=build_dashboard_summary(self.chart, balances),
            balances=balances,
        )

    def _warn_unbalanced(self, report_name: str, is_balanced: bool, difference: Decimal) -> None:
        if not is_balanced:
            self._logger.warning(f"{report_name} is out of balance by {difference:.2f}")
