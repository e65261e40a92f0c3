"""Report builders.

Every builder is a pure function of the chart of accounts and either the
transaction list or a balance map derived from it. Nothing is cached between
calls; callers rebuild all reports whenever the transaction list changes.
"""

from decimal import Decimal
from typing import Iterable, Mapping, Optional, Sequence

from finova.domain.balances import (
    ZERO,
    apply_transaction,
    calculate_net_profit,
)
from finova.domain.chart import BANK, CAPITAL, DRAWINGS, OVERDRAFT, ChartOfAccounts
from finova.domain.entities import (
    Account,
    AccountCategory,
    AccountType,
    BalanceSheet,
    BalanceSheetLine,
    DashboardSummary,
    FinancialPosition,
    LedgerEntry,
    PositionVerdict,
    ProfitLossStatement,
    ReportRow,
    RowKind,
    TradingPLReport,
    TradingStatement,
    Transaction,
    TrendPoint,
    TrialBalance,
)

TOLERANCE = Decimal("0.01")
TREND_POINTS = 15
RECENT_TRANSACTIONS = 5
CAPITAL_LABEL = "Capital (+NP, -Drawings)"
OVERDRAFT_LABEL = "Bank Overdraft"


def _balance_rows(
    accounts: Iterable[Account], balances: Mapping[str, Decimal]
) -> tuple[list[ReportRow], Decimal, Decimal]:
    """Split non-zero balances into debit and credit rows.

    Returns:
        Tuple of (rows, debit total, credit total)
    """
    rows: list[ReportRow] = []
    total_debit = ZERO
    total_credit = ZERO
    for account in accounts:
        balance = balances.get(account.id, ZERO)
        if balance == 0:
            continue
        if balance > 0:
            total_debit += balance
            rows.append(ReportRow(account.name, debit=balance, account_id=account.id))
        else:
            total_credit += -balance
            rows.append(ReportRow(account.name, credit=-balance, account_id=account.id))
    return rows, total_debit, total_credit


def _balancing_row(name: str, debit: Optional[Decimal] = None, credit: Optional[Decimal] = None) -> ReportRow:
    return ReportRow(name, debit=debit, credit=credit, kind=RowKind.BALANCING)


def build_trial_balance(
    chart: ChartOfAccounts, balances: Mapping[str, Decimal]
) -> TrialBalance:
    """Build the trial balance in chart order."""
    rows, total_debit, total_credit = _balance_rows(chart, balances)
    return TrialBalance(
        rows=tuple(rows),
        total_debit=total_debit,
        total_credit=total_credit,
        tolerance=TOLERANCE,
    )


def build_trading_pl(
    chart: ChartOfAccounts, balances: Mapping[str, Decimal]
) -> TradingPLReport:
    """Build the trading statement and the chained profit and loss statement.

    The gross result is carried down on the closing side of the trading
    statement and brought down on the opposite side of the P&L statement.
    Both statements close with a balancing row so their columns foot.
    """
    trading_rows, gp_debit, gp_credit = _balance_rows(
        chart.by_category(AccountCategory.TRADING), balances
    )
    gross_profit = gp_credit - gp_debit
    pl_rows: list[ReportRow] = []
    net_debit = ZERO
    net_credit = ZERO
    if gross_profit >= 0:
        trading_rows.append(_balancing_row("Gross Profit c/d", debit=gross_profit))
        gp_debit += gross_profit
        pl_rows.append(_balancing_row("Gross Profit b/d", credit=gross_profit))
        net_credit += gross_profit
    else:
        trading_rows.append(_balancing_row("Gross Loss c/d", credit=-gross_profit))
        gp_credit += -gross_profit
        pl_rows.append(_balancing_row("Gross Loss b/d", debit=-gross_profit))
        net_debit += -gross_profit

    account_rows, pl_debit, pl_credit = _balance_rows(
        chart.by_category(AccountCategory.PL), balances
    )
    pl_rows.extend(account_rows)
    net_debit += pl_debit
    net_credit += pl_credit

    net_profit = net_credit - net_debit
    if net_profit >= 0:
        pl_rows.append(_balancing_row("Net Profit", debit=net_profit))
        net_debit += net_profit
    else:
        pl_rows.append(_balancing_row("Net Loss", credit=-net_profit))
        net_credit += -net_profit

    return TradingPLReport(
        trading=TradingStatement(
            rows=tuple(trading_rows),
            total_debit=gp_debit,
            total_credit=gp_credit,
            gross_profit=gross_profit,
        ),
        profit_loss=ProfitLossStatement(
            rows=tuple(pl_rows),
            total_debit=net_debit,
            total_credit=net_credit,
            net_profit=net_profit,
        ),
    )


def classify_position(total_assets: Decimal, pure_liabilities: Decimal) -> FinancialPosition:
    """Compare assets with liabilities excluding owner's capital."""
    diff = total_assets - pure_liabilities
    if abs(diff) < TOLERANCE:
        verdict, amount = PositionVerdict.BALANCED, ZERO
    elif diff > 0:
        verdict, amount = PositionVerdict.POSITIVE, diff
    else:
        verdict, amount = PositionVerdict.NEGATIVE, -diff
    return FinancialPosition(
        verdict=verdict, amount=amount, pure_liabilities=pure_liabilities
    )


def build_balance_sheet(
    chart: ChartOfAccounts,
    balances: Mapping[str, Decimal],
    net_profit: Optional[Decimal] = None,
) -> BalanceSheet:
    """Build the balance sheet and the financial position verdict.

    A negative bank balance is shown as a bank overdraft liability instead of
    a bank asset. The capital line absorbs net profit and drawings.

    Args:
        chart: Chart of accounts
        balances: Balance map from calculate_balances
        net_profit: Net profit to fold into capital; computed when omitted

    Returns:
        BalanceSheet with both sides, totals and position verdict
    """
    if net_profit is None:
        net_profit = calculate_net_profit(chart, balances)

    assets = list(chart.by_type(AccountType.ASSET))
    liabilities = [
        a for a in chart.by_type(AccountType.LIABILITY) if a.id != DRAWINGS
    ]
    amounts: dict[str, Decimal] = {}

    bank_balance = balances.get(BANK, ZERO)
    if bank_balance < 0:
        assets = [a for a in assets if a.id != BANK]
        if not any(a.id == OVERDRAFT for a in liabilities):
            liabilities.append(
                Account(
                    id=OVERDRAFT,
                    name=OVERDRAFT_LABEL,
                    account_type=AccountType.LIABILITY,
                    category=AccountCategory.BALANCE_SHEET,
                    hidden=True,
                )
            )
        amounts[OVERDRAFT] = abs(bank_balance)
    else:
        liabilities = [a for a in liabilities if a.id != OVERDRAFT]

    asset_lines = tuple(
        BalanceSheetLine(a.id, a.name, balances.get(a.id, ZERO)) for a in assets
    )

    drawings_balance = balances.get(DRAWINGS, ZERO)
    liability_lines: list[BalanceSheetLine] = []
    pure_liabilities = ZERO
    for account in liabilities:
        amount = amounts.get(account.id, abs(balances.get(account.id, ZERO)))
        if account.id == CAPITAL:
            liability_lines.append(
                BalanceSheetLine(
                    account.id, CAPITAL_LABEL, amount + net_profit - drawings_balance
                )
            )
            continue
        pure_liabilities += amount
        liability_lines.append(BalanceSheetLine(account.id, account.name, amount))

    total_assets = sum((line.amount for line in asset_lines), ZERO)
    total_liabilities_capital = sum((line.amount for line in liability_lines), ZERO)

    return BalanceSheet(
        assets=asset_lines,
        liabilities=tuple(liability_lines),
        total_assets=total_assets,
        total_liabilities_capital=total_liabilities_capital,
        position=classify_position(total_assets, pure_liabilities),
        tolerance=TOLERANCE,
    )


def build_profit_trend(
    chart: ChartOfAccounts,
    transactions: Sequence[Transaction],
    limit: int = TREND_POINTS,
) -> tuple[TrendPoint, ...]:
    """Cumulative net profit after each transaction, in stored order.

    Only the last ``limit`` points are returned.
    """
    if limit <= 0:
        return ()
    running: dict[str, Decimal] = {}
    points: list[TrendPoint] = []
    for txn in transactions:
        apply_transaction(running, txn)
        points.append(TrendPoint(txn.date, calculate_net_profit(chart, running)))
    return tuple(points[-limit:])


def build_ledger(
    chart: ChartOfAccounts, transactions: Iterable[Transaction], account_id: str
) -> tuple[LedgerEntry, ...]:
    """Postings of one account with a running balance, in stored order.

    Raises:
        UnknownAccountError: If the chart does not declare the account
    """
    chart.require(account_id)
    balance = ZERO
    entries: list[LedgerEntry] = []
    for txn in transactions:
        if txn.debit == account_id:
            balance += txn.amount
            entries.append(
                LedgerEntry(
                    date=txn.date,
                    transaction_id=txn.id,
                    particular=f"To {chart.name_of(txn.credit)}",
                    debit=txn.amount,
                    credit=ZERO,
                    balance=balance,
                )
            )
        elif txn.credit == account_id:
            balance -= txn.amount
            entries.append(
                LedgerEntry(
                    date=txn.date,
                    transaction_id=txn.id,
                    particular=f"By {chart.name_of(txn.debit)}",
                    debit=ZERO,
                    credit=txn.amount,
                    balance=balance,
                )
            )
    return tuple(entries)


def build_dashboard_summary(
    chart: ChartOfAccounts, balances: Mapping[str, Decimal]
) -> DashboardSummary:
    """Headline totals for the assets versus liabilities view."""
    total_assets = sum(
        (balances.get(a.id, ZERO) for a in chart.by_type(AccountType.ASSET)), ZERO
    )
    total_liabilities = ZERO - sum(
        (
            balances.get(a.id, ZERO)
            for a in chart.by_type(AccountType.LIABILITY)
            if a.id != CAPITAL
        ),
        ZERO,
    )
    return DashboardSummary(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_profit=calculate_net_profit(chart, balances),
    )


def journal(transactions: Sequence[Transaction]) -> list[Transaction]:
    """Return transactions newest first."""
    return list(reversed(transactions))


def recent_transactions(
    transactions: Sequence[Transaction], limit: int = RECENT_TRANSACTIONS
) -> list[Transaction]:
    """Return the latest ``limit`` transactions, newest first."""
    if limit <= 0:
        return []
    return journal(transactions)[:limit]
