"""Financial report commands."""

import click

from finova.cli.tables import (
    echo_debit_credit_table,
    echo_side_by_side,
    format_amount,
)
from finova.domain.entities import PositionVerdict
from finova.domain.report import ReportService
from finova.domain.reports import TREND_POINTS, recent_transactions

POSITION_MESSAGES = {
    PositionVerdict.BALANCED: "Business just breaks even. No financial strength or weakness.",
    PositionVerdict.POSITIVE: "Assets exceed liabilities by {amount}. Business is financially healthy.",
    PositionVerdict.NEGATIVE: "Liabilities exceed assets by {amount}. Weak financial condition.",
}


def _service(ctx) -> ReportService:
    return ReportService(ctx.obj["db"], chart=ctx.obj["chart"])


@click.command("trial-balance")
@click.pass_context
def trial_balance(ctx):
    """Show the trial balance."""
    report = _service(ctx).trial_balance(ctx.obj["owner"])
    echo_debit_credit_table(
        "Trial Balance", report.rows, report.total_debit, report.total_credit
    )
    if report.is_balanced:
        click.echo("\nTrial Balance is Balanced!")
    else:
        click.echo(
            f"\nTrial Balance is not Balanced! Difference: {format_amount(report.difference)}"
        )


@click.command("trading-pl")
@click.pass_context
def trading_pl(ctx):
    """Show the trading and profit and loss statements."""
    report = _service(ctx).trading_pl(ctx.obj["owner"])
    trading = report.trading
    profit_loss = report.profit_loss
    echo_debit_credit_table(
        "Trading Account", trading.rows, trading.total_debit, trading.total_credit
    )
    echo_debit_credit_table(
        "Profit & Loss Account",
        profit_loss.rows,
        profit_loss.total_debit,
        profit_loss.total_credit,
    )
    label = "Net Profit" if report.net_profit >= 0 else "Net Loss"
    click.echo(f"\n{label}: {format_amount(abs(report.net_profit))}")


@click.command("balance-sheet")
@click.pass_context
def balance_sheet(ctx):
    """Show the balance sheet and financial position."""
    report = _service(ctx).balance_sheet(ctx.obj["owner"])
    click.echo("\nBalance Sheet")
    echo_side_by_side(
        "Assets",
        "Liabilities & Capital",
        report.assets,
        report.liabilities,
        report.total_assets,
        report.total_liabilities_capital,
    )
    if report.is_balanced:
        click.echo("\nBalance Sheet is Balanced!")
    else:
        click.echo("\nBalance Sheet is out of Balance!")

    position = report.position
    click.echo(f"\nFinancial Position: {position.verdict.value}")
    click.echo(POSITION_MESSAGES[position.verdict].format(amount=format_amount(position.amount)))
    if report.is_balanced:
        click.echo("Accounting Check: Assets = Liabilities + Capital (Verified)")
    else:
        click.echo("Accounting Check: Error! Assets do not match Liabilities + Capital")


@click.command("trend")
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=TREND_POINTS,
    show_default=True,
    help="Number of latest points",
)
@click.pass_context
def profit_trend(ctx, limit: int):
    """Show cumulative net profit after each of the latest entries."""
    points = _service(ctx).profit_trend(ctx.obj["owner"], limit=limit)
    if not points:
        click.echo("No transactions found.")
        return
    click.echo("\nNet Profit Trend")
    click.echo("-" * 30)
    for point in points:
        click.echo(f"{str(point.date):<12} {format_amount(point.cumulative_profit):>16}")


@click.command("dashboard")
@click.pass_context
def dashboard(ctx):
    """Show headline figures and the latest entries."""
    service = _service(ctx)
    chart = ctx.obj["chart"]
    owner = ctx.obj["owner"]
    summary = service.dashboard(owner)

    click.echo(f"\nTotal Assets:      {format_amount(summary.total_assets):>14}")
    click.echo(f"Total Liabilities: {format_amount(summary.total_liabilities):>14}")
    label = "Net Profit:" if summary.net_profit >= 0 else "Net Loss:"
    click.echo(f"{label:<18} {format_amount(abs(summary.net_profit)):>14}")

    recent = recent_transactions(service.load(owner))
    if not recent:
        return
    click.echo("\nRecent Transactions")
    click.echo("-" * 90)
    for txn in recent:
        click.echo(
            f"{str(txn.date):<12} {txn.narration[:30]:<30} {format_amount(txn.amount):>12}  "
            f"{chart.name_of(txn.debit)} / {chart.name_of(txn.credit)}"
        )


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(trial_balance)
    cli.add_command(trading_pl)
    cli.add_command(balance_sheet)
    cli.add_command(profit_trend)
    cli.add_command(dashboard)
