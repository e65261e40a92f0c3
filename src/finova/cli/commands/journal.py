"""Journal and ledger viewing commands."""

import click

from finova.cli.error_handling import handle_domain_error, resolve_account_or_exit
from finova.cli.tables import format_amount
from finova.domain.errors import DomainError
from finova.domain.report import ReportService
from finova.domain.reports import journal


@click.command("journal")
@click.option("--limit", type=int, help="Show only the latest N entries")
@click.pass_context
def view_journal(ctx, limit: int | None):
    """View journal entries, newest first."""
    chart = ctx.obj["chart"]
    service = ReportService(ctx.obj["db"], chart=chart)

    entries = journal(service.load(ctx.obj["owner"]))
    if limit is not None:
        entries = entries[: max(limit, 0)]
    if not entries:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(entries)} transaction(s):")
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<6} {'Date':<12} {'Particulars':<44} {'Debit':>12} {'Credit':>12}  Narration"
    )
    click.echo("-" * 100)
    for txn in entries:
        amount = format_amount(txn.amount)
        click.echo(
            f"{txn.id:<6} {str(txn.date):<12} "
            f"{(chart.name_of(txn.debit) + ' A/c Dr')[:44]:<44} {amount:>12} {'':>12}  {txn.narration}"
        )
        click.echo(
            f"{'':<6} {'':<12} "
            f"{('    To ' + chart.name_of(txn.credit) + ' A/c')[:44]:<44} {'':>12} {amount:>12}"
        )


@click.command("ledger")
@click.argument("account", metavar="ACCOUNT")
@click.pass_context
def view_ledger(ctx, account: str):
    """View the ledger of one account with its running balance.

    ACCOUNT can be an account ID or name.
    """
    chart = ctx.obj["chart"]
    service = ReportService(ctx.obj["db"], chart=chart)
    account_id = resolve_account_or_exit(ctx, chart, account)

    try:
        entries = service.ledger(ctx.obj["owner"], account_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"\n{chart.name_of(account_id)} Ledger")
    click.echo("=" * 90)
    click.echo(f"{'Date':<12} {'Particulars':<34} {'Debit':>12} {'Credit':>12} {'Balance':>14}")
    click.echo("-" * 90)
    if not entries:
        click.echo("No postings.")
        return
    for entry in entries:
        click.echo(
            f"{str(entry.date):<12} {entry.particular[:34]:<34} "
            f"{format_amount(entry.debit or None):>12} "
            f"{format_amount(entry.credit or None):>12} "
            f"{format_amount(entry.balance):>14}"
        )


def register_commands(cli):
    """Register journal commands with main CLI."""
    cli.add_command(view_journal)
    cli.add_command(view_ledger)
