"""Journal entry commands."""

import click

from finova.cli.error_handling import handle_domain_error, resolve_account_or_exit
from finova.cli.tables import format_amount
from finova.domain.errors import DomainError
from finova.domain.transaction import TransactionService
from finova.utils.amount_parser import parse_amount
from finova.utils.date_parser import parse_date


@click.command("add")
@click.option("--debit", required=True, help="Account debited (ID or name)")
@click.option("--credit", required=True, help="Account credited (ID or name)")
@click.option("--amount", required=True, help="Positive amount (e.g., 1500 or 1,500.00)")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Entry date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--narration", default="", help="Narration")
@click.pass_context
def add_entry(ctx, debit: str, credit: str, amount: str, date: str, narration: str):
    """Record a journal entry.

    Examples:
        finova add --debit cash --credit capital --amount 5000 --narration "Started business"
        finova add --debit Purchases --credit Cash --amount 2000 --date yesterday
    """
    chart = ctx.obj["chart"]
    service = TransactionService(ctx.obj["db"], chart=chart)

    debit_id = resolve_account_or_exit(ctx, chart, debit)
    credit_id = resolve_account_or_exit(ctx, chart, credit)

    try:
        entry_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        entry_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        transaction_id = service.record_transaction(
            owner=ctx.obj["owner"],
            date=entry_date,
            debit=debit_id,
            credit=credit_id,
            amount=entry_amount,
            narration=narration,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Date: {entry_date}")
    click.echo(f"  {chart.name_of(debit_id)} A/c Dr  {format_amount(entry_amount)}")
    click.echo(f"      To {chart.name_of(credit_id)} A/c  {format_amount(entry_amount)}")
    if narration:
        click.echo(f"  Narration: {narration}")


@click.command("edit")
@click.argument("transaction_id", type=int)
@click.option("--debit", help="Account debited (ID or name)")
@click.option("--credit", help="Account credited (ID or name)")
@click.option("--amount", help="Positive amount")
@click.option("--date", help="Entry date (YYYY-MM-DD or relative like 'today')")
@click.option("--narration", help="Narration")
@click.pass_context
def edit_entry(
    ctx,
    transaction_id: int,
    debit: str | None,
    credit: str | None,
    amount: str | None,
    date: str | None,
    narration: str | None,
) -> None:
    """Replace a journal entry, keeping its ID.

    Only the fields given are changed; the entry keeps its place in the
    journal.

    Examples:
        finova edit 3 --amount 2500
        finova edit 3 --debit bank --narration "Paid by cheque"
    """
    chart = ctx.obj["chart"]
    service = TransactionService(ctx.obj["db"], chart=chart)

    debit_id = resolve_account_or_exit(ctx, chart, debit) if debit is not None else None
    credit_id = resolve_account_or_exit(ctx, chart, credit) if credit is not None else None

    entry_date = None
    if date is not None:
        try:
            entry_date = parse_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    entry_amount = None
    if amount is not None:
        try:
            entry_amount = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    try:
        updated = service.replace_transaction(
            transaction_id,
            owner=ctx.obj["owner"],
            date=entry_date,
            debit=debit_id,
            credit=credit_id,
            amount=entry_amount,
            narration=narration,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated transaction {updated.id}")
    click.echo(
        f"  {updated.date}  {chart.name_of(updated.debit)} Dr / "
        f"{chart.name_of(updated.credit)} Cr  {format_amount(updated.amount)}"
    )


@click.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_entry(ctx, transaction_id: int, yes: bool) -> None:
    """Delete a journal entry."""
    service = TransactionService(ctx.obj["db"], chart=ctx.obj["chart"])
    owner = ctx.obj["owner"]

    try:
        service.require_transaction(transaction_id, owner)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(
        f"Are you sure you want to delete transaction {transaction_id}?"
    ):
        click.echo("Cancelled.")
        return

    try:
        service.delete_transaction(transaction_id, owner)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli):
    """Register entry commands with main CLI."""
    cli.add_command(add_entry)
    cli.add_command(edit_entry)
    cli.add_command(delete_entry)
