"""Chart of accounts command."""

import click


@click.command("accounts")
@click.option("--all", "show_all", is_flag=True, help="Include hidden accounts")
@click.pass_context
def list_accounts(ctx, show_all: bool):
    """List the chart of accounts.

    Hidden accounts (such as the bank overdraft, which is only ever shown by
    reclassifying a negative bank balance) are omitted unless --all is given.
    """
    chart = ctx.obj["chart"]
    accounts = chart.accounts if show_all else chart.selectable()

    click.echo("\nAccounts:")
    click.echo("-" * 76)
    click.echo(f"{'ID':<22} {'Name':<24} {'Type':<10} {'Category':<14}")
    click.echo("-" * 76)
    for acc in accounts:
        name = f"{acc.name} (hidden)" if acc.hidden else acc.name
        click.echo(
            f"{acc.id:<22} {name:<24} {acc.account_type.value:<10} {acc.category.value:<14}"
        )


def register_commands(cli):
    """Register accounts command with main CLI."""
    cli.add_command(list_accounts)
