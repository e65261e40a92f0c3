"""Main CLI entry point."""

import click

from finova.config import DEFAULT_LOG_LEVEL, DEFAULT_OWNER
from finova.database.factories import create_sqlite_database
from finova.domain.chart import DEFAULT_CHART
from finova.utils.logging_utils import configure_logging

# Import and register all commands at module level
from finova.cli.commands import accounts, entry, journal, reports


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FINOVA_DB_PATH environment variable)",
    envvar="FINOVA_DB_PATH",
)
@click.option(
    "--owner",
    default=DEFAULT_OWNER,
    show_default=True,
    help="Ledger owner whose transactions are used",
    envvar="FINOVA_OWNER",
)
@click.option(
    "--log-level",
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
    envvar="FINOVA_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, owner: str, log_level: str):
    """Finova - double-entry bookkeeping.

    Record journal entries and derive the trial balance, trading and profit
    and loss statements, and the balance sheet from them.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.call_on_close(db.disconnect)
        ctx.obj["db"] = db
        ctx.obj["owner"] = owner.strip() or DEFAULT_OWNER
        ctx.obj["chart"] = DEFAULT_CHART


# Register all commands
accounts.register_commands(cli)
entry.register_commands(cli)
journal.register_commands(cli)
reports.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
