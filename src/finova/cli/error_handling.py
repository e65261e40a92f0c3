"""CLI error handling helpers."""

from typing import NoReturn

import click

from finova.domain.chart import ChartOfAccounts
from finova.domain.errors import (
    DomainError,
    InvalidTransactionError,
    UnknownAccountError,
    account_not_found,
    account_not_selectable,
)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> NoReturn:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def resolve_account(chart: ChartOfAccounts, account: str) -> str:
    """Resolve an account id or display name to a selectable account id.

    Names match case-insensitively. Hidden accounts are never offered.

    Raises:
        UnknownAccountError: If neither an id nor a name matches
        InvalidTransactionError: If the match is a hidden account
    """
    account = account.strip()
    match = chart.get(account)
    if match is None:
        lowered = account.lower()
        match = next((acc for acc in chart if acc.name.lower() == lowered), None)
    if match is None:
        raise UnknownAccountError(account_not_found(account))
    if match.hidden:
        raise InvalidTransactionError(account_not_selectable(match.id))
    return match.id


def resolve_account_or_exit(ctx: click.Context, chart: ChartOfAccounts, account: str) -> str:
    """Resolve account name or id, or exit with a CLI error."""
    try:
        return resolve_account(chart, account)
    except DomainError as exc:
        handle_domain_error(ctx, exc)
