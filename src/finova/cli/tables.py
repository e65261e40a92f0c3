"""Text table rendering for reports."""

from decimal import Decimal
from itertools import zip_longest
from typing import Iterable, Optional, Sequence, TypeVar

import click

from finova.domain.entities import BalanceSheetLine, ReportRow

T = TypeVar("T")

NAME_WIDTH = 32
AMOUNT_WIDTH = 14
BLANK = "-"


def format_amount(amount: Optional[Decimal], blank: str = BLANK) -> str:
    """Format a money amount with two decimals, or a blank marker."""
    if amount is None:
        return blank
    return f"{amount:,.2f}"


def pair_columns(
    left: Sequence[T], right: Sequence[T]
) -> list[tuple[Optional[T], Optional[T]]]:
    """Align two lists side by side by position.

    The shorter list is padded with None. Rows are paired by index only;
    a pair carries no meaning beyond sharing a display line.
    """
    return list(zip_longest(left, right))


def echo_rule(width: int, char: str = "-") -> None:
    click.echo(char * width)


def echo_debit_credit_table(
    title: str,
    rows: Iterable[ReportRow],
    total_debit: Decimal,
    total_credit: Decimal,
) -> None:
    """Render rows with Debit and Credit columns plus a totals line."""
    width = NAME_WIDTH + 2 * (AMOUNT_WIDTH + 1)
    click.echo(f"\n{title}")
    echo_rule(width, "=")
    click.echo(f"{'Particulars':<{NAME_WIDTH}} {'Debit':>{AMOUNT_WIDTH}} {'Credit':>{AMOUNT_WIDTH}}")
    echo_rule(width)
    for row in rows:
        click.echo(
            f"{row.name[:NAME_WIDTH]:<{NAME_WIDTH}} "
            f"{format_amount(row.debit):>{AMOUNT_WIDTH}} "
            f"{format_amount(row.credit):>{AMOUNT_WIDTH}}"
        )
    echo_rule(width)
    click.echo(
        f"{'Total':<{NAME_WIDTH}} "
        f"{format_amount(total_debit):>{AMOUNT_WIDTH}} "
        f"{format_amount(total_credit):>{AMOUNT_WIDTH}}"
    )


def echo_side_by_side(
    left_title: str,
    right_title: str,
    left: Sequence[BalanceSheetLine],
    right: Sequence[BalanceSheetLine],
    left_total: Decimal,
    right_total: Decimal,
) -> None:
    """Render two balance sheet sides next to each other."""
    half = NAME_WIDTH + AMOUNT_WIDTH + 1
    width = 2 * half + 3
    echo_rule(width, "=")
    click.echo(f"{left_title:<{half}} | {right_title:<{half}}")
    echo_rule(width)
    for left_line, right_line in pair_columns(left, right):
        click.echo(f"{_side_cell(left_line)} | {_side_cell(right_line)}")
    echo_rule(width)
    click.echo(
        f"{'Total':<{NAME_WIDTH}} {format_amount(left_total):>{AMOUNT_WIDTH}} | "
        f"{'Total':<{NAME_WIDTH}} {format_amount(right_total):>{AMOUNT_WIDTH}}"
    )


def _side_cell(line: Optional[BalanceSheetLine]) -> str:
    if line is None:
        return " " * (NAME_WIDTH + AMOUNT_WIDTH + 1)
    return f"{line.name[:NAME_WIDTH]:<{NAME_WIDTH}} {format_amount(line.amount):>{AMOUNT_WIDTH}}"
