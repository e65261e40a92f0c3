"""Date parsing utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


def _relative_period(prefix: str, period: str, today: date) -> date | None:
    """Resolve 'last/this/next <period>' to the first day of that period."""
    step = {"last": -1, "this": 0, "next": 1}[prefix]
    if period == "month":
        return (today + relativedelta(months=step)).replace(day=1)
    if period == "year":
        return today.replace(month=1, day=1) + relativedelta(years=step)
    if period == "week":
        return today - timedelta(days=today.weekday()) + timedelta(weeks=step)
    if prefix == "last" and period in WEEKDAYS:
        days_ago = (today.weekday() - WEEKDAYS.index(period)) % 7 or 7
        return today - timedelta(days=days_ago)
    return None


def parse_date(date_str: str) -> date:
    """Parse an entry date.

    Supports absolute dates ("2024-01-15", "January 15, 2024") and relative
    forms: "today", "yesterday", "tomorrow", "last/this/next week|month|year"
    (first day of that period) and "last <weekday>".

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    fixed = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if date_str in fixed:
        return fixed[date_str]

    prefix, _, period = date_str.partition(" ")
    if prefix in ("last", "this", "next") and period:
        resolved = _relative_period(prefix, period.strip(), today)
        if resolved is not None:
            return resolved

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")
