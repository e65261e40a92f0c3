"""Tests for date parser with relative dates."""

import pytest
from datetime import date, timedelta
from finova.utils.date_parser import parse_date


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    result = parse_date("2024-01-15")
    assert result == date(2024, 1, 15)


def test_parse_written_date():
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_today():
    """Test parsing 'today'."""
    result = parse_date("today")
    assert result == date.today()


def test_parse_yesterday():
    """Test parsing 'yesterday'."""
    result = parse_date(" Yesterday ")
    assert result == date.today() - timedelta(days=1)


def test_parse_tomorrow():
    result = parse_date("tomorrow")
    assert result == date.today() + timedelta(days=1)


def test_parse_last_month():
    """Test parsing 'last month'."""
    result = parse_date("last month")
    # Should be first day of last month
    today = date.today()
    if today.month == 1:
        expected = date(today.year - 1, 12, 1)
    else:
        expected = date(today.year, today.month - 1, 1)
    assert result == expected


def test_parse_last_week():
    """Test parsing 'last week'."""
    result = parse_date("last week")
    today = date.today()
    expected = today - timedelta(days=today.weekday() + 7)
    assert result == expected
    assert result.weekday() == 0


def test_parse_next_week():
    result = parse_date("next week")
    today = date.today()
    assert result == today - timedelta(days=today.weekday()) + timedelta(days=7)


def test_parse_this_year():
    """Test parsing 'this year'."""
    result = parse_date("this year")
    assert result == date(date.today().year, 1, 1)


def test_parse_last_year():
    result = parse_date("last year")
    assert result == date(date.today().year - 1, 1, 1)


def test_parse_last_weekday():
    """Test parsing 'last friday' lands strictly in the past week."""
    result = parse_date("last friday")
    today = date.today()
    assert result.weekday() == 4
    assert 1 <= (today - result).days <= 7


def test_parse_invalid_date():
    """Test parsing an invalid date string."""
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date")
