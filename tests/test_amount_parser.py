"""Tests for amount parsing."""

import pytest
from decimal import Decimal

from finova.utils.amount_parser import parse_amount


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123.45", Decimal("123.45")),
        ("1,234.56", Decimal("1234.56")),
        ("₹5000", Decimal("5000.00")),
        ("$ 12", Decimal("12.00")),
        ("(50.25)", Decimal("-50.25")),
        ("19.999", Decimal("20.00")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


def test_result_has_two_places():
    assert str(parse_amount("7")) == "7.00"


@pytest.mark.parametrize("text", ["", "   ", "abc", "12..5", "NaN", "Infinity"])
def test_invalid_amount(text):
    with pytest.raises(ValueError):
        parse_amount(text)
