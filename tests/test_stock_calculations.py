"""Tests for the line item arithmetic and fixed-point helpers."""

from decimal import Decimal

import pytest

from backoffice.services.daily_stock import calculate_stock_details
from backoffice.utils.numbers import format_quantity, to_decimal


def test_closing_and_variance_formula():
    """10 + 5 - 3 sold - 1 wasted = 11; actual 10 gives variance -1."""
    calculated, variance = calculate_stock_details(
        opening_stock=10,
        items_received=5,
        items_sold_manual=3,
        items_taken_wasted=1,
        closing_stock_actual=10,
    )
    assert calculated == Decimal("11.00")
    assert variance == Decimal("-1.00")
    assert format_quantity(calculated) == "11.00"
    assert format_quantity(variance) == "-1.00"


def test_recompute_is_pure():
    """Same inputs give the same outputs however many times it runs."""
    args = ("12.50", "3.25", "4.10", "0.15", "11.00")
    first = calculate_stock_details(*args)
    for _ in range(3):
        assert calculate_stock_details(*args) == first
    assert first == (Decimal("11.50"), Decimal("-0.50"))


def test_no_float_drift():
    """0.1 + 0.2 style inputs stay exact."""
    calculated, variance = calculate_stock_details(0.1, 0.2, 0, 0, 0.3)
    assert calculated == Decimal("0.30")
    assert variance == Decimal("0.00")
    assert format_quantity(variance) == "0.00"


def test_missing_values_count_as_zero():
    calculated, variance = calculate_stock_details(None, "", None, None, None)
    assert calculated == Decimal("0.00")
    assert variance == Decimal("0.00")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("12.5", "12.50"),
        (7, "7.00"),
        (Decimal("1.005"), "1.01"),
        ("-0.001", "0.00"),
    ],
)
def test_format_quantity(raw, expected):
    assert format_quantity(raw) == expected


def test_format_quantity_none():
    assert format_quantity(None) is None


def test_to_decimal_rejects_garbage():
    with pytest.raises(ValueError):
        to_decimal("twelve")


@pytest.mark.parametrize("raw", ["1e30", "10000000000.00", Decimal("-10000000000")])
def test_to_decimal_rejects_values_beyond_column_range(raw):
    with pytest.raises(ValueError, match="out of range|Not a decimal"):
        to_decimal(raw)
