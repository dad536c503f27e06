"""
Test cases for formatting.py.
"""

import pytest

from calc_toolkit.formatting import (
    format_currency,
    format_percentage,
    format_timeperiod,
    round_half_up,
)


# ── Rounding ──────────────────────────────────────────────────────────────────

def test_round_half_up_ties_away_from_zero():
    assert round_half_up(0.125) == 0.13
    assert round_half_up(-0.125) == -0.13
    assert round_half_up(2.675) == 2.68      # built-in round() gives 2.67
    assert round_half_up(1.005) == 1.01


def test_round_half_up_other_places():
    assert round_half_up(2.5, 0) == 3
    assert round_half_up(1.23456, 3) == 1.235


def test_round_half_up_passes_infinity():
    assert round_half_up(float("inf")) == float("inf")


# ── Currency ──────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "amount, expected",
    [
        (1234.56, "$1,234.56"),
        (0, "$0.00"),
        (1_000_000, "$1,000,000.00"),
        (1234.567, "$1,234.57"),
        (1234.5, "$1,234.50"),
        (0.005, "$0.01"),
        (-1234.56, "-$1,234.56"),
        (-0.001, "$0.00"),
    ],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


# ── Percentage ────────────────────────────────────────────────────────────────

def test_format_percentage():
    assert format_percentage(4.5) == "4.50%"
    assert format_percentage(0) == "0.00%"
    assert format_percentage(3.33333) == "3.33%"


# ── Time period ───────────────────────────────────────────────────────────────

def test_months_only():
    assert format_timeperiod(11) == "11 months"
    assert format_timeperiod(1) == "1 month"


def test_years_only():
    assert format_timeperiod(24) == "2 years"
    assert format_timeperiod(12) == "1 year"


def test_years_and_months():
    assert format_timeperiod(25) == "2 years and 1 month"
    assert format_timeperiod(37) == "3 years and 1 month"
    assert format_timeperiod(38) == "3 years and 2 months"


def test_zero():
    assert format_timeperiod(0) == "0 months"


def test_partial_months_are_rounded():
    assert format_timeperiod(13.7) == "1 year and 2 months"
    assert format_timeperiod(12.2) == "1 year"
    assert format_timeperiod(0.5) == "1 month"


def test_rounded_remainder_carries_into_years():
    assert format_timeperiod(11.7) == "1 year"
    assert format_timeperiod(23.6) == "2 years"
    assert format_timeperiod(35.5) == "3 years"
