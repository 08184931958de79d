"""Tests for calendar helpers and unit constants."""

import calendar

import pytest

from since.util import (
    DAY,
    HOUR,
    MINUTE,
    WEEK,
    days_before_year,
    days_in_year,
    is_leap_year,
    month_length,
    month_lengths,
)


def test_unit_constants_are_consistent():
    """Each constant is a whole multiple of the next smaller one."""
    assert MINUTE == 60
    assert HOUR == 60 * MINUTE
    assert DAY == 24 * HOUR
    assert WEEK == 7 * DAY


@pytest.mark.parametrize(
    "year, leap",
    [(2019, False), (2020, True), (1900, False), (2000, True), (2100, False), (0, True)],
)
def test_is_leap_year_follows_gregorian_rules(year, leap):
    """Divisible by 4, except centuries not divisible by 400."""
    assert is_leap_year(year) is leap


@pytest.mark.parametrize("year", [1, 1582, 1900, 1970, 2000, 2019, 2020, 2400, 9999])
def test_month_length_matches_standard_library_calendar(year):
    """Month lengths agree with the stdlib calendar for every month."""
    for month in range(1, 13):
        assert month_length(month, year) == calendar.monthrange(year, month)[1]


def test_february_has_29_days_only_in_leap_years():
    """February is the only month that changes length."""
    assert month_lengths(2020)[1] == 29
    assert month_lengths(2019)[1] == 28
    assert sum(month_lengths(2020)) == 366
    assert sum(month_lengths(2019)) == 365


def test_days_in_year():
    """Leap years have 366 days."""
    assert days_in_year(2019) == 365
    assert days_in_year(2020) == 366
    assert days_in_year(1900) == 365


def test_days_before_year_counts_year_zero_as_leap():
    """Year 0 is a leap year in the proleptic Gregorian calendar."""
    assert days_before_year(0) == 0
    assert days_before_year(1) == 366
    assert days_before_year(5) == 366 + 4 * 365 + 1
