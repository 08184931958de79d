"""Utility constants and helpers for since.

Time unit constants represent durations in seconds. The calendar helpers
implement the proleptic Gregorian rules used throughout the package.
"""

# Time unit constants (all values in seconds)
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def month_lengths(year: int) -> tuple[int, ...]:
    """Return the twelve month lengths of ``year``, February included."""
    if is_leap_year(year):
        return _MONTH_LENGTHS[:1] + (29,) + _MONTH_LENGTHS[2:]
    return _MONTH_LENGTHS


def month_length(month: int, year: int) -> int:
    return month_lengths(year)[month - 1]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def days_before_year(year: int) -> int:
    """Days from 0000-01-01 to January 1st of ``year`` (year 0 is leap)."""
    if year <= 0:
        return 0
    leaps = (year + 3) // 4 - (year + 99) // 100 + (year + 399) // 400
    return 365 * year + leaps
