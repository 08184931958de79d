"""Calendar-aware differences between two civil instants.

Two families of functions live here:

- Totals (``num_*_total``, ``num_years``) count whole units between two
  instants, e.g. 428 days or 32 months. They order their arguments
  themselves, so they are symmetric.
- Fractions (``num_*_fraction``) give what is left of a unit once the next
  larger unit has been taken out, e.g. the "29 days" of "11 months, 29 days".
  They expect ``start <= end``.

Months and years depend on the calendar; weeks and smaller units are uniform
and are derived from the raw elapsed seconds.
"""

from datetime import MINYEAR
from typing import NamedTuple

from since.instant import EPOCH, CivilInstant
from since.units import Unit
from since.util import DAY, HOUR, MINUTE, WEEK, days_in_year, month_length, month_lengths


class Breakdown(NamedTuple):
    """Largest-unit-first remainders used for shorthand output."""

    years: int
    months: int
    days: int
    hours: int
    minutes: int
    seconds: int


def _ordered(a: CivilInstant, b: CivilInstant) -> tuple[CivilInstant, CivilInstant]:
    return (a, b) if a <= b else (b, a)


def _elapsed(start: CivilInstant, end: CivilInstant) -> int:
    # Real elapsed time in the local zone, DST changes included; year 0 is
    # out of datetime's reach, so such pairs use civil seconds on both sides
    if start.year < MINYEAR or end.year < MINYEAR:
        return abs(end.to_seconds() - start.to_seconds())
    return abs(end.timestamp() - start.timestamp())


#
# Totals


def num_years(start: CivilInstant, end: CivilInstant) -> int:
    # Years are the largest unit, so total and fraction are the same thing
    start, end = _ordered(start, end)
    years = abs(end.year - start.year)
    if year_is_partial(start, end):
        return max(years - 1, 0)
    return years


def num_months_total(start: CivilInstant, end: CivilInstant) -> int:
    start, end = _ordered(start, end)
    months = abs((end.year - start.year) * 12 + end.month - start.month)
    # The later day-of-month hasn't caught up, so the last month isn't whole
    if start.day > end.day:
        months -= 1
    return months


def num_weeks_total(start: CivilInstant, end: CivilInstant) -> int:
    return _elapsed(start, end) // WEEK


def num_days_total(start: CivilInstant, end: CivilInstant) -> int:
    return _elapsed(start, end) // DAY


def num_hours_total(start: CivilInstant, end: CivilInstant) -> int:
    return _elapsed(start, end) // HOUR


def num_minutes_total(start: CivilInstant, end: CivilInstant) -> int:
    return _elapsed(start, end) // MINUTE


def num_seconds_total(start: CivilInstant, end: CivilInstant) -> int:
    return _elapsed(start, end)


_TOTALS = {
    "years": num_years,
    "months": num_months_total,
    "weeks": num_weeks_total,
    "days": num_days_total,
    "hours": num_hours_total,
    "minutes": num_minutes_total,
    "seconds": num_seconds_total,
}


def total(unit: Unit, start: CivilInstant, end: CivilInstant) -> int:
    """Return the whole number of ``unit`` between two instants."""
    if unit not in _TOTALS:
        raise ValueError(
            f"Cannot compute a total in {unit!r}.\n"
            f"Hint: Use shorthand() for the automatic breakdown"
        )
    return _TOTALS[unit](start, end)


#
# Partiality: has the smaller unit's anniversary been reached yet?


def minute_is_partial(start: CivilInstant, end: CivilInstant) -> bool:
    return end.minute == start.minute and end.second < start.second


def hour_is_partial(start: CivilInstant, end: CivilInstant) -> bool:
    return (
        end.hour == start.hour and end.minute < start.minute
    ) or minute_is_partial(start, end)


def day_is_partial(start: CivilInstant, end: CivilInstant) -> bool:
    return (end.day == start.day and end.hour < start.hour) or hour_is_partial(
        start, end
    )


def month_is_partial(start: CivilInstant, end: CivilInstant) -> bool:
    return end.day < start.day or day_is_partial(start, end)


def year_is_partial(start: CivilInstant, end: CivilInstant) -> bool:
    return end.month < start.month or month_is_partial(start, end)


#
# Fractions


def num_months_fraction(start: CivilInstant, end: CivilInstant) -> int:
    months = num_months_total(start, end)
    if month_is_partial(start, end):
        months -= 1
    return max(months, 0) % 12


def _days_left_in_year_span(start: CivilInstant, end: CivilInstant) -> int:
    """Day remainder for a span ending on the last day of a full year.

    Subtracts the days of the whole months on either side of the new year
    from the total.
    """
    start_sum = sum(month_lengths(start.year)[start.month - 1 : 11])
    end_sum = sum(month_lengths(end.year)[: end.month - 1])
    return num_days_total(start, end) - (start_sum + end_sum) - 1


def num_days_fraction(start: CivilInstant, end: CivilInstant) -> int:
    # A single modulus stops working once the span covers months of
    # different lengths, hence the branches.
    days = num_days_total(start, end)
    start_month_size = month_length(start.month, start.year)
    months_apart = (end.year * 12 + end.month) - (start.year * 12 + start.month)

    if months_apart == 1:
        return days % start_month_size
    if end.year != start.year and days_in_year(start.year) - days == 1:
        return _days_left_in_year_span(start, end)
    if days > start_month_size:
        return abs(end.day - start.day)
    return days


def num_hours_fraction(start: CivilInstant, end: CivilInstant) -> int:
    hours = (end.hour - start.hour) % 24
    if hour_is_partial(start, end):
        return (hours - 1) % 24
    return hours


def num_minutes_fraction(start: CivilInstant, end: CivilInstant) -> int:
    return num_minutes_total(start, end) % 60


def num_seconds_fraction(start: CivilInstant, end: CivilInstant) -> int:
    return num_seconds_total(start, end) % 60


def breakdown(start: CivilInstant, end: CivilInstant) -> Breakdown:
    return Breakdown(
        years=num_years(start, end),
        months=num_months_fraction(start, end),
        days=num_days_fraction(start, end),
        hours=num_hours_fraction(start, end),
        minutes=num_minutes_fraction(start, end),
        seconds=num_seconds_fraction(start, end),
    )


#
# Epoch mode


def epoch_seconds(now: CivilInstant) -> int:
    """UNIX timestamp of ``now`` in the local zone."""
    return now.timestamp()


def _truncate(value: int, unit: int) -> int:
    quotient = abs(value) // unit
    return quotient if value >= 0 else -quotient


def epoch_total(unit: Unit, now: CivilInstant) -> int:
    """Return the difference between the epoch and ``now`` in ``unit``.

    Years and months are calendar-aware. Weeks and smaller units divide the
    epoch seconds by a fixed unit length; every day counts as 86400 seconds,
    which is close enough for a count since 1970. There is no shorthand in
    epoch mode: "auto" yields the seconds.
    """
    if unit == "years":
        return num_years(EPOCH, now)
    if unit == "months":
        return num_months_total(EPOCH, now)

    seconds = epoch_seconds(now)
    if unit == "weeks":
        return _truncate(seconds, WEEK)
    if unit == "days":
        return _truncate(seconds, DAY)
    if unit == "hours":
        return _truncate(seconds, HOUR)
    if unit == "minutes":
        return _truncate(seconds, MINUTE)
    if unit in ("seconds", "auto"):
        return seconds
    raise ValueError(f"Unknown unit {unit!r}")
