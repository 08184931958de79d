"""Render differences between instants as strings for display."""

from since.calculators import breakdown, epoch_total, total
from since.instant import CivilInstant
from since.units import Unit

# Show *at most* the three most significant pieces of info
SHORTHAND_PRECISION = 3


def get_output(start: CivilInstant, end: CivilInstant, unit: Unit = "auto") -> str:
    """Return the difference in the requested unit.

    Without a concrete unit, pick the parts a human would want to read for
    the size of the range.
    """
    if start > end:
        # The order doesn't matter to the user, but the fractions expect it
        start, end = end, start

    if unit == "auto":
        return shorthand(start, end)
    return str(total(unit, start, end))


def shorthand(start: CivilInstant, end: CivilInstant) -> str:
    """Return e.g. ``"4 months, 3 days, 2 hours"``."""
    if start > end:
        start, end = end, start

    parts = breakdown(start, end)
    output = [
        f"{value} {name}" for name, value in parts._asdict().items() if value > 0
    ]
    if not output:
        output.append("0 seconds")
    return ", ".join(output[:SHORTHAND_PRECISION])


def get_epoch_output(now: CivilInstant, unit: Unit = "auto") -> str:
    """Return the time since 1970-01-01T00:00:00 in the requested unit."""
    return str(epoch_total(unit, now))
