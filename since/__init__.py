from .calculators import (
    Breakdown,
    breakdown,
    epoch_seconds,
    epoch_total,
    num_days_fraction,
    num_days_total,
    num_hours_fraction,
    num_hours_total,
    num_minutes_fraction,
    num_minutes_total,
    num_months_fraction,
    num_months_total,
    num_seconds_fraction,
    num_seconds_total,
    num_weeks_total,
    num_years,
    total,
)
from .formatters import get_epoch_output, get_output, shorthand
from .instant import EPOCH, CivilInstant
from .parsers import ParseError, parse
from .units import TOTAL_UNITS, UNITS, Unit, coerce_unit
from .util import is_leap_year, month_length

__all__ = [
    "CivilInstant",
    "EPOCH",
    "ParseError",
    "parse",
    "Unit",
    "UNITS",
    "TOTAL_UNITS",
    "coerce_unit",
    "Breakdown",
    "breakdown",
    "total",
    "num_years",
    "num_months_total",
    "num_weeks_total",
    "num_days_total",
    "num_hours_total",
    "num_minutes_total",
    "num_seconds_total",
    "num_months_fraction",
    "num_days_fraction",
    "num_hours_fraction",
    "num_minutes_fraction",
    "num_seconds_fraction",
    "epoch_seconds",
    "epoch_total",
    "is_leap_year",
    "month_length",
    "shorthand",
    "get_output",
    "get_epoch_output",
]
