"""Unit names accepted by the calculators and the command line."""

from typing import Literal, TypeAlias

Unit: TypeAlias = Literal[
    "years", "months", "weeks", "days", "hours", "minutes", "seconds", "auto"
]

# Largest first; "auto" asks for the shorthand breakdown instead of a total
TOTAL_UNITS: tuple[Unit, ...] = (
    "years",
    "months",
    "weeks",
    "days",
    "hours",
    "minutes",
    "seconds",
)
UNITS: tuple[Unit, ...] = TOTAL_UNITS + ("auto",)


def coerce_unit(value: str | None) -> Unit:
    """Normalize a user-supplied unit name.

    Args:
        value: Unit name (case-insensitive), or None for "auto"

    Raises:
        ValueError: If the name is not a known unit
    """
    if value is None:
        return "auto"
    name = value.strip().lower()
    for unit in UNITS:
        if unit == name:
            return unit
    valid = ", ".join(UNITS)
    raise ValueError(f"Invalid unit '{value}'. Valid units: {valid}")
