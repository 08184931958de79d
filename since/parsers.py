"""Forgiving datetime parsing for command-line arguments.

Inputs are tried against a fixed, ordered list of literal templates: times
first, then dates, then full datetimes. The first template that matches and
yields a valid instant wins. Missing date or time parts are filled in from an
explicit ``now``.
"""

import logging
import re
from abc import ABC, abstractmethod

from typing_extensions import override

from since.instant import CivilInstant

logger = logging.getLogger(__name__)

_MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

# Both "Dec" and "December" map to 12
_MONTH_MAP = {name: i for i, name in enumerate(_MONTH_NAMES, 1)} | {
    name[:3]: i for i, name in enumerate(_MONTH_NAMES, 1)
}

# Longest first so "December" wins over "Dec"
_MONTH_PATTERN = "|".join(sorted(_MONTH_MAP, key=len, reverse=True))

_DIRECTIVES = {
    "Y": r"(?P<year>[0-9]{1,4})",
    "m": r"(?P<month>[0-9]{1,2})",
    "B": rf"(?P<month_name>(?i:{_MONTH_PATTERN}))",
    "d": r"(?P<day>[0-9]{1,2})",
    "H": r"(?P<hour>[0-9]{1,2})",
    "M": r"(?P<minute>[0-9]{1,2})",
    "S": r"(?P<second>[0-9]{1,2})",
}


class ParseError(ValueError):
    """Raised when an input matches none of the supported formats."""

    def __init__(self, raw: str, reason: str):
        super().__init__(f"Unable to parse `{raw}` into datetime: {reason}")
        self.raw: str = raw
        self.reason: str = reason


def _compile(fmt: str) -> re.Pattern[str]:
    """Translate a strftime-like template into an anchored regex.

    Everything that isn't a ``%`` directive must appear literally.
    """
    parts: list[str] = []
    chars = iter(fmt)
    for char in chars:
        if char == "%":
            parts.append(_DIRECTIVES[next(chars)])
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts))


class _Template(ABC):
    """A single candidate input format."""

    def __init__(self, fmt: str):
        self.fmt: str = fmt
        self.pattern: re.Pattern[str] = _compile(fmt)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.fmt!r})"

    def match(self, raw: str) -> dict[str, int] | None:
        """Return the numeric fields of ``raw``, or None if the shape differs."""
        found = self.pattern.fullmatch(raw)
        if found is None:
            return None
        groups = found.groupdict()
        name = groups.pop("month_name", None)
        fields = {key: int(value) for key, value in groups.items() if value is not None}
        if name is not None:
            fields["month"] = _MONTH_MAP[name.lower()]
        return fields

    @abstractmethod
    def build(self, fields: dict[str, int], now: CivilInstant) -> CivilInstant:
        """Create the instant, taking whatever is missing from ``now``.

        Raises:
            ValueError: If a field is out of range
        """
        pass


class TimeTemplate(_Template):
    """Time of day on the date of ``now``."""

    @override
    def build(self, fields: dict[str, int], now: CivilInstant) -> CivilInstant:
        return now.replace(
            hour=fields["hour"],
            minute=fields["minute"],
            second=fields.get("second", 0),
        )


class DateTemplate(_Template):
    """Calendar date at the time of day of ``now``."""

    @override
    def build(self, fields: dict[str, int], now: CivilInstant) -> CivilInstant:
        return CivilInstant(
            year=fields["year"],
            month=fields["month"],
            day=fields["day"],
            hour=now.hour,
            minute=now.minute,
            second=now.second,
        )


class DateTimeTemplate(_Template):
    """Fully explicit date and time; ``now`` is not consulted."""

    @override
    def build(self, fields: dict[str, int], now: CivilInstant) -> CivilInstant:
        return CivilInstant(
            year=fields["year"],
            month=fields["month"],
            day=fields["day"],
            hour=fields["hour"],
            minute=fields["minute"],
            second=fields.get("second", 0),
        )


TIME_FORMATS = ("%H:%M:%S", "%H:%M")

# In order of (entirely subjective) commonness
DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%Y.%m.%d",
    "%d-%m-%Y",
    "%d/%m/%Y",
    "%d.%m.%Y",
    "%Y %B %d",
    "%Y-%B-%d",
    "%Y/%B/%d",
    "%Y.%B.%d",
    "%d %B %Y",
    "%d-%B-%Y",
    "%d/%B/%Y",
    "%d.%B.%Y",
)

DATETIME_JOINERS = (" ", "T")

TEMPLATES: tuple[_Template, ...] = (
    *(TimeTemplate(fmt) for fmt in TIME_FORMATS),
    *(DateTemplate(fmt) for fmt in DATE_FORMATS),
    *(
        DateTimeTemplate(date + joiner + time)
        for date in DATE_FORMATS
        for joiner in DATETIME_JOINERS
        for time in TIME_FORMATS
    ),
)


def parse(raw: str, now: CivilInstant) -> CivilInstant:
    """Parse ``raw`` into a civil instant.

    Args:
        raw: User-supplied date, time or datetime string
        now: Reference instant supplying any missing date or time parts

    Raises:
        ParseError: If no template accepts the input
    """
    reason = "no matching format"
    for template in TEMPLATES:
        fields = template.match(raw)
        if fields is None:
            continue
        try:
            instant = template.build(fields, now)
        except ValueError as e:
            logger.debug("%r rejected %r: %s", template, raw, e)
            reason = str(e)
            continue
        logger.debug("%r accepted %r as %s", template, raw, instant)
        return instant
    raise ParseError(raw, reason)
