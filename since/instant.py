from dataclasses import dataclass, replace
from datetime import MINYEAR, datetime, tzinfo
from typing import Any

from dateutil.tz import tzlocal

from since.util import DAY, HOUR, MINUTE, days_before_year, month_length, month_lengths

MIN_YEAR = 0
MAX_YEAR = 9999

# Civil seconds from 0000-01-01 to 1970-01-01
_EPOCH_SECONDS = days_before_year(1970) * DAY


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} ({value}) must be in {low}..{high}")


@dataclass(frozen=True, kw_only=True, order=True)
class CivilInstant:
    """A calendar date plus time-of-day in the process's local civil time.

    Fields compare in declaration order, so ordering is chronological.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        _check_range("year", self.year, MIN_YEAR, MAX_YEAR)
        _check_range("month", self.month, 1, 12)
        _check_range("day", self.day, 1, month_length(self.month, self.year))
        _check_range("hour", self.hour, 0, 23)
        _check_range("minute", self.minute, 0, 59)
        _check_range("second", self.second, 0, 59)

    def __str__(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )

    def replace(self, **fields: Any) -> "CivilInstant":
        return replace(self, **fields)

    @property
    def ordinal(self) -> int:
        """Days elapsed since 0000-01-01 in the proleptic Gregorian calendar."""
        before_month = sum(month_lengths(self.year)[: self.month - 1])
        return days_before_year(self.year) + before_month + self.day - 1

    def to_seconds(self) -> int:
        """Civil seconds elapsed since 0000-01-01T00:00:00.

        Every day counts as 86400 seconds. Used where datetime can't go,
        i.e. for year 0.
        """
        return (
            self.ordinal * DAY + self.hour * HOUR + self.minute * MINUTE + self.second
        )

    @classmethod
    def from_datetime(cls, dt: datetime) -> "CivilInstant":
        """Build an instant from a datetime, dropping microseconds.

        Timezone-aware datetimes are converted to local time first.
        """
        if dt.tzinfo is not None:
            dt = dt.astimezone(tzlocal())
        return cls(
            year=dt.year,
            month=dt.month,
            day=dt.day,
            hour=dt.hour,
            minute=dt.minute,
            second=dt.second,
        )

    def to_datetime(self, tz: tzinfo | None = None) -> datetime:
        """Return a datetime for this instant, naive unless ``tz`` is given.

        Raises:
            ValueError: For year 0, which datetime cannot represent
        """
        return datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            tzinfo=tz,
        )

    def timestamp(self) -> int:
        """UNIX timestamp of this instant read as local time.

        DST changes in the local zone are accounted for. Year 0 falls back to
        civil seconds since 1970-01-01T00:00:00.
        """
        if self.year < MINYEAR:
            return self.to_seconds() - _EPOCH_SECONDS
        return int(self.to_datetime(tzlocal()).timestamp())

    @classmethod
    def now(cls) -> "CivilInstant":
        """Sample the wall clock in local time.

        Call this once per invocation and pass the result along; nothing else
        in the package reads the clock.
        """
        return cls.from_datetime(datetime.now(tzlocal()))


EPOCH = CivilInstant(year=1970, month=1, day=1)
