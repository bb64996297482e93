"""ISO week string parsing and range resolution utilities.

Helpers:
* parse week strings in canonical form (``YYYY-Www``), compact form (``YYYYWww``)
  or short form (``ww`` => current ISO year)
* ``WeekRange``: an inclusive run of consecutive ISO weeks
* resolve a start/end week range; when ``end`` is omitted the range ends with the
  latest fully completed week (the week before ``now``).

Range datetimes are midnight UTC: ``start_datetime`` is Monday of the first
week, ``end_datetime`` is Monday of the week *after* the last one (exclusive).
"""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, datetime

from .errors import FormatError
from .week import WeekDate

__all__ = [
    "parse_week_str",
    "resolve_week_range",
    "WeekRange",
]


def parse_week_str(value: str, now: date | None = None) -> WeekDate:
    """Parse a week string.

    Accepts:
      - Canonical form: 'YYYY-Www' (e.g. '2025-W43')
      - Compact form: 'YYYYWww' (e.g. '2025W43')
      - Short form: 'ww' which resolves using the ISO year of ``now``.

    Raises FormatError on invalid format and the validation errors on a week
    that does not exist.
    """
    value = value.strip()
    if not value:
        raise FormatError("Week value is empty")
    if "W" in value:
        if "-" in value:
            return WeekDate.fromisoformat(value)
        year_part, week_part = value.split("W", 1)
        if len(year_part) != 4 or not (year_part.isdigit() and week_part.isdigit()):
            raise FormatError(f"Invalid week format '{value}'")
        return WeekDate(int(year_part), int(week_part))
    if not value.isdigit():
        raise FormatError(f"Invalid short week format '{value}'")
    if now is None:
        now = date.today()
    return WeekDate(now.isocalendar().year, int(value))


@dataclass(frozen=True)
class WeekRange:
    start: WeekDate  # first week, inclusive
    end: WeekDate  # last week, inclusive

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} is after end {self.end}")

    def __len__(self) -> int:
        return self.start.difference(self.end) + 1

    def __iter__(self) -> Iterator[WeekDate]:
        current = self.start
        yield current
        while current < self.end:
            current = current.next()
            yield current

    def __contains__(self, item: object) -> bool:
        return isinstance(item, WeekDate) and self.start <= item <= self.end

    @property
    def start_datetime(self) -> datetime:
        """Monday 00:00 UTC of the first week."""
        return self.start.to_datetime(1)

    @property
    def end_datetime(self) -> datetime:
        """Monday 00:00 UTC of the week following the last week (exclusive).

        Raises RangeOverflowError for ranges ending in 9999-W52, which has no following week.
        """
        return self.end.next().to_datetime(1)

    @property
    def codes(self) -> list[str]:
        return [week.isoformat() for week in self]


def resolve_week_range(
    start_week: str,
    end_week: str | None = None,
    now: date | None = None,
) -> WeekRange:
    """Resolve week strings into a WeekRange.

    If end_week is omitted, the range ends with the week before the week of
    ``now`` (the latest fully completed week).
    """
    if now is None:
        now = date.today()

    start = parse_week_str(start_week, now=now)
    if end_week is not None:
        end = parse_week_str(end_week, now=now)
    else:
        end = WeekDate.from_date(now).previous()
    return WeekRange(start=start, end=end)
