"""ISO 8601 week date value type.

``WeekDate`` identifies a week by ISO year and week number (weeks start on
Monday, week 1 contains the year's first Thursday). Values are immutable and
always valid: the constructor validates, and every operation that "changes" a
week returns a new instance.

Serialization surfaces all produce and consume the canonical token
``YYYY-Www``:

* text: ``str(week)``, ``isoformat``/``fromisoformat``, ``marshal_text``/``unmarshal_text``
* JSON: ``marshal_json``/``unmarshal_json`` (the token as a JSON string literal)
* storage: ``value``/``scan`` and ``__conform__`` for ``sqlite3``
"""

import logging
import sqlite3
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, UTC, date, datetime, time, timedelta

from . import codec
from .errors import (
    FormatError,
    RangeOverflowError,
    RangeUnderflowError,
    UnsupportedSourceTypeError,
    WeekDateError,
)
from .isoyear import (
    MAX_YEAR,
    MIN_YEAR,
    days_in_year,
    iso_weekday_of,
    to_iso_weekday,
    validate,
    weeks_in_year,
)

__all__ = ["WeekDate"]

logger = logging.getLogger(__name__)


def _wrap(error: WeekDateError, context: str) -> WeekDateError:
    # Keep the error kind so callers can still catch e.g. InvalidWeekError.
    return type(error)(f"{context}: {error}")


def _check_year_in_range(year: int) -> None:
    if year > MAX_YEAR:
        raise RangeOverflowError(f"Week arithmetic overflows the maximum year {MAX_YEAR}")
    if year < MIN_YEAR:
        raise RangeUnderflowError(f"Week arithmetic underflows the minimum year {MIN_YEAR}")


def _normalize_ordinal(year: int, ordinal: int) -> tuple[int, int]:
    """Move an out-of-range day-of-year into the previous or next year."""
    if ordinal < 1:
        return year - 1, days_in_year(year - 1) + ordinal
    if ordinal > days_in_year(year):
        return year + 1, ordinal - days_in_year(year)
    return year, ordinal


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, order=True)
class WeekDate:
    year: int
    week: int

    def __post_init__(self) -> None:
        validate(self.year, self.week)

    def __str__(self) -> str:
        return self.isoformat()

    @property
    def week_number(self) -> int:
        return self.week

    @classmethod
    def from_date(cls, value: date) -> "WeekDate":
        """Return the ISO week containing ``value`` (a ``date`` or ``datetime``)."""
        iso = value.isocalendar()
        return cls(iso.year, iso.week)

    @classmethod
    def today(cls) -> "WeekDate":
        return cls.from_date(date.today())

    # Arithmetic

    def next(self) -> "WeekDate":
        return self.add(1)

    def previous(self) -> "WeekDate":
        return self.add(-1)

    def add(self, weeks: int) -> "WeekDate":
        """Return the week ``weeks`` weeks after (or before, if negative) this one.

        Raises RangeOverflowError / RangeUnderflowError when the result would
        fall after 9999 or before year 0.
        """
        if not _is_int(weeks):
            raise TypeError(f"weeks must be an int, got {type(weeks).__name__}")
        sign = -1 if weeks < 0 else 1
        year = self.year
        week = self.week + weeks
        max_weeks = weeks_in_year(year)
        # Step one year at a time until the offset fits into the current year.
        while week > max_weeks or week < 0:
            year += sign
            _check_year_in_range(year)
            if sign == 1:
                week -= max_weeks
            max_weeks = weeks_in_year(year)
            if sign == -1:
                week += max_weeks
        if week == 0:
            # Week 0 is the last week of the previous year.
            year -= 1
            _check_year_in_range(year)
            week = weeks_in_year(year)
        return WeekDate(year, week)

    def difference(self, other: "WeekDate") -> int:
        """Return the signed number of weeks from ``self`` to ``other``.

        Positive when ``other`` is later than ``self``, negative when earlier,
        so ``self.add(self.difference(other)) == other``.
        """
        if not isinstance(other, WeekDate):
            raise TypeError(f"Cannot compute difference with {type(other).__name__}")
        year_diff = other.year - self.year
        direction = -1 if year_diff < 0 else 1
        earlier, later = (self, other) if direction == 1 else (other, self)
        # Invariant: the walk only ever runs forward from the earlier year.
        if earlier.year > later.year:
            raise AssertionError("week difference walk: start year after end year")
        total = sum(weeks_in_year(year) for year in range(earlier.year, later.year))
        total += later.week - earlier.week
        return total * direction

    def __add__(self, other: object) -> "WeekDate":
        if _is_int(other):
            return self.add(other)  # type: ignore[arg-type]
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> "WeekDate | int":
        if isinstance(other, WeekDate):
            return other.difference(self)
        if _is_int(other):
            return self.add(-other)  # type: ignore[operator]
        return NotImplemented

    # Gregorian conversion

    def to_date(self, weekday: int = 1) -> date:
        """Return the calendar date of ``weekday`` (ISO, Monday=1 .. Sunday=7) in this week.

        ``0`` is accepted as Sunday. Raises RangeUnderflowError / RangeOverflowError
        when the date is outside what ``datetime.date`` supports (years 1..9999).
        """
        # Ordinal-date method, see
        # https://en.wikipedia.org/wiki/ISO_week_date#Calculating_a_date_given_the_year,_week_number_and_weekday
        iso_weekday = to_iso_weekday(weekday)
        correction = iso_weekday_of(self.year, 1, 4) + 3
        ordinal = self.week * 7 + iso_weekday - correction
        year, ordinal = _normalize_ordinal(self.year, ordinal)
        if year < MINYEAR:
            raise RangeUnderflowError(f"{self} day {iso_weekday} falls before year {MINYEAR}")
        if year > MAXYEAR:
            raise RangeOverflowError(f"{self} day {iso_weekday} falls after year {MAXYEAR}")
        return date(year, 1, 1) + timedelta(days=ordinal - 1)

    def to_datetime(self, weekday: int = 1) -> datetime:
        """Return midnight UTC of ``weekday`` in this week."""
        return datetime.combine(self.to_date(weekday), time.min, tzinfo=UTC)

    def days(self) -> tuple[date, ...]:
        """Return the seven dates of this week, Monday first."""
        return tuple(self.to_date(weekday) for weekday in range(1, 8))

    # Text

    def isoformat(self) -> str:
        return codec.encode(self.year, self.week).decode("ascii")

    @classmethod
    def fromisoformat(cls, value: str) -> "WeekDate":
        """Parse a canonical ``YYYY-Www`` token, raising the codec errors unchanged."""
        year, week = codec.decode(value)
        return cls(year, week)

    def marshal_text(self) -> bytes:
        try:
            return codec.encode(self.year, self.week)
        except WeekDateError as e:
            raise _wrap(e, "unable to marshal text") from e

    @classmethod
    def unmarshal_text(cls, data: bytes | str) -> "WeekDate":
        try:
            year, week = codec.decode(data)
        except WeekDateError as e:
            logger.debug("Rejected week date text %r: %s", data, e)
            raise _wrap(e, "unable to unmarshal text") from e
        return cls(year, week)

    # JSON

    def marshal_json(self) -> bytes:
        try:
            raw = codec.encode(self.year, self.week)
        except WeekDateError as e:
            raise _wrap(e, "unable to marshal json") from e
        return b'"' + raw + b'"'

    @classmethod
    def unmarshal_json(cls, data: bytes | str) -> "WeekDate":
        try:
            data = codec.as_bytes(data)
        except WeekDateError as e:
            raise _wrap(e, "unable to unmarshal json") from e
        if len(data) < 2 or data[:1] != b'"' or data[-1:] != b'"':
            raise FormatError("unable to unmarshal json: string literal expected")
        try:
            year, week = codec.decode(data[1:-1])
        except WeekDateError as e:
            logger.debug("Rejected week date json %r: %s", data, e)
            raise _wrap(e, "unable to unmarshal json") from e
        return cls(year, week)

    # Storage

    def value(self) -> str:
        """Return the value stored in a database column (the canonical token)."""
        try:
            return codec.encode(self.year, self.week).decode("ascii")
        except WeekDateError as e:
            raise _wrap(e, "unable to create value") from e

    @classmethod
    def scan(cls, src: object) -> "WeekDate":
        """Build a week from a database value (``str`` or a bytes-like object)."""
        if not isinstance(src, (str, bytes, bytearray, memoryview)):
            raise UnsupportedSourceTypeError(
                f"unable to scan value: incompatible type {type(src).__name__}"
            )
        try:
            year, week = codec.decode(src)
        except WeekDateError as e:
            logger.debug("Rejected week date value %r: %s", src, e)
            raise _wrap(e, "unable to scan value") from e
        return cls(year, week)

    def __conform__(self, protocol: object) -> str | None:
        if protocol is sqlite3.PrepareProtocol:
            return self.value()
        return None
