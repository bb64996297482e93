"""Calendar arithmetic on ISO years.

Pure integer helpers shared by validation, week arithmetic and the Gregorian
conversion. They work for the whole supported range (years 0..9999), including
year 0, which ``datetime.date`` cannot represent.
"""

from .errors import InvalidWeekError, InvalidYearError

__all__ = [
    "MIN_YEAR",
    "MAX_YEAR",
    "is_leap_year",
    "days_in_year",
    "weeks_in_year",
    "iso_weekday_of",
    "to_iso_weekday",
    "validate",
]

# Bounded by the four digit year of the canonical text form.
MIN_YEAR = 0
MAX_YEAR = 9999

# Month offsets for Sakamoto's day-of-week method.
_MONTH_OFFSETS = (0, 3, 2, 5, 0, 3, 5, 1, 4, 6, 2, 4)


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def _dec31_weekday(year: int) -> int:
    # 0 = Sunday. Floor division keeps this correct for year - 1 == -1.
    return (year + year // 4 - year // 100 + year // 400) % 7


def weeks_in_year(year: int) -> int:
    """Return the number of ISO weeks (52 or 53) in ``year``.

    A year is long when it starts or ends on a Thursday: either 31 December of
    the year is a Thursday, or 31 December of the year before is a Wednesday.
    """
    if _dec31_weekday(year) == 4 or _dec31_weekday(year - 1) == 3:
        return 53
    return 52


def iso_weekday_of(year: int, month: int, day: int) -> int:
    """Return the ISO weekday (Monday=1 .. Sunday=7) of a proleptic Gregorian date."""
    if month < 3:
        year -= 1
    weekday = (
        year + year // 4 - year // 100 + year // 400 + _MONTH_OFFSETS[month - 1] + day
    ) % 7
    return weekday or 7


def to_iso_weekday(weekday: int) -> int:
    """Normalize a weekday to ISO numbering.

    ISO weekdays 1..7 pass through; 0 is taken as Sunday from a zero-indexed
    Sunday-first convention and mapped to 7.
    """
    if isinstance(weekday, bool) or not isinstance(weekday, int):
        raise TypeError(f"weekday must be an int, got {type(weekday).__name__}")
    if weekday == 0:
        return 7
    if not (1 <= weekday <= 7):
        raise ValueError(f"Weekday out of range 1..7: {weekday}")
    return weekday


def validate(year: int, week: int) -> None:
    """Check that ``(year, week)`` names an existing ISO week.

    Raises InvalidYearError for years outside 0..9999 and InvalidWeekError
    when ``week`` is not within 1..weeks_in_year(year).
    """
    for name, value in (("year", year), ("week", week)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not (MIN_YEAR <= year <= MAX_YEAR):
        raise InvalidYearError(f"Year out of range {MIN_YEAR}..{MAX_YEAR}: {year}")
    max_week = weeks_in_year(year)
    if not (1 <= week <= max_week):
        raise InvalidWeekError(f"Week out of range 1..{max_week} for year {year}: {week}")
