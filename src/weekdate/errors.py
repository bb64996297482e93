"""Exception types raised by weekdate.

Every error derives from ``WeekDateError`` (a ``ValueError``), so callers that
only care about "bad week input" can catch a single type. Serialization
surfaces raise a ``WeekDateError`` carrying a surface specific message with the
original error chained as ``__cause__``.
"""

__all__ = [
    "WeekDateError",
    "InvalidYearError",
    "InvalidWeekError",
    "FormatError",
    "UnsupportedSourceTypeError",
    "WeekRangeError",
    "RangeOverflowError",
    "RangeUnderflowError",
]


class WeekDateError(ValueError):
    """Base class for all weekdate errors."""


class InvalidYearError(WeekDateError):
    """Year outside 0..9999."""


class InvalidWeekError(WeekDateError):
    """Week outside 1..weeks_in_year(year)."""


class FormatError(WeekDateError):
    """Raised when a text token is not in the ``YYYY-Www`` form."""


class UnsupportedSourceTypeError(WeekDateError, TypeError):
    """A storage value of a type that cannot hold a token."""


class WeekRangeError(WeekDateError):
    """Arithmetic or conversion left the supported year range."""


class RangeOverflowError(WeekRangeError):
    """Result falls after the maximum year."""


class RangeUnderflowError(WeekRangeError):
    """Result falls before the minimum year."""
