"""Codec for the canonical ISO week date token ``YYYY-Www``.

The token is always exactly eight ASCII bytes: a zero padded four digit year,
the literal ``-W`` and a zero padded two digit week. Every serialization
surface (text, JSON, storage) goes through ``encode`` and ``decode``.
"""

from .errors import FormatError
from .isoyear import validate

__all__ = ["TOKEN_LENGTH", "as_bytes", "encode", "decode"]

TOKEN_LENGTH = 8


def encode(year: int, week: int) -> bytes:
    """Return the canonical token for ``(year, week)`` after validating it."""
    validate(year, week)
    return f"{year:04d}-W{week:02d}".encode("ascii")


def as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    """Return the raw bytes of a token, raising FormatError for unencodable text."""
    if isinstance(data, str):
        try:
            return data.encode("utf-8")
        except UnicodeEncodeError as e:
            raise FormatError(f"Invalid week date text {data!r}: {e}") from e
    return bytes(data)


def decode(data: bytes | bytearray | memoryview | str) -> tuple[int, int]:
    """Parse a canonical token into ``(year, week)``.

    Raises FormatError on malformed input and the validation errors of
    ``isoyear.validate`` when the token is well formed but names no ISO week.
    """
    data = as_bytes(data)
    if len(data) != TOKEN_LENGTH:
        raise FormatError(f"Invalid week date length {len(data)}, expected {TOKEN_LENGTH}: {data!r}")
    if data[4:5] != b"-" or data[5:6] != b"W":
        raise FormatError(f"Invalid week date separator, expected 'YYYY-Www': {data!r}")
    year_part, week_part = data[:4], data[6:]
    # bytes.isdigit only accepts ASCII digits.
    if not (year_part.isdigit() and week_part.isdigit()):
        raise FormatError(f"Invalid week date digits, expected 'YYYY-Www': {data!r}")
    year, week = int(year_part), int(week_part)
    validate(year, week)
    return year, week
