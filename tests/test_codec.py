import pytest

from weekdate.codec import decode, encode
from weekdate.errors import FormatError, InvalidWeekError, InvalidYearError


def test_encode_canonical_token():
    assert encode(2021, 52) == b"2021-W52"
    assert encode(2021, 5) == b"2021-W05"
    assert encode(5, 1) == b"0005-W01"
    assert encode(0, 1) == b"0000-W01"


def test_encode_rejects_invalid():
    with pytest.raises(InvalidWeekError):
        encode(2021, 53)
    with pytest.raises(InvalidYearError):
        encode(10000, 1)


def test_decode_valid():
    assert decode(b"2021-W52") == (2021, 52)
    assert decode("2020-W53") == (2020, 53)
    assert decode(bytearray(b"0000-W01")) == (0, 1)


@pytest.mark.parametrize(
    "token",
    [
        "2021W52",  # missing separator
        "2021-W520",
        "",
        "2021-X52",
        "2021_W52",
        "2021-w52",
        "20a1-W52",
        "2021-W5a",
        "+021-W05",
        " 2021-W5",
        "２０２１-W52",  # non-ASCII digits
        "2021-W5\ud800",  # lone surrogate, not encodable
    ],
)
def test_decode_rejects_malformed(token):
    with pytest.raises(FormatError):
        decode(token)


def test_decode_rejects_nonexistent_week():
    with pytest.raises(InvalidWeekError):
        decode("2021-W99")
    with pytest.raises(InvalidWeekError):
        decode("2021-W53")
    with pytest.raises(InvalidWeekError):
        decode("2021-W00")


def test_round_trip_sample():
    for year in (0, 1, 1999, 2004, 2015, 2020, 9999):
        for week in (1, 26, 52):
            assert decode(encode(year, week)) == (year, week)
    assert decode(encode(2015, 53)) == (2015, 53)
