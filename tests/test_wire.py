import datetime

import pytest

from googlerest import wire

UTC = datetime.timezone.utc

def test_int64():
    assert(wire.int64_to_wire(42) == "42")
    assert(wire.int64_to_wire(0) == "0")
    assert(wire.int64_to_wire(-9223372036854775808) == "-9223372036854775808")
    assert(wire.int64_from_wire("42") == 42)
    assert(wire.int64_from_wire("-7") == -7)
    assert(wire.int64_from_wire(18446744073709551615) == 18446744073709551615)

def test_int64_invalid():
    with pytest.raises(ValueError):
        wire.int64_from_wire("forty two")
    with pytest.raises(ValueError):
        wire.int64_from_wire(True)
    with pytest.raises(ValueError):
        wire.int64_from_wire(42.9)
    with pytest.raises(ValueError):
        wire.int64_from_wire(42.0)
    with pytest.raises(ValueError):
        wire.int64_from_wire("42.9")
    with pytest.raises(ValueError):
        wire.int64_from_wire(None)
    with pytest.raises(ValueError):
        wire.int64_to_wire("42")
    with pytest.raises(ValueError):
        wire.int64_to_wire(False)

def test_datetime_to_wire():
    dt = datetime.datetime(2023, 1, 2, 3, 4, 5, tzinfo=UTC)
    assert(wire.datetime_to_wire(dt) == "2023-01-02T03:04:05Z")
    dt = datetime.datetime(2023, 1, 2, 3, 4, 5, 678000, tzinfo=UTC)
    assert(wire.datetime_to_wire(dt) == "2023-01-02T03:04:05.678000Z")
    # naive is UTC, other offsets are converted
    assert(wire.datetime_to_wire(datetime.datetime(1970, 1, 1)) == "1970-01-01T00:00:00Z")
    est = datetime.timezone(datetime.timedelta(hours=-5))
    assert(wire.datetime_to_wire(datetime.datetime(2023, 1, 1, 19, tzinfo=est)) == "2023-01-02T00:00:00Z")

def test_datetime_from_wire():
    dt = wire.datetime_from_wire("2023-01-02T03:04:05.678Z")
    assert(dt == datetime.datetime(2023, 1, 2, 3, 4, 5, 678000, tzinfo=UTC))
    assert(dt.tzinfo is not None)
    dt = wire.datetime_from_wire("2023-01-02T03:04:05+02:00")
    assert(dt == datetime.datetime(2023, 1, 2, 1, 4, 5, tzinfo=UTC))
    # nanoseconds are truncated
    dt = wire.datetime_from_wire("2014-10-02T15:01:23.045123456Z")
    assert(dt.microsecond == 45123)
    dt = wire.datetime_from_wire("2023-01-02T03:04:05")
    assert(dt.tzinfo == UTC)

def test_datetime_edges():
    for dt in (datetime.datetime(1970, 1, 1, tzinfo=UTC),
               datetime.datetime(9999, 12, 31, 23, 59, 59, 999999, tzinfo=UTC)):
        assert(wire.datetime_from_wire(wire.datetime_to_wire(dt)) == dt)

def test_datetime_invalid():
    with pytest.raises(ValueError):
        wire.datetime_from_wire("yesterday")
    with pytest.raises(ValueError):
        wire.datetime_from_wire(1672628645)
    with pytest.raises(ValueError):
        wire.datetime_to_wire("2023-01-02T03:04:05Z")

def test_bytes():
    assert(wire.bytes_to_wire(b"\x00\x01\x02") == "AAEC")
    assert(wire.bytes_to_wire(b"") == "")
    assert(wire.bytes_from_wire("AAEC") == b"\x00\x01\x02")
    assert(wire.bytes_from_wire("") == b"")
    # padding and the url safe alphabet
    assert(wire.bytes_to_wire(b"\xfb\xff") == "+/8=")
    assert(wire.bytes_from_wire("-_8") == b"\xfb\xff")
    assert(wire.bytes_from_wire("+/8=") == b"\xfb\xff")

def test_bytes_invalid():
    with pytest.raises(ValueError):
        wire.bytes_from_wire("not base64!")
    with pytest.raises(ValueError):
        wire.bytes_to_wire("AAEC")

def test_query_value():
    assert(wire.query_value(True) == "true")
    assert(wire.query_value(False) == "false")
    assert(wire.query_value(25) == "25")
    assert(wire.query_value(["name", "displayName"]) == "name,displayName")
    assert(wire.query_value(datetime.datetime(2023, 1, 2, tzinfo=UTC)) == "2023-01-02T00:00:00Z")
    assert(wire.query_value(b"\x00\x01\x02") == "AAEC")

def test_codecs_idempotent():
    dt = datetime.datetime(2023, 1, 2, tzinfo=UTC)
    assert(wire.DATETIME.from_wire(dt) is dt)
    assert(wire.DATETIME.from_wire(datetime.datetime(2023, 1, 2)) == dt)
    assert(wire.INT64.from_wire(5) == 5)
    assert(wire.INT64.from_wire("5") == 5)
    assert(wire.BYTES.from_wire(b"ab") == b"ab")
    with pytest.raises(ValueError):
        wire.INT64.from_wire(True)
