"""
Conversions between the JSON wire format used by Google REST APIs and
native Python values.

The APIs carry a few types that JSON can't represent directly so they
travel as strings:
 - 64-bit integers (int64/uint64) as decimal strings, "42"
 - timestamps (google-datetime) as RFC 3339 strings, "2023-01-02T03:04:05Z"
 - bytes as RFC 4648 base64, "AAEC"

The *_to_wire/*_from_wire pairs do the per-value conversion.  The WireCodec
instances, ListOf and MapOf are what record classes use to declare which
of their fields need converting, see resources.GoogleRestResourceBase.
"""
import base64
import binascii
import datetime
import re
from collections.abc import Callable

# the APIs can send nanosecond precision, datetime stops at microseconds
_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")

def int64_to_wire(value: int) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Invalid int64 value: {value!r}")
    return str(value)

def int64_from_wire(value: str|int) -> int:
    """
    Decimal string, or an int from APIs that send small values unquoted.
    Floats are refused, int() would truncate them.
    """
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ValueError(f"Invalid int64 wire value: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid int64 wire value: {value!r}") from e

def datetime_to_wire(value: datetime.datetime) -> str:
    """
    RFC 3339 in UTC with the 'Z' suffix the APIs send back.
    A naive datetime is taken as UTC.  Microseconds are only
    written when there are some.
    """
    if not isinstance(value, datetime.datetime):
        raise ValueError(f"Invalid datetime value: {value!r}")
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    s = value.astimezone(datetime.timezone.utc).isoformat()
    return s.removesuffix("+00:00") + "Z"

def datetime_from_wire(value: str|datetime.datetime) -> datetime.datetime:
    """
    Parse an RFC 3339 timestamp.  Always returns an aware datetime,
    anything without an offset is UTC.
    """
    if isinstance(value, datetime.datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=datetime.timezone.utc)
    if not isinstance(value, str):
        raise ValueError(f"Invalid datetime wire value: {value!r}")
    s = _EXCESS_FRACTION.sub(r"\1", value.strip())
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    try:
        dt = datetime.datetime.fromisoformat(s)
    except ValueError as e:
        raise ValueError(f"Invalid datetime wire value: {value!r}") from e
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=datetime.timezone.utc)
    return dt

def bytes_to_wire(value: bytes|bytearray) -> str:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise ValueError(f"Invalid bytes value: {value!r}")
    return base64.b64encode(bytes(value)).decode("ascii")

def bytes_from_wire(value: str|bytes) -> bytes:
    """
    Decode base64.  Some APIs send the URL safe alphabet and/or
    drop the padding so accept both.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if not isinstance(value, str):
        raise ValueError(f"Invalid bytes wire value: {value!r}")
    s = value.strip().replace("-", "+").replace("_", "/")
    s += "=" * (-len(s) % 4)
    try:
        return base64.b64decode(s, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid bytes wire value: {value!r}") from e

def query_value(value) -> str:
    """
    String form of a URL query parameter value.
    Lists are comma separated, which is what FieldMask style
    parameters expect.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime.datetime):
        return datetime_to_wire(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes_to_wire(value)
    if isinstance(value, (list, tuple)):
        return ",".join(query_value(v) for v in value)
    return str(value)


class WireCodec():
    """
    A native type and the pair of functions to move it to and from the wire.
    The from_wire functions also accept the native type, normalizing it
    (naive datetimes become UTC) so applying one twice is harmless.
    """
    def __init__(self, name: str, native: type,
                 to_wire: Callable, from_wire: Callable) -> None:
        self.name = name
        self.native = native
        self._to_wire = to_wire
        self._from_wire = from_wire

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name})"

    def to_wire(self, value):
        return self._to_wire(value)

    def from_wire(self, value):
        return self._from_wire(value)

INT64 = WireCodec("int64", int, int64_to_wire, int64_from_wire)
DATETIME = WireCodec("google-datetime", datetime.datetime, datetime_to_wire, datetime_from_wire)
BYTES = WireCodec("byte", bytes, bytes_to_wire, bytes_from_wire)

class ListOf():
    """A JSON array whose items all use the same codec or record class."""
    def __init__(self, item) -> None:
        self.item = item

    def __repr__(self) -> str:
        return f"ListOf({self.item!r})"

class MapOf():
    """A JSON object of string keys whose values all use the same codec or record class."""
    def __init__(self, item) -> None:
        self.item = item

    def __repr__(self) -> str:
        return f"MapOf({self.item!r})"
