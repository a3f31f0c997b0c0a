import logging
import sys
from dataclasses import fields, is_dataclass
from typing import ClassVar, List, Self

from .wire import WireCodec, ListOf, MapOf

logger = logging.getLogger(__name__)

class GoogleRestResourceBase():
    """
    Intended to be subclassed by a dataclass but isnt actually a dataclass.
    Each subclass mirrors one JSON schema of a REST API, field names are the
    API's own camelCase names so from_base/to_base are mostly a straight copy.

    Fields that don't travel as their native type are listed in wire_types,
    mapping the field name to one of:
     - a wire.WireCodec (wire.INT64, wire.DATETIME, wire.BYTES)
     - a record class, or its name as a string for records declared later
       in the same module (or that refer to themselves)
     - wire.ListOf / wire.MapOf of any of the above
    Anything not listed is copied as is.
    """
    wire_types: ClassVar[dict] = {}

    def __post_init__(self) -> None:
        self.fixup()

    def __bool__(self) -> bool:
        """True if any field has been set"""
        if is_dataclass(self):
            return any(getattr(self, f.name) is not None for f in fields(self))
        return False

    @classmethod
    def from_base(cls, data: dict|None) -> Self:
        """
        Build from the dict representation sent by the API.
        Keys we don't have a field for are dropped, APIs add fields over time
        and that shouldn't stop us reading the ones we know.
        """
        if data is None:
            return cls()
        if isinstance(data, cls):
            return data
        if not isinstance(data, dict):
            raise ValueError(f"{cls.__name__} expects a dict, got {type(data).__name__}")
        names = {f.name for f in fields(cls)}
        unknown = [k for k in data if k not in names]
        if unknown:
            logger.debug("%s: dropping unknown fields %s", cls.__name__, unknown)
        return cls(**{k: v for k, v in data.items() if k in names})

    def to_base(self) -> dict:
        """
        Return the dict representation of the object as needed by the API.
        Unset (None) fields are left out altogether.
        Call fixup() first to ensure all fields are in correct format.
        """
        self.fixup()
        base = {}
        for f in fields(self):
            v = getattr(self, f.name)
            if v is None:
                continue
            kind = self.wire_types.get(f.name, None)
            base[f.name] = _plain(v) if kind is None else _to_wire(type(self), kind, v)
        return base

    def fixup(self) -> None:
        """
        Convert any field still in its wire form (strings for int64,
        timestamps and bytes, dicts for records) to the native form.
        """
        for name, kind in self.wire_types.items():
            v = getattr(self, name, None)
            if v is not None:
                setattr(self, name, _from_wire(type(self), kind, v))

    def update_fields(self, **kwargs) -> List[str]:
        """
        Update fields that may be present.
        """
        updated_fields = []
        if is_dataclass(self):
            flist = fields(self)
            for k,v in kwargs.items():
                for f in flist:
                    if v is not None and k == f.name:
                        setattr(self, k, v)
                        updated_fields.append(k)
            self.fixup()
        return updated_fields

def _resolve(owner: type, kind):
    """Look up a record named by string in the modules of owner's class hierarchy."""
    if not isinstance(kind, str):
        return kind
    for klass in owner.__mro__:
        module = sys.modules.get(klass.__module__)
        resolved = getattr(module, kind, None)
        if resolved is not None:
            return resolved
    raise RuntimeError(f"{owner.__name__}: unknown record type {kind}")

def _from_wire(owner: type, kind, value):
    if value is None:
        return None
    kind = _resolve(owner, kind)
    if isinstance(kind, ListOf):
        return [_from_wire(owner, kind.item, v) for v in value]
    if isinstance(kind, MapOf):
        return {k: _from_wire(owner, kind.item, v) for k, v in value.items()}
    if isinstance(kind, WireCodec):
        return kind.from_wire(value)
    return kind.from_base(value)

def _to_wire(owner: type, kind, value):
    if value is None:
        return None
    kind = _resolve(owner, kind)
    if isinstance(kind, ListOf):
        return [_to_wire(owner, kind.item, v) for v in value]
    if isinstance(kind, MapOf):
        return {k: _to_wire(owner, kind.item, v) for k, v in value.items()}
    if isinstance(kind, WireCodec):
        return kind.to_wire(value)
    return _plain(value)

def _plain(value):
    if isinstance(value, GoogleRestResourceBase):
        return value.to_base()
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    return value
