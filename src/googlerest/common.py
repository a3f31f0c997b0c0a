"""
Records that Google Cloud APIs share word for word: long running
operations, their status, and the locations service.
APIs that extend one of these (extra metadata fields) declare their own.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar

from .resources import GoogleRestResourceBase
from .wire import DATETIME, ListOf

@dataclass
class Empty(GoogleRestResourceBase):
    """
    A generic empty message, used as the response of deletes and cancels.
    """
    pass

@dataclass
class CancelOperationRequest(GoogleRestResourceBase):
    pass

@dataclass
class Status(GoogleRestResourceBase):
    """
    The error model of gRPC based APIs: a code, a developer facing
    message and a list of detail messages (each a dict with an '@type').
    """
    code: int|None = field(default=None)
    details: list[dict[str, Any]]|None = field(default=None)
    message: str|None = field(default=None)

@dataclass
class Operation(GoogleRestResourceBase):
    """
    A long running operation.  Once done exactly one of error or
    response is set.  metadata and response are left as the dicts the
    API sends since their type depends on the method that started it.
    """
    done: bool|None = field(default=None)
    error: Status|None = field(default=None)
    metadata: dict[str, Any]|None = field(default=None)
    name: str|None = field(default=None)
    response: dict[str, Any]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'error': 'Status',
    }

@dataclass
class OperationMetadata(GoogleRestResourceBase):
    apiVersion: str|None = field(default=None)
    createTime: datetime|None = field(default=None)
    endTime: datetime|None = field(default=None)
    requestedCancellation: bool|None = field(default=None)
    statusMessage: str|None = field(default=None)
    target: str|None = field(default=None)
    verb: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'createTime': DATETIME,
        'endTime': DATETIME,
    }

@dataclass
class Location(GoogleRestResourceBase):
    displayName: str|None = field(default=None)
    labels: dict[str, str]|None = field(default=None)
    locationId: str|None = field(default=None)
    metadata: dict[str, Any]|None = field(default=None)
    name: str|None = field(default=None)

@dataclass
class ListLocationsResponse(GoogleRestResourceBase):
    locations: list[Location]|None = field(default=None)
    nextPageToken: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'locations': ListOf('Location'),
    }

@dataclass
class ListOperationsResponse(GoogleRestResourceBase):
    nextPageToken: str|None = field(default=None)
    operations: list[Operation]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'operations': ListOf('Operation'),
    }
