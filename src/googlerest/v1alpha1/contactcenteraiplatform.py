"""
Contact Center AI Platform API

Docs: https://cloud.google.com/solutions/contact-center-ai-platform
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar

from ..client import GoogleRestClient
from ..common import (CancelOperationRequest, Empty, ListLocationsResponse,
                               ListOperationsResponse, Location, Operation, Status)
from ..common import OperationMetadata as BaseOperationMetadata
from ..resources import GoogleRestResourceBase
from ..wire import DATETIME, ListOf

class ContactCenterAIPlatform(GoogleRestClient):
    """
    Contact centers are created, patched and deleted through long running
    operations, poll them with projectsLocationsOperationsGet().
    """
    DEFAULT_BASE_URL = "https://contactcenteraiplatform.googleapis.com/"

    def projectsLocationsContactCentersCreate(self, parent: str, req: ContactCenter,
                                              contactCenterId: str|None = None,
                                              requestId: str|None = None) -> Operation:
        """
        param: parent: projects/{project}/locations/{location}
        param: contactCenterId: id for the new contact center
        param: requestId: makes retries idempotent, a UUID
        """
        return self._call("v1alpha1/{+parent}/contactCenters", "POST", Operation, body=req,
                          parent=parent, contactCenterId=contactCenterId, requestId=requestId)

    def projectsLocationsContactCentersDelete(self, name: str, requestId: str|None = None) -> Operation:
        return self._call("v1alpha1/{+name}", "DELETE", Operation, name=name, requestId=requestId)

    def projectsLocationsContactCentersGet(self, name: str) -> ContactCenter:
        return self._call("v1alpha1/{+name}", "GET", ContactCenter, name=name)

    def projectsLocationsContactCentersList(self, parent: str, filter: str|None = None,
                                            orderBy: str|None = None, pageSize: int|None = None,
                                            pageToken: str|None = None) -> ListContactCentersResponse:
        return self._call("v1alpha1/{+parent}/contactCenters", "GET", ListContactCentersResponse,
                          parent=parent, filter=filter, orderBy=orderBy, pageSize=pageSize,
                          pageToken=pageToken)

    def projectsLocationsContactCentersPatch(self, name: str, req: ContactCenter,
                                             requestId: str|None = None,
                                             updateMask: str|list[str]|None = None) -> Operation:
        """
        param: updateMask: fields of req to overwrite, comma separated or a list
        """
        return self._call("v1alpha1/{+name}", "PATCH", Operation, body=req, name=name,
                          requestId=requestId, updateMask=updateMask)

    def projectsLocationsGet(self, name: str) -> Location:
        return self._call("v1alpha1/{+name}", "GET", Location, name=name)

    def projectsLocationsList(self, name: str, filter: str|None = None, pageSize: int|None = None,
                              pageToken: str|None = None) -> ListLocationsResponse:
        """
        param: name: projects/{project}
        """
        return self._call("v1alpha1/{+name}/locations", "GET", ListLocationsResponse,
                          name=name, filter=filter, pageSize=pageSize, pageToken=pageToken)

    def projectsLocationsOperationsCancel(self, name: str, req: CancelOperationRequest) -> Empty:
        """
        Best effort, the operation may still complete.  If it does get cancelled it
        finishes with an error Status of code 1 (CANCELLED).
        """
        return self._call("v1alpha1/{+name}:cancel", "POST", Empty, body=req, name=name)

    def projectsLocationsOperationsDelete(self, name: str) -> Empty:
        return self._call("v1alpha1/{+name}", "DELETE", Empty, name=name)

    def projectsLocationsOperationsGet(self, name: str) -> Operation:
        return self._call("v1alpha1/{+name}", "GET", Operation, name=name)

    def projectsLocationsOperationsList(self, name: str, filter: str|None = None,
                                        pageSize: int|None = None,
                                        pageToken: str|None = None) -> ListOperationsResponse:
        return self._call("v1alpha1/{+name}/operations", "GET", ListOperationsResponse,
                          name=name, filter=filter, pageSize=pageSize, pageToken=pageToken)

    def projectsLocationsQueryContactCenterQuota(self, parent: str) -> ContactCenterQuota:
        """
        Queries the contact center quota, an aggregation over all the projects
        that belong to the billing account.
        """
        return self._call("v1alpha1/{+parent}:queryContactCenterQuota", "GET", ContactCenterQuota,
                          parent=parent)

@dataclass
class AdminUser(GoogleRestResourceBase):
    familyName: str|None = field(default=None)
    givenName: str|None = field(default=None)

@dataclass
class ContactCenter(GoogleRestResourceBase):
    """
    A contact center instance.
    createTime, state, updateTime and uris are output only.
    """
    adminUser: AdminUser|None = field(default=None)
    ccaipManagedUsers: bool|None = field(default=None)
    createTime: datetime|None = field(default=None)
    customerDomainPrefix: str|None = field(default=None)
    displayName: str|None = field(default=None)
    instanceConfig: InstanceConfig|None = field(default=None)
    labels: dict[str, str]|None = field(default=None)
    name: str|None = field(default=None)
    samlParams: SAMLParams|None = field(default=None)
    state: str|None = field(default=None)
    updateTime: datetime|None = field(default=None)
    uris: URIs|None = field(default=None)
    userEmail: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'adminUser': 'AdminUser',
        'createTime': DATETIME,
        'instanceConfig': 'InstanceConfig',
        'samlParams': 'SAMLParams',
        'updateTime': DATETIME,
        'uris': 'URIs',
    }

@dataclass
class ContactCenterQuota(GoogleRestResourceBase):
    contactCenterCountLimit: int|None = field(default=None)
    contactCenterCountSum: int|None = field(default=None)

@dataclass
class InstanceConfig(GoogleRestResourceBase):
    instanceSize: str|None = field(default=None)

@dataclass
class ListContactCentersResponse(GoogleRestResourceBase):
    contactCenters: list[ContactCenter]|None = field(default=None)
    nextPageToken: str|None = field(default=None)
    unreachable: list[str]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'contactCenters': ListOf('ContactCenter'),
    }

@dataclass
class OperationMetadata(BaseOperationMetadata):
    """
    Metadata of this API's long running operations, the common
    fields plus the contact center being worked on.
    """
    contactCenter: ContactCenter|None = field(default=None)

    wire_types: ClassVar[dict] = {
        **BaseOperationMetadata.wire_types,
        'contactCenter': 'ContactCenter',
    }

@dataclass
class SAMLParams(GoogleRestResourceBase):
    certificate: str|None = field(default=None)
    entityId: str|None = field(default=None)
    ssoUri: str|None = field(default=None)
    userEmail: str|None = field(default=None)

@dataclass
class URIs(GoogleRestResourceBase):
    chatBotUri: str|None = field(default=None)
    mediaUri: str|None = field(default=None)
    rootUri: str|None = field(default=None)
    virtualAgentStreamingServiceUri: str|None = field(default=None)

__all__ = [
    'ContactCenterAIPlatform', 'AdminUser', 'CancelOperationRequest', 'ContactCenter',
    'ContactCenterQuota', 'Empty', 'InstanceConfig', 'ListContactCentersResponse',
    'ListLocationsResponse', 'ListOperationsResponse', 'Location', 'Operation',
    'OperationMetadata', 'SAMLParams', 'Status', 'URIs',
]
