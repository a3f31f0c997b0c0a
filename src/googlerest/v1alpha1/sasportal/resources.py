"""
SAS Portal records.

The resource hierarchy is customer > node > ... > deployment > device,
nodes nest to any depth.  Devices carry their CBRS configuration and the
spectrum grants the SAS issued for them.
Operation, Status and Empty are the common google.longrunning / google.rpc
shapes so come from googlerest.common.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar

from ...common import Empty, Operation, Status
from ...resources import GoogleRestResourceBase
from ...wire import BYTES, DATETIME, ListOf

@dataclass
class Assignment(GoogleRestResourceBase):
    """
    Associates members with a role.
    """
    members: list[str]|None = field(default=None)
    role: str|None = field(default=None)

@dataclass
class FrequencyRange(GoogleRestResourceBase):
    highFrequencyMhz: float|None = field(default=None)
    lowFrequencyMhz: float|None = field(default=None)

@dataclass
class ChannelWithScore(GoogleRestResourceBase):
    frequencyRange: FrequencyRange|None = field(default=None)
    score: float|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'frequencyRange': 'FrequencyRange',
    }

@dataclass
class CreateSignedDeviceRequest(GoogleRestResourceBase):
    """
    encodedDevice is the JWT encoded device, signed by the installer,
    as raw bytes.
    """
    encodedDevice: bytes|None = field(default=None)
    installerId: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'encodedDevice': BYTES,
    }

@dataclass
class Customer(GoogleRestResourceBase):
    displayName: str|None = field(default=None)
    name: str|None = field(default=None)
    sasUserIds: list[str]|None = field(default=None)

@dataclass
class Deployment(GoogleRestResourceBase):
    """
    frns (the FCC registration numbers) and name are output only.
    """
    displayName: str|None = field(default=None)
    frns: list[str]|None = field(default=None)
    name: str|None = field(default=None)
    sasUserIds: list[str]|None = field(default=None)

@dataclass
class DeviceAirInterface(GoogleRestResourceBase):
    radioTechnology: str|None = field(default=None)
    supportedSpec: str|None = field(default=None)

@dataclass
class DeviceModel(GoogleRestResourceBase):
    firmwareVersion: str|None = field(default=None)
    hardwareVersion: str|None = field(default=None)
    name: str|None = field(default=None)
    softwareVersion: str|None = field(default=None)
    vendor: str|None = field(default=None)

@dataclass
class InstallationParams(GoogleRestResourceBase):
    """
    Where and how a device is installed.  Angles are degrees, heights and
    accuracies meters, gains dBi, eirpCapability dBm/10MHz.
    heightType is HEIGHT_TYPE_AGL or HEIGHT_TYPE_AMSL.
    """
    antennaAzimuth: int|None = field(default=None)
    antennaBeamwidth: int|None = field(default=None)
    antennaDowntilt: int|None = field(default=None)
    antennaGain: float|None = field(default=None)
    antennaGainNewField: float|None = field(default=None)
    antennaModel: str|None = field(default=None)
    cpeCbsdIndication: bool|None = field(default=None)
    eirpCapability: int|None = field(default=None)
    eirpCapabilityNewField: float|None = field(default=None)
    height: float|None = field(default=None)
    heightType: str|None = field(default=None)
    horizontalAccuracy: float|None = field(default=None)
    indoorDeployment: bool|None = field(default=None)
    latitude: float|None = field(default=None)
    longitude: float|None = field(default=None)
    verticalAccuracy: float|None = field(default=None)

@dataclass
class DeviceConfig(GoogleRestResourceBase):
    airInterface: DeviceAirInterface|None = field(default=None)
    callSign: str|None = field(default=None)
    category: str|None = field(default=None)
    installationParams: InstallationParams|None = field(default=None)
    isSigned: bool|None = field(default=None)
    measurementCapabilities: list[str]|None = field(default=None)
    model: DeviceModel|None = field(default=None)
    state: str|None = field(default=None)
    updateTime: datetime|None = field(default=None)
    userId: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'airInterface': 'DeviceAirInterface',
        'installationParams': 'InstallationParams',
        'model': 'DeviceModel',
        'updateTime': DATETIME,
    }

@dataclass
class DpaMoveList(GoogleRestResourceBase):
    """
    A dynamic protection area and the frequencies grants have to move off.
    """
    dpaId: str|None = field(default=None)
    frequencyRange: FrequencyRange|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'frequencyRange': 'FrequencyRange',
    }

@dataclass
class DeviceGrant(GoogleRestResourceBase):
    """
    A spectrum grant.  channelType is CHANNEL_TYPE_GAA or CHANNEL_TYPE_PAL,
    maxEirp is dBm/MHz.
    """
    channelType: str|None = field(default=None)
    expireTime: datetime|None = field(default=None)
    frequencyRange: FrequencyRange|None = field(default=None)
    grantId: str|None = field(default=None)
    lastHeartbeatTransmitExpireTime: datetime|None = field(default=None)
    maxEirp: float|None = field(default=None)
    moveList: list[DpaMoveList]|None = field(default=None)
    state: str|None = field(default=None)
    suspensionReason: list[str]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'expireTime': DATETIME,
        'frequencyRange': 'FrequencyRange',
        'lastHeartbeatTransmitExpireTime': DATETIME,
        'moveList': ListOf('DpaMoveList'),
    }

@dataclass
class NrqzValidation(GoogleRestResourceBase):
    """
    National Radio Quiet Zone validation info.
    """
    caseId: str|None = field(default=None)
    cpiId: str|None = field(default=None)
    latitude: float|None = field(default=None)
    longitude: float|None = field(default=None)
    state: str|None = field(default=None)

@dataclass
class DeviceMetadata(GoogleRestResourceBase):
    antennaModel: str|None = field(default=None)
    commonChannelGroup: str|None = field(default=None)
    interferenceCoordinationGroup: str|None = field(default=None)
    nrqzValidated: bool|None = field(default=None)
    nrqzValidation: NrqzValidation|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'nrqzValidation': 'NrqzValidation',
    }

@dataclass
class Device(GoogleRestResourceBase):
    """
    A CBRS device (CBSD).  activeConfig is what the SAS is using,
    preloadedConfig what will be used once registered.
    state is one of RESERVED, REGISTERED, DEREGISTERED.
    """
    activeConfig: DeviceConfig|None = field(default=None)
    currentChannels: list[ChannelWithScore]|None = field(default=None)
    deviceMetadata: DeviceMetadata|None = field(default=None)
    displayName: str|None = field(default=None)
    fccId: str|None = field(default=None)
    grantRangeAllowlists: list[FrequencyRange]|None = field(default=None)
    grants: list[DeviceGrant]|None = field(default=None)
    name: str|None = field(default=None)
    preloadedConfig: DeviceConfig|None = field(default=None)
    serialNumber: str|None = field(default=None)
    state: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'activeConfig': 'DeviceConfig',
        'currentChannels': ListOf('ChannelWithScore'),
        'deviceMetadata': 'DeviceMetadata',
        'grantRangeAllowlists': ListOf('FrequencyRange'),
        'grants': ListOf('DeviceGrant'),
        'preloadedConfig': 'DeviceConfig',
    }

@dataclass
class GenerateSecretRequest(GoogleRestResourceBase):
    pass

@dataclass
class GenerateSecretResponse(GoogleRestResourceBase):
    secret: str|None = field(default=None)

@dataclass
class GetPolicyRequest(GoogleRestResourceBase):
    resource: str|None = field(default=None)

@dataclass
class ListCustomersResponse(GoogleRestResourceBase):
    customers: list[Customer]|None = field(default=None)
    nextPageToken: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'customers': ListOf('Customer'),
    }

@dataclass
class ListDeploymentsResponse(GoogleRestResourceBase):
    deployments: list[Deployment]|None = field(default=None)
    nextPageToken: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'deployments': ListOf('Deployment'),
    }

@dataclass
class ListDevicesResponse(GoogleRestResourceBase):
    devices: list[Device]|None = field(default=None)
    nextPageToken: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'devices': ListOf('Device'),
    }

@dataclass
class ListNodesResponse(GoogleRestResourceBase):
    nextPageToken: str|None = field(default=None)
    nodes: list[Node]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'nodes': ListOf('Node'),
    }

@dataclass
class MoveDeploymentRequest(GoogleRestResourceBase):
    """destination: the name of the new parent, a node or customer"""
    destination: str|None = field(default=None)

@dataclass
class MoveDeviceRequest(GoogleRestResourceBase):
    destination: str|None = field(default=None)

@dataclass
class MoveNodeRequest(GoogleRestResourceBase):
    destination: str|None = field(default=None)

@dataclass
class Node(GoogleRestResourceBase):
    displayName: str|None = field(default=None)
    name: str|None = field(default=None)
    sasUserIds: list[str]|None = field(default=None)

@dataclass
class Policy(GoogleRestResourceBase):
    """
    Access control policy of a resource.  Send etag back unchanged on
    policiesSet() so concurrent updates don't overwrite each other.
    """
    assignments: list[Assignment]|None = field(default=None)
    etag: bytes|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'assignments': ListOf('Assignment'),
        'etag': BYTES,
    }

@dataclass
class ProvisionDeploymentRequest(GoogleRestResourceBase):
    newDeploymentDisplayName: str|None = field(default=None)
    newOrganizationDisplayName: str|None = field(default=None)

@dataclass
class ProvisionDeploymentResponse(GoogleRestResourceBase):
    errorMessage: str|None = field(default=None)

@dataclass
class SetPolicyRequest(GoogleRestResourceBase):
    disableNotification: bool|None = field(default=None)
    policy: Policy|None = field(default=None)
    resource: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'policy': 'Policy',
    }

@dataclass
class SignDeviceRequest(GoogleRestResourceBase):
    device: Device|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'device': 'Device',
    }

@dataclass
class TestPermissionsRequest(GoogleRestResourceBase):
    permissions: list[str]|None = field(default=None)
    resource: str|None = field(default=None)

@dataclass
class TestPermissionsResponse(GoogleRestResourceBase):
    """The subset of the requested permissions the caller has."""
    permissions: list[str]|None = field(default=None)

@dataclass
class UpdateSignedDeviceRequest(GoogleRestResourceBase):
    encodedDevice: bytes|None = field(default=None)
    installerId: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'encodedDevice': BYTES,
    }

@dataclass
class ValidateInstallerRequest(GoogleRestResourceBase):
    encodedSecret: str|None = field(default=None)
    installerId: str|None = field(default=None)
    secret: str|None = field(default=None)

@dataclass
class ValidateInstallerResponse(GoogleRestResourceBase):
    pass
