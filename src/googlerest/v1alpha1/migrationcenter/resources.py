"""
Migration Center records.

Assets are mostly virtual machine inventory: hardware, guest OS, disks
and network, each list wrapped in its own *List record the way the API nests them.
Byte counts and process ids are int64 on the wire.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar

from ...common import (CancelOperationRequest, Empty, ListLocationsResponse,
                      ListOperationsResponse, Location, Operation,
                      OperationMetadata, Status)
from ...resources import GoogleRestResourceBase
from ...wire import BYTES, DATETIME, INT64, ListOf, MapOf

ASSET_VIEWS = ("ASSET_VIEW_UNSPECIFIED", "ASSET_VIEW_BASIC", "ASSET_VIEW_FULL", "ASSET_VIEW_STANDARD")
IMPORT_JOB_VIEWS = ("IMPORT_JOB_VIEW_UNSPECIFIED", "IMPORT_JOB_VIEW_BASIC", "IMPORT_JOB_VIEW_FULL")

# aggregation

@dataclass
class AggregateAssetsValuesRequest(GoogleRestResourceBase):
    """
    Up to 25 aggregations, over the assets matching filter.
    """
    aggregations: list[Aggregation]|None = field(default=None)
    filter: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'aggregations': ListOf('Aggregation'),
    }

@dataclass
class AggregateAssetsValuesResponse(GoogleRestResourceBase):
    results: list[AggregationResult]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'results': ListOf('AggregationResult'),
    }

@dataclass
class AggregationCount(GoogleRestResourceBase):
    pass

@dataclass
class AggregationFrequency(GoogleRestResourceBase):
    pass

@dataclass
class AggregationSum(GoogleRestResourceBase):
    pass

@dataclass
class AggregationHistogram(GoogleRestResourceBase):
    """
    n lower bounds give n+1 buckets, the first counting everything below
    the first bound.  At most 20 bounds.
    """
    lowerBounds: list[float]|None = field(default=None)

@dataclass
class Aggregation(GoogleRestResourceBase):
    """
    Set exactly one of count, frequency, histogram or sum to pick the aggregation.
    """
    count: AggregationCount|None = field(default=None)
    field: str|None = field(default=None)
    # "field" above now names the field, dataclasses.field from here
    frequency: AggregationFrequency|None = dataclasses.field(default=None)
    histogram: AggregationHistogram|None = dataclasses.field(default=None)
    sum: AggregationSum|None = dataclasses.field(default=None)

    wire_types: ClassVar[dict] = {
        'count': 'AggregationCount',
        'frequency': 'AggregationFrequency',
        'histogram': 'AggregationHistogram',
        'sum': 'AggregationSum',
    }

@dataclass
class AggregationResultCount(GoogleRestResourceBase):
    value: int|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'value': INT64,
    }

@dataclass
class AggregationResultFrequency(GoogleRestResourceBase):
    values: dict[str, int]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'values': MapOf(INT64),
    }

@dataclass
class AggregationResultHistogramBucket(GoogleRestResourceBase):
    """
    lowerBound is inclusive, upperBound exclusive.
    """
    count: int|None = field(default=None)
    lowerBound: float|None = field(default=None)
    upperBound: float|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'count': INT64,
    }

@dataclass
class AggregationResultHistogram(GoogleRestResourceBase):
    buckets: list[AggregationResultHistogramBucket]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'buckets': ListOf('AggregationResultHistogramBucket'),
    }

@dataclass
class AggregationResultSum(GoogleRestResourceBase):
    value: float|None = field(default=None)

@dataclass
class AggregationResult(GoogleRestResourceBase):
    count: AggregationResultCount|None = field(default=None)
    field: str|None = field(default=None)
    # "field" above now names the field, dataclasses.field from here
    frequency: AggregationResultFrequency|None = dataclasses.field(default=None)
    histogram: AggregationResultHistogram|None = dataclasses.field(default=None)
    sum: AggregationResultSum|None = dataclasses.field(default=None)

    wire_types: ClassVar[dict] = {
        'count': 'AggregationResultCount',
        'frequency': 'AggregationResultFrequency',
        'histogram': 'AggregationResultHistogram',
        'sum': 'AggregationResultSum',
    }

# assets

@dataclass
class Asset(GoogleRestResourceBase):
    """
    createTime, name, sources, updateTime and virtualMachineDetails are output only.
    """
    attributes: dict[str, str]|None = field(default=None)
    createTime: datetime|None = field(default=None)
    labels: dict[str, str]|None = field(default=None)
    name: str|None = field(default=None)
    sources: list[str]|None = field(default=None)
    updateTime: datetime|None = field(default=None)
    virtualMachineDetails: VirtualMachineDetails|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'createTime': DATETIME,
        'updateTime': DATETIME,
        'virtualMachineDetails': 'VirtualMachineDetails',
    }

@dataclass
class AssetFrame(GoogleRestResourceBase):
    """
    One report about an asset from a source.
    """
    attributes: dict[str, str]|None = field(default=None)
    labels: dict[str, str]|None = field(default=None)
    performanceSamples: list[PerformanceSample]|None = field(default=None)
    reportTime: datetime|None = field(default=None)
    traceToken: str|None = field(default=None)
    virtualMachineDetails: VirtualMachineDetails|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'performanceSamples': ListOf('PerformanceSample'),
        'reportTime': DATETIME,
        'virtualMachineDetails': 'VirtualMachineDetails',
    }

@dataclass
class BatchUpdateAssetsRequest(GoogleRestResourceBase):
    """
    At most 1000 assets per batch.
    """
    requests: list[UpdateAssetRequest]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'requests': ListOf('UpdateAssetRequest'),
    }

@dataclass
class BatchUpdateAssetsResponse(GoogleRestResourceBase):
    assets: list[Asset]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'assets': ListOf('Asset'),
    }

@dataclass
class Frames(GoogleRestResourceBase):
    framesData: list[AssetFrame]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'framesData': ListOf('AssetFrame'),
    }

@dataclass
class ListAssetsResponse(GoogleRestResourceBase):
    assets: list[Asset]|None = field(default=None)
    nextPageToken: str|None = field(default=None)
    unreachable: list[str]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'assets': ListOf('Asset'),
    }

@dataclass
class ReportAssetFramesResponse(GoogleRestResourceBase):
    pass

@dataclass
class UpdateAssetRequest(GoogleRestResourceBase):
    asset: Asset|None = field(default=None)
    requestId: str|None = field(default=None)
    updateMask: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'asset': 'Asset',
    }

# performance samples

@dataclass
class CpuUsageSample(GoogleRestResourceBase):
    utilizedPercentage: float|None = field(default=None)

@dataclass
class DiskUsageSample(GoogleRestResourceBase):
    averageIops: float|None = field(default=None)

@dataclass
class MemoryUsageSample(GoogleRestResourceBase):
    utilizedPercentage: float|None = field(default=None)

@dataclass
class NetworkUsageSample(GoogleRestResourceBase):
    averageEgressBps: float|None = field(default=None)
    averageIngressBps: float|None = field(default=None)

@dataclass
class PerformanceSample(GoogleRestResourceBase):
    cpu: CpuUsageSample|None = field(default=None)
    disk: DiskUsageSample|None = field(default=None)
    memory: MemoryUsageSample|None = field(default=None)
    network: NetworkUsageSample|None = field(default=None)
    sampleTime: datetime|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'cpu': 'CpuUsageSample',
        'disk': 'DiskUsageSample',
        'memory': 'MemoryUsageSample',
        'network': 'NetworkUsageSample',
        'sampleTime': DATETIME,
    }

# calendar types

@dataclass
class Date(GoogleRestResourceBase):
    """
    A calendar date (google.type.Date).  Zero in a component means unspecified,
    so this isn't converted to a datetime.date.
    """
    day: int|None = field(default=None)
    month: int|None = field(default=None)
    year: int|None = field(default=None)

@dataclass
class TimeZone(GoogleRestResourceBase):
    """IANA time zone, e.g. America/New_York"""
    id: str|None = field(default=None)
    version: str|None = field(default=None)

@dataclass
class DateTime(GoogleRestResourceBase):
    """
    Civil time (google.type.DateTime), with either a time zone or a UTC offset.
    utcOffset is a Duration string such as '-14400s'.
    """
    day: int|None = field(default=None)
    hours: int|None = field(default=None)
    minutes: int|None = field(default=None)
    month: int|None = field(default=None)
    nanos: int|None = field(default=None)
    seconds: int|None = field(default=None)
    timeZone: TimeZone|None = field(default=None)
    utcOffset: str|None = field(default=None)
    year: int|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'timeZone': 'TimeZone',
    }

# disks

@dataclass
class DiskEntry(GoogleRestResourceBase):
    diskLabel: str|None = field(default=None)
    diskLabelType: str|None = field(default=None)
    hwAddress: str|None = field(default=None)
    interfaceType: str|None = field(default=None)
    partitions: DiskPartitionList|None = field(default=None)
    status: str|None = field(default=None)
    totalCapacityBytes: int|None = field(default=None)
    totalFreeBytes: int|None = field(default=None)
    vmwareConfig: VmwareDiskConfig|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'partitions': 'DiskPartitionList',
        'totalCapacityBytes': INT64,
        'totalFreeBytes': INT64,
        'vmwareConfig': 'VmwareDiskConfig',
    }

@dataclass
class DiskEntryList(GoogleRestResourceBase):
    entries: list[DiskEntry]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'entries': ListOf('DiskEntry'),
    }

@dataclass
class DiskPartition(GoogleRestResourceBase):
    """
    Partitions nest, subPartitions holds another DiskPartitionList.
    """
    capacityBytes: int|None = field(default=None)
    fileSystem: str|None = field(default=None)
    freeBytes: int|None = field(default=None)
    mountPoint: str|None = field(default=None)
    subPartitions: DiskPartitionList|None = field(default=None)
    type: str|None = field(default=None)
    uuid: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'capacityBytes': INT64,
        'freeBytes': INT64,
        'subPartitions': 'DiskPartitionList',
    }

@dataclass
class DiskPartitionList(GoogleRestResourceBase):
    entries: list[DiskPartition]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'entries': ListOf('DiskPartition'),
    }

@dataclass
class VmwareDiskConfig(GoogleRestResourceBase):
    backingType: str|None = field(default=None)
    rdmCompatibilityMode: str|None = field(default=None)
    shared: bool|None = field(default=None)
    vmdkDiskMode: str|None = field(default=None)

# import jobs

@dataclass
class ImportJobError(GoogleRestResourceBase):
    """
    The ImportError schema of the API, renamed so it doesn't hide the builtin.
    severity is one of SEVERITY_UNSPECIFIED, ERROR, WARNING, INFO.
    """
    errorDetails: str|None = field(default=None)
    severity: str|None = field(default=None)

@dataclass
class ImportRowError(GoogleRestResourceBase):
    errors: list[ImportJobError]|None = field(default=None)
    rowNumber: int|None = field(default=None)
    vmName: str|None = field(default=None)
    vmUuid: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'errors': ListOf('ImportJobError'),
    }

@dataclass
class FileValidationReport(GoogleRestResourceBase):
    fileErrors: list[ImportJobError]|None = field(default=None)
    fileName: str|None = field(default=None)
    partialReport: bool|None = field(default=None)
    rowErrors: list[ImportRowError]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'fileErrors': ListOf('ImportJobError'),
        'rowErrors': ListOf('ImportRowError'),
    }

@dataclass
class ValidationReport(GoogleRestResourceBase):
    fileValidations: list[FileValidationReport]|None = field(default=None)
    jobErrors: list[ImportJobError]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'fileValidations': ListOf('FileValidationReport'),
        'jobErrors': ListOf('ImportJobError'),
    }

@dataclass
class ExecutionReport(GoogleRestResourceBase):
    """
    jobErrors is deprecated, executionErrors carries the same.
    """
    executionErrors: ValidationReport|None = field(default=None)
    framesReported: int|None = field(default=None)
    jobErrors: list[ImportJobError]|None = field(default=None)
    totalRowsCount: int|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'executionErrors': 'ValidationReport',
        'jobErrors': ListOf('ImportJobError'),
    }

@dataclass
class GCSPayloadInfo(GoogleRestResourceBase):
    format: str|None = field(default=None)
    path: str|None = field(default=None)

@dataclass
class PayloadFile(GoogleRestResourceBase):
    """
    An uploaded file, data is the raw file content.
    """
    data: bytes|None = field(default=None)
    name: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'data': BYTES,
    }

@dataclass
class InlinePayloadInfo(GoogleRestResourceBase):
    """
    format is one of IMPORT_JOB_FORMAT_CMDB, IMPORT_JOB_FORMAT_RVTOOLS_XLSX,
    IMPORT_JOB_FORMAT_RVTOOLS_CSV, IMPORT_JOB_FORMAT_JSON_FRAME
    """
    format: str|None = field(default=None)
    payload: list[PayloadFile]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'payload': ListOf('PayloadFile'),
    }

@dataclass
class ImportJob(GoogleRestResourceBase):
    """
    Data to be imported into Migration Center, from Cloud Storage or inline.
    Everything but assetSource, the payloads and labels is output only.
    """
    assetSource: str|None = field(default=None)
    completeTime: datetime|None = field(default=None)
    createTime: datetime|None = field(default=None)
    executionReport: ExecutionReport|None = field(default=None)
    gcsPayload: GCSPayloadInfo|None = field(default=None)
    inlinePayload: InlinePayloadInfo|None = field(default=None)
    labels: dict[str, str]|None = field(default=None)
    name: str|None = field(default=None)
    state: str|None = field(default=None)
    updateTime: datetime|None = field(default=None)
    validationReport: ValidationReport|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'completeTime': DATETIME,
        'createTime': DATETIME,
        'executionReport': 'ExecutionReport',
        'gcsPayload': 'GCSPayloadInfo',
        'inlinePayload': 'InlinePayloadInfo',
        'updateTime': DATETIME,
        'validationReport': 'ValidationReport',
    }

@dataclass
class ListImportJobsResponse(GoogleRestResourceBase):
    importJobs: list[ImportJob]|None = field(default=None)
    nextPageToken: str|None = field(default=None)
    unreachable: list[str]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'importJobs': ListOf('ImportJob'),
    }

@dataclass
class RunImportJobRequest(GoogleRestResourceBase):
    requestId: str|None = field(default=None)

@dataclass
class ValidateImportJobRequest(GoogleRestResourceBase):
    requestId: str|None = field(default=None)

# guest OS

@dataclass
class FstabEntry(GoogleRestResourceBase):
    file: str|None = field(default=None)
    freq: int|None = field(default=None)
    mntops: str|None = field(default=None)
    passno: int|None = field(default=None)
    spec: str|None = field(default=None)
    vfstype: str|None = field(default=None)

@dataclass
class FstabEntryList(GoogleRestResourceBase):
    entries: list[FstabEntry]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'entries': ListOf('FstabEntry'),
    }

@dataclass
class HostsEntry(GoogleRestResourceBase):
    hostNames: list[str]|None = field(default=None)
    ip: str|None = field(default=None)

@dataclass
class HostsEntryList(GoogleRestResourceBase):
    entries: list[HostsEntry]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'entries': ListOf('HostsEntry'),
    }

@dataclass
class NfsExport(GoogleRestResourceBase):
    exportDirectory: str|None = field(default=None)
    hosts: list[str]|None = field(default=None)

@dataclass
class NfsExportList(GoogleRestResourceBase):
    entries: list[NfsExport]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'entries': ListOf('NfsExport'),
    }

@dataclass
class Selinux(GoogleRestResourceBase):
    enabled: bool|None = field(default=None)
    mode: str|None = field(default=None)

@dataclass
class GuestConfigDetails(GoogleRestResourceBase):
    fstab: FstabEntryList|None = field(default=None)
    hosts: HostsEntryList|None = field(default=None)
    issue: str|None = field(default=None)
    nfsExports: NfsExportList|None = field(default=None)
    selinux: Selinux|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'fstab': 'FstabEntryList',
        'hosts': 'HostsEntryList',
        'nfsExports': 'NfsExportList',
        'selinux': 'Selinux',
    }

@dataclass
class GuestInstalledApplication(GoogleRestResourceBase):
    """
    time is the install date as reported by the guest, not normalized.
    """
    name: str|None = field(default=None)
    path: str|None = field(default=None)
    time: str|None = field(default=None)
    vendor: str|None = field(default=None)
    version: str|None = field(default=None)

@dataclass
class GuestInstalledApplicationList(GoogleRestResourceBase):
    entries: list[GuestInstalledApplication]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'entries': ListOf('GuestInstalledApplication'),
    }

@dataclass
class OpenFileDetails(GoogleRestResourceBase):
    command: str|None = field(default=None)
    filePath: str|None = field(default=None)
    fileType: str|None = field(default=None)
    user: str|None = field(default=None)

@dataclass
class OpenFileList(GoogleRestResourceBase):
    entries: list[OpenFileDetails]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'entries': ListOf('OpenFileDetails'),
    }

@dataclass
class RunningProcess(GoogleRestResourceBase):
    attributes: dict[str, str]|None = field(default=None)
    cmdline: str|None = field(default=None)
    exePath: str|None = field(default=None)
    pid: int|None = field(default=None)
    user: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'pid': INT64,
    }

@dataclass
class RunningProcessList(GoogleRestResourceBase):
    processes: list[RunningProcess]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'processes': ListOf('RunningProcess'),
    }

@dataclass
class RunningService(GoogleRestResourceBase):
    cmdline: str|None = field(default=None)
    exePath: str|None = field(default=None)
    name: str|None = field(default=None)
    pid: int|None = field(default=None)
    startMode: str|None = field(default=None)
    state: str|None = field(default=None)
    status: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'pid': INT64,
    }

@dataclass
class RunningServiceList(GoogleRestResourceBase):
    services: list[RunningService]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'services': ListOf('RunningService'),
    }

@dataclass
class NetworkConnection(GoogleRestResourceBase):
    localIpAddress: str|None = field(default=None)
    localPort: int|None = field(default=None)
    pid: int|None = field(default=None)
    processName: str|None = field(default=None)
    protocol: str|None = field(default=None)
    remoteIpAddress: str|None = field(default=None)
    remotePort: int|None = field(default=None)
    state: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'pid': INT64,
    }

@dataclass
class NetworkConnectionList(GoogleRestResourceBase):
    entries: list[NetworkConnection]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'entries': ListOf('NetworkConnection'),
    }

@dataclass
class RuntimeNetworkInfo(GoogleRestResourceBase):
    """
    netstat is the raw output, connections the parsed form of it.
    """
    connections: NetworkConnectionList|None = field(default=None)
    netstat: str|None = field(default=None)
    netstatTime: DateTime|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'connections': 'NetworkConnectionList',
        'netstatTime': 'DateTime',
    }

@dataclass
class GuestRuntimeDetails(GoogleRestResourceBase):
    domain: str|None = field(default=None)
    installedApps: GuestInstalledApplicationList|None = field(default=None)
    lastUptime: Date|None = field(default=None)
    machineName: str|None = field(default=None)
    networkInfo: RuntimeNetworkInfo|None = field(default=None)
    openFileList: OpenFileList|None = field(default=None)
    processes: RunningProcessList|None = field(default=None)
    services: RunningServiceList|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'installedApps': 'GuestInstalledApplicationList',
        'lastUptime': 'Date',
        'networkInfo': 'RuntimeNetworkInfo',
        'openFileList': 'OpenFileList',
        'processes': 'RunningProcessList',
        'services': 'RunningServiceList',
    }

@dataclass
class GuestOsDetails(GoogleRestResourceBase):
    config: GuestConfigDetails|None = field(default=None)
    runtime: GuestRuntimeDetails|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'config': 'GuestConfigDetails',
        'runtime': 'GuestRuntimeDetails',
    }

# network

@dataclass
class NetworkAddress(GoogleRestResourceBase):
    """
    assignment is ADDRESS_ASSIGNMENT_STATIC or ADDRESS_ASSIGNMENT_DHCP when known.
    """
    assignment: str|None = field(default=None)
    bcast: str|None = field(default=None)
    fqdn: str|None = field(default=None)
    ipAddress: str|None = field(default=None)
    subnetMask: str|None = field(default=None)

@dataclass
class NetworkAddressList(GoogleRestResourceBase):
    addresses: list[NetworkAddress]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'addresses': ListOf('NetworkAddress'),
    }

@dataclass
class NetworkAdapterDetails(GoogleRestResourceBase):
    adapterType: str|None = field(default=None)
    addresses: NetworkAddressList|None = field(default=None)
    macAddress: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'addresses': 'NetworkAddressList',
    }

@dataclass
class NetworkAdapterList(GoogleRestResourceBase):
    networkAdapters: list[NetworkAdapterDetails]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'networkAdapters': ListOf('NetworkAdapterDetails'),
    }

# virtual machines

@dataclass
class BiosDetails(GoogleRestResourceBase):
    biosManufacturer: str|None = field(default=None)
    biosName: str|None = field(default=None)
    biosReleaseDate: str|None = field(default=None)
    biosVersion: str|None = field(default=None)
    smbiosUuid: str|None = field(default=None)

@dataclass
class VmwarePlatformDetails(GoogleRestResourceBase):
    esxVersion: str|None = field(default=None)
    osid: str|None = field(default=None)
    vcenterVersion: str|None = field(default=None)

@dataclass
class PlatformDetails(GoogleRestResourceBase):
    vmwareDetails: VmwarePlatformDetails|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'vmwareDetails': 'VmwarePlatformDetails',
    }

@dataclass
class VirtualMachineArchitectureDetails(GoogleRestResourceBase):
    bios: BiosDetails|None = field(default=None)
    cpuArchitecture: str|None = field(default=None)
    cpuManufacturer: str|None = field(default=None)
    cpuName: str|None = field(default=None)
    cpuSocketCount: int|None = field(default=None)
    cpuThreadCount: int|None = field(default=None)
    firmware: str|None = field(default=None)
    hyperthreading: str|None = field(default=None)
    vendor: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'bios': 'BiosDetails',
    }

@dataclass
class VirtualMachineDiskDetails(GoogleRestResourceBase):
    disks: DiskEntryList|None = field(default=None)
    hddTotalCapacityBytes: int|None = field(default=None)
    hddTotalFreeBytes: int|None = field(default=None)
    lsblkJson: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'disks': 'DiskEntryList',
        'hddTotalCapacityBytes': INT64,
        'hddTotalFreeBytes': INT64,
    }

@dataclass
class VirtualMachineNetworkDetails(GoogleRestResourceBase):
    defaultGw: str|None = field(default=None)
    networkAdapters: NetworkAdapterList|None = field(default=None)
    primaryIpAddress: str|None = field(default=None)
    primaryMacAddress: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'networkAdapters': 'NetworkAdapterList',
    }

@dataclass
class VirtualMachineDetails(GoogleRestResourceBase):
    """
    Details of a VM asset.  osFamily is one of OS_FAMILY_UNKNOWN,
    OS_FAMILY_WINDOWS, OS_FAMILY_LINUX, OS_FAMILY_UNIX.
    """
    coreCount: int|None = field(default=None)
    guestOs: GuestOsDetails|None = field(default=None)
    memoryMb: int|None = field(default=None)
    osFamily: str|None = field(default=None)
    osName: str|None = field(default=None)
    platform: PlatformDetails|None = field(default=None)
    powerState: str|None = field(default=None)
    vcenterFolder: str|None = field(default=None)
    vcenterUrl: str|None = field(default=None)
    vcenterVmId: str|None = field(default=None)
    vmArchitecture: VirtualMachineArchitectureDetails|None = field(default=None)
    vmDisks: VirtualMachineDiskDetails|None = field(default=None)
    vmName: str|None = field(default=None)
    vmNetwork: VirtualMachineNetworkDetails|None = field(default=None)
    vmUuid: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'guestOs': 'GuestOsDetails',
        'platform': 'PlatformDetails',
        'vmArchitecture': 'VirtualMachineArchitectureDetails',
        'vmDisks': 'VirtualMachineDiskDetails',
        'vmNetwork': 'VirtualMachineNetworkDetails',
    }

# sources

@dataclass
class Source(GoogleRestResourceBase):
    """
    Where asset data comes from.  type is one of SOURCE_TYPE_UPLOAD,
    SOURCE_TYPE_GUEST_OS_SCAN, SOURCE_TYPE_INVENTORY_SCAN, SOURCE_TYPE_CUSTOM.
    """
    createTime: datetime|None = field(default=None)
    description: str|None = field(default=None)
    displayName: str|None = field(default=None)
    isManaged: bool|None = field(default=None)
    name: str|None = field(default=None)
    pendingFrameCount: int|None = field(default=None)
    priority: int|None = field(default=None)
    type: str|None = field(default=None)
    updateTime: datetime|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'createTime': DATETIME,
        'updateTime': DATETIME,
    }

@dataclass
class ListSourcesResponse(GoogleRestResourceBase):
    nextPageToken: str|None = field(default=None)
    sources: list[Source]|None = field(default=None)
    unreachable: list[str]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'sources': ListOf('Source'),
    }
