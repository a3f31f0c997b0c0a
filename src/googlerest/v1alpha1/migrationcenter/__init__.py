"""
Migration Center API

Inventory of assets (virtual machines) to plan a move to Google Cloud,
fed by sources and import jobs.
Docs: https://cloud.google.com/migration-center
"""
from ...client import GoogleRestClient
from .resources import *

class MigrationCenter(GoogleRestClient):
    """
    Create, patch and delete calls return long running Operations, poll them
    with projectsLocationsOperationsGet().
    requestId on those calls makes retries idempotent, use a UUID.
    """
    DEFAULT_BASE_URL = "https://migrationcenter.googleapis.com/"

    # assets

    def projectsLocationsAssetsAggregateValues(self, parent: str,
                                               req: AggregateAssetsValuesRequest) -> AggregateAssetsValuesResponse:
        """
        Aggregates the requested fields based on provided function.
        param: parent: projects/{project}/locations/{location}
        """
        return self._call("v1alpha1/{+parent}/assets:aggregateValues", "POST",
                          AggregateAssetsValuesResponse, body=req, parent=parent)

    def projectsLocationsAssetsBatchUpdate(self, parent: str,
                                           req: BatchUpdateAssetsRequest) -> BatchUpdateAssetsResponse:
        return self._call("v1alpha1/{+parent}/assets:batchUpdate", "POST",
                          BatchUpdateAssetsResponse, body=req, parent=parent)

    def projectsLocationsAssetsCreate(self, parent: str, req: Asset, assetId: str|None = None,
                                      requestId: str|None = None) -> Operation:
        return self._call("v1alpha1/{+parent}/assets", "POST", Operation, body=req,
                          parent=parent, assetId=assetId, requestId=requestId)

    def projectsLocationsAssetsDelete(self, name: str, requestId: str|None = None) -> Operation:
        return self._call("v1alpha1/{+name}", "DELETE", Operation, name=name, requestId=requestId)

    def projectsLocationsAssetsGet(self, name: str, view: str|None = None) -> Asset:
        self._check_enum("view", view, ASSET_VIEWS)
        return self._call("v1alpha1/{+name}", "GET", Asset, name=name, view=view)

    def projectsLocationsAssetsList(self, parent: str, filter: str|None = None,
                                    orderBy: str|None = None, pageSize: int|None = None,
                                    pageToken: str|None = None, view: str|None = None) -> ListAssetsResponse:
        self._check_enum("view", view, ASSET_VIEWS)
        return self._call("v1alpha1/{+parent}/assets", "GET", ListAssetsResponse,
                          parent=parent, filter=filter, orderBy=orderBy, pageSize=pageSize,
                          pageToken=pageToken, view=view)

    def projectsLocationsAssetsPatch(self, name: str, req: Asset, requestId: str|None = None,
                                     updateMask: str|list[str]|None = None) -> Operation:
        return self._call("v1alpha1/{+name}", "PATCH", Operation, body=req, name=name,
                          requestId=requestId, updateMask=updateMask)

    def projectsLocationsAssetsReportAssetFrames(self, parent: str, req: Frames,
                                                 source: str|None = None) -> ReportAssetFramesResponse:
        """
        Report a set of asset frames, creating or updating assets.
        param: source: the source the frames came from, projects/p/locations/l/sources/s
        """
        return self._call("v1alpha1/{+parent}/assets:reportAssetFrames", "POST",
                          ReportAssetFramesResponse, body=req, parent=parent, source=source)

    # locations

    def projectsLocationsGet(self, name: str) -> Location:
        return self._call("v1alpha1/{+name}", "GET", Location, name=name)

    def projectsLocationsList(self, name: str, filter: str|None = None, pageSize: int|None = None,
                              pageToken: str|None = None) -> ListLocationsResponse:
        return self._call("v1alpha1/{+name}/locations", "GET", ListLocationsResponse,
                          name=name, filter=filter, pageSize=pageSize, pageToken=pageToken)

    # import jobs

    def projectsLocationsImportJobsCreate(self, parent: str, req: ImportJob,
                                          importJobId: str|None = None,
                                          requestId: str|None = None) -> Operation:
        return self._call("v1alpha1/{+parent}/importJobs", "POST", Operation, body=req,
                          parent=parent, importJobId=importJobId, requestId=requestId)

    def projectsLocationsImportJobsDelete(self, name: str, requestId: str|None = None) -> Operation:
        return self._call("v1alpha1/{+name}", "DELETE", Operation, name=name, requestId=requestId)

    def projectsLocationsImportJobsGet(self, name: str, view: str|None = None) -> ImportJob:
        self._check_enum("view", view, IMPORT_JOB_VIEWS)
        return self._call("v1alpha1/{+name}", "GET", ImportJob, name=name, view=view)

    def projectsLocationsImportJobsList(self, parent: str, filter: str|None = None,
                                        orderBy: str|None = None, pageSize: int|None = None,
                                        pageToken: str|None = None,
                                        view: str|None = None) -> ListImportJobsResponse:
        self._check_enum("view", view, IMPORT_JOB_VIEWS)
        return self._call("v1alpha1/{+parent}/importJobs", "GET", ListImportJobsResponse,
                          parent=parent, filter=filter, orderBy=orderBy, pageSize=pageSize,
                          pageToken=pageToken, view=view)

    def projectsLocationsImportJobsPatch(self, name: str, req: ImportJob, requestId: str|None = None,
                                         updateMask: str|list[str]|None = None) -> Operation:
        return self._call("v1alpha1/{+name}", "PATCH", Operation, body=req, name=name,
                          requestId=requestId, updateMask=updateMask)

    def projectsLocationsImportJobsRun(self, name: str, req: RunImportJobRequest) -> Operation:
        """
        Runs an import job, it has to have passed validation first.
        """
        return self._call("v1alpha1/{+name}:run", "POST", Operation, body=req, name=name)

    def projectsLocationsImportJobsValidate(self, name: str, req: ValidateImportJobRequest) -> Operation:
        return self._call("v1alpha1/{+name}:validate", "POST", Operation, body=req, name=name)

    # operations

    def projectsLocationsOperationsCancel(self, name: str, req: CancelOperationRequest) -> Empty:
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

    # sources

    def projectsLocationsSourcesCreate(self, parent: str, req: Source, requestId: str|None = None,
                                       sourceId: str|None = None) -> Operation:
        return self._call("v1alpha1/{+parent}/sources", "POST", Operation, body=req,
                          parent=parent, requestId=requestId, sourceId=sourceId)

    def projectsLocationsSourcesDelete(self, name: str, requestId: str|None = None) -> Operation:
        return self._call("v1alpha1/{+name}", "DELETE", Operation, name=name, requestId=requestId)

    def projectsLocationsSourcesGet(self, name: str) -> Source:
        return self._call("v1alpha1/{+name}", "GET", Source, name=name)

    def projectsLocationsSourcesList(self, parent: str, filter: str|None = None,
                                     orderBy: str|None = None, pageSize: int|None = None,
                                     pageToken: str|None = None) -> ListSourcesResponse:
        return self._call("v1alpha1/{+parent}/sources", "GET", ListSourcesResponse,
                          parent=parent, filter=filter, orderBy=orderBy, pageSize=pageSize,
                          pageToken=pageToken)

    def projectsLocationsSourcesPatch(self, name: str, req: Source, requestId: str|None = None,
                                      updateMask: str|list[str]|None = None) -> Operation:
        return self._call("v1alpha1/{+name}", "PATCH", Operation, body=req, name=name,
                          requestId=requestId, updateMask=updateMask)
