"""
Area120 Tables API

Docs: https://support.google.com/area120-tables/answer/10011390
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar

from ..client import GoogleRestClient
from ..common import Empty
from ..resources import GoogleRestResourceBase
from ..wire import DATETIME, ListOf

class Area120Tables(GoogleRestClient):
    """
    Tables, their rows and the workspaces that group them.
    Row values are keyed by column name, or by column id when
    view is COLUMN_ID_VIEW.
    """
    DEFAULT_BASE_URL = "https://area120tables.googleapis.com/"
    VIEWS = ("VIEW_UNSPECIFIED", "COLUMN_ID_VIEW")

    def tablesGet(self, name: str) -> Table:
        """
        param: name: tables/{table}
        """
        return self._call("v1alpha1/{+name}", "GET", Table, name=name)

    def tablesList(self, orderBy: str|None = None, pageSize: int|None = None,
                   pageToken: str|None = None) -> ListTablesResponse:
        """
        Lists tables for the user.
        param: orderBy: only 'name' and 'createTime' are supported, optionally with ' desc'
        """
        return self._call("v1alpha1/tables", "GET", ListTablesResponse,
                          orderBy=orderBy, pageSize=pageSize, pageToken=pageToken)

    def tablesRowsBatchCreate(self, parent: str, req: BatchCreateRowsRequest) -> BatchCreateRowsResponse:
        """
        Creates multiple rows.
        param: parent: tables/{table}
        """
        return self._call("v1alpha1/{+parent}/rows:batchCreate", "POST", BatchCreateRowsResponse,
                          body=req, parent=parent)

    def tablesRowsBatchDelete(self, parent: str, req: BatchDeleteRowsRequest) -> Empty:
        return self._call("v1alpha1/{+parent}/rows:batchDelete", "POST", Empty,
                          body=req, parent=parent)

    def tablesRowsBatchUpdate(self, parent: str, req: BatchUpdateRowsRequest) -> BatchUpdateRowsResponse:
        return self._call("v1alpha1/{+parent}/rows:batchUpdate", "POST", BatchUpdateRowsResponse,
                          body=req, parent=parent)

    def tablesRowsCreate(self, parent: str, req: Row, view: str|None = None) -> Row:
        self._check_enum("view", view, self.VIEWS)
        return self._call("v1alpha1/{+parent}/rows", "POST", Row, body=req, parent=parent, view=view)

    def tablesRowsDelete(self, name: str) -> Empty:
        """
        param: name: tables/{table}/rows/{row}
        """
        return self._call("v1alpha1/{+name}", "DELETE", Empty, name=name)

    def tablesRowsGet(self, name: str, view: str|None = None) -> Row:
        self._check_enum("view", view, self.VIEWS)
        return self._call("v1alpha1/{+name}", "GET", Row, name=name, view=view)

    def tablesRowsList(self, parent: str, filter: str|None = None, orderBy: str|None = None,
                       pageSize: int|None = None, pageToken: str|None = None,
                       view: str|None = None) -> ListRowsResponse:
        """
        Lists rows in a table.
        param: filter: only equality on a column is supported, e.g. values.\"Status\" = \"Open\"
        """
        self._check_enum("view", view, self.VIEWS)
        return self._call("v1alpha1/{+parent}/rows", "GET", ListRowsResponse,
                          parent=parent, filter=filter, orderBy=orderBy, pageSize=pageSize,
                          pageToken=pageToken, view=view)

    def tablesRowsPatch(self, name: str, req: Row, updateMask: str|list[str]|None = None,
                        view: str|None = None) -> Row:
        self._check_enum("view", view, self.VIEWS)
        return self._call("v1alpha1/{+name}", "PATCH", Row, body=req, name=name,
                          updateMask=updateMask, view=view)

    def workspacesGet(self, name: str) -> Workspace:
        return self._call("v1alpha1/{+name}", "GET", Workspace, name=name)

    def workspacesList(self, pageSize: int|None = None, pageToken: str|None = None) -> ListWorkspacesResponse:
        return self._call("v1alpha1/workspaces", "GET", ListWorkspacesResponse,
                          pageSize=pageSize, pageToken=pageToken)

@dataclass
class BatchCreateRowsRequest(GoogleRestResourceBase):
    requests: list[CreateRowRequest]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'requests': ListOf('CreateRowRequest'),
    }

@dataclass
class BatchCreateRowsResponse(GoogleRestResourceBase):
    rows: list[Row]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'rows': ListOf('Row'),
    }

@dataclass
class BatchDeleteRowsRequest(GoogleRestResourceBase):
    """
    names: at most 500 rows, tables/{table}/rows/{row}
    """
    names: list[str]|None = field(default=None)

@dataclass
class BatchUpdateRowsRequest(GoogleRestResourceBase):
    requests: list[UpdateRowRequest]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'requests': ListOf('UpdateRowRequest'),
    }

@dataclass
class BatchUpdateRowsResponse(GoogleRestResourceBase):
    rows: list[Row]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'rows': ListOf('Row'),
    }

@dataclass
class ColumnDescription(GoogleRestResourceBase):
    """
    Details on a column in the table.
    dataType is the type name shown in the UI, e.g. 'text', 'date_time', 'relationship'.
    """
    dataType: str|None = field(default=None)
    dateDetails: DateDetails|None = field(default=None)
    id: str|None = field(default=None)
    labels: list[LabeledItem]|None = field(default=None)
    lookupDetails: LookupDetails|None = field(default=None)
    multipleValuesDisallowed: bool|None = field(default=None)
    name: str|None = field(default=None)
    readonly: bool|None = field(default=None)
    relationshipDetails: RelationshipDetails|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'dateDetails': 'DateDetails',
        'labels': ListOf('LabeledItem'),
        'lookupDetails': 'LookupDetails',
        'relationshipDetails': 'RelationshipDetails',
    }

@dataclass
class CreateRowRequest(GoogleRestResourceBase):
    parent: str|None = field(default=None)
    row: Row|None = field(default=None)
    view: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'row': 'Row',
    }

@dataclass
class DateDetails(GoogleRestResourceBase):
    hasTime: bool|None = field(default=None)

@dataclass
class LabeledItem(GoogleRestResourceBase):
    id: str|None = field(default=None)
    name: str|None = field(default=None)

@dataclass
class ListRowsResponse(GoogleRestResourceBase):
    nextPageToken: str|None = field(default=None)
    rows: list[Row]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'rows': ListOf('Row'),
    }

@dataclass
class ListTablesResponse(GoogleRestResourceBase):
    nextPageToken: str|None = field(default=None)
    tables: list[Table]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'tables': ListOf('Table'),
    }

@dataclass
class ListWorkspacesResponse(GoogleRestResourceBase):
    nextPageToken: str|None = field(default=None)
    workspaces: list[Workspace]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'workspaces': ListOf('Workspace'),
    }

@dataclass
class LookupDetails(GoogleRestResourceBase):
    relationshipColumn: str|None = field(default=None)
    relationshipColumnId: str|None = field(default=None)

@dataclass
class RelationshipDetails(GoogleRestResourceBase):
    linkedTable: str|None = field(default=None)

@dataclass
class Row(GoogleRestResourceBase):
    """
    A single row in a table.
    values holds whatever the cell types are so it is left as the API sends it.
    """
    createTime: datetime|None = field(default=None)
    name: str|None = field(default=None)
    updateTime: datetime|None = field(default=None)
    values: dict[str, Any]|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'createTime': DATETIME,
        'updateTime': DATETIME,
    }

@dataclass
class SavedView(GoogleRestResourceBase):
    id: str|None = field(default=None)
    name: str|None = field(default=None)

@dataclass
class Table(GoogleRestResourceBase):
    columns: list[ColumnDescription]|None = field(default=None)
    createTime: datetime|None = field(default=None)
    displayName: str|None = field(default=None)
    name: str|None = field(default=None)
    savedViews: list[SavedView]|None = field(default=None)
    timeZone: str|None = field(default=None)
    updateTime: datetime|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'columns': ListOf('ColumnDescription'),
        'createTime': DATETIME,
        'savedViews': ListOf('SavedView'),
        'updateTime': DATETIME,
    }

@dataclass
class UpdateRowRequest(GoogleRestResourceBase):
    row: Row|None = field(default=None)
    updateMask: str|None = field(default=None)
    view: str|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'row': 'Row',
    }

@dataclass
class Workspace(GoogleRestResourceBase):
    createTime: datetime|None = field(default=None)
    displayName: str|None = field(default=None)
    name: str|None = field(default=None)
    tables: list[Table]|None = field(default=None)
    updateTime: datetime|None = field(default=None)

    wire_types: ClassVar[dict] = {
        'createTime': DATETIME,
        'tables': ListOf('Table'),
        'updateTime': DATETIME,
    }
