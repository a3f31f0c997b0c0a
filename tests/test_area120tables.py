import datetime

import pytest

from googlerest.client import paginate
from googlerest.common import Empty
from googlerest.v1alpha1.area120tables import (Area120Tables, BatchCreateRowsRequest,
                                               BatchDeleteRowsRequest, BatchUpdateRowsRequest,
                                               CreateRowRequest, Row, Table, UpdateRowRequest)

from conftest import mock_http, ok, sent

TABLE = {
    'name': 'tables/abc',
    'displayName': 'Bugs',
    'createTime': '2020-11-05T16:26:43.196Z',
    'columns': [{'id': 'c1', 'name': 'Status', 'dataType': 'tags',
                 'labels': [{'id': 'l1', 'name': 'Open'}]},
                {'id': 'c2', 'name': 'Due', 'dataType': 'date', 'dateDetails': {'hasTime': False}}],
    'savedViews': [{'id': 'v1', 'name': 'Everything'}],
}

def test_tables_get():
    http = mock_http(ok(TABLE))
    t = Area120Tables(http=http).tablesGet("tables/abc")
    assert(isinstance(t, Table))
    assert(t.createTime == datetime.datetime(2020, 11, 5, 16, 26, 43, 196000, tzinfo=datetime.timezone.utc))
    assert(t.columns[0].labels[0].name == 'Open')
    assert(t.columns[1].dateDetails.hasTime is False)
    assert(t.savedViews[0].name == 'Everything')
    assert(sent(http)[0:2] == ("GET", "/v1alpha1/tables/abc"))

def test_tables_list_paginated():
    http = mock_http(ok({'tables': [TABLE], 'nextPageToken': 'p2'}),
                     ok({'tables': [{'name': 'tables/def'}]}))
    tables = list(paginate(Area120Tables(http=http).tablesList, items='tables', orderBy='createTime desc'))
    assert([t.name for t in tables] == ['tables/abc', 'tables/def'])
    assert(sent(http, 0)[2] == {'orderBy': 'createTime desc'})
    assert(sent(http, 1)[2] == {'orderBy': 'createTime desc', 'pageToken': 'p2'})

def test_rows_create_view():
    http = mock_http(ok({'name': 'tables/abc/rows/r1', 'values': {'c1': 'Open', 'c3': 4},
                         'updateTime': '2023-01-01T00:00:00Z'}))
    at = Area120Tables(http=http)
    row = at.tablesRowsCreate("tables/abc", Row(values={'c1': 'Open', 'c3': 4}), view="COLUMN_ID_VIEW")
    assert(row.values == {'c1': 'Open', 'c3': 4})
    assert(row.updateTime.year == 2023)
    method, path, query, body = sent(http)
    assert(method == "POST")
    assert(path == "/v1alpha1/tables/abc/rows")
    assert(query == {'view': 'COLUMN_ID_VIEW'})
    assert(body == {'values': {'c1': 'Open', 'c3': 4}})

def test_invalid_view():
    http = mock_http()
    at = Area120Tables(http=http)
    with pytest.raises(ValueError):
        at.tablesRowsGet("tables/abc/rows/r1", view="ID_VIEW")
    assert(http.request_sequence == [])

def test_rows_patch():
    http = mock_http(ok({'name': 'tables/abc/rows/r1', 'values': {'Status': 'Done'}}))
    at = Area120Tables(http=http)
    at.tablesRowsPatch("tables/abc/rows/r1", Row(values={'Status': 'Done'}), updateMask=['values.Status'])
    method, path, query, body = sent(http)
    assert(method == "PATCH")
    assert(path == "/v1alpha1/tables/abc/rows/r1")
    assert(query == {'updateMask': 'values.Status'})

def test_rows_batch():
    http = mock_http(ok({'rows': [{'name': 'tables/abc/rows/r1'}, {'name': 'tables/abc/rows/r2'}]}),
                     ok({'rows': [{'name': 'tables/abc/rows/r1'}]}),
                     ok())
    at = Area120Tables(http=http)
    req = BatchCreateRowsRequest(requests=[
        CreateRowRequest(parent='tables/abc', row=Row(values={'Status': 'Open'})),
        CreateRowRequest(parent='tables/abc', row=Row(values={'Status': 'Closed'})),
    ])
    created = at.tablesRowsBatchCreate("tables/abc", req)
    assert(len(created.rows) == 2)
    assert(sent(http)[0:2] == ("POST", "/v1alpha1/tables/abc/rows:batchCreate"))
    assert(sent(http)[3]['requests'][1] == {'parent': 'tables/abc', 'row': {'values': {'Status': 'Closed'}}})

    at.tablesRowsBatchUpdate("tables/abc", BatchUpdateRowsRequest(requests=[
        UpdateRowRequest(row=Row(name='tables/abc/rows/r1', values={'Status': 'Done'}),
                         updateMask='values')]))
    assert(sent(http, 1)[1] == "/v1alpha1/tables/abc/rows:batchUpdate")

    assert(at.tablesRowsBatchDelete("tables/abc", BatchDeleteRowsRequest(names=['tables/abc/rows/r1'])) == Empty())
    assert(sent(http, 2)[1:] == ("/v1alpha1/tables/abc/rows:batchDelete", {}, {'names': ['tables/abc/rows/r1']}))

def test_workspaces():
    http = mock_http(ok({'workspaces': [{'name': 'workspaces/w', 'tables': [{'name': 'tables/abc'}],
                                         'createTime': '2021-01-01T00:00:00Z'}]}),
                     ok({'name': 'workspaces/w'}),
                     ok())
    at = Area120Tables(http=http)
    ws = at.workspacesList(pageSize=1)
    assert(ws.workspaces[0].tables[0].name == 'tables/abc')
    assert(isinstance(ws.workspaces[0].createTime, datetime.datetime))
    assert(at.workspacesGet("workspaces/w").name == 'workspaces/w')
    at.tablesRowsDelete("tables/abc/rows/r9")
    assert(sent(http, 2)[0:2] == ("DELETE", "/v1alpha1/tables/abc/rows/r9"))
