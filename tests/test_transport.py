import json

import google_auth_httplib2
import httplib2
import pytest
from google.auth.credentials import AnonymousCredentials
from googleapiclient.errors import HttpError

from googlerest import transport

from conftest import mock_http, ok

def test_request_get():
    http = mock_http(ok({'a': '1'}))
    assert(transport.request("https://example.com/v1/x", http) == {'a': '1'})
    uri, method, body, headers = http.request_sequence[0]
    assert(uri == "https://example.com/v1/x")
    assert(method == "GET")
    assert(not body)
    assert(headers['accept'] == 'application/json')
    assert(headers['user-agent'].startswith('googlerest/'))
    assert('content-type' not in headers)

def test_request_body():
    http = mock_http(ok({'name': 'n'}))
    transport.request("https://example.com/v1/x", http, method="POST", body={'k': [1, 2]})
    uri, method, body, headers = http.request_sequence[0]
    assert(method == "POST")
    assert(json.loads(body) == {'k': [1, 2]})
    assert(headers['content-type'] == 'application/json')

def test_request_empty_response():
    http = mock_http(ok(), ok(status='204'), ok({}))
    assert(transport.request("https://example.com/v1/x", http, method="DELETE") == {})
    assert(transport.request("https://example.com/v1/x", http, method="DELETE") == {})
    assert(transport.request("https://example.com/v1/x", http) == {})

def test_request_error():
    error = {'error': {'code': 404, 'message': 'Requested entity was not found.', 'status': 'NOT_FOUND'}}
    http = mock_http(ok(error, status='404'))
    with pytest.raises(HttpError) as e:
        transport.request("https://example.com/v1/x", http)
    assert(e.value.status_code == 404)
    assert(e.value.reason == 'Requested entity was not found.')

def test_request_retries(monkeypatch):
    monkeypatch.setattr("time.sleep", lambda s: None)
    http = mock_http(ok({'error': {'code': 503, 'message': 'try later'}}, status='503'), ok({'a': 'b'}))
    assert(transport.request("https://example.com/v1/x", http, num_retries=1) == {'a': 'b'})
    assert(len(http.request_sequence) == 2)

def test_authorized_http():
    assert(isinstance(transport.authorized_http(), httplib2.Http))
    http = transport.authorized_http(AnonymousCredentials())
    assert(isinstance(http, google_auth_httplib2.AuthorizedHttp))
