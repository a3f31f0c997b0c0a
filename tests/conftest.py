import json
from urllib.parse import parse_qs, urlsplit

import pytest
from googleapiclient.http import HttpMockSequence

from googlerest.access import gapi

@pytest.fixture(autouse=True)
def reset_gapi():
    gapi.reset()
    yield
    gapi.reset()

def ok(payload: dict|None = None, status: str = '200'):
    """A canned response for HttpMockSequence."""
    return ({'status': status}, json.dumps(payload) if payload is not None else '')

def mock_http(*responses) -> HttpMockSequence:
    return HttpMockSequence(list(responses))

def sent(http: HttpMockSequence, n: int = 0):
    """
    The nth request seen by the mock as (method, path, query dict, body dict).
    """
    uri, method, body, headers = http.request_sequence[n]
    parts = urlsplit(uri)
    query = {k: v[0] if len(v) == 1 else v for k, v in parse_qs(parts.query).items()}
    return method, parts.path, query, json.loads(body) if body else None
