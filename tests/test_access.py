import json
import logging

import google.auth
import google.auth.exceptions
import pytest
from google.oauth2.credentials import Credentials

from googlerest.access import gapi

CLOUD = "https://www.googleapis.com/auth/cloud-platform"
TABLES = "https://www.googleapis.com/auth/tables"

class FakeCreds():
    def __init__(self, scopes=None, valid=True):
        self.scopes = scopes
        self.valid = valid

@pytest.fixture
def paths(tmp_path):
    gapi.config = {'secrets': tmp_path / "secrets.json", 'cache': tmp_path / "tokens.json"}
    return tmp_path

def test_get_scope():
    assert(gapi.get_scope("cloud-platform") == CLOUD)
    assert(gapi.get_scope(TABLES) == TABLES)
    assert(gapi.get_scope("https://evil.example.com/scope") == "")
    assert(gapi.get_scope("nonsense") == "")
    assert(gapi.get_scope("sheets") == "")

def test_scopes():
    assert(not gapi)
    gapi.scopes = "tables"
    assert(gapi.scopes == [TABLES])
    gapi.scopes = ["cloud-platform", "bogus", TABLES]
    assert(gapi.scopes == [CLOUD, TABLES])
    gapi.scopes = None
    assert(gapi.scopes == [])

def test_append_scopes():
    assert(gapi.append_scopes("tables", ["cloud-platform", "tables", "bogus"]))
    assert(gapi.scopes == [TABLES, CLOUD])
    assert(not gapi.scope_in_session("tables"))

def test_config_round_trip(tmp_path):
    gapi.config = {'secrets': str(tmp_path / "s.json"), 'cache': str(tmp_path / "c.json"),
                   'scopes': ['sasportal'], 'server': '127.0.0.1', 'port': '8765',
                   'developer_key': 'abc'}
    config = gapi.config
    assert(config['secrets'] == str(tmp_path / "s.json"))
    assert(config['cache'] == str(tmp_path / "c.json"))
    assert(config['scopes'] == ["https://www.googleapis.com/auth/sasportal"])
    assert(config['server'] == '127.0.0.1')
    assert(config['port'] == 8765)
    assert(config['developer_key'] == 'abc')
    assert(gapi.developer_key == 'abc')
    gapi.reset()
    assert('developer_key' not in gapi.config)
    gapi.config = config
    assert(gapi.config == config)

def test_connect_without_scopes(paths):
    assert(not gapi.connect())
    assert(gapi.get_credentials() is None)

def test_connect_default_credentials(paths, monkeypatch):
    creds = FakeCreds(scopes=[CLOUD])
    requested = []
    def default(scopes=None):
        requested.append(scopes)
        return creds, "my-project"
    monkeypatch.setattr(google.auth, "default", default)
    gapi.scopes = "cloud-platform"
    assert(gapi.get_credentials() is creds)
    assert(requested == [[CLOUD]])
    assert(gapi.connected)
    assert(gapi.scope_in_session("cloud-platform"))
    # no refresh token, nothing cached
    assert(not (paths / "tokens.json").exists())

def test_connect_no_credentials(paths, monkeypatch, caplog):
    def default(scopes=None):
        raise google.auth.exceptions.DefaultCredentialsError("none here")
    monkeypatch.setattr(google.auth, "default", default)
    gapi.scopes = "cloud-platform"
    with caplog.at_level(logging.WARNING, logger="googlerest.access"):
        assert(not gapi.connect())
    assert("none here" in caplog.text)
    assert(gapi.creds is None)

def test_stale_cache_discarded(paths, monkeypatch, caplog):
    cache = paths / "tokens.json"
    cache.write_text(json.dumps({'refresh_token': 'r', 'client_id': 'id', 'client_secret': 's',
                                 'scopes': [CLOUD]}))
    def refresh(self, request):
        raise google.auth.exceptions.RefreshError("revoked")
    monkeypatch.setattr(Credentials, "refresh", refresh)
    monkeypatch.setattr(google.auth, "default", lambda scopes=None: (FakeCreds(scopes), None))
    gapi.scopes = "cloud-platform"
    with caplog.at_level(logging.WARNING, logger="googlerest.access"):
        assert(gapi.connect())
    assert("revoked" in caplog.text)
    assert(not cache.exists())
    assert(isinstance(gapi.creds, FakeCreds))

def test_cache_missing_scopes(paths, monkeypatch):
    cache = paths / "tokens.json"
    cache.write_text(json.dumps({'refresh_token': 'r', 'client_id': 'id', 'client_secret': 's',
                                 'scopes': [TABLES]}))
    monkeypatch.setattr(google.auth, "default", lambda scopes=None: (FakeCreds(scopes), None))
    gapi.scopes = ["cloud-platform"]
    assert(gapi.connect())
    assert(not cache.exists())

def test_creds_handed_over():
    creds = FakeCreds()
    gapi.creds = creds
    assert(gapi.get_credentials() is creds)
    assert(gapi)
