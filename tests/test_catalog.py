import pytest

from googlerest import catalog
from googlerest.client import GoogleRestClient
from googlerest.v1alpha1.area120tables import Area120Tables

from conftest import mock_http

def test_entries_load():
    ids = [entry.id for entry in catalog.APIS]
    assert(len(ids) == len(set(ids)))
    for entry in catalog.APIS:
        klass = entry.load()
        assert(issubclass(klass, GoogleRestClient))
        assert(klass.DEFAULT_BASE_URL.startswith("https://"))
        assert(entry.title)
        assert(entry.documentation.startswith("https://"))

def test_get():
    entry = catalog.get("area120tables:v1alpha1")
    assert(entry.name == "area120tables")
    assert(entry.version == "v1alpha1")
    assert(catalog.client_class("area120tables", "v1alpha1") is Area120Tables)
    with pytest.raises(KeyError):
        catalog.get("area120tables:v1")

def test_build():
    client = catalog.build("prod_tt_sasportal", "v1alpha1", http=mock_http(), developer_key="k")
    assert(client.base_url == "https://prod-tt-sasportal.googleapis.com/")
    assert(client.developer_key == "k")
