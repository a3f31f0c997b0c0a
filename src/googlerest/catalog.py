"""
Index of the APIs bundled here, in the shape of the Discovery service's
directory list: name, version, title and documentation link.
Lets a client class be picked by 'name:version' without importing every
API module up front.
"""
import importlib
import logging
from dataclasses import dataclass

from .client import GoogleRestClient

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ApiEntry():
    """
    param: client: import path of the client class, module:ClassName
    """
    name: str
    version: str
    title: str
    documentation: str
    client: str

    @property
    def id(self) -> str:
        return f"{self.name}:{self.version}"

    def load(self) -> type[GoogleRestClient]:
        module_name, _, class_name = self.client.partition(":")
        logger.debug("loading %s from %s", class_name, module_name)
        module = importlib.import_module(module_name)
        return getattr(module, class_name)

APIS = [
    ApiEntry("area120tables", "v1alpha1", "Area120 Tables API",
             "https://support.google.com/area120-tables/answer/10011390",
             "googlerest.v1alpha1.area120tables:Area120Tables"),
    ApiEntry("contactcenteraiplatform", "v1alpha1", "Contact Center AI Platform API",
             "https://cloud.google.com/solutions/contact-center-ai-platform",
             "googlerest.v1alpha1.contactcenteraiplatform:ContactCenterAIPlatform"),
    ApiEntry("factchecktools", "v1alpha1", "Fact Check Tools API",
             "https://developers.google.com/fact-check/tools/api/",
             "googlerest.v1alpha1.factchecktools:FactCheckTools"),
    ApiEntry("migrationcenter", "v1alpha1", "Migration Center API",
             "https://cloud.google.com/migration-center",
             "googlerest.v1alpha1.migrationcenter:MigrationCenter"),
    ApiEntry("prod_tt_sasportal", "v1alpha1", "SAS Portal API (Testing)",
             "https://developers.google.com/spectrum-access-system/",
             "googlerest.v1alpha1.sasportal:ProdTtSasPortal"),
]

def get(api_id: str) -> ApiEntry:
    """
    Look up an entry by 'name:version'.
    raises: KeyError if it isn't bundled
    """
    for entry in APIS:
        if entry.id == api_id:
            return entry
    raise KeyError(api_id)

def client_class(name: str, version: str) -> type[GoogleRestClient]:
    return get(f"{name}:{version}").load()

def build(name: str, version: str, **kwargs) -> GoogleRestClient:
    """
    Construct the client for an API, kwargs go to its constructor.
    e.g. build('area120tables', 'v1alpha1', developer_key='...')
    """
    return client_class(name, version)(**kwargs)
