"""
Base for the per-API client classes.

Every REST operation has the same shape: expand a path template against
the base URL, append the query parameters, send at most one JSON body,
convert the JSON response to the operation's record type.  Subclasses
declare DEFAULT_BASE_URL and one method per operation, each a single
_call().
"""
import logging
from collections.abc import Callable, Iterable, Iterator
from urllib.parse import urlencode

import httplib2
import uritemplate

from . import transport
from .access import gapi
from .resources import GoogleRestResourceBase
from .wire import query_value

logger = logging.getLogger(__name__)

class GoogleRestClient():
    """
    param: credentials: google.auth credentials, default is whatever access.gapi has
    param: base_url: root of the API, default DEFAULT_BASE_URL
    param: http: an httplib2.Http compatible transport, overrides credentials
    param: num_retries: retries on 5xx and rate limiting, see googleapiclient HttpRequest.execute
    param: developer_key: API key sent as the 'key' query parameter
    """
    DEFAULT_BASE_URL = ""

    def __init__(self, credentials=None, base_url: str|None = None,
                 http: httplib2.Http|None = None, num_retries: int = 0,
                 developer_key: str|None = None) -> None:
        base = base_url or self.DEFAULT_BASE_URL
        if not base:
            raise ValueError(f"{self.__class__.__name__}: no base URL")
        self.base_url = base if base.endswith("/") else base + "/"
        self.credentials = credentials
        self.num_retries = int(num_retries)
        self.developer_key = developer_key
        self.__http = http

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.base_url})"

    @property
    def http(self) -> httplib2.Http:
        """
        The transport requests go through, created on first use.
        """
        if self.__http is None:
            creds = self.credentials if self.credentials is not None else gapi.get_credentials()
            logger.debug("%s: new transport, authenticated=%s", self, creds is not None)
            self.__http = transport.authorized_http(creds)
        return self.__http

    def _url(self, template: str, **params) -> str:
        """
        Expand template (relative to the base URL) with the path parameters it names,
        everything else that isn't None goes in the query string.
        Path parameters use reserved expansion so resource names like
        projects/p/locations/l keep their slashes.
        """
        tmpl = uritemplate.URITemplate(template)
        path_params = {}
        for name in tmpl.variable_names:
            v = params.pop(name, None)
            if v is None or v == "":
                raise ValueError(f"Missing path parameter: {name}")
            path_params[name] = str(v)
        url = self.base_url + tmpl.expand(path_params)
        query = [(k, query_value(v)) for k, v in params.items() if v is not None]
        key = self.developer_key if self.developer_key is not None else gapi.developer_key
        if key:
            query.append(('key', key))
        if query:
            url += "?" + urlencode(query)
        return url

    def _call(self, template: str, method: str, response_type: type[GoogleRestResourceBase],
              body: GoogleRestResourceBase|dict|None = None, **params) -> GoogleRestResourceBase:
        url = self._url(template, **params)
        if isinstance(body, GoogleRestResourceBase):
            body = body.to_base()
        data = transport.request(url, self.http, method=method, body=body,
                                 num_retries=self.num_retries)
        return response_type.from_base(data)

    @staticmethod
    def _check_enum(name: str, value: str|None, valid: Iterable[str]) -> None:
        if value is not None and value not in valid:
            raise ValueError(f"Invalid {name}: {value}, expected one of {', '.join(valid)}")

def paginate(method: Callable, *args, items: str, **kwargs) -> Iterator:
    """
    Call a list method repeatedly following nextPageToken, yielding the
    entries of the named list field from every page.
    e.g. paginate(client.tablesList, items='tables', pageSize=50)
    """
    page_token = kwargs.pop('pageToken', None)
    while True:
        response = method(*args, pageToken=page_token, **kwargs)
        yield from getattr(response, items) or []
        page_token = response.nextPageToken
        if not page_token:
            break
