"""
The single HTTP helper every client method goes through.

Built on the pieces googleapiclient uses for its discovery based services:
httplib2 for the connection, HttpRequest for retries and error raising,
JsonModel for decoding.  So errors are the familiar
googleapiclient.errors.HttpError.
"""
import json
import logging

import google_auth_httplib2
import httplib2
from googleapiclient.http import HttpRequest, build_http
from googleapiclient.model import JsonModel

from . import __version__

logger = logging.getLogger(__name__)

USER_AGENT = f"googlerest/{__version__}"

_MODEL = JsonModel(data_wrapper=False)

def authorized_http(credentials=None) -> httplib2.Http:
    """
    A transport for the clients.  Unauthenticated if no credentials,
    only useful with a developer key then.
    """
    http = build_http()
    if credentials is None:
        return http
    return google_auth_httplib2.AuthorizedHttp(credentials, http=http)

def _postproc(resp, content) -> dict:
    if not content:
        return {}
    return _MODEL.response(resp, content)

def request(url: str, http: httplib2.Http, method: str = "GET",
            body: dict|None = None, num_retries: int = 0) -> dict:
    """
    Perform one REST call and return the decoded JSON response,
    an empty dict if there was none.
    param: url: fully expanded URL including query string
    param: http: transport from authorized_http() or a test double
    param: method: HTTP method
    param: body: JSON compatible dict to send, or None
    param: num_retries: retries on 5xx and rate limiting, with backoff
    raises: googleapiclient.errors.HttpError for any non 2xx response
    """
    headers = {
        'accept': 'application/json',
        'accept-encoding': 'gzip, deflate',
        'user-agent': USER_AGENT,
    }
    payload = None
    if body is not None:
        headers['content-type'] = 'application/json'
        payload = json.dumps(body)
    logger.debug("%s %s", method, url)
    req = HttpRequest(http, _postproc, url, method=method, body=payload, headers=headers)
    return req.execute(num_retries=num_retries)
