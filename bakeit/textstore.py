#!/usr/bin/env python3
import json
import requests
import requests.exceptions

from urllib.parse import urlencode
from marshmallow import ValidationError
from . import __version__
from .models import UploadRequest, UploadResponse
from .helpers import get_logger, redact_url
from .exceptions import ConfigError, TransportError, ResponseFormatError

API_URL = "https://www.pastery.net/api/paste/"
USER_AGENT = "bakeit/{} (+python-requests)".format(__version__)
DEFAULT_TIMEOUT = 30


def build_params(request: UploadRequest):
    # sorted by key, empty values are sent too
    return [
        ('api_key', request.api_key),
        ('duration', str(int(request.duration))),
        ('language', request.language or ""),
        ('max_views', str(int(request.max_views))),
        ('title', request.title or ""),
    ]


def build_query(request: UploadRequest) -> str:
    return urlencode(build_params(request))


def build_url(request: UploadRequest, api_url=API_URL) -> str:
    return api_url + "?" + build_query(request)


def build_headers(request: UploadRequest) -> dict:
    return {
        'Content-Type': "application/octet-stream",
        'Content-Length': str(len(request.content)),
        'User-Agent': USER_AGENT,
    }


def parse_response(body) -> UploadResponse:
    """\
    Turn pastery's json reply into an UploadResponse

    Raises:
        ResponseFormatError: body is not json, or has no url in it
    """
    try:
        data = json.loads(body)
    except (ValueError, RecursionError) as e:
        raise ResponseFormatError(
            "Error unmarshaling JSON: {}".format(e)) from e

    if isinstance(data, dict) and not data.get('url') \
            and data.get('error_msg'):
        raise ResponseFormatError(
            "Pastery returned error: {}".format(data['error_msg']))

    try:
        return UploadResponse.load(data)
    except ValidationError as e:
        raise ResponseFormatError(
            "Unexpected response from Pastery: {}".format(e.messages)) from e


class BaseTextStore(object):
    def new_paste(self, request):
        """\
        Upload text to text store

        Args:
            request: UploadRequest

        Returns:
            UploadResponse with the URL to pasted text page
        """
        raise Exception("Not Implemented")


class Pastery(BaseTextStore):

    api_url = API_URL

    def __init__(self, api_key=None, timeout=DEFAULT_TIMEOUT):
        self.api_key = api_key
        self.timeout = timeout

    def new_paste(self, request: UploadRequest) -> UploadResponse:
        logger = get_logger(__name__)

        if self.api_key and not request.api_key:
            request = request._replace(api_key=self.api_key)
        if not request.api_key:
            raise ConfigError("missing api_key")

        url = build_url(request, self.api_url)
        logger.debug("URL+QPs: {}".format(redact_url(url)))

        try:
            with requests.post(
                url,
                data=request.content,
                headers=build_headers(request),
                timeout=self.timeout,
            ) as r:
                body = r.content
                status = r.status_code
        except requests.exceptions.Timeout as e:
            raise TransportError("Timeout uploading to Pastery") from e
        except requests.exceptions.RequestException as e:
            raise TransportError(
                "Error sending request: {}".format(e)) from e

        logger.debug("Pastery replied {} with {} bytes".format(
            status, len(body)))
        return parse_response(body)


def upload(request: UploadRequest, timeout=DEFAULT_TIMEOUT) -> UploadResponse:
    return Pastery(timeout=timeout).new_paste(request)


# vim: ts=4 sw=4 sts=4 expandtab
