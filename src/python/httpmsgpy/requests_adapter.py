"""Conversions between httpmsgpy messages and the ``requests`` library's objects."""
from typing import Mapping

from requests import PreparedRequest, Response
from requests.structures import CaseInsensitiveDict

from .config import MAX_HTTP_MAJOR_VERSION, MAX_HTTP_MINOR_VERSION
from .headers import HeaderCollection
from .request_message import RequestMessage
from .response_message import ResponseMessage


def _copy_headers(source: Mapping[str, str], target: HeaderCollection) -> None:
    for key, value in source.items():
        if target.is_protected(key):
            continue
        target.set(key, value).raise_for_error()


def request_message_from_prepared(prepared: PreparedRequest) -> RequestMessage:
    message = RequestMessage.from_uri(prepared.method, prepared.url)
    _copy_headers(prepared.headers, message.headers)
    return message


def response_message_from_response(response: Response) -> ResponseMessage:
    # urllib3 reports the version as 10 or 11; a detached Response has no raw.
    raw_version = getattr(response.raw, "version", None)
    if isinstance(raw_version, int) and raw_version > 0:
        major, minor = divmod(raw_version, 10)
    else:
        major, minor = MAX_HTTP_MAJOR_VERSION, MAX_HTTP_MINOR_VERSION

    message = ResponseMessage(major, minor, response.status_code, response.reason or "")
    _copy_headers(response.headers, message.headers)
    return message


def to_requests_headers(headers: HeaderCollection) -> CaseInsensitiveDict:
    return CaseInsensitiveDict(headers.items())
