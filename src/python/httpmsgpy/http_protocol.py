from enum import IntEnum
from typing import NamedTuple


class HttpVersion(NamedTuple):
    major: int
    minor: int

    def __str__(self) -> str:
        return f"HTTP/{self.major}.{self.minor}"


class StatusLine(NamedTuple):
    code: int
    reason_phrase: str


# --- Status Codes ---
class KnownStatusCode(IntEnum):
    CONTINUE = 100
    SWITCHING_PROTOCOLS = 101

    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NON_AUTHORITATIVE_INFORMATION = 203
    NO_CONTENT = 204
    RESET_CONTENT = 205
    PARTIAL_CONTENT = 206

    MULTIPLE_CHOICES = 300
    MOVED_PERMANENTLY = 301
    FOUND = 302
    SEE_OTHER = 303
    NOT_MODIFIED = 304
    USE_PROXY = 305
    # Published value is 306, not 307. Callers depend on it; do not renumber.
    TEMPORARY_REDIRECT = 306

    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    PAYMENT_REQUIRED = 402
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    NOT_ACCEPTABLE = 406
    PROXY_AUTHENTICATION_REQUIRED = 407
    REQUEST_TIMEOUT = 408
    CONFLICT = 409
    GONE = 410
    LENGTH_REQUIRED = 411
    PRECONDITION_FAILED = 412
    REQUEST_ENTITY_TOO_LARGE = 413
    REQUEST_URI_TOO_LARGE = 414
    UNSUPPORTED_MEDIA_TYPE = 415
    REQUESTED_RANGE_NOT_SATISFIABLE = 416
    EXPECTATION_FAILED = 417

    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504
    HTTP_VERSION_NOT_SUPPORTED = 505


# Reason phrases as worded in RFC 2616, section 6.1.1.
_REASON_PHRASES: dict[KnownStatusCode, str] = {
    KnownStatusCode.CONTINUE: "Continue",
    KnownStatusCode.SWITCHING_PROTOCOLS: "Switching Protocols",
    KnownStatusCode.OK: "OK",
    KnownStatusCode.CREATED: "Created",
    KnownStatusCode.ACCEPTED: "Accepted",
    KnownStatusCode.NON_AUTHORITATIVE_INFORMATION: "Non-Authoritative Information",
    KnownStatusCode.NO_CONTENT: "No Content",
    KnownStatusCode.RESET_CONTENT: "Reset Content",
    KnownStatusCode.PARTIAL_CONTENT: "Partial Content",
    KnownStatusCode.MULTIPLE_CHOICES: "Multiple Choices",
    KnownStatusCode.MOVED_PERMANENTLY: "Moved Permanently",
    KnownStatusCode.FOUND: "Found",
    KnownStatusCode.SEE_OTHER: "See Other",
    KnownStatusCode.NOT_MODIFIED: "Not Modified",
    KnownStatusCode.USE_PROXY: "Use Proxy",
    KnownStatusCode.TEMPORARY_REDIRECT: "Temporary Redirect",
    KnownStatusCode.BAD_REQUEST: "Bad Request",
    KnownStatusCode.UNAUTHORIZED: "Unauthorized",
    KnownStatusCode.PAYMENT_REQUIRED: "Payment Required",
    KnownStatusCode.FORBIDDEN: "Forbidden",
    KnownStatusCode.NOT_FOUND: "Not Found",
    KnownStatusCode.METHOD_NOT_ALLOWED: "Method Not Allowed",
    KnownStatusCode.NOT_ACCEPTABLE: "Not Acceptable",
    KnownStatusCode.PROXY_AUTHENTICATION_REQUIRED: "Proxy Authentication Required",
    KnownStatusCode.REQUEST_TIMEOUT: "Request Time-out",
    KnownStatusCode.CONFLICT: "Conflict",
    KnownStatusCode.GONE: "Gone",
    KnownStatusCode.LENGTH_REQUIRED: "Length Required",
    KnownStatusCode.PRECONDITION_FAILED: "Precondition Failed",
    KnownStatusCode.REQUEST_ENTITY_TOO_LARGE: "Request Entity Too Large",
    KnownStatusCode.REQUEST_URI_TOO_LARGE: "Request-URI Too Large",
    KnownStatusCode.UNSUPPORTED_MEDIA_TYPE: "Unsupported Media Type",
    KnownStatusCode.REQUESTED_RANGE_NOT_SATISFIABLE: "Requested range not satisfiable",
    KnownStatusCode.EXPECTATION_FAILED: "Expectation Failed",
    KnownStatusCode.INTERNAL_SERVER_ERROR: "Internal Server Error",
    KnownStatusCode.NOT_IMPLEMENTED: "Not Implemented",
    KnownStatusCode.BAD_GATEWAY: "Bad Gateway",
    KnownStatusCode.SERVICE_UNAVAILABLE: "Service Unavailable",
    KnownStatusCode.GATEWAY_TIMEOUT: "Gateway Time-out",
    KnownStatusCode.HTTP_VERSION_NOT_SUPPORTED: "HTTP Version not supported",
}


def reason_phrase_for(status: KnownStatusCode) -> str | None:
    """Returns the canonical reason phrase for a known status, or None if unmapped."""
    if not isinstance(status, KnownStatusCode):
        return None
    return _REASON_PHRASES.get(status)
