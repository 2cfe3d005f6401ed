import logging
from dataclasses import dataclass, field

from .config import REQUEST_HTTP_MAJOR_VERSION, REQUEST_HTTP_MINOR_VERSION, REQUEST_PROTECTED_HEADERS
from .errors import InvalidArgumentError
from .headers import HeaderCollection
from .http_protocol import HttpVersion
from .validators import (
    RequestTargetForm,
    classify_request_target,
    is_token,
    is_well_formed_host,
    split_absolute_uri,
    target_matches_host,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestMessage:
    """Start-line and headers of an HTTP/1.1 request.

    ``request_target`` is '*', an absolute http(s) URI whose host and port
    agree with ``host``, or an absolute path (RFC 2616, section 5.1.2).
    ``headers`` always holds a protected ``Host`` entry equal to ``host``.
    """
    method: str
    host: str
    request_target: str
    headers: HeaderCollection = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if not is_token(self.method):
            raise InvalidArgumentError("method", "must be a non-empty token")
        if self.method != self.method.upper():
            logger.warning("Request method %r is not upper-case", self.method)

        if not is_well_formed_host(self.host):
            raise InvalidArgumentError("host", "not a valid hostname or hostname:port")

        form = classify_request_target(self.request_target)
        if form is None:
            raise InvalidArgumentError("request target", "must be '*', an absolute URI or an absolute path")
        if form is RequestTargetForm.ABSOLUTE_URI and not target_matches_host(self.request_target, self.host):
            raise InvalidArgumentError(
                "request target host/port mismatch",
                f"{self.request_target!r} does not address host {self.host!r}",
            )

        headers = HeaderCollection(REQUEST_PROTECTED_HEADERS)
        headers._set_without_protected_key_check("Host", self.host)
        object.__setattr__(self, "headers", headers)
        logger.debug("Built request %s %s (Host: %s)", self.method, self.request_target, self.host)

    @classmethod
    def from_uri(cls, method: str, absolute_uri: str) -> "RequestMessage":
        """Builds a request for ``absolute_uri``, addressing it by path and query."""
        derived = split_absolute_uri(absolute_uri)
        if derived is None:
            raise InvalidArgumentError("request target", f"{absolute_uri!r} is not an absolute http(s) URI")
        host, request_target = derived
        return cls(method, host, request_target)

    @property
    def http_version(self) -> HttpVersion:
        return HttpVersion(REQUEST_HTTP_MAJOR_VERSION, REQUEST_HTTP_MINOR_VERSION)
