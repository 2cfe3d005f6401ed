import logging
from dataclasses import dataclass, field

from .config import (
    MAX_HTTP_MAJOR_VERSION,
    MAX_HTTP_MINOR_VERSION,
    MAX_STATUS_CODE,
    REASON_PHRASE_FORBIDDEN_CHARS,
    RESPONSE_PROTECTED_HEADERS,
)
from .errors import InvalidArgumentError
from .headers import HeaderCollection
from .http_protocol import HttpVersion, KnownStatusCode, StatusLine, reason_phrase_for


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResponseMessage:
    """Start-line and headers of an HTTP/1.x response.

    The start-line fields are validated here and fixed for the life of the
    value. ``headers`` starts empty with no protected keys and stays mutable.
    """
    http_major_version: int
    http_minor_version: int
    status_code: int
    reason_phrase: str
    headers: HeaderCollection = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.http_major_version < 0 or self.http_minor_version < 0:
            raise InvalidArgumentError("http version", "version numbers cannot be negative")
        if self.http_major_version > MAX_HTTP_MAJOR_VERSION or (
            self.http_major_version == MAX_HTTP_MAJOR_VERSION
            and self.http_minor_version > MAX_HTTP_MINOR_VERSION
        ):
            raise InvalidArgumentError(
                "http version",
                f"cannot be higher than HTTP/{MAX_HTTP_MAJOR_VERSION}.{MAX_HTTP_MINOR_VERSION}",
            )

        # see RFC 2616, section 6.1.1
        if not 0 <= self.status_code <= MAX_STATUS_CODE:
            raise InvalidArgumentError("status code", f"must be between 0 and {MAX_STATUS_CODE}")
        if any(ch in REASON_PHRASE_FORBIDDEN_CHARS for ch in self.reason_phrase):
            raise InvalidArgumentError("reason phrase", "cannot contain line terminator characters")

        object.__setattr__(self, "headers", HeaderCollection(RESPONSE_PROTECTED_HEADERS))
        logger.debug("Built response %s %d %s", self.http_version, self.status_code, self.reason_phrase)

    @classmethod
    def from_status(cls, http_major_version: int, http_minor_version: int, status: KnownStatusCode) -> "ResponseMessage":
        reason_phrase = reason_phrase_for(status)
        if reason_phrase is None:
            raise InvalidArgumentError("status code enum", f"no reason phrase for {status!r}")
        return cls(http_major_version, http_minor_version, int(status), reason_phrase)

    @property
    def http_version(self) -> HttpVersion:
        return HttpVersion(self.http_major_version, self.http_minor_version)

    @property
    def status(self) -> StatusLine:
        return StatusLine(self.status_code, self.reason_phrase)
