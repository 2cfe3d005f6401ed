"""Grammar checks for request start-line fields (RFC 2616, sections 3.2, 5.1 and 14.23)."""
import re
from enum import Enum
from urllib.parse import SplitResult, urlsplit

from requests.utils import requote_uri

from .config import ALLOWED_TARGET_SCHEMES, DEFAULT_PORTS, MAX_PORT


_TOKEN_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
# Dotted labels are accepted on purpose so ordinary domain names validate;
# the bare letters-digits-hyphens grammar rejected "example.com".
_HOSTNAME_RE = re.compile(r"[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*")
_PORT_RE = re.compile(r"[0-9]{1,5}")
_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*:")
# Unreserved and reserved characters plus well-formed percent escapes. '#' is
# left out: a Request-URI never carries a fragment.
_URI_CHARS_RE = re.compile(r"(?:[A-Za-z0-9\-._~:/?\[\]@!$&'()*+,;=]|%[0-9A-Fa-f]{2})*")


class RequestTargetForm(Enum):
    ASTERISK = "asterisk"
    ABSOLUTE_URI = "absolute-uri"
    ABSOLUTE_PATH = "absolute-path"


def is_token(value: str) -> bool:
    return bool(_TOKEN_RE.fullmatch(value))


def is_well_formed_host(host: str) -> bool:
    """Checks ``hostname`` or ``hostname:port``.

    The hostname is letters, digits and hyphens, optionally split into dotted
    labels, and may not start with '-' or '.'. The port must fit in 16 bits.
    """
    if not host or host[0] in "-:.":
        return False

    hostname, _, port = host.partition(":")
    if not _HOSTNAME_RE.fullmatch(hostname):
        return False

    if ":" in host:
        if not _PORT_RE.fullmatch(port) or int(port) > MAX_PORT:
            return False

    return True


def split_host(host: str) -> tuple[str, int | None]:
    """Splits a well-formed host into its hostname and explicit port (or None)."""
    hostname, separator, port = host.partition(":")
    return hostname, int(port) if separator else None


def _split_absolute_uri(value: str) -> SplitResult | None:
    if not _SCHEME_RE.match(value) or not _URI_CHARS_RE.fullmatch(value):
        return None

    parts = urlsplit(value)
    if parts.scheme.lower() not in ALLOWED_TARGET_SCHEMES or not parts.hostname:
        return None
    try:
        parts.port
    except ValueError:
        return None
    return parts


def classify_request_target(target: str) -> RequestTargetForm | None:
    """Returns the Request-URI form of ``target``, or None if it is unsupported.

    The authority form used by CONNECT is not supported.
    """
    if target == "*":
        return RequestTargetForm.ASTERISK
    if _split_absolute_uri(target) is not None:
        return RequestTargetForm.ABSOLUTE_URI
    if target.startswith("/") and not target.startswith("//") and _URI_CHARS_RE.fullmatch(target):
        return RequestTargetForm.ABSOLUTE_PATH
    return None


def effective_port(scheme: str, explicit_port: int | None) -> int:
    if explicit_port is not None:
        return explicit_port
    return DEFAULT_PORTS[scheme.lower()]


def target_matches_host(target: str, host: str) -> bool:
    """For an absolute-URI target, checks that its host and effective port equal ``host``'s."""
    parts = _split_absolute_uri(target)
    if parts is None:
        return False

    hostname, port = split_host(host)
    if hostname.casefold() != parts.hostname.casefold():
        return False
    return effective_port(parts.scheme, port) == effective_port(parts.scheme, parts.port)


def split_absolute_uri(value: str) -> tuple[str, str] | None:
    """Derives ``(host, request_target)`` from an absolute http(s) URI, or None if malformed.

    The host keeps a ``:port`` suffix only when the URI states one explicitly.
    Characters not allowed in a URI are percent-escaped and any fragment is
    dropped before the grammar check.
    """
    without_fragment, _, _ = requote_uri(value).partition("#")
    parts = _split_absolute_uri(without_fragment)
    if parts is None:
        return None

    host = parts.hostname
    if parts.port is not None:
        host = f"{host}:{parts.port}"

    request_target = parts.path or "/"
    if parts.query:
        request_target = f"{request_target}?{parts.query}"
    return host, request_target
