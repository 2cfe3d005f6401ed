import dataclasses
import logging

import pytest

from httpmsgpy.errors import HeaderIsReadOnlyError, InvalidArgumentError
from httpmsgpy.headers import HeaderError
from httpmsgpy.http_protocol import HttpVersion
from httpmsgpy.request_message import RequestMessage


def test_request_from_absolute_uri():
    req = RequestMessage.from_uri("GET", "http://example.com/path?q=1")

    assert req.method == "GET"
    assert req.host == "example.com"
    assert req.request_target == "/path?q=1"
    assert req.headers.get("Host") == "example.com"
    assert req.http_version == HttpVersion(1, 1)


def test_request_from_absolute_uri_keeps_explicit_port():
    req = RequestMessage.from_uri("POST", "https://api.example.com:8443/v1/items")

    assert req.host == "api.example.com:8443"
    assert req.request_target == "/v1/items"
    assert req.headers["host"] == "api.example.com:8443"


def test_request_from_absolute_uri_defaults_path():
    assert RequestMessage.from_uri("GET", "http://example.com").request_target == "/"


@pytest.mark.parametrize("uri", ["/just/a/path", "ftp://example.com/file", "not a uri", "*"])
def test_request_from_unusable_uri(uri):
    with pytest.raises(InvalidArgumentError) as excinfo:
        RequestMessage.from_uri("GET", uri)
    assert excinfo.value.field == "request target"


@pytest.mark.parametrize("target", ["*", "/", "/index.html", "/search?q=a%20b", "http://localhost/x", "http://localhost:80/x"])
def test_request_with_supported_targets(target):
    req = RequestMessage("OPTIONS", "localhost", target)
    assert req.request_target == target
    assert req.headers.get("Host") == "localhost"


def test_request_with_matching_absolute_target_and_port():
    req = RequestMessage("GET", "example.com:8080", "http://example.com:8080/path")
    assert req.host == "example.com:8080"


@pytest.mark.parametrize("host", ["", "-bad", ":80", "bad_host", "host:70000", "host name"])
def test_request_with_malformed_host(host):
    with pytest.raises(InvalidArgumentError) as excinfo:
        RequestMessage("GET", host, "/")
    assert excinfo.value.field == "host"


@pytest.mark.parametrize("target", ["", "example.com:443", "relative/path", "ftp://example.com/", "/has space"])
def test_request_with_unsupported_target(target):
    with pytest.raises(InvalidArgumentError) as excinfo:
        RequestMessage("GET", "example.com", target)
    assert excinfo.value.field == "request target"


@pytest.mark.parametrize("host,target", [
    ("example.com", "http://other.com/path"),
    ("example.com", "http://example.com:8080/path"),
    ("example.com:8080", "http://example.com/path"),
    ("example.com", "https://example.com:80/"),
])
def test_request_with_host_port_mismatch(host, target):
    with pytest.raises(InvalidArgumentError) as excinfo:
        RequestMessage("GET", host, target)
    assert excinfo.value.field == "request target host/port mismatch"


def test_host_is_checked_before_target():
    with pytest.raises(InvalidArgumentError) as excinfo:
        RequestMessage("GET", "bad_host", "not-a-target")
    assert excinfo.value.field == "host"


@pytest.mark.parametrize("method", ["", "GET /", "G\r\nET"])
def test_request_with_invalid_method(method):
    with pytest.raises(InvalidArgumentError) as excinfo:
        RequestMessage(method, "example.com", "/")
    assert excinfo.value.field == "method"


def test_lower_case_method_is_accepted_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="httpmsgpy.request_message"):
        req = RequestMessage("get", "example.com", "/")

    assert req.method == "get"
    assert "not upper-case" in caplog.text


def test_host_header_is_protected():
    req = RequestMessage.from_uri("GET", "http://example.com/")

    assert req.headers.set("Host", "x").error is HeaderError.HEADER_IS_READ_ONLY
    assert req.headers.remove("Host").error is HeaderError.HEADER_IS_READ_ONLY
    assert req.headers.add("host", "x").error is HeaderError.HEADER_IS_READ_ONLY
    with pytest.raises(HeaderIsReadOnlyError):
        req.headers["HOST"] = "x"

    assert req.headers.get("Host") == "example.com"
    assert req.headers.protected_keys == frozenset({"Host"})


def test_other_headers_are_mutable():
    req = RequestMessage.from_uri("GET", "http://example.com/")

    assert req.headers.add("X-Custom", "a").is_ok
    assert req.headers.add("X-Custom", "b").error is HeaderError.DUPLICATE_KEY
    assert req.headers.set("X-Custom", "b").is_ok
    assert req.headers.get("x-custom") == "b"
    assert sorted(req.headers) == [("Host", "example.com"), ("X-Custom", "b")]


def test_start_line_is_immutable():
    req = RequestMessage.from_uri("GET", "http://example.com/")
    with pytest.raises(dataclasses.FrozenInstanceError):
        req.method = "POST"


def test_requests_compare_by_start_line():
    first = RequestMessage.from_uri("GET", "http://example.com/a")
    second = RequestMessage("GET", "example.com", "/a")
    first.headers.set("Accept", "*/*")

    assert first == second
    assert first.headers is not second.headers


def test_request_from_absolute_uri_drops_fragment():
    req = RequestMessage.from_uri("GET", "http://example.com/path?q=1#s")

    assert req.host == "example.com"
    assert req.request_target == "/path?q=1"


def test_request_from_absolute_uri_escapes_unsafe_characters():
    assert RequestMessage.from_uri("GET", "http://example.com/a b").request_target == "/a%20b"
