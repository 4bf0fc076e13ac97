import pytest

from sazparser.errors import FieldNotFoundError, InvalidArchiveError
from sazparser.fields import (
    extract_content_length,
    extract_method,
    extract_status,
    extract_url,
)


def test_extract_url():
    assert extract_url("GET /foo/bar HTTP/1.1\r\nHost: x\r\n") == "/foo/bar"


@pytest.mark.parametrize("text, expected", [
    ("POST /api/login?next=%2F HTTP/1.1\r\n", "/api/login?next=%2F"),
    ("CONNECT example.com:443 HTTP/1.1\r\nHost: example.com:443\r\n", "example.com:443"),
    ("GET http://example.com/index.html HTTP/1.1\r\n", "http://example.com/index.html"),
    ("OPTIONS * HTTP/1.1\r\n", "*"),
    ("\r\n\r\nDELETE /items/7 HTTP/1.1\r\n", "/items/7"),
])
def test_extract_url_methods(text, expected):
    assert extract_url(text) == expected


def test_extract_url_first_match_wins():
    text = "GET /first HTTP/1.1\r\n\r\nPUT /second HTTP/1.1\r\n"
    assert extract_url(text) == "/first"


@pytest.mark.parametrize("text", [
    "",
    "Host: example.com\r\n",
    "GET /foo HTTP/2\r\n",
    "FETCH /foo HTTP/1.1\r\n",
])
def test_extract_url_missing(text):
    with pytest.raises(FieldNotFoundError) as excinfo:
        extract_url(text, "raw/1_c.txt")
    assert excinfo.value.field == "request line"
    assert excinfo.value.path == "raw/1_c.txt"


def test_missing_field_is_an_invalid_archive():
    with pytest.raises(InvalidArchiveError):
        extract_url("nothing here")


def test_extract_method():
    assert extract_method("HEAD /x HTTP/1.1\r\n") == "HEAD"


@pytest.mark.parametrize("text, expected", [
    ("HTTP/1.1 200 OK\r\n", 200),
    ("HTTP/1.1 404 Not Found\r\nContent-Length: 0\r\n", 404),
    ("HTTP/1.0 302 Found\r\nLocation: /\r\n", 302),
    ("HTTP/2 204\r\n", 204),
    ("\r\nHTTP/1.1 503 Service Unavailable\r\n", 503),
])
def test_extract_status(text, expected):
    assert extract_status(text) == expected


def test_extract_status_missing():
    with pytest.raises(FieldNotFoundError):
        extract_status("Content-Length: 12\r\n\r\nhello world!")


def test_extract_status_does_not_cross_lines():
    with pytest.raises(FieldNotFoundError):
        extract_status("HTTP\r\nContent-Length: 123\r\n")


def test_extract_content_length():
    assert extract_content_length("HTTP/1.1 200 OK\r\nContent-Length: 1234\r\n\r\n") == 1234


def test_extract_content_length_header_order():
    text = (
        "HTTP/1.1 200 OK\r\n"
        "Content-Type: text/plain\r\n"
        "Content-Length: 1234\r\n"
        "Cache-Control: no-cache\r\n"
        "\r\n"
    )
    assert extract_content_length(text) == 1234


@pytest.mark.parametrize("text", [
    "HTTP/1.1 200 OK\r\nTransfer-Encoding: chunked\r\n\r\n",
    "HTTP/1.1 200 OK\r\ncontent-length: 5\r\n\r\n",
    "HTTP/1.1 200 OK\r\nX-Original-Content-Length: 5\r\n\r\n",
    "",
])
def test_extract_content_length_absent(text):
    assert extract_content_length(text) == 0


def test_extract_status_needs_ascii_digits():
    with pytest.raises(FieldNotFoundError):
        extract_status("HTTP/1.1 ٢٠٠ OK\r\n")


def test_extract_content_length_needs_ascii_digits():
    assert extract_content_length("HTTP/1.1 200 OK\r\nContent-Length: ٥\r\n") == 0
