import pytest

from httpc.response import Response


def test_default_response_serializes_to_status_line_only():
    assert Response().serialize() == b"HTTP/1.1 200\n\n"


def test_status_code_is_written():
    response = Response()
    response.status_code = 404
    assert response.serialize().startswith(b"HTTP/1.1 404\n")


def test_status_code_keeps_last_three_digits():
    response = Response(status_code=1404)
    assert response.serialize().startswith(b"HTTP/1.1 404\n")


def test_body_follows_blank_line():
    response = Response()
    response.set_body(b"hello")
    assert response.serialize() == b"HTTP/1.1 200\n\nhello"


def test_set_body_copies():
    data = bytearray(b"abc")
    response = Response()
    response.set_body(data)
    data[0] = ord("z")
    assert response.body == b"abc"


def test_header_format():
    response = Response()
    response.set_header("content-type", "text/html")
    assert response.serialize() == b"HTTP/1.1 200\ncontent-type: text/html\r\n\n"


def test_later_headers_come_first():
    response = Response()
    response.set_header("a", "1")
    response.set_header("b", "2")
    raw = response.serialize()
    assert raw.index(b"b: 2\r\n") < raw.index(b"a: 1\r\n")


def test_body_from_file(tmp_path):
    path = tmp_path / "page.html"
    path.write_bytes(b"<p>hi</p>")
    response = Response()
    response.set_body_from_file(path, "text/html")
    assert response.body == b"<p>hi</p>"
    assert ("content-type", "text/html") in response.headers
    assert response.serialize().endswith(b"\n\n<p>hi</p>")


def test_body_from_missing_file_raises(tmp_path):
    response = Response()
    with pytest.raises(FileNotFoundError):
        response.set_body_from_file(tmp_path / "missing.html", "text/html")
    assert response.body is None
    assert response.headers == []