import socket
import threading

import pytest

from oledlab.http_header import HeaderInfo, build_request, download_file, parse_header


def test_build_request_format():
    assert build_request("host.example.com", "/ota.json") == (
        "GET /ota.json HTTP/1.1\r\n"
        "Host: host.example.com\r\n"
        "Cache-Control: no-cache\r\n"
        "Connection: close\r\n\r\n"
    )


def test_parse_header_ok_with_length():
    info = parse_header(["HTTP/1.1 200 OK\r\n", "Content-Length: 42\r\n", "\r\n"])
    assert info.accepted is True
    assert info.content_length == 42
    assert info.status == "HTTP/1.1 200 OK"


def test_parse_header_rejects_non_200():
    info = parse_header(["HTTP/1.1 404 Not Found", "Content-Length: 9"])
    assert info.accepted is False
    assert info.content_length == 0


def test_parse_header_rejects_binary():
    info = parse_header(["HTTP/1.1 200 OK", "Content-Type: application/octet-stream"])
    assert info.accepted is False
    assert info.content_type == "application/octet-stream"


def test_parse_header_stops_at_blank_line():
    lines = iter(["HTTP/1.1 200 OK", "", "Content-Type: application/octet-stream", "rest"])
    info = parse_header(lines)
    assert info.accepted is True
    assert info.content_type == ""
    assert next(lines) == "Content-Type: application/octet-stream"


def test_parse_header_bad_length_is_zero():
    info = parse_header(["Content-Length: abc"])
    assert info == HeaderInfo(accepted=True, status="", content_length=0, content_type="")


def _serve_once(response: bytes, hold: threading.Event | None = None):
    server = socket.socket()
    server.bind(("127.0.0.1", 0))
    server.listen(1)
    received = []

    def run():
        conn, _ = server.accept()
        with conn:
            received.append(conn.recv(4096))
            if hold is not None:
                hold.wait(5)
            else:
                conn.sendall(response)
        server.close()

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return server.getsockname()[1], received, thread


def test_download_file_returns_body():
    response = (
        b"HTTP/1.1 200 OK\r\nContent-Type: application/json\r\n"
        b"Content-Length: 7\r\n\r\n[1,\r\n2]"
    )
    port, received, thread = _serve_once(response)
    body = download_file("127.0.0.1", "/ota.json", port, timeout=2.0)
    thread.join(2)
    assert body == "[1,\n2]"
    assert received[0].decode().startswith("GET /ota.json HTTP/1.1\r\n")


def test_download_file_rejected_header():
    port, _, thread = _serve_once(b"HTTP/1.1 500 Error\r\n\r\nboom")
    assert download_file("127.0.0.1", "/x", port, timeout=2.0) is None
    thread.join(2)


def test_download_file_timeout():
    hold = threading.Event()
    port, _, thread = _serve_once(b"", hold)
    try:
        with pytest.raises(TimeoutError):
            download_file("127.0.0.1", "/x", port, timeout=0.2)
    finally:
        hold.set()
        thread.join(2)