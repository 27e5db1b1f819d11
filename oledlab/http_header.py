"""Plain-socket HTTP GET with the header checks used before reading a body."""

from __future__ import annotations

import logging
import re
import socket
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

DEFAULT_PORT = 80
DEFAULT_TIMEOUT = 5.0
BINARY_CONTENT_TYPE = "application/octet-stream"

_STATUS_PREFIX = "HTTP/1.1"
_LENGTH_PREFIX = "Content-Length: "
_TYPE_PREFIX = "Content-Type: "
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

log = logging.getLogger(__name__)


@dataclass
class HeaderInfo:
    """What was learned from a response header, and whether to read the body."""

    accepted: bool = True
    status: str = ""
    content_length: int = 0
    content_type: str = ""


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def build_request(host: str, path: str) -> str:
    """The GET request sent for ``path`` on ``host``."""
    return (
        f"GET {path} HTTP/1.1\r\n"
        f"Host: {host}\r\n"
        "Cache-Control: no-cache\r\n"
        "Connection: close\r\n\r\n"
    )


def parse_header(lines: Iterable[str]) -> HeaderInfo:
    """Read header lines up to the first blank one.

    The response is rejected when the status line lacks ``200`` or the
    content type is binary. When ``lines`` is an iterator, it is left
    positioned after the last header line consumed.
    """
    info = HeaderInfo()
    for raw in lines:
        line = raw.strip()
        log.debug("%s", line)
        if not line:
            break
        if line.startswith(_STATUS_PREFIX):
            info.status = line
            if "200" not in line:
                info.accepted = False
                return info
        if line.startswith(_LENGTH_PREFIX):
            info.content_length = _leading_int(line[len(_LENGTH_PREFIX):])
        if line.startswith(_TYPE_PREFIX):
            info.content_type = line[len(_TYPE_PREFIX):]
            if info.content_type == BINARY_CONTENT_TYPE:
                info.accepted = False
                return info
    return info


def download_file(
    host: str,
    path: str,
    port: int = DEFAULT_PORT,
    timeout: float = DEFAULT_TIMEOUT,
) -> Optional[str]:
    """Fetch ``path`` from ``host`` and return the body text.

    Returns ``None`` when the header is rejected. Raises ``TimeoutError``
    when the server sends nothing within ``timeout`` seconds.
    """
    log.info("Attempting connection")
    with socket.create_connection((host, port), timeout=timeout) as sock:
        log.info("Connected to host")
        sock.sendall(build_request(host, path).encode("ascii"))
        try:
            first = sock.recv(4096)
        except TimeoutError as exc:
            raise TimeoutError(f"no response from {host}:{port}") from exc
        if not first:
            raise ConnectionError(f"{host}:{port} closed the connection without a response")
        chunks = [first]
        while True:
            try:
                data = sock.recv(4096)
            except TimeoutError:
                break
            if not data:
                break
            chunks.append(data)

    lines: Iterator[str] = iter(b"".join(chunks).decode("latin-1").splitlines(keepends=True))
    info = parse_header(lines)
    if not info.accepted:
        return None
    return "".join(lines).replace("\r", "")