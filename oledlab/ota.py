"""Over-the-air firmware updates driven by a JSON manifest of releases."""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from typing import Any, BinaryIO, Callable, Optional, Protocol, Union

DEVICE_TYPE = "ourESP"
CURRENT_VERSION = 1.0
BUFFER_SIZE = 512
UPDATE_TOPIC = "esp32/update"
DEFAULT_TIMEOUT = 10.0

log = logging.getLogger(__name__)


class OtaError(Exception):
    """Base class for update failures."""


class DownloadError(OtaError):
    """A manifest or firmware image could not be fetched."""


class FirmwareError(OtaError):
    """A firmware image arrived incomplete."""


class UpdateFormatError(OtaError, ValueError):
    """The update manifest is not valid JSON."""


class _Sink(Protocol):
    def write(self, data: bytes) -> Any: ...


def _fetch(url: str, timeout: float):
    try:
        response = urllib.request.urlopen(url, timeout=timeout)
    except urllib.error.HTTPError as exc:
        raise DownloadError(f"GET {url} failed with status {exc.code}") from exc
    except (urllib.error.URLError, OSError) as exc:
        raise DownloadError(f"GET {url} failed: {exc}") from exc
    if response.status != 200:
        response.close()
        raise DownloadError(f"GET {url} returned status {response.status}")
    return response


def download_json(url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Fetch the manifest at ``url`` and return its body as text."""
    log.info("HTTP GET %s", url)
    with _fetch(url, timeout) as response:
        charset = response.headers.get_content_charset() or "utf-8"
        return response.read().decode(charset)


def find_update(
    document: Union[str, bytes, list],
    device_type: str = DEVICE_TYPE,
    current_version: float = CURRENT_VERSION,
) -> Optional[str]:
    """Link of the first release for ``device_type`` newer than ``current_version``.

    ``document`` is the manifest text or an already parsed list of releases.
    Returns ``None`` when no newer release is listed.
    """
    if isinstance(document, (str, bytes)):
        try:
            releases = json.loads(document)
        except ValueError as exc:
            raise UpdateFormatError(f"manifest is not valid JSON: {exc}") from exc
    else:
        releases = document
    if not isinstance(releases, list):
        return None
    for item in releases:
        if not isinstance(item, dict):
            continue
        version = item.get("version")
        if isinstance(version, bool) or not isinstance(version, (int, float)):
            version = 0.0
        if item.get("deviceType") == device_type and version > current_version:
            log.info(
                "Update found - current version %f, new version %f",
                current_version,
                version,
            )
            link = item.get("link")
            return link if isinstance(link, str) else None
    return None


def write_firmware(
    stream: BinaryIO,
    sink: _Sink,
    total_length: int = -1,
    buffer_size: int = BUFFER_SIZE,
) -> int:
    """Copy a firmware image from ``stream`` to ``sink`` in ``buffer_size`` blocks.

    With ``total_length`` of -1 the image runs to the end of the stream;
    otherwise exactly ``total_length`` bytes are expected. Returns the
    number of bytes written.
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer size must be positive, got {buffer_size}")
    if total_length < -1:
        raise ValueError(f"invalid firmware length {total_length}")
    written = 0
    while total_length == -1 or written < total_length:
        size = buffer_size if total_length == -1 else min(buffer_size, total_length - written)
        chunk = stream.read(size)
        if not chunk:
            if total_length == -1:
                break
            raise FirmwareError(
                f"firmware stream ended after {written} of {total_length} bytes"
            )
        sink.write(chunk)
        written += len(chunk)
    if total_length != -1:
        log.info("Update success, total size: %d", written)
    return written


def run_update(
    json_url: str,
    device_type: str = DEVICE_TYPE,
    current_version: float = CURRENT_VERSION,
    sink: Optional[_Sink] = None,
) -> Optional[str]:
    """Check the manifest and stream a newer firmware into ``sink``.

    Returns the link of the installed firmware, or ``None`` when no update
    is available. Without a sink the update is only looked up.
    """
    link = find_update(
        download_json(json_url, DEFAULT_TIMEOUT), device_type, current_version
    )
    if link is None:
        log.info("No update available")
        return None
    if sink is None:
        return link
    with _fetch(link, DEFAULT_TIMEOUT) as response:
        header = response.headers.get("Content-Length")
        length = int(header) if header is not None and header.isdigit() else -1
        write_firmware(response, sink, length, BUFFER_SIZE)
    return link


def handle_message(
    topic: str,
    payload: Union[bytes, str],
    expected_topic: str = UPDATE_TOPIC,
    on_update: Optional[Callable[[str], Any]] = None,
) -> bool:
    """Pass the manifest URL in ``payload`` to ``on_update`` if ``topic`` matches.

    Returns whether the message was on the update topic.
    """
    message = payload.decode("utf-8") if isinstance(payload, bytes) else payload
    log.info("Message on %s: %s", topic, message)
    if topic != expected_topic:
        return False
    if on_update is not None:
        on_update(message)
    return True