"""Load SVG content from disk or a URL, and persist converted drawables."""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from svg2vector.config import settings

logger = logging.getLogger(__name__)


class SourceError(Exception):
    """SVG content could not be fetched or the result could not be written."""


def is_remote(location: str) -> bool:
    return location.startswith("http://") or location.startswith("https://")


def confine_path(location: str | Path, root: str | Path) -> Path:
    """Resolve ``location`` against ``root`` and refuse anything that escapes it.

    Relative locations are taken relative to ``root``. Symlinks are resolved
    before the check.
    """
    base = Path(root).resolve()
    path = (base / location).resolve()
    if not path.is_relative_to(base):
        raise SourceError(f"{location} is outside {base}")
    return path


def fetch_svg_content(
    location: str,
    client: httpx.Client | None = None,
    timeout: float | None = None,
    max_bytes: int | None = None,
) -> str:
    """Return the SVG text at ``location`` (local path or http(s) URL)."""
    max_bytes = max_bytes if max_bytes is not None else settings.max_svg_bytes

    if is_remote(location):
        content = _fetch_remote(location, client, timeout, max_bytes)
    else:
        path = Path(location)
        try:
            if path.stat().st_size > max_bytes:
                raise SourceError(f"{location} exceeds {max_bytes} bytes")
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise SourceError(f"Cannot read {location}: {e}") from e
        logger.info("Read %d chars from %s", len(content), location)

    if len(content.encode("utf-8")) > max_bytes:
        raise SourceError(f"{location} exceeds {max_bytes} bytes")
    return content


def _fetch_remote(url: str, client: httpx.Client | None, timeout: float | None, max_bytes: int) -> str:
    timeout = timeout if timeout is not None else settings.fetch_timeout_seconds
    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=timeout, follow_redirects=True)
    try:
        with client.stream("GET", url) as response:
            response.raise_for_status()
            declared = response.headers.get("Content-Length", "")
            if declared.isdigit() and int(declared) > max_bytes:
                raise SourceError(f"{url} exceeds {max_bytes} bytes")

            body = bytearray()
            for chunk in response.iter_bytes():
                body.extend(chunk)
                if len(body) > max_bytes:
                    raise SourceError(f"{url} exceeds {max_bytes} bytes")
            text = body.decode(response.encoding or "utf-8", errors="replace")
            status = response.status_code
    except httpx.HTTPError as e:
        raise SourceError(f"Cannot fetch {url}: {e}") from e
    finally:
        if owns_client:
            client.close()

    logger.info("Fetched %d chars from %s (HTTP %d)", len(text), url, status)
    return text


def write_vector_drawable_file(output_path: str | Path, xml: str) -> Path:
    """Write XML to ``output_path``, creating parent directories."""
    path = Path(output_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(xml, encoding="utf-8")
    except OSError as e:
        raise SourceError(f"Cannot write {path}: {e}") from e
    logger.info("Wrote %d chars to %s", len(xml), path)
    return path.resolve()
