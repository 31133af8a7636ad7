"""Tests for SVG content retrieval and drawable persistence."""

from __future__ import annotations

import httpx
import pytest

from tests.conftest import SIMPLE_PATH_SVG

from svg2vector.svg.source import (
    SourceError,
    confine_path,
    fetch_svg_content,
    is_remote,
    write_vector_drawable_file,
)


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_is_remote():
    assert is_remote("https://example.com/a.svg")
    assert is_remote("http://example.com/a.svg")
    assert not is_remote("/icons/a.svg")
    assert not is_remote("ftp://example.com/a.svg")


def test_fetch_local_file(tmp_path):
    svg_file = tmp_path / "icon.svg"
    svg_file.write_text(SIMPLE_PATH_SVG, encoding="utf-8")
    assert fetch_svg_content(str(svg_file)) == SIMPLE_PATH_SVG


def test_fetch_missing_local_file(tmp_path):
    with pytest.raises(SourceError):
        fetch_svg_content(str(tmp_path / "missing.svg"))


def test_fetch_local_file_too_large(tmp_path):
    svg_file = tmp_path / "big.svg"
    svg_file.write_text(SIMPLE_PATH_SVG, encoding="utf-8")
    with pytest.raises(SourceError, match="exceeds"):
        fetch_svg_content(str(svg_file), max_bytes=10)


def test_fetch_remote():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url == "https://cdn.example.com/icon.svg"
        return httpx.Response(200, text=SIMPLE_PATH_SVG)

    with _client(handler) as client:
        assert fetch_svg_content("https://cdn.example.com/icon.svg", client=client) == SIMPLE_PATH_SVG


def test_fetch_remote_http_error():
    with _client(lambda request: httpx.Response(404)) as client:
        with pytest.raises(SourceError, match="Cannot fetch"):
            fetch_svg_content("https://cdn.example.com/missing.svg", client=client)


def test_fetch_remote_too_large():
    with _client(lambda request: httpx.Response(200, text=SIMPLE_PATH_SVG)) as client:
        with pytest.raises(SourceError, match="exceeds"):
            fetch_svg_content("https://cdn.example.com/icon.svg", client=client, max_bytes=10)


def test_write_creates_parent_directories(tmp_path):
    target = tmp_path / "res" / "drawable" / "ic_test.xml"
    written = write_vector_drawable_file(target, "<vector/>\n")
    assert written == target.resolve()
    assert target.read_text(encoding="utf-8") == "<vector/>\n"


def test_fetch_remote_rejects_declared_oversize_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"x" * 2_000_000)

    with _client(handler) as client:
        with pytest.raises(SourceError, match="exceeds 100 bytes"):
            fetch_svg_content("https://cdn.example.com/huge.svg", client=client, max_bytes=100)


def test_fetch_remote_stops_reading_oversize_stream():
    sent = []

    def body():
        for _ in range(1000):
            sent.append(1)
            yield b"x" * 64

    def handler(request: httpx.Request) -> httpx.Response:
        # Iterator content goes out chunked, without Content-Length
        return httpx.Response(200, content=body())

    with _client(handler) as client:
        with pytest.raises(SourceError, match="exceeds 100 bytes"):
            fetch_svg_content("https://cdn.example.com/huge.svg", client=client, max_bytes=100)
    assert len(sent) < 10


def test_confine_path(tmp_path):
    assert confine_path("icons/a.svg", tmp_path) == (tmp_path / "icons" / "a.svg").resolve()
    assert confine_path(tmp_path / "a.svg", tmp_path) == (tmp_path / "a.svg").resolve()
    for escaping in ("../a.svg", "/etc/passwd", "icons/../../a.svg"):
        with pytest.raises(SourceError, match="outside"):
            confine_path(escaping, tmp_path)


def test_confine_path_follows_symlinks(tmp_path):
    root = tmp_path / "root"
    root.mkdir()
    (root / "link").symlink_to(tmp_path)
    with pytest.raises(SourceError, match="outside"):
        confine_path("link/secret.svg", root)
