from __future__ import annotations

import http.client
import io
import socket
import urllib.error
from email.message import Message
from urllib.parse import parse_qsl, urlsplit

import pytest

from fontproxy import upstream
from fontproxy.config import ProxySettings
from fontproxy.exceptions import UpstreamError
from fontproxy.families import parse_families
from fontproxy.upstream import build_upstream_url, fetch_css


class _FakeResponse:
    def __init__(self, body: bytes, status: int = 200, content_type: str = "text/css; charset=utf-8"):
        self._body = body
        self.status = status
        self.headers = Message()
        self.headers["Content-Type"] = content_type

    def read(self) -> bytes:
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


def test_build_upstream_url_replaces_families():
    families = parse_families(["Roboto:wght@400:rename@Body", "Lora"])
    url = build_upstream_url(
        [("family", "Roboto:wght@400:rename@Body"), ("display", "swap"), ("family", "Lora")],
        families,
        ProxySettings(),
    )
    parts = urlsplit(url)
    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == "https://fonts.googleapis.com/css2"
    assert parse_qsl(parts.query) == [
        ("display", "swap"),
        ("family", "Roboto:wght@400"),
        ("family", "Lora"),
    ]


def test_fetch_css_forwards_user_agent(monkeypatch):
    captured = {}

    def fake_urlopen(request, timeout):
        captured["agent"] = request.get_header("User-agent")
        captured["timeout"] = timeout
        return _FakeResponse(b"@font-face {}")

    monkeypatch.setattr(upstream.urllib.request, "urlopen", fake_urlopen)
    response = fetch_css("https://fonts.example/css2?family=Roboto", "Mozilla/5.0", 3.0)
    assert response.text == "@font-face {}"
    assert response.content_type == "text/css; charset=utf-8"
    assert captured == {"agent": "Mozilla/5.0", "timeout": 3.0}


def test_fetch_css_raises_on_http_error(monkeypatch):
    def fake_urlopen(request, timeout):
        headers = Message()
        headers["Content-Type"] = "text/html"
        raise urllib.error.HTTPError(request.full_url, 400, "Bad Request", headers, io.BytesIO(b"bad family"))

    monkeypatch.setattr(upstream.urllib.request, "urlopen", fake_urlopen)
    with pytest.raises(UpstreamError) as excinfo:
        fetch_css("https://fonts.example/css2?family=Nope", None, 3.0)
    assert excinfo.value.status_code == 400
    assert excinfo.value.body == b"bad family"
    assert excinfo.value.content_type == "text/html"


def test_fetch_css_raises_on_non_200_success(monkeypatch):
    monkeypatch.setattr(
        upstream.urllib.request, "urlopen", lambda request, timeout: _FakeResponse(b"", status=204)
    )
    with pytest.raises(UpstreamError) as excinfo:
        fetch_css("https://fonts.example/css2", None, 3.0)
    assert excinfo.value.status_code == 204


def test_fetch_css_reports_unreachable_upstream(monkeypatch):
    def fake_urlopen(request, timeout):
        raise urllib.error.URLError("connection refused")

    monkeypatch.setattr(upstream.urllib.request, "urlopen", fake_urlopen)
    with pytest.raises(UpstreamError) as excinfo:
        fetch_css("https://fonts.example/css2", None, 3.0)
    assert excinfo.value.status_code == 502


@pytest.mark.parametrize(
    "error",
    [
        socket.timeout("timed out"),
        http.client.RemoteDisconnected("Remote end closed connection without response"),
        http.client.IncompleteRead(b"@font-face {"),
    ],
)
def test_fetch_css_reports_broken_connection(monkeypatch, error):
    def fake_urlopen(request, timeout):
        raise error

    monkeypatch.setattr(upstream.urllib.request, "urlopen", fake_urlopen)
    with pytest.raises(UpstreamError) as excinfo:
        fetch_css("https://fonts.example/css2", None, 3.0)
    assert excinfo.value.status_code == 502
    assert excinfo.value.body.startswith(b"502 Bad Gateway")
