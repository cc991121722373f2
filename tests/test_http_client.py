import pytest

from ann_helper.core import http_client as hc
from conftest import DummyResponse


def test_http_get_success(monkeypatch):
    calls = {"n": 0}

    def fake_request(method, url, timeout=None, headers=None, **kw):
        calls["n"] += 1
        assert method == "GET"
        assert url == "https://example.com"
        assert headers["User-Agent"] == hc.UA
        assert timeout == hc.DEFAULT_TIMEOUT
        return DummyResponse(200, "<ann/>")

    monkeypatch.setattr(hc.requests, "request", fake_request)

    r = hc.http_get("https://example.com")
    assert r.text == "<ann/>"
    assert calls["n"] == 1


def test_http_get_passes_timeout_and_headers(monkeypatch):
    seen = {}

    def fake_request(method, url, timeout=None, headers=None, **kw):
        seen.update(timeout=timeout, headers=headers)
        return DummyResponse(200)

    monkeypatch.setattr(hc.requests, "request", fake_request)

    hc.http_get("https://example.com", timeout=3, headers={"User-Agent": "custom/1.0"})
    assert seen["timeout"] == 3
    assert seen["headers"]["User-Agent"] == "custom/1.0"


def test_http_5xx_raises_without_retry(monkeypatch):
    calls = {"n": 0}

    def fake_request(method, url, timeout=None, headers=None, **kw):
        calls["n"] += 1
        return DummyResponse(503)

    monkeypatch.setattr(hc.requests, "request", fake_request)

    with pytest.raises(hc.requests.HTTPError) as exc_info:
        hc.http_get("https://busy.example")
    assert exc_info.value.response.status_code == 503
    assert calls["n"] == 1, "no automatic retries"


def test_http_request_exception_propagates(monkeypatch):
    calls = {"n": 0}

    class Boom(hc.requests.RequestException):
        pass

    def fake_request(method, url, timeout=None, headers=None, **kw):
        calls["n"] += 1
        raise Boom("network down")

    monkeypatch.setattr(hc.requests, "request", fake_request)

    with pytest.raises(Boom):
        hc.http_get("https://down.example")
    assert calls["n"] == 1
