#!/usr/bin/env python3
"""Tests for session_manager.py (no live HTTP)."""

import pytest
import requests

from errors import FetchError
from session_manager import DEFAULT_TIMEOUT, SessionManager


class FakeResponse:
    def __init__(self, status_code=200, text='', json_data=None, json_error=False):
        self.status_code = status_code
        self.text = text
        self._json = json_data
        self._json_error = json_error

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._json_error:
            raise ValueError('Expecting value')
        return self._json


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "app:\n"
        "  request_timeout: 7\n"
        "network:\n"
        "  headers:\n"
        "    user_agent: test-agent\n"
        "    accept_language: en\n",
        encoding="utf-8",
    )
    return str(path)


def make_sm(config_file, monkeypatch, response=None, exc=None):
    sm = SessionManager(config_file)
    calls = []

    def fake_get(url, timeout=None):
        calls.append((url, timeout))
        if exc is not None:
            raise exc
        return response

    monkeypatch.setattr(sm.session, "get", fake_get)
    return sm, calls


def test_headers_and_timeout(config_file):
    sm = SessionManager(config_file)
    assert sm.timeout == 7
    assert sm.session.headers["User-Agent"] == "test-agent"
    assert sm.session.headers["Accept-Language"] == "en"


def test_empty_config_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    sm = SessionManager(str(path))
    assert sm.config == {}
    assert sm.timeout == DEFAULT_TIMEOUT


def test_get_text(config_file, monkeypatch):
    sm, calls = make_sm(config_file, monkeypatch, FakeResponse(text="<html></html>"))
    assert sm.get_text("https://example.test/toc") == "<html></html>"
    assert calls == [("https://example.test/toc", 7)]


def test_get_json(config_file, monkeypatch):
    sm, _ = make_sm(config_file, monkeypatch, FakeResponse(json_data={"a": 1}))
    assert sm.get_json("https://example.test/wc") == {"a": 1}


def test_bad_status(config_file, monkeypatch):
    sm, _ = make_sm(config_file, monkeypatch, FakeResponse(status_code=503))
    with pytest.raises(FetchError) as info:
        sm.get_text("https://example.test/toc")
    assert info.value.status == 503
    assert "503" in str(info.value)


def test_transport_error(config_file, monkeypatch):
    sm, _ = make_sm(config_file, monkeypatch, exc=requests.ConnectionError("boom"))
    with pytest.raises(FetchError) as info:
        sm.get_text("https://example.test/toc")
    assert info.value.status is None
    assert isinstance(info.value.__cause__, requests.ConnectionError)


def test_invalid_json(config_file, monkeypatch):
    sm, _ = make_sm(config_file, monkeypatch, FakeResponse(json_error=True))
    with pytest.raises(FetchError, match="Invalid JSON"):
        sm.get_json("https://example.test/wc")
