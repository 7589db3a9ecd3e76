"""
Shared fixtures for UI layer tests. HTTP is stubbed; no backend is needed.
"""

import json

import pytest
import requests


def _make_response(status_code: int, body=None, raw: bytes | None = None) -> requests.Response:
    """Build a real requests.Response with the given status and JSON body."""
    response = requests.Response()
    response.status_code = status_code
    response.encoding = "utf-8"
    if raw is not None:
        response._content = raw
    else:
        response._content = json.dumps(body).encode("utf-8") if body is not None else b""
    response.headers["Content-Type"] = "application/json"
    return response


@pytest.fixture
def make_response():
    return _make_response


@pytest.fixture(autouse=True)
def backend_url(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "http://catalog.test")
    monkeypatch.setenv("API_TIMEOUT", "5")
