"""Shared fixtures: settings, a recording stand-in for requests.Session, and the app."""

import socket
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from whitelist_api.core.config import Settings
from whitelist_api.main import create_app
from whitelist_api.pterodactyl.client import PterodactylClient


class FakeResponse:
    def __init__(self, status_code: int = 204, text: str = "") -> None:
        self.status_code = status_code
        self.text = text


class FakeSession:
    """Records every POST and answers with a canned response or exception."""

    def __init__(self, response: Optional[FakeResponse] = None, exc: Optional[Exception] = None) -> None:
        self.response = response or FakeResponse()
        self.exc = exc
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def post(self, url, data=None, headers=None, **kwargs):
        self.calls.append({"url": url, "data": data, "headers": dict(headers or {}), "kwargs": kwargs})
        if self.exc is not None:
            raise self.exc
        return self.response

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> Settings:
    return Settings(api_url="http://x", server_id="1", api_key="secret")


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def pterodactyl(settings, session) -> PterodactylClient:
    return PterodactylClient.from_settings(settings, session=session)


@pytest.fixture
def client(settings, pterodactyl) -> TestClient:
    return TestClient(create_app(settings, client=pterodactyl))


@pytest.fixture
def no_proxy(monkeypatch):
    """Keep loopback connections away from any proxy configured in the environment."""
    monkeypatch.setenv("NO_PROXY", "*")
    monkeypatch.setenv("no_proxy", "*")


@pytest.fixture
def closed_port() -> int:
    """A loopback port that was just released, so nothing is listening on it."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port
