"""Shared test fixtures and doubles."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Tuple

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from activity_notifier.settings import Settings, get_settings

from tests.builders import WEBHOOK_URL


@dataclass
class _Route:
    status: int = 200
    json: Any = None
    content: bytes | None = None
    raises: Callable[[httpx.Request], Exception] | None = None
    headers: Dict[str, str] | None = None


class HttpRecorder:
    """Route requests to canned responses and record everything sent."""

    def __init__(self) -> None:
        self._routes: Dict[Tuple[str, str], _Route] = {}
        self.requests: List[httpx.Request] = []

    def on(
        self,
        method: str,
        url: str,
        *,
        status: int = 200,
        json: Any = None,
        content: bytes | None = None,
        raises: Callable[[httpx.Request], Exception] | None = None,
        headers: Dict[str, str] | None = None,
    ) -> "HttpRecorder":
        self._routes[(method, url)] = _Route(status, json, content, raises, headers)
        return self

    def calls_to(self, url: str) -> List[httpx.Request]:
        return [request for request in self.requests if _route_url(request) == url]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get((request.method, _route_url(request)))
        if route is None:
            raise AssertionError(f"Unexpected request {request.method} {request.url}")
        if route.raises is not None:
            raise route.raises(request)
        if route.content is not None:
            return httpx.Response(
                route.status, headers=route.headers, content=route.content
            )
        return httpx.Response(route.status, headers=route.headers, json=route.json)


def _route_url(request: httpx.Request) -> str:
    url = request.url
    return f"{url.scheme}://{url.host}{url.path}"


@pytest.fixture
def settings() -> Settings:
    """Canonical settings instance reused across tests."""

    return Settings(
        client_id="client-id",
        client_secret="client-secret",
        code="auth-code",
        webhook_url=WEBHOOK_URL,
    )


@pytest.fixture
def http() -> HttpRecorder:
    return HttpRecorder()


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def pipeline_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Export the required environment variables for the entry point."""

    monkeypatch.setenv("CLIENT_ID", "client-id")
    monkeypatch.setenv("CLIENT_SECRET", "client-secret")
    monkeypatch.setenv("CODE", "auth-code")
    monkeypatch.setenv("WEBHOOK_URL", WEBHOOK_URL)
    monkeypatch.delenv("STRICT_TOKEN_STATUS", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
