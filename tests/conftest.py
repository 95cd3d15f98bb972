"""Shared fixtures: a mock HTTP server built on httpx.MockTransport."""

from __future__ import annotations

import functools
import json

import httpx
import pytest

from httpcall import cli
from httpcall.client import HTTPClient


class MockServer:
    """Records every request and answers with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.headers: dict[str, str] = {}
        self.body: bytes = b""

    def reply(self, status_code: int = 200, body: str | bytes = b"", headers: dict[str, str] | None = None) -> None:
        self.status_code = status_code
        self.body = body.encode("utf-8") if isinstance(body, str) else body
        self.headers = headers or {}

    def handler(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if request.url.path == "/echo":
            return httpx.Response(
                200,
                json={
                    "method": request.method,
                    "headers": dict(request.headers),
                    "body": json.loads(request.content) if request.content else None,
                },
            )
        return httpx.Response(self.status_code, headers=self.headers, content=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def server() -> MockServer:
    return MockServer()


@pytest.fixture
def mock_client(server: MockServer, monkeypatch: pytest.MonkeyPatch) -> MockServer:
    """Route the CLI's HTTPClient through the mock server."""
    monkeypatch.setattr(cli, "HTTPClient", functools.partial(HTTPClient, transport=server.transport))
    return server
