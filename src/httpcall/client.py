"""
Request building and sending.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import json
import logging
import time
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Any

import httpx

from httpcall.config import JSON_CONTENT_TYPE, SUPPORTED_METHODS, USER_AGENT
from httpcall.errors import RequestBodyError, UnsupportedMethodError

logger = logging.getLogger(__name__)


@dataclass
class JSONBody:
    """A parsed JSON request body. Wrapping keeps a JSON null distinct from no body."""
    value: Any


@dataclass
class HTTPRequest:
    """An outgoing request, ready to hand to the transport."""
    method: str
    url: str
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    json_body: JSONBody | None = None

    @property
    def content(self) -> bytes | None:
        if self.json_body is None:
            return None
        return json.dumps(self.json_body.value).encode("utf-8")


@dataclass
class HTTPResult:
    """Response to a sent request.

    The body has not been read yet; the renderer reads it.
    """
    request: HTTPRequest
    response: httpx.Response
    elapsed: timedelta


def normalize_method(method: str) -> str:
    """Uppercase a method name and check it is supported."""
    normalized = method.upper()
    if normalized not in SUPPORTED_METHODS:
        raise UnsupportedMethodError(method)
    return normalized


def parse_json_body(text: str, source: str) -> JSONBody:
    try:
        return JSONBody(json.loads(text))
    except json.JSONDecodeError as e:
        raise RequestBodyError(f"Invalid JSON in {source}: {e}") from e


def read_body_file(path: str) -> JSONBody:
    """Read and parse a JSON body from a file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RequestBodyError(f"Cannot read body file {path}: {e}") from e
    return parse_json_body(text, path)


def resolve_json_body(body: str | None, body_file: str | None) -> JSONBody | None:
    """Pick the request body.

    The file is applied first and an inline body then replaces it, so when
    both are given the inline body wins. The file is still read and
    validated in that case.
    """
    json_body = None
    if body_file is not None:
        json_body = read_body_file(body_file)
    if body is not None:
        json_body = parse_json_body(body, "request body")
    return json_body


def build_request(
    method: str,
    url: str,
    headers: httpx.Headers | None = None,
    body: str | None = None,
    body_file: str | None = None,
) -> HTTPRequest:
    """Assemble an HTTPRequest from command-line values."""
    req = HTTPRequest(
        method=normalize_method(method),
        url=url,
        headers=httpx.Headers(headers) if headers is not None else httpx.Headers(),
        json_body=resolve_json_body(body, body_file),
    )

    if req.json_body is not None and "Content-Type" not in req.headers:
        req.headers["Content-Type"] = JSON_CONTENT_TYPE

    return req


class HTTPClient:
    """Synchronous client that sends a single request."""

    def __init__(self, transport: httpx.BaseTransport | None = None):
        self.transport = transport
        self._client: httpx.Client | None = None
        self._response: httpx.Response | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                transport=self.transport,
                headers={"User-Agent": USER_AGENT},
                follow_redirects=True,
            )
        return self._client

    def close(self) -> None:
        """Close the open response and the HTTP client."""
        if self._response is not None:
            self._response.close()
            self._response = None
        if self._client and not self._client.is_closed:
            self._client.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def send(self, req: HTTPRequest) -> HTTPResult:
        """Send a request and wait for the response status and headers.

        Transport errors propagate as httpx.HTTPError.
        """
        client = self._get_client()
        request = client.build_request(
            method=req.method,
            url=req.url,
            headers=req.headers,
            content=req.content,
        )

        logger.debug(f"Sending {req.method} {req.url}")
        start_time = time.perf_counter()
        response = client.send(request, stream=True)
        elapsed = timedelta(seconds=time.perf_counter() - start_time)
        self._response = response
        logger.debug(f"Received {response.status_code} in {elapsed.total_seconds():.6f}s")

        return HTTPResult(request=req, response=response, elapsed=elapsed)
