"""
Response rendering for the terminal.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import json
import math
from datetime import timedelta
from typing import Any

import httpx
from rich.console import Console
from rich.json import JSON
from rich.text import Text

from httpcall.client import HTTPResult

_DURATION_UNITS = (
    (1.0, "s"),
    (1e-3, "ms"),
    (1e-6, "µs"),
)


def status_style(status_code: int) -> str | None:
    """Rich style for a status code: green 2xx, yellow 4xx, red 5xx."""
    if 200 <= status_code < 300:
        return "green"
    elif 400 <= status_code < 500:
        return "yellow"
    elif 500 <= status_code < 600:
        return "red"
    return None


def format_elapsed(elapsed: timedelta) -> str:
    """Format a duration with two decimals in the largest unit that fits."""
    seconds = elapsed.total_seconds()
    for scale, unit in _DURATION_UNITS:
        if seconds >= scale:
            return f"{seconds / scale:.2f}{unit}"
    return f"{seconds * 1e9:.2f}ns"


def format_json(data: Any, indent: int = 2) -> str:
    """Format JSON data for display."""
    return json.dumps(data, indent=indent, ensure_ascii=False)


def _finite_float(literal: str) -> float:
    value = float(literal)
    if math.isinf(value):
        raise ValueError(f"number out of range: {literal}")
    return value


def _reject_constant(literal: str) -> float:
    raise ValueError(f"not a JSON value: {literal}")


def format_body(text: str) -> tuple[str, bool]:
    """Pretty-print text that parses as JSON, otherwise return it unchanged.

    Returns the display text and whether it was JSON.
    """
    try:
        data = json.loads(text, parse_float=_finite_float, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return text, False
    return format_json(data), True


def render_status(console: Console, status_code: int, reason: str) -> None:
    status = Text(f"{status_code} {reason}".rstrip(), style=status_style(status_code) or "")
    console.print(Text("Status:", style="bold"), status)


def render_headers(console: Console, headers: httpx.Headers) -> None:
    console.print(Text("\nResponse Headers:", style="bold"))
    for name, value in headers.multi_items():
        console.file.write(f"{name}:{value}\n")


def render_body(console: Console, text: str) -> None:
    console.print(Text("\nResponse Body:", style="bold"))

    formatted, is_json = format_body(text)
    if is_json:
        console.print(JSON(formatted), soft_wrap=True)
    else:
        # Bypass rich so tabs and carriage returns survive
        console.file.write(formatted + "\n")


def render_response(console: Console, result: HTTPResult, show_headers: bool = False) -> None:
    """Print status, response time, optional headers, then the body.

    Reads the full response body, which blocks until it has arrived.
    """
    resp = result.response

    render_status(console, resp.status_code, resp.reason_phrase)
    console.print(Text("Response Time:", style="bold"), Text(format_elapsed(result.elapsed)))

    if show_headers:
        render_headers(console, resp.headers)

    resp.read()
    render_body(console, resp.text)
