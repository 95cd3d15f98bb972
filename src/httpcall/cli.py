"""
Command-line interface for httpcall.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
from typing import NoReturn

import click
import httpx
from rich.console import Console
from rich.markup import escape

from httpcall import __version__
from httpcall.client import HTTPClient, build_request
from httpcall.config import CallConfig
from httpcall.errors import HttpCallError, UnsupportedMethodError
from httpcall.headers import parse_headers
from httpcall.logging_config import setup_logging
from httpcall.render import render_response

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(message)}", soft_wrap=True)
    raise SystemExit(1)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-X", "--method", required=True, help="HTTP method: GET, POST, PUT or DELETE (case-insensitive)")
@click.option("-u", "--url", required=True, help="Target URL")
@click.option("-H", "--headers", multiple=True, help="Headers in 'Name: Value' format (repeatable)")
@click.option("-d", "--body", help="Inline JSON request body")
@click.option("--body-file", type=click.Path(dir_okay=False), help="File containing a JSON request body")
@click.option("--show-headers", is_flag=True, help="Print response headers")
@click.option("--debug", is_flag=True, help="Log request details to stderr")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write logs to a rotating file")
@click.version_option(__version__, prog_name="httpcall")
def main(method: str, url: str, headers: tuple, body: str | None, body_file: str | None,
         show_headers: bool, debug: bool, log_file: str | None):
    """Send a single HTTP request and print the response.

    Prints the status, response time, optionally the response headers, and
    the body. JSON bodies are pretty-printed.

    \b
    Examples:
        httpcall -X GET -u https://api.example.com/users
        httpcall -X POST -u https://api.example.com/users -d '{"name": "test"}'
        httpcall -X PUT -u https://api.example.com/users/1 --body-file user.json
        httpcall -X GET -u https://api.example.com/data -H "X-API-Key: abc123" --show-headers
    """
    config = CallConfig(show_headers=show_headers, debug=debug, log_file=log_file)
    setup_logging(level=config.log_level, log_file=config.log_file)

    try:
        header_map = parse_headers(headers)
        req = build_request(method, url, headers=header_map, body=body, body_file=body_file)
    except UnsupportedMethodError as e:
        # Reported but not treated as a failure; exit status stays 0
        logger.debug(str(e))
        err_console.print("[red]Invalid HTTP method![/red]")
        return
    except HttpCallError as e:
        _fail(str(e))

    with HTTPClient() as client:
        try:
            result = client.send(req)
            render_response(console, result, show_headers=config.show_headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug(f"{req.method} {req.url} failed", exc_info=e)
            _fail(f"{type(e).__name__}: {e}")
