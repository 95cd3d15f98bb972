"""
Parsing of 'Name: Value' header strings from the command line.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
import re

import httpx

from httpcall.errors import InvalidHeaderError

logger = logging.getLogger(__name__)

# RFC 9110 token characters
_TOKEN_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")

# Control characters other than horizontal tab, plus DEL
_INVALID_VALUE_RE = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]")


def validate_header(name: str, value: str) -> None:
    """Raise InvalidHeaderError unless name and value are valid HTTP."""
    if not _TOKEN_RE.match(name):
        raise InvalidHeaderError(name, "name is not a valid HTTP token")
    if _INVALID_VALUE_RE.search(value):
        raise InvalidHeaderError(name, "value contains control characters")


def parse_headers(header_strings: list[str] | tuple[str, ...]) -> httpx.Headers:
    """Parse header strings in 'Name: Value' format.

    Each string is split on its first colon, so values may contain colons.
    Lines without a colon, or with an empty name or value, are skipped.
    A repeated name replaces the earlier value.
    """
    headers = httpx.Headers()
    for h in header_strings:
        name, sep, value = h.partition(":")
        name = name.strip()
        value = value.strip()
        if not sep or not name or not value:
            logger.debug(f"Skipping malformed header: {h!r}")
            continue

        validate_header(name, value)
        headers[name] = value
    return headers
