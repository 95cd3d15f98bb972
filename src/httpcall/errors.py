"""
Exceptions raised while turning command-line input into a request.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""


class HttpCallError(Exception):
    """Base class for httpcall errors."""


class InvalidHeaderError(HttpCallError):
    """A header name or value is not valid HTTP."""

    def __init__(self, header: str, reason: str):
        self.header = header
        self.reason = reason
        super().__init__(f"Invalid header {header!r}: {reason}")


class RequestBodyError(HttpCallError):
    """The request body could not be read or is not valid JSON."""


class UnsupportedMethodError(HttpCallError):
    """The HTTP method is not one of the supported verbs."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Unsupported HTTP method: {method}")
