"""
httpcall - a small command-line HTTP client.

Issues one HTTP request built from a method, URL, headers and an optional
JSON body, then reports the status, response time and response body.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

__version__ = "0.1.0"
__author__ = "DNS Science.io"
__copyright__ = "Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company"
