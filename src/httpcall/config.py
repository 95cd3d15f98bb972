"""
Configuration for httpcall.

Everything comes from the command line; no config file or environment
variables are read.
"""

from dataclasses import dataclass

from httpcall import __version__

SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE")

JSON_CONTENT_TYPE = "application/json"

USER_AGENT = f"httpcall/{__version__}"


@dataclass
class CallConfig:
    """Options that shape one invocation."""

    show_headers: bool = False
    debug: bool = False
    log_file: str | None = None

    @property
    def log_level(self) -> str:
        return "DEBUG" if self.debug else "WARNING"
