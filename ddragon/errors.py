"""Exceptions raised by :mod:`ddragon`."""

from __future__ import annotations


class DDragonClientError(Exception):
    """Base error for every failure surfaced by the client."""


class UrlParseError(DDragonClientError):
    """Raised when a request URL cannot be built."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Could not parse URL: {url!r}")
        self.url = url


class RequestError(DDragonClientError):
    """Raised when a request could not be completed."""

    def __init__(self, url: str, reason: object = None) -> None:
        message = f"Could not complete request to {url}"
        if reason is not None:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.url = url


class BodyReadError(DDragonClientError):
    """Raised when a response body cannot be read as text."""


class DecodeError(DDragonClientError):
    """Raised when a payload is not valid JSON for the expected type."""


class NoLatestVersionError(DDragonClientError):
    """Raised when the version list is empty."""

    def __init__(self) -> None:
        super().__init__("Could not find the latest API version.")
