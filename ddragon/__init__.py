"""Typed client for the League of Legends Data Dragon static data."""

from .cache import ResponseCache
from .client import DDragonClient
from .config import DEFAULT_BASE_URL, ENDPOINTS
from .errors import (
    BodyReadError,
    DDragonClientError,
    DecodeError,
    NoLatestVersionError,
    RequestError,
    UrlParseError,
)
from .transport import RequestsTransport, Transport

__all__ = [
    "BodyReadError",
    "DDragonClient",
    "DDragonClientError",
    "DecodeError",
    "DEFAULT_BASE_URL",
    "ENDPOINTS",
    "NoLatestVersionError",
    "RequestError",
    "RequestsTransport",
    "ResponseCache",
    "Transport",
    "UrlParseError",
]
