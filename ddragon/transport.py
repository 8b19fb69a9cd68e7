"""HTTP transport used by :class:`ddragon.client.DDragonClient`."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

import requests

from .config import REQUEST_TIMEOUT
from .errors import RequestError

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Anything able to fetch the raw body behind ``url``.

    Implementations raise :class:`~ddragon.errors.RequestError` when the
    request fails or the server answers with a non-success status.
    """

    def get(self, url: str) -> bytes:
        ...


@dataclass(slots=True)
class RequestsTransport:
    """Blocking transport backed by a :class:`requests.Session`."""

    session: requests.Session | None = None
    timeout: float = REQUEST_TIMEOUT
    _session: requests.Session = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._session = self.session or requests.Session()

    def get(self, url: str) -> bytes:
        """Return the response body for ``url``."""

        logger.debug(f"GET {url}")
        try:
            response = self._session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise RequestError(url, exc) from exc
        return response.content

    def close(self) -> None:
        self._session.close()
