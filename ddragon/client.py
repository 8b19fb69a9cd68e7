"""Client for the versioned Data Dragon static-data API."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Any, List, Type, TypeVar
from urllib.parse import urljoin, urlsplit

from pydantic import TypeAdapter, ValidationError

from .cache import ResponseCache
from .config import DATA_PATH, DEFAULT_BASE_URL, ENDPOINTS, LOCALE, VERSIONS_PATH
from .errors import (
    BodyReadError,
    DecodeError,
    NoLatestVersionError,
    UrlParseError,
)
from .models import (
    Challenges,
    Champions,
    ChampionsFull,
    Items,
    Maps,
    MissionAssets,
    ProfileIcons,
    Runes,
    SpellBuffs,
    SummonerSpells,
    Translations,
)
from .transport import RequestsTransport, Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISS = object()


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _join(base: str, reference: str) -> str:
    """Resolve ``reference`` against ``base`` following RFC 3986."""

    parts = urlsplit(base)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise UrlParseError(base)
    try:
        joined = urljoin(base, reference)
    except ValueError as exc:
        raise UrlParseError(f"{base} + {reference}") from exc
    if not urlsplit(joined).netloc:
        raise UrlParseError(joined)
    return joined


def _decode(data: bytes | str, target: Any) -> Any:
    try:
        return _adapter(target).validate_json(data)
    except ValidationError as exc:
        raise DecodeError(f"Could not parse JSON data as {target!r}: {exc}") from exc


class DDragonClient:
    """Typed, read-only access to the documents of one published version.

    The version is resolved once by :meth:`create` and stays fixed for the
    lifetime of the client.  When ``cache_dir`` is set, fetched documents are
    stored there keyed by their request URL and served from disk on later
    calls, for this or any other client.
    """

    def __init__(
        self,
        transport: Transport,
        version: str,
        base_url: str = DEFAULT_BASE_URL,
        cache_dir: str | os.PathLike[str] | None = None,
    ) -> None:
        self._transport = transport
        self._version = version
        self._base_url = base_url
        self._cache_dir = cache_dir
        self._cache = ResponseCache(cache_dir) if cache_dir is not None else None

    @classmethod
    def create(
        cls,
        transport: Transport,
        cache_dir: str | os.PathLike[str] | None = None,
        base_url: str = DEFAULT_BASE_URL,
    ) -> DDragonClient:
        """Resolve the newest published version and return a client for it."""

        url = _join(base_url, VERSIONS_PATH)
        body = transport.get(url)
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise BodyReadError(f"Could not read response from {url}") from exc
        versions = _decode(text, List[str])
        if not versions:
            raise NoLatestVersionError()

        # The publisher lists versions newest first.
        latest = versions[0]
        logger.debug(f"Resolved Data Dragon version {latest}")
        return cls(transport, latest, base_url=base_url, cache_dir=cache_dir)

    @classmethod
    def default(cls) -> DDragonClient:
        """Client for the production host, without caching."""

        return cls.create(RequestsTransport())

    @classmethod
    def with_cache(cls, cache_dir: str | os.PathLike[str]) -> DDragonClient:
        return cls.create(RequestsTransport(), cache_dir=cache_dir)

    @classmethod
    def with_transport(
        cls,
        transport: Transport,
        cache_dir: str | os.PathLike[str] | None = None,
        base_url: str = DEFAULT_BASE_URL,
    ) -> DDragonClient:
        return cls.create(transport, cache_dir=cache_dir, base_url=base_url)

    @property
    def version(self) -> str:
        return self._version

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def cache_dir(self) -> str | os.PathLike[str] | None:
        return self._cache_dir

    def data_url(self) -> str:
        """Root URL of the documents for the resolved version."""

        return _join(self._base_url, DATA_PATH.format(version=self._version, locale=LOCALE))

    def get_data(self, endpoint: str, target: Type[T]) -> T:
        """Fetch ``endpoint`` (relative to :meth:`data_url`) decoded as ``target``.

        A usable cache entry short-circuits the request.  Unreadable or
        undecodable entries count as misses and are replaced by the fresh
        response.
        """

        request_url = _join(self.data_url(), endpoint)

        cached = self._read_cache(request_url, target)
        if cached is not _MISS:
            return cached

        body = self._transport.get(request_url)
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise BodyReadError(f"Could not read response from {request_url}") from exc
        value = _decode(text, target)

        if self._cache is not None:
            self._cache.write(request_url, text.encode("utf-8"))
        return value

    def _read_cache(self, key: str, target: Any) -> Any:
        if self._cache is None:
            return _MISS
        try:
            data = self._cache.read(key)
        except OSError as exc:
            logger.debug(f"Ignoring unreadable cache entry for {key}: {exc}")
            return _MISS
        if data is None:
            logger.debug(f"Cache miss for {key}")
            return _MISS
        try:
            value = _decode(data, target)
        except DecodeError as exc:
            logger.debug(f"Ignoring stale cache entry for {key}: {exc}")
            return _MISS
        logger.debug(f"Cache hit for {key}")
        return value

    def challenges(self) -> Challenges:
        return self.get_data(ENDPOINTS["challenges"], Challenges)

    def champions(self) -> Champions:
        return self.get_data(ENDPOINTS["champions"], Champions)

    def champions_full(self) -> ChampionsFull:
        return self.get_data(ENDPOINTS["champions_full"], ChampionsFull)

    def items(self) -> Items:
        return self.get_data(ENDPOINTS["items"], Items)

    def maps(self) -> Maps:
        return self.get_data(ENDPOINTS["maps"], Maps)

    def mission_assets(self) -> MissionAssets:
        return self.get_data(ENDPOINTS["mission_assets"], MissionAssets)

    def profile_icons(self) -> ProfileIcons:
        return self.get_data(ENDPOINTS["profile_icons"], ProfileIcons)

    def runes(self) -> Runes:
        return self.get_data(ENDPOINTS["runes"], Runes)

    def spell_buffs(self) -> SpellBuffs:
        return self.get_data(ENDPOINTS["spell_buffs"], SpellBuffs)

    def summoner_spells(self) -> SummonerSpells:
        return self.get_data(ENDPOINTS["summoner_spells"], SummonerSpells)

    def translations(self) -> Translations:
        return self.get_data(ENDPOINTS["translations"], Translations)


__all__ = ["DDragonClient"]
