"""Configuration for the Data Dragon endpoints."""

from __future__ import annotations

DEFAULT_BASE_URL = "https://ddragon.leagueoflegends.com"
"""Production host of the static data publisher."""

VERSIONS_PATH = "/api/versions.json"
DATA_PATH = "/cdn/{version}/data/{locale}/"
LOCALE = "en_US"

REQUEST_TIMEOUT = 30
"""Seconds before a single request is abandoned by the transport."""

ENDPOINTS = {
    "challenges": "./challenges.json",
    "champions": "./champion.json",
    "champions_full": "./championFull.json",
    "items": "./item.json",
    "maps": "./map.json",
    "mission_assets": "./mission-assets.json",
    "profile_icons": "./profileicon.json",
    "runes": "./runesReforged.json",
    "spell_buffs": "./spellbuffs.json",
    "summoner_spells": "./summoner.json",
    "translations": "./language.json",
}
"""Mapping of accessor name to the document path relative to the data root."""
