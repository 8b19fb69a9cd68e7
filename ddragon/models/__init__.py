"""Typed projections of the documents published by Data Dragon."""

from .challenges import Challenge, Challenges
from .champions import Champion, Champions, ChampionSprite, Tag
from .champions_full import ChampionFull, ChampionsFull
from .items import Item, Items, ItemSprite
from .maps import MapInfo, Maps, MapSprite
from .mission_assets import MissionAsset, MissionAssets
from .profile_icons import ProfileIcon, ProfileIcons
from .runes import Rune, Runes, RuneTree
from .shared import Image
from .spell_buffs import SpellBuff, SpellBuffs
from .summoner_spells import CostType, SummonerSpell, SummonerSpells, SummonerSpellSprite
from .translations import Translations

__all__ = [
    "Challenge",
    "Challenges",
    "Champion",
    "ChampionFull",
    "Champions",
    "ChampionsFull",
    "ChampionSprite",
    "CostType",
    "Image",
    "Item",
    "Items",
    "ItemSprite",
    "MapInfo",
    "Maps",
    "MapSprite",
    "MissionAsset",
    "MissionAssets",
    "ProfileIcon",
    "ProfileIcons",
    "Rune",
    "Runes",
    "RuneTree",
    "SpellBuff",
    "SpellBuffs",
    "SummonerSpell",
    "SummonerSpells",
    "SummonerSpellSprite",
    "Tag",
    "Translations",
]
