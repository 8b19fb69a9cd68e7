"""Models for ``championFull.json``, the detailed champion listing."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import Field

from .champions import ChampionInfo, ChampionSprite, ChampionStats, Tag
from .shared import DDragonModel, Image, SpriteSheet


class Skin(DDragonModel):
    id: str
    num: int
    name: str
    chromas: bool


class LevelTip(DDragonModel):
    label: List[str]
    effect: List[str]


class ChampionSpell(DDragonModel):
    id: str
    name: str
    description: str
    tooltip: str
    leveltip: Optional[LevelTip] = None
    maxrank: int
    cooldown: List[float]
    cooldown_burn: str = Field(alias="cooldownBurn")
    cost: List[float]
    cost_burn: str = Field(alias="costBurn")
    effect: List[Optional[List[float]]]
    effect_burn: List[Optional[str]] = Field(alias="effectBurn")
    cost_type: str = Field(alias="costType")
    maxammo: str
    range: List[float]
    range_burn: str = Field(alias="rangeBurn")
    image: Image[SpriteSheet]
    resource: Optional[str] = None


class Passive(DDragonModel):
    name: str
    description: str
    image: Image[SpriteSheet]


class ChampionFull(DDragonModel):
    id: str
    key: str
    name: str
    title: str
    image: Image[ChampionSprite]
    skins: List[Skin]
    lore: str
    blurb: str
    allytips: List[str]
    enemytips: List[str]
    tags: List[Tag]
    partype: str
    info: ChampionInfo
    stats: ChampionStats
    spells: List[ChampionSpell]
    passive: Passive
    # Recommended item sets vary per game mode and are kept as raw JSON.
    recommended: List[Dict[str, Any]] = Field(default_factory=list)


class ChampionsFull(DDragonModel):
    type: str
    format: str
    version: str
    data: Dict[str, ChampionFull]
    keys: Dict[str, str]
