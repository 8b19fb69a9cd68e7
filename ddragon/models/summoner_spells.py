"""Models for ``summoner.json``."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field

from .shared import DDragonModel, Image


class CostType(str, Enum):
    NBSP = "&nbsp;"
    NO_COST = "No Cost"


class SummonerSpellSprite(str, Enum):
    SPELL0 = "spell0.png"


class SummonerSpell(DDragonModel):
    id: str
    name: str
    description: str
    tooltip: str
    maxrank: int
    cooldown: List[int]
    cooldown_burn: str = Field(alias="cooldownBurn")
    cost: List[int]
    cost_burn: str = Field(alias="costBurn")
    effect: List[Optional[List[float]]]
    effect_burn: List[Optional[str]] = Field(alias="effectBurn")
    key: str
    summoner_level: int = Field(alias="summonerLevel")
    modes: List[str]
    cost_type: CostType = Field(alias="costType")
    maxammo: str
    range: List[int]
    range_burn: str = Field(alias="rangeBurn")
    image: Image[SummonerSpellSprite]
    resource: CostType


class SummonerSpells(DDragonModel):
    version: str
    data: Dict[str, SummonerSpell]
