"""Models for ``champion.json``."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List

from .shared import DDragonModel, Image


class ChampionSprite(str, Enum):
    CHAMPION0 = "champion0.png"
    CHAMPION1 = "champion1.png"
    CHAMPION2 = "champion2.png"
    CHAMPION3 = "champion3.png"
    CHAMPION4 = "champion4.png"
    CHAMPION5 = "champion5.png"


class Tag(str, Enum):
    """Class tags a champion can carry."""

    ASSASSIN = "Assassin"
    FIGHTER = "Fighter"
    MAGE = "Mage"
    MARKSMAN = "Marksman"
    SUPPORT = "Support"
    TANK = "Tank"


class ChampionInfo(DDragonModel):
    attack: int
    defense: int
    magic: int
    difficulty: int


class ChampionStats(DDragonModel):
    hp: float
    hpperlevel: float
    mp: float
    mpperlevel: float
    movespeed: float
    armor: float
    armorperlevel: float
    spellblock: float
    spellblockperlevel: float
    attackrange: float
    hpregen: float
    hpregenperlevel: float
    mpregen: float
    mpregenperlevel: float
    crit: float
    critperlevel: float
    attackdamage: float
    attackdamageperlevel: float
    attackspeedperlevel: float
    attackspeed: float


class Champion(DDragonModel):
    version: str
    id: str
    key: str
    name: str
    title: str
    blurb: str
    info: ChampionInfo
    image: Image[ChampionSprite]
    tags: List[Tag]
    partype: str
    stats: ChampionStats


class Champions(DDragonModel):
    type: str
    format: str
    version: str
    data: Dict[str, Champion]
