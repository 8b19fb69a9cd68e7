"""Models for ``map.json``."""

from __future__ import annotations

from enum import Enum
from typing import Dict

from pydantic import Field

from .shared import DDragonModel, Image


class MapSprite(str, Enum):
    MAP0 = "map0.png"


class MapInfo(DDragonModel):
    map_name: str = Field(alias="MapName")
    map_id: str = Field(alias="MapId")
    image: Image[MapSprite]


class Maps(DDragonModel):
    type: str
    version: str
    data: Dict[str, MapInfo]
