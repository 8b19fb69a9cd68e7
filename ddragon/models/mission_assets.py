"""Models for ``mission-assets.json``."""

from __future__ import annotations

from typing import Dict

from .shared import DDragonModel, Image, SpriteSheet


class MissionAsset(DDragonModel):
    id: int
    image: Image[SpriteSheet]


class MissionAssets(DDragonModel):
    type: str
    version: str
    data: Dict[str, MissionAsset]
