"""Models for ``profileicon.json``."""

from __future__ import annotations

from typing import Dict

from .shared import DDragonModel, Image, SpriteSheet


class ProfileIcon(DDragonModel):
    id: int
    image: Image[SpriteSheet]


class ProfileIcons(DDragonModel):
    type: str
    version: str
    data: Dict[str, ProfileIcon]
