"""Types embedded in several Data Dragon documents."""

from __future__ import annotations

from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, StringConstraints

SpriteT = TypeVar("SpriteT")

SpriteSheet = Annotated[str, StringConstraints(pattern=r"^[a-z]+\d+\.png$")]
"""Numbered sprite sheet whose family grows with every release."""


class DDragonModel(BaseModel):
    """Base for every published document.

    Validation is strict so that a changed primitive type in the payload
    surfaces as an error instead of being coerced.
    """

    model_config = ConfigDict(strict=True, populate_by_name=True)


class Image(DDragonModel, Generic[SpriteT]):
    """Location of an icon within a sprite sheet."""

    full: str
    sprite: SpriteT
    group: str
    x: int
    y: int
    w: int
    h: int
