"""Models for ``runesReforged.json``.

Unlike the other documents this one is a bare JSON array of rune trees and
carries no version field.
"""

from __future__ import annotations

from typing import List

from pydantic import Field

from .shared import DDragonModel


class Rune(DDragonModel):
    id: int
    key: str
    icon: str
    name: str
    short_desc: str = Field(alias="shortDesc")
    long_desc: str = Field(alias="longDesc")


class RuneSlot(DDragonModel):
    runes: List[Rune]


class RuneTree(DDragonModel):
    id: int
    key: str
    icon: str
    name: str
    slots: List[RuneSlot]


Runes = List[RuneTree]
