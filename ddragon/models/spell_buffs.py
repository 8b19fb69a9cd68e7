"""Models for ``spellbuffs.json``."""

from __future__ import annotations

from typing import List

from pydantic import Field

from .shared import DDragonModel


class SpellBuff(DDragonModel):
    id: int
    name: str


class SpellBuffs(DDragonModel):
    spell_buffs: List[SpellBuff] = Field(alias="SpellBuffs")
