"""Models for ``language.json``, the UI string table."""

from __future__ import annotations

from typing import Dict, List

from pydantic import Field

from .shared import DDragonModel


class SearchKeyRemap(DDragonModel):
    k: str
    v: str


class TranslationTree(DDragonModel):
    search_key_ignore: str = Field(alias="searchKeyIgnore")
    search_key_remap: List[SearchKeyRemap] = Field(alias="searchKeyRemap")


class Translations(DDragonModel):
    type: str
    version: str
    data: Dict[str, str]
    tree: TranslationTree

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.data.get(key, default)
