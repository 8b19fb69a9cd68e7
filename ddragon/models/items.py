"""Models for ``item.json``."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field

from .shared import DDragonModel, Image


class ItemSprite(str, Enum):
    ITEM0 = "item0.png"
    ITEM1 = "item1.png"
    ITEM2 = "item2.png"
    ITEM3 = "item3.png"


class Gold(DDragonModel):
    base: int
    purchasable: bool
    total: int
    sell: int


class Item(DDragonModel):
    name: str
    description: str
    colloq: str
    plaintext: str
    into: Optional[List[str]] = None
    from_: Optional[List[str]] = Field(default=None, alias="from")
    image: Image[ItemSprite]
    gold: Gold
    tags: List[str]
    maps: Dict[str, bool]
    stats: Dict[str, float]
    depth: Optional[int] = None
    effect: Optional[Dict[str, str]] = None
    stacks: Optional[int] = None
    consumed: Optional[bool] = None
    consume_on_full: Optional[bool] = Field(default=None, alias="consumeOnFull")
    in_store: Optional[bool] = Field(default=None, alias="inStore")
    hide_from_all: Optional[bool] = Field(default=None, alias="hideFromAll")
    required_champion: Optional[str] = Field(default=None, alias="requiredChampion")
    required_ally: Optional[str] = Field(default=None, alias="requiredAlly")
    special_recipe: Optional[int] = Field(default=None, alias="specialRecipe")


class ItemGroup(DDragonModel):
    id: str
    max_group_ownable: str = Field(alias="MaxGroupOwnable")


class ItemTree(DDragonModel):
    header: str
    tags: List[str]


class Items(DDragonModel):
    type: str
    version: str
    data: Dict[str, Item]
    groups: List[ItemGroup]
    tree: List[ItemTree]
