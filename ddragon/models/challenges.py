"""Models for ``challenges.json``."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import Field

from .shared import DDragonModel


class ChallengeReward(DDragonModel):
    category: str
    quantity: int
    title: Optional[List[Dict[str, str]]] = None


class ChallengeThreshold(DDragonModel):
    value: float
    rewards: Optional[List[ChallengeReward]] = None


class Challenge(DDragonModel):
    id: int
    name: str
    description: str
    short_description: str = Field(alias="shortDescription")
    has_leaderboard: bool = Field(alias="hasLeaderboard")
    level_to_icon_path: Dict[str, str] = Field(alias="levelToIconPath")
    thresholds: Dict[str, ChallengeThreshold]


class Challenges(DDragonModel):
    version: str
    data: Dict[str, Challenge]
