import copy
import json
from typing import Dict, List, Tuple

import pytest
from fastapi import FastAPI, Request, Response
from fastapi.testclient import TestClient

from ddragon import DDragonClient, RequestError

BASE_URL = "http://testserver"

IMAGE = {"full": "Flash.png", "sprite": "spell0.png", "group": "spell", "x": 0, "y": 0, "w": 48, "h": 48}

DOCUMENTS = {
    "challenges.json": {
        "version": "0.0.0",
        "data": {
            "0": {
                "id": 0,
                "name": "CRYSTAL",
                "description": "Total points",
                "shortDescription": "Total points",
                "hasLeaderboard": False,
                "levelToIconPath": {"IRON": "/challenges/0/iron.png"},
                "thresholds": {
                    "IRON": {"value": 0},
                    "GOLD": {"value": 1250.0, "rewards": [{"category": "TITLE", "quantity": 1}]},
                },
            }
        },
    },
    "champion.json": {
        "type": "champion",
        "format": "standAloneComplex",
        "version": "0.0.0",
        "data": {
            "Annie": {
                "version": "0.0.0",
                "id": "Annie",
                "key": "1",
                "name": "Annie",
                "title": "the Dark Child",
                "blurb": "Dangerous, yet disarmingly precocious.",
                "info": {"attack": 2, "defense": 3, "magic": 10, "difficulty": 6},
                "image": {"full": "Annie.png", "sprite": "champion0.png", "group": "champion", "x": 288, "y": 0, "w": 48, "h": 48},
                "tags": ["Mage"],
                "partype": "Mana",
                "stats": {
                    "hp": 560, "hpperlevel": 102, "mp": 418, "mpperlevel": 25,
                    "movespeed": 335, "armor": 23, "armorperlevel": 4, "spellblock": 30,
                    "spellblockperlevel": 1.3, "attackrange": 625, "hpregen": 5.5,
                    "hpregenperlevel": 0.55, "mpregen": 8, "mpregenperlevel": 0.8,
                    "crit": 0, "critperlevel": 0, "attackdamage": 50, "attackdamageperlevel": 2.65,
                    "attackspeedperlevel": 1.36, "attackspeed": 0.61,
                },
            }
        },
    },
    "item.json": {
        "type": "item",
        "version": "0.0.0",
        "data": {
            "1001": {
                "name": "Boots",
                "description": "<mainText>Slightly increases Move Speed.</mainText>",
                "colloq": ";",
                "plaintext": "Slightly increases Move Speed",
                "into": ["3006", "3047"],
                "image": {"full": "1001.png", "sprite": "item0.png", "group": "item", "x": 0, "y": 0, "w": 48, "h": 48},
                "gold": {"base": 300, "purchasable": True, "total": 300, "sell": 210},
                "tags": ["Boots"],
                "maps": {"11": True, "12": True},
                "stats": {"FlatMovementSpeedMod": 25},
            },
            "3006": {
                "name": "Berserker's Greaves",
                "description": "",
                "colloq": ";",
                "plaintext": "",
                "from": ["1001", "1042"],
                "image": {"full": "3006.png", "sprite": "item0.png", "group": "item", "x": 48, "y": 0, "w": 48, "h": 48},
                "gold": {"base": 500, "purchasable": True, "total": 1100, "sell": 770},
                "tags": ["AttackSpeed", "Boots"],
                "maps": {"11": True},
                "stats": {"PercentAttackSpeedMod": 0.35},
                "depth": 2,
            },
        },
        "groups": [{"id": "BootsNormal", "MaxGroupOwnable": "1"}],
        "tree": [{"header": "START", "tags": ["LANE", "JUNGLE"]}],
    },
    "runesReforged.json": [
        {
            "id": 8100,
            "key": "Domination",
            "icon": "perk-images/Styles/7200_Domination.png",
            "name": "Domination",
            "slots": [
                {
                    "runes": [
                        {
                            "id": 8112,
                            "key": "Electrocute",
                            "icon": "perk-images/Styles/Domination/Electrocute/Electrocute.png",
                            "name": "Electrocute",
                            "shortDesc": "Hitting a champion with 3 separate attacks deals bonus damage.",
                            "longDesc": "Hitting a champion with 3 separate attacks or abilities deals bonus damage.",
                        }
                    ]
                }
            ],
        }
    ],
    "summoner.json": {
        "version": "0.0.0",
        "data": {
            "SummonerFlash": {
                "id": "SummonerFlash",
                "name": "Flash",
                "description": "Teleports your champion a short distance.",
                "tooltip": "Teleports your champion a short distance.",
                "maxrank": 1,
                "cooldown": [300],
                "cooldownBurn": "300",
                "cost": [0],
                "costBurn": "0",
                "effect": [None, [400]],
                "effectBurn": [None, "400"],
                "key": "4",
                "summonerLevel": 7,
                "modes": ["CLASSIC", "ARAM"],
                "costType": "&nbsp;",
                "maxammo": "-1",
                "range": [425],
                "rangeBurn": "425",
                "image": IMAGE,
                "resource": "No Cost",
            }
        },
    },
    "language.json": {
        "type": "language",
        "version": "0.0.0",
        "data": {"Back": "Back", "Continue": "Continue"},
        "tree": {"searchKeyIgnore": "", "searchKeyRemap": [{"k": "ä", "v": "a"}]},
    },
    "map.json": {
        "type": "map",
        "version": "0.0.0",
        "data": {
            "11": {
                "MapName": "Summoner's Rift",
                "MapId": "11",
                "image": {"full": "map11.png", "sprite": "map0.png", "group": "map", "x": 0, "y": 0, "w": 48, "h": 48},
            }
        },
    },
    "profileicon.json": {
        "type": "profileicon",
        "version": "0.0.0",
        "data": {
            "29": {
                "id": 29,
                "image": {"full": "29.png", "sprite": "profileicon0.png", "group": "profileicon", "x": 48, "y": 0, "w": 48, "h": 48},
            }
        },
    },
    "mission-assets.json": {
        "type": "mission-assets",
        "version": "0.0.0",
        "data": {
            "1": {
                "id": 1,
                "image": {"full": "1.png", "sprite": "mission0.png", "group": "mission", "x": 0, "y": 0, "w": 48, "h": 48},
            }
        },
    },
    "spellbuffs.json": {"SpellBuffs": [{"id": 1, "name": "Ignite"}]},
    "championFull.json": {
        "type": "champion",
        "format": "full",
        "version": "0.0.0",
        "keys": {"1": "Annie"},
        "data": {
            "Annie": {
                "id": "Annie",
                "key": "1",
                "name": "Annie",
                "title": "the Dark Child",
                "image": {"full": "Annie.png", "sprite": "champion0.png", "group": "champion", "x": 288, "y": 0, "w": 48, "h": 48},
                "skins": [{"id": "1000", "num": 0, "name": "default", "chromas": False}],
                "lore": "There have always been those within Noxus...",
                "blurb": "Dangerous, yet disarmingly precocious.",
                "allytips": ["Storing a stun can be useful."],
                "enemytips": ["Annie's summoned bear burns nearby units."],
                "tags": ["Mage"],
                "partype": "Mana",
                "info": {"attack": 2, "defense": 3, "magic": 10, "difficulty": 6},
                "stats": {
                    "hp": 560, "hpperlevel": 102, "mp": 418, "mpperlevel": 25,
                    "movespeed": 335, "armor": 23, "armorperlevel": 4, "spellblock": 30,
                    "spellblockperlevel": 1.3, "attackrange": 625, "hpregen": 5.5,
                    "hpregenperlevel": 0.55, "mpregen": 8, "mpregenperlevel": 0.8,
                    "crit": 0, "critperlevel": 0, "attackdamage": 50, "attackdamageperlevel": 2.65,
                    "attackspeedperlevel": 1.36, "attackspeed": 0.61,
                },
                "spells": [
                    {
                        "id": "AnnieQ",
                        "name": "Disintegrate",
                        "description": "Annie hurls a Mana infused fireball.",
                        "tooltip": "Annie hurls a fireball.",
                        "leveltip": {"label": ["Damage"], "effect": ["{{ e1 }} -> {{ e1NL }}"]},
                        "maxrank": 5,
                        "cooldown": [4, 4, 4, 4, 4],
                        "cooldownBurn": "4",
                        "cost": [60, 65, 70, 75, 80],
                        "costBurn": "60/65/70/75/80",
                        "effect": [None, [80, 115, 150, 185, 220]],
                        "effectBurn": [None, "80/115/150/185/220"],
                        "costType": " {{ abilityresourcename }}",
                        "maxammo": "-1",
                        "range": [625, 625, 625, 625, 625],
                        "rangeBurn": "625",
                        "image": {"full": "AnnieQ.png", "sprite": "spell1.png", "group": "spell", "x": 0, "y": 0, "w": 48, "h": 48},
                        "resource": "{{ cost }} {{ abilityresourcename }}",
                    }
                ],
                "passive": {
                    "name": "Pyromania",
                    "description": "After casting 4 spells, Annie's next damaging spell stuns.",
                    "image": {"full": "Annie_Passive.png", "sprite": "passive0.png", "group": "passive", "x": 0, "y": 0, "w": 48, "h": 48},
                },
                "recommended": [],
            }
        },
    },
}


class Publisher:
    """In-process stand-in for the Data Dragon host."""

    def __init__(self) -> None:
        self.routes: Dict[str, Tuple[int, bytes]] = {}
        self.hits: List[str] = []
        self.app = FastAPI()

        @self.app.get("/{path:path}")
        async def serve(path: str, request: Request) -> Response:
            self.hits.append(request.url.path)
            if request.url.path not in self.routes:
                return Response(status_code=404)
            status, body = self.routes[request.url.path]
            return Response(content=body, status_code=status, media_type="application/json")

    def serve(self, path: str, body, status: int = 200) -> None:
        if not isinstance(body, bytes):
            body = body.encode("utf-8") if isinstance(body, str) else json.dumps(body).encode("utf-8")
        self.routes[path] = (status, body)

    def serve_versions(self, versions: List[str]) -> None:
        self.serve("/api/versions.json", versions)

    def serve_document(self, filename: str, body, version: str = "0.0.0") -> None:
        self.serve(f"/cdn/{version}/data/en_US/{filename}", body)

    def hits_for(self, suffix: str) -> int:
        return sum(1 for hit in self.hits if hit.endswith(suffix))


class AppTransport:
    """Transport that routes requests into the publisher application."""

    def __init__(self, app: FastAPI) -> None:
        self._client = TestClient(app)
        self.requested: List[str] = []

    def get(self, url: str) -> bytes:
        self.requested.append(url)
        response = self._client.get(url)
        if response.status_code >= 400:
            raise RequestError(url, f"HTTP {response.status_code}")
        return response.content


@pytest.fixture
def documents():
    return copy.deepcopy(DOCUMENTS)


@pytest.fixture
def publisher():
    return Publisher()


@pytest.fixture
def transport(publisher):
    return AppTransport(publisher.app)


@pytest.fixture
def client(transport):
    """Client pinned to version ``0.0.0`` without a version lookup."""

    return DDragonClient(transport, "0.0.0", base_url=BASE_URL)


@pytest.fixture
def cached_client(transport, tmp_path):
    return DDragonClient(transport, "0.0.0", base_url=BASE_URL, cache_dir=tmp_path / "cache")
