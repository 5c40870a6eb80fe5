"""
Shared pytest fixtures for the external-game-data test suite.

Provides:
  - Sample Hypixel reply payloads (catalog, player).
  - ``mock_transport``: builds an ``httpx.MockTransport`` that serves a fixed
    reply and records every request it receives.
  - Sample holder factories for use in multiple test modules.
"""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from external_game_data.models.game import GameDataHolder
from external_game_data.models.game_list import GameListDataHolder

PLAYER_UUID = "f84c6a790a4e45e0879bcd49ebd4c4e2"


# ── Hypixel payloads ──────────────────────────────────────────────────────────

@pytest.fixture
def catalog_payload() -> dict[str, Any]:
    """A trimmed ``/resources/achievements`` reply with two minigames."""
    return {
        "success": True,
        "lastUpdated": 1700000000000,
        "achievements": {
            "arcade": {
                "one_time": {
                    "TREASURE_HUNTER": {
                        "name": "Treasure Hunter",
                        "description": "Find all the treasure",
                        "points": 10,
                        "gamePercentUnlocked": 4.5,
                        "globalPercentUnlocked": 1.25,
                    },
                    "FLASH_OF_LIGHT": {
                        "name": "Flash of Light",
                        "description": "A secret one",
                        "points": 5,
                        "secret": True,
                    },
                },
                "tiered": {
                    "COINS": {"name": "Coins", "tiers": [{"tier": 1, "amount": 10}]},
                },
            },
            "bedwars": {
                "one_time": {
                    "OLD_EVENT": {
                        "name": "Old Event",
                        "description": "No longer available",
                        "points": 20,
                        "legacy": True,
                    },
                },
            },
        },
    }


@pytest.fixture
def player_payload() -> dict[str, Any]:
    """A trimmed ``/player`` reply for ``PLAYER_UUID``."""
    return {
        "success": True,
        "player": {
            "uuid": PLAYER_UUID,
            "displayname": "Steve",
            "achievementsOneTime": ["arcade_treasure_hunter", "general_wizard"],
        },
    }


@pytest.fixture
def mock_transport() -> Callable[..., tuple[httpx.MockTransport, list[httpx.Request]]]:
    """Factory: ``mock_transport(payload, status_code=200)`` → (transport, requests).

    ``payload`` may be a dict (sent as JSON) or a str (sent as raw text).
    """

    def _build(payload: Any, status_code: int = 200):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if isinstance(payload, str):
                return httpx.Response(status_code, text=payload)
            return httpx.Response(status_code, json=payload)

        return httpx.MockTransport(handler), seen

    return _build


# ── Sample holder factories ───────────────────────────────────────────────────

@pytest.fixture
def sample_game() -> GameDataHolder:
    """A game with one earned and one locked achievement, already finalized."""
    game = GameDataHolder(title="Sample Game", external_id="sample")
    a = game.new_achievement()
    a.title = "A"
    a.external_id = "a1"
    a.unlocked = True
    b = game.new_achievement()
    b.title = "B"
    b.unlocked = False
    game.finalize_achievements()
    return game


@pytest.fixture
def sample_game_list() -> GameListDataHolder:
    """A list with two games holding 2 and 1 achievements."""
    game_list = GameListDataHolder()
    first = game_list.get_or_add_game("g1")
    first.new_achievement().title = "x"
    first.new_achievement().title = "y"
    game_list.get_or_add_game("g2").new_achievement().title = "z"
    return game_list
