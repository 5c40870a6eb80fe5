"""
Game list holder — an ordered, deduplicated collection of games.

``get_or_add_game()`` is the only way to add a game. It keeps the ordered
``games`` list and the private id lookup in lockstep, so every id in the
lookup refers to a game in the list (by identity) and vice versa.
"""

from __future__ import annotations

from typing import Any

from pydantic import PrivateAttr, field_validator

from external_game_data.models.game import GameDataHolder
from external_game_data.models.holder import GenericHolder
from external_game_data.reporting.formatters import format_game_list


class GameListDataHolder(GenericHolder):
    """Games discovered by a multi-game source.

    Attributes:
        games: Games in discovery order. Read-only for callers; add games
            through ``get_or_add_game()``.
        information: Free-form source-specific key/value data.
        page: Current page, or 0 when not paginated / unknown.
        pagecount: Total pages, or 0 when not paginated / unknown.
    """

    games: list[GameDataHolder] = []
    information: dict[str, Any] = {}
    page: int = 0
    pagecount: int = 0

    _game_id_lookup: dict[str, GameDataHolder] = PrivateAttr(default_factory=dict)

    @field_validator("page", "pagecount")
    @classmethod
    def validate_pagination(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"Pagination counters must be non-negative, got {v}.")
        return v

    def __len__(self) -> int:
        return len(self.games)

    def get_or_add_game(self, external_id: str) -> GameDataHolder:
        """Return the game with ``external_id``, creating it on first sight.

        Args:
            external_id: Source-stable game identifier.

        Returns:
            The existing ``GameDataHolder`` for this id, or a new one with
            ``external_id`` set and appended to ``games``.
        """
        game = self._game_id_lookup.get(external_id)
        if game is None:
            game = GameDataHolder(external_id=external_id)
            self.games.append(game)
            self._game_id_lookup[external_id] = game
        return game

    def total_achievement_count(self) -> int:
        """Sum of achievement counts over all games, recomputed per call."""
        return sum(len(game.achievements) for game in self.games)

    def _render_success(self) -> str:
        return format_game_list(self)
