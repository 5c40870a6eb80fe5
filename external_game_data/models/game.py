"""
Game holder — one game's identity metadata plus its achievements.

Two-phase contract:
  1. Populate — the parser sets identity fields and appends achievements via
     ``new_achievement()``, then runs ``finalize_fallback()`` on each.
  2. Index    — ``generate_indices()`` builds ``hsh_achievements`` (all, keyed
     by ``external_id``) and ``hsh_earned_achievements`` (unlocked subset).

Indices are NOT maintained incrementally: achievement IDs may only be assigned
during fallback, so any index built earlier could be stale. Reading an index
before ``generate_indices()`` has run raises ``RuntimeError``.
``finalize_achievements()`` runs fallback on every achievement and then
generates the indices.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional

from pydantic import PrivateAttr, field_validator

from external_game_data.models.achievement import AchievementDataHolder
from external_game_data.models.holder import GenericHolder
from external_game_data.reporting.formatters import format_game

logger = logging.getLogger(__name__)


class GameDataHolder(GenericHolder):
    """A single external game and its achievements.

    Attributes:
        title: Display name of the game.
        external_id: Source-stable game identifier.
        image: URL of the game's header/box art.
        description: Display description.
        storelink: URL of the game's store page.
        external_score: Source-specific score for the whole game.
        sub_platform: Platform variant within the source (e.g. a console).
        playtime: Minutes played, if the source reports it.
        use_playtime_for_comparison: Rank by playtime instead of achievements.
        last_update: When the source last updated this game (UTC).
        information: Free-form source-specific key/value data.
        is_detected_as_spam: Set by an external heuristic; never by this model.
        earned_achievement_count_is_accurate: ``False`` when the source's
            earned count is known to be approximate.
        developers: Developer names.
        publishers: Publisher names.
        achievement_count: Source-reported total (may differ from
            ``len(achievements)`` for partial responses).
        earned_achievement_count: Source-reported earned total.
        achievements: Achievements in discovery order.
    """

    title: Optional[str] = None
    external_id: Optional[str] = None
    image: Optional[str] = None
    description: Optional[str] = None
    storelink: Optional[str] = None
    external_score: Optional[float] = None
    sub_platform: Optional[str] = None
    playtime: Optional[int] = None
    use_playtime_for_comparison: bool = False
    last_update: Optional[datetime] = None
    information: dict[str, Any] = {}
    is_detected_as_spam: bool = False
    earned_achievement_count_is_accurate: bool = True
    developers: list[str] = []
    publishers: list[str] = []
    achievement_count: int = 0
    earned_achievement_count: int = 0
    achievements: list[AchievementDataHolder] = []

    _hsh_achievements: Optional[dict[str, AchievementDataHolder]] = PrivateAttr(default=None)
    _hsh_earned_achievements: Optional[dict[str, AchievementDataHolder]] = PrivateAttr(default=None)

    @field_validator("playtime", "achievement_count", "earned_achievement_count")
    @classmethod
    def validate_non_negative(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 0:
            raise ValueError("Playtime and achievement counts must be non-negative.")
        return v

    def new_achievement(self) -> AchievementDataHolder:
        """Append an empty achievement and return it for the parser to fill."""
        achievement = AchievementDataHolder()
        self.achievements.append(achievement)
        return achievement

    def has_secret_achievement(self) -> bool:
        return any(a.is_secret for a in self.achievements)

    def generate_indices(self) -> None:
        """Build both achievement indices from the current sequence.

        Rebuilds from scratch on every call. When two achievements share an
        ``external_id`` the later one wins. An achievement that still has no
        ``external_id`` (no title to fall back to) is left out of both indices
        and logged; it stays in ``achievements``.
        """
        all_achievements: dict[str, AchievementDataHolder] = {}
        earned: dict[str, AchievementDataHolder] = {}
        for position, achievement in enumerate(self.achievements):
            if achievement.external_id is None:
                logger.warning(
                    "Achievement #%d of game %r has no external_id; not indexed.",
                    position, self.external_id,
                )
                continue
            all_achievements[achievement.external_id] = achievement
            if achievement.unlocked:
                earned[achievement.external_id] = achievement
        self._hsh_achievements = all_achievements
        self._hsh_earned_achievements = earned

    def finalize_achievements(self) -> None:
        """Run fallback on every achievement, then generate the indices."""
        for achievement in self.achievements:
            achievement.finalize_fallback()
        self.generate_indices()

    @property
    def indices_generated(self) -> bool:
        return self._hsh_achievements is not None

    @property
    def hsh_achievements(self) -> dict[str, AchievementDataHolder]:
        """All achievements keyed by ``external_id``."""
        if self._hsh_achievements is None:
            raise RuntimeError("Achievement indices not generated; call generate_indices() first.")
        return self._hsh_achievements

    @property
    def hsh_earned_achievements(self) -> dict[str, AchievementDataHolder]:
        """Unlocked achievements keyed by ``external_id``."""
        if self._hsh_earned_achievements is None:
            raise RuntimeError("Achievement indices not generated; call generate_indices() first.")
        return self._hsh_earned_achievements

    def _render_success(self) -> str:
        return format_game(self)
