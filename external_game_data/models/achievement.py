"""
Achievement holder — one normalized achievement record.

Parsers create achievements through ``GameDataHolder.new_achievement()`` and
set whatever fields their source provides. ``finalize_fallback()`` must run
once after the parser is done, before the record reaches a consumer:

  1. Unlocked but no earn date → ``date_earned = now``, ``earned_offline = True``.
  2. No ``external_id``        → ``external_id = title``.

Icons may legitimately stay ``None``: many sources never expose them, and
that is a permanent "unavailable" state rather than an error.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from external_game_data.models.holder import GenericHolder
from external_game_data.reporting.formatters import format_achievement_line
from external_game_data.utils.time_utils import utcnow


class AchievementDataHolder(GenericHolder):
    """A single achievement as reported by an external source.

    Attributes:
        external_id: Source-stable identifier; ``None`` until the parser or
            ``finalize_fallback()`` assigns one.
        title: Display name.
        description: Display description.
        locked_icon: URL of the locked icon, or ``None`` if unavailable.
        unlocked_icon: URL of the unlocked icon, or ``None`` if unavailable.
        external_value: Source-specific point value.
        is_secret: ``True`` if the source hides this achievement until earned.
        unlocked: ``True`` if the player has earned it.
        date_earned: When it was earned (UTC), if known.
        earned_offline: ``True`` when unlocked but the exact earn time is unknown.
        external_url: Link to the achievement on the source site.
        is_limited_time_challenge: ``True`` for time-limited challenges.
        is_unobtainable: ``True`` if it can no longer be earned.
        external_rarity_percentage: Share of players holding it (0-100).
        expansion_id: Source identifier of the DLC/expansion it belongs to.
    """

    external_id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    locked_icon: Optional[str] = None
    unlocked_icon: Optional[str] = None
    external_value: Optional[int] = None
    is_secret: bool = False
    unlocked: bool = False
    date_earned: Optional[datetime] = None
    earned_offline: bool = False
    external_url: Optional[str] = None
    is_limited_time_challenge: bool = False
    is_unobtainable: bool = False
    external_rarity_percentage: Optional[float] = None
    expansion_id: Optional[str] = None

    @field_validator("external_rarity_percentage")
    @classmethod
    def validate_rarity(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and not 0.0 <= v <= 100.0:
            raise ValueError(f"external_rarity_percentage must be in [0, 100], got {v}.")
        return v

    def finalize_fallback(self) -> None:
        """Fill fields that can be derived when the source left them empty.

        Idempotent: once ``date_earned`` and ``external_id`` are set, a second
        call changes nothing.
        """
        if self.unlocked and self.date_earned is None:
            self.date_earned = utcnow()
            self.earned_offline = True
        if self.external_id is None:
            self.external_id = self.title

    def summary_line(self) -> str:
        """One-line debug summary (plus description line)."""
        return format_achievement_line(self)

    def _render_success(self) -> str:
        return self.summary_line()
