"""
Plain-text debug formatters for holders.

Each formatter takes a holder and returns a multi-line string suitable for
``typer.echo()``. They cover the success path only; ``GenericHolder.render()``
decides between these and the error view.

No guarantees about exact layout are made to machine consumers; what is
guaranteed is field coverage:

  game list   — game count, page/pagecount (only when either is nonzero),
                total achievement count, ``information`` entries.
  game        — spam marker, title, sub_platform, external_id, image,
                description, playtime, one summary per achievement,
                ``information`` entries.
  achievement — unlocked marker, title, id, icons, offline flag, value,
                secrecy, date earned, url, unobtainable flag, description.

This module imports holder types for annotations only, so holders can import
it freely.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Mapping

if TYPE_CHECKING:
    from external_game_data.models.achievement import AchievementDataHolder
    from external_game_data.models.game import GameDataHolder
    from external_game_data.models.game_list import GameListDataHolder
    from external_game_data.models.profile import ProfileDataHolder

SEPARATOR = "=" * 47
SPAM_MARKER = "* SPAM DETECTED *"


def _show(value: Any) -> str:
    """Render a field value; ``None`` becomes an empty string."""
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def format_information(information: Mapping[str, Any]) -> list[str]:
    """Return the ``=== information ===`` block, or no lines when empty."""
    if not information:
        return []
    lines = ["=== information ==="]
    for key, value in information.items():
        lines.append(f"{key}: {_show(value)}")
    return lines


# ── Achievement ──────────────────────────────────────────────────────────────


def format_achievement_line(achievement: "AchievementDataHolder") -> str:
    """Two-line achievement summary: the detail line, then the description.

    The marker is ``*U*`` for unlocked achievements and ``*-*`` otherwise::

        *U* 'Treasure Hunter', Ext_ID: arcade_treasure_hunter, icons:  & , eo: True, ...
        desc: Find all the treasure
    """
    marker = "U" if achievement.unlocked else "-"
    detail = (
        f"*{marker}* '{_show(achievement.title)}', "
        f"Ext_ID: {_show(achievement.external_id)}, "
        f"icons: {_show(achievement.locked_icon)} & {_show(achievement.unlocked_icon)}, "
        f"eo: {achievement.earned_offline}, "
        f"ev: {_show(achievement.external_value)}, "
        f"secr: {achievement.is_secret}, "
        f"date: {_show(achievement.date_earned)}, "
        f"ext_url: {_show(achievement.external_url)}, "
        f"unob: {achievement.is_unobtainable}"
    )
    return f"{detail}\ndesc: {_show(achievement.description)}"


# ── Game ─────────────────────────────────────────────────────────────────────


def format_game(game: "GameDataHolder") -> str:
    """Full debug view of one game, framed by separator lines."""
    lines: list[str] = [SEPARATOR]
    if game.is_detected_as_spam:
        lines.append(SPAM_MARKER)
    lines.append(f"Game title: {_show(game.title)}")
    if game.sub_platform:
        lines.append(f"Game sub_platform: {game.sub_platform}")
    lines.append(f"Game external_id: {_show(game.external_id)}")
    lines.append(f"Game image: {_show(game.image)}")
    lines.append(f"Game description: {_show(game.description)}")
    if game.playtime is not None:
        lines.append(f"Game playtime: {game.playtime}")
    for achievement in game.achievements:
        lines.append(format_achievement_line(achievement))
    lines.extend(format_information(game.information))
    lines.append(SEPARATOR)
    return "\n".join(lines)


# ── Game list ────────────────────────────────────────────────────────────────


def format_game_list(game_list: "GameListDataHolder") -> str:
    """Aggregate view of a game list (no per-game detail)."""
    lines: list[str] = [SEPARATOR]
    lines.append(f"Number of games: {len(game_list.games)}")
    if game_list.page > 0 or game_list.pagecount > 0:
        lines.append(f"Page {game_list.page} of {game_list.pagecount}")
    lines.append(f"Number of achievements: {game_list.total_achievement_count()}")
    lines.extend(format_information(game_list.information))
    return "\n".join(lines)


# ── Profile ──────────────────────────────────────────────────────────────────


def format_profile(profile: "ProfileDataHolder") -> str:
    return "\n".join([
        f"main_identifier: {_show(profile.main_identifier)}",
        f"nickname: {_show(profile.nickname)}",
        f"avatar: {_show(profile.avatar)}",
    ])
