"""
Hypixel public API client — parses provider JSON into the holder model.

API:   https://api.hypixel.net/v2/
Docs:  https://api.hypixel.net/

Credential setup (.env, gitignored):
  HYPIXEL_API_KEY=your_key   # from https://developer.hypixel.net/dashboard

Endpoints used:
  Achievement catalog (public, no key):
    GET /resources/achievements
    → {"success": true, "achievements": {"<minigame>": {"one_time": {"<KEY>": {...}}}}}
  Player (requires ``API-Key`` header):
    GET /player?uuid=<uuid>
    → {"success": true, "player": {"uuid": ..., "achievementsOneTime": [...]}}

Contract: every public ``fetch_*`` method returns a holder and never raises.
Any failure is logged here (with traceback) and surfaces to the caller only as
the holder's attached ``error``; an errored holder carries no achievements.

  - transport / HTTP status / JSON / missing ``success`` / bad shape → UNKNOWN
  - ``"player": null`` in a successful reply                          → PLAYER_NONEXISTENT
  - reply for a different uuid than requested                         → WRONG_DATA_RECEIVED

Usage::

    from external_game_data.config import load_config

    client = HypixelClient.from_config(load_config().hypixel)
    game = client.fetch_user("f84c6a790a4e45e0879bcd49ebd4c4e2")
    print(game.render())
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Optional

import httpx

from external_game_data.config import HypixelConfig
from external_game_data.models.game import GameDataHolder
from external_game_data.models.game_list import GameListDataHolder
from external_game_data.models.profile import ProfileDataHolder
from external_game_data.taxonomy.error_taxonomy import ErrorCode
from external_game_data.utils.time_utils import from_epoch_millis

logger = logging.getLogger(__name__)


class HypixelError(Exception):
    """A classified failure detected while reading a Hypixel reply."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code


def normalize_uuid(uuid: str) -> str:
    """Lowercase a Minecraft uuid and strip dashes for comparison."""
    return uuid.replace("-", "").strip().lower()


class HypixelClient:
    """Client for the Hypixel achievement catalog and player achievements.

    Attributes:
        api_key: Key sent as the ``API-Key`` header on player requests.
        base_url: API root, e.g. ``"https://api.hypixel.net/v2"``.
        timeout_seconds: Per-request timeout.
    """

    GAME_EXTERNAL_ID: ClassVar[str] = "hypixel"
    GAME_TITLE: ClassVar[str] = "Hypixel"
    ACHIEVEMENTS_PATH: ClassVar[str] = "/resources/achievements"
    PLAYER_PATH: ClassVar[str] = "/player"
    AVATAR_URL_TEMPLATE: ClassVar[str] = "https://crafatar.com/avatars/{uuid}"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = "https://api.hypixel.net/v2",
        timeout_seconds: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialise the Hypixel client.

        Args:
            api_key: API key for player endpoints. ``None`` → player requests
                are still sent, and Hypixel's rejection becomes a holder error.
            base_url: API root without trailing slash.
            timeout_seconds: Per-request timeout in seconds.
            transport: Optional httpx transport (tests pass ``httpx.MockTransport``).
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    @classmethod
    def from_config(
        cls,
        config: HypixelConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "HypixelClient":
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
            transport=transport,
        )

    # ── Public fetch operations ───────────────────────────────────────────────

    def fetch_game(self) -> GameDataHolder:
        """Fetch the full one-time achievement catalog as a single game."""
        try:
            data = self._get_json(self.ACHIEVEMENTS_PATH)
            game = self._new_game()
            game.last_update = from_epoch_millis(data.get("lastUpdated"))
            catalog = data["achievements"]
            for minigame, key, raw in self._iter_catalog(catalog):
                self._fill_catalog_achievement(game, minigame, key, raw)
            game.achievement_count = len(game.achievements)
            game.information["minigames"] = len(catalog)
            game.finalize_achievements()
        except Exception as exc:
            return self._failed(GameDataHolder(), exc, "Hypixel catalog fetch failed")

        logger.info("Hypixel catalog: %d achievements parsed", len(game.achievements))
        return game

    def fetch_game_list(self) -> GameListDataHolder:
        """Fetch the achievement catalog grouped into one game per minigame."""
        try:
            data = self._get_json(self.ACHIEVEMENTS_PATH)
            game_list = GameListDataHolder()
            game_list.information["source"] = self.GAME_EXTERNAL_ID
            for minigame, key, raw in self._iter_catalog(data["achievements"]):
                game = game_list.get_or_add_game(minigame.lower())
                if game.title is None:
                    game.title = minigame
                    game.sub_platform = self.GAME_TITLE
                    game.last_update = from_epoch_millis(data.get("lastUpdated"))
                self._fill_catalog_achievement(game, minigame, key, raw)
            for game in game_list.games:
                game.achievement_count = len(game.achievements)
                game.finalize_achievements()
        except Exception as exc:
            return self._failed(GameListDataHolder(), exc, "Hypixel game list fetch failed")

        logger.info(
            "Hypixel catalog: %d minigames, %d achievements",
            len(game_list), game_list.total_achievement_count(),
        )
        return game_list

    def fetch_user(self, uuid: str) -> GameDataHolder:
        """Fetch one player's earned one-time achievements.

        Hypixel does not report earn times for one-time achievements, so every
        entry is finalized as earned offline at fetch time.
        """
        try:
            player = self._get_player(uuid)
            game = self._new_game()
            game.information["player"] = player.get("displayname") or uuid
            for entry in player.get("achievementsOneTime") or []:
                if not isinstance(entry, str) or not entry:
                    logger.debug("Skipping malformed achievementsOneTime entry: %r", entry)
                    continue
                a = game.new_achievement()
                a.external_id = entry
                a.unlocked = True
                a.earned_offline = False
            game.earned_achievement_count = len(game.achievements)
            game.finalize_achievements()
        except Exception as exc:
            return self._failed(GameDataHolder(), exc, f"Hypixel player fetch failed for {uuid}")

        logger.info(
            "Hypixel player %s: %d earned achievements", uuid, len(game.achievements)
        )
        return game

    def fetch_profile(self, uuid: str) -> ProfileDataHolder:
        """Fetch a player's identity (uuid, display name and avatar URL).

        Hypixel serves no skins, so the avatar points at the Crafatar head
        render for the player's uuid.
        """
        try:
            player = self._get_player(uuid)
            main_identifier = normalize_uuid(player.get("uuid") or uuid)
            profile = ProfileDataHolder(
                main_identifier=main_identifier,
                nickname=player.get("displayname"),
                avatar=self.AVATAR_URL_TEMPLATE.format(uuid=main_identifier),
            )
        except Exception as exc:
            return self._failed(ProfileDataHolder(), exc, f"Hypixel profile fetch failed for {uuid}")
        return profile

    # ── HTTP ──────────────────────────────────────────────────────────────────

    def _get_json(self, path: str, params: Optional[dict[str, str]] = None, authenticated: bool = False) -> dict[str, Any]:
        """GET ``path`` and return the decoded reply.

        Raises:
            httpx.HTTPError: On transport failure or non-2xx status.
            ValueError: If the body is not JSON.
            HypixelError: If the reply is not an object with ``success: true``.
        """
        headers: dict[str, str] = {}
        if authenticated:
            if not self.api_key:
                logger.warning("HYPIXEL_API_KEY is not set; player request will likely be rejected.")
            headers["API-Key"] = self.api_key or ""

        with httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout_seconds,
            transport=self._transport,
        ) as client:
            resp = client.get(path, params=params, headers=headers)
            resp.raise_for_status()
            data = resp.json()

        if not isinstance(data, dict) or not data.get("success"):
            cause = data.get("cause") if isinstance(data, dict) else None
            message = "no successful reply received"
            if cause:
                message = f"{message}: {cause}"
            raise HypixelError(ErrorCode.UNKNOWN, message)
        return data

    def _get_player(self, uuid: str) -> dict[str, Any]:
        data = self._get_json(self.PLAYER_PATH, params={"uuid": uuid}, authenticated=True)
        player = data.get("player")
        if player is None:
            raise HypixelError(ErrorCode.PLAYER_NONEXISTENT, f"player {uuid} does not exist")
        reported = player.get("uuid")
        if reported and normalize_uuid(reported) != normalize_uuid(uuid):
            raise HypixelError(
                ErrorCode.WRONG_DATA_RECEIVED,
                f"requested player {uuid} but received {reported}",
            )
        return player

    # ── Parsing helpers ───────────────────────────────────────────────────────

    def _new_game(self) -> GameDataHolder:
        return GameDataHolder(external_id=self.GAME_EXTERNAL_ID, title=self.GAME_TITLE)

    @staticmethod
    def _iter_catalog(catalog: dict[str, Any]):
        """Yield ``(minigame, key, raw)`` for every one-time achievement."""
        for minigame, sections in catalog.items():
            for key, raw in (sections.get("one_time") or {}).items():
                yield minigame, key, raw

    @staticmethod
    def _fill_catalog_achievement(
        game: GameDataHolder, minigame: str, key: str, raw: dict[str, Any]
    ) -> None:
        a = game.new_achievement()
        a.external_id = f"{minigame}_{key}".lower()
        a.title = raw.get("name")
        a.description = raw.get("description")
        a.external_value = raw.get("points")
        a.external_rarity_percentage = raw.get("globalPercentUnlocked")
        a.is_secret = bool(raw.get("secret", False))
        a.is_unobtainable = bool(raw.get("legacy", False))

    @staticmethod
    def _failed(holder, exc: Exception, context: str):
        """Attach ``exc`` to ``holder`` as an error and log the diagnostic."""
        if isinstance(exc, HypixelError):
            logger.error("%s: %s", context, exc, extra={"error_code": exc.code.name})
            holder.attach_error(exc.code, str(exc))
        else:
            logger.exception("%s: %s", context, exc, extra={"error_code": ErrorCode.UNKNOWN.name})
            holder.attach_error(ErrorCode.UNKNOWN, str(exc) or type(exc).__name__)
        return holder
