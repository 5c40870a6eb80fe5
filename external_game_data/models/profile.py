"""Player profile holder — who the scanned account is."""

from __future__ import annotations

from typing import Optional

from external_game_data.models.holder import GenericHolder
from external_game_data.reporting.formatters import format_profile


class ProfileDataHolder(GenericHolder):
    """Identity of a player account at an external source.

    Attributes:
        main_identifier: Source-stable account id (e.g. a UUID).
        nickname: Current display name.
        avatar: URL of the avatar image, or ``None`` if unavailable.
    """

    main_identifier: Optional[str] = None
    nickname: Optional[str] = None
    avatar: Optional[str] = None

    def _render_success(self) -> str:
        return format_profile(self)
