"""
Intermediate game/achievement model.

Data-source parsers write into these holders; consumers (debug printers,
database writers) read only these holders, never provider responses.
"""

from external_game_data.models.achievement import AchievementDataHolder
from external_game_data.models.game import GameDataHolder
from external_game_data.models.game_list import GameListDataHolder
from external_game_data.models.holder import GenericHolder, HolderError
from external_game_data.models.profile import ProfileDataHolder

__all__ = [
    "AchievementDataHolder",
    "GameDataHolder",
    "GameListDataHolder",
    "GenericHolder",
    "HolderError",
    "ProfileDataHolder",
]
