"""Error and spam taxonomies shared by every holder type."""

from external_game_data.taxonomy.error_taxonomy import (
    PERMANENT_ERROR_CODES,
    ErrorCode,
    SpamMode,
    worth_retrying,
)

__all__ = ["ErrorCode", "PERMANENT_ERROR_CODES", "SpamMode", "worth_retrying"]
