"""
Error taxonomy for holder-level failures.

Every holder may carry one ``HolderError`` whose ``code`` is an ``ErrorCode``.
The integer values are stable and safe to persist.

``worth_retrying()`` splits the codes into two groups:
  - permanent  — ``PRIVACY``, ``EXPLICITLY_NOT_SCANNABLE``; re-fetching will
                 return the same answer, so do not requeue.
  - transient  — everything else; a later attempt may succeed.

``SpamMode`` is a reserved extension point for a future tri-state spam
classification.  Nothing reads or writes it yet; ``GameDataHolder``'s boolean
``is_detected_as_spam`` is the authoritative spam signal.

This module has NO imports from any other ``external_game_data`` package.
"""

from enum import IntEnum


class ErrorCode(IntEnum):
    """Kind of failure attached to a holder."""

    UNKNOWN = 0
    """Unclassified failure (network, malformed response, missing success flag)."""

    PRIVACY = 1
    """The account or its data is privacy-protected."""

    PLAYER_NONEXISTENT = 2
    """The requested player does not exist at the source."""

    WRONG_DATA_RECEIVED = 3
    """The response shape or content did not match the request (e.g. another user)."""

    EXPLICITLY_NOT_SCANNABLE = 4
    """Fetched successfully, but the source declares it off-limits for scanning."""


class SpamMode(IntEnum):
    """Reserved tri-state spam classification (not yet wired in)."""

    UNKNOWN = 0
    SPAM = 1
    EXPLICITLY_NOT_SPAM = 2


PERMANENT_ERROR_CODES: frozenset[ErrorCode] = frozenset({
    ErrorCode.PRIVACY,
    ErrorCode.EXPLICITLY_NOT_SCANNABLE,
})


def worth_retrying(code: ErrorCode) -> bool:
    """Return ``True`` if re-invoking the data source could plausibly succeed.

    Args:
        code: The error kind to classify.

    Returns:
        ``False`` for permanent codes, ``True`` for all others.
    """
    return ErrorCode(code) not in PERMANENT_ERROR_CODES
