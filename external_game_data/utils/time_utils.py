"""
Time helpers.

All timestamps in the model are timezone-aware UTC datetimes. Sources that
report epoch milliseconds (Hypixel does) convert through
``from_epoch_millis()``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Return the current UTC datetime with timezone info.

    Prefer this over ``datetime.utcnow()`` (which returns naive datetimes).
    """
    return datetime.now(tz=timezone.utc)


def from_epoch_millis(value: Optional[int]) -> Optional[datetime]:
    """Convert epoch milliseconds to a UTC datetime.

    Returns ``None`` for ``None`` and for ``0`` (sources use 0 for "never").

    Args:
        value: Milliseconds since the Unix epoch.

    Returns:
        Timezone-aware UTC datetime, or ``None``.

    Raises:
        ValueError: If ``value`` is negative.
    """
    if not value:
        return None
    if value < 0:
        raise ValueError(f"Epoch milliseconds must be non-negative, got {value}.")
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
