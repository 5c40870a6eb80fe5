"""
Shared holder base — uniform error attachment and presentation.

Every model object a data source produces (achievement, game, game list,
profile) derives from ``GenericHolder``. A holder carries its parsed payload
plus at most one ``HolderError``:

  - ``error is None``  → payload is complete; ``render()`` shows the success view.
  - ``error`` is set   → payload must not be trusted; ``render()`` shows the
                          error code and message instead.

``render()`` is the single dispatch point between those two paths. Concrete
holders implement ``_render_success()`` only.

Holders are NOT frozen: a data-source parser fills them field by field during
one parse pass. ``validate_assignment`` keeps every assignment type-checked.
Once handed to a consumer, a holder is treated as a read-only snapshot.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from external_game_data.taxonomy.error_taxonomy import ErrorCode, worth_retrying


class HolderError(BaseModel):
    """An error attached to a holder.

    Attributes:
        code: Error kind from the taxonomy.
        message: Free-text diagnostic.
    """

    model_config = ConfigDict(frozen=True)

    code: ErrorCode
    message: str

    @property
    def worth_retrying(self) -> bool:
        """``False`` for permanent errors (privacy, not scannable)."""
        return worth_retrying(self.code)

    def render(self) -> str:
        return f"Error Code: {self.code.value} ({self.code.name})\nError: {self.message}"


class GenericHolder(BaseModel):
    """Base class giving every holder the same error handling."""

    model_config = ConfigDict(validate_assignment=True)

    error: Optional[HolderError] = None

    @property
    def has_error(self) -> bool:
        return self.error is not None

    def attach_error(self, code: ErrorCode, message: str) -> HolderError:
        """Attach an error to this holder, replacing any previous one.

        Args:
            code: Error kind.
            message: Diagnostic detail.

        Returns:
            The newly attached ``HolderError``.
        """
        self.error = HolderError(code=code, message=message)
        return self.error

    def render(self) -> str:
        """Return the human-readable debug view of this holder."""
        if self.error is None:
            return self._render_success()
        return self.error.render()

    def _render_success(self) -> str:
        raise NotImplementedError(
            f"{type(self).__name__} must implement _render_success()."
        )
