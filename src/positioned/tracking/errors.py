"""Errors raised while building position trackers."""

from __future__ import annotations


class PositionError(ValueError):
    """Raised when a tracker is constructed with an impossible position."""

    def __init__(
        self, message: str, *, offset: int | None = None, line: int | None = None
    ) -> None:
        super().__init__(message)
        self.offset = offset
        self.line = line
