"""Offset-only position tracking for any chunked sequence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from .base import Positioned
from .errors import PositionError
from .state import OffsetState

S = TypeVar("S")


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class OffsetTracker(Positioned[S]):
    """A sequence value plus the number of atoms that preceded it.

    ``offset`` 0 means both "at the very start" and "never positioned".
    """

    offset: int
    value: S

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise PositionError(
                f"offset must be non-negative, got {self.offset}", offset=self.offset
            )

    @classmethod
    def initial_state(cls) -> OffsetState:
        return OffsetState()

    @property
    def state(self) -> OffsetState:
        return OffsetState(self.offset)

    def _rebased_across(self, prefix: Any) -> OffsetState:
        return OffsetState(max(0, self.offset - len(prefix)))


__all__ = ["OffsetTracker"]
