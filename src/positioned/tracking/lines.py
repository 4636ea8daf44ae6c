"""Line and column tracking for textual sequences.

Line numbers are zero-based, columns one-based, tabs stop every 8 columns and
zero-width marks take no room:

    >>> LineTracker.from_text("abcd\\nefgh\\nijkl\\nmnop\\n").drop(13)
    Line 2, column 4: Text('l\\nmnop\\n')
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from .base import Positioned
from .errors import PositionError
from .scanner import lines_columns
from .state import LineState

S = TypeVar("S")


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class LineTracker(Positioned[S]):
    """A textual value with its offset, line and line-start offset.

    ``offset`` counts visible atoms only. The sentinel ``(0, 0, -1)`` from
    ``lift`` reads as line 0, column 1.
    """

    offset: int
    line: int
    line_start: int
    value: S

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise PositionError(
                f"offset must be non-negative, got {self.offset}", offset=self.offset
            )
        if self.line < 0:
            raise PositionError(
                f"line must be non-negative, got {self.line}", line=self.line
            )

    @classmethod
    def initial_state(cls) -> LineState:
        return LineState()

    @property
    def state(self) -> LineState:
        return LineState(self.offset, self.line, self.line_start)

    @property
    def column(self) -> int:
        return self.offset - self.line_start

    def _rebased_across(self, prefix: Any) -> LineState:
        broken, trailing = lines_columns(prefix)
        offset = max(0, self.offset - len(prefix))
        line_start = offset - (self.offset - self.line_start - trailing + 1)
        line = 0 if self.line == 0 else max(0, self.line - broken)
        return LineState(offset, line, line_start)


def current_line(tracker: LineTracker[Any]) -> int:
    return tracker.line


def current_column(tracker: LineTracker[Any]) -> int:
    return tracker.column


__all__ = ["LineTracker", "current_column", "current_line"]
