"""Position accumulators threaded through every fold, span and split.

Each tracker stores its positional fields flat; ``state`` packs them into one
of these tuples, and the generic machinery in :mod:`positioned.tracking.base`
moves them across atoms with ``advance`` (one atom) or ``scan`` (a whole
value). ``LineState.advance_char`` is the only place the line/column
transition is spelled out.
"""

from __future__ import annotations

from typing import Any, NamedTuple, Optional

from positioned.sequences import ChunkedSequence, is_textual

from .classify import TAB_WIDTH, CharClass, breaks_line, classify


class OffsetState(NamedTuple):
    offset: int = 0

    @property
    def is_sentinel(self) -> bool:
        return self.offset == 0

    def label(self) -> str:
        return str(self.offset)

    def advance_char(self, ch: Optional[str]) -> "OffsetState":
        del ch
        return OffsetState(self.offset + 1)

    def advance(self, atom: Any) -> "OffsetState":
        del atom
        return OffsetState(self.offset + 1)

    def scan(self, value: ChunkedSequence) -> "OffsetState":
        return OffsetState(self.offset + len(value))


class LineState(NamedTuple):
    """``offset`` counts visible atoms; ``column`` is ``offset - line_start``."""

    offset: int = 0
    line: int = 0
    line_start: int = -1

    @property
    def column(self) -> int:
        return self.offset - self.line_start

    @property
    def is_sentinel(self) -> bool:
        return self.offset == 0 and self.line == 0 and self.line_start == -1

    def label(self) -> str:
        return f"Line {self.line}, column {self.column}"

    def advance_char(self, ch: Optional[str]) -> "LineState":
        offset, line, line_start = self
        kind = classify(ch)
        if breaks_line(kind):
            return LineState(offset + 1, line + 1, offset)
        if kind is CharClass.CARRIAGE_RETURN:
            return LineState(offset + 1, line, offset)
        if kind is CharClass.TAB:
            stop = line_start + (offset - line_start) % TAB_WIDTH - TAB_WIDTH
            return LineState(offset + 1, line, stop)
        if kind is CharClass.ZERO_WIDTH:
            return self
        return LineState(offset + 1, line, line_start)

    def advance(self, atom: Any) -> "LineState":
        if is_textual(atom):
            return self.advance_char(atom.character_prefix())
        return self.advance_char(None)

    def scan(self, value: ChunkedSequence) -> "LineState":
        if is_textual(value):
            return value.foldl(LineState.advance, self)
        # atoms without a code point view are all ordinary
        return LineState(self.offset + len(value), self.line, self.line_start)

    @classmethod
    def at_column(cls, column: int) -> "LineState":
        return cls(0, 0, -column)


__all__ = ["OffsetState", "LineState"]
