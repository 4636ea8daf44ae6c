"""Measure how a fragment moves the line/column cursor."""

from __future__ import annotations

from typing import Tuple

from positioned.sequences import ChunkedSequence

from .state import LineState


def lines_columns(value: ChunkedSequence, column: int = 1) -> Tuple[int, int]:
    """Return ``(line_breaks, trailing_column)`` after scanning ``value``.

    Scanning starts at ``column`` (1-based) on line zero. Carriage returns
    reset the column without counting a line, so ``"\\r\\n"`` is a single
    break: ``lines_columns(Text("ab\\tc\\r\\nde"))`` is ``(1, 3)``.
    """

    state = LineState.at_column(column).scan(value)
    return state.line, state.column


__all__ = ["lines_columns"]
