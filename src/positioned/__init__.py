"""Position-tracking wrappers for chunked and textual sequences."""

from .sequences import ChunkedSequence, Items, Text, TextualSequence
from .tracking import (
    LineState,
    LineTracker,
    OffsetState,
    OffsetTracker,
    PositionError,
    absolute_position,
    current_column,
    current_line,
    lines_columns,
    unwrap,
)

__all__ = [
    "ChunkedSequence",
    "TextualSequence",
    "Items",
    "Text",
    "OffsetTracker",
    "LineTracker",
    "OffsetState",
    "LineState",
    "PositionError",
    "absolute_position",
    "current_column",
    "current_line",
    "lines_columns",
    "unwrap",
    "runtime",
    "sequences",
    "tracking",
]

__version__ = "0.1.0"
