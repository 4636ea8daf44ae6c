"""Position trackers and the bookkeeping rules behind them."""

from .base import Positioned, absolute_position, unwrap
from .classify import TAB_WIDTH, ZERO_WIDTH_MARKS, CharClass, breaks_line, classify
from .errors import PositionError
from .lines import LineTracker, current_column, current_line
from .offset import OffsetTracker
from .scanner import lines_columns
from .state import LineState, OffsetState

__all__ = [
    "Positioned",
    "OffsetTracker",
    "LineTracker",
    "OffsetState",
    "LineState",
    "PositionError",
    "CharClass",
    "TAB_WIDTH",
    "ZERO_WIDTH_MARKS",
    "breaks_line",
    "classify",
    "lines_columns",
    "unwrap",
    "absolute_position",
    "current_line",
    "current_column",
]
