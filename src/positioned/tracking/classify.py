"""Character classes that drive line and column bookkeeping."""

from __future__ import annotations

from enum import Enum
from typing import Optional

TAB_WIDTH = 8

ZERO_WIDTH_MARKS = frozenset(
    {
        "\u200b",  # zero width space
        "\u200c",  # zero width non-joiner
        "\u200d",  # zero width joiner
        "\ufeff",  # zero width no-break space
    }
)


class CharClass(str, Enum):
    LINE_BREAK = "line-break"
    FORM_FEED = "form-feed"
    CARRIAGE_RETURN = "carriage-return"
    TAB = "tab"
    ZERO_WIDTH = "zero-width"
    ORDINARY = "ordinary"


_SPECIAL = {
    "\n": CharClass.LINE_BREAK,
    "\f": CharClass.FORM_FEED,
    "\r": CharClass.CARRIAGE_RETURN,
    "\t": CharClass.TAB,
}
_SPECIAL.update({mark: CharClass.ZERO_WIDTH for mark in ZERO_WIDTH_MARKS})


def classify(ch: Optional[str]) -> CharClass:
    """Classify one atom given as its code point.

    ``None`` stands for an atom that is not exactly one code point and is
    always ordinary.
    """

    if ch is None:
        return CharClass.ORDINARY
    return _SPECIAL.get(ch, CharClass.ORDINARY)


def breaks_line(kind: CharClass) -> bool:
    return kind is CharClass.LINE_BREAK or kind is CharClass.FORM_FEED


__all__ = ["TAB_WIDTH", "ZERO_WIDTH_MARKS", "CharClass", "classify", "breaks_line"]
