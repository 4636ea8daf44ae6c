"""Sequence capabilities and the reference implementations shipped with them."""

from .base import SlicedSequence
from .items import Items
from .protocols import ChunkedSequence, TextualSequence, is_textual
from .text import Text

__all__ = [
    "ChunkedSequence",
    "TextualSequence",
    "SlicedSequence",
    "Items",
    "Text",
    "is_textual",
]
