"""``ChunkedSequence`` over tuples of arbitrary hashable items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from .base import SlicedSequence


@dataclass(frozen=True, slots=True, order=True)
class Items(SlicedSequence):
    """Tuple-backed sequence; each element is one atom."""

    data: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", tuple(self.data))

    @classmethod
    def of(cls, *elements: Any) -> "Items":
        return cls(elements)

    @classmethod
    def from_iterable(cls, elements: Iterable[Any]) -> "Items":
        return cls(tuple(elements))

    @property
    def element(self) -> Any:
        """The sole element of a one-atom value."""

        if len(self.data) != 1:
            raise ValueError(f"expected a single atom, got {len(self.data)}")
        return self.data[0]


__all__ = ["Items"]
