"""``TextualSequence`` over Python strings, one code point per atom."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import accumulate
from typing import Callable, Optional, Tuple, TypeVar

from .base import SlicedSequence

A = TypeVar("A")


@dataclass(frozen=True, slots=True, order=True, repr=False)
class Text(SlicedSequence):
    """Immutable string value exposing the textual sequence capability."""

    data: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.data, str):
            raise TypeError(f"Text requires str data, got {type(self.data).__name__}")

    @classmethod
    def singleton(cls, ch: str) -> "Text":
        if len(ch) != 1:
            raise ValueError(f"expected a single code point, got {ch!r}")
        return cls(ch)

    def __str__(self) -> str:
        return self.data

    def __repr__(self) -> str:
        return f"Text({self.data!r})"

    def character_prefix(self) -> Optional[str]:
        return self.data[0] if self.data else None

    def split_character_prefix(self) -> Optional[Tuple[str, "Text"]]:
        if not self.data:
            return None
        return self.data[0], Text(self.data[1:])

    def map(self, f: Callable[[str], str]) -> "Text":
        return Text("".join(f(ch) for ch in self.data))

    def concat_map(self, f: Callable[[str], "Text"]) -> "Text":
        return Text("".join(f(ch).data for ch in self.data))

    def all(self, pred: Callable[[str], bool]) -> bool:
        return all(pred(ch) for ch in self.data)

    def any(self, pred: Callable[[str], bool]) -> bool:
        return any(pred(ch) for ch in self.data)

    def find(self, pred: Callable[[str], bool]) -> Optional[str]:
        return next((ch for ch in self.data if pred(ch)), None)

    def split(self, pred: Callable[[str], bool]) -> list["Text"]:
        """Split on every character matching ``pred``; separators are dropped."""

        pieces: list[Text] = []
        start = 0
        for index, ch in enumerate(self.data):
            if pred(ch):
                pieces.append(Text(self.data[start:index]))
                start = index + 1
        pieces.append(Text(self.data[start:]))
        return pieces

    def take_while(self, pred: Callable[[str], bool]) -> "Text":
        return self.span_chars(pred)[0]

    def drop_while(self, pred: Callable[[str], bool]) -> "Text":
        return self.span_chars(pred)[1]

    def scanl(self, f: Callable[[str, str], str], ch: str) -> "Text":
        """Running left fold seeded with ``ch``; one character longer than ``self``."""

        return Text("".join(accumulate(self.data, f, initial=ch)))

    def scanl1(self, f: Callable[[str, str], str]) -> "Text":
        return Text("".join(accumulate(self.data, f)))

    def scanr(self, f: Callable[[str, str], str], ch: str) -> "Text":
        steps = accumulate(reversed(self.data), lambda acc, c: f(c, acc), initial=ch)
        return Text("".join(list(steps)[::-1]))

    def scanr1(self, f: Callable[[str, str], str]) -> "Text":
        steps = accumulate(reversed(self.data), lambda acc, c: f(c, acc))
        return Text("".join(list(steps)[::-1]))

    def map_accum_l(
        self, f: Callable[[A, str], Tuple[A, str]], acc: A
    ) -> Tuple[A, "Text"]:
        out: list[str] = []
        for ch in self.data:
            acc, mapped = f(acc, ch)
            out.append(mapped)
        return acc, Text("".join(out))

    def map_accum_r(
        self, f: Callable[[A, str], Tuple[A, str]], acc: A
    ) -> Tuple[A, "Text"]:
        out: list[str] = []
        for ch in reversed(self.data):
            acc, mapped = f(acc, ch)
            out.append(mapped)
        return acc, Text("".join(reversed(out)))

    def span_chars(self, pred: Callable[[str], bool]) -> Tuple["Text", "Text"]:
        end = 0
        for ch in self.data:
            if not pred(ch):
                break
            end += 1
        return Text(self.data[:end]), Text(self.data[end:])

    def break_chars(self, pred: Callable[[str], bool]) -> Tuple["Text", "Text"]:
        return self.span_chars(lambda ch: not pred(ch))

    def to_string(self) -> str:
        return self.data


__all__ = ["Text"]
