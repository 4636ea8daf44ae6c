"""Capability interfaces the position trackers are generic over."""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    Iterator,
    Optional,
    Protocol,
    Tuple,
    TypeVar,
    runtime_checkable,
)

A = TypeVar("A")
S = TypeVar("S", bound="ChunkedSequence")
T = TypeVar("T", bound="TextualSequence")


@runtime_checkable
class ChunkedSequence(Protocol):
    """Immutable sequence of atoms with associative concatenation.

    Atoms are themselves one-atom values of the same type. Partial operations
    (splitting an empty value, stripping a missing prefix) return ``None``.
    """

    def __len__(self) -> int:
        ...

    def __iter__(self: S) -> Iterator[S]:
        ...

    def __add__(self: S, other: S) -> S:
        ...

    def is_empty(self) -> bool:
        ...

    def empty(self: S) -> S:
        """Return the identity element of this value's type."""
        ...

    def concat(self: S, other: S) -> S:
        ...

    def factors(self: S) -> list[S]:
        ...

    def prime_prefix(self: S) -> S:
        ...

    def split_prime_prefix(self: S) -> Optional[Tuple[S, S]]:
        """Split off the first atom: ``(atom, rest)``."""
        ...

    def split_prime_suffix(self: S) -> Optional[Tuple[S, S]]:
        """Split off the last atom: ``(rest, atom)``."""
        ...

    def is_prefix_of(self: S, other: S) -> bool:
        ...

    def strip_prefix(self: S, prefix: S) -> Optional[S]:
        ...

    def is_suffix_of(self: S, other: S) -> bool:
        ...

    def strip_suffix(self: S, suffix: S) -> Optional[S]:
        ...

    def common_prefix(self: S, other: S) -> S:
        ...

    def strip_common_prefix(self: S, other: S) -> Tuple[S, S, S]:
        """Return ``(prefix, self_rest, other_rest)``."""
        ...

    def common_suffix(self: S, other: S) -> S:
        ...

    def strip_common_suffix(self: S, other: S) -> Tuple[S, S, S]:
        """Return ``(self_rest, other_rest, suffix)``."""
        ...

    def split_at(self: S, n: int) -> Tuple[S, S]:
        ...

    def take(self: S, n: int) -> S:
        ...

    def drop(self: S, n: int) -> S:
        ...

    def foldl(self: S, f: Callable[[A, S], A], acc: A) -> A:
        ...

    def foldr(self: S, f: Callable[[S, A], A], acc: A) -> A:
        ...

    def fold_map(self: S, f: Callable[[S], A], initial: A) -> A:
        ...

    def span(self: S, pred: Callable[[S], bool]) -> Tuple[S, S]:
        ...

    def break_(self: S, pred: Callable[[S], bool]) -> Tuple[S, S]:
        ...

    def span_maybe(
        self: S, state: A, f: Callable[[A, S], Optional[A]]
    ) -> Tuple[S, S, A]:
        """Consume atoms while ``f`` returns a new state; ``None`` stops."""
        ...

    def reverse(self: S) -> S:
        ...


@runtime_checkable
class TextualSequence(ChunkedSequence, Protocol):
    """A ``ChunkedSequence`` whose atoms can be read as code points."""

    def character_prefix(self) -> Optional[str]:
        """The leading atom as a code point, if it is exactly one."""
        ...

    def split_character_prefix(self: T) -> Optional[Tuple[str, T]]:
        ...

    def map(self: T, f: Callable[[str], str]) -> T:
        ...

    def concat_map(self: T, f: Callable[[str], T]) -> T:
        ...

    def all(self, pred: Callable[[str], bool]) -> bool:
        ...

    def any(self, pred: Callable[[str], bool]) -> bool:
        ...

    def find(self, pred: Callable[[str], bool]) -> Optional[str]:
        ...

    def split(self: T, pred: Callable[[str], bool]) -> list[T]:
        ...

    def take_while(self: T, pred: Callable[[str], bool]) -> T:
        ...

    def drop_while(self: T, pred: Callable[[str], bool]) -> T:
        ...

    def scanl(self: T, f: Callable[[str, str], str], ch: str) -> T:
        ...

    def scanl1(self: T, f: Callable[[str, str], str]) -> T:
        ...

    def scanr(self: T, f: Callable[[str, str], str], ch: str) -> T:
        ...

    def scanr1(self: T, f: Callable[[str, str], str]) -> T:
        ...

    def map_accum_l(
        self: T, f: Callable[[A, str], Tuple[A, str]], acc: A
    ) -> Tuple[A, T]:
        """Map characters left to right while threading ``acc``."""
        ...

    def map_accum_r(
        self: T, f: Callable[[A, str], Tuple[A, str]], acc: A
    ) -> Tuple[A, T]:
        ...

    def span_chars(self: T, pred: Callable[[str], bool]) -> Tuple[T, T]:
        ...

    def break_chars(self: T, pred: Callable[[str], bool]) -> Tuple[T, T]:
        ...

    def to_string(self) -> str:
        ...


def is_textual(value: Any) -> bool:
    return isinstance(value, TextualSequence)


__all__ = ["ChunkedSequence", "TextualSequence", "is_textual"]
