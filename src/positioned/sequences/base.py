"""Shared ``ChunkedSequence`` implementation over sliceable payloads."""

from __future__ import annotations

from functools import reduce
from typing import Any, Callable, Iterator, Optional, Tuple, TypeVar

A = TypeVar("A")
Q = TypeVar("Q", bound="SlicedSequence")


def _common_prefix_length(left: Any, right: Any) -> int:
    count = 0
    for a, b in zip(left, right):
        if a != b:
            break
        count += 1
    return count


def _common_suffix_length(left: Any, right: Any) -> int:
    return _common_prefix_length(reversed(left), reversed(right))


class SlicedSequence:
    """Atoms are length-one slices of ``data``; subclasses are dataclasses."""

    __slots__ = ()

    data: Any

    def _wrap(self: Q, data: Any) -> Q:
        return type(self)(data)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self: Q) -> Iterator[Q]:
        data = self.data
        for index in range(len(data)):
            yield self._wrap(data[index : index + 1])

    def __add__(self: Q, other: object) -> Q:
        if type(other) is not type(self):
            return NotImplemented
        return self._wrap(self.data + other.data)  # type: ignore[attr-defined]

    def is_empty(self) -> bool:
        return not self.data

    def empty(self: Q) -> Q:
        return self._wrap(self.data[:0])

    def concat(self: Q, other: Q) -> Q:
        if type(other) is not type(self):
            raise TypeError(
                f"cannot concatenate {type(self).__name__} with {type(other).__name__}"
            )
        return self._wrap(self.data + other.data)

    def factors(self: Q) -> list[Q]:
        return list(self)

    def prime_prefix(self: Q) -> Q:
        return self._wrap(self.data[:1])

    def split_prime_prefix(self: Q) -> Optional[Tuple[Q, Q]]:
        if not self.data:
            return None
        return self._wrap(self.data[:1]), self._wrap(self.data[1:])

    def split_prime_suffix(self: Q) -> Optional[Tuple[Q, Q]]:
        if not self.data:
            return None
        return self._wrap(self.data[:-1]), self._wrap(self.data[-1:])

    def is_prefix_of(self: Q, other: Q) -> bool:
        return other.data[: len(self.data)] == self.data

    def strip_prefix(self: Q, prefix: Q) -> Optional[Q]:
        if not prefix.is_prefix_of(self):
            return None
        return self._wrap(self.data[len(prefix.data) :])

    def is_suffix_of(self: Q, other: Q) -> bool:
        if not self.data:
            return True
        return other.data[-len(self.data) :] == self.data

    def strip_suffix(self: Q, suffix: Q) -> Optional[Q]:
        if not suffix.is_suffix_of(self):
            return None
        return self._wrap(self.data[: len(self.data) - len(suffix.data)])

    def common_prefix(self: Q, other: Q) -> Q:
        return self.strip_common_prefix(other)[0]

    def strip_common_prefix(self: Q, other: Q) -> Tuple[Q, Q, Q]:
        n = _common_prefix_length(self.data, other.data)
        return (
            self._wrap(self.data[:n]),
            self._wrap(self.data[n:]),
            self._wrap(other.data[n:]),
        )

    def common_suffix(self: Q, other: Q) -> Q:
        return self.strip_common_suffix(other)[2]

    def strip_common_suffix(self: Q, other: Q) -> Tuple[Q, Q, Q]:
        n = _common_suffix_length(self.data, other.data)
        own = len(self.data) - n
        theirs = len(other.data) - n
        return (
            self._wrap(self.data[:own]),
            self._wrap(other.data[:theirs]),
            self._wrap(self.data[own:]),
        )

    def split_at(self: Q, n: int) -> Tuple[Q, Q]:
        n = max(0, n)
        return self._wrap(self.data[:n]), self._wrap(self.data[n:])

    def take(self: Q, n: int) -> Q:
        return self.split_at(n)[0]

    def drop(self: Q, n: int) -> Q:
        return self.split_at(n)[1]

    def foldl(self: Q, f: Callable[[A, Q], A], acc: A) -> A:
        return reduce(f, self, acc)

    def foldr(self: Q, f: Callable[[Q, A], A], acc: A) -> A:
        for atom in reversed(self.factors()):
            acc = f(atom, acc)
        return acc

    def fold_map(self: Q, f: Callable[[Q], A], initial: A) -> A:
        return reduce(lambda acc, atom: acc + f(atom), self, initial)  # type: ignore[operator]

    def span_maybe(
        self: Q, state: A, f: Callable[[A, Q], Optional[A]]
    ) -> Tuple[Q, Q, A]:
        count = 0
        for atom in self:
            advanced = f(state, atom)
            if advanced is None:
                break
            state = advanced
            count += 1
        return self._wrap(self.data[:count]), self._wrap(self.data[count:]), state

    def span(self: Q, pred: Callable[[Q], bool]) -> Tuple[Q, Q]:
        def step(_: object, atom: Q) -> Optional[bool]:
            return True if pred(atom) else None

        prefix, suffix, _ = self.span_maybe(None, step)
        return prefix, suffix

    def break_(self: Q, pred: Callable[[Q], bool]) -> Tuple[Q, Q]:
        return self.span(lambda atom: not pred(atom))

    def reverse(self: Q) -> Q:
        return self._wrap(self.data[::-1])


__all__ = ["SlicedSequence"]
