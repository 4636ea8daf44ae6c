"""Generic position-tracking wrapper shared by both trackers.

A tracker pairs a sequence value with the state (see
:mod:`positioned.tracking.state`) it had inside the input it was cut from.
Everything here is written against that state's ``advance``/``scan`` so the
offset-only and line/column trackers share one implementation of every
decomposition and fold; subclasses supply the fields, the sentinel state and
the merge rebasing rule.
"""

from __future__ import annotations

from functools import reduce
from typing import Any, Callable, Generic, Iterator, Optional, Tuple, TypeVar

from positioned.runtime import telemetry
from positioned.sequences import Text

S = TypeVar("S")
A = TypeVar("A")
P = TypeVar("P", bound="Positioned[Any]")


def _by_offset(state: Any) -> int:
    return state.offset


class Positioned(Generic[S]):
    """Sequence value tagged with where it sits in a larger input.

    Equality, ordering and hashing look at ``value`` only.
    """

    __slots__ = ()

    offset: int
    value: S

    # -- construction -------------------------------------------------------

    @classmethod
    def initial_state(cls) -> Any:  # pragma: no cover - abstract override
        raise NotImplementedError

    @property
    def state(self) -> Any:  # pragma: no cover - abstract override
        raise NotImplementedError

    def _rebased_across(self, prefix: Any) -> Any:  # pragma: no cover - abstract override
        """State of ``self`` once ``prefix`` is glued in front of it."""

        raise NotImplementedError

    @classmethod
    def lift(cls: type[P], value: Any) -> P:
        return cls(*cls.initial_state(), value)

    @classmethod
    def from_text(cls: type[P], text: str) -> P:
        return cls.lift(Text(text))

    @classmethod
    def singleton(cls: type[P], ch: str) -> P:
        return cls.lift(Text.singleton(ch))

    def _at(self: P, state: Any, value: Any) -> P:
        return type(self)(*state, value)

    def _place(self: P, state: Any, value: Any) -> P:
        if value.is_empty():
            return self.lift(value)
        return self._at(state, value)

    def empty(self: P) -> P:
        return self.lift(self.value.empty())

    def map_value(self: P, f: Callable[[Any], Any]) -> P:
        return self._at(self.state, f(self.value))

    @property
    def position(self) -> int:
        return self.offset

    # -- comparison and display ---------------------------------------------

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value < other.value  # type: ignore[attr-defined, operator]

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value <= other.value  # type: ignore[attr-defined, operator]

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value > other.value  # type: ignore[attr-defined, operator]

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value >= other.value  # type: ignore[attr-defined, operator]

    def __hash__(self) -> int:
        return hash(self.value)

    def _describe(self, render: Callable[[Any], str]) -> str:
        state = self.state
        if state.is_sentinel:
            return render(self.value)
        return f"{state.label()}: {render(self.value)}"

    def __str__(self) -> str:
        return self._describe(str)

    def __repr__(self) -> str:
        return self._describe(repr)

    # -- monoid -------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.value)  # type: ignore[arg-type]

    def is_empty(self) -> bool:
        return self.value.is_empty()  # type: ignore[attr-defined]

    def __add__(self: P, other: object) -> P:
        if type(other) is not type(self):
            return NotImplemented
        return self.concat(other)  # type: ignore[arg-type]

    def concat(self: P, other: P) -> P:
        """Glue ``other`` after ``self``.

        A non-zero offset on ``self`` wins. Otherwise a positioned ``other``
        was cut from further along, and its state is walked back across
        ``self`` so the result starts where ``self`` would have.
        """

        if type(other) is not type(self):
            raise TypeError(
                f"cannot concatenate {type(self).__name__} with {type(other).__name__}"
            )
        value = self.value.concat(other.value)
        if self.offset != 0 or other.offset == 0:
            return self._at(self.state, value)
        state = other._rebased_across(self.value)
        telemetry.record_event(
            "positioned::rebase",
            level="debug",
            data={
                "tracker": type(self).__name__,
                "from": tuple(other.state),
                "to": tuple(state),
            },
        )
        return self._at(state, value)

    # -- atoms --------------------------------------------------------------

    def __iter__(self: P) -> Iterator[P]:
        state = self.state
        for atom in self.value:  # type: ignore[attr-defined]
            yield self._at(state, atom)
            state = state.advance(atom)

    def factors(self: P) -> list[P]:
        return list(self)

    def prime_prefix(self: P) -> P:
        return self._at(self.state, self.value.prime_prefix())

    def split_prime_prefix(self: P) -> Optional[Tuple[P, P]]:
        split = self.value.split_prime_prefix()
        if split is None:
            return None
        head, tail = split
        state = self.state
        return self._at(state, head), self._place(state.advance(head), tail)

    def split_prime_suffix(self: P) -> Optional[Tuple[P, P]]:
        split = self.value.split_prime_suffix()
        if split is None:
            return None
        init, last = split
        state = self.state
        return self._at(state, init), self._place(state.scan(init), last)

    # -- prefixes and suffixes ----------------------------------------------

    def is_prefix_of(self: P, other: P) -> bool:
        return self.value.is_prefix_of(other.value)

    def strip_prefix(self: P, prefix: P) -> Optional[P]:
        rest = self.value.strip_prefix(prefix.value)
        if rest is None:
            return None
        return self._place(self.state.scan(prefix.value), rest)

    def is_suffix_of(self: P, other: P) -> bool:
        return self.value.is_suffix_of(other.value)

    def strip_suffix(self: P, suffix: P) -> Optional[P]:
        rest = self.value.strip_suffix(suffix.value)
        if rest is None:
            return None
        return self._at(self.state, rest)

    def common_prefix(self: P, other: P) -> P:
        return self.strip_common_prefix(other)[0]

    def strip_common_prefix(self: P, other: P) -> Tuple[P, P, P]:
        prefix, own_rest, other_rest = self.value.strip_common_prefix(other.value)
        own, theirs = self.state, other.state
        start = min(own, theirs, key=_by_offset)
        return (
            self._at(start, prefix),
            self._place(own.scan(prefix), own_rest),
            self._place(theirs.scan(prefix), other_rest),
        )

    def common_suffix(self: P, other: P) -> P:
        return self.strip_common_suffix(other)[2]

    def strip_common_suffix(self: P, other: P) -> Tuple[P, P, P]:
        own_rest, other_rest, suffix = self.value.strip_common_suffix(other.value)
        own, theirs = self.state, other.state
        start = min(own.scan(own_rest), theirs.scan(other_rest), key=_by_offset)
        return (
            self._at(own, own_rest),
            self._at(theirs, other_rest),
            self._place(start, suffix),
        )

    # -- positional splits --------------------------------------------------

    def split_at(self: P, n: int) -> Tuple[P, P]:
        prefix, suffix = self.value.split_at(n)
        state = self.state
        return (
            self._place(state, prefix),
            self._place(state.scan(prefix), suffix),
        )

    def take(self: P, n: int) -> P:
        return self._at(self.state, self.value.take(n))

    def drop(self: P, n: int) -> P:
        return self.split_at(n)[1]

    def reverse(self: P) -> P:
        return self._at(self.state, self.value.reverse())

    # -- folds and spans ----------------------------------------------------

    def foldl(self: P, f: Callable[[A, P], A], acc: A) -> A:
        return reduce(f, self, acc)

    def foldr(self: P, f: Callable[[P, A], A], acc: A) -> A:
        for atom in reversed(self.factors()):
            acc = f(atom, acc)
        return acc

    def fold_map(self: P, f: Callable[[P], A], initial: A) -> A:
        return reduce(lambda acc, atom: acc + f(atom), self, initial)  # type: ignore[operator]

    def span_maybe(
        self: P, seed: A, f: Callable[[A, P], Optional[A]]
    ) -> Tuple[P, P, A]:
        """Consume atoms while ``f(acc, atom)`` returns a new accumulator.

        Returns the consumed prefix, the positioned rest and the last
        accumulator; ``None`` from ``f`` stops before that atom.
        """

        def step(carry: Tuple[A, Any], atom: Any) -> Optional[Tuple[A, Any]]:
            acc, state = carry
            advanced = f(acc, self._at(state, atom))
            if advanced is None:
                return None
            return advanced, state.advance(atom)

        start = self.state
        prefix, suffix, (acc, state) = self.value.span_maybe((seed, start), step)
        return self._at(start, prefix), self._place(state, suffix), acc

    def span(self: P, pred: Callable[[P], bool]) -> Tuple[P, P]:
        def step(state: Any, atom: Any) -> Any:
            if pred(self._at(state, atom)):
                return state.advance(atom)
            return None

        start = self.state
        prefix, suffix, state = self.value.span_maybe(start, step)
        return self._at(start, prefix), self._place(state, suffix)

    def break_(self: P, pred: Callable[[P], bool]) -> Tuple[P, P]:
        return self.span(lambda atom: not pred(atom))

    # -- textual ------------------------------------------------------------

    def character_prefix(self) -> Optional[str]:
        return self.value.character_prefix()  # type: ignore[attr-defined]

    def split_character_prefix(self: P) -> Optional[Tuple[str, P]]:
        split = self.value.split_character_prefix()  # type: ignore[attr-defined]
        if split is None:
            return None
        ch, rest = split
        return ch, self._place(self.state.advance_char(ch), rest)

    def map(self: P, f: Callable[[str], str]) -> P:
        return self._at(self.state, self.value.map(f))  # type: ignore[attr-defined]

    def concat_map(self: P, f: Callable[[str], P]) -> P:
        value = self.value.concat_map(lambda ch: f(ch).value)  # type: ignore[attr-defined]
        return self._at(self.state, value)

    def all(self, pred: Callable[[str], bool]) -> bool:
        return self.value.all(pred)  # type: ignore[attr-defined]

    def any(self, pred: Callable[[str], bool]) -> bool:
        return self.value.any(pred)  # type: ignore[attr-defined]

    def find(self, pred: Callable[[str], bool]) -> Optional[str]:
        return self.value.find(pred)  # type: ignore[attr-defined]

    def take_while(self: P, pred: Callable[[str], bool]) -> P:
        return self._at(self.state, self.value.take_while(pred))  # type: ignore[attr-defined]

    def drop_while(self: P, pred: Callable[[str], bool]) -> P:
        return self.span_chars(pred)[1]

    # scans and accumulating maps keep the tracker's position

    def scanl(self: P, f: Callable[[str, str], str], ch: str) -> P:
        return self.map_value(lambda value: value.scanl(f, ch))

    def scanl1(self: P, f: Callable[[str, str], str]) -> P:
        return self.map_value(lambda value: value.scanl1(f))

    def scanr(self: P, f: Callable[[str, str], str], ch: str) -> P:
        return self.map_value(lambda value: value.scanr(f, ch))

    def scanr1(self: P, f: Callable[[str, str], str]) -> P:
        return self.map_value(lambda value: value.scanr1(f))

    def map_accum_l(
        self: P, f: Callable[[A, str], Tuple[A, str]], acc: A
    ) -> Tuple[A, P]:
        acc, value = self.value.map_accum_l(f, acc)  # type: ignore[attr-defined]
        return acc, self._at(self.state, value)

    def map_accum_r(
        self: P, f: Callable[[A, str], Tuple[A, str]], acc: A
    ) -> Tuple[A, P]:
        acc, value = self.value.map_accum_r(f, acc)  # type: ignore[attr-defined]
        return acc, self._at(self.state, value)

    def span_chars(self: P, pred: Callable[[str], bool]) -> Tuple[P, P]:
        return self.span(lambda atom: _char_matches(atom, pred))

    def break_chars(self: P, pred: Callable[[str], bool]) -> Tuple[P, P]:
        return self.span(lambda atom: not _char_matches(atom, pred))

    def split(self: P, pred: Callable[[str], bool]) -> list[P]:
        """Split on characters matching ``pred``, dropping the separators.

        Every piece keeps the position it had in ``self``; ``n`` separators
        always give ``n + 1`` pieces.
        """

        with telemetry.span(
            "tracking::split",
            component="tracking",
            data={"tracker": type(self).__name__, "length": len(self)},
        ) as fields:
            pieces: list[P] = []
            rest = self
            while True:
                piece, rest = rest.break_chars(pred)
                pieces.append(piece)
                separated = rest.split_character_prefix()
                if separated is None:
                    break
                rest = separated[1]
            fields["pieces"] = len(pieces)
            return pieces

    def to_string(self) -> str:
        return self.value.to_string()  # type: ignore[attr-defined]


def _char_matches(atom: Positioned[Any], pred: Callable[[str], bool]) -> bool:
    ch = atom.character_prefix()
    return ch is not None and pred(ch)


def unwrap(tracker: Positioned[S]) -> S:
    return tracker.value


def absolute_position(tracker: Positioned[Any]) -> int:
    return tracker.offset


__all__ = ["Positioned", "absolute_position", "unwrap"]
