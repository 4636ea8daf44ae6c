import pytest

from positioned import (
    Items,
    LineState,
    LineTracker,
    OffsetTracker,
    PositionError,
    Text,
    current_column,
    current_line,
)

MIXED = "ab\tc\r\nd\u200be\nf"


def make_tracker(text: str = MIXED) -> LineTracker[Text]:
    return LineTracker.from_text(text)


def test_drop_reports_line_and_column() -> None:
    rest = make_tracker("abcd\nefgh\nijkl\nmnop\n").drop(13)

    assert (rest.offset, rest.line, rest.column) == (13, 2, 4)
    assert str(rest) == "Line 2, column 4: l\nmnop\n"
    assert repr(rest) == "Line 2, column 4: Text('l\\nmnop\\n')"


def test_lifted_tracker_prints_bare_value() -> None:
    tracker = make_tracker("ab")

    assert tracker.state == LineState(0, 0, -1)
    assert tracker.column == 1
    assert str(tracker) == "ab"


def test_tab_advances_to_next_stop() -> None:
    assert [atom.column for atom in make_tracker("a\tb")] == [1, 2, 9]
    assert make_tracker("x\ty").foldl(lambda acc, atom: acc + [atom.column], []) == [
        1,
        2,
        9,
    ]


def test_zero_width_marks_take_no_room() -> None:
    tracker = make_tracker("a\u200bb")

    assert [atom.column for atom in tracker] == [1, 2, 2]
    rest = tracker.drop(2)
    assert (rest.offset, rest.column, rest.value) == (1, 2, Text("b"))


def test_carriage_return_and_form_feed() -> None:
    rest = make_tracker("\r\nx").drop(2)
    assert (rest.line, rest.column) == (1, 1)
    assert str(rest) == "Line 1, column 1: x"

    after_feed = make_tracker("a\fb").drop(2)
    assert (after_feed.line, after_feed.column) == (1, 1)


def test_dropping_in_steps_matches_dropping_at_once() -> None:
    tracker = make_tracker()

    assert tracker.drop(3).drop(4).state == tracker.drop(7).state
    assert tracker.drop(7).state == LineState(7, 1, 5)


@pytest.mark.parametrize("k", range(-1, 13))
def test_take_then_drop_round_trips(k: int) -> None:
    tracker = make_tracker()

    merged = tracker.take(k) + tracker.drop(k)

    assert merged == tracker
    assert merged.state == tracker.state


def test_concatenation_is_associative_over_split_pieces() -> None:
    tracker = make_tracker()
    a = tracker.take(2)
    b = tracker.drop(2).take(5)
    c = tracker.drop(7)

    assert b.state == LineState(2, 0, -1)
    assert c.state == LineState(7, 1, 5)
    left = (a + b) + c
    right = a + (b + c)
    assert left == right == tracker
    assert left.state == right.state == LineState()


def test_lifted_empty_is_an_identity() -> None:
    piece = make_tracker().drop(7)
    empty = piece.empty()

    assert (empty + piece).state == piece.state
    assert (piece + empty).state == piece.state
    assert (empty + make_tracker()).state == LineState()


def test_merge_clamps_impossible_positions() -> None:
    merged = make_tracker("a\nb\nc\n") + LineTracker(7, 1, 6, Text("z"))
    assert merged.state == LineState(1, 0, 0)

    shifted = make_tracker("abcdef") + LineTracker(2, 1, 1, Text("z"))
    assert (shifted.offset, shifted.line) == (0, 1)


def test_positioned_first_operand_wins() -> None:
    merged = LineTracker(4, 1, 2, Text("ab")) + LineTracker(9, 3, 7, Text("cd"))

    assert merged.state == LineState(4, 1, 2)
    assert merged.value == Text("abcd")


def test_split_lines_keeps_positions() -> None:
    pieces = make_tracker("ab\ncd\n\tef").split(lambda ch: ch == "\n")

    assert [piece.to_string() for piece in pieces] == ["ab", "cd", "\tef"]
    assert [piece.line for piece in pieces] == [0, 1, 2]
    assert [piece.column for piece in pieces] == [1, 1, 1]
    assert [piece.offset for piece in pieces] == [0, 3, 6]


def test_split_prime_suffix_places_last_atom() -> None:
    init, last = make_tracker("ab\tc").split_prime_suffix()

    assert init.value == Text("ab\t")
    assert last.state == LineState(3, 0, -6)
    assert last.column == 9


def test_split_character_prefix_steps_through_line_breaks() -> None:
    ch, rest = make_tracker("\r\nx").split_character_prefix()
    assert (ch, rest.state) == ("\r", LineState(1, 0, 0))

    ch, rest = rest.split_character_prefix()
    assert (ch, rest.state, rest.value) == ("\n", LineState(2, 1, 1), Text("x"))


def test_span_chars_tracks_column() -> None:
    spaces, word = make_tracker("  x").span_chars(str.isspace)

    assert spaces.value == Text("  ")
    assert (word.line, word.column) == (0, 3)


def test_strip_prefix_and_suffix() -> None:
    tracker = make_tracker("ab\ncd")

    rest = tracker.strip_prefix(make_tracker("ab\n"))
    assert rest.state == LineState(3, 1, 2)

    trimmed = tracker.drop(3).strip_suffix(make_tracker("d"))
    assert (trimmed.value, trimmed.state) == (Text("c"), LineState(3, 1, 2))


def test_strip_common_prefix_positions_rests() -> None:
    left, right = make_tracker("foo\nbar"), make_tracker("foo\nbaz")

    prefix, left_rest, right_rest = left.strip_common_prefix(right)

    assert prefix.value == Text("foo\nba")
    assert (left_rest.line, left_rest.column) == (1, 3)
    assert (right_rest.line, right_rest.column) == (1, 3)
    assert prefix + left_rest == left


def test_accessors() -> None:
    tracker = LineTracker(12, 3, 9, Text("q"))

    assert current_line(tracker) == 3
    assert current_column(tracker) == 3
    assert tracker.position == 12


def test_non_textual_atoms_advance_columns() -> None:
    tracker = LineTracker.lift(Items.of(1, "\n", 3))

    assert [atom.column for atom in tracker] == [1, 2, 3]
    rest = tracker.drop(2)
    assert (rest.offset, rest.line, rest.column) == (2, 0, 3)


def test_rejects_negative_positions() -> None:
    with pytest.raises(PositionError) as excinfo:
        LineTracker(0, -1, -1, Text("a"))
    assert excinfo.value.line == -1

    with pytest.raises(PositionError):
        LineTracker(-2, 0, -1, Text("a"))


def test_equality_ignores_position() -> None:
    assert LineTracker(5, 1, 2, Text("x")) == make_tracker("x")
    assert hash(LineTracker(5, 1, 2, Text("x"))) == hash(make_tracker("x"))
    assert make_tracker("x") != OffsetTracker.from_text("x")


def test_common_suffix_of_lifted_trackers() -> None:
    left, right = make_tracker("ab\nxx\ntail"), make_tracker("q\ntail")

    left_rest, right_rest, suffix = left.strip_common_suffix(right)

    assert suffix.value == Text("\ntail")
    assert suffix.state == LineState(1, 0, -1)
    assert left.common_suffix(right).state == suffix.state
    assert left_rest.state == right_rest.state == LineState()
    assert (right_rest + suffix).state == LineState()

    # the suffix sits where the shorter rest ends, so walking it back across
    # the longer rest clamps the offset and lands on column 0
    rebuilt = left_rest + suffix
    assert rebuilt == left
    assert rebuilt.state == LineState(0, 0, 0)


def test_common_suffix_of_positioned_trackers() -> None:
    left = make_tracker("ab\ncd").drop(3)
    right = LineTracker(1, 0, -1, Text("xd"))

    left_rest, right_rest, suffix = left.strip_common_suffix(right)

    assert (suffix.value, suffix.state) == (Text("d"), LineState(2, 0, -1))
    assert (left_rest.value, left_rest.state) == (Text("c"), LineState(3, 1, 2))
    assert (right_rest.value, right_rest.state) == (Text("x"), LineState(1, 0, -1))
    assert (left_rest + suffix).state == left.state
    assert (right_rest + suffix).state == right.state


def test_span_maybe_threads_columns() -> None:
    def columns_until_tab(
        seen: list[int], atom: LineTracker[Text]
    ) -> list[int] | None:
        if atom.character_prefix() == "\t":
            return None
        return seen + [atom.column]

    prefix, suffix, seen = make_tracker("ab\tc").span_maybe([], columns_until_tab)

    assert (prefix.value, prefix.state) == (Text("ab"), LineState())
    assert (suffix.value, suffix.state) == (Text("\tc"), LineState(2, 0, -1))
    assert seen == [1, 2]


def test_right_fold_and_fold_map_see_columns() -> None:
    tracker = make_tracker("a\tb")

    assert tracker.foldr(lambda atom, acc: acc + [atom.column], []) == [9, 2, 1]
    assert tracker.fold_map(lambda atom: (atom.column,), ()) == (1, 2, 9)


def test_split_at_empty_prefix_is_lifted() -> None:
    prefix, suffix = LineTracker(4, 1, 2, Text("ab")).split_at(0)

    assert prefix.is_empty()
    assert prefix.state == LineState()
    assert suffix.state == LineState(4, 1, 2)


def test_take_while_and_drop_while() -> None:
    tracker = make_tracker("ab\n  cd").drop(3)

    indent = tracker.take_while(str.isspace)
    body = tracker.drop_while(str.isspace)

    assert (indent.value, indent.state) == (Text("  "), LineState(3, 1, 2))
    assert (body.value, body.state) == (Text("cd"), LineState(5, 1, 2))
    assert body.column == 3
    assert tracker.drop_while(str.isalnum) == tracker


def test_scans_and_accumulating_maps_keep_position() -> None:
    tracker = make_tracker("x\nacb").drop(2)

    assert tracker.scanl(max, "b").state == tracker.state
    assert tracker.scanr1(max).state == tracker.state
    count, numbered = tracker.map_accum_r(lambda n, ch: (n + 1, str(n)), 0)
    assert (count, numbered.value) == (3, Text("210"))
    assert numbered.state == LineState(2, 1, 1)
    assert LineTracker.singleton("\n").state == LineState()
