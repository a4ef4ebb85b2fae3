from __future__ import annotations

import pytest

from mdwrap.domain.errors import BufferRangeError
from mdwrap.domain.models import EditOperation, Position, Selection
from mdwrap.services.text_buffer import InMemoryTextBuffer


def test_offsets_and_positions_are_inverse():
    buf = InMemoryTextBuffer("ab\ncde\n")
    for offset in range(buf.document_length() + 1):
        assert buf.offset_at(buf.position_at(offset)) == offset

    assert buf.position_at(0) == Position(1, 1)
    assert buf.position_at(2) == Position(1, 3)  # end of "ab", before the newline
    assert buf.position_at(3) == Position(2, 1)
    assert buf.position_at(7) == Position(3, 1)  # empty last line after trailing "\n"


@pytest.mark.parametrize(
    "position, expected",
    [
        (Position(1, 4), 2),  # past the end of "ab"
        (Position(1, 0), 0),
        (Position(0, 3), 0),
        (Position(3, 1), 5),  # past the last line
    ],
)
def test_offset_at_clamps_out_of_range_positions(position, expected):
    buf = InMemoryTextBuffer("ab\ncd")
    assert buf.offset_at(position) == expected


def test_position_at_rejects_out_of_range_offsets():
    buf = InMemoryTextBuffer("ab\ncd")
    with pytest.raises(BufferRangeError):
        buf.position_at(6)
    with pytest.raises(BufferRangeError):
        buf.position_at(-1)


def test_text_in_range_and_bounds():
    buf = InMemoryTextBuffer("hello world")
    assert buf.text_in_range(6, 11) == "world"
    with pytest.raises(BufferRangeError):
        buf.text_in_range(4, 2)


def test_apply_edits_uses_pre_edit_offsets_for_every_edit():
    buf = InMemoryTextBuffer("**bold**")
    buf.apply_edits([EditOperation(6, 8), EditOperation(0, 2)])
    assert buf.text == "bold"

    # order of the list does not matter either
    buf = InMemoryTextBuffer("**bold**")
    buf.apply_edits([EditOperation(0, 2), EditOperation(6, 8)])
    assert buf.text == "bold"


def test_edits_outside_a_group_undo_one_by_one():
    buf = InMemoryTextBuffer("ab")
    buf.apply_edits([EditOperation(2, 2, "c")])
    buf.apply_edits([EditOperation(3, 3, "d")])
    assert buf.text == "abcd"

    assert buf.undo() is True
    assert buf.text == "abc"
    assert buf.undo() is True
    assert buf.text == "ab"
    assert buf.undo() is False


def test_grouped_edits_undo_and_redo_as_one_step():
    buf = InMemoryTextBuffer("abc", [Selection.caret(1, 2)])
    buf.begin_undo_group()
    buf.apply_edits([EditOperation(0, 0, "<")])
    buf.begin_undo_group()  # nested groups fold into the outer one
    buf.apply_edits([EditOperation(4, 4, ">")])
    buf.end_undo_group()
    buf.end_undo_group()
    buf.set_selections([Selection.caret(1, 3)])

    assert buf.text == "<abc>"
    assert buf.undo() is True
    assert buf.text == "abc"
    assert buf.get_selections() == [Selection.caret(1, 2)]
    assert not buf.can_undo()

    assert buf.redo() is True
    assert buf.text == "<abc>"
    assert buf.get_selections() == [Selection.caret(1, 3)]


def test_group_without_changes_records_nothing():
    buf = InMemoryTextBuffer("abc")
    buf.begin_undo_group()
    buf.apply_edits([EditOperation(1, 2, "b")])
    buf.end_undo_group()
    assert not buf.can_undo()


def test_new_edit_discards_redo_tail():
    buf = InMemoryTextBuffer("a")
    buf.apply_edits([EditOperation(1, 1, "b")])
    buf.undo()
    assert buf.can_redo()
    buf.apply_edits([EditOperation(1, 1, "c")])
    assert not buf.can_redo()
    assert buf.text == "ac"


def test_set_selections_validates_positions():
    buf = InMemoryTextBuffer("abc")
    with pytest.raises(BufferRangeError):
        buf.set_selections([Selection.caret(2, 1)])


def test_set_text_resets_history_and_selection():
    buf = InMemoryTextBuffer("abc", [Selection.of(1, 1, 1, 3)])
    buf.apply_edits([EditOperation(0, 0, "x")])
    buf.set_text("new")
    assert buf.text == "new"
    assert not buf.can_undo()
    assert buf.get_selections() == [Selection.caret(1, 1)]


def test_selections_follow_edits():
    buf = InMemoryTextBuffer("one two", [Selection.of(1, 5, 1, 8), Selection.caret(1, 3)])
    buf.apply_edits([EditOperation(0, 0, ">> "), EditOperation(2, 2, "!")])
    assert buf.text == ">> on!e two"
    # the caret sat on the insertion point, so it ends up after the "!"
    assert buf.get_selections() == [Selection.of(1, 9, 1, 12), Selection.caret(1, 7)]


def test_selection_inside_deleted_text_collapses_to_its_start():
    buf = InMemoryTextBuffer("abcdef", [Selection.of(1, 3, 1, 6)])
    buf.apply_edits([EditOperation(1, 4)])
    assert buf.text == "aef"
    assert buf.get_selections() == [Selection.of(1, 2, 1, 3)]


def test_set_selections_after_unrelated_edit_leaves_older_entry_alone():
    buf = InMemoryTextBuffer("ab", [Selection.caret(1, 1)])
    buf.begin_undo_group()
    buf.apply_edits([EditOperation(0, 0, "x")])
    buf.end_undo_group()
    # tracking already moved the caret to (1, 2); no selection installed yet

    buf.begin_undo_group()
    buf.end_undo_group()  # records nothing
    buf.set_selections([Selection.caret(1, 4)])

    buf.undo()
    buf.redo()
    assert buf.get_selections() == [Selection.caret(1, 2)]
