from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from mdwrap.domain.errors import BufferRangeError
from mdwrap.domain.interfaces import ITextBuffer
from mdwrap.domain.models import EditOperation, Position, Selection


@dataclass(frozen=True)
class UndoEntry:
    before_text: str
    after_text: str
    selections_before: tuple[Selection, ...]
    selections_after: tuple[Selection, ...]


class UndoHistory:
    """Linear undo/redo history; pushing a new entry drops the redo tail."""

    def __init__(self) -> None:
        self._entries: list[UndoEntry] = []
        self._index: int = -1

    def push(self, entry: UndoEntry) -> None:
        del self._entries[self._index + 1 :]
        self._entries.append(entry)
        self._index = len(self._entries) - 1

    def amend_last(self, selections_after: tuple[Selection, ...]) -> None:
        if self._index >= 0:
            last = self._entries[self._index]
            self._entries[self._index] = replace(last, selections_after=selections_after)

    def can_undo(self) -> bool:
        return self._index >= 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def undo(self) -> UndoEntry | None:
        if not self.can_undo():
            return None
        entry = self._entries[self._index]
        self._index -= 1
        return entry

    def redo(self) -> UndoEntry | None:
        if not self.can_redo():
            return None
        self._index += 1
        return self._entries[self._index]

    def clear(self) -> None:
        self._entries.clear()
        self._index = -1


def _shift(offset: int, edits: Sequence[EditOperation]) -> int:
    """Where a pre-edit `offset` lands once `edits` are applied.

    An offset inside a replaced range moves to that range's start; one sitting
    exactly at an insertion point ends up after the inserted text.
    """
    for e in edits:
        if e.range_start < offset < e.range_end:
            offset = e.range_start
            break
    return offset + sum(
        len(e.replacement) - (e.range_end - e.range_start) for e in edits if e.range_end <= offset
    )


class InMemoryTextBuffer(ITextBuffer):
    """
    Plain-string text model with multiple selections and grouped undo.

    Offsets index the Python string directly. Lines are separated by "\\n"; a
    trailing newline produces a final empty line. Active selections follow the
    edits applied to the buffer. Edits made between
    `begin_undo_group()` and the matching `end_undo_group()` undo as one step,
    as does every edit applied outside a group.
    """

    def __init__(self, text: str = "", selections: Sequence[Selection] | None = None) -> None:
        self._text = text
        self._selections: list[Selection] = (
            [Selection.caret(1, 1)] if selections is None else list(selections)
        )
        self.history = UndoHistory()
        self._group_depth = 0
        self._group_before: tuple[str, tuple[Selection, ...]] | None = None
        # the selections installed right after an edit still belong to that undo entry
        self._amend_selections = False

    # ---------- content ----------

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        self._text = text
        self._selections = [Selection.caret(1, 1)]
        self.history.clear()
        self._amend_selections = False

    def document_length(self) -> int:
        return len(self._text)

    def text_in_range(self, start: int, end: int) -> str:
        self._check_range(start, end)
        return self._text[start:end]

    # ---------- addressing ----------

    def _lines(self) -> list[str]:
        return self._text.split("\n")

    def offset_at(self, position: Position) -> int:
        """Offset of `position`, clamped into the document first."""
        lines = self._lines()
        if position.line < 1:
            return 0
        if position.line > len(lines):
            return len(self._text)
        line = lines[position.line - 1]
        column = max(1, min(position.column, len(line) + 1))
        offset = sum(len(ln) + 1 for ln in lines[: position.line - 1])
        return offset + column - 1

    def _check_position(self, position: Position) -> None:
        lines = self._lines()
        if not 1 <= position.line <= len(lines):
            raise BufferRangeError(f"line {position.line} outside 1..{len(lines)}")
        width = len(lines[position.line - 1]) + 1
        if not 1 <= position.column <= width:
            raise BufferRangeError(
                f"column {position.column} outside 1..{width} on line {position.line}"
            )

    def position_at(self, offset: int) -> Position:
        if not 0 <= offset <= len(self._text):
            raise BufferRangeError(f"offset {offset} outside 0..{len(self._text)}")
        line = self._text.count("\n", 0, offset) + 1
        line_start = self._text.rfind("\n", 0, offset) + 1
        return Position(line, offset - line_start + 1)

    def _check_range(self, start: int, end: int) -> None:
        if not 0 <= start <= end <= len(self._text):
            raise BufferRangeError(f"range [{start}, {end}) outside 0..{len(self._text)}")

    # ---------- editing ----------

    def apply_edits(self, edits: Sequence[EditOperation]) -> None:
        for e in edits:
            self._check_range(e.range_start, e.range_end)

        self._amend_selections = False
        before = (self._text, tuple(self._selections))
        spans = [
            (self.offset_at(s.start), self.offset_at(s.end)) for s in self._selections
        ]
        text = self._text
        # all offsets refer to the pre-edit text, so apply back to front
        for e in sorted(edits, key=lambda e: e.range_start, reverse=True):
            text = text[: e.range_start] + e.replacement + text[e.range_end :]
        self._text = text
        self._selections = [
            Selection(self.position_at(_shift(a, edits)), self.position_at(_shift(b, edits)))
            for a, b in spans
        ]

        if self._group_depth == 0:
            self._push_entry(*before)

    def begin_undo_group(self) -> None:
        self._amend_selections = False
        if self._group_depth == 0:
            self._group_before = (self._text, tuple(self._selections))
        self._group_depth += 1

    def end_undo_group(self) -> None:
        if self._group_depth == 0:
            return
        self._group_depth -= 1
        if self._group_depth == 0 and self._group_before is not None:
            before_text, before_sel = self._group_before
            self._group_before = None
            if before_text != self._text:
                self._push_entry(before_text, before_sel)

    def _push_entry(self, before_text: str, before_sel: tuple[Selection, ...]) -> None:
        self.history.push(
            UndoEntry(
                before_text=before_text,
                after_text=self._text,
                selections_before=before_sel,
                selections_after=tuple(self._selections),
            )
        )
        self._amend_selections = True

    def can_undo(self) -> bool:
        return self.history.can_undo()

    def can_redo(self) -> bool:
        return self.history.can_redo()

    def undo(self) -> bool:
        entry = self.history.undo()
        if entry is None:
            return False
        self._text = entry.before_text
        self._selections = list(entry.selections_before)
        self._amend_selections = False
        return True

    def redo(self) -> bool:
        entry = self.history.redo()
        if entry is None:
            return False
        self._text = entry.after_text
        self._selections = list(entry.selections_after)
        self._amend_selections = False
        return True

    # ---------- selections ----------

    def get_selections(self) -> list[Selection]:
        return list(self._selections)

    def set_selections(self, selections: Sequence[Selection]) -> None:
        for s in selections:
            self._check_position(s.start)
            self._check_position(s.end)
        self._selections = list(selections)
        if self._amend_selections:
            self.history.amend_last(tuple(self._selections))
            self._amend_selections = False
