from __future__ import annotations

import logging
from collections.abc import Sequence

from PyQt6.QtGui import QColor, QTextCursor
from PyQt6.QtWidgets import QPlainTextEdit, QTextEdit

from mdwrap.domain.interfaces import ITextBuffer
from mdwrap.domain.models import EditOperation, Position, Selection

logger = logging.getLogger(__name__)

_SECONDARY_BG = QColor(255, 213, 79, 110)


def _to_qt(text: str, offset: int) -> int:
    """Code-point offset -> QTextDocument position (UTF-16 units)."""
    return len(text[:offset].encode("utf-16-le")) // 2


def _from_qt(text: str, qt_pos: int) -> int:
    """QTextDocument position -> code-point offset. A split surrogate pair rounds down."""
    return len(text.encode("utf-16-le")[: qt_pos * 2].decode("utf-16-le", errors="ignore"))


class QtTextBufferAdapter(ITextBuffer):
    """
    Narrow adapter exposing a QPlainTextEdit as a multi-selection text buffer.

    The editor's own text cursor is the primary selection; any further selections
    live here as QTextCursors on the same document (so they follow typing) and are
    painted through extra selections. Offsets are code points, converted to Qt's
    UTF-16 positions only at the document boundary.
    """

    def __init__(self, edit: QPlainTextEdit) -> None:
        self._e = edit
        self._secondary: list[QTextCursor] = []
        self._edit_cursor: QTextCursor | None = None
        self._group_depth = 0

    @classmethod
    def from_editor(cls, edit: QPlainTextEdit | None) -> QtTextBufferAdapter | None:
        """None when there is no editor or it has no document attached."""
        if edit is None or edit.document() is None:
            return None
        return cls(edit)

    @property
    def editor(self) -> QPlainTextEdit:
        return self._e

    # ---------- content ----------

    def _text(self) -> str:
        return self._e.toPlainText()

    def document_length(self) -> int:
        return len(self._text())

    def text_in_range(self, start: int, end: int) -> str:
        return self._text()[start:end]

    def offset_at(self, position: Position) -> int:
        text = self._text()
        if position.line < 1:
            return 0
        offset = 0
        for _ in range(position.line - 1):
            nl = text.find("\n", offset)
            if nl < 0:
                return len(text)
            offset = nl + 1
        line_end = text.find("\n", offset)
        if line_end < 0:
            line_end = len(text)
        return offset + max(0, min(position.column - 1, line_end - offset))

    def position_at(self, offset: int) -> Position:
        text = self._text()
        offset = max(0, min(offset, len(text)))
        line = text.count("\n", 0, offset) + 1
        line_start = text.rfind("\n", 0, offset) + 1
        return Position(line, offset - line_start + 1)

    # ---------- editing ----------

    def apply_edits(self, edits: Sequence[EditOperation]) -> None:
        text = self._text()
        resolved = [
            (_to_qt(text, e.range_start), _to_qt(text, e.range_end), e.replacement) for e in edits
        ]
        doc = self._e.document()
        for start, end, replacement in sorted(resolved, key=lambda r: r[0], reverse=True):
            c = QTextCursor(doc)
            c.setPosition(start)
            c.setPosition(end, QTextCursor.MoveMode.KeepAnchor)
            if replacement:
                c.insertText(replacement)
            else:
                c.removeSelectedText()

    def begin_undo_group(self) -> None:
        if self._group_depth == 0:
            self._edit_cursor = QTextCursor(self._e.document())
            self._edit_cursor.beginEditBlock()
        self._group_depth += 1

    def end_undo_group(self) -> None:
        if self._group_depth == 0:
            return
        self._group_depth -= 1
        if self._group_depth == 0 and self._edit_cursor is not None:
            self._edit_cursor.endEditBlock()
            self._edit_cursor = None

    # ---------- selections ----------

    def _selection_from_cursor(self, text: str, c: QTextCursor) -> Selection:
        return Selection(
            self.position_at(_from_qt(text, c.selectionStart())),
            self.position_at(_from_qt(text, c.selectionEnd())),
        )

    def _cursor_from_selection(self, text: str, s: Selection) -> QTextCursor:
        s = s.normalized()
        c = QTextCursor(self._e.document())
        c.setPosition(_to_qt(text, self.offset_at(s.start)))
        c.setPosition(_to_qt(text, self.offset_at(s.end)), QTextCursor.MoveMode.KeepAnchor)
        return c

    def get_selections(self) -> list[Selection]:
        text = self._text()
        cursors = [self._e.textCursor(), *self._secondary]
        return [self._selection_from_cursor(text, c) for c in cursors]

    def set_selections(self, selections: Sequence[Selection]) -> None:
        if not selections:
            return
        text = self._text()
        cursors = [self._cursor_from_selection(text, s) for s in selections]
        self._e.setTextCursor(cursors[0])
        self._secondary = cursors[1:]
        self._refresh_highlights()

    # ---------- secondary cursors ----------

    @property
    def secondary_count(self) -> int:
        return len(self._secondary)

    def add_cursor(self, selection: Selection) -> None:
        self._secondary.append(self._cursor_from_selection(self._text(), selection))
        self._refresh_highlights()

    def clear_secondary(self) -> None:
        self._secondary.clear()
        self._refresh_highlights()

    def select_next_occurrence(self) -> bool:
        """
        With a caret, select the word under it. With a selection, add the next match
        of the most recent selection's text as another selection (wrapping around).
        Returns False when nothing new could be selected.
        """
        primary = self._e.textCursor()
        if not primary.hasSelection():
            primary.select(QTextCursor.SelectionType.WordUnderCursor)
            if not primary.hasSelection():
                return False
            self._e.setTextCursor(primary)
            return True

        last = self._secondary[-1] if self._secondary else primary
        # Qt reports line breaks inside a selection as U+2029
        needle = last.selectedText().replace("\u2029", "\n")
        text = self._text()
        at = text.find(needle, _from_qt(text, last.selectionEnd()))
        if at < 0:
            at = text.find(needle)
        if at < 0:
            return False
        found = QTextCursor(self._e.document())
        found.setPosition(_to_qt(text, at))
        found.setPosition(_to_qt(text, at + len(needle)), QTextCursor.MoveMode.KeepAnchor)

        taken = {(c.selectionStart(), c.selectionEnd()) for c in [primary, *self._secondary]}
        if (found.selectionStart(), found.selectionEnd()) in taken:
            return False
        self._secondary.append(found)
        self._refresh_highlights()
        logger.debug("added selection #%d at %d", len(self._secondary), found.selectionStart())
        return True

    def _refresh_highlights(self) -> None:
        extras = []
        for c in self._secondary:
            sel = QTextEdit.ExtraSelection()
            sel.cursor = c
            sel.format.setBackground(_SECONDARY_BG)
            extras.append(sel)
        self._e.setExtraSelections(extras)
