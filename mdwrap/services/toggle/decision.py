from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from mdwrap.domain.interfaces import ITextBuffer
from mdwrap.domain.models import DelimiterPair, EditOperation, Position, Selection


class WrapAction(Enum):
    UNWRAP_AT_CARET = "unwrap-at-caret"
    WRAP_AT_CARET = "wrap-at-caret"
    UNWRAP_EXPLICIT = "unwrap-explicit"
    UNWRAP_ADJACENT = "unwrap-adjacent"
    WRAP_SELECTION = "wrap-selection"


@dataclass(frozen=True)
class WrapDecision:
    """
    Outcome for one selection, entirely in offsets of the buffer *before* `edits`
    are applied. `result_start`/`result_end` are offsets in the buffer *after* them.
    """

    action: WrapAction
    edits: tuple[EditOperation, ...]
    result_start: int
    result_end: int


def trim_trailing_eol(buffer: ITextBuffer, selection: Selection) -> Selection:
    """
    Pull a selection that ends at column 1 of a later line back to the end of the
    previous line, so a closing delimiter never lands on the line below.
    """
    sel = selection.normalized()
    if sel.is_empty() or sel.end.column != 1 or sel.end.line <= sel.start.line:
        return sel
    eol = buffer.offset_at(Position(sel.end.line, 1)) - 1
    # a "\r\n" line ending is pulled back past both characters
    if eol > buffer.offset_at(sel.start) and buffer.text_in_range(eol - 1, eol) == "\r":
        eol -= 1
    return Selection(sel.start, buffer.position_at(eol))


def decide_wrap(buffer: ITextBuffer, selection: Selection, pair: DelimiterPair) -> WrapDecision:
    """
    Classify `selection` against the current buffer content and compute its edit.

    Exactly one action applies:
      - caret between `left` and `right`    -> remove both markers
      - any other caret                     -> insert `left + right`, caret in between
      - selected text starts/ends with them -> replace with the inner text
      - markers sit just outside the range  -> delete both markers
      - otherwise                           -> wrap the selected text

    Empty delimiters degrade to edits that change nothing.
    """
    left, right = pair.left, pair.right
    left_len, right_len = len(left), len(right)

    sel = trim_trailing_eol(buffer, selection)
    start = buffer.offset_at(sel.start)
    end = buffer.offset_at(sel.end)
    doc_len = buffer.document_length()

    if sel.is_empty():
        if start >= left_len and start + right_len <= doc_len:
            before = buffer.text_in_range(start - left_len, start)
            after = buffer.text_in_range(start, start + right_len)
            if before == left and after == right:
                return WrapDecision(
                    WrapAction.UNWRAP_AT_CARET,
                    (
                        EditOperation(start, start + right_len),
                        EditOperation(start - left_len, start),
                    ),
                    start - left_len,
                    start - left_len,
                )
        return WrapDecision(
            WrapAction.WRAP_AT_CARET,
            (EditOperation(start, start, left + right),),
            start + left_len,
            start + left_len,
        )

    selected = buffer.text_in_range(start, end)

    if (
        len(selected) >= left_len + right_len
        and selected.startswith(left)
        and selected.endswith(right)
    ):
        inner = selected[left_len : len(selected) - right_len]
        return WrapDecision(
            WrapAction.UNWRAP_EXPLICIT,
            (EditOperation(start, end, inner),),
            start,
            start + len(inner),
        )

    if _has_adjacent_wrap(buffer, start, end, doc_len, pair):
        return WrapDecision(
            WrapAction.UNWRAP_ADJACENT,
            (
                EditOperation(end, end + right_len),
                EditOperation(start - left_len, start),
            ),
            start - left_len,
            end - left_len,
        )

    return WrapDecision(
        WrapAction.WRAP_SELECTION,
        (EditOperation(start, end, f"{left}{selected}{right}"),),
        start + left_len,
        end + left_len,
    )


def _has_adjacent_wrap(
    buffer: ITextBuffer, start: int, end: int, doc_len: int, pair: DelimiterPair
) -> bool:
    left_len, right_len = len(pair.left), len(pair.right)
    if start < left_len or end + right_len > doc_len:
        return False
    return (
        buffer.text_in_range(start - left_len, start) == pair.left
        and buffer.text_in_range(end, end + right_len) == pair.right
    )
