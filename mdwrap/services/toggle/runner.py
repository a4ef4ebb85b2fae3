from __future__ import annotations

import logging

from mdwrap.domain.interfaces import ITextBuffer
from mdwrap.domain.models import DelimiterPair, Selection
from mdwrap.services.toggle.decision import decide_wrap
from mdwrap.services.toggle.ordering import order_selections

logger = logging.getLogger(__name__)


def toggle_wrap_smart(buffer: ITextBuffer | None, left: str, right: str | None = None) -> None:
    """
    Wrap or unwrap every active selection of `buffer` with `left`/`right`.

    Each selection is classified on its own (see `decide_wrap`). Selections are
    processed bottom-to-top so an edit never invalidates the offsets of a selection
    still waiting its turn; the results are installed back in the caller's order.
    A marker deletion that reaches past a later selection's end leaves that selection
    clamped to the shorter text, the way the buffer resolves any position.
    All edits form a single undo step, and the selections are reinstalled even when
    an edit fails. A missing buffer makes this a no-op.
    """
    if buffer is None:
        logger.debug("toggle_wrap_smart: no active buffer, nothing to do")
        return

    selections = buffer.get_selections()
    if not selections:
        return

    pair = DelimiterPair.of(left, right)
    # result ranges as offsets into the *current* text, by input index
    results: list[list[int] | None] = [None] * len(selections)

    buffer.begin_undo_group()
    try:
        for item in order_selections(buffer, selections):
            decision = decide_wrap(buffer, item.selection, pair)
            logger.debug(
                "selection #%d -> %s (%d edit(s))",
                item.index,
                decision.action.value,
                len(decision.edits),
            )
            buffer.apply_edits(decision.edits)

            # Everything processed so far lies after this edit and moves with it.
            delta = sum(len(e.replacement) - (e.range_end - e.range_start) for e in decision.edits)
            if delta:
                for r in results:
                    if r is not None:
                        r[0] += delta
                        r[1] += delta
            results[item.index] = [decision.result_start, decision.result_end]
    finally:
        buffer.end_undo_group()
        buffer.set_selections(_resolve(buffer, selections, results))


def _resolve(
    buffer: ITextBuffer, selections: list[Selection], results: list[list[int] | None]
) -> list[Selection]:
    # Selections left unprocessed (only after a failure) are clamped into the current text.
    resolved = []
    for sel, r in zip(selections, results):
        if r is None:
            r = [buffer.offset_at(sel.start), buffer.offset_at(sel.end)]
        start, end = r
        resolved.append(Selection(buffer.position_at(start), buffer.position_at(end)))
    return resolved
