from __future__ import annotations

from collections.abc import Sequence

from mdwrap.domain.interfaces import ITextBuffer
from mdwrap.domain.models import IndexedSelection, Selection


def order_selections(buffer: ITextBuffer, selections: Sequence[Selection]) -> list[IndexedSelection]:
    """
    Tag each selection with its input index and sort bottom-to-top, right-to-left
    (descending start offset, then descending end offset).

    Edits are applied one selection at a time. An edit never moves offsets that lie
    before its start, so walking the document backwards keeps every selection that
    is still waiting to be processed valid. Processing in input order instead would
    shift later selections by whatever the earlier ones inserted or removed.
    """
    indexed = [IndexedSelection(i, s.normalized()) for i, s in enumerate(selections)]

    def key(item: IndexedSelection) -> tuple[int, int]:
        return (
            buffer.offset_at(item.selection.start),
            buffer.offset_at(item.selection.end),
        )

    # sorted() is stable: identical ranges keep their input order
    return sorted(indexed, key=key, reverse=True)
