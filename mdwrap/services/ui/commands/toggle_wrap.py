from __future__ import annotations

from dataclasses import dataclass

from mdwrap.domain.interfaces import ITextBuffer
from mdwrap.domain.models import DelimiterPair
from mdwrap.services.toggle import toggle_wrap_smart


@dataclass(frozen=True)
class ToggleWrap:
    """
    Command: wrap every selection in `pair`, or unwrap the ones already wrapped.
    A caret inserts the pair and lands between the markers.
    """

    buffer: ITextBuffer | None
    pair: DelimiterPair

    def execute(self) -> None:
        toggle_wrap_smart(self.buffer, self.pair.left, self.pair.right)
