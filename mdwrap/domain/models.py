from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """1-based line/column address inside a buffer."""

    line: int
    column: int


@dataclass(frozen=True)
class Selection:
    """
    A range between two positions. Direction is not tracked: `start` and `end`
    are whatever the host handed over, and `normalized()` puts them in order.
    """

    start: Position
    end: Position

    @classmethod
    def caret(cls, line: int, column: int) -> Selection:
        p = Position(line, column)
        return cls(p, p)

    @classmethod
    def of(cls, start_line: int, start_column: int, end_line: int, end_column: int) -> Selection:
        return cls(Position(start_line, start_column), Position(end_line, end_column))

    def is_empty(self) -> bool:
        return self.start == self.end

    def normalized(self) -> Selection:
        if self.end < self.start:
            return Selection(self.end, self.start)
        return self


@dataclass(frozen=True)
class DelimiterPair:
    left: str
    right: str

    @classmethod
    def of(cls, left: str, right: str | None = None) -> DelimiterPair:
        return cls(left, left if right is None else right)


@dataclass(frozen=True)
class EditOperation:
    """Replace the half-open offset range [range_start, range_end) with `replacement`."""

    range_start: int
    range_end: int
    replacement: str = ""


@dataclass(frozen=True)
class IndexedSelection:
    index: int
    selection: Selection
