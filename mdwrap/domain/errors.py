from __future__ import annotations


class BufferRangeError(IndexError):
    """An offset, position or edit range falls outside the current buffer."""
