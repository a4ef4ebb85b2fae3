from __future__ import annotations

from .qt_text_buffer import QtTextBufferAdapter

__all__ = ["QtTextBufferAdapter"]
