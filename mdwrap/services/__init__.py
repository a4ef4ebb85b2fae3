"""Concrete services: the toggle engine, text buffers and configuration."""

from .text_buffer import InMemoryTextBuffer, UndoHistory
from .toggle import toggle_wrap_smart

__all__ = ["InMemoryTextBuffer", "UndoHistory", "toggle_wrap_smart"]
