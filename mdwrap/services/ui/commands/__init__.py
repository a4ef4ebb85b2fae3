from __future__ import annotations

from .toggle_wrap import ToggleWrap

__all__ = [
    "ToggleWrap",
]
