"""Smart delimiter toggle: ordering, per-selection decisions and the multi-cursor runner."""

from .decision import WrapAction, WrapDecision, decide_wrap, trim_trailing_eol
from .ordering import order_selections
from .runner import toggle_wrap_smart

__all__ = [
    "WrapAction",
    "WrapDecision",
    "decide_wrap",
    "trim_trailing_eol",
    "order_selections",
    "toggle_wrap_smart",
]
