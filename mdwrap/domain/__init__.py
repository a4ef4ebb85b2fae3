"""Domain layer: interfaces and simple models (dataclasses)."""

from .errors import BufferRangeError
from .interfaces import IAppConfig, IConfigService, ITextBuffer
from .models import DelimiterPair, EditOperation, IndexedSelection, Position, Selection

__all__ = [
    "ITextBuffer",
    "IConfigService",
    "IAppConfig",
    "BufferRangeError",
    "Position",
    "Selection",
    "DelimiterPair",
    "EditOperation",
    "IndexedSelection",
]
