from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from mdwrap.domain.models import DelimiterPair, EditOperation, Position, Selection


@runtime_checkable
class ITextBuffer(Protocol):
    """
    Host editor text model as seen by the toggle engine.

    Offsets and positions are only meaningful against the current content; callers
    re-resolve them after every `apply_edits`.
    """

    def offset_at(self, position: Position) -> int: ...
    def position_at(self, offset: int) -> Position: ...
    def text_in_range(self, start: int, end: int) -> str: ...
    def document_length(self) -> int: ...

    def apply_edits(self, edits: Sequence[EditOperation]) -> None:
        """Apply edits whose offsets all refer to the state before this call."""
        ...

    def begin_undo_group(self) -> None: ...
    def end_undo_group(self) -> None: ...

    def get_selections(self) -> list[Selection]: ...
    def set_selections(self, selections: Sequence[Selection]) -> None: ...


class IConfigService(Protocol):
    """Read-only access to sectioned string settings."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def as_dict(self) -> Mapping[str, Mapping[str, str]]: ...
    def app_version(self) -> str: ...


class IAppConfig(IConfigService, Protocol):
    """Application-level view over the config: version plus editor formats."""

    def get_version(self) -> str: ...
    def delimiter_pairs(self) -> Mapping[str, DelimiterPair]: ...
    def shortcut(self, name: str) -> str | None: ...
    def log_level(self) -> str: ...

    @property
    def loaded_from(self) -> Path | None: ...
