from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from mdwrap.domain.interfaces import IAppConfig
from mdwrap.domain.models import DelimiterPair
from mdwrap.services.config.ini_config_service import IniConfigService
from mdwrap.utils.constants import DEFAULT_FORMATS, DEFAULT_LOG_LEVEL, DEFAULT_SHORTCUTS

_VERSION_RE = re.compile(r"^v?(\d+\.\d+\.\d+)(?:[-+].*)?$", re.IGNORECASE)


def _project_root_fallback() -> Path:
    # mdwrap/services/config/app_config.py -> parents[3] = repository root
    return Path(__file__).resolve().parents[3]


def _read_version_file(version_path: Path) -> str | None:
    try:
        raw = version_path.read_text(encoding="utf-8").strip()
    except OSError:
        return None

    m = _VERSION_RE.match(raw)
    return m.group(1) if m else None


def parse_delimiter_pair(raw: str) -> DelimiterPair | None:
    """
    "**" -> symmetric pair, "<u> </u>" -> asymmetric pair, blank -> None.
    """
    parts = raw.split()
    if not parts:
        return None
    if len(parts) == 1:
        return DelimiterPair.of(parts[0])
    return DelimiterPair.of(parts[0], parts[1])


@dataclass(frozen=True)
class AppConfig(IAppConfig):
    """
    Adapter that wraps IniConfigService and adds the editor-facing settings.

    Precedence for version:
      1) <project_root>/version file (semantic e.g. v1.0.5)
      2) ini_config_service.app_version() (fallback)
      3) "0.0.0"
    """

    ini: IniConfigService
    project_root: Path

    def get_version(self) -> str:
        v = _read_version_file(self.project_root / "version")
        if v:
            return v

        v2 = (self.ini.app_version() or "").strip()
        if v2:
            m = _VERSION_RE.match(v2)
            return m.group(1) if m else v2

        return "0.0.0"

    def delimiter_pairs(self) -> Mapping[str, DelimiterPair]:
        """Built-in formats first (in their fixed order), then formats only the config defines."""
        pairs = {name: DelimiterPair.of(d) for name, d in DEFAULT_FORMATS.items()}
        for name, raw in self.ini.section("formats").items():
            pair = parse_delimiter_pair(raw)
            if pair is not None:
                pairs[name] = pair
        return pairs

    def shortcut(self, name: str) -> str | None:
        configured = (self.get("shortcuts", name) or "").strip()
        return configured or DEFAULT_SHORTCUTS.get(name)

    def log_level(self) -> str:
        level = (self.get("logging", "level") or "").strip().upper()
        if level and isinstance(logging.getLevelName(level), int):
            return level
        return DEFAULT_LOG_LEVEL

    # ---- delegate IniConfigService methods ----

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    def as_dict(self) -> Mapping[str, Mapping[str, str]]:
        return self.ini.as_dict()

    def app_version(self) -> str:
        return self.ini.app_version()

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    ini = IniConfigService(explicit_path=explicit_ini, project_root=root)
    return AppConfig(ini=ini, project_root=root)
