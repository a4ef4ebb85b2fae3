"""INI-backed configuration."""

from .app_config import AppConfig, build_app_config, parse_delimiter_pair
from .ini_config_service import IniConfigService

__all__ = ["AppConfig", "IniConfigService", "build_app_config", "parse_delimiter_pair"]
