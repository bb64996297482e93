"""Configuration path utilities for weekdate.

Centralizes logic for locating and loading the command line configuration
(``config.toml``).

Default location follows the XDG base directory spec using
``$XDG_CONFIG_HOME/weekdate`` or ``~/.config/weekdate`` when the environment
variable is not set.

Environment overrides:
    * ``WEEKDATE_CONFIG_DIR``: override the config directory root (useful for tests)

Recognized keys, all under a ``[weekdate]`` table::

    [weekdate]
    default_weekday = 1      # ISO weekday used by ``to-date`` (0 or 7 = Sunday)
    log_level = "WARNING"
"""

import logging
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .isoyear import to_iso_weekday

__all__ = [
    "Settings",
    "get_config_dir",
    "get_config_path",
    "load_config",
    "load_settings",
]


@dataclass(frozen=True)
class Settings:
    default_weekday: int = 1
    log_level: str = "WARNING"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Settings":
        section = data.get("weekdate", {})
        if not isinstance(section, Mapping):
            raise ValueError("Config section [weekdate] must be a table")
        weekday_raw = section.get("default_weekday", cls.default_weekday)
        try:
            default_weekday = to_iso_weekday(weekday_raw)
        except TypeError as e:
            raise ValueError(f"Invalid default_weekday {weekday_raw!r}: {e}") from e
        log_level = str(section.get("log_level", cls.log_level)).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"Invalid log_level {log_level!r}")
        return cls(default_weekday=default_weekday, log_level=log_level)


def get_config_dir() -> Path:
    override = os.environ.get("WEEKDATE_CONFIG_DIR")
    if override:
        return Path(override)
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "weekdate"


def get_config_path() -> Path:
    return get_config_dir() / "config.toml"


def load_config(path: Path | None = None) -> Mapping[str, Any]:
    if path is None:
        path = get_config_path()
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    return tomllib.loads(path.read_text())


def load_settings(path: Path | None = None) -> Settings:
    """Load Settings, falling back to defaults when no config file exists."""
    if path is None:
        path = get_config_path()
    if not path.exists():
        return Settings()
    return Settings.from_mapping(load_config(path))
