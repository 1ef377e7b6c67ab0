# Filename: config.py
# Author: Rich Lewis @RichLewis007
# Description: Configuration helpers for persistent tool settings. Wraps an INI file in the
#              user config directory holding the trash folder name, timestamp format and log level.

from __future__ import annotations

import configparser
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from platformdirs import PlatformDirs

from .trash import TIMESTAMP_FORMAT, TRASH_DIR_NAME

APP_NAME = "PartitionTrash"
ORG_NAME = "Rich Lewis"

_KEY_TRASH_DIR_NAME = "trash/dir_name"
_KEY_TIMESTAMP_FORMAT = "trash/timestamp_format"
_KEY_LOG_LEVEL = "logging/level"

_DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

log = logging.getLogger(__name__)


def ensure_app_dirs() -> Path:
    # Ensure the configuration directories exist and return the config path.
    dirs = PlatformDirs(appname=APP_NAME, appauthor=ORG_NAME)
    config_path = Path(dirs.user_config_dir)
    log_path = Path(dirs.user_log_dir)

    for path in (config_path, log_path):
        path.mkdir(parents=True, exist_ok=True)

    return config_path


@dataclass(slots=True)
class SettingsStore:
    # Wrapper around an INI settings file for tool preferences.

    filename: str = "settings.ini"
    config_dir: Path | None = None
    _path: Path = field(init=False)
    _parser: configparser.ConfigParser = field(init=False)

    def __post_init__(self) -> None:
        # Load the settings file, falling back to defaults when it is unusable.
        parser = configparser.ConfigParser(interpolation=None)
        try:
            config_dir = self.config_dir or ensure_app_dirs()
        except OSError as exc:
            log.warning("Settings directory unavailable, using defaults: %s", exc)
            config_dir = Path(PlatformDirs(appname=APP_NAME, appauthor=ORG_NAME).user_config_dir)
        object.__setattr__(self, "_path", Path(config_dir) / self.filename)
        try:
            parser.read(self._path, encoding="utf-8")
        except (OSError, configparser.Error) as exc:
            log.warning("Ignoring unreadable settings file %s: %s", self._path, exc)
            parser = configparser.ConfigParser(interpolation=None)
        object.__setattr__(self, "_parser", parser)

    @property
    def path(self) -> Path:
        # Return the filesystem path backing the settings file.
        return self._path

    def _value(self, key: str, default: str) -> str:
        section, option = key.split("/", 1)
        value = self._parser.get(section, option, fallback="").strip()
        return value or default

    def _set_value(self, key: str, value: str) -> None:
        section, option = key.split("/", 1)
        if not self._parser.has_section(section):
            self._parser.add_section(section)
        self._parser.set(section, option, value)

    def sync(self) -> None:
        # Write the current settings back to disk.
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8") as handle:
            self._parser.write(handle)

    # ------------------------------------------------------------------
    # Trash preferences

    def load_trash_dir_name(self, default: str = TRASH_DIR_NAME) -> str:
        # Return the trash folder name; path separators are not allowed.
        value = self._value(_KEY_TRASH_DIR_NAME, default)
        if "/" in value or value in {".", ".."}:
            log.warning("Invalid trash directory name %r, using %r", value, default)
            return default
        return value

    def save_trash_dir_name(self, name: str) -> None:
        self._set_value(_KEY_TRASH_DIR_NAME, name)
        self.sync()

    def load_timestamp_format(self, default: str = TIMESTAMP_FORMAT) -> str:
        # Return the timestamp format; it must not introduce path separators.
        value = self._value(_KEY_TIMESTAMP_FORMAT, default)
        try:
            sample = datetime(2000, 1, 2, 3, 4, 5).strftime(value)
        except ValueError:
            sample = "/"
        if "/" in sample or not sample:
            log.warning("Invalid timestamp format %r, using %r", value, default)
            return default
        return value

    def save_timestamp_format(self, fmt: str) -> None:
        self._set_value(_KEY_TIMESTAMP_FORMAT, fmt)
        self.sync()

    # ------------------------------------------------------------------
    # Logging preferences

    def load_log_level(self, default: str = _DEFAULT_LOG_LEVEL) -> str:
        # Return the configured console log level, defaulting to default.
        value = self._value(_KEY_LOG_LEVEL, default).upper()
        return value if value in _LOG_LEVELS else default

    def save_log_level(self, level: str) -> None:
        self._set_value(_KEY_LOG_LEVEL, level.upper())
        self.sync()


__all__ = ["APP_NAME", "ORG_NAME", "SettingsStore", "ensure_app_dirs"]
