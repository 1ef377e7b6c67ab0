# Filename: logger.py
# Author: Rich Lewis @RichLewis007
# Description: Logging configuration utilities. Keeps a rotating debug log of every trash and
#              clear run and sends warnings to stderr so stdout stays free for user messages.

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Final

from platformdirs import PlatformDirs

from .config import APP_NAME, ORG_NAME

LOG_FILE_NAME: Final[str] = "ptrash.log"
_LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _get_log_path() -> Path:
    # Return the path to the rotating log file, creating folders as needed.
    dirs = PlatformDirs(appname=APP_NAME, appauthor=ORG_NAME)
    path = Path(dirs.user_log_dir)
    path.mkdir(parents=True, exist_ok=True)
    return path / LOG_FILE_NAME


def _console_level(log_level: str) -> int:
    level = logging.getLevelName(log_level.upper())
    return level if isinstance(level, int) else logging.WARNING


def configure(*, log_level: str = "WARNING") -> None:
    """Route log records to stderr at ``log_level`` and to the debug log file.

    The log file is optional: when its folder cannot be created the tool
    keeps running with console logging only.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    formatter = logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(_console_level(log_level))

    # Avoid duplicate handlers when reconfiguring.
    root.handlers.clear()
    root.addHandler(console_handler)

    try:
        file_handler = logging.handlers.RotatingFileHandler(
            _get_log_path(),
            maxBytes=2 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    except OSError as exc:
        logging.getLogger(__name__).warning("File logging disabled: %s", exc)
        return

    file_handler.setFormatter(formatter)
    file_handler.setLevel(logging.DEBUG)
    root.addHandler(file_handler)
