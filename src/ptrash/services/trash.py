# Filename: trash.py
# Author: Rich Lewis @RichLewis007
# Description: Per-partition trash directory helpers. Derives and creates the trash folder at a
#              mount point root and builds the timestamped names for trashed entries.

from __future__ import annotations

import logging
import os
import stat
from datetime import datetime
from pathlib import Path
from typing import Final

log = logging.getLogger(__name__)

TRASH_DIR_NAME: Final[str] = ".trash"
TIMESTAMP_FORMAT: Final[str] = "%Y-%m-%d_%H-%M-%S"


def operation_timestamp(now: datetime | None = None, *, fmt: str = TIMESTAMP_FORMAT) -> str:
    # Format the single timestamp shared by every item of one invocation.
    return (now or datetime.now()).strftime(fmt)


def trash_dir_for(mount_point: Path, *, dir_name: str = TRASH_DIR_NAME) -> Path:
    # Return the trash directory location for a mount point.
    return Path(mount_point) / dir_name


def ensure_trash_dir(mount_point: Path, *, dir_name: str = TRASH_DIR_NAME) -> Path:
    """Return the trash directory of ``mount_point``, creating it if needed.

    A newly created directory takes the owner, group and permission bits of
    the mount point root. An existing directory is left untouched, so later
    changes to the mount root are never copied over. ``OSError`` from
    creation, ``chown`` or ``chmod`` propagates to the caller.
    """
    trash_dir = trash_dir_for(mount_point, dir_name=dir_name)
    if trash_dir.is_dir():
        return trash_dir

    trash_dir.mkdir(parents=True, exist_ok=True)
    root_stat = os.stat(mount_point)
    os.chown(trash_dir, root_stat.st_uid, root_stat.st_gid)
    os.chmod(trash_dir, stat.S_IMODE(root_stat.st_mode))
    log.info(
        "Created %s (uid=%d gid=%d mode=%o)",
        trash_dir,
        root_stat.st_uid,
        root_stat.st_gid,
        stat.S_IMODE(root_stat.st_mode),
    )
    return trash_dir


def trashed_name(path: Path, timestamp: str) -> str:
    # Name an entry receives inside the trash directory.
    name = Path(os.path.abspath(path)).name
    return f"{name}-{timestamp}"


__all__ = [
    "TIMESTAMP_FORMAT",
    "TRASH_DIR_NAME",
    "ensure_trash_dir",
    "operation_timestamp",
    "trash_dir_for",
    "trashed_name",
]
