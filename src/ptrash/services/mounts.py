# Filename: mounts.py
# Author: Rich Lewis @RichLewis007
# Description: Mount table helpers. Resolves the mount point that holds a given path and
#              enumerates the mount points of every mounted partition.

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

import psutil

log = logging.getLogger(__name__)

IsMount = Callable[[str], bool]


def _lookup_start(path: Path) -> str:
    # A symlink lives in its parent directory; anything else is resolved in full.
    absolute = Path(os.path.abspath(path))
    if absolute.is_symlink():
        return os.path.join(os.path.realpath(absolute.parent), absolute.name)
    return os.path.realpath(absolute)


def _mount_table_predicate() -> IsMount:
    # Membership test against the current mount table, or os.path.ismount without one.
    try:
        table = {os.fspath(point) for point in list_mount_points()}
    except (OSError, psutil.Error):
        log.debug("Mount table unavailable", exc_info=True)
        table = set()
    if not table:
        return os.path.ismount
    return table.__contains__


def mount_point_of(path: Path | str, *, ismount: IsMount | None = None) -> Path | None:
    """Return the mount point of the filesystem containing ``path``.

    The lookup walks from ``path`` toward ``/`` and stops at the first
    directory listed in the mount table, so the deepest mount wins and bind
    mounts are honoured. The table is read fresh on every call. Returns
    ``None`` when ``path`` does not exist.
    """
    candidate = Path(path)
    if not os.path.lexists(candidate):
        log.debug("Cannot resolve mount point of missing path %s", candidate)
        return None

    ismount = ismount or _mount_table_predicate()

    current = _lookup_start(candidate)
    while True:
        if ismount(current):
            break
        parent = os.path.dirname(current)
        if parent == current:
            break
        current = parent

    log.debug("Mount point of %s is %s", candidate, current)
    return Path(current)


def list_mount_points() -> list[Path]:
    # Return every mounted partition's mount point, in mount-table order.
    seen: set[str] = set()
    mount_points: list[Path] = []
    for partition in psutil.disk_partitions(all=True):
        mount_point = partition.mountpoint
        if not mount_point or mount_point in seen:
            continue
        seen.add(mount_point)
        mount_points.append(Path(mount_point))
    log.debug("Found %d mount points", len(mount_points))
    return mount_points


__all__ = ["IsMount", "list_mount_points", "mount_point_of"]
