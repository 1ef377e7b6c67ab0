# Filename: clear_worker.py
# Author: Rich Lewis @RichLewis007
# Description: Worker that empties per-partition trash directories. Finds trash folders on
#              every mounted partition or on a single one, reports their contents and purges
#              them after confirmation.

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable, Iterable
from pathlib import Path

from ptrash.models.results import OpResult, TrashStats
from ptrash.services import mounts
from ptrash.services.confirm import Confirm
from ptrash.services.formatting import format_bytes
from ptrash.services.trash import TRASH_DIR_NAME, trash_dir_for

log = logging.getLogger(__name__)

CLEAR_ALL_PROMPT = "Are you sure you want to clear ALL of them? [Y/N]: "
CLEAR_ONE_PROMPT = "Are you sure you want to clear this trash? [Y/N]: "

Locate = Callable[[Path], Path | None]
MountLister = Callable[[], Iterable[Path]]


def collect_stats(trash_dir: Path) -> TrashStats:
    """Count the regular files and directories below ``trash_dir``.

    The trash directory itself is not counted. Symlinks are never followed,
    and the total size is the apparent size of every entry.
    """
    stats = TrashStats()
    for dirpath, dirnames, filenames in os.walk(trash_dir):
        current = Path(dirpath)
        for name in dirnames:
            entry = current / name
            info = entry.lstat()
            stats.total_bytes += info.st_size
            # os.walk lists symlinks to directories here without descending.
            if entry.is_symlink():
                continue
            stats.directories += 1
        for name in filenames:
            entry = current / name
            info = entry.lstat()
            stats.total_bytes += info.st_size
            if entry.is_file() and not entry.is_symlink():
                stats.files += 1
    return stats


def purge(trash_dir: Path) -> OpResult:
    # Delete every child of ``trash_dir`` while keeping the directory itself.
    try:
        entries = sorted(trash_dir.iterdir())
    except OSError as exc:
        log.debug("Cannot list %s", trash_dir, exc_info=True)
        return OpResult.failure(f"{trash_dir}: {exc.strerror or exc}")

    failures: list[str] = []
    for entry in entries:
        try:
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()
        except OSError as exc:
            log.debug("Failed to remove %s", entry, exc_info=True)
            failures.append(f"{entry}: {exc.strerror or exc}")

    if failures:
        return OpResult.failure("; ".join(failures))
    return OpResult.success(f"Trash cleared: {trash_dir}")


class ClearWorker:
    # Lists, sizes and purges trash directories, gated by confirmation.

    def __init__(
        self,
        *,
        confirm: Confirm,
        locate: Locate | None = None,
        mount_points: MountLister | None = None,
        dir_name: str = TRASH_DIR_NAME,
    ) -> None:
        self._confirm = confirm
        self._locate = locate or mounts.mount_point_of
        self._mount_points = mount_points or mounts.list_mount_points
        self._dir_name = dir_name

    def find_trash_dirs(self) -> list[Path]:
        # Return the trash directories sitting directly under each mount point.
        found: list[Path] = []
        for mount_point in self._mount_points():
            candidate = trash_dir_for(mount_point, dir_name=self._dir_name)
            try:
                if candidate.is_dir() and not candidate.is_symlink() and candidate not in found:
                    found.append(candidate)
            except OSError:
                log.debug("Skipping unreadable mount point %s", mount_point, exc_info=True)
        return found

    def clear_all(self) -> int:
        # Clear the trash on every mounted partition after a single confirmation.
        print(f"Searching for {self._dir_name} folders on all mounted partitions...")
        trash_dirs = self.find_trash_dirs()
        if not trash_dirs:
            print(f"No {self._dir_name} folders found.")
            return 0

        print(f"The following {self._dir_name} folders will be cleared:")
        for trash_dir in trash_dirs:
            print(trash_dir)

        if not self._confirm(CLEAR_ALL_PROMPT):
            print("Operation cancelled.")
            return 0

        failed = 0
        for trash_dir in trash_dirs:
            print(f"Clearing {trash_dir} ...")
            result = purge(trash_dir)
            if not result.ok:
                failed += 1
                print(f"Error clearing {trash_dir}: {result.message}")
                log.warning("Incomplete clear of %s", trash_dir)
        if failed:
            print(f"{failed} of {len(trash_dirs)} trash folders could not be fully cleared.")
        else:
            print("All trash folders cleared.")
        return 0

    def clear_one(self, target: Path) -> int:
        # Clear the trash of the partition holding ``target`` after showing its contents.
        mount_point = self._locate(target)
        if mount_point is None:
            print(f"Warning: {target} does not exist.")
            return 0

        trash_dir = trash_dir_for(mount_point, dir_name=self._dir_name)
        if not trash_dir.is_dir():
            print(f"No trash directory found at {trash_dir}.")
            return 0

        stats = collect_stats(trash_dir)
        print(f"Trash location: {trash_dir}")
        print(f"{stats.files} files")
        print(f"{stats.directories} directories")
        print(f"Total size: {format_bytes(stats.total_bytes)}")

        if not self._confirm(CLEAR_ONE_PROMPT):
            print("Operation cancelled.")
            return 0

        result = purge(trash_dir)
        if result.ok:
            print(result.message)
        else:
            print(f"Error clearing {trash_dir}: {result.message}")
        return 0
