# Filename: move_worker.py
# Author: Rich Lewis @RichLewis007
# Description: Worker that moves paths into their partition's trash directory. Validates the
#              requested paths, asks for one combined confirmation and reports each move.

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable, Iterable
from pathlib import Path

from ptrash.models.results import MoveOutcome, OpResult, TrashResult
from ptrash.services import mounts
from ptrash.services.confirm import Confirm
from ptrash.services.trash import TRASH_DIR_NAME, ensure_trash_dir, trashed_name

log = logging.getLogger(__name__)

MOVE_PROMPT = (
    "Are you sure you want to move these items to their respective trash folders? [Y/N]: "
)

Locate = Callable[[Path], Path | None]


class MoveWorker:
    # Moves files and folders to the trash directory of the partition holding them.

    def __init__(
        self,
        paths: Iterable[Path | str],
        *,
        timestamp: str,
        confirm: Confirm,
        locate: Locate | None = None,
        dir_name: str = TRASH_DIR_NAME,
    ) -> None:
        self._paths = [Path(path) for path in paths]
        self._timestamp = timestamp
        self._confirm = confirm
        self._locate = locate or mounts.mount_point_of
        self._dir_name = dir_name

    def validate(self) -> bool:
        # List every requested path; stop at the first one that is missing.
        print("Files and directories to be moved to trash:")
        for path in self._paths:
            if not os.path.lexists(path):
                print(f"Warning: {path} does not exist.")
                log.info("Aborting, %s does not exist", path)
                return False
            print(path)
        return True

    def run(self) -> int:
        # Validate, confirm once, then move everything. Returns the exit code.
        if not self._paths:
            print("No files or directories provided.")
            return 1
        if not self.validate():
            return 1
        if not self._confirm(MOVE_PROMPT):
            print("Operation cancelled.")
            return 0
        self.start()
        return 0

    def start(self) -> TrashResult:
        # Move each path in order; a failure never stops the remaining items.
        result = TrashResult()
        for path in self._paths:
            if not os.path.lexists(path):
                print(f"Warning: {path} does not exist.")
                result.failed.append(
                    MoveOutcome(path, None, OpResult.failure(f"{path} does not exist"))
                )
                continue

            outcome = self.move_one(path)
            if outcome.ok:
                print(f"Moved '{path}' -> '{outcome.destination}'")
                result.moved.append(outcome)
            else:
                print(f"Error moving '{path}'")
                result.failed.append(outcome)

        log.info("Moved %d item(s), %d failed", len(result.moved), len(result.failed))
        return result

    def move_one(self, path: Path) -> MoveOutcome:
        # Move a single path and describe what happened.
        mount_point = self._locate(path)
        if mount_point is None:
            return MoveOutcome(path, None, OpResult.failure(f"No mount point for {path}"))

        try:
            trash_dir = ensure_trash_dir(mount_point, dir_name=self._dir_name)
        except OSError as exc:
            log.debug("Cannot prepare trash directory on %s", mount_point, exc_info=True)
            return MoveOutcome(path, None, OpResult.failure(str(exc)))

        destination = trash_dir / trashed_name(path, self._timestamp)
        if os.path.lexists(destination):
            return MoveOutcome(
                path, destination, OpResult.failure(f"{destination} already exists")
            )

        try:
            shutil.move(os.fspath(path), os.fspath(destination))
        except OSError as exc:
            log.debug("Failed to move %s to %s", path, destination, exc_info=True)
            return MoveOutcome(path, destination, OpResult.failure(str(exc)))

        log.debug("Moved %s to %s", path, destination)
        return MoveOutcome(path, destination, OpResult.success())
