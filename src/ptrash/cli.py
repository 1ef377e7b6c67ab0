# Filename: cli.py
# Author: Rich Lewis @RichLewis007
# Description: Command-line interface for Partition Trash. Moves paths to the trash folder of
#              their own partition, or clears those trash folders with ``-c``.

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .services import config as config_service
from .services import logger as logger_service
from .services.confirm import Confirm, prompt_confirm
from .services.trash import operation_timestamp
from .workers.clear_worker import ClearWorker
from .workers.move_worker import MoveWorker

log = logging.getLogger(__name__)

_CLEAR_FLAGS = ("-c", "--clear")


def build_parser() -> argparse.ArgumentParser:
    # Create and configure the command-line argument parser.
    parser = argparse.ArgumentParser(
        prog="ptrash",
        description=(
            "Move files to a .trash folder on their own partition, "
            "or clear those folders with -c."
        ),
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Files or directories to move to trash (with -c: a path on the partition to clear).",
    )
    parser.add_argument(
        "-c",
        "--clear",
        action="store_true",
        help="Clear trash folders on all mounted partitions, or only on the partition of PATH.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set console log level (default: from settings, else WARNING).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _load_settings() -> config_service.SettingsStore:
    return config_service.SettingsStore()


def main(argv: list[str] | None = None, *, confirm: Confirm | None = None) -> int:
    # Entry point for the CLI utility.
    parser = build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)
    args = parser.parse_args(argv)

    # The mode is chosen by the first argument only.
    if args.clear and argv[0] not in _CLEAR_FLAGS:
        parser.error("-c must be the first argument")
    if args.clear and len(args.paths) > 1:
        parser.error("-c accepts at most one path")

    settings = _load_settings()
    logger_service.configure(log_level=args.log_level or settings.load_log_level())
    dir_name = settings.load_trash_dir_name()
    confirm = confirm or prompt_confirm

    try:
        if args.clear:
            worker = ClearWorker(confirm=confirm, dir_name=dir_name)
            if args.paths:
                return worker.clear_one(args.paths[0])
            return worker.clear_all()

        timestamp = operation_timestamp(fmt=settings.load_timestamp_format())
        log.debug("Operation timestamp %s", timestamp)
        mover = MoveWorker(args.paths, timestamp=timestamp, confirm=confirm, dir_name=dir_name)
        return mover.run()
    except KeyboardInterrupt:
        print()
        print("Operation cancelled.")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
