# Filename: results.py
# Author: Rich Lewis @RichLewis007
# Description: Result values returned by trash and clear operations. Each filesystem step
#              reports success or failure with a message instead of raising to the caller.

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True, frozen=True)
class OpResult:
    # Outcome of a single filesystem operation.

    ok: bool
    message: str = ""

    @classmethod
    def success(cls, message: str = "") -> OpResult:
        return cls(ok=True, message=message)

    @classmethod
    def failure(cls, message: str) -> OpResult:
        return cls(ok=False, message=message)


@dataclass(slots=True, frozen=True)
class MoveOutcome:
    # Outcome of moving one path into its partition's trash directory.

    source: Path
    destination: Path | None
    result: OpResult

    @property
    def ok(self) -> bool:
        return self.result.ok


@dataclass(slots=True)
class TrashResult:
    # Summary of a move phase, split into successes and failures.

    moved: list[MoveOutcome] = field(default_factory=list)
    failed: list[MoveOutcome] = field(default_factory=list)


@dataclass(slots=True)
class TrashStats:
    # Aggregate contents of a trash directory.

    files: int = 0
    directories: int = 0
    total_bytes: int = 0


__all__ = ["MoveOutcome", "OpResult", "TrashResult", "TrashStats"]
