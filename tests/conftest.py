"""Shared fixtures for partition trash tests."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial
from pathlib import Path

import pytest

from ptrash import cli
from ptrash.services import config as config_service
from ptrash.services import logger as logger_service
from ptrash.services import mounts


@dataclass
class FakeMounts:
    """A mount table made of directories under ``tmp_path``."""

    points: list[Path] = field(default_factory=list)

    def add(self, path: Path) -> Path:
        path.mkdir(parents=True, exist_ok=True)
        self.points.append(path.resolve())
        return path.resolve()

    def ismount(self, path: str) -> bool:
        return path == "/" or Path(path) in self.points

    @property
    def locate(self) -> Callable[[Path], Path | None]:
        return partial(mounts.mount_point_of, ismount=self.ismount)

    def mount_points(self) -> list[Path]:
        return list(self.points)


@pytest.fixture(name="fake_mounts")
def fixture_fake_mounts() -> FakeMounts:
    return FakeMounts()


@pytest.fixture(name="cli_env")
def fixture_cli_env(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    fake_mounts: FakeMounts,
) -> FakeMounts:
    """Point the CLI at the fake mount table and a throwaway settings folder."""
    config_dir = tmp_path / "config"
    monkeypatch.setattr(
        cli, "_load_settings", lambda: config_service.SettingsStore(config_dir=config_dir)
    )
    monkeypatch.setattr(logger_service, "configure", lambda **_: None)
    monkeypatch.setattr(mounts, "mount_point_of", fake_mounts.locate)
    monkeypatch.setattr(mounts, "list_mount_points", fake_mounts.mount_points)
    return fake_mounts
