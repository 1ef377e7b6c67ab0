from pathlib import Path

import pytest

from ptrash.services import config
from ptrash.services.config import SettingsStore


def test_defaults_without_settings_file(tmp_path: Path) -> None:
    store = SettingsStore(config_dir=tmp_path)

    assert store.path == tmp_path / "settings.ini"
    assert store.load_trash_dir_name() == ".trash"
    assert store.load_timestamp_format() == "%Y-%m-%d_%H-%M-%S"
    assert store.load_log_level() == "WARNING"


def test_values_round_trip_through_file(tmp_path: Path) -> None:
    store = SettingsStore(config_dir=tmp_path)
    store.save_trash_dir_name(".bin")
    store.save_log_level("debug")

    reloaded = SettingsStore(config_dir=tmp_path)
    assert reloaded.load_trash_dir_name() == ".bin"
    assert reloaded.load_log_level() == "DEBUG"


def test_invalid_values_fall_back(tmp_path: Path) -> None:
    (tmp_path / "settings.ini").write_text(
        "[trash]\ndir_name = nested/trash\n[logging]\nlevel = LOUD\n", encoding="utf-8"
    )
    store = SettingsStore(config_dir=tmp_path)

    assert store.load_trash_dir_name() == ".trash"
    assert store.load_log_level() == "WARNING"


def test_malformed_file_is_ignored(tmp_path: Path) -> None:
    (tmp_path / "settings.ini").write_text("not an ini file\n", encoding="utf-8")

    assert SettingsStore(config_dir=tmp_path).load_trash_dir_name() == ".trash"


def test_timestamp_format_may_not_create_subfolders(tmp_path: Path) -> None:
    (tmp_path / "settings.ini").write_text(
        "[trash]\ntimestamp_format = %Y/%m/%d\n", encoding="utf-8"
    )
    assert SettingsStore(config_dir=tmp_path).load_timestamp_format() == "%Y-%m-%d_%H-%M-%S"

    (tmp_path / "settings.ini").write_text("[trash]\ntimestamp_format = %D\n", encoding="utf-8")
    assert SettingsStore(config_dir=tmp_path).load_timestamp_format() == "%Y-%m-%d_%H-%M-%S"


def test_custom_timestamp_format_is_kept(tmp_path: Path) -> None:
    store = SettingsStore(config_dir=tmp_path)
    store.save_timestamp_format("%Y%m%dT%H%M%S")

    assert SettingsStore(config_dir=tmp_path).load_timestamp_format() == "%Y%m%dT%H%M%S"


def test_missing_config_folder_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    def unavailable() -> Path:
        raise PermissionError(13, "Permission denied", "/home/readonly/.config")

    monkeypatch.setattr(config, "ensure_app_dirs", unavailable)

    store = SettingsStore()

    assert store.path.name == "settings.ini"
    assert store.load_log_level() in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
