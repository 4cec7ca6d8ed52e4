from __future__ import annotations

import json
from pathlib import Path

import pytest

from pkgview.errors import SettingsLoadError, SettingsValidationError
from pkgview.settings.manager import SettingsManager


def test_settings_manager_roundtrip(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    manager = SettingsManager(path=settings_path)
    manager.load()
    assert settings_path.exists()
    assert manager.get("export_directory") is None

    changes = []
    manager.settings_changed.connect(lambda key, value: changes.append((key, value)))
    export_dir = tmp_path / "exports"
    manager.set("export_directory", export_dir)

    assert changes == [("export_directory", str(export_dir))]
    assert manager.get("export_directory") == str(export_dir)
    stored = json.loads(settings_path.read_text(encoding="utf-8"))
    assert stored["export_directory"] == str(export_dir)


def test_settings_manager_nested_updates_preserve_defaults(tmp_path: Path) -> None:
    manager = SettingsManager(path=tmp_path / "settings.json")
    manager.load()
    manager.set("ui.default_to_tile_view_for_local_source", True)

    assert manager.get("ui.default_to_tile_view_for_local_source") is True
    assert manager.get("ui.theme") == "system"
    assert manager.get("ui.missing", "fallback") == "fallback"


def test_settings_manager_merges_partial_file(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(
        json.dumps({"schema": "pkgview/settings@1", "ui": {"theme": "dark"}}),
        encoding="utf-8",
    )
    manager = SettingsManager(path=settings_path)
    manager.load()

    assert manager.get("ui.theme") == "dark"
    assert manager.get("ui.default_to_tile_view_for_local_source") is False


def test_invalid_value_is_rejected_and_not_applied(tmp_path: Path) -> None:
    manager = SettingsManager(path=tmp_path / "settings.json")
    manager.load()
    changes = []
    manager.settings_changed.connect(lambda key, value: changes.append(key))

    with pytest.raises(SettingsValidationError):
        manager.set("ui.theme", "neon")

    assert manager.get("ui.theme") == "system"
    assert changes == []


def test_corrupt_file_raises_load_error(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    settings_path.write_text("{not json", encoding="utf-8")
    manager = SettingsManager(path=settings_path)

    with pytest.raises(SettingsLoadError):
        manager.load()


def test_get_settings_returns_detached_copy(tmp_path: Path) -> None:
    manager = SettingsManager(path=tmp_path / "settings.json")
    manager.load()
    snapshot = manager.get_settings()
    snapshot["ui"]["theme"] = "dark"

    assert manager.get("ui.theme") == "system"
