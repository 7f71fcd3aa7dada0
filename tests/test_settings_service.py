"""Tests for persisted outline preferences."""

import json

import pytest

pytest.importorskip("gi")

from rmd_outline.services.settings_service import DEFAULT_SETTINGS, SettingsService  # noqa: E402


@pytest.fixture
def changes():
    return []


@pytest.fixture
def settings(tmp_path, changes):
    service = SettingsService(config_dir=tmp_path)
    service.connect("changed", lambda s, key, value: changes.append((key, value)))
    return service


def test_defaults_without_settings_file(settings):
    assert settings.get("outline.extensions") == [".rmd", ".md"]
    assert settings.get("outline.refresh_delay_ms") == 500
    assert settings.get("outline.missing", "fallback") == "fallback"


def test_saved_file_is_merged_over_defaults(tmp_path):
    (tmp_path / "settings.json").write_text(
        json.dumps({"outline": {"auto_scan": True}}), encoding="utf-8"
    )
    settings = SettingsService(config_dir=tmp_path)
    assert settings.get("outline.auto_scan") is True
    assert settings.get("outline.show_line_numbers") is True


def test_unreadable_settings_file_falls_back_to_defaults(tmp_path):
    (tmp_path / "settings.json").write_text("{not json", encoding="utf-8")
    settings = SettingsService(config_dir=tmp_path)
    assert settings.get("window.width") == 1100


def test_set_persists_and_emits_once(settings, changes, tmp_path):
    settings.set("outline.refresh_delay_ms", 750)
    settings.set("outline.refresh_delay_ms", 750)

    assert changes == [("outline.refresh_delay_ms", 750)]
    saved = json.loads((tmp_path / "settings.json").read_text(encoding="utf-8"))
    assert saved["outline"]["refresh_delay_ms"] == 750


def test_defaults_are_not_shared_with_settings(settings):
    settings.get("outline.extensions").append(".qmd")
    assert DEFAULT_SETTINGS["outline"]["extensions"] == [".rmd", ".md"]


def test_reset_single_key_and_everything(settings, changes):
    settings.set("outline.auto_scan", True)
    settings.reset("outline.auto_scan")
    assert settings.get("outline.auto_scan") is False

    settings.set("appearance.theme", "dark")
    settings.reset()
    assert settings.get("appearance.theme") == "system"
    assert changes[-1] == ("*", None)


def test_reset_unknown_key_is_ignored(settings, changes):
    settings.reset("outline.nope")
    assert changes == []
