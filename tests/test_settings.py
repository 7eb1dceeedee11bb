from __future__ import annotations

from pathlib import Path

import pytest

from stairs.settings import Settings, load_config_file


def test_settings_defaults_without_environment() -> None:
    settings = Settings.load()

    assert settings.log_level == "WARNING"
    assert settings.logging_config is None
    assert settings.strict_skip is False


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("STAIRS_LOG_LEVEL", "debug")
    monkeypatch.setenv("STAIRS_LOGGING_CONFIG", str(tmp_path / "logging.ini"))
    monkeypatch.setenv("STAIRS_STRICT_SKIP", "yes")

    settings = Settings.load()

    assert settings.log_level == "DEBUG"
    assert settings.logging_config == tmp_path / "logging.ini"
    assert settings.strict_skip is True


def test_settings_file_is_overridden_by_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    config = tmp_path / "stairs.yaml"
    config.write_text("log_level: info\nstrict_skip: true\n", encoding="utf-8")
    monkeypatch.setenv("STAIRS_CONFIG", str(config))

    settings = Settings.load()
    assert settings.log_level == "INFO"
    assert settings.strict_skip is True

    monkeypatch.setenv("STAIRS_STRICT_SKIP", "0")
    assert Settings.load().strict_skip is False


def test_load_config_file_validates_payload(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config_file(tmp_path / "missing.yaml")

    bad = tmp_path / "bad.yaml"
    bad.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config_file(bad)

    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    assert load_config_file(empty) == {}
