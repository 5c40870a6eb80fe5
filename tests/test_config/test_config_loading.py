"""Tests for configuration loading, merging, and validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from external_game_data.config import (
    AppConfig,
    HypixelConfig,
    LoggingConfig,
    _deep_merge,
    load_config,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("EXTERNAL_GAME_DATA_LOG_LEVEL", "EXTERNAL_GAME_DATA_DEBUG", "HYPIXEL_API_KEY"):
        monkeypatch.delenv(var, raising=False)
    # load_config() reads the project .env; keep it from leaking into tests
    monkeypatch.setattr("external_game_data.config.load_dotenv", lambda **kwargs: False)


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


class TestSubConfigs:
    def test_defaults(self):
        config = AppConfig()
        assert config.hypixel.base_url == "https://api.hypixel.net/v2"
        assert config.hypixel.api_key is None
        assert config.logging.level == "INFO"
        assert config.debug is False

    def test_level_normalized_to_upper(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_invalid_level_raises(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")

    def test_non_positive_timeout_raises(self):
        with pytest.raises(ValidationError):
            HypixelConfig(timeout_seconds=0)

    def test_frozen(self):
        with pytest.raises(Exception):
            AppConfig().debug = True


class TestLoadConfig:
    def test_repository_default_toml_loads(self):
        config = load_config()
        assert config.hypixel.default_player_uuid == "f84c6a790a4e45e0879bcd49ebd4c4e2"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.toml")

    def test_missing_default_file_uses_builtin_defaults(self, tmp_path, monkeypatch):
        monkeypatch.setattr("external_game_data.config._find_project_root", lambda: tmp_path)
        assert load_config() == AppConfig()

    def test_builtin_defaults_still_take_env_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setattr("external_game_data.config._find_project_root", lambda: tmp_path)
        monkeypatch.setenv("HYPIXEL_API_KEY", "from-env")
        config = load_config()
        assert config.hypixel.api_key == "from-env"
        assert config.hypixel.default_player_uuid == "f84c6a790a4e45e0879bcd49ebd4c4e2"

    def test_toml_values_applied(self, tmp_path):
        path = _write(
            tmp_path / "default.toml",
            '[hypixel]\nbase_url = "https://mirror.test/v2/"\ntimeout_seconds = 5\n'
            '[logging]\nlog_file = ""\n',
        )
        config = load_config(path)
        assert config.hypixel.base_url == "https://mirror.test/v2"
        assert config.hypixel.timeout_seconds == 5.0
        assert config.logging.log_file is None

    def test_local_toml_overrides(self, tmp_path):
        path = _write(tmp_path / "default.toml", '[logging]\nlevel = "INFO"\njson_format = false\n')
        _write(tmp_path / "local.toml", '[logging]\nlevel = "DEBUG"\n')
        config = load_config(path)
        assert config.logging.level == "DEBUG"
        assert config.logging.json_format is False

    def test_env_overrides(self, tmp_path, monkeypatch):
        path = _write(tmp_path / "default.toml", "debug = false\n")
        monkeypatch.setenv("EXTERNAL_GAME_DATA_LOG_LEVEL", "warning")
        monkeypatch.setenv("EXTERNAL_GAME_DATA_DEBUG", "yes")
        monkeypatch.setenv("HYPIXEL_API_KEY", "secret-key")
        config = load_config(path)
        assert config.logging.level == "WARNING"
        assert config.debug is True
        assert config.hypixel.api_key == "secret-key"

    def test_invalid_value_raises(self, tmp_path):
        path = _write(tmp_path / "default.toml", "[hypixel]\ntimeout_seconds = -1\n")
        with pytest.raises(ValidationError):
            load_config(path)


def test_deep_merge_nested() -> None:
    merged = _deep_merge({"a": {"x": 1, "y": 2}, "b": 1}, {"a": {"y": 3}, "c": 4})
    assert merged == {"a": {"x": 1, "y": 3}, "b": 1, "c": 4}
