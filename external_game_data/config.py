"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local secrets and env overrides (gitignored)
  4. Environment variables        — ``EXTERNAL_GAME_DATA_*`` prefix, plus
                                    ``HYPIXEL_API_KEY``

Entry point: ``load_config(config_path=None) -> AppConfig``

Data-source clients and CLI commands receive an ``AppConfig`` section,
never raw dicts or individual env var lookups scattered through the codebase.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: Optional[str] = "data/logs/external_game_data.log"
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class HypixelConfig(BaseModel):
    """Hypixel public API settings.

    ``api_key`` is only needed for player endpoints; the achievement catalog
    is public. Keep the key in ``.env`` as ``HYPIXEL_API_KEY``.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = "https://api.hypixel.net/v2"
    api_key: Optional[str] = None
    timeout_seconds: float = 30.0
    default_player_uuid: str = "f84c6a790a4e45e0879bcd49ebd4c4e2"

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {v}.")
        return v


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth.

    Constructed by ``load_config()`` which merges TOML + .env + environment.
    """

    model_config = ConfigDict(frozen=True)

    logging: LoggingConfig = LoggingConfig()
    hypixel: HypixelConfig = HypixelConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``; when that default file is
            absent (e.g. a non-editable install) the built-in ``AppConfig``
            defaults are used, still subject to env overrides.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If an explicit ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    if config_path is None:
        config_path = root / "config" / "default.toml"
        if not config_path.exists():
            return _build_app_config(_apply_env_overrides({}))

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create config/default.toml or pass --config."
        )

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    # 3. Apply environment variable overrides
    raw = _apply_env_overrides(raw)

    # 4. Build and validate AppConfig
    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variables to the raw config dict.

    Supported overrides:
      EXTERNAL_GAME_DATA_LOG_LEVEL  → raw["logging"]["level"]
      EXTERNAL_GAME_DATA_DEBUG      → raw["debug"]
      HYPIXEL_API_KEY               → raw["hypixel"]["api_key"]
    """
    if log_level := os.environ.get("EXTERNAL_GAME_DATA_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if debug := os.environ.get("EXTERNAL_GAME_DATA_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    if api_key := os.environ.get("HYPIXEL_API_KEY"):
        raw.setdefault("hypixel", {})["api_key"] = api_key

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    logging_raw = dict(raw.get("logging", {}))
    # TOML has no null; an empty string disables the file handler.
    if logging_raw.get("log_file") == "":
        logging_raw["log_file"] = None

    return AppConfig(
        logging=LoggingConfig(**logging_raw),
        hypixel=HypixelConfig(**raw.get("hypixel", {})),
        debug=raw.get("debug", False),
    )
