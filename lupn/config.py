# file: lupn/config.py
"""
Configuration loader.

Settings are validated with pydantic and can come from a YAML file, a `.env`
file, or the process environment.

Precedence (highest to lowest):
1. OS environment variables
2. `.env` values
3. YAML config file values
4. Code defaults
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import dotenv_values
from pydantic import BaseModel, Field
from pydantic import ConfigDict as PydanticConfigDict

from lupn.core.lookup import DEFAULT_MAX_PREFIX_LENGTH


class LupnSettings(BaseModel):
    model_config = PydanticConfigDict(extra="ignore")

    log_level: str = "WARNING"
    json_logging: bool = False

    # Longest calling-code prefix tried when a full number does not parse.
    max_prefix_length: int = Field(default=DEFAULT_MAX_PREFIX_LENGTH, ge=1)


_ENV_MAP: dict[str, str] = {
    "LUPN_LOG_LEVEL": "log_level",
    "LUPN_JSON_LOGGING": "json_logging",
    "LUPN_MAX_PREFIX_LENGTH": "max_prefix_length",
}


def _read_yaml(path: Path) -> dict[str, Any]:
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    return raw if isinstance(raw, dict) else {}


def _read_dotenv(path: Path) -> dict[str, str]:
    # dotenv_values parses the file without touching os.environ.
    values = dotenv_values(path)
    return {k: v for k, v in values.items() if isinstance(k, str) and isinstance(v, str)}


def _overlay_env(target: dict[str, Any], env: dict[str, str]) -> None:
    for env_key, field_name in _ENV_MAP.items():
        if env_key in env:
            target[field_name] = env[env_key]


def load_settings(
    *, yaml_path: Path | None = None, env_path: Path | None = None
) -> LupnSettings:
    """
    Load settings from YAML and .env, with OS env overrides.

    Args:
        yaml_path: Optional YAML config path. Falls back to `LUPN_CONFIG`.
        env_path: Optional .env path (default: `.env` if present).

    Raises:
        pydantic.ValidationError: if a value has the wrong type or range.
    """

    data: dict[str, Any] = {}

    if env_path is None:
        maybe = Path(".env")
        env_path = maybe if maybe.exists() else None

    dotenv = _read_dotenv(env_path) if env_path is not None and env_path.exists() else {}

    if yaml_path is None:
        cfg = os.environ.get("LUPN_CONFIG") or dotenv.get("LUPN_CONFIG")
        if cfg:
            yaml_path = Path(cfg)

    if yaml_path is not None and yaml_path.exists():
        data.update(_read_yaml(yaml_path))

    if dotenv:
        _overlay_env(data, dotenv)

    os_env: dict[str, str] = {k: v for k, v in os.environ.items() if k in _ENV_MAP}
    _overlay_env(data, os_env)

    return LupnSettings.model_validate(data)
