# file: tests/test_config.py
from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from lupn.config import load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in ("LUPN_CONFIG", "LUPN_LOG_LEVEL", "LUPN_JSON_LOGGING", "LUPN_MAX_PREFIX_LENGTH"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


def test_defaults() -> None:
    settings = load_settings()
    assert settings.log_level == "WARNING"
    assert settings.json_logging is False
    assert settings.max_prefix_length == 4


def test_precedence_os_env_over_dotenv_over_yaml(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    yaml_path = tmp_path / "cfg.yaml"
    yaml_path.write_text("log_level: ERROR\nmax_prefix_length: 3\njson_logging: true\n")
    env_path = tmp_path / "custom.env"
    env_path.write_text("LUPN_LOG_LEVEL=INFO\nLUPN_MAX_PREFIX_LENGTH=2\n")
    monkeypatch.setenv("LUPN_MAX_PREFIX_LENGTH", "1")

    settings = load_settings(yaml_path=yaml_path, env_path=env_path)
    assert settings.json_logging is True
    assert settings.log_level == "INFO"
    assert settings.max_prefix_length == 1


def test_config_path_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    yaml_path = tmp_path / "cfg.yaml"
    yaml_path.write_text("max_prefix_length: 2\n")
    monkeypatch.setenv("LUPN_CONFIG", str(yaml_path))
    assert load_settings().max_prefix_length == 2


def test_default_dotenv_in_cwd(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("LUPN_JSON_LOGGING=true\n")
    assert load_settings().json_logging is True


def test_invalid_prefix_length_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LUPN_MAX_PREFIX_LENGTH", "0")
    with pytest.raises(ValidationError):
        load_settings()
