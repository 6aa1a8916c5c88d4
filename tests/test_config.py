import os

import pytest
from pydantic import ValidationError

from reftoken.config import EngineConfig, load_engine_config

ENV_VARS = ["REFTOKEN_MAX_SUGGESTIONS", "REFTOKEN_LOG_LEVEL", "REFTOKEN_LOG_FILE", "REFTOKEN_CONSOLE_LOG"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    for name in ENV_VARS:
        os.environ.pop(name, None)


def test_defaults(tmp_path) -> None:
    config = load_engine_config(str(tmp_path / "absent.env"))

    assert config == EngineConfig()
    assert config.max_suggestions == 10
    assert config.log_level == "INFO"


def test_environment_overrides(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("REFTOKEN_MAX_SUGGESTIONS", "5")
    monkeypatch.setenv("REFTOKEN_LOG_LEVEL", "debug")
    monkeypatch.setenv("REFTOKEN_CONSOLE_LOG", "true")

    config = load_engine_config(str(tmp_path / "absent.env"))

    assert config.max_suggestions == 5
    assert config.log_level == "DEBUG"
    assert config.console_output is True


def test_env_file_is_loaded(monkeypatch, tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("REFTOKEN_MAX_SUGGESTIONS=3\n", encoding="utf-8")

    config = load_engine_config(str(env_file))

    assert config.max_suggestions == 3


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        EngineConfig(max_suggestions=0)
    with pytest.raises(ValidationError):
        EngineConfig(log_level="LOUD")
