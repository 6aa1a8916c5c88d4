"""Engine configuration.

Settings are read from the environment (optionally seeded from a ``.env``
file) and validated with pydantic before any input field is created.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from reftoken.logger import get_logger

logger = get_logger("config")

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class EngineConfig(BaseModel):
    """Configuration shared by every engine instance of a host application."""

    max_suggestions: int = Field(default=10, ge=1, le=100, description="Maximum items in a suggestion list")
    log_level: str = Field(default="INFO", description="loguru level name")
    log_file: Optional[str] = Field(default=None, description="Log file path (relative paths resolve to project root)")
    console_output: bool = Field(default=False, description="Also log to stderr")

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level

    class Config:
        """Pydantic configuration."""

        frozen = True


def load_engine_config(env_file: Optional[str] = None) -> EngineConfig:
    """
    Load engine configuration from environment variables.

    Args:
        env_file: Optional ``.env`` file to load before reading the environment.
            When None, python-dotenv searches for a ``.env`` file as usual.

    Returns:
        EngineConfig: Validated configuration

    Raises:
        ValidationError: If a setting is out of range or malformed
    """
    load_dotenv(env_file)

    values: dict[str, object] = {}
    if (max_suggestions := os.getenv("REFTOKEN_MAX_SUGGESTIONS")) is not None:
        values["max_suggestions"] = max_suggestions
    if (log_level := os.getenv("REFTOKEN_LOG_LEVEL")) is not None:
        values["log_level"] = log_level
    if (log_file := os.getenv("REFTOKEN_LOG_FILE")) is not None:
        values["log_file"] = log_file or None
    if (console := os.getenv("REFTOKEN_CONSOLE_LOG")) is not None:
        values["console_output"] = console.lower() == "true"

    config = EngineConfig(**values)
    logger.debug(f"Loaded engine config: {config}")
    return config
