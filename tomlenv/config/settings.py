"""
tomlenv - Configuration Settings
Which variable selects the current environment, where env.toml lives, and
how noisy the library and CLI are. Read from TOMLENV_* process variables or
a local .env file.
"""

import logging
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    """tomlenv settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Current environment lookup ────────────────────────────────────
    env_var: str = Field(default="env", alias="TOMLENV_VAR")

    # ── Environments file location ────────────────────────────────────
    env_file_name: str = Field(default="env.toml", alias="TOMLENV_FILE_NAME")
    env_dir: str = Field(default=".", alias="TOMLENV_DIR")

    # ── Logging ───────────────────────────────────────────────────────
    log_level: str = Field(default="WARNING", alias="TOMLENV_LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            logger.warning(f"log level '{v}' not in {_LOG_LEVELS}, using WARNING")
            return "WARNING"
        return level


settings = Settings()
