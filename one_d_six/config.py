import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from one_d_six.rollable import ROLLABLE_TYPES


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ONE_D_SIX_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Rollable type used when the CLI is not given --type.
    default_type: str = "u32"
    log_level: str = "WARNING"
    # Seed for reproducible CLI rolls; None draws from the process-wide generator.
    seed: int | None = None

    @field_validator("default_type")
    @classmethod
    def _known_type(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in ROLLABLE_TYPES:
            raise ValueError(f"unknown rollable type {value!r}")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.strip().upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level {value!r}")
        return value


settings = Settings()
