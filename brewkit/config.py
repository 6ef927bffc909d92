import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict, BaseSettings


class BrewSettings(BaseSettings):
    log_level: str = Field("INFO", validation_alias="BREWKIT_LOG_LEVEL")
    log_ring_size: int = Field(200, ge=1, validation_alias="BREWKIT_LOG_RING_SIZE")

    sugar_probability: float = Field(0.5, ge=0.0, le=1.0, validation_alias="BREWKIT_SUGAR_PROBABILITY")

    # Testing / determinism hook
    random_seed: Optional[int] = Field(None, validation_alias="BREWKIT_RANDOM_SEED")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level


@lru_cache
def get_settings() -> BrewSettings:
    return BrewSettings()
