from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    min_fragment_length: int = Field(10, alias="PRPATCH_MIN_FRAGMENT_LENGTH")
    excerpt_length: int = Field(200, alias="PRPATCH_EXCERPT_LENGTH")
    log_level: str = Field("info", alias="PRPATCH_LOG_LEVEL")
    log_format: str = Field("console", alias="PRPATCH_LOG_FORMAT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
