"""Client configuration handling."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_ENDPOINT = "https://translate.googleapis.com/translate_a/single"


class Settings(BaseSettings):
    """Tunables for the translate endpoint and the batch worker pool."""

    model_config = SettingsConfigDict(
        env_prefix="WEBTRANSLATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    endpoint: str = DEFAULT_ENDPOINT
    client_name: str = "gtx"
    timeout: float = Field(default=10.0, gt=0)
    user_agent: str = "webtranslate/0.1"

    default_workers: int = Field(default=4, ge=1)


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()
