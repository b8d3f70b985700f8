from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    """Run configuration loaded from environment variables."""

    # Hosting environments export upper-case names (``CLIENT_ID``); matching
    # case-insensitively lets them populate the lower-case fields.
    model_config = SettingsConfigDict(case_sensitive=False, frozen=True)

    client_id: str
    client_secret: str
    code: str
    webhook_url: str

    # When enabled, a non-200 answer from the token endpoint fails the run
    # instead of being parsed for a token.
    strict_token_status: bool = False
    log_level: LogLevel = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_case_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


@lru_cache()
def get_settings() -> Settings:
    return Settings()
