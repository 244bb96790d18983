from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = "WexCars Service Fee API"
    environment: str = "local"
    api_prefix: str = "/api"
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    display_locale: str = Field(default="en_US", alias="DISPLAY_LOCALE")
    default_currency: str = "EUR"
    default_vat_rate: float = 25
    default_country: str = "SE"
    default_fee_model: str = "vat_on_top"

    cors_origins: list[str] = Field(
        default=["https://wexcars.com"],
        alias="CORS_ORIGINS",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
