"""Configuration settings loaded from environment variables."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    gemini_api_key: str = Field(default="", validation_alias=AliasChoices("gemini_api_key", "api_key"))
    gemini_model: str = "gemini-3-pro-image-preview"
    gemini_api_url: str = "https://generativelanguage.googleapis.com/v1beta"
    request_timeout: float = 120.0
    log_level: str = "INFO"


settings = Settings()
