"""Configuration settings for the Aura accounts data layer."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Remote Aura API
    api_base_url: str = "http://localhost:8080"
    request_timeout_seconds: float = 30.0

    log_level: str = "INFO"

    class Config:
        env_prefix = "AURA_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
