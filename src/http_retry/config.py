"""
Configuration settings for the HTTP retry layer.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development. Per-call extension options are merged
over these defaults when a Policy is built.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, Union


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # === Logging ===
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"
    
    # === Retry Defaults ===
    RETRY_LIMIT: int = 1  # Retries after the first attempt
    RETRY_DELAY: Union[int, str] = "100 ms"  # Milliseconds or duration string
    RETRY_METHODS: list[str] = ["DELETE", "GET", "HEAD", "PATCH", "PUT"]
    
    # === Timeout ===
    DEFAULT_TIMEOUT: Optional[Union[int, str]] = None  # Per-attempt, None = no deadline
    
    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True


# Global settings instance
settings = Settings()
