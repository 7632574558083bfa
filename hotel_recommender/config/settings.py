"""Application settings and configuration management."""
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class PartnerSettings(BaseSettings):
    """Partner availability API configuration."""

    base_url: str = "http://localhost:3031"
    max_retries: int = 5  # Connection attempts handled by the httpx transport
    request_timeout: int = 30

    model_config = SettingsConfigDict(env_prefix="PARTNER_")


class RecommendationSettings(BaseSettings):
    """Recommendation engine configuration."""

    currency: str = "USD"  # Only currency the partner prices in
    require_forward_stay: bool = False  # Reject trips whose end is not after start

    model_config = SettingsConfigDict(env_prefix="RECOMMENDATION_")


class ServerSettings(BaseSettings):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 4040

    model_config = SettingsConfigDict(env_prefix="SERVER_")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "json"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    """Main application settings."""

    environment: Literal["dev", "staging", "prod"] = "dev"
    debug: bool = False

    # Sub-settings
    partner: PartnerSettings = PartnerSettings()
    recommendation: RecommendationSettings = RecommendationSettings()
    server: ServerSettings = ServerSettings()
    logging: LoggingSettings = LoggingSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def partner_base_url(self) -> str:
        """Partner base URL without a trailing slash."""
        return self.partner.base_url.strip().rstrip("/")


# Global settings instance
settings = Settings()
