"""Configuration management for the Toss Payments client."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.tosspayments.com"


class TossPaymentsConfig(BaseSettings):
    """
    Credentials and connection settings for the Toss Payments API.

    Instances are immutable. Build one at startup and pass it to every client
    that needs it.
    """

    secret_key: str = Field(default="", description="Secret key for payment operations")
    billing_secret_key: str | None = Field(
        default=None,
        description="Secret key for billing-key operations (falls back to secret_key)",
    )
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API base URL")
    timeout_seconds: float = Field(default=10.0, description="Request timeout")

    model_config = SettingsConfigDict(
        env_prefix="TOSS_PAYMENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    def billing_key_or_default(self) -> str:
        return self.billing_secret_key or self.secret_key


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    environment: str = Field(default="development", description="Environment name")
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=True, description="Render logs as JSON")

    # Toss Payments
    toss: TossPaymentsConfig = Field(default_factory=TossPaymentsConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
        frozen=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Load settings once from the environment."""
    return Settings()
