"""
Application configuration management using Pydantic Settings.
Handles environment variables and default values for the service.
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host address")
    api_port: int = Field(default=8080, description="API port")
    api_debug: bool = Field(default=False, description="Enable debug mode")
    api_reload: bool = Field(default=False, description="Enable auto-reload")

    # CORS Configuration
    cors_allow_origins: List[str] = Field(
        default=["*"],
        description="Origins allowed to call the API"
    )

    # Market data API Configuration
    market_data_base_url: str = Field(
        default="https://api.awattar.de/v1/marketdata",
        description="Base URL of the market data API"
    )
    market_data_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Timeout in seconds for market data requests"
    )

    # Cost calculation
    require_price_coverage: bool = Field(
        default=False,
        description="Reject readings not covered by any price bucket instead of pricing them at zero"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json/text)")


# Global settings instance
settings = Settings()
