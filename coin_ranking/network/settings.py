"""
Network settings using Pydantic for environment-based configuration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NetworkSettings(BaseSettings):
    """Coinranking REST API configuration."""

    base_url: str = Field(
        default="https://api.coinranking.com/v2",
        description="Coinranking REST API base URL",
    )
    access_token: str = Field(
        default="",
        description="Value sent in the x-access-token header",
    )
    request_timeout: float = Field(
        default=10.0, gt=0, description="Total request timeout in seconds"
    )

    model_config = SettingsConfigDict(
        env_prefix="COINRANKING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


network_settings = NetworkSettings()
