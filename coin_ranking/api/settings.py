"""
Coin ranking HTTP API settings, read from COINRANKING_API_* variables.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """Bind address and uvicorn log level for the coin ranking API."""

    host: str = Field(default="127.0.0.1", description="Coin ranking API bind address")
    port: int = Field(default=8000, ge=1, le=65535, description="Coin ranking API port")
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        default="INFO", description="uvicorn log level"
    )

    model_config = SettingsConfigDict(
        env_prefix="COINRANKING_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


api_settings = APISettings()
