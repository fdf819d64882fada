"""
Application Settings using Pydantic Settings.

Centralized configuration management with environment variable support.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ============================================
    # Environment
    # ============================================
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment",
    )
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # ============================================
    # API Configuration
    # ============================================
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")

    # ============================================
    # Interview Storage
    # ============================================
    storage_dir: str = Field(
        default="./data",
        description="Directory holding the persisted key-value blobs",
    )
    storage_key: str = Field(
        default="interview-storage",
        description="Name of the blob holding the interview map",
    )
    seed_demo_data: bool = Field(
        default=False,
        description="Seed demo interviews when the store is empty",
    )

    # ============================================
    # Calendar Grid
    # ============================================
    calendar_view_start_hour: int = Field(
        default=9,
        ge=0,
        le=23,
        description="First hour shown on the weekly grid",
    )
    calendar_hour_height: float = Field(
        default=80.0,
        gt=0,
        description="Pixel height of one hour row",
    )
    calendar_min_event_height: float = Field(
        default=24.0,
        ge=0,
        description="Minimum pixel height of a rendered event",
    )
    calendar_slot_count: int = Field(
        default=12,
        ge=1,
        le=24,
        description="Number of hourly rows on the grid",
    )

    # ============================================
    # LLM Providers (OpenAI-compatible chat completions)
    # ============================================
    llm_timeout: float = Field(
        default=60.0,
        description="Timeout in seconds for a single extraction request",
    )
    doubao_api_url: str = Field(
        default="https://ark.cn-beijing.volces.com/api/v3/chat/completions",
        description="Doubao (Volcengine Ark) chat completion endpoint",
    )
    doubao_api_key: str | None = Field(
        default=None,
        description="Server-side Doubao API key used when a request has none",
    )
    doubao_model_id: str | None = Field(
        default=None,
        description="Server-side Doubao endpoint/model id",
    )
    deepseek_api_url: str = Field(
        default="https://api.deepseek.com/chat/completions",
        description="DeepSeek chat completion endpoint",
    )
    deepseek_api_key: str | None = Field(
        default=None,
        description="Server-side DeepSeek API key used when a request has none",
    )
    deepseek_model_id: str | None = Field(
        default=None,
        description="DeepSeek model id (defaults to deepseek-chat)",
    )

    # ============================================
    # Computed Properties
    # ============================================
    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
