"""iostyle-mcp settings loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """iOS style bot settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Message filtering
    ignore_groups: bool = False
    ignore_broadcasts: bool = True
    only_process_formatted: bool = True  # skip messages without * _ ~ `

    # Label prepended to every reply ("" = none)
    reply_prefix: str = ""

    log_level: str = "INFO"
