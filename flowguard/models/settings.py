from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FlowguardConfig(BaseSettings):
    """Global configuration.

    Reads from environment variables with FLOWGUARD_ prefix and .env files.
    """

    model_config = SettingsConfigDict(
        env_prefix="FLOWGUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    snapshots_dir: str = "workflows"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    json_logs: bool = False
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)
