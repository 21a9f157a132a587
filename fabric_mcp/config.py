"""Configuration settings for the Fabric MCP server."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings loaded from FABRIC_MCP_* environment variables.

    Timeouts and buffer sizes live in constants.py, not here.
    """

    model_config = SettingsConfigDict(
        env_prefix="FABRIC_MCP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # External program
    fabric_binary: str = "fabric"
    patterns_dir: Optional[Path] = None  # probed before the standard locations

    # Process admission; None leaves spawning unbounded
    max_concurrency: Optional[int] = Field(default=None, gt=0)

    # Logging
    log_level: str = "INFO"
    debug: bool = False
    user_space: Path = Path.home() / ".fabric-mcp"
    file_logging: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
