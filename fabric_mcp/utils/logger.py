"""
Logger utility for the Fabric MCP server.

Standard output carries the MCP protocol, so console logging always goes to
stderr. When file logging is enabled, rotating logs are written to
{user_space}/logs/:
- fabric-mcp.log: Main log with 5MB rotation, keeps 3 backups
- fabric-mcp.json: Structured JSON, 5MB rotation, keeps 2 backups
"""

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from fabric_mcp.config import Settings, get_settings
from fabric_mcp.utils.path_utils import ensure_directory


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def _get_log_dir(settings: Settings) -> Path:
    """Get log directory from user space."""
    return ensure_directory(settings.user_space.expanduser() / "logs")


def get_logger(
    name: str, level: Optional[int] = None, settings: Optional[Settings] = None
) -> logging.Logger:
    """
    Get or create a logger with stderr and rotating file handlers.

    Handlers are attached only once per logger name, so calling this again
    just adjusts the level.

    Args:
        name: Logger name
        level: Optional logging level (defaults to the configured log_level,
            or DEBUG when debug is set)
        settings: Settings to read; defaults to get_settings()

    Returns:
        Configured logger instance
    """
    settings = settings or get_settings()
    logger = logging.getLogger(name)

    if level is None:
        level = logging.DEBUG if settings.debug else logging.getLevelName(
            settings.log_level.upper()
        )
        if not isinstance(level, int):
            level = logging.INFO

    if not logger.handlers:
        text_formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(text_formatter)
        logger.addHandler(console_handler)

        if settings.file_logging:
            try:
                log_dir = _get_log_dir(settings)

                main_handler = RotatingFileHandler(
                    log_dir / "fabric-mcp.log",
                    maxBytes=5 * 1024 * 1024,
                    backupCount=3,
                    encoding="utf-8",
                )
                main_handler.setFormatter(text_formatter)
                logger.addHandler(main_handler)

                json_handler = RotatingFileHandler(
                    log_dir / "fabric-mcp.json",
                    maxBytes=5 * 1024 * 1024,
                    backupCount=2,
                    encoding="utf-8",
                )
                json_handler.setLevel(logging.INFO)
                json_handler.setFormatter(JsonFormatter())
                logger.addHandler(json_handler)

            except OSError as e:
                logger.warning(f"File logging unavailable: {e}")

        logger.propagate = False

    logger.setLevel(level)
    return logger
