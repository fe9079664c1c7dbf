"""Settings for Taskboard Server."""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from ... import __version__

DEFAULT_PORT = 3000

logger = logging.getLogger(__name__)


def _parse_port(raw: Optional[str]) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError:
        logger.warning("Invalid PORT value %r, using %d", raw, DEFAULT_PORT)
        return DEFAULT_PORT
    if not 0 < port < 65536:
        logger.warning("PORT %d out of range, using %d", port, DEFAULT_PORT)
        return DEFAULT_PORT
    return port


def _parse_bool(raw: Optional[str]) -> bool:
    return str(raw).lower() in ("1", "true", "yes", "on")


class Settings:
    """Server settings resolved from the environment."""

    def __init__(self):
        self.APP_NAME = "Taskboard"
        self.APP_VERSION = __version__
        self.APP_ENVIRONMENT = os.getenv("APP_ENVIRONMENT", "development")

        self.API_HOST = os.getenv("API_HOST", "127.0.0.1")
        self.API_PORT = _parse_port(os.getenv("PORT"))
        self.API_DEBUG = _parse_bool(os.getenv("API_DEBUG", "false"))

        self.CORS_ORIGINS: List[str] = [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]

        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.LOG_FORMAT = os.getenv("LOG_FORMAT", "default")
        logs_dir = os.getenv("LOGS_DIR")
        self.LOGS_DIR: Optional[Path] = Path(logs_dir) if logs_dir else None


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
