"""Taskboard - A minimal task-tracking service with an HTTP API and a browser page."""

__version__ = "0.1.0"
__author__ = "Taskboard Team"
__description__ = "A minimal task-tracking service with an HTTP API and a browser page"

__all__ = [
    "__version__",
    "__author__",
    "__description__",
]

# Load environment variables as early as possible
import os
from pathlib import Path

from dotenv import load_dotenv


def load_env_file_early() -> None:
    """Load environment variables from the project's .env file at import time.

    Looks for `.env` in the project root (one level up from this package).

    Note:
        - Existing environment variables take precedence (override=False)
        - Debug output can be enabled via TASKBOARD_DEBUG=true
    """
    project_root = Path(__file__).parent.parent
    env_file = project_root / ".env"

    if env_file.exists():
        load_dotenv(env_file, override=False)

        if os.getenv("TASKBOARD_DEBUG", "false").lower() == "true":
            print(f"Environment variables loaded from {env_file}")
            print(f"  PORT: {os.environ.get('PORT', 'not set')}")
    elif os.getenv("TASKBOARD_DEBUG", "false").lower() == "true":
        print(f"No .env file found at {env_file}")


# Load environment variables immediately when package is imported
load_env_file_early()
