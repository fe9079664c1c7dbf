"""Main entry point for Taskboard Server Backend."""

from __future__ import annotations

import uvicorn
from loguru import logger

from taskboard.server.api.app import create_app
from taskboard.server.config.logging import setup_logging
from taskboard.server.config.settings import get_settings

# Create app instance for uvicorn
app = create_app()


def main() -> None:
    """Configure logging and serve the API until interrupted."""

    settings = get_settings()
    setup_logging(settings)

    config = uvicorn.Config(
        app,
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level="debug" if settings.API_DEBUG else "info",
    )
    server = uvicorn.Server(config)

    logger.info(
        "Taskboard server running on http://{host}:{port}",
        host=settings.API_HOST,
        port=settings.API_PORT,
    )
    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught; shutting down")
    finally:
        logger.info("Taskboard server stopped")


if __name__ == "__main__":
    main()
