"""Logging configuration for the application."""

import logging
import sys

from opinion.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for third-party libraries.

    Application code logs through logfire; this only sets levels and format
    for libraries that use the standard logging module (uvicorn, SQLAlchemy).

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # SQL echo is controlled by the engine's echo flag
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("opinion").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: environment={settings.environment}, level={logging.getLevelName(level)}"
    )
