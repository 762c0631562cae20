"""
Loguru logging configuration.

Features:
- Console logging for development
- Structured JSON logging everywhere else
- Optional rotating log file
- Component name in all log messages
"""

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from models.config import get_settings

if TYPE_CHECKING:
    from loguru import Record

    from models.config import Settings


def component_filter(record: "Record") -> bool:
    """
    Add a default component name to the log record.

    Services bind ``component`` with ``logger.bind``; records logged without it
    get ``"-"`` so the format string never fails.

    Args:
        record: Loguru log record.

    Returns:
        Always True (filter never drops messages).
    """
    record["extra"].setdefault("component", "-")
    return True


def configure_logging(
    environment: str = "development",
    level: str | None = None,
    log_file: str | None = None,
) -> None:
    """
    Configure Loguru for the password policy engine.

    Args:
        environment: "development" for console, anything else for JSON.
        level: Overrides the default level (DEBUG in development, INFO otherwise).
        log_file: Optional path of a rotating log file.
    """
    # Remove default handler
    logger.remove()

    log_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{extra[component]}</cyan> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )
    development = environment == "development"
    level = level or ("DEBUG" if development else "INFO")

    if development:
        logger.add(
            sys.stderr,
            format=log_format,
            level=level,
            filter=component_filter,
            colorize=True,
        )
    else:
        # JSON format (machine-parseable)
        logger.add(
            sys.stderr,
            format="{message}",
            level=level,
            filter=component_filter,
            serialize=True,
        )

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format=log_format if development else "{message}",
            level=level,
            filter=component_filter,
            rotation="10 MB",
            retention="7 days",
            serialize=not development,
        )


def configure_logging_from_settings(settings: "Settings | None" = None) -> None:
    """Configure logging from ENVIRONMENT, LOG_LEVEL and LOG_FILE settings."""
    settings = settings or get_settings()
    configure_logging(
        environment=settings.ENVIRONMENT,
        level=settings.LOG_LEVEL,
        log_file=settings.LOG_FILE,
    )
