"""
Logging utilities for the Maharishi backend.

configure_logging() sets up the process once (called from main.py);
get_logger() gives modules that want their own handler a logger at
settings.LOG_LEVEL.

RULES:
- NEVER log the Gemini API key or any other secret
- NEVER log full chat transcripts (farmer messages may carry personal details)

Acceptable logging:
- High-level events (e.g., "Chat session created", "Recommendations returned")
- Non-sensitive metadata (e.g., "soil_type='Alluvial'", "fragments=12")
- Error classes and sanitized error messages
"""

import logging
from typing import Optional

from maharishi.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# HTTP client loggers print request URLs at INFO, and Gemini URLs can carry the key
QUIET_LOGGERS = ("httpx", "httpcore", "google_genai", "urllib3")


def resolve_level(level_name: Optional[str] = None) -> int:
    """Map a level name such as "debug" to its number, falling back to INFO."""
    level = logging.getLevelName((level_name or settings.LOG_LEVEL).upper())
    if not isinstance(level, int):
        return logging.INFO
    return level


def configure_logging(level_name: Optional[str] = None) -> None:
    """
    Configure root logging for the application.

    Args:
        level_name: Optional level name (defaults to settings.LOG_LEVEL)
    """
    level = resolve_level(level_name)
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    logging.getLogger().setLevel(level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to settings.LOG_LEVEL)

    Returns:
        Configured logger instance

    Usage:
        >>> from maharishi.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)
    logger.setLevel(level if level is not None else resolve_level())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)
        # Root handlers from configure_logging would print every record twice
        logger.propagate = False

    return logger
