"""
Logging utilities for the PC Build Advisor backend.

Provides standardized logger configuration.

SECURITY RULES:
- NEVER log the Gemini API key or any other secret
- NEVER log full user prompts (truncate to a short preview)

Acceptable logging:
- High-level events (e.g., "Build generation requested")
- Upstream status codes and sanitized error bodies
"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to INFO)

    Returns:
        Configured logger instance

    Usage:
        >>> from buildadvisor.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = logging.INFO

    logger.setLevel(level)

    # Add handler if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt=LOG_FORMAT,
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def preview(text: str, limit: int = 50) -> str:
    """Shorten user-provided text for log lines."""
    if len(text) <= limit:
        return text
    return f"{text[:limit]}..."
