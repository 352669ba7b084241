"""
Logging utilities for Hobby to Hustle backend.

Provides standardized logger configuration.

SECURITY RULES:
- NEVER log Supabase Auth tokens, API keys, or secrets
- NEVER log full raw model output (truncate to a short preview)

Acceptable logging:
- High-level events (e.g., "generate-hobby-ideas invoked", "Gemini call completed")
- Fallback decisions with their reason (e.g., "parse failure, using default ideas")
- Error codes and sanitized error messages
"""

import logging
from typing import Optional

# Maximum characters of raw model text to include in a log line
MAX_PREVIEW_CHARS = 500


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to INFO)

    Returns:
        Configured logger instance

    Usage:
        >>> from backend.utils.logging import get_logger
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
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def preview(text: Optional[str], limit: int = MAX_PREVIEW_CHARS) -> str:
    """Truncate untrusted text for log output."""
    if not text:
        return ""
    return text if len(text) <= limit else text[:limit] + "..."
