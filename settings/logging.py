"""Logging configuration."""

import sys

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL, to_file: bool = True):
    """Configure console logging and, optionally, a daily rotated debug log."""
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        # Cache hits/misses are logged at DEBUG; keep them out of the console.
        logger.add(
            LOG_DIR / "votes_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
            enqueue=True,
        )
        logger.info("Logging to {}", LOG_DIR)

    return logger
