"""
Loguru logging configuration for pysleep.

Provides a console handler by default and optional file or JSON output.
Sleep events are logged at DEBUG with the duration bound as extra context.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from pysleep.config import load_config


def configure_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_logs: bool = False,
) -> None:
    """
    Configure pysleep logging with loguru.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
        json_logs: If True, output logs in JSON format

    Examples:
        # Show every real and faked sleep
        configure_logging(level="DEBUG")

        # JSON logs to a file
        configure_logging(level="DEBUG", log_file="sleep.log", json_logs=True)
    """
    # Remove default logger
    logger.remove()

    console_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level> | "
        "{extra}"
    )

    logger.add(
        sys.stderr,
        format=console_format,
        level=level,
        colorize=not json_logs,
        serialize=json_logs,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_file,
            format=(
                "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
                "{level: <8} | "
                "{name}:{function}:{line} | "
                "{message} | "
                "{extra}"
            ),
            level=level,
            rotation="10 MB",
            retention="7 days",
            serialize=json_logs,
        )

    logger.debug(f"pysleep logging configured at level {level}")


def get_logger(name: Optional[str] = None):
    """
    Get a logger instance, optionally bound to a module name.

    Examples:
        log = get_logger(__name__)
        log.debug("Sleeping")
    """
    if name:
        return logger.bind(module=name)
    return logger


# Default configuration on import
# Users can override by calling configure_logging()
# Only configure if logger doesn't have handlers
if len(logger._core.handlers) == 0:
    configure_logging(level=load_config().log_level)
