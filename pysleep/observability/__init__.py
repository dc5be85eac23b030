"""
Observability and logging for pysleep.
"""

from pysleep.observability.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
