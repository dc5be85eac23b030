"""
Environment-driven settings for pysleep.

Environment variables:
    PYSLEEP_FAKE: Start the process-wide sleep state in fake mode
        ("1", "true", "yes", "on")
    PYSLEEP_LOG_LEVEL: Level for the default log handler (default: WARNING)
"""

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class SleepConfig:
    """Settings resolved from the environment."""

    fake: bool = False
    log_level: str = "WARNING"


def load_config() -> SleepConfig:
    """
    Read pysleep settings from the environment.

    Returns:
        SleepConfig with defaults for unset variables
    """
    fake_env = os.getenv("PYSLEEP_FAKE", "")
    log_level = os.getenv("PYSLEEP_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"

    return SleepConfig(
        fake=fake_env.strip().lower() in _TRUTHY,
        log_level=log_level,
    )
