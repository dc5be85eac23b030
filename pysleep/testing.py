"""
Testing utilities for pysleep.

Tests should not touch the process-wide sleep state. fake_sleep() binds a
fresh, faked SleepState for the current context and restores the previous
binding afterwards, so nothing leaks between tests.

These helpers should ONLY be used in tests, not in production code.
"""

from contextlib import contextmanager
from typing import Iterator

from loguru import logger

from pysleep.core.state import SleepState, use_state


@contextmanager
def fake_sleep() -> Iterator[SleepState]:
    """
    Fake all sleeping inside the with block.

    Examples:
        # In tests only!
        from pysleep.testing import fake_sleep

        with fake_sleep() as state:
            Sleep.sleep(3).finalize()

        assert len(state.sequence) == 1
    """
    state = SleepState(fake=True)

    logger.debug("Sleep faking bound for test scope")

    with use_state(state):
        yield state
