"""
Test configuration and fixtures for unit tests.
"""

import pytest


@pytest.fixture(autouse=True)
def reset_sleep_state():
    """Ensure fake mode and recorded sleeps never leak between tests."""
    from pysleep.core.state import get_default_state, set_current_state

    set_current_state(None)
    get_default_state().reset(fake=False)

    yield

    set_current_state(None)
    get_default_state().reset(fake=False)


@pytest.fixture(autouse=True)
def reset_sleep_macros():
    """Remove macros registered by a test."""
    from pysleep.core.sleep import Sleep

    Sleep.flush_macros()

    yield

    Sleep.flush_macros()


@pytest.fixture
def slept(monkeypatch):
    """Replace time.sleep with a recorder so real-sleep paths run instantly."""
    calls = []
    monkeypatch.setattr("pysleep.core.sleep.time.sleep", calls.append)
    return calls
