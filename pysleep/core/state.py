"""
Fake-mode state management.

The state holds:
- Whether sleeping is faked
- The sequence of durations recorded while faking
- Observer callbacks invoked on every faked sleep

A process-wide default state always exists. A different state can be bound
for the current execution context with use_state(), which is how tests get
isolated fake mode without touching the default.
"""

import threading
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Callable, Iterator, List, Optional

from pysleep.config import load_config

SleepCallback = Callable[[timedelta], Any]


@dataclass
class SleepState:
    """Fake flag, recorded durations and observer callbacks."""

    fake: bool = False
    sequence: List[timedelta] = field(default_factory=list)
    callbacks: List[SleepCallback] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def reset(self, fake: bool = True) -> None:
        """
        Set the fake flag and clear recorded durations and callbacks.

        Args:
            fake: Whether sleeping should be faked from now on
        """
        with self._lock:
            self.fake = fake
            self.sequence = []
            self.callbacks = []

    def record(self, duration: timedelta) -> List[SleepCallback]:
        """
        Append a faked sleep to the sequence.

        Returns:
            Snapshot of the callbacks to notify, in registration order
        """
        with self._lock:
            self.sequence.append(duration)
            return list(self.callbacks)

    def add_callback(self, callback: SleepCallback) -> None:
        with self._lock:
            self.callbacks.append(callback)

    def recorded(self) -> List[timedelta]:
        """Copy of the recorded sequence."""
        with self._lock:
            return list(self.sequence)


# Process-wide default, used when no state is bound
_default_state = SleepState(fake=load_config().fake)

# Context-local override of the default state
_current_state: ContextVar[Optional[SleepState]] = ContextVar(
    "sleep_state", default=None
)


def get_current_state() -> SleepState:
    """
    Get the state sleep builders should use right now.

    Returns:
        The bound SleepState, or the process-wide default
    """
    state = _current_state.get()
    if state is None:
        return _default_state
    return state


def set_current_state(state: Optional[SleepState]) -> None:
    """
    Bind a state for the current context, or None to fall back to the default.
    """
    _current_state.set(state)


def has_current_state() -> bool:
    """Check whether a state is explicitly bound for the current context."""
    return _current_state.get() is not None


def get_default_state() -> SleepState:
    """The process-wide default state."""
    return _default_state


@contextmanager
def use_state(state: SleepState) -> Iterator[SleepState]:
    """
    Bind a state for the duration of a with block.

    Example:
        with use_state(SleepState(fake=True)) as state:
            Sleep.sleep(1).finalize()
        assert len(state.sequence) == 1
    """
    token = _current_state.set(state)
    try:
        yield state
    finally:
        _current_state.reset(token)
