"""
pysleep - Fluent, fakeable sleeping for Python

Build a pause out of chained unit calls and finalize it in a with block.
Under fake mode nothing sleeps: durations are recorded and can be asserted
on in tests.

Quick Start:
    >>> from pysleep import Sleep
    >>>
    >>> with Sleep.for_(1).second().and_(250).milliseconds():
    >>>     pass  # sleeps 1.25s when the block exits
    >>>
    >>> Sleep.fake()
    >>> Sleep.sleep(5).finalize()
    >>> Sleep.assert_slept_times(1)
"""

__version__ = "0.1.0"

# Core builder
from pysleep.core.sleep import Sleep

# Fake-mode state
from pysleep.core.state import (
    SleepState,
    get_current_state,
    has_current_state,
    set_current_state,
    use_state,
)

# Exceptions
from pysleep.core.exceptions import (
    NoDurationSpecifiedError,
    SleepAssertionError,
    SleepError,
    UnknownDurationUnitError,
)
from pysleep.container import CircularDependencyError, ContainerError

# Helpers
from pysleep.utils.duration import format_duration, parse_duration
from pysleep.utils.functional import Tappable, tap, value
from pysleep.utils.macroable import Macroable

# Logging and observability
from pysleep.observability.logging import configure_logging, get_logger

__all__ = [
    # Version
    "__version__",
    # Core
    "Sleep",
    # State
    "SleepState",
    "get_current_state",
    "set_current_state",
    "has_current_state",
    "use_state",
    # Exceptions
    "SleepError",
    "NoDurationSpecifiedError",
    "UnknownDurationUnitError",
    "SleepAssertionError",
    "ContainerError",
    "CircularDependencyError",
    # Helpers
    "parse_duration",
    "format_duration",
    "tap",
    "value",
    "Tappable",
    "Macroable",
    # Logging
    "configure_logging",
    "get_logger",
]
