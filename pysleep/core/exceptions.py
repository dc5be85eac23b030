"""
Exception classes for sleep error handling.

Both builder errors signal programmer misuse of the fluent chain, not a
transient failure, so nothing in pysleep retries or swallows them.
"""

from typing import Any, Optional, Union


class SleepError(Exception):
    """Base exception for all sleep-related errors."""

    pass


class NoDurationSpecifiedError(SleepError):
    """
    Raised when a unit method is called with no pending amount to consume.

    Example:
        Sleep.for_(1).seconds().seconds()  # second call has nothing to consume
    """

    def __init__(self, message: str = "No duration specified.") -> None:
        super().__init__(message)
        self.message = message


class UnknownDurationUnitError(SleepError):
    """
    Raised at finalization when an amount was given but never assigned a unit.

    Example:
        Sleep.for_(5).finalize()  # 5 what?
    """

    def __init__(
        self,
        pending: Optional[Union[int, float]] = None,
        message: str = "Unknown duration unit.",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.pending = pending


class SleepAssertionError(AssertionError):
    """Raised when a fake-mode assertion does not hold."""

    def __init__(self, message: str, expected: Any = None, actual: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.expected = expected
        self.actual = actual
