"""
Fluent sleep builder.

A Sleep accumulates a duration through chained unit calls and acts on it when
finalized: it either blocks the calling thread for that long, or, while fake
mode is on, records the duration and notifies observer callbacks.

Finalization is explicit. Use the builder as a context manager so it runs
exactly once when the block exits, or call finalize() directly:

    with Sleep.for_(1).second().and_(500).milliseconds():
        pass

    Sleep.sleep(2).finalize()

A builder that is never finalized does nothing: a bare Sleep.sleep(2) on its
own line does not sleep. Nothing runs on garbage collection.
"""

import math
import time
from datetime import datetime, timedelta
from typing import Any, Callable, Iterable, List, Optional, Union

from loguru import logger

from pysleep.core.exceptions import (
    NoDurationSpecifiedError,
    SleepAssertionError,
    UnknownDurationUnitError,
)
from pysleep.core.state import SleepCallback, SleepState, get_current_state
from pysleep.utils.duration import (
    format_duration,
    parse_duration,
    split_duration,
    total_microseconds,
    until,
)
from pysleep.utils.functional import Tappable, value
from pysleep.utils.macroable import Macroable

Amount = Union[int, float]
Condition = Union[bool, Callable[["Sleep"], bool]]


def _check_amount(duration: Any) -> Amount:
    if isinstance(duration, bool) or not isinstance(duration, (int, float)):
        raise TypeError(
            f"Duration amount must be int or float, got {type(duration).__name__}"
        )
    if isinstance(duration, float) and not math.isfinite(duration):
        raise ValueError(f"Duration must be finite, got {duration}")
    return duration


class Sleep(Tappable, Macroable):
    """
    Duration builder that sleeps, or records the sleep under fake mode.

    Numbers passed to the constructor, for_() or and_() stay pending until a
    unit method (minutes, seconds, milliseconds, microseconds) consumes them.
    A timedelta or duration string ("1m30s") is taken as a complete duration.
    """

    def __init__(
        self,
        duration: Union[Amount, str, timedelta],
        state: Optional[SleepState] = None,
    ) -> None:
        self.duration: timedelta = timedelta(0)
        self._pending: Optional[Amount] = None
        self._should_sleep = True
        self._finalized = False
        self._state = state
        self._set_duration(duration)

    # Construction

    @classmethod
    def for_(
        cls,
        duration: Union[Amount, str, timedelta],
        state: Optional[SleepState] = None,
    ) -> "Sleep":
        """
        Sleep for the given duration.

        Examples:
            Sleep.for_(5).seconds()
            Sleep.for_(timedelta(minutes=1))
            Sleep.for_("1m30s")
        """
        return cls(duration, state=state)

    @staticmethod
    def until(timestamp: Union[datetime, int, float]) -> timedelta:
        """
        Interval between now and the given timestamp.

        Unlike the other constructors this returns the computed timedelta,
        not a builder. Integers and floats are read as Unix epoch seconds.
        """
        return until(timestamp)

    @classmethod
    def usleep(cls, duration: Amount, state: Optional[SleepState] = None) -> "Sleep":
        """Sleep for the given number of microseconds."""
        return cls(duration, state=state).microseconds()

    @classmethod
    def sleep(cls, duration: Amount, state: Optional[SleepState] = None) -> "Sleep":
        """Sleep for the given number of seconds."""
        return cls(duration, state=state).seconds()

    def _set_duration(self, duration: Union[Amount, str, timedelta]) -> None:
        if isinstance(duration, (str, timedelta)):
            self.duration = parse_duration(duration)
            self._pending = None
            return

        self.duration = timedelta(0)
        self._pending = _check_amount(duration)

    # Units

    def minutes(self) -> "Sleep":
        return self._add("minutes")

    def minute(self) -> "Sleep":
        return self.minutes()

    def seconds(self) -> "Sleep":
        return self._add("seconds")

    def second(self) -> "Sleep":
        return self.seconds()

    def milliseconds(self) -> "Sleep":
        return self._add("milliseconds")

    def millisecond(self) -> "Sleep":
        return self.milliseconds()

    def microseconds(self) -> "Sleep":
        return self._add("microseconds")

    def microsecond(self) -> "Sleep":
        return self.microseconds()

    def and_(self, duration: Amount) -> "Sleep":
        """Add an amount to be consumed by the next unit call."""
        try:
            self._pending = _check_amount(duration)
        except (TypeError, ValueError):
            self._should_sleep = False
            raise
        return self

    def _add(self, unit: str) -> "Sleep":
        amount = self._pull_pending()

        try:
            self.duration += timedelta(**{unit: amount})
        except (ValueError, OverflowError):
            # Never act on a half-built duration
            self._should_sleep = False
            raise

        return self

    def _pull_pending(self) -> Amount:
        if self._pending is None:
            # Never act on a half-built duration
            self._should_sleep = False
            raise NoDurationSpecifiedError()

        pending = max(self._pending, 0)
        self._pending = None
        return pending

    # Gating

    def when(self, condition: Condition) -> "Sleep":
        """
        Only sleep when the condition holds.

        Args:
            condition: bool, or a callable receiving this builder
        """
        self._should_sleep = bool(value(condition, self))
        return self

    def unless(self, condition: Condition) -> "Sleep":
        """Don't sleep when the condition holds."""
        return self.when(not value(condition, self))

    # Finalization

    @property
    def pending(self) -> Optional[Amount]:
        return self._pending

    @property
    def should_sleep(self) -> bool:
        return self._should_sleep

    @property
    def finalized(self) -> bool:
        return self._finalized

    def finalize(self) -> None:
        """
        Sleep for the accumulated duration, or record it under fake mode.

        Runs at most once per builder; later calls do nothing. Neither
        sleeping nor recording happens until this runs, either directly or
        by leaving a with block.

        Raises:
            UnknownDurationUnitError: If an amount is still waiting for a unit
        """
        if self._finalized:
            return
        self._finalized = True

        if not self._should_sleep:
            logger.debug("Sleep skipped", duration=format_duration(self.duration))
            return

        if self._pending is not None:
            raise UnknownDurationUnitError(pending=self._pending)

        state = self._state if self._state is not None else get_current_state()

        if state.fake:
            callbacks = state.record(self.duration)
            logger.debug(
                f"Faked sleep for {format_duration(self.duration)}",
                duration_us=total_microseconds(self.duration),
                callbacks=len(callbacks),
            )
            for callback in callbacks:
                callback(self.duration)
            return

        logger.debug(
            f"Sleeping for {format_duration(self.duration)}",
            duration_us=total_microseconds(self.duration),
        )
        self._suspend()

    def _suspend(self) -> None:
        seconds, microseconds = split_duration(self.duration)

        if seconds > 0:
            time.sleep(seconds)

        if microseconds > 0:
            time.sleep(microseconds / 1_000_000)

    def __enter__(self) -> "Sleep":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.finalize()

    def __repr__(self) -> str:
        return (
            f"Sleep(duration={format_duration(self.duration)!r}, "
            f"pending={self._pending!r}, should_sleep={self._should_sleep})"
        )

    # Fake mode

    @classmethod
    def fake(cls, enabled: bool = True) -> None:
        """
        Stay awake and capture any attempts to sleep.

        Also clears the recorded sequence and observer callbacks.
        """
        get_current_state().reset(fake=enabled)
        logger.debug(f"Sleep faking {'enabled' if enabled else 'disabled'}")

    @classmethod
    def when_faking_sleep(cls, callback: SleepCallback) -> None:
        """Register a callback invoked with the duration of every faked sleep."""
        get_current_state().add_callback(callback)

    @classmethod
    def recorded(cls) -> List[timedelta]:
        """Durations recorded since the last fake() call."""
        return get_current_state().recorded()

    # Assertions

    @classmethod
    def assert_never_slept(cls) -> None:
        """Assert that no sleeping occurred."""
        cls.assert_slept_times(0)

    @classmethod
    def assert_slept_times(cls, expected: int) -> None:
        """
        Assert sleeping occurred exactly the given number of times.

        Raises:
            SleepAssertionError: Reporting expected and actual counts
        """
        actual = len(get_current_state().recorded())
        if actual != expected:
            raise SleepAssertionError(
                f"Expected [{expected}] sleeps but found [{actual}].",
                expected=expected,
                actual=actual,
            )

    @classmethod
    def assert_sequence(cls, expected: Iterable[Union["Sleep", str, Amount, timedelta]]) -> None:
        """
        Assert the exact sequence of recorded durations.

        Items may be timedeltas, duration strings, numbers of seconds, or
        Sleep builders whose accumulated duration is compared.
        """
        wanted = [
            item.duration if isinstance(item, Sleep) else parse_duration(item)
            for item in expected
        ]
        actual = get_current_state().recorded()

        if len(actual) != len(wanted):
            raise SleepAssertionError(
                f"Expected [{len(wanted)}] sleeps but found [{len(actual)}].",
                expected=len(wanted),
                actual=len(actual),
            )

        for index, (want, got) in enumerate(zip(wanted, actual)):
            if want != got:
                raise SleepAssertionError(
                    f"Expected sleep duration of [{format_duration(want)}] "
                    f"but actually slept for [{format_duration(got)}] at position {index}.",
                    expected=want,
                    actual=got,
                )

    @classmethod
    def assert_slept(cls, predicate: Callable[[timedelta], bool], times: int = 1) -> None:
        """Assert that exactly `times` recorded durations satisfy the predicate."""
        count = sum(1 for duration in get_current_state().recorded() if predicate(duration))
        if count != times:
            raise SleepAssertionError(
                f"The expected sleep was found [{count}] times instead of [{times}].",
                expected=times,
                actual=count,
            )

    @classmethod
    def assert_insomniac(cls) -> None:
        """Assert every recorded sleep had a zero duration."""
        for duration in get_current_state().recorded():
            if duration != timedelta(0):
                raise SleepAssertionError(
                    f"Unexpected sleep duration of [{format_duration(duration)}] found.",
                    expected=timedelta(0),
                    actual=duration,
                )
