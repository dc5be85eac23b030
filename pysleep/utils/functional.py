"""
Small functional helpers shared across pysleep.
"""

from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")


class HigherOrderTapProxy:
    """
    Forwards a single method call to the target, then returns the target.

    Example:
        tap(builder).when(False)  # returns builder, not when()'s result
    """

    def __init__(self, target: Any) -> None:
        self.target = target

    def __getattr__(self, name: str) -> Callable[..., Any]:
        method = getattr(self.target, name)

        def call(*args: Any, **kwargs: Any) -> Any:
            method(*args, **kwargs)
            return self.target

        return call


def tap(value: T, callback: Optional[Callable[[T], Any]] = None) -> Any:
    """
    Call the given callback with the value, then return the value.

    Args:
        value: Object to pass through
        callback: Side-effect function; when omitted a proxy is returned

    Returns:
        The original value, or a HigherOrderTapProxy wrapping it
    """
    if callback is None:
        return HigherOrderTapProxy(value)

    callback(value)
    return value


def value(candidate: Any, *args: Any) -> Any:
    """Return candidate(*args) if candidate is callable, else candidate itself."""
    if callable(candidate):
        return candidate(*args)
    return candidate


class Tappable:
    """Mixin adding a fluent tap() to any class."""

    def tap(self, callback: Optional[Callable[[Any], Any]] = None) -> Any:
        return tap(self, callback)
