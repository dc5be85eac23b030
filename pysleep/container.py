"""
Marker exceptions for dependency-injection containers.

They carry no behavior of their own; containers raise them so callers can
catch every container failure with a single except clause.
"""


class ContainerError(Exception):
    """Base exception representing a generic error in a container."""

    pass


class CircularDependencyError(ContainerError):
    """Raised when resolving a binding requires the binding itself."""

    pass
