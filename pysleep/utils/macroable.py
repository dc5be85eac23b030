"""
Runtime-registered methods for classes.

A Macroable class keeps a per-class table of named callables. Looking up an
unknown attribute on an instance checks the table and binds the callable to
the instance, so the macro receives it as its first argument.
"""

from typing import Any, Callable, ClassVar, Dict


class Macroable:
    """Mixin that lets callers register extra methods by name."""

    _macros: ClassVar[Dict[str, Callable[..., Any]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._macros = {}

    @classmethod
    def macro(cls, name: str, macro: Callable[..., Any]) -> None:
        """
        Register a macro.

        Args:
            name: Attribute name the macro is reachable under
            macro: Callable invoked as macro(instance, *args, **kwargs)

        Raises:
            ValueError: If name shadows an existing attribute of the class
        """
        if hasattr(cls, name):
            raise ValueError(f"Cannot register macro '{name}': attribute already exists")
        cls._macros[name] = macro

    @classmethod
    def has_macro(cls, name: str) -> bool:
        return any(name in klass.__dict__.get("_macros", {}) for klass in cls.__mro__)

    @classmethod
    def flush_macros(cls) -> None:
        cls._macros.clear()

    def __getattr__(self, name: str) -> Any:
        # Only called when normal lookup fails
        for klass in type(self).__mro__:
            macros = klass.__dict__.get("_macros", {})
            if name in macros:
                macro = macros[name]

                def bound(*args: Any, **kwargs: Any) -> Any:
                    return macro(self, *args, **kwargs)

                return bound

        raise AttributeError(
            f"'{type(self).__name__}' object has no attribute or macro '{name}'"
        )
