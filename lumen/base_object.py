"""Base class for reflected objects and a registry of types by name."""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T", bound=type)

_registry: dict[str, type] = {}


def register_type(cls: T) -> T:
    """Register *cls* under its class name so it can be created by name.

    Usable as a class decorator.
    """
    if not isinstance(cls, type):
        raise TypeError(f"expected a class, got {cls!r}")
    name = cls.__name__
    existing = _registry.get(name)
    if existing is not None and existing is not cls:
        raise ValueError(f"a different type is already registered as {name!r}")
    _registry[name] = cls
    return cls


def get_type(name: str) -> type | None:
    """Return the type registered under *name*, or None if there is none."""
    return _registry.get(name)


def create_instance(name: str) -> Any:
    """Create an instance of the type registered under *name*.

    Raises LookupError when no such type is registered.
    """
    cls = get_type(name)
    if cls is None:
        raise LookupError(f"no type registered as {name!r}")
    return cls()


@register_type
class BaseObject:
    """Common base of every object that can be reflected and serialized."""

    @property
    def type_name(self) -> str:
        """Name of the object's concrete type."""
        return type(self).__name__