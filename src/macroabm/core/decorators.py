# src/macroabm/core/decorators.py
"""
Decorators for Role and Event definition.

Instead of::

    @dataclass(slots=True)
    class Firm(Role):
        net_worth: Float1D

you can write::

    @role
    class Firm:
        net_worth: Float1D

The decorators make the class inherit from Role/Event (if it does not
already), apply ``@dataclass(slots=True)`` and so trigger registration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeVar

T = TypeVar("T")


def _rebase(cls: type, base: type, name: str | None) -> type:
    # Rebuild the class on top of *base* only; slots do not mix with
    # multiple inheritance. A custom name goes into the namespace so the
    # registration hook never files the class under its own name
    namespace = {
        "__module__": cls.__module__,
        "__qualname__": cls.__qualname__,
        "__annotations__": getattr(cls, "__annotations__", {}),
    }
    if cls.__doc__ is not None:
        namespace["__doc__"] = cls.__doc__
    for attr_name in dir(cls):
        if not attr_name.startswith("__"):
            namespace[attr_name] = getattr(cls, attr_name)
    if name is not None:
        namespace["name"] = name
    return type(cls.__name__, (base,), namespace)


def _make_decorator(
    base: type,
    cls: type[T] | None,
    name: str | None,
    dataclass_kwargs: dict[str, Any],
) -> type[T] | Callable[[type[T]], type[T]]:
    dataclass_kwargs.setdefault("slots", True)

    def decorator(cls: type[T]) -> type[T]:
        if not issubclass(cls, base):
            cls = _rebase(cls, base, name)  # type: ignore[assignment]

        # set before @dataclass so __init_subclass__ sees it
        if name is not None:
            cls.name = name  # type: ignore[attr-defined]

        return dataclass(**dataclass_kwargs)(cls)

    if cls is None:
        return decorator
    return decorator(cls)


def role(
    cls: type[T] | None = None,
    *,
    name: str | None = None,
    **dataclass_kwargs: Any,
) -> type[T] | Callable[[type[T]], type[T]]:
    """Define a Role: inherit from Role, apply ``@dataclass(slots=True)``.

    Supports both ``@role`` and ``@role(name="...")``.
    """
    from macroabm.core.role import Role

    return _make_decorator(Role, cls, name, dataclass_kwargs)


def event(
    cls: type[T] | None = None,
    *,
    name: str | None = None,
    **dataclass_kwargs: Any,
) -> type[T] | Callable[[type[T]], type[T]]:
    """Define an Event: inherit from Event, apply ``@dataclass(slots=True)``.

    Supports both ``@event`` and ``@event(name="...")``. Without a name the
    event registers under its snake_case class name.
    """
    from macroabm.core.event import Event

    return _make_decorator(Event, cls, name, dataclass_kwargs)
