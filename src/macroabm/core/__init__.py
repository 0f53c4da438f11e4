"""Core role/event infrastructure for macroabm."""

from typing import Any, Callable

from macroabm.core.decorators import event as event_decorator
from macroabm.core.decorators import role as role_decorator
from macroabm.core.event import Event
from macroabm.core.registry import get_event, get_role, list_events, list_roles
from macroabm.core.role import Role

event: Callable[..., Any] = event_decorator
role: Callable[..., Any] = role_decorator

__all__ = [
    "Event",
    "Role",
    "event",
    "get_event",
    "get_role",
    "list_events",
    "list_roles",
    "role",
]
