"""Event (System) base class definition."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from macroabm.model import Model


def _camel_to_snake(name: str) -> str:
    """Convert CamelCase to snake_case."""
    s1 = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub("([a-z0-9])([A-Z])", r"\1_\2", s1).lower()


@dataclass(slots=True)
class Event(ABC):
    """
    Base class for all events (systems).

    An Event wraps one step of economic logic that mutates the model
    state in place. The outer simulation loop looks events up by name in
    the registry and calls ``execute`` once per step.

    Notes
    -----
    Events are registered automatically via the __init_subclass__ hook,
    under the snake_case class name unless ``name`` is given.
    """

    name: ClassVar[str] = ""

    def __init_subclass__(cls, name: str = "", **kwargs: Any) -> None:
        super(Event, cls).__init_subclass__(**kwargs)

        if name != "":
            cls.name = name
        elif cls.name == "":
            cls.name = _camel_to_snake(cls.__name__)

        from macroabm.core.registry import _EVENT_REGISTRY

        _EVENT_REGISTRY[cls.name] = cls

    def get_logger(self) -> logging.Logger:
        """
        Get the logger for this event.

        Logger name format: ``macroabm.events.{event_name}``; its level can
        be set per event through the ``logging.events`` config mapping.
        """
        return logging.getLogger(f"macroabm.events.{self.name}")

    @abstractmethod
    def execute(self, model: Model) -> None:
        """
        Execute the event's logic, mutating *model* in place.

        Parameters
        ----------
        model : Model
            Context object holding every agent population and the config.
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
