"""Role (Component) base class definition."""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, fields
from typing import Any, ClassVar


@dataclass(slots=True)
class Role(ABC):
    """
    Base class for all agent-state containers.

    A Role is a dataclass of NumPy arrays, one element per agent. For a
    population of 50 consumption firms, ``Firm.price`` is a length-50
    array and index ``i`` always refers to the same firm: bankrupt firms
    are reborn in their own row, never removed.

    Notes
    -----
    The __init_subclass__ hook registers every subclass in the role
    registry under its class name (or the ``name`` keyword).
    """

    name: ClassVar[str | None] = None

    def __init_subclass__(cls, name: str | None = None, **kwargs: Any) -> None:
        super(Role, cls).__init_subclass__(**kwargs)

        # @dataclass(slots=True) rebuilds the class and re-triggers this hook
        # without the keyword, so keep an already assigned name
        if name is not None:
            cls.name = name
        elif cls.name is None:
            cls.name = cls.__name__

        from macroabm.core.registry import _ROLE_REGISTRY

        _ROLE_REGISTRY[cls.name] = cls

    @property
    def size(self) -> int:
        """Number of agents in the population."""
        own = fields(self)
        return len(getattr(self, own[0].name)) if own else 0

    def __repr__(self) -> str:
        role_name = self.name or self.__class__.__name__
        return f"{role_name}(n={self.size}, fields={len(fields(self))})"
