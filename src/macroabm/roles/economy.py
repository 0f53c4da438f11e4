from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Economy:
    """
    Pure *state* container for economy-wide scalars.

    The bankruptcy phase only reads ``price_k`` and ``wb`` and increments the
    two default counters.
    """

    price_k: float  # price of one unit of capital
    wb: float  # base wage

    # default counters, cumulative over the run
    defaults: int = 0  # consumption-good firms
    defaults_k: int = 0  # capital-good firms
