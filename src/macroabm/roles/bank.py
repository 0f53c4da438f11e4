from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Bank:
    """
    The single commercial bank.

    Plain scalar record: there is exactly one bank, so it is not a Role.
    """

    profits: float  # profitsB, profit/loss accumulator
    loans: float  # outstanding loan book
    equity: float  # E
