"""Agent state containers."""

from macroabm.roles.bank import Bank
from macroabm.roles.economy import Economy
from macroabm.roles.firm import Firm
from macroabm.roles.worker import UNEMPLOYED, Worker

__all__ = [
    "Bank",
    "Economy",
    "Firm",
    "UNEMPLOYED",
    "Worker",
]
