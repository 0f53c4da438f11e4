"""
System functions: the economic logic, written against roles.

Events (``macroabm.events``) wrap these functions and unpack the model
context for them; they can also be called directly on role instances.
"""

from macroabm.systems.bankruptcy import (
    CAPITAL,
    CONSUMPTION,
    FirmKind,
    bank_absorbs_residual,
    firm_fires_all_workers,
    firm_goes_bankrupt,
    firms_go_bankrupt,
    robust_output_prev,
)

__all__ = [
    "CAPITAL",
    "CONSUMPTION",
    "FirmKind",
    "bank_absorbs_residual",
    "firm_fires_all_workers",
    "firm_goes_bankrupt",
    "firms_go_bankrupt",
    "robust_output_prev",
]
