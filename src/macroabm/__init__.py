"""
macroabm - Firm bankruptcy resolution for agent-based macro models
=================================================================

Consumption-good and capital-good firms, a single bank and a labor force
are stored as NumPy struct-of-arrays roles. Once per step the outer
simulation loop runs the bankruptcy phase: every firm whose net worth has
turned negative is liquidated and reborn *in place* as a new entrant. Its
residual balance is written off against the bank, its balance sheet and
production plan are reset from (trimmed) peer statistics, and its workers
are released to the labor pool.

Quick Start
-----------
>>> import macroabm as ma
>>> model = ma.Model.init(n_cons=100, n_cap=20, n_workers=1000)
>>> model.cons.net_worth[[3, 7]] = -5.0
>>> model.resolve_bankruptcies()
>>> model.ec.defaults
2

Calling the system functions directly on your own roles:

>>> from macroabm.systems import firms_go_bankrupt
>>> firms_go_bankrupt(model.cons, model.cap, model.ec, model.bank,
...                   model.wrk, model.config)

Public API
----------
Model
    Context object bundling populations, bank, aggregates and parameters.
Firm, Worker, Bank, Economy, UNEMPLOYED
    State containers and the unemployed sentinel.
Config
    Frozen model parameters (k, alpha, r_f).
Role, Event, role, event
    Base classes and decorators for extending the model.
get_event, list_events
    Event registry access.
trim_mean
    Two-sided trimmed mean used for entrant statistics.
logging
    Logging with an extra DEEP_DEBUG level.
"""

from macroabm import logging
from macroabm.config import Config
from macroabm.core import Event, Role, event, get_event, list_events, role
from macroabm.model import Model
from macroabm.roles import UNEMPLOYED, Bank, Economy, Firm, Worker
from macroabm.utils import trim_mean

__version__ = "0.1.0"

__all__ = [
    "Bank",
    "Config",
    "Economy",
    "Event",
    "Firm",
    "Model",
    "Role",
    "UNEMPLOYED",
    "Worker",
    "event",
    "get_event",
    "list_events",
    "logging",
    "role",
    "trim_mean",
]
