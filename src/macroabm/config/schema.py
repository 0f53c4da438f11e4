"""
Configuration dataclass for model parameters.

Config instances are created by Model.init() after merging defaults,
user config and kwargs, and after ConfigValidator has checked them.

See Also
--------
ConfigValidator : Centralized validation for configuration parameters
macroabm.model.Model.init : Creates Config from merged parameters
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Config:
    """
    Immutable model parameters read by the bankruptcy phase.

    Parameters
    ----------
    k : float
        Capital-to-output ratio (positive).
    alpha : float
        Output elasticity of labor (positive).
    r_f : float
        Risk-free interest rate (0 to 1). Reborn firms start paying it.

    Examples
    --------
    >>> from macroabm.config import Config
    >>> cfg = Config(k=3.0, alpha=0.5, r_f=0.01)
    >>> cfg.k
    3.0

    Config is immutable:

    >>> cfg.k = 2.0  # doctest: +SKIP
    FrozenInstanceError: cannot assign to field 'k'
    """

    k: float
    alpha: float
    r_f: float
