# src/macroabm/model.py
from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping

import numpy as np
import yaml

import macroabm.events  # noqa: F401 - needed to register events
from macroabm.config import Config, ConfigValidator
from macroabm.core.event import Event
from macroabm.core.registry import get_event
from macroabm.logging import DEEP_DEBUG, getLogger
from macroabm.roles import UNEMPLOYED, Bank, Economy, Firm, Worker

__all__ = ["Model"]

log = getLogger(__name__)


# helpers
# ---------------------------------------------------------------------------
def _read_yaml(obj: str | Path | Mapping[str, Any] | None) -> Dict[str, Any]:
    """Return a plain dict – {} if *obj* is None."""
    if obj is None:
        return {}
    if isinstance(obj, Mapping):
        return dict(obj)
    p = Path(obj)
    with p.open("rt", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, Mapping):
        raise TypeError(f"config root must be mapping, got {type(data)!r}")
    return dict(data)


def _package_defaults() -> Dict[str, Any]:
    """Load macroabm/defaults.yml"""
    txt = resources.files("macroabm").joinpath("defaults.yml").read_text()
    return yaml.safe_load(txt) or {}


def _new_firms(
    n: int,
    *,
    first_id: int,
    liquidity: float,
    capital: float,
    price: float,
    output: float,
    price_k: float,
    k: float,
    r_f: float,
) -> Firm:
    """Homogeneous, debt-free population whose ids start at *first_id*."""
    liquidity_arr = np.full(n, liquidity, dtype=np.float64)
    capital_arr = np.full(n, capital, dtype=np.float64)
    output_arr = np.full(n, output, dtype=np.float64)
    capital_value = capital_arr * price_k
    return Firm(
        net_worth=liquidity_arr + capital_value,
        liquidity=liquidity_arr,
        debt=np.zeros(n),
        retained=np.zeros(n),
        capital=capital_arr,
        capital_value=capital_value,
        price=np.full(n, price, dtype=np.float64),
        output_prev=output_arr.copy(),
        desired_output=output_arr.copy(),
        output=output_arr,
        stock=np.zeros(n),
        x=np.divide(
            output_arr / k, capital_arr, out=np.zeros(n), where=capital_arr > 0
        ),
        bar_k=capital_arr.copy(),
        bar_yk=output_arr / k,
        labor_eff=np.zeros(n),
        interest_rate=np.full(n, r_f, dtype=np.float64),
        firm_id=np.arange(first_id, first_id + n, dtype=np.int64),
    )


@dataclass(slots=True)
class Model:
    """
    Context object handed to every event.

    Bundles the two firm populations, the workers, the bank, the aggregate
    state and the parameters. Agents are owned here and shared by
    reference; events mutate them in place.

    Examples
    --------
    >>> import macroabm as ma
    >>> model = ma.Model.init(n_cons=50, n_cap=10, n_workers=500)
    >>> model.cons.net_worth[3] = -1.0
    >>> model.resolve_bankruptcies()
    >>> model.ec.defaults
    1
    """

    cons: Firm
    cap: Firm
    wrk: Worker
    bank: Bank
    ec: Economy
    config: Config

    @property
    def n_cons(self) -> int:
        return self.cons.size

    @property
    def n_cap(self) -> int:
        return self.cap.size

    @property
    def n_workers(self) -> int:
        return self.wrk.size

    # Constructor
    # ---------------------------------------------------------------------
    @classmethod
    def init(
        cls,
        config: str | Path | Mapping[str, Any] | None = None,
        **overrides: Any,  # anything here wins last
    ) -> "Model":
        """
        Build a Model.

        Order of precedence (later overrides earlier):

            1. package defaults  (macroabm/defaults.yml)
            2. *config*  (Path / str / Mapping / None)
            3. explicit keyword arguments (**overrides)

        Consumption firms get ids ``1..n_cons``, capital firms
        ``n_cons+1..n_cons+n_cap``; every worker starts unemployed.
        """
        cfg_dict: Dict[str, Any] = _package_defaults()
        cfg_dict.update(_read_yaml(config))
        cfg_dict.update(overrides)

        ConfigValidator.validate_config(cfg_dict)

        cls._configure_logging(cfg_dict.get("logging", {}))

        p = cfg_dict
        params = Config(
            k=float(p["k"]), alpha=float(p["alpha"]), r_f=float(p["r_f"])
        )

        shared = dict(
            liquidity=p["liquidity_init"],
            price=p["price_init"],
            output=p["output_init"],
            price_k=p["price_k"],
            k=params.k,
            r_f=params.r_f,
        )
        cons = _new_firms(
            p["n_cons"], first_id=UNEMPLOYED + 1, capital=p["capital_init"], **shared
        )
        # capital-good firms hold no capital stock
        cap = _new_firms(
            p["n_cap"], first_id=UNEMPLOYED + 1 + p["n_cons"], capital=0.0, **shared
        )
        wrk = Worker(
            employer=np.full(p["n_workers"], UNEMPLOYED, dtype=np.int64),
            wage=np.zeros(p["n_workers"]),
        )
        # every firm starts debt-free, so the loan book is empty
        bank = Bank(profits=0.0, loans=0.0, equity=float(p["equity_init"]))
        ec = Economy(price_k=float(p["price_k"]), wb=float(p["wb"]))

        log.info(
            f"Model initialised: {cons.size} consumption firms, "
            f"{cap.size} capital firms, {wrk.size} workers"
        )
        return cls(cons=cons, cap=cap, wrk=wrk, bank=bank, ec=ec, config=params)

    @staticmethod
    def _configure_logging(log_config: Dict[str, Any]) -> None:
        """
        Configure logging levels for macroabm loggers.

        Parameters
        ----------
        log_config : dict
            Logging configuration with keys:
            - default_level: str (e.g., 'INFO', 'DEBUG')
            - events: dict[str, str] (per-event overrides)
        """
        import logging

        def _level(name: str) -> int:
            name = name.upper()
            return DEEP_DEBUG if name == "DEEP_DEBUG" else getattr(logging, name)

        default_level = log_config.get("default_level", "INFO")
        logging.getLogger("macroabm").setLevel(_level(default_level))

        for event_name, level in (log_config.get("events") or {}).items():
            logging.getLogger(f"macroabm.events.{event_name}").setLevel(_level(level))

    # Events
    # ---------------------------------------------------------------------
    def get_event(self, name: str) -> Event:
        """Instantiate the registered event *name*."""
        return get_event(name)()

    def resolve_bankruptcies(self) -> None:
        """Run the bankruptcy phase of the current step."""
        self.get_event("firms_go_bankrupt").execute(self)
