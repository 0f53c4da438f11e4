# src/macroabm/systems/bankruptcy.py
"""
Bankruptcy  ─  liquidate firms with negative net worth and rebirth them
in place as freshly capitalised entrants.

Sequence per failing firm:
  • default counter +1
  • residual balance (liquidity − debt) written off against the bank
  • balance sheet & production plan reset from peer statistics
  • workforce released to the labour pool

Consumption-good and capital-good firms share one routine, parameterised by
a small ``FirmKind`` profile.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import numpy as np

from macroabm import logging
from macroabm.config import Config
from macroabm.roles import UNEMPLOYED, Bank, Economy, Firm, Worker
from macroabm.typing import Bool1D
from macroabm.utils import trim_mean

log = logging.getLogger("macroabm")

_TARGET_LEVERAGE = 0.2
_TRIM_PROP = 0.1


# ───────────────────────── firm-kind profiles ─────────────────────────
@dataclass(slots=True, frozen=True)
class FirmKind:
    """What differs between the consumption-good and capital-good paths."""

    name: str
    counter: str  # Economy attribute incremented on every default
    solvent: Callable[[Firm], Bool1D]  # peers whose output enters the estimate
    holds_capital: bool  # entrant's net worth includes capital value
    warning: str  # logged when no peer is solvent


CONSUMPTION = FirmKind(
    name="consumption",
    counter="defaults",
    solvent=lambda f: (f.liquidity - f.debt) > 0,
    holds_capital=True,
    warning="all consumption firms are very indebted",
)

CAPITAL = FirmKind(
    name="capital",
    counter="defaults_k",
    solvent=lambda f: f.net_worth > 0,
    holds_capital=False,
    warning="all capital firms are bankrupted",
)


# ───────────────────────── bank loss accounting ───────────────────────
def bank_absorbs_residual(bank: Bank, liquidity: float, debt: float) -> float:
    """
    Book a liquidated firm's residual balance on the bank.

    Rule
    ----
        π_B += L − D
        loans −= D
        E += L − D

    Returns the signed residual ``L − D`` (negative means a loss).
    """
    residual = float(liquidity) - float(debt)
    bank.profits += residual
    bank.loans -= float(debt)
    bank.equity += residual
    return residual


# ───────────────────────── workforce release ──────────────────────────
def firm_fires_all_workers(firms: Firm, i: int, wrk: Worker) -> int:
    """Release every worker of firm *i*; returns how many were employed there."""
    fired = wrk.employer == firms.firm_id[i]
    n_fired = int(fired.sum())
    if n_fired:
        wrk.employer[fired] = UNEMPLOYED
        wrk.wage[fired] = 0.0
    firms.labor_eff[i] = 0.0
    return n_fired


# ───────────────────────── firm reinitialization ──────────────────────
def robust_output_prev(firms: Firm, kind: FirmKind) -> float:
    """
    Trimmed mean of ``output_prev`` over currently solvent peers.

    Returns ``+inf`` when no peer is solvent, so that the leverage cap
    decides the entrant's scale.
    """
    to_trim = firms.output_prev[kind.solvent(firms)]
    if to_trim.size == 0:
        log.warning(kind.warning)
        return np.inf
    return trim_mean(to_trim, _TRIM_PROP)


def firm_goes_bankrupt(
    i: int,
    firms: Firm,
    kind: FirmKind,
    ec: Economy,
    bank: Bank,
    wrk: Worker,
    cfg: Config,
) -> None:
    """
    Liquidate firm *i* and rebirth it as a new entrant.

    Rule
    ----
        A = PA + K · p_k          (consumption kind; capital kind: A = PA)
        liquidity = A − K · p_k   (capital kind: liquidity = A)
        P = mean(P over the whole population)
        Y_max = A · (1 + ℓ / (1 − ℓ)) / w_b · α,   ℓ = 0.2
        Y_prev = min(trim_mean(Y_prev of solvent peers), Y_max)

    All statistics are read from the live population, so peers reborn
    earlier in the same sweep contribute their reset values.
    """
    setattr(ec, kind.counter, getattr(ec, kind.counter) + 1)

    residual = bank_absorbs_residual(bank, firms.liquidity[i], firms.debt[i])

    # peer statistics, taken before this firm's row is touched
    mean_price = float(firms.price.mean())
    tmean_output = robust_output_prev(firms, kind)

    capital_value = firms.capital[i] * ec.price_k if kind.holds_capital else 0.0

    firms.net_worth[i] = firms.retained[i] + capital_value
    if kind.holds_capital:
        firms.capital_value[i] = capital_value
    firms.retained[i] = 0.0
    firms.liquidity[i] = firms.net_worth[i] - capital_value
    firms.debt[i] = 0.0
    firms.price[i] = mean_price

    # maximum initial production is bounded by the target leverage
    leverage_scale = 1.0 + _TARGET_LEVERAGE / (1.0 - _TARGET_LEVERAGE)
    max_output = firms.net_worth[i] * leverage_scale / ec.wb * cfg.alpha

    output_prev = min(tmean_output, float(max_output))
    firms.output_prev[i] = output_prev
    firms.desired_output[i] = output_prev
    if kind.holds_capital:
        capital = firms.capital[i]
        firms.x[i] = output_prev / cfg.k / capital if capital > 0 else 0.0
        firms.bar_k[i] = capital
        firms.bar_yk[i] = output_prev / cfg.k
    firms.output[i] = 0.0
    firms.stock[i] = 0.0
    firms.interest_rate[i] = cfg.r_f

    n_fired = firm_fires_all_workers(firms, i, wrk)

    if log.isEnabledFor(logging.DEEP_DEBUG):
        log.deep(
            f"  {kind.name} firm {int(firms.firm_id[i])} (index {i}) reborn: "
            f"bank residual={residual:,.2f}, A={firms.net_worth[i]:.2f}, "
            f"P={mean_price:.3f}, Y_prev={output_prev:.2f} "
            f"(trimmed={tmean_output:.2f}, cap={max_output:.2f}), "
            f"fired={n_fired}"
        )


# ───────────────────────── bankruptcy sweep ───────────────────────────
def firms_go_bankrupt(
    cons: Firm,
    cap: Firm,
    ec: Economy,
    bank: Bank,
    wrk: Worker,
    cfg: Config,
) -> None:
    """
    Single forward pass over consumption then capital firms.

    Every firm with net worth A < 0 is reborn *immediately*, so firms later
    in the scan see earlier ones already reset.
    """
    for kind, firms in ((CONSUMPTION, cons), (CAPITAL, cap)):
        for i in range(firms.net_worth.size):
            # pick sequentially failed firms
            if firms.net_worth[i] < 0:
                firm_goes_bankrupt(i, firms, kind, ec, bank, wrk, cfg)
