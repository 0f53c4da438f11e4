# tests/unit/systems/test_bankruptcy.py
from __future__ import annotations

import logging

import numpy as np
import pytest

from macroabm.logging import DEEP_DEBUG
from macroabm.roles import UNEMPLOYED
from macroabm.systems.bankruptcy import (
    CAPITAL,
    CONSUMPTION,
    bank_absorbs_residual,
    firm_fires_all_workers,
    firm_goes_bankrupt,
    firms_go_bankrupt,
    robust_output_prev,
)
from tests.helpers.factories import (
    mock_bank,
    mock_config,
    mock_economy,
    mock_firms,
    mock_workers,
)


# ───────────────────────── bank loss accounting ───────────────────────
def test_bank_absorbs_negative_residual() -> None:
    bank = mock_bank(profits=0.0, loans=500.0, equity=1_000.0)

    residual = bank_absorbs_residual(bank, liquidity=3.0, debt=8.0)

    assert residual == pytest.approx(-5.0)
    assert bank.profits == pytest.approx(-5.0)
    assert bank.loans == pytest.approx(492.0)
    assert bank.equity == pytest.approx(995.0)


def test_bank_absorbs_positive_residual() -> None:
    """Cash left over after repaying the debt is a gain for the bank."""
    bank = mock_bank(profits=1.0, loans=100.0, equity=50.0)

    bank_absorbs_residual(bank, liquidity=12.0, debt=2.0)

    assert bank.profits == pytest.approx(11.0)
    assert bank.loans == pytest.approx(98.0)
    assert bank.equity == pytest.approx(60.0)


# ───────────────────────── workforce release ──────────────────────────
def test_firm_fires_all_workers_only_touches_its_own() -> None:
    firms = mock_firms(3)  # ids 1, 2, 3
    wrk = mock_workers(
        5,
        employer=[1, 2, 1, UNEMPLOYED, 3],
        wage=[1.0, 1.1, 1.2, 0.0, 1.3],
    )

    n_fired = firm_fires_all_workers(firms, 0, wrk)

    assert n_fired == 2
    np.testing.assert_array_equal(wrk.employer, [0, 2, 0, 0, 3])
    np.testing.assert_allclose(wrk.wage, [0.0, 1.1, 0.0, 0.0, 1.3])
    assert firms.labor_eff[0] == 0.0
    np.testing.assert_allclose(firms.labor_eff[1:], [3.0, 3.0])


def test_firm_fires_all_workers_is_idempotent() -> None:
    firms = mock_firms(2)
    wrk = mock_workers(3, employer=[1, 2, 1], wage=[1.0, 1.0, 1.0])

    firm_fires_all_workers(firms, 0, wrk)
    employer, wage = wrk.employer.copy(), wrk.wage.copy()

    assert firm_fires_all_workers(firms, 0, wrk) == 0
    np.testing.assert_array_equal(wrk.employer, employer)
    np.testing.assert_array_equal(wrk.wage, wage)


# ───────────────────────── robust prior output ────────────────────────
def test_robust_output_prev_uses_consumption_solvency() -> None:
    """Consumption peers count when liquidity − debt > 0."""
    firms = mock_firms(
        3,
        liquidity=[1.0, 30.0, 20.0],
        debt=[5.0, 5.0, 5.0],
        net_worth=[50.0, 50.0, 50.0],
        output_prev=[100.0, 12.0, 8.0],
    )

    assert robust_output_prev(firms, CONSUMPTION) == pytest.approx(10.0)


def test_robust_output_prev_uses_capital_solvency() -> None:
    """Capital peers count when net worth > 0, whatever their debt."""
    firms = mock_firms(
        3,
        liquidity=[1.0, 1.0, 1.0],
        debt=[5.0, 5.0, 5.0],
        net_worth=[-1.0, 10.0, 0.0],
        output_prev=[100.0, 12.0, 8.0],
    )

    assert robust_output_prev(firms, CAPITAL) == pytest.approx(12.0)


def test_robust_output_prev_falls_back_to_inf(caplog) -> None:
    caplog.set_level(logging.WARNING, logger="macroabm")
    firms = mock_firms(2, liquidity=[1.0, 2.0], debt=[5.0, 2.0])

    assert robust_output_prev(firms, CONSUMPTION) == np.inf
    [record] = [r for r in caplog.records if r.name == "macroabm"]
    assert record.levelno == logging.WARNING
    # the level is carried by the record, not repeated in the text
    assert record.getMessage() == "all consumption firms are very indebted"


def test_robust_output_prev_capital_warning_text(caplog) -> None:
    caplog.set_level(logging.WARNING, logger="macroabm")
    firms = mock_firms(2, net_worth=[-1.0, 0.0])

    assert robust_output_prev(firms, CAPITAL) == np.inf
    assert [r.getMessage() for r in caplog.records] == [
        "all capital firms are bankrupted"
    ]


# ───────────────────────── firm reinitialization ──────────────────────
def test_consumption_firm_goes_bankrupt_resets_row() -> None:
    cons = mock_firms(
        3,
        net_worth=[-5.0, 100.0, 50.0],
        liquidity=[-2.0, 30.0, 20.0],
        debt=[10.0, 5.0, 5.0],
        price=[2.0, 1.0, 1.5],
        output_prev=[30.0, 12.0, 8.0],
    )
    ec = mock_economy(price_k=2.0, wb=1.0)
    bank = mock_bank(profits=0.0, loans=500.0, equity=1_000.0)
    wrk = mock_workers(3, employer=[1, 2, 1], wage=[1.0, 1.0, 1.0])
    cfg = mock_config(k=2.0, alpha=0.5, r_f=0.01)

    firm_goes_bankrupt(0, cons, CONSUMPTION, ec, bank, wrk, cfg)

    assert ec.defaults == 1
    assert ec.defaults_k == 0

    # bank books the residual −2 − 10
    assert bank.equity == pytest.approx(988.0)
    assert bank.loans == pytest.approx(490.0)
    assert bank.profits == pytest.approx(-12.0)

    # A = PA + K·p_k = 4 + 10·2, liquidity = A − K·p_k
    assert cons.net_worth[0] == pytest.approx(24.0)
    assert cons.capital_value[0] == pytest.approx(20.0)
    assert cons.liquidity[0] == pytest.approx(4.0)
    assert cons.retained[0] == 0.0
    assert cons.debt[0] == 0.0
    assert cons.price[0] == pytest.approx(1.5)

    # trimmed mean of solvent peers (10) is below the leverage cap (15)
    assert cons.output_prev[0] == pytest.approx(10.0)
    assert cons.desired_output[0] == pytest.approx(10.0)
    assert cons.x[0] == pytest.approx(0.5)
    assert cons.bar_k[0] == pytest.approx(10.0)
    assert cons.bar_yk[0] == pytest.approx(5.0)
    assert cons.output[0] == 0.0
    assert cons.stock[0] == 0.0
    assert cons.interest_rate[0] == pytest.approx(0.01)

    # workforce released
    np.testing.assert_array_equal(wrk.employer, [UNEMPLOYED, 2, UNEMPLOYED])
    np.testing.assert_allclose(wrk.wage, [0.0, 1.0, 0.0])
    assert cons.labor_eff[0] == 0.0

    # peers untouched
    np.testing.assert_allclose(cons.net_worth[1:], [100.0, 50.0])
    np.testing.assert_allclose(cons.price[1:], [1.0, 1.5])


def test_capital_firm_goes_bankrupt_ignores_capital_stock() -> None:
    cap = mock_firms(
        3,
        first_id=10,
        net_worth=[-1.0, 30.0, 20.0],
        retained=[6.0, 0.0, 0.0],
        price=[3.0, 1.0, 2.0],
        output_prev=[50.0, 10.0, 20.0],
    )
    ec = mock_economy(price_k=2.0, wb=1.0)
    bank = mock_bank(loans=500.0, equity=1_000.0)
    wrk = mock_workers(2, employer=[10, 11], wage=[1.0, 1.0])
    cfg = mock_config(alpha=0.5, r_f=0.02)

    firm_goes_bankrupt(0, cap, CAPITAL, ec, bank, wrk, cfg)

    assert ec.defaults_k == 1
    assert ec.defaults == 0
    assert bank.equity == pytest.approx(1_015.0)  # 20 liquidity − 5 debt
    assert bank.loans == pytest.approx(495.0)

    assert cap.net_worth[0] == pytest.approx(6.0)
    assert cap.liquidity[0] == pytest.approx(6.0)
    assert cap.price[0] == pytest.approx(2.0)
    # leverage cap 6 · 1.25 · 0.5 = 3.75 beats the trimmed mean 15
    assert cap.output_prev[0] == pytest.approx(3.75)
    assert cap.desired_output[0] == pytest.approx(3.75)
    assert cap.interest_rate[0] == pytest.approx(0.02)

    # capital-stock columns are not part of the capital-good path
    assert cap.capital_value[0] == pytest.approx(20.0)
    assert cap.x[0] == pytest.approx(0.5)
    assert cap.bar_k[0] == pytest.approx(10.0)
    assert cap.bar_yk[0] == pytest.approx(5.0)

    np.testing.assert_array_equal(wrk.employer, [UNEMPLOYED, 11])


def test_all_insolvent_peers_assign_leverage_cap(caplog) -> None:
    """No solvent peer: the estimate is +inf and the cap is what sticks."""
    caplog.set_level(logging.WARNING, logger="macroabm")
    cons = mock_firms(
        2,
        net_worth=[-1.0, 10.0],
        liquidity=[1.0, 2.0],
        debt=[5.0, 5.0],
    )

    firm_goes_bankrupt(
        0,
        cons,
        CONSUMPTION,
        mock_economy(price_k=2.0, wb=1.0),
        mock_bank(),
        mock_workers(0),
        mock_config(alpha=0.5),
    )

    # A = 4 + 20 = 24 → cap = 24 · 1.25 / 1 · 0.5
    assert cons.output_prev[0] == pytest.approx(15.0)
    assert np.isfinite(cons.output_prev[0])
    assert "very indebted" in caplog.text


def test_zero_capital_consumption_firm_gets_zero_utilisation() -> None:
    cons = mock_firms(2, net_worth=[-1.0, 10.0], capital=[0.0, 10.0])

    firm_goes_bankrupt(
        0,
        cons,
        CONSUMPTION,
        mock_economy(),
        mock_bank(),
        mock_workers(0),
        mock_config(),
    )

    assert cons.net_worth[0] == pytest.approx(4.0)
    assert cons.x[0] == 0.0
    assert cons.bar_k[0] == 0.0


# ───────────────────────── bankruptcy sweep ───────────────────────────
def test_firms_go_bankrupt_scenario() -> None:
    """Three consumption firms, the first one insolvent."""
    cons = mock_firms(
        3,
        net_worth=[-5.0, 100.0, 50.0],
        liquidity=[-2.0, 30.0, 20.0],
        debt=[10.0, 5.0, 5.0],
    )
    cap = mock_firms(2, first_id=4)
    ec = mock_economy()
    bank = mock_bank()
    wrk = mock_workers(5, employer=[1, 1, 2, 4, 0], wage=[1.2, 1.1, 1.0, 0.9, 0.0])

    firms_go_bankrupt(cons, cap, ec, bank, wrk, mock_config())

    assert cons.debt[0] == 0.0
    assert cons.net_worth[0] > 0.0
    assert ec.defaults == 1
    assert ec.defaults_k == 0
    np.testing.assert_array_equal(wrk.employer, [0, 0, 2, 4, 0])
    np.testing.assert_allclose(wrk.wage, [0.0, 0.0, 1.0, 0.9, 0.0])


def test_firms_go_bankrupt_noop_when_all_solvent() -> None:
    cons = mock_firms(3, net_worth=[0.0, 1.0, 2.0])  # zero is not negative
    cap = mock_firms(2, first_id=4)
    ec = mock_economy()
    bank = mock_bank()
    wrk = mock_workers(3, employer=[1, 4, 5], wage=[1.0, 1.0, 1.0])
    before = cons.debt.copy(), bank.equity, wrk.employer.copy()

    firms_go_bankrupt(cons, cap, ec, bank, wrk, mock_config())

    assert ec.defaults == ec.defaults_k == 0
    np.testing.assert_array_equal(cons.debt, before[0])
    assert bank.equity == before[1]
    np.testing.assert_array_equal(wrk.employer, before[2])


def test_firms_go_bankrupt_handles_both_populations() -> None:
    cons = mock_firms(2, net_worth=[-1.0, 10.0])
    cap = mock_firms(3, first_id=3, net_worth=[5.0, -2.0, -3.0])
    ec = mock_economy()
    wrk = mock_workers(4, employer=[1, 4, 5, 3], wage=[1.0, 1.0, 1.0, 1.0])

    firms_go_bankrupt(cons, cap, ec, mock_bank(), wrk, mock_config())

    assert ec.defaults == 1
    assert ec.defaults_k == 2
    np.testing.assert_array_equal(wrk.employer, [0, 0, 0, 3])


def test_firms_go_bankrupt_sequential_visibility() -> None:
    """
    Firm #1 is reinitialised against firm #0's *reset* price and output,
    not the values firm #0 had before the sweep.
    """
    cons = mock_firms(
        3,
        net_worth=[-1.0, -1.0, 50.0],
        liquidity=[10.0, -5.0, 20.0],
        debt=[0.0, 10.0, 0.0],
        price=[3.0, 1.0, 2.0],
        output_prev=[100.0, 40.0, 4.0],
    )
    bank = mock_bank(equity=1_000.0)

    firms_go_bankrupt(
        cons,
        mock_firms(1, first_id=4),
        mock_economy(price_k=2.0, wb=1.0),
        bank,
        mock_workers(0),
        mock_config(alpha=0.5),
    )

    # firm #0: peers {0, 2} → trimmed 52, capped at 15; price mean 2.0
    assert cons.price[0] == pytest.approx(2.0)
    assert cons.output_prev[0] == pytest.approx(15.0)

    # firm #1 sees prices [2, 1, 2] and solvent outputs [15, 4]
    assert cons.price[1] == pytest.approx(5.0 / 3.0)
    assert cons.output_prev[1] == pytest.approx(9.5)

    assert bank.equity == pytest.approx(1_000.0 + 10.0 - 15.0)


def test_reborn_firm_details_logged_at_deep_level(caplog) -> None:
    cons = mock_firms(2, net_worth=[-1.0, 10.0])
    args = (mock_economy(), mock_bank(), mock_workers(0), mock_config())

    caplog.set_level(DEEP_DEBUG, logger="macroabm")
    firm_goes_bankrupt(0, cons, CONSUMPTION, *args)

    [record] = [r for r in caplog.records if "reborn" in r.getMessage()]
    assert record.levelno == DEEP_DEBUG
    assert "consumption firm 1 (index 0)" in record.getMessage()


def test_reborn_firm_details_hidden_at_debug_level(caplog) -> None:
    cons = mock_firms(2, net_worth=[-1.0, 10.0])
    args = (mock_economy(), mock_bank(), mock_workers(0), mock_config())

    caplog.set_level(logging.DEBUG, logger="macroabm")
    firm_goes_bankrupt(0, cons, CONSUMPTION, *args)

    assert not any("reborn" in r.getMessage() for r in caplog.records)
