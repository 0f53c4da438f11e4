"""Bankruptcy event: liquidation and in-place rebirth of insolvent firms."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from macroabm import logging
from macroabm.core.decorators import event
from macroabm.systems.bankruptcy import firms_go_bankrupt

if TYPE_CHECKING:
    from macroabm.model import Model


@event
class FirmsGoBankrupt:
    """
    Liquidate every firm with negative net worth and rebirth it in place.

    Rule
    ----
    A firm is bankrupt if Net Worth (A) < 0. Its residual balance is
    written off against the bank, its row is reset to a new entrant and
    its workers are fired.

    Note
    ----
    Firms are processed one at a time in population order; a firm reborn
    earlier in the pass is visible to the peer statistics of later ones.
    """

    def execute(self, model: Model) -> None:
        """Execute the bankruptcy sweep."""
        log = self.get_logger()
        ec = model.ec
        bank = model.bank

        log.info("--- Firms Going Bankrupt ---")

        failing_c = np.where(model.cons.net_worth < 0)[0]
        failing_k = np.where(model.cap.net_worth < 0)[0]
        if failing_c.size == 0 and failing_k.size == 0:
            log.info("  No firm bankruptcies this period.")
            log.info("--- Firms Going Bankrupt complete ---")
            return

        defaults_before, defaults_k_before = ec.defaults, ec.defaults_k
        equity_before = bank.equity

        firms_go_bankrupt(
            model.cons, model.cap, ec, bank, model.wrk, model.config
        )

        log.warning(
            f"  {ec.defaults - defaults_before} consumption and "
            f"{ec.defaults_k - defaults_k_before} capital firm(s) went bankrupt."
        )
        log.info(
            f"  Bank equity {equity_before:,.2f} -> {bank.equity:,.2f} "
            f"(loans outstanding {bank.loans:,.2f})"
        )
        if log.isEnabledFor(logging.DEBUG):
            log.debug(f"    Reborn consumption firms (index): {failing_c.tolist()}")
            log.debug(f"    Reborn capital firms (index): {failing_k.tolist()}")

        log.info("--- Firms Going Bankrupt complete ---")
