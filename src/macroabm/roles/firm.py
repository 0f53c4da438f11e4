from macroabm.core.decorators import role
from macroabm.typing import Float1D, Int1D


@role
class Firm:
    """
    Firm role, shared by the consumption-good and capital-good populations.

    The two populations live in separate instances; a capital-good firm
    simply never touches the capital-stock fields (``capital``,
    ``capital_value``, ``x``, ``bar_k``, ``bar_yk``).
    """

    # Balance sheet
    net_worth: Float1D  # A
    liquidity: Float1D
    debt: Float1D  # deb
    retained: Float1D  # PA, buffer that funds a reborn entrant
    capital: Float1D  # K
    capital_value: Float1D

    # Production plan
    price: Float1D  # P
    output_prev: Float1D  # Y_prev
    desired_output: Float1D  # Yd
    output: Float1D  # Y
    stock: Float1D
    x: Float1D  # capacity utilisation target
    bar_k: Float1D
    bar_yk: Float1D

    labor_eff: Float1D  # Leff
    interest_rate: Float1D
    firm_id: Int1D  # unique across both populations, never UNEMPLOYED
