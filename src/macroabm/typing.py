"""
Type aliases for macroabm.

Every role stores agent state as 1-D NumPy arrays indexed by the agent's
position in its population.

Examples
--------
>>> from macroabm import role
>>> from macroabm.typing import Float1D, Int1D
>>>
>>> @role
... class Inventory:
...     goods_on_hand: Float1D
...     supplier_id: Int1D
"""

from typing import TypeAlias

import numpy as np
from numpy.typing import NDArray

Float1D: TypeAlias = NDArray[np.float64]
Int1D: TypeAlias = NDArray[np.int64]
Bool1D: TypeAlias = NDArray[np.bool_]

__all__ = [
    "Float1D",
    "Int1D",
    "Bool1D",
]
