# src/macroabm/utils.py
import math

import numpy as np
from numpy.typing import ArrayLike


def trim_mean(values: ArrayLike, prop: float = 0.1) -> float:
    """
    Return the two-sided trimmed mean of *values*.

    ``floor(prop * n)`` observations are cut from each tail of the sorted
    sample before averaging, so ``trim_mean(range(1, 11), 0.1)`` averages
    ``2..9``.

    Parameters
    ----------
    values : array_like
        Non-empty 1-D sample.
    prop : float, default 0.1
        Proportion cut from each tail, ``0 <= prop < 0.5``.

    Returns
    -------
    float
        Mean of the retained observations.

    Raises
    ------
    ValueError
        If *values* is empty or *prop* is outside ``[0, 0.5)``.
    """
    arr = np.asarray(values, dtype=np.float64).ravel()
    if arr.size == 0:
        raise ValueError("trim_mean requires a non-empty sample")
    if not 0.0 <= prop < 0.5:
        raise ValueError(f"prop must be in [0, 0.5), got {prop}")

    k = math.floor(prop * arr.size)
    if k == 0:
        return float(arr.mean())
    core = np.sort(arr)[k : arr.size - k]
    return float(core.mean())
