"""
Linearly interpolated sample quantiles.

The quantile at probability p sits at fractional (0-based) rank
h = p * (n - 1) of the sorted sample and is interpolated between the two
neighbouring order statistics:

    Q(p) = x[floor(h)] + (h - floor(h)) * (x[floor(h) + 1] - x[floor(h)])

This is Hyndman & Fan (1996) type 7, the default of R's quantile() and
numpy.quantile(method='linear'). Q(0.5) equals the conventional median
for both odd and even n.
"""

from __future__ import annotations

import math
import numpy as np
from numpy.typing import NDArray

from pystatsengine.core.exceptions import InvalidParameterError


def interpolated_quantiles(x_sorted: NDArray, probs: NDArray) -> NDArray:
    """
    Compute type 7 quantiles.

    Parameters
    ----------
    x_sorted : NDArray
        1D sorted array, non-empty, no NaN values.
    probs : NDArray
        1D array of probabilities in [0, 1].

    Returns
    -------
    NDArray
        Quantile values, one per probability.
    """
    probs = np.asarray(probs, dtype=np.float64)
    if np.any((probs < 0.0) | (probs > 1.0)) or np.any(np.isnan(probs)):
        raise InvalidParameterError(
            f"quantile probabilities must be in [0, 1], got {probs.tolist()}",
            parameter="probs", value=probs.tolist(),
        )

    n = len(x_sorted)
    if n == 1:
        return np.full(len(probs), x_sorted[0], dtype=np.float64)

    result = np.empty(len(probs), dtype=np.float64)
    for i, p in enumerate(probs):
        h = p * (n - 1)
        lo = int(math.floor(h))
        if lo >= n - 1:
            result[i] = x_sorted[n - 1]
            continue
        frac = h - lo
        result[i] = x_sorted[lo] + frac * (x_sorted[lo + 1] - x_sorted[lo])

    return result
