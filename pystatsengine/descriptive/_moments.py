"""
Sample moments and order statistics for a single 1D sample.

These are shared by the descriptive backend and the hypothesis tests, so
they take an already-validated float64 array and enforce only the minimum
sample size each quantity needs. Finite input whose moments overflow
double precision raises NumericalError instead of returning inf or NaN.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pystatsengine.core.exceptions import NumericalError
from pystatsengine.core.validation import check_min_samples


def _is_constant(x: NDArray[np.floating[Any]]) -> bool:
    return bool(np.all(x == x[0]))


def _require_finite(value: float, name: str, statistic: str) -> float:
    if not np.isfinite(value):
        raise NumericalError(
            f"{name}: {statistic} overflows double precision ({value}); "
            f"rescale the data"
        )
    return value


def sample_mean(x: NDArray[np.floating[Any]], name: str = "x") -> float:
    """Arithmetic mean."""
    with np.errstate(over='ignore', invalid='ignore'):
        mean = float(np.mean(x))
    return _require_finite(mean, name, "mean")


def sample_variance(x: NDArray[np.floating[Any]], name: str = "x") -> float:
    """Variance with Bessel's correction (n-1). Requires n >= 2."""
    check_min_samples(x, 2, name, statistic="variance")
    if _is_constant(x):
        return 0.0
    with np.errstate(over='ignore', invalid='ignore'):
        variance = float(np.var(x, ddof=1))
    return _require_finite(variance, name, "variance")


def moment_ratios(x: NDArray[np.floating[Any]]) -> tuple[float, float]:
    """
    g1 = m3 / m2^1.5 and g2 = m4 / m2^2 - 3 from biased central moments.

    Deviations are divided by their largest magnitude first, so the ratios
    are finite whenever the deviations are; NaN for zero spread.
    """
    with np.errstate(over='ignore', invalid='ignore'):
        diffs = x - np.mean(x)
        scale = float(np.max(np.abs(diffs)))
        if scale == 0.0:
            return float('nan'), float('nan')
        u = diffs / scale
        sq = u * u
        m2 = float(np.mean(sq))
        g1 = float(np.mean(sq * u)) / m2 / np.sqrt(m2)
        g2 = float(np.mean(sq * sq)) / m2 / m2 - 3.0
    return g1, g2


def adjusted_skewness(x: NDArray[np.floating[Any]], name: str = "x") -> float:
    """
    Bias-adjusted Fisher-Pearson skewness G1.

        g1 = m3 / m2^1.5
        G1 = g1 * sqrt(n*(n-1)) / (n-2)

    Requires n >= 3. Returns NaN for constant data (moment ratio undefined).
    """
    check_min_samples(x, 3, name, statistic="skewness")
    n = len(x)
    if _is_constant(x):
        return float('nan')
    g1, _ = moment_ratios(x)
    skewness = g1 * np.sqrt(n * (n - 1.0)) / (n - 2.0)
    return _require_finite(skewness, name, "skewness")


def adjusted_kurtosis(x: NDArray[np.floating[Any]], name: str = "x") -> float:
    """
    Bias-adjusted excess kurtosis G2.

        g2 = m4 / m2^2 - 3
        G2 = ((n-1) / ((n-2)*(n-3))) * ((n+1)*g2 + 6)

    Requires n >= 4. Returns NaN for constant data.
    """
    check_min_samples(x, 4, name, statistic="kurtosis")
    n = len(x)
    if _is_constant(x):
        return float('nan')
    _, g2 = moment_ratios(x)
    kurtosis = ((n - 1.0) / ((n - 2.0) * (n - 3.0))) * ((n + 1.0) * g2 + 6.0)
    return _require_finite(kurtosis, name, "kurtosis")


def modes(x: NDArray[np.floating[Any]]) -> tuple[float, ...]:
    """All values attaining the maximum frequency, ascending."""
    values, counts = np.unique(x, return_counts=True)
    return tuple(float(v) for v in values[counts == counts.max()])


def pooled_standard_deviation(
    var_a: float, n_a: int, var_b: float, n_b: int,
) -> float:
    """sqrt(((n_a-1) var_a + (n_b-1) var_b) / (n_a + n_b - 2))."""
    return float(np.sqrt(
        ((n_a - 1) * var_a + (n_b - 1) * var_b) / (n_a + n_b - 2)
    ))
