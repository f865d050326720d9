"""
Student's t distribution: CDF, survival function and quantile.

The tail probability comes from the incomplete beta identity

    P(T > |t|) = 0.5 * I_x(df/2, 1/2),   x = df / (df + t^2)

with the complement t^2 / (df + t^2) formed directly, so x near 1 loses
nothing. Past ``T_EXPANSION_DF`` the continued fraction needs O(sqrt(df))
terms, and the tail is taken from the expansion about the normal

    P(T > t) = Q(t) + phi(t) * [g1(t) / df + g2(t) / df^2] + O(df^-3)

which at those df is exact to double precision. The quantile inverts the
tail probability with Brent's method on a bracket found by doubling.
"""

from __future__ import annotations

import math

from scipy.optimize import brentq

from pystatsengine.core.exceptions import ConvergenceError, InvalidParameterError
from pystatsengine.core.compute.tolerances import (
    MAX_ITERATIONS, QUANTILE_XTOL, T_EXPANSION_DF,
)
from pystatsengine.core.validation import check_degrees_of_freedom, check_probability
from pystatsengine.distributions._beta import regularized_beta
from pystatsengine.distributions._gamma import erfc

_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


def _expansion_tail(t: float, df: float) -> float:
    if t >= 40.0:
        # phi(t) and Q(t) both underflow
        return 0.0
    t2 = t * t
    g1 = (t2 * t + t) / 4.0
    g2 = (5.0 * t2 ** 3 * t + 16.0 * t2 * t2 * t + 3.0 * t2 * t - 3.0 * t) / 96.0
    density = _INV_SQRT_2PI * math.exp(-0.5 * t2)
    return 0.5 * erfc(t / math.sqrt(2.0)) + density * (g1 / df + g2 / (df * df))


def _upper_tail(t: float, df: float) -> float:
    """P(T > t) for t >= 0."""
    if math.isinf(t):
        return 0.0
    t2 = t * t
    if math.isinf(t2):
        return 0.0
    if df > T_EXPANSION_DF:
        return _expansion_tail(t, df)
    x = df / (df + t2)
    y = t2 / (df + t2)
    return 0.5 * regularized_beta(0.5 * df, 0.5, x, y)


def _check_t(t: float) -> float:
    t = float(t)
    if math.isnan(t):
        raise InvalidParameterError("t must not be NaN", parameter="t", value=t)
    return t


def student_t_cdf(t: float, degrees_of_freedom: float) -> float:
    """
    Cumulative probability P(T <= t) of Student's t distribution.

    Parameters
    ----------
    t : float
        Evaluation point. ``-inf`` and ``inf`` give 0 and 1.
    degrees_of_freedom : float
        Degrees of freedom, > 0 (fractional values allowed, as produced
        by Welch-Satterthwaite).

    Returns
    -------
    float in [0, 1]

    Raises
    ------
    InvalidParameterError
        degrees_of_freedom <= 0 or t is NaN.
    """
    df = check_degrees_of_freedom(degrees_of_freedom, "degrees_of_freedom")
    t = _check_t(t)
    if t >= 0.0:
        return 1.0 - _upper_tail(t, df)
    return _upper_tail(-t, df)


def student_t_sf(t: float, degrees_of_freedom: float) -> float:
    """Survival function P(T > t); keeps relative precision in the upper tail."""
    df = check_degrees_of_freedom(degrees_of_freedom, "degrees_of_freedom")
    t = _check_t(t)
    if t >= 0.0:
        return _upper_tail(t, df)
    return 1.0 - _upper_tail(-t, df)


def inverse_t_quantile(p: float, degrees_of_freedom: float) -> float:
    """
    Quantile function of Student's t distribution.

    Returns t such that ``student_t_cdf(t, degrees_of_freedom) == p``.
    The root is found on the tail probability min(p, 1 - p), so quantiles
    far out in either tail keep their relative precision.

    Parameters
    ----------
    p : float
        Probability in the open interval (0, 1).
    degrees_of_freedom : float
        Degrees of freedom, > 0.

    Raises
    ------
    InvalidParameterError
        p outside (0, 1) or degrees_of_freedom <= 0.
    ConvergenceError
        No bracket could be found (p too close to 0 or 1 for the df).
    """
    df = check_degrees_of_freedom(degrees_of_freedom, "degrees_of_freedom")
    p = check_probability(p, "p")

    if p == 0.5:
        return 0.0

    # 1 - p is exact for p in [0.5, 1)
    tail = 1.0 - p if p > 0.5 else p
    sign = 1.0 if p > 0.5 else -1.0

    def objective(s: float) -> float:
        return _upper_tail(s, df) - tail

    lo, hi = 0.0, 1.0
    step = 0
    while objective(hi) > 0.0:
        lo, hi = hi, hi * 2.0
        step += 1
        if step > MAX_ITERATIONS or math.isinf(hi):
            raise ConvergenceError(
                f"could not bracket t quantile for p={p}, df={df}",
                iterations=step, reason='bracket',
            )

    if objective(hi) == 0.0:
        return sign * hi

    root = brentq(objective, lo, hi, xtol=QUANTILE_XTOL, maxiter=MAX_ITERATIONS)
    return sign * float(root)
