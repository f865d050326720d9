"""
Chi-square distribution CDF and survival function.

A chi-square variable with k degrees of freedom is Gamma(k/2, scale 2),
so both functions reduce to the regularized incomplete gamma functions
at (k/2, x/2).
"""

from __future__ import annotations

import math

from pystatsengine.core.exceptions import InvalidParameterError
from pystatsengine.core.validation import check_degrees_of_freedom
from pystatsengine.distributions._gamma import incomplete_gamma_p, incomplete_gamma_q


def _check_x(x: float) -> float:
    x = float(x)
    if math.isnan(x):
        raise InvalidParameterError("x must not be NaN", parameter="x", value=x)
    return x


def chi_square_cdf(x: float, degrees_of_freedom: float) -> float:
    """
    Cumulative probability P(X <= x) of the chi-square distribution.

    Parameters
    ----------
    x : float
        Evaluation point. Values <= 0 give 0.
    degrees_of_freedom : float
        Degrees of freedom, > 0.

    Returns
    -------
    float in [0, 1]
    """
    df = check_degrees_of_freedom(degrees_of_freedom, "degrees_of_freedom")
    x = _check_x(x)
    if x <= 0.0:
        return 0.0
    return incomplete_gamma_p(0.5 * df, 0.5 * x)


def chi_square_sf(x: float, degrees_of_freedom: float) -> float:
    """Upper tail P(X > x); used for chi-square test p-values."""
    df = check_degrees_of_freedom(degrees_of_freedom, "degrees_of_freedom")
    x = _check_x(x)
    if x <= 0.0:
        return 1.0
    return incomplete_gamma_q(0.5 * df, 0.5 * x)
