"""
Distribution functions and special functions.

Pure, deterministic scalar functions with no I/O. These back every
p-value and critical value computed by the hypothesis and normality
modules.

Public API:
    student_t_cdf(t, df)         - Student's t CDF (any df > 0)
    student_t_sf(t, df)          - Student's t upper tail
    inverse_t_quantile(p, df)    - Student's t quantile
    chi_square_cdf(x, df)        - Chi-square CDF
    chi_square_sf(x, df)         - Chi-square upper tail
    incomplete_gamma_p(a, x)     - Regularized lower incomplete gamma
    incomplete_gamma_q(a, x)     - Regularized upper incomplete gamma
    incomplete_beta(a, b, x)     - Regularized incomplete beta
    erf(x), erfc(x)              - Error function and complement
    normal_cdf(x)                - Standard normal CDF
"""

from pystatsengine.distributions._gamma import (
    incomplete_gamma_p,
    incomplete_gamma_q,
    erf,
    erfc,
    normal_cdf,
)
from pystatsengine.distributions._beta import incomplete_beta
from pystatsengine.distributions._student_t import (
    student_t_cdf,
    student_t_sf,
    inverse_t_quantile,
)
from pystatsengine.distributions._chi_square import chi_square_cdf, chi_square_sf

__all__ = [
    "student_t_cdf",
    "student_t_sf",
    "inverse_t_quantile",
    "chi_square_cdf",
    "chi_square_sf",
    "incomplete_gamma_p",
    "incomplete_gamma_q",
    "incomplete_beta",
    "erf",
    "erfc",
    "normal_cdf",
]
