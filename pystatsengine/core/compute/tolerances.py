"""
Numerical constants and tolerance tiers.

Iteration limits and convergence thresholds for the special functions,
plus the tolerances that p-values and distribution values are expected
to meet. Used by the distribution functions and by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Convergence of series / continued fractions: relative change per step
SERIES_EPSILON = 1e-15

# Iteration cap for series and continued fractions
MAX_ITERATIONS = 10000

# Smallest representable magnitude used by Lentz's method to avoid 0/0
LENTZ_TINY = 1e-300

# Root-finding tolerance when inverting a CDF
QUANTILE_XTOL = 1e-12

# Above this df the t tail is taken from its expansion in 1/df; the
# remainder is O(df^-3), below double precision resolution of p-values
T_EXPANSION_DF = 1e5

# Closed-form statistics (means, variances, quartiles, t statistics)
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, closed-form statistics',
)

# Anything that goes through a special function: CDFs, p-values, quantiles
P_VALUE = ToleranceTier(
    rtol=1e-6,
    atol=1e-6,
    name='p_value',
    description='Distribution functions and p-values',
)

# Approximate procedures (Royston normality p-value)
APPROXIMATE = ToleranceTier(
    rtol=1e-2,
    atol=1e-2,
    name='approximate',
    description='Published approximations, indicative only',
)

P_VALUE_TOLERANCE = P_VALUE.atol


def select_tolerance(kind: str) -> ToleranceTier:
    """Select tolerance tier by kind: 'exact', 'p_value' or 'approximate'."""
    if kind == 'exact':
        return CPU_FP64
    if kind == 'p_value':
        return P_VALUE
    if kind == 'approximate':
        return APPROXIMATE
    raise ValueError(f"Unknown tolerance kind: {kind!r}")
