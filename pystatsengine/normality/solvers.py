"""
Solver dispatch for the normality test.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pystatsengine.normality.design import NormalityDesign
from pystatsengine.normality.solution import NormalityTestSolution
from pystatsengine.normality.backends.cpu import CPUNormalityBackend


def normality_test(
    data: ArrayLike | NormalityDesign,
    *,
    name: str = "x",
) -> NormalityTestSolution:
    """
    Shapiro-Wilk test of normality (Royston approximation).

    The W statistic uses approximate coefficients and the p-value a
    published normalising transformation, so treat the outcome as
    indicative; the result always carries a warning saying so.

    Parameters
    ----------
    data : array-like or NormalityDesign
        1D sample with 3 <= n <= 5000.

    Returns
    -------
    NormalityTestSolution
        statistic (W), p_value, is_normal (p > 0.05), test_name.

    Raises
    ------
    InvalidSampleSizeError
        n < 3 or n > 5000.
    NumericalError
        All values identical.
    """
    if isinstance(data, NormalityDesign):
        design = data
    else:
        design = NormalityDesign.from_array(data, name=name)
    result = CPUNormalityBackend().solve(design)
    return NormalityTestSolution(_result=result, _design=design)
