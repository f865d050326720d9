"""
Hypothesis testing module.

Public API:
    one_sample_t_test(x, mu)     - One-sample Student's t-test
    two_sample_t_test(x, y)      - Welch two-sample t-test
    chi_square_test(table)       - Pearson's chi-squared test of independence
"""

from pystatsengine.hypothesis.solvers import (
    one_sample_t_test,
    two_sample_t_test,
    chi_square_test,
)
from pystatsengine.hypothesis.design import HypothesisDesign
from pystatsengine.hypothesis._common import HTestParams, DEFAULT_ALPHA
from pystatsengine.hypothesis.solution import HTestSolution

__all__ = [
    "one_sample_t_test",
    "two_sample_t_test",
    "chi_square_test",
    "HypothesisDesign",
    "HTestParams",
    "HTestSolution",
    "DEFAULT_ALPHA",
]
