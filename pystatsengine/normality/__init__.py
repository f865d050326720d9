"""
Normality testing module.

Public API:
    normality_test(x)   - Shapiro-Wilk W with Royston's approximate p-value
"""

from pystatsengine.normality.design import NormalityDesign
from pystatsengine.normality.solution import NormalityParams, NormalityTestSolution
from pystatsengine.normality.solvers import normality_test

__all__ = [
    "normality_test",
    "NormalityDesign",
    "NormalityParams",
    "NormalityTestSolution",
]
