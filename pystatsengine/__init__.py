"""
pystatsengine: a statistical analysis engine for in-memory numeric samples.

Stateless, side-effect-free routines; every call returns an immutable
result and is safe to run concurrently.

Submodules:
    distributions: Student-t, chi-square, incomplete gamma/beta, erf
    descriptive: Summary statistics of a sample
    hypothesis: One- and two-sample t-tests, chi-squared test
    normality: Shapiro-Wilk test (Royston approximation)
"""

__version__ = "0.1.0"

from pystatsengine import distributions
from pystatsengine import descriptive
from pystatsengine import hypothesis
from pystatsengine import normality
from pystatsengine.descriptive import describe, describe_grouped, confidence_interval
from pystatsengine.hypothesis import one_sample_t_test, two_sample_t_test, chi_square_test
from pystatsengine.normality import normality_test
from pystatsengine.engine import StatisticalAnalysisEngine

__all__ = [
    "__version__",
    "distributions",
    "descriptive",
    "hypothesis",
    "normality",
    "describe",
    "describe_grouped",
    "confidence_interval",
    "one_sample_t_test",
    "two_sample_t_test",
    "chi_square_test",
    "normality_test",
    "StatisticalAnalysisEngine",
]
