"""
StatisticalAnalysisEngine: configured facade over the functional API.

The engine holds only immutable configuration (the default significance
threshold). Every method is a pure function of its arguments, so one
instance can be shared freely between threads and callers.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from numpy.typing import ArrayLike

from pystatsengine.core.validation import check_probability
from pystatsengine.descriptive import (
    ConfidenceInterval, DescriptiveSolution,
    describe, describe_grouped, confidence_interval,
)
from pystatsengine.hypothesis import (
    DEFAULT_ALPHA, HTestSolution,
    one_sample_t_test, two_sample_t_test, chi_square_test,
)
from pystatsengine.normality import NormalityTestSolution, normality_test


@dataclass(frozen=True)
class StatisticalAnalysisEngine:
    """
    Statistics engine with a default significance threshold.

    Examples:
        >>> engine = StatisticalAnalysisEngine(alpha=0.01)
        >>> engine.one_sample_t_test([5, 7, 5, 3, 5, 3, 3, 9], 5).is_significant
        False
        >>> engine.one_sample_t_test(x, 5, alpha=0.1)  # per-call override
    """
    alpha: float = DEFAULT_ALPHA

    def __post_init__(self):
        check_probability(self.alpha, "alpha")

    def _alpha(self, alpha: float | None) -> float:
        return self.alpha if alpha is None else alpha

    def describe(self, sample: ArrayLike) -> DescriptiveSolution:
        return describe(sample)

    def describe_grouped(self, groups: Mapping[Any, ArrayLike]) -> dict[Any, DescriptiveSolution]:
        return describe_grouped(groups)

    def confidence_interval(self, sample: ArrayLike, alpha: float | None = None) -> ConfidenceInterval:
        """Interval on the mean at level 1 - alpha."""
        return confidence_interval(sample, 1.0 - self._alpha(alpha))

    def one_sample_t_test(
        self,
        sample: ArrayLike,
        hypothesized_mean: float = 0.0,
        alpha: float | None = None,
    ) -> HTestSolution:
        return one_sample_t_test(sample, hypothesized_mean, alpha=self._alpha(alpha))

    def two_sample_t_test(
        self,
        sample_a: ArrayLike,
        sample_b: ArrayLike,
        alpha: float | None = None,
    ) -> HTestSolution:
        return two_sample_t_test(sample_a, sample_b, alpha=self._alpha(alpha))

    def chi_square_test(self, table: ArrayLike, alpha: float | None = None) -> HTestSolution:
        return chi_square_test(table, alpha=self._alpha(alpha))

    def normality_test(self, sample: ArrayLike) -> NormalityTestSolution:
        return normality_test(sample)
