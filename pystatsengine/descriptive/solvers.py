"""
Solver dispatch for descriptive statistics.

Provides describe() as the comprehensive entry point, plus
describe_grouped() for named samples and confidence_interval() for
a t-based interval on the mean.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
import numpy as np
from numpy.typing import ArrayLike

from pystatsengine.core.exceptions import GroupComputationError, StatsEngineError
from pystatsengine.core.validation import check_min_samples, check_probability
from pystatsengine.descriptive.design import DescriptiveDesign
from pystatsengine.descriptive.solution import ConfidenceInterval, DescriptiveSolution
from pystatsengine.descriptive.backends.cpu import CPUDescriptiveBackend
from pystatsengine.descriptive._moments import sample_mean, sample_variance
from pystatsengine.distributions import inverse_t_quantile


def _ensure_design(data: ArrayLike | DescriptiveDesign, name: str = "x") -> DescriptiveDesign:
    """Convert raw array to DescriptiveDesign if needed."""
    if isinstance(data, DescriptiveDesign):
        return data
    return DescriptiveDesign.from_array(data, name=name)


def describe(
    data: ArrayLike | DescriptiveDesign,
    *,
    name: str = "x",
) -> DescriptiveSolution:
    """
    Compute comprehensive descriptive statistics.

    Computes: count, sum, mean, median, mode, variance (n-1), standard
    deviation, min, max, range, quartiles (linear interpolation), IQR,
    bias-adjusted skewness, bias-adjusted excess kurtosis and the
    coefficient of variation.

    Parameters
    ----------
    data : array-like or DescriptiveDesign
        1D sample of finite real numbers.
    name : str
        Label for error messages and summary(). Ignored for a design.

    Returns
    -------
    DescriptiveSolution with all statistics populated.

    Raises
    ------
    EmptyDatasetError
        The sample is empty.
    InsufficientSampleSizeError
        n < 2 (variance), n < 3 (skewness) or n < 4 (kurtosis).
    """
    design = _ensure_design(data, name)
    result = CPUDescriptiveBackend().solve(design)
    return DescriptiveSolution(_result=result, _design=design)


def describe_grouped(
    groups: Mapping[Any, ArrayLike],
) -> dict[Any, DescriptiveSolution]:
    """
    describe() each named sample.

    Parameters
    ----------
    groups : mapping
        Group key -> sample. Iteration order is preserved in the output.

    Returns
    -------
    dict mapping each key to its DescriptiveSolution.

    Raises
    ------
    GroupComputationError
        A group failed. ``.group`` is its key, ``.error`` (and
        ``__cause__``) the original exception. Groups are never skipped.
    """
    if not isinstance(groups, Mapping):
        raise TypeError(
            f"groups must be a mapping of name -> sample, got {type(groups).__name__}"
        )

    solutions: dict[Any, DescriptiveSolution] = {}
    for key, sample in groups.items():
        try:
            solutions[key] = describe(sample, name=str(key))
        except StatsEngineError as e:
            raise GroupComputationError(
                f"group {key!r}: {e}", group=key, error=e,
            ) from e
    return solutions


def confidence_interval(
    data: ArrayLike | DescriptiveDesign,
    confidence_level: float = 0.95,
    *,
    name: str = "x",
) -> ConfidenceInterval:
    """
    t-based confidence interval for the population mean.

        mean +/- t_{1 - (1-level)/2, n-1} * sd / sqrt(n)

    Parameters
    ----------
    data : array-like or DescriptiveDesign
        1D sample, n >= 2.
    confidence_level : float
        Coverage in (0, 1). Default 0.95.

    Returns
    -------
    ConfidenceInterval
    """
    confidence_level = check_probability(confidence_level, "confidence_level")
    design = _ensure_design(data, name)
    x = design.data
    check_min_samples(x, 2, design.name, statistic="confidence interval")

    n = design.n
    mean = sample_mean(x, design.name)
    se = float(np.sqrt(sample_variance(x, design.name) / n))
    alpha = 1.0 - confidence_level
    t_crit = inverse_t_quantile(1.0 - alpha / 2.0, n - 1)

    return ConfidenceInterval(
        lower_bound=mean - t_crit * se,
        upper_bound=mean + t_crit * se,
        confidence_level=confidence_level,
    )
