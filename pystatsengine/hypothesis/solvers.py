"""
Solver dispatch for hypothesis tests.

Provides one_sample_t_test(), two_sample_t_test() and chi_square_test().
Each accepts ``alpha`` (default 0.05) and reports two-tailed p-values.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pystatsengine.hypothesis._common import DEFAULT_ALPHA
from pystatsengine.hypothesis.design import HypothesisDesign
from pystatsengine.hypothesis.solution import HTestSolution
from pystatsengine.hypothesis.backends.cpu import CPUHypothesisBackend


def _run(design: HypothesisDesign) -> HTestSolution:
    result = CPUHypothesisBackend().solve(design)
    return HTestSolution(_result=result, _design=design)


def one_sample_t_test(
    sample: ArrayLike,
    hypothesized_mean: float = 0.0,
    alpha: float = DEFAULT_ALPHA,
) -> HTestSolution:
    """
    One-sample Student's t-test of H0: mean = hypothesized_mean.

    Parameters
    ----------
    sample : array-like
        1D sample, n >= 2.
    hypothesized_mean : float
        Mean under the null hypothesis. Default 0.
    alpha : float
        Significance threshold in (0, 1). Default 0.05. The confidence
        interval is at level 1 - alpha.

    Returns
    -------
    HTestSolution
        statistic (t), df = n - 1, two-tailed p_value, is_significant
        (p < alpha), conf_int on the mean, effect_size = |mean - mu| / sd.

    Raises
    ------
    EmptyDatasetError, InsufficientSampleSizeError
        Empty sample or n < 2.
    InvalidParameterError
        alpha outside (0, 1).
    NumericalError
        Constant sample (zero standard error).
    """
    design = HypothesisDesign.for_one_sample_t_test(
        sample, mu=hypothesized_mean, alpha=alpha,
    )
    return _run(design)


def two_sample_t_test(
    sample_a: ArrayLike,
    sample_b: ArrayLike,
    alpha: float = DEFAULT_ALPHA,
) -> HTestSolution:
    """
    Welch's unequal-variance two-sample t-test of H0: mean_a = mean_b.

    Parameters
    ----------
    sample_a, sample_b : array-like
        1D samples, each n >= 2.
    alpha : float
        Significance threshold in (0, 1). Default 0.05.

    Returns
    -------
    HTestSolution
        statistic (t, signed by mean_a - mean_b), Welch-Satterthwaite df,
        two-tailed p_value, is_significant, conf_int on mean_a - mean_b,
        effect_size = Cohen's d with the pooled standard deviation.
        Swapping the samples negates t and d and leaves the rest unchanged.
    """
    design = HypothesisDesign.for_two_sample_t_test(sample_a, sample_b, alpha=alpha)
    return _run(design)


def chi_square_test(
    table: ArrayLike,
    alpha: float = DEFAULT_ALPHA,
) -> HTestSolution:
    """
    Pearson's chi-squared test of independence.

    Parameters
    ----------
    table : array-like
        r x c matrix of non-negative integer counts, r, c >= 2.
    alpha : float
        Significance threshold in (0, 1). Default 0.05.

    Returns
    -------
    HTestSolution
        statistic (X-squared), df = (r-1)(c-1), p_value, is_significant,
        cramers_v, plus observed / expected / residuals.

    Raises
    ------
    InvalidInputError
        Fewer than 2 rows or columns, ragged rows, negative or
        non-integer counts.
    DegenerateTableError
        An all-zero row or column (expected count of 0).
    """
    design = HypothesisDesign.for_chi_square_test(table, alpha=alpha)
    return _run(design)
