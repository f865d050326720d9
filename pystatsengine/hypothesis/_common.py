"""
Common types for hypothesis testing.

Defines HTestParams, the payload every hypothesis test returns, plus the
shared significance rule and p-value helper.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from pystatsengine.descriptive.solution import ConfidenceInterval
from pystatsengine.distributions import student_t_sf


DEFAULT_ALPHA = 0.05


@dataclass(frozen=True)
class HTestParams:
    """
    Parameter payload for hypothesis tests.

    Every hypothesis test returns this same structure; test-specific
    extras go in the `extras` mapping. The mappings are read-only.

    Attributes
    ----------
    statistic : float
        Test statistic value.
    statistic_name : str
        Name of the test statistic ("t", "X-squared").
    df : float
        Degrees of freedom (fractional for Welch), always > 0.
    p_value : float
        Two-tailed p-value in [0, 1].
    alpha : float
        Significance threshold the test was run at.
    is_significant : bool
        ``p_value < alpha`` (strict).
    conf_int : ConfidenceInterval or None
        100*(1-alpha)% interval on the mean or mean difference; None for
        tests without one.
    effect_size : float
        Standardized effect (|d| for one sample, Cohen's d for two
        samples, Cramer's V for contingency tables).
    effect_size_name : str
        Label for `effect_size`.
    estimate : mapping or None
        Point estimate(s), e.g. {"mean of x": 5.1, "mean of y": 3.2}.
    null_value : mapping or None
        Hypothesized value under H0, e.g. {"difference in means": 0}.
    method : str
        Human-readable method name, e.g. "Welch Two Sample t-test".
    data_name : str
        Description of the data, e.g. "x and y".
    extras : mapping or None
        Test-specific additional outputs (e.g. observed/expected/residuals
        for the chi-squared test).
    """
    statistic: float
    statistic_name: str
    df: float
    p_value: float
    alpha: float
    is_significant: bool
    conf_int: ConfidenceInterval | None
    effect_size: float
    effect_size_name: str
    estimate: Mapping[str, float] | None
    null_value: Mapping[str, float] | None
    method: str
    data_name: str
    extras: Mapping[str, Any] | None = None

    def __post_init__(self):
        # The mappings are read-only views of private copies
        for name in ('estimate', 'null_value', 'extras'):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, MappingProxyType(dict(value)))


def is_significant(p_value: float, alpha: float) -> bool:
    """Significance is strictly p < alpha."""
    return bool(p_value < alpha)


def two_sided_t_pvalue(t_stat: float, df: float) -> float:
    """2 * P(T > |t|), clamped to [0, 1]."""
    return min(1.0, max(0.0, 2.0 * student_t_sf(abs(t_stat), df)))
