"""
HTestSolution: the user-facing result of every hypothesis test.

Wraps Result[HTestParams]. The t-tests and the chi-squared test share
this one type; accessors that only make sense for one family (the
t_statistic / chi_square_statistic aliases, Cramer's V, the table
extras) return None for the other.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pystatsengine.core.result import Result
from pystatsengine.descriptive.solution import ConfidenceInterval
from pystatsengine.hypothesis._common import HTestParams

if TYPE_CHECKING:
    from pystatsengine.hypothesis.design import HypothesisDesign


@dataclass(frozen=True)
class HTestSolution:
    """
    Outcome of a t-test or chi-squared test.

    t-tests populate conf_int, estimate and null_value and report Cohen's
    d as effect_size; the chi-squared test reports Cramer's V and carries
    observed / expected / residuals tables.
    """
    _result: Result[HTestParams]
    _design: HypothesisDesign | None

    @property
    def params(self) -> HTestParams:
        return self._result.params

    def _extra(self, key: str) -> Any:
        extras = self._result.params.extras
        return None if extras is None else extras.get(key)

    def _statistic_if(self, name: str) -> float | None:
        p = self._result.params
        return p.statistic if p.statistic_name == name else None

    # Statistic and decision

    @property
    def statistic(self) -> float:
        return self._result.params.statistic

    @property
    def t_statistic(self) -> float | None:
        """Alias of statistic for t-tests; None otherwise."""
        return self._statistic_if("t")

    @property
    def chi_square_statistic(self) -> float | None:
        """Alias of statistic for the chi-squared test; None otherwise."""
        return self._statistic_if("X-squared")

    @property
    def statistic_name(self) -> str:
        return self._result.params.statistic_name

    @property
    def df(self) -> float:
        """Degrees of freedom; fractional for Welch's test."""
        return self._result.params.df

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def is_significant(self) -> bool:
        """True when p_value < alpha."""
        return self._result.params.is_significant

    @property
    def conf_int(self) -> ConfidenceInterval | None:
        return self._result.params.conf_int

    @property
    def effect_size(self) -> float:
        return self._result.params.effect_size

    @property
    def effect_size_name(self) -> str:
        return self._result.params.effect_size_name

    # Estimates

    @property
    def estimate(self) -> Mapping[str, float] | None:
        return self._result.params.estimate

    @property
    def null_value(self) -> Mapping[str, float] | None:
        return self._result.params.null_value

    @property
    def method(self) -> str:
        return self._result.params.method

    @property
    def data_name(self) -> str:
        return self._result.params.data_name

    @property
    def extras(self) -> Mapping[str, Any] | None:
        return self._result.params.extras

    # Contingency table outputs

    @property
    def cramers_v(self) -> float | None:
        """Cramer's V in [0, 1]; None for t-tests."""
        return self._extra('cramers_v')

    @property
    def observed(self) -> NDArray | None:
        return self._extra('observed')

    @property
    def expected(self) -> NDArray | None:
        """Expected counts under independence."""
        return self._extra('expected')

    @property
    def residuals(self) -> NDArray | None:
        """Pearson residuals (O - E) / sqrt(E)."""
        return self._extra('residuals')

    # Envelope

    @property
    def info(self) -> Mapping[str, Any]:
        return self._result.info

    @property
    def timing(self) -> Mapping[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def provenance(self) -> Mapping[str, Any]:
        return self._result.provenance

    def summary(self) -> str:
        """
        Text report laid out like R's print.htest, e.g.

                One Sample t-test

            data:  x
            t = 4.2426, df = 4, p-value = 0.01324
            alternative hypothesis: true mean is not equal to 0
            95 percent confidence interval:
             1.036757  4.963243
            sample estimates:
                 mean of x
                         3
            Cohen's d: 1.8974
            significant at alpha = 0.05
        """
        p = self._result.params
        lines = [
            f"\t{p.method}",
            "",
            f"data:  {p.data_name}",
            f"{p.statistic_name} = {p.statistic:.5g}, df = {p.df:.5g}, "
            f"p-value = {_format_pvalue(p.p_value)}",
        ]
        lines.extend(_hypothesis_lines(p))
        lines.extend(_interval_lines(p.conf_int))
        lines.extend(_estimate_lines(p.estimate))

        lines.append(f"{p.effect_size_name}: {p.effect_size:.5g}")
        lines.append(
            f"{'significant' if p.is_significant else 'not significant'} "
            f"at alpha = {p.alpha:g}"
        )
        lines.extend(f"Warning: {w}" for w in self._result.warnings)
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"HTestSolution(method={p.method!r}, "
            f"{p.statistic_name}={p.statistic:.4g}, "
            f"p_value={p.p_value:.4g}, significant={p.is_significant})"
        )


def _hypothesis_lines(p: HTestParams) -> list[str]:
    if not p.null_value:
        return []
    (label, value), = p.null_value.items()
    return [f"alternative hypothesis: true {label} is not equal to {value:g}"]


def _interval_lines(ci: ConfidenceInterval | None) -> list[str]:
    if ci is None:
        return []
    return [
        f"{ci.confidence_level * 100:.10g} percent confidence interval:",
        f" {_format_number(ci.lower_bound)}  {_format_number(ci.upper_bound)}",
    ]


def _estimate_lines(estimate: Mapping[str, float] | None) -> list[str]:
    if estimate is None:
        return []
    return [
        "sample estimates:",
        " ".join(f"{label:>14s}" for label in estimate),
        " ".join(f"{value:14.7g}" for value in estimate.values()),
    ]


def _format_pvalue(p: float) -> str:
    """R's convention: floor at 2.2e-16, scientific below 0.001."""
    if p < 2.2e-16:
        return "< 2.2e-16"
    if p < 0.001:
        return f"{p:.4e}"
    return f"{p:.4g}"


def _format_number(x: float) -> str:
    if np.isinf(x):
        return "-Inf" if x < 0 else "Inf"
    return f"{x:.7g}"
