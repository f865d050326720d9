"""
Normality test solution types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, TYPE_CHECKING

from pystatsengine.core.result import Result

if TYPE_CHECKING:
    from pystatsengine.normality.design import NormalityDesign


@dataclass(frozen=True)
class NormalityParams:
    """
    Parameter payload for the normality test.

    Attributes
    ----------
    statistic : float
        Shapiro-Wilk W in (0, 1]; values near 1 are consistent with
        normality.
    p_value : float
        Approximate p-value in [0, 1].
    is_normal : bool
        ``p_value > 0.05``.
    test_name : str
    n : int
    """
    statistic: float
    p_value: float
    is_normal: bool
    test_name: str
    n: int


@dataclass(frozen=True)
class NormalityTestSolution:
    """User-facing normality test result."""
    _result: Result[NormalityParams]
    _design: 'NormalityDesign'

    @property
    def params(self) -> NormalityParams:
        return self._result.params

    @property
    def statistic(self) -> float:
        """W statistic."""
        return self._result.params.statistic

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def is_normal(self) -> bool:
        return self._result.params.is_normal

    @property
    def test_name(self) -> str:
        return self._result.params.test_name

    @property
    def n(self) -> int:
        return self._result.params.n

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
        p = self._result.params
        verdict = "consistent with" if p.is_normal else "departs from"
        return "\n".join([
            f"\t{p.test_name}",
            "",
            f"data:  {self._design.name}",
            f"W = {p.statistic:.5g}, p-value = {p.p_value:.4g}",
            f"sample {verdict} normality (n = {p.n})",
            "",
        ])

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"NormalityTestSolution(W={p.statistic:.4g}, p_value={p.p_value:.4g}, "
            f"is_normal={p.is_normal})"
        )
