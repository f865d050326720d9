"""
Descriptive statistics solution types.

Contains the value types (Quartiles, ConfidenceInterval), the parameter
payload and the user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, TYPE_CHECKING

from pystatsengine.core.result import Result
from pystatsengine.core.validation import check_probability

if TYPE_CHECKING:
    from pystatsengine.descriptive.design import DescriptiveDesign


@dataclass(frozen=True)
class Quartiles:
    """First, second (median) and third quartile; q1 <= q2 <= q3."""
    q1: float
    q2: float
    q3: float

    @property
    def iqr(self) -> float:
        return self.q3 - self.q1

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.q1, self.q2, self.q3)


@dataclass(frozen=True)
class ConfidenceInterval:
    """
    Two-sided confidence interval.

    Attributes:
        lower_bound: Lower end of the interval
        upper_bound: Upper end of the interval
        confidence_level: Coverage probability, in (0, 1)
    """
    lower_bound: float
    upper_bound: float
    confidence_level: float

    def __post_init__(self):
        check_probability(self.confidence_level, "confidence_level")

    @property
    def width(self) -> float:
        return self.upper_bound - self.lower_bound

    def contains(self, value: float) -> bool:
        return self.lower_bound <= value <= self.upper_bound

    def as_tuple(self) -> tuple[float, float]:
        return (self.lower_bound, self.upper_bound)


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics.

    Every field is populated by describe(). Variance is Bessel-corrected;
    skewness and kurtosis are the bias-adjusted G1 and excess G2.
    """
    count: int
    sum: float
    mean: float
    median: float
    mode: tuple[float, ...]
    variance: float
    standard_deviation: float
    min: float
    max: float
    range: float
    quartiles: Quartiles
    iqr: float
    skewness: float
    kurtosis: float
    coefficient_of_variation: float


@dataclass(frozen=True)
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'DescriptiveDesign'

    # --- Statistics ---

    @property
    def params(self) -> DescriptiveParams:
        return self._result.params

    @property
    def count(self) -> int:
        return self._result.params.count

    @property
    def sum(self) -> float:
        return self._result.params.sum

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def mode(self) -> tuple[float, ...]:
        """All most-frequent values, ascending."""
        return self._result.params.mode

    @property
    def variance(self) -> float:
        """Sample variance (Bessel-corrected, n-1)."""
        return self._result.params.variance

    @property
    def standard_deviation(self) -> float:
        return self._result.params.standard_deviation

    @property
    def sd(self) -> float:
        """Alias for standard_deviation."""
        return self._result.params.standard_deviation

    @property
    def min(self) -> float:
        return self._result.params.min

    @property
    def max(self) -> float:
        return self._result.params.max

    @property
    def range(self) -> float:
        return self._result.params.range

    @property
    def quartiles(self) -> Quartiles:
        return self._result.params.quartiles

    @property
    def iqr(self) -> float:
        """Interquartile range, q3 - q1."""
        return self._result.params.iqr

    @property
    def skewness(self) -> float:
        """Bias-adjusted skewness (G1)."""
        return self._result.params.skewness

    @property
    def kurtosis(self) -> float:
        """Bias-adjusted excess kurtosis (G2)."""
        return self._result.params.kurtosis

    @property
    def coefficient_of_variation(self) -> float:
        """standard_deviation / mean; NaN when the mean is zero."""
        return self._result.params.coefficient_of_variation

    # --- Metadata ---

    @property
    def name(self) -> str:
        return self._design.name

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
        """Aligned text summary, one statistic per line."""
        p = self._result.params
        rows = [
            ("n", f"{p.count:d}"),
            ("Sum", f"{p.sum:.6g}"),
            ("Mean", f"{p.mean:.6g}"),
            ("Median", f"{p.median:.6g}"),
            ("Mode", ", ".join(f"{m:.6g}" for m in p.mode)),
            ("Variance", f"{p.variance:.6g}"),
            ("Std. Dev.", f"{p.standard_deviation:.6g}"),
            ("Min.", f"{p.min:.6g}"),
            ("1st Qu.", f"{p.quartiles.q1:.6g}"),
            ("3rd Qu.", f"{p.quartiles.q3:.6g}"),
            ("Max.", f"{p.max:.6g}"),
            ("Range", f"{p.range:.6g}"),
            ("IQR", f"{p.iqr:.6g}"),
            ("Skewness", f"{p.skewness:.6g}"),
            ("Kurtosis", f"{p.kurtosis:.6g}"),
            ("CV", f"{p.coefficient_of_variation:.6g}"),
        ]
        label_width = max(len(label) for label, _ in rows)
        value_width = max(len(value) for _, value in rows)

        lines = [f"Descriptive Statistics: {self._design.name}"]
        for label, value in rows:
            lines.append(f"  {label.ljust(label_width)}  {value.rjust(value_width)}")
        for w in self._result.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"DescriptiveSolution(name={self._design.name!r}, n={p.count}, "
            f"mean={p.mean:.4g}, sd={p.standard_deviation:.4g})"
        )
