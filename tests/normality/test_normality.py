"""
Tests for normality_test() (Shapiro-Wilk, Royston approximation).

scipy.stats.shapiro implements the same algorithm (AS R94), so W and
the p-value are compared against it directly.
"""

import math
from dataclasses import FrozenInstanceError

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import stats

from pystatsengine.core.exceptions import (
    EmptyDatasetError,
    InvalidSampleSizeError,
    NumericalError,
    ValidationError,
)
from pystatsengine.normality import NormalityDesign, normality_test
from pystatsengine.normality.backends._shapiro_wilk import (
    shapiro_wilk_coefficients, shapiro_wilk_pvalue,
)


# ═══════════════════════════════════════════════════════════════════════
# Agreement with scipy.stats.shapiro
# ═══════════════════════════════════════════════════════════════════════


class TestAgainstScipy:

    @pytest.mark.parametrize("n", [3, 4, 5, 6, 7, 11, 12, 20, 50, 500, 2000])
    def test_normal_data(self, rng, n):
        x = rng.normal(loc=10.0, scale=2.0, size=n)
        ref = stats.shapiro(x)
        result = normality_test(x)
        assert result.statistic == pytest.approx(ref.statistic, rel=1e-5)
        assert result.p_value == pytest.approx(ref.pvalue, abs=1e-4)

    @pytest.mark.parametrize("n", [8, 15, 40, 300])
    def test_skewed_data(self, rng, n):
        x = rng.lognormal(size=n)
        ref = stats.shapiro(x)
        result = normality_test(x)
        assert result.statistic == pytest.approx(ref.statistic, rel=1e-5)
        assert result.p_value == pytest.approx(ref.pvalue, abs=1e-4)

    def test_three_points_exact(self):
        x = [1.0, 2.0, 4.0]
        ref = stats.shapiro(x)
        result = normality_test(x)
        assert result.statistic == pytest.approx(ref.statistic, rel=1e-6)
        assert result.p_value == pytest.approx(ref.pvalue, abs=1e-6)

    def test_three_equally_spaced_points(self):
        # W = 1 and p = 1 for a perfectly symmetric triple
        result = normality_test([1.0, 2.0, 3.0])
        assert result.statistic == pytest.approx(1.0, rel=1e-12)
        assert result.p_value == pytest.approx(1.0, abs=1e-9)


# ═══════════════════════════════════════════════════════════════════════
# Decisions
# ═══════════════════════════════════════════════════════════════════════


class TestDecision:

    def test_normal_scores_are_normal(self, normal_scores):
        result = normality_test(normal_scores)
        assert result.statistic > 0.98
        assert result.is_normal is True

    def test_exponential_is_not_normal(self, skewed_sample):
        result = normality_test(skewed_sample)
        assert result.p_value < 1e-6
        assert result.is_normal is False

    def test_uniform_large_sample_is_not_normal(self, rng):
        result = normality_test(rng.uniform(size=5000))
        assert result.is_normal is False

    def test_is_normal_threshold(self, rng):
        for _ in range(10):
            result = normality_test(rng.standard_normal(30))
            assert result.is_normal == (result.p_value > 0.05)


# ═══════════════════════════════════════════════════════════════════════
# Properties of W and its coefficients
# ═══════════════════════════════════════════════════════════════════════


class TestStatistic:

    @pytest.mark.parametrize("n", [3, 4, 5, 6, 10, 25, 101])
    def test_coefficients_antisymmetric_unit_norm(self, n):
        a = shapiro_wilk_coefficients(n)
        assert_allclose(a, -a[::-1], atol=1e-15)
        assert np.sum(a * a) == pytest.approx(1.0, rel=1e-12)
        assert np.all(np.diff(a) >= 0.0)

    def test_w_in_unit_interval(self, rng):
        for n in [3, 9, 60]:
            w = normality_test(rng.exponential(size=n)).statistic
            assert 0.0 < w <= 1.0

    def test_location_scale_invariant(self, rng):
        x = rng.gamma(2.0, size=40)
        base = normality_test(x)
        moved = normality_test(3.5 * x - 100.0)
        assert moved.statistic == pytest.approx(base.statistic, rel=1e-10)
        assert moved.p_value == pytest.approx(base.p_value, rel=1e-8)

    def test_near_float_limit(self, rng):
        x = rng.standard_normal(30)
        base = normality_test(x)
        huge = normality_test(x * 1e307)
        assert huge.statistic == pytest.approx(base.statistic, rel=1e-10)

    def test_order_irrelevant(self, rng):
        x = rng.standard_normal(25)
        assert normality_test(x).statistic == normality_test(np.sort(x)[::-1]).statistic

    def test_pvalue_in_unit_interval(self):
        for n in [3, 5, 11, 12, 400]:
            for w in [0.5, 0.8, 0.95, 0.999]:
                assert 0.0 <= shapiro_wilk_pvalue(w, n) <= 1.0

    def test_pvalue_decreases_with_w(self):
        ps = [shapiro_wilk_pvalue(w, 30) for w in [0.85, 0.9, 0.95, 0.99]]
        assert ps == sorted(ps)


# ═══════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════


class TestErrors:

    def test_empty(self):
        with pytest.raises(EmptyDatasetError):
            normality_test([])

    def test_too_small(self):
        with pytest.raises(InvalidSampleSizeError) as exc_info:
            normality_test([1.0, 2.0])
        e = exc_info.value
        assert e.actual == 2
        assert e.minimum == 3
        assert e.maximum == 5000

    def test_too_large(self, rng):
        with pytest.raises(InvalidSampleSizeError) as exc_info:
            normality_test(rng.standard_normal(5001))
        assert exc_info.value.actual == 5001

    def test_largest_allowed(self, rng):
        assert normality_test(rng.standard_normal(5000)).n == 5000

    def test_constant(self):
        with pytest.raises(NumericalError, match="identical"):
            normality_test([4.0, 4.0, 4.0, 4.0])

    def test_non_finite(self):
        with pytest.raises(ValidationError):
            normality_test([1.0, 2.0, math.inf])


# ═══════════════════════════════════════════════════════════════════════
# Solution plumbing
# ═══════════════════════════════════════════════════════════════════════


class TestSolution:

    def test_test_name(self, normal_scores):
        result = normality_test(normal_scores)
        assert result.test_name == "Shapiro-Wilk normality test (Royston approximation)"

    def test_approximation_warning(self, normal_scores):
        result = normality_test(normal_scores)
        assert any("approximate Shapiro-Wilk p-value" in w for w in result.warnings)

    def test_provenance_records_algorithm(self, normal_scores):
        prov = normality_test(normal_scores).provenance
        assert prov["algorithm"] == "royston_1992"
        assert "numpy_version" in prov

    def test_design_sorted_and_read_only(self):
        design = NormalityDesign.from_array([3.0, 1.0, 2.0])
        assert_allclose(design.sorted_data, [1.0, 2.0, 3.0])
        with pytest.raises(ValueError):
            design.sorted_data[0] = 0.0

    def test_summary(self, normal_scores):
        text = normality_test(normal_scores, name="scores").summary()
        assert "data:  scores" in text
        assert "W = " in text
        assert "consistent with normality" in text

    def test_backend(self, normal_scores):
        result = normality_test(normal_scores)
        assert result.backend_name == "cpu_normality"
        assert {"statistic", "p_value"} <= set(result.timing)

    def test_result_immutable(self, normal_scores):
        result = normality_test(normal_scores)
        with pytest.raises(FrozenInstanceError):
            result._result = None
        with pytest.raises(FrozenInstanceError):
            result.params.p_value = 0.0
        with pytest.raises(TypeError):
            result.info["threshold"] = 0.5
