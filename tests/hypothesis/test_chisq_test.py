"""
Tests for chi_square_test() matching R chisq.test(correct = FALSE).

Also cross-checked against scipy.stats.chi2_contingency(correction=False).
"""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest
from numpy.testing import assert_allclose
from scipy import stats

from pystatsengine.core.exceptions import (
    DegenerateTableError,
    InvalidInputError,
    InvalidParameterError,
    NumericalError,
)
from pystatsengine.hypothesis import chi_square_test


class TestChiSquareIndependence:

    def test_2x3_table(self):
        """
        R: chisq.test(matrix(c(10,20,30,10,20,10), nrow=2, byrow=TRUE))
        X-squared = 6.25, df = 2, p-value = 0.04394
        """
        result = chi_square_test([[10, 20, 30], [10, 20, 10]])
        assert result.chi_square_statistic == pytest.approx(6.25, rel=1e-12)
        assert result.df == 2.0
        assert result.p_value == pytest.approx(0.04393693362340742, rel=1e-10)
        assert result.is_significant is True
        assert result.method == "Pearson's Chi-squared test"

    def test_2x3_expected(self):
        result = chi_square_test([[10, 20, 30], [10, 20, 10]])
        assert_allclose(result.expected, [[12, 24, 24], [8, 16, 16]], rtol=1e-12)

    def test_2x3_residuals(self):
        result = chi_square_test([[10, 20, 30], [10, 20, 10]])
        observed = np.array([[10, 20, 30], [10, 20, 10]], dtype=float)
        expected = np.array([[12, 24, 24], [8, 16, 16]], dtype=float)
        assert_allclose(result.residuals, (observed - expected) / np.sqrt(expected), rtol=1e-12)
        assert_allclose(result.observed, observed)

    def test_2x3_cramers_v(self):
        result = chi_square_test([[10, 20, 30], [10, 20, 10]])
        # sqrt(6.25 / (100 * 1))
        assert result.cramers_v == pytest.approx(0.25, rel=1e-12)
        assert result.effect_size == result.cramers_v
        assert result.effect_size_name == "Cramer's V"

    def test_uniform_table(self):
        result = chi_square_test([[10, 10], [10, 10]])
        assert result.statistic == pytest.approx(0.0, abs=1e-12)
        assert result.p_value == pytest.approx(1.0, abs=1e-12)
        assert result.cramers_v == pytest.approx(0.0, abs=1e-12)
        assert result.is_significant is False

    def test_proportional_rows(self):
        result = chi_square_test([[5, 10, 15], [10, 20, 30]])
        assert result.statistic == pytest.approx(0.0, abs=1e-12)
        assert result.p_value == pytest.approx(1.0, abs=1e-12)

    def test_2x2_has_no_continuity_correction(self):
        table = [[10, 20], [30, 40]]
        ref_stat, ref_p, ref_df, ref_expected = stats.chi2_contingency(table, correction=False)
        result = chi_square_test(table)
        assert result.statistic == pytest.approx(ref_stat, rel=1e-12)
        assert result.p_value == pytest.approx(ref_p, rel=1e-9)
        assert result.df == ref_df

    @pytest.mark.parametrize("shape", [(2, 2), (3, 4), (5, 3)])
    def test_matches_scipy(self, rng, shape):
        table = rng.integers(5, 60, size=shape)
        ref_stat, ref_p, ref_df, ref_expected = stats.chi2_contingency(table, correction=False)
        result = chi_square_test(table)
        assert result.statistic == pytest.approx(ref_stat, rel=1e-10)
        assert result.p_value == pytest.approx(ref_p, rel=1e-8, abs=1e-14)
        assert result.df == ref_df
        assert_allclose(result.expected, ref_expected, rtol=1e-12)

    def test_cramers_v_bounded(self):
        # Perfect association: V = 1
        result = chi_square_test([[20, 0], [0, 20]])
        assert result.cramers_v == pytest.approx(1.0, rel=1e-12)
        assert result.is_significant is True

    def test_alpha_changes_only_significance(self):
        table = [[10, 20, 30], [10, 20, 10]]
        loose = chi_square_test(table)
        strict = chi_square_test(table, alpha=0.01)
        assert strict.statistic == loose.statistic
        assert strict.p_value == loose.p_value
        assert strict.is_significant is False

    def test_accepts_float_integers(self):
        result = chi_square_test(np.array([[10.0, 20.0], [30.0, 40.0]]))
        assert result.df == 1.0


class TestChiSquareWarnings:

    def test_small_expected_counts(self):
        result = chi_square_test([[1, 2], [3, 4]])
        assert any("Chi-squared approximation may be incorrect" in w for w in result.warnings)

    def test_large_counts_no_warning(self):
        result = chi_square_test([[10, 20, 30], [10, 20, 10]])
        assert result.warnings == ()


class TestChiSquareErrors:

    def test_zero_row(self):
        with pytest.raises(DegenerateTableError) as exc_info:
            chi_square_test([[0, 0], [5, 5]])
        assert exc_info.value.row == 0
        assert exc_info.value.column is None

    def test_zero_column(self):
        with pytest.raises(DegenerateTableError) as exc_info:
            chi_square_test([[3, 0, 4], [5, 0, 5]])
        assert exc_info.value.column == 1
        assert exc_info.value.row is None

    def test_degenerate_is_numerical_error(self):
        with pytest.raises(NumericalError):
            chi_square_test([[0, 0], [0, 0]])

    def test_single_row(self):
        with pytest.raises(InvalidInputError, match="at least 2 rows"):
            chi_square_test([[1, 2, 3]])

    def test_single_column(self):
        with pytest.raises(InvalidInputError):
            chi_square_test([[1], [2]])

    def test_ragged(self):
        with pytest.raises(InvalidInputError):
            chi_square_test([[1, 2], [3]])

    def test_one_dimensional(self):
        with pytest.raises(InvalidInputError, match="2D"):
            chi_square_test([1, 2, 3, 4])

    def test_negative_count(self):
        with pytest.raises(InvalidInputError, match="non-negative"):
            chi_square_test([[1, -2], [3, 4]])

    def test_non_integer_count(self):
        with pytest.raises(InvalidInputError, match="integers"):
            chi_square_test([[1.5, 2], [3, 4]])

    def test_non_finite_count(self):
        with pytest.raises(InvalidInputError):
            chi_square_test([[1, np.nan], [3, 4]])

    def test_invalid_alpha(self):
        with pytest.raises(InvalidParameterError):
            chi_square_test([[10, 20], [30, 40]], alpha=0.0)


class TestChiSquareSolution:

    def test_no_conf_int(self):
        result = chi_square_test([[10, 20], [30, 40]])
        assert result.conf_int is None
        assert result.t_statistic is None

    def test_summary(self):
        text = chi_square_test([[10, 20, 30], [10, 20, 10]]).summary()
        assert "Pearson's Chi-squared test" in text
        assert "X-squared = 6.25, df = 2" in text
        assert "Cramer's V: 0.25" in text

    def test_tables_read_only(self):
        result = chi_square_test([[10, 20], [30, 5]])
        for table in (result.observed, result.expected, result.residuals):
            with pytest.raises(ValueError):
                table[0, 0] = -1.0
        assert result.expected[0, 0] == pytest.approx(40 * 30 / 65)

    def test_extras_read_only(self):
        result = chi_square_test([[10, 20], [30, 5]])
        v = result.cramers_v
        with pytest.raises(TypeError):
            result.params.extras["cramers_v"] = 9
        with pytest.raises(FrozenInstanceError):
            result._result = None
        assert result.cramers_v == v

    def test_input_table_untouched(self):
        table = np.array([[10.0, 20.0], [30.0, 5.0]])
        result = chi_square_test(table)
        table[0, 0] = 99.0
        assert result.observed[0, 0] == 10.0
