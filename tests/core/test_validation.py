"""
Tests for the input validators.

Each validator checks one thing and raises the most specific exception
in the hierarchy, with the parameter name in the message.
"""

import numpy as np
import pytest

from pystatsengine.core.exceptions import (
    DimensionError,
    EmptyDatasetError,
    InsufficientSampleSizeError,
    InvalidParameterError,
    ValidationError,
)
from pystatsengine.core.validation import (
    check_1d,
    check_array,
    check_degrees_of_freedom,
    check_finite,
    check_min_samples,
    check_not_empty,
    check_probability,
    check_sample,
)


class FakeSeries:
    """Object exposing .values like a pandas Series."""

    def __init__(self, values):
        self.values = np.asarray(values)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:

    def test_list_to_float_array(self):
        arr = check_array([1, 2, 3], "x")
        assert arr.dtype == np.float64
        np.testing.assert_array_equal(arr, [1.0, 2.0, 3.0])

    def test_float32_preserved(self):
        arr = check_array(np.array([1.0, 2.0], dtype=np.float32), "x")
        assert arr.dtype == np.float32

    def test_unwraps_values(self):
        arr = check_array(FakeSeries([1.5, 2.5]), "x")
        np.testing.assert_array_equal(arr, [1.5, 2.5])

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="x"):
            check_array([1, "a", None], "x")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "sample")

    def test_rejects_bool(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array([True, False], "x")


# ═══════════════════════════════════════════════════════════════════════
# Single-property checks
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, -2.0]), "x")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="1 NaN"):
            check_finite(np.array([1.0, np.nan]), "x")

    def test_inf_rejected(self):
        with pytest.raises(ValidationError, match="1 Inf"):
            check_finite(np.array([np.inf, 1.0]), "x")


class TestCheckNdim:

    def test_check_1d_rejects_2d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.ones((2, 2)), "x")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            check_1d(np.ones((2, 2)), "x")


class TestCheckNotEmpty:

    def test_empty_raises(self):
        with pytest.raises(EmptyDatasetError) as exc_info:
            check_not_empty(np.array([]), "sample")
        assert exc_info.value.name == "sample"

    def test_single_element_passes(self):
        check_not_empty(np.array([1.0]), "x")


class TestCheckMinSamples:

    def test_exact_minimum_passes(self):
        check_min_samples(np.ones(4), 4, "x")

    def test_too_few_raises_with_attributes(self):
        with pytest.raises(InsufficientSampleSizeError) as exc_info:
            check_min_samples(np.ones(2), 3, "x", statistic="skewness")
        e = exc_info.value
        assert e.statistic == "skewness"
        assert e.required == 3
        assert e.actual == 2
        assert "skewness" in str(e)


# ═══════════════════════════════════════════════════════════════════════
# check_sample
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSample:

    def test_returns_float64(self):
        arr = check_sample([1, 2, 3], "x")
        assert arr.dtype == np.float64

    def test_empty_is_empty_dataset(self):
        with pytest.raises(EmptyDatasetError):
            check_sample([], "x")

    def test_2d_rejected(self):
        with pytest.raises(DimensionError):
            check_sample([[1.0, 2.0], [3.0, 4.0]], "x")

    def test_nan_rejected(self):
        with pytest.raises(ValidationError):
            check_sample([1.0, float("nan"), 3.0], "x")


# ═══════════════════════════════════════════════════════════════════════
# Scalar parameters
# ═══════════════════════════════════════════════════════════════════════


class TestCheckProbability:

    @pytest.mark.parametrize("value", [1e-10, 0.05, 0.5, 0.999])
    def test_inside_passes(self, value):
        assert check_probability(value, "alpha") == value

    @pytest.mark.parametrize("value", [0.0, 1.0, -0.1, 1.5, float("nan")])
    def test_outside_raises(self, value):
        with pytest.raises(InvalidParameterError) as exc_info:
            check_probability(value, "alpha")
        assert exc_info.value.parameter == "alpha"

    def test_non_number_raises(self):
        with pytest.raises(InvalidParameterError):
            check_probability("high", "alpha")


class TestCheckDegreesOfFreedom:

    @pytest.mark.parametrize("df", [0.5, 1, 7.3, 1e6])
    def test_positive_passes(self, df):
        assert check_degrees_of_freedom(df) == float(df)

    @pytest.mark.parametrize("df", [0, -1, float("nan"), float("inf")])
    def test_invalid_raises(self, df):
        with pytest.raises(InvalidParameterError) as exc_info:
            check_degrees_of_freedom(df, "degrees_of_freedom")
        assert exc_info.value.parameter == "degrees_of_freedom"
