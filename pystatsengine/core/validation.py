"""
Input validation utilities for pystatsengine.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pystatsengine.core.exceptions import (
    ValidationError,
    DimensionError,
    EmptyDatasetError,
    InsufficientSampleSizeError,
    InvalidParameterError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Objects exposing
    ``.values`` (pandas Series) are unwrapped first. Rejects inputs that
    result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    if hasattr(array, 'values') and not isinstance(array, dict):
        array = array.values

    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one element.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        EmptyDatasetError: If array is empty
    """
    if array.size == 0:
        raise EmptyDatasetError(f"{name}: sample is empty", name=name)


def check_min_samples(
    array: NDArray[np.floating[Any]],
    min_samples: int,
    name: str,
    statistic: str | None = None,
) -> None:
    """
    Verify array has at least the minimum number of samples.

    Args:
        array: Array to check
        min_samples: Minimum required samples (first dimension)
        name: Parameter name for error messages
        statistic: Quantity that needs the samples, for the error message

    Raises:
        InsufficientSampleSizeError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        what = f" to compute {statistic}" if statistic else ""
        raise InsufficientSampleSizeError(
            f"{name}: requires at least {min_samples} samples{what}, got {n}",
            statistic=statistic,
            required=min_samples,
            actual=n,
        )


def check_sample(sample: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Convert and validate a sample: numeric, 1D, non-empty, finite.

    Args:
        sample: Array-like of real numbers
        name: Parameter name for error messages

    Returns:
        1D float64 array

    Raises:
        ValidationError: Non-numeric or non-finite data
        DimensionError: Input is not 1D
        EmptyDatasetError: Input has no elements
    """
    arr = check_array(sample, name)
    check_1d(arr, name)
    check_not_empty(arr, name)
    check_finite(arr, name)
    return arr.astype(np.float64, copy=False)


def check_probability(value: float, name: str) -> float:
    """
    Verify a scalar lies strictly inside (0, 1).

    Used for alpha, confidence levels and quantile probabilities.

    Raises:
        InvalidParameterError: If value is not a finite number in (0, 1)
    """
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(
            f"{name} must be a number in (0, 1), got {value!r}",
            parameter=name, value=value,
        ) from e
    if not (0.0 < value < 1.0):
        raise InvalidParameterError(
            f"{name} must be in (0, 1), got {value}",
            parameter=name, value=value,
        )
    return value


def check_degrees_of_freedom(df: float, name: str = "df") -> float:
    """
    Verify degrees of freedom are a finite positive number.

    Raises:
        InvalidParameterError: If df <= 0, NaN or infinite
    """
    try:
        df = float(df)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(
            f"{name} must be a positive number, got {df!r}",
            parameter=name, value=df,
        ) from e
    if not math.isfinite(df) or df <= 0.0:
        raise InvalidParameterError(
            f"{name} must be finite and > 0, got {df}",
            parameter=name, value=df,
        )
    return df
