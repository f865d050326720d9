"""
HypothesisDesign: tagged union for hypothesis test inputs.

Uses factory classmethods per test type. The `test_type` field identifies
which fields are populated. Immutable after construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray, ArrayLike

from pystatsengine.core.exceptions import InvalidInputError, InvalidParameterError
from pystatsengine.core.validation import (
    check_sample, check_min_samples, check_probability,
)


def _read_only(arr: NDArray) -> NDArray:
    arr = np.array(arr, dtype=np.float64)
    arr.setflags(write=False)
    return arr


def _t_sample(x: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """Validate a t-test sample: 1D, finite, n >= 2."""
    arr = check_sample(x, name)
    check_min_samples(arr, 2, name, statistic="t-test")
    return _read_only(arr)


def _contingency_table(table: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Validate a contingency table.

    Must be rectangular, 2D, at least 2x2, with finite non-negative
    integer counts.
    """
    if hasattr(table, 'values') and not isinstance(table, dict):
        table = table.values
    try:
        arr = np.asarray(table, dtype=np.float64)
    except (ValueError, TypeError) as e:
        raise InvalidInputError(
            f"table: must be a rectangular matrix of counts ({e})"
        ) from e

    if arr.ndim != 2:
        raise InvalidInputError(
            f"table: expected 2D contingency table, got {arr.ndim}D with shape {arr.shape}"
        )
    nrow, ncol = arr.shape
    if nrow < 2 or ncol < 2:
        raise InvalidInputError(
            f"table: contingency table must have at least 2 rows and 2 columns, "
            f"got {nrow}x{ncol}"
        )
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError("table: counts must be finite")
    if np.any(arr < 0):
        loc = np.argwhere(arr < 0)[0]
        raise InvalidInputError(
            f"table: counts must be non-negative, got {arr[loc[0], loc[1]]:g} "
            f"at row {loc[0]}, column {loc[1]}"
        )
    if np.any(arr != np.floor(arr)):
        loc = np.argwhere(arr != np.floor(arr))[0]
        raise InvalidInputError(
            f"table: counts must be integers, got {arr[loc[0], loc[1]]:g} "
            f"at row {loc[0]}, column {loc[1]}"
        )
    return _read_only(arr)


@dataclass(frozen=True)
class HypothesisDesign:
    """
    Design for hypothesis tests.

    Uses a tagged-union approach: the `test_type` field identifies which
    fields are populated. Factory classmethods validate inputs.

    Do not construct directly; use factory classmethods.
    """
    test_type: str

    # Numeric vectors
    _x: NDArray[np.floating[Any]] | None = None
    _y: NDArray[np.floating[Any]] | None = None

    # Contingency table
    _table: NDArray[np.floating[Any]] | None = None

    # Test configuration
    _mu: float = 0.0
    _alpha: float = 0.05

    # Metadata
    _data_name: str = ""

    # --- Properties ---

    @property
    def x(self) -> NDArray[np.floating[Any]] | None:
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]] | None:
        return self._y

    @property
    def table(self) -> NDArray[np.floating[Any]] | None:
        return self._table

    @property
    def mu(self) -> float:
        return self._mu

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def conf_level(self) -> float:
        return 1.0 - self._alpha

    @property
    def data_name(self) -> str:
        return self._data_name

    # --- Factory classmethods ---

    @classmethod
    def for_one_sample_t_test(
        cls,
        x: ArrayLike,
        *,
        mu: float = 0.0,
        alpha: float = 0.05,
    ) -> HypothesisDesign:
        """Build design for one_sample_t_test()."""
        alpha = check_probability(alpha, "alpha")
        mu = float(mu)
        if not np.isfinite(mu):
            raise InvalidParameterError(
                f"hypothesized mean must be finite, got {mu}",
                parameter="mu", value=mu,
            )
        return cls(
            test_type="t_one_sample",
            _x=_t_sample(x, "x"),
            _mu=mu,
            _alpha=alpha,
            _data_name="x",
        )

    @classmethod
    def for_two_sample_t_test(
        cls,
        x: ArrayLike,
        y: ArrayLike,
        *,
        alpha: float = 0.05,
    ) -> HypothesisDesign:
        """Build design for two_sample_t_test() (Welch)."""
        alpha = check_probability(alpha, "alpha")
        return cls(
            test_type="t_two_sample",
            _x=_t_sample(x, "x"),
            _y=_t_sample(y, "y"),
            _alpha=alpha,
            _data_name="x and y",
        )

    @classmethod
    def for_chi_square_test(
        cls,
        table: ArrayLike,
        *,
        alpha: float = 0.05,
    ) -> HypothesisDesign:
        """Build design for chi_square_test() (test of independence)."""
        alpha = check_probability(alpha, "alpha")
        return cls(
            test_type="chisq_independence",
            _table=_contingency_table(table),
            _alpha=alpha,
            _data_name="table",
        )

    def __repr__(self) -> str:
        if self._table is not None:
            shape = "x".join(str(s) for s in self._table.shape)
            return f"HypothesisDesign(test_type={self.test_type!r}, table={shape})"
        sizes = f"n_x={len(self._x)}"
        if self._y is not None:
            sizes += f", n_y={len(self._y)}"
        return f"HypothesisDesign(test_type={self.test_type!r}, {sizes})"
