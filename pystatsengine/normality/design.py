"""
NormalityDesign: validated input for the normality test.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystatsengine.core.exceptions import InvalidSampleSizeError
from pystatsengine.core.validation import check_sample

MIN_SAMPLE_SIZE = 3
MAX_SAMPLE_SIZE = 5000


@dataclass(frozen=True)
class NormalityDesign:
    """
    Design for the normality test.

    Holds the sorted sample; valid for 3 <= n <= 5000.
    """
    _sorted: NDArray[np.floating[Any]]
    _n: int
    _name: str

    @classmethod
    def from_array(cls, data: ArrayLike, *, name: str = "x") -> NormalityDesign:
        """
        Build NormalityDesign from a 1D sample.

        Raises
        ------
        EmptyDatasetError
            The sample is empty.
        InvalidSampleSizeError
            n < 3 or n > 5000.
        """
        arr = check_sample(data, name)
        n = len(arr)
        if n < MIN_SAMPLE_SIZE or n > MAX_SAMPLE_SIZE:
            raise InvalidSampleSizeError(
                f"{name}: normality test requires {MIN_SAMPLE_SIZE} <= n <= "
                f"{MAX_SAMPLE_SIZE}, got n={n}",
                actual=n,
                minimum=MIN_SAMPLE_SIZE,
                maximum=MAX_SAMPLE_SIZE,
            )
        x_sorted = np.sort(arr)
        x_sorted.setflags(write=False)
        return cls(_sorted=x_sorted, _n=n, _name=name)

    @property
    def sorted_data(self) -> NDArray[np.floating[Any]]:
        """Order statistics x(1) <= ... <= x(n)."""
        return self._sorted

    @property
    def n(self) -> int:
        return self._n

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"NormalityDesign(name={self._name!r}, n={self._n})"
