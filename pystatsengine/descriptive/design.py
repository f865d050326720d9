"""
DescriptiveDesign: data wrapper for descriptive statistics.

Wraps a single validated sample and provides metadata for the
descriptive statistics pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystatsengine.core.validation import check_sample


@dataclass(frozen=True)
class DescriptiveDesign:
    """
    Design for descriptive statistics.

    Wraps one sample (a 1D sequence of finite reals). Immutable after
    construction; the wrapped array is marked read-only.

    Construction:
        DescriptiveDesign.from_array(sample)
        DescriptiveDesign.from_array(series, name='heart_rate')
    """
    _data: NDArray[np.floating[Any]]
    _n: int
    _name: str

    @classmethod
    def from_array(cls, data: ArrayLike, *, name: str = "x") -> DescriptiveDesign:
        """
        Build DescriptiveDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1D sequence of real numbers. Lists, tuples, numpy arrays and
            pandas Series are accepted.
        name : str
            Label used in error messages and summaries.

        Raises
        ------
        EmptyDatasetError
            The sample has no elements.
        ValidationError
            Non-numeric or non-finite data.
        DimensionError
            The sample is not 1D.
        """
        arr = np.array(check_sample(data, name), dtype=np.float64)
        arr.setflags(write=False)
        return cls(_data=arr, _n=len(arr), _name=name)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """The sample, as a read-only float64 array."""
        return self._data

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def name(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"DescriptiveDesign(name={self._name!r}, n={self._n})"
