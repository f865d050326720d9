"""
Core infrastructure for pystatsengine.

This module provides shared abstractions and utilities used by all
domain-specific submodules (distributions, descriptive, hypothesis,
normality).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and numerical tolerances
"""

from pystatsengine.core.result import Result
from pystatsengine.core.exceptions import (
    StatsEngineError,
    ValidationError,
    DimensionError,
    EmptyDatasetError,
    InsufficientSampleSizeError,
    InvalidSampleSizeError,
    InvalidInputError,
    InvalidParameterError,
    NumericalError,
    DegenerateTableError,
    ConvergenceError,
    GroupComputationError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "StatsEngineError",
    "ValidationError",
    "DimensionError",
    "EmptyDatasetError",
    "InsufficientSampleSizeError",
    "InvalidSampleSizeError",
    "InvalidInputError",
    "InvalidParameterError",
    "NumericalError",
    "DegenerateTableError",
    "ConvergenceError",
    "GroupComputationError",
]
