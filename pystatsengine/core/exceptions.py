"""
Exception hierarchy for pystatsengine.

All exceptions inherit from StatsEngineError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from typing import Any


class StatsEngineError(Exception):
    """Base exception for all pystatsengine errors."""
    pass


class ValidationError(StatsEngineError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions, e.g. a
    sample that is not 1D or a contingency table that is not 2D.
    """
    pass


class EmptyDatasetError(ValidationError):
    """
    Sample has zero elements where one or more is required.

    Attributes:
        name: Parameter name of the empty sample
    """

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class InsufficientSampleSizeError(ValidationError):
    """
    Sample size is below the statistical minimum for a computation.

    Variance needs n >= 2, skewness n >= 3, kurtosis n >= 4 and each
    t-test sample n >= 2.

    Attributes:
        statistic: The quantity that could not be computed
        required: Minimum sample size for that quantity
        actual: Sample size that was supplied
    """

    def __init__(
        self,
        message: str,
        statistic: str | None = None,
        required: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.statistic = statistic
        self.required = required
        self.actual = actual


class InvalidSampleSizeError(ValidationError):
    """
    Sample size lies outside the valid domain of a test.

    Raised by the normality test, which is defined for 3 <= n <= 5000.

    Attributes:
        actual: Sample size that was supplied
        minimum: Smallest valid sample size
        maximum: Largest valid sample size
    """

    def __init__(
        self,
        message: str,
        actual: int | None = None,
        minimum: int | None = None,
        maximum: int | None = None,
    ):
        super().__init__(message)
        self.actual = actual
        self.minimum = minimum
        self.maximum = maximum


class InvalidInputError(ValidationError):
    """
    Malformed contingency table.

    Raised for tables with fewer than 2 rows or columns, ragged rows,
    negative or non-integer counts.
    """
    pass


class InvalidParameterError(ValidationError):
    """
    A scalar parameter lies outside its valid range.

    Raised for non-positive degrees of freedom, alpha or confidence level
    outside (0, 1), and probabilities outside (0, 1).

    Attributes:
        parameter: Name of the offending parameter
        value: The rejected value
    """

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        value: Any = None,
    ):
        super().__init__(message)
        self.parameter = parameter
        self.value = value


class NumericalError(StatsEngineError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation,
    e.g. a zero standard error in a t-test.
    """
    pass


class DegenerateTableError(NumericalError):
    """
    Contingency table has an expected count of zero.

    An all-zero row or column makes the expected count of every cell in it
    zero, so the chi-square statistic would divide by zero.

    Attributes:
        row: Index of the first all-zero row, if any
        column: Index of the first all-zero column, if any
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        column: int | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.column = column


class ConvergenceError(StatsEngineError):
    """
    Iterative algorithm failed to converge.

    Raised when a series expansion or continued fraction (incomplete gamma,
    incomplete beta) fails to meet its tolerance within the maximum number
    of iterations.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final relative change of the iterate
        reason: Why convergence failed (e.g., 'max_iterations')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold


class GroupComputationError(StatsEngineError):
    """
    Computation failed for one group of a grouped analysis.

    The original exception is kept both as an attribute and as the
    chained ``__cause__``.

    Attributes:
        group: Key of the group that failed
        error: The exception raised for that group
    """

    def __init__(self, message: str, group: Any, error: StatsEngineError):
        super().__init__(message)
        self.group = group
        self.error = error
