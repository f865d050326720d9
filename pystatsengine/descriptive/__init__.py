"""
Descriptive statistics module.

Summary statistics for a single in-memory sample.

Public API:
    describe(data)               - All statistics at once
    describe_grouped(groups)     - describe() per named sample
    confidence_interval(data)    - t-based interval on the mean
"""

from pystatsengine.descriptive.design import DescriptiveDesign
from pystatsengine.descriptive.solution import (
    ConfidenceInterval,
    DescriptiveParams,
    DescriptiveSolution,
    Quartiles,
)
from pystatsengine.descriptive.solvers import (
    describe,
    describe_grouped,
    confidence_interval,
)

__all__ = [
    "describe",
    "describe_grouped",
    "confidence_interval",
    "DescriptiveDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
    "Quartiles",
    "ConfidenceInterval",
]
