"""
Shared compute infrastructure for pystatsengine.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Iteration limits, convergence thresholds, tolerance tiers
"""

from pystatsengine.core.compute.timing import Timer
from pystatsengine.core.compute.tolerances import (
    ToleranceTier,
    P_VALUE_TOLERANCE,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "P_VALUE_TOLERANCE",
    "select_tolerance",
]
