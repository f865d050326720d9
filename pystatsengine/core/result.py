"""
Generic result container for all pystatsengine computations.

The Result class provides a standardized envelope that all domain-specific
results use. This enables shared tooling for timing, diagnostics,
reproducibility, and serialization while allowing domains to define their
own parameter structures.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, sample sizes, diagnostics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True, read-only mappings) so results can be shared
      between threads
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TypeVar, Generic, Any, Mapping

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Library versions in effect when a result was produced."""
    import numpy
    import scipy

    from pystatsengine import __version__

    return {
        'pystatsengine_version': __version__,
        'numpy_version': numpy.__version__,
        'scipy_version': scipy.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (statistics, test outcome, etc.)
        info: Structured metadata (method, sample sizes, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions and algorithm identifiers

    Examples:
        >>> Result(
        ...     params=DescriptiveParams(...),
        ...     info={'n': 8},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_descriptive'
        ... )
    """
    params: P
    info: Mapping[str, Any]
    timing: Mapping[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: Mapping[str, Any] = field(default_factory=_default_provenance)

    def __post_init__(self):
        object.__setattr__(self, 'info', MappingProxyType(dict(self.info)))
        object.__setattr__(self, 'provenance', MappingProxyType(dict(self.provenance)))
        if self.timing is not None:
            object.__setattr__(self, 'timing', MappingProxyType(dict(self.timing)))

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
