"""
Generic result container for PyMatrix reports.

The Result class provides a standardized envelope for computations that
gather several derived quantities at once (see matrix.summary). Payload
types are defined by the producing module.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, mode)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The payload type

    Attributes:
        params: Payload (e.g. MatrixSummary)
        info: Structured metadata (method, mode, ...)
        timing: Execution timing breakdown, or None if not measured
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=MatrixSummary(...),
        ...     info={'method': 'gaussian_elimination', 'mode': 'real'},
        ...     timing={'total_seconds': 0.01, 'rank': 0.004}
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
