"""
Tolerance tiers for numerical comparison.

Defines precision expectations for the floating-point modes:
- ELEMENTWISE: entry-by-entry equality and zero tests during elimination
- ROUND_TRIP: products that accumulate rounding error, e.g. A @ inv(A) == I

Integer mode ignores tolerances entirely; its comparisons are exact.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    atol: float
    name: str
    description: str


# Default for eq, is_zero, equals, rank and orthogonality checks
ELEMENTWISE = ToleranceTier(
    atol=1e-9,
    name='elementwise',
    description='Absolute per-entry (per-component for complex) tolerance',
)

# Results of an inversion multiplied back against the source
ROUND_TRIP = ToleranceTier(
    atol=1e-6,
    name='round_trip',
    description='Relaxed tolerance for products that compound rounding error',
)

DEFAULT_TOLERANCE: float = ELEMENTWISE.atol
