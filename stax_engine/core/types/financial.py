"""
Financial numeric helpers for valuation calculations.

Values are plain floats. The engine does not round intermediate results;
rounding belongs to display formatting so that aggregates stay consistent
with the per-holding figures they are built from.
"""

ZERO = 0.0
ONE = 1.0
HUNDRED = 100.0

# Default tolerance for float comparisons in reconciliation checks
FLOAT_TOLERANCE = 1e-9


def percent_of(part: float, whole: float) -> float:
    """Return ``part`` as a percentage of ``whole``, or 0 when ``whole`` is not positive.

    Examples:
        >>> percent_of(25.0, 200.0)
        12.5
        >>> percent_of(10.0, 0.0)
        0.0
    """
    if whole <= ZERO:
        return ZERO
    return part / whole * HUNDRED
