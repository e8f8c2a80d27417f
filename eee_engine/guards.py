"""
Guarded division.

Every division in the formula modules goes through safe_divide() so that
zero and near-zero denominators are treated the same way everywhere,
instead of producing inf/nan or a wildly large value.
"""

from typing import Tuple

# Denominators smaller than this in magnitude are treated as zero
EPSILON = 1e-12


def safe_divide(num: float, den: float) -> Tuple[bool, float]:
    """
    Divide num by den unless |den| < EPSILON.

    Returns:
        (True, num / den) on success, (False, 0.0) when the denominator
        is too small. The 0.0 is a fixed placeholder, never a result.
    """
    if abs(den) < EPSILON:
        return False, 0.0
    return True, num / den
