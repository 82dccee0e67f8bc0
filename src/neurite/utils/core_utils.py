"""
Core Utilities for Neurite.

Scalar helpers shared by the neuron update pipeline and geometry code.
"""

from __future__ import annotations

import math

from neurite.typing import Coordinate


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp a scalar to ``[lower, upper]``.

    NaN passes through unchanged, matching IEEE-754 clamp semantics, so
    a non-finite firing output stays observable instead of being masked.

    Args:
        value: Value to clamp
        lower: Lower bound (inclusive)
        upper: Upper bound (inclusive)

    Returns:
        Clamped value

    Example:
        >>> clamp(-95.0, -90.0, -20.0)
        -90.0
    """
    if math.isnan(value):
        return value
    return max(lower, min(upper, value))


def euclidean_distance(a: Coordinate, b: Coordinate) -> float:
    """Euclidean distance between two integer 3D coordinates.

    Components are differenced as absolute values, so the result is
    symmetric in its arguments.
    """
    squared = sum(abs(p - q) ** 2 for p, q in zip(a, b))
    return math.sqrt(squared)


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Python's ``round`` uses banker's rounding; delays use the
    conventional rule instead.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


__all__ = ["clamp", "euclidean_distance", "round_half_away_from_zero"]
