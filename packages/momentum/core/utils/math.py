"""Math utilities for common operations."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)

PHI = (1 + math.sqrt(5)) / 2
GOLDEN_MAX_ITERATIONS = 1000
GOLDEN_MIN_WIDTH = 1e-6


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def lerp(a: Number, b: Number, t: float) -> float:
    """Linear interpolation between a and b.

    Args:
        a: Start value
        b: End value
        t: Interpolation factor [0, 1]

    Returns:
        Interpolated value
    """
    return float(a) + (float(b) - float(a)) * t


def sign(x: float) -> float:
    """Return -1.0, 0.0 or 1.0 following the sign of x."""
    if x > 0:
        return 1.0
    if x < 0:
        return -1.0
    return 0.0


def golden_section_minimize(
    f: Callable[[float], float],
    lower: float,
    upper: float,
    min_width: float = GOLDEN_MIN_WIDTH,
    max_iterations: int = GOLDEN_MAX_ITERATIONS,
) -> float:
    """Find x in [lower, upper] minimizing a unimodal function f.

    Derivative-free golden-section search. The bracket is narrowed until its
    width drops below ``min_width``; after ``max_iterations`` the midpoint of
    the current bracket is returned even if it has not converged.

    Args:
        f: Objective function
        lower: Lower bracket bound
        upper: Upper bracket bound
        min_width: Bracket width at which the search stops
        max_iterations: Hard iteration cap

    Returns:
        Midpoint of the final bracket

    Example:
        >>> round(golden_section_minimize(lambda x: (x - 0.3) ** 2, 0.0, 1.0), 4)
        0.3
    """
    for _ in range(max_iterations):
        xa = lerp(lower, upper, 1 / (PHI + 1))
        xb = lerp(lower, xa, 1 + 1 / PHI)

        if f(xa) < f(xb):
            upper = xb
        else:
            lower = xa

        if upper - lower < min_width:
            break

    return (lower + upper) / 2
