"""Composite easing curve and its scale solver.

An EasingCurve reparameterizes an ease-in half ``f`` joined at ``c``::

    E(t) = c * f(t / c)                          0 <= t <= c
    E(t) = (c - 1) * f((1 - t) / (1 - c)) + 1    c < t
    E(t) = a0 / 2 * t^2                          t < 0, a0 != 0
    E(t) = c * f(-t / c)                         t < 0, a0 == 0

where ``a0`` is the curvature at t=0. The extension below zero lets the
curve start with a velocity pointing away from the target (reversing), or
from beyond the point where E(t) == 1 (overshoot).

An animation plays the curve segment [t*, 1] over one normalized duration,
scaled in value by ``k = sign(s) * s^2``. Starting at curve time t with
normalized velocity v requires ``k = v / ((1 - t) * E'(t))`` and covers the
distance ``k * (1 - E(t))``. ``solve_easing`` finds the t* for which that
distance matches the required one.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from momentum.core.animation.easing.description import EasingDescription
from momentum.core.utils.math import golden_section_minimize, sign

logger = logging.getLogger(__name__)

# Lower bound of the overshoot search bracket
OVERSHOOT_LOWER_BOUND = -100.0

# Denominators below this are treated as zero
_TINY = 1e-12


@dataclass(frozen=True)
class EasingCurve:
    """Composite curve built from an EasingDescription.

    Attributes:
        description: The ease-in half the curve is built from
        max_velocity: Velocity at the peak
        max_velocity_time: Curve time of the peak (the join point c)
        min_velocity_time: Curve time in [-1, 0] where E(t) == 1
        min_braking_ratio: Smallest distance per unit of normalized velocity
            covered when starting anywhere on the ease-out half
    """

    description: EasingDescription
    max_velocity: float
    max_velocity_time: float
    min_velocity_time: float = 0.0
    min_braking_ratio: float = 0.0

    @classmethod
    def from_description(cls, description: EasingDescription) -> EasingCurve:
        c = description.peak_velocity_time
        # Partially built curve, enough to evaluate E(t) for the constants below
        shape = cls(description, max_velocity=description.velocity_at(1.0), max_velocity_time=c)

        min_velocity_time = golden_section_minimize(
            lambda t: abs(1 - shape.position(t)), -1.0, 0.0
        )
        braking_time = golden_section_minimize(shape.distance_ratio, c, 1.0)

        return cls(
            description=description,
            max_velocity=shape.max_velocity,
            max_velocity_time=c,
            min_velocity_time=min_velocity_time,
            min_braking_ratio=shape.distance_ratio(braking_time),
        )

    @property
    def initial_acceleration(self) -> float:
        """Curvature of E at t=0."""
        return self.description.acceleration_at(0.0) / self.max_velocity_time

    def position(self, t: float) -> float:
        """E(t)."""
        return 1 - self.remaining(t)

    def remaining(self, t: float) -> float:
        """1 - E(t), computed without cancellation on the ease-out half."""
        f = self.description.position_at
        c = self.max_velocity_time

        if c < t:
            return (1 - c) * f((1 - t) / (1 - c))
        if t < 0:
            a0 = self.initial_acceleration
            if a0 == 0:
                return 1 - c * f(-t / c)
            return 1 - a0 / 2 * t * t
        return 1 - c * f(t / c)

    def velocity(self, t: float) -> float:
        """E'(t)."""
        fv = self.description.velocity_at
        c = self.max_velocity_time

        if c < t:
            return fv((1 - t) / (1 - c))
        if t < 0:
            a0 = self.initial_acceleration
            if a0 == 0:
                return -fv(-t / c)
            return a0 * t
        return fv(t / c)

    def value_scale(self, t: float, velocity: float) -> float:
        """Value scale k that makes the segment [t, 1] start with ``velocity``.

        Returns inf when the start velocity of the segment is (near) zero.
        """
        denominator = (1 - t) * self.velocity(t)
        if abs(denominator) < _TINY:
            return math.inf
        return velocity / denominator

    def distance_ratio(self, t: float) -> float:
        """Distance covered per unit of start velocity when starting at t."""
        return self.value_scale(t, 1.0) * self.remaining(t)


@dataclass(frozen=True, slots=True)
class EasingSolution:
    """Where to start on the curve and how to scale it.

    The curve is scaled by ``(|curve_scale|, sign(curve_scale) * curve_scale^2)``.
    """

    time_scale: float
    curve_scale: float

    @property
    def value_scale(self) -> float:
        return sign(self.curve_scale) * self.curve_scale**2


def _resting(distance: float) -> EasingSolution:
    return EasingSolution(time_scale=0.0, curve_scale=sign(distance) * math.sqrt(abs(distance)))


def solve_easing(curve: EasingCurve, distance: float, velocity: float) -> EasingSolution:
    """Find the start time and scale of the curve for a distance and velocity.

    Args:
        curve: The composite easing curve
        distance: Signed distance to travel (to - from)
        velocity: Initial velocity in units per normalized duration

    Returns:
        EasingSolution with time_scale and curve_scale
    """
    if velocity == 0 or curve.min_velocity_time == 0:
        return _resting(distance)

    if distance < 0:
        mirrored = solve_easing(curve, -distance, -velocity)
        return EasingSolution(time_scale=mirrored.time_scale, curve_scale=-mirrored.curve_scale)

    # distance >= 0 and velocity != 0 from here on

    def objective(t: float) -> float:
        travelled = curve.value_scale(t, velocity) * curve.remaining(t)
        if not math.isfinite(travelled):
            return math.inf
        return abs(travelled - distance)

    if velocity < 0:
        # Turning back in the opposite direction
        lower, upper = curve.min_velocity_time, 0.0
        branch = "reversing"
    elif distance < velocity * curve.min_braking_ratio:
        # Even the gentlest braking covers more than the distance
        lower, upper = OVERSHOOT_LOWER_BOUND, curve.min_velocity_time
        branch = "overshoot"
    elif velocity * curve.distance_ratio(curve.max_velocity_time) < distance:
        # Starting at the peak falls short, so accelerate again first
        lower, upper = 0.0, curve.max_velocity_time
        branch = "reaccelerate"
    else:
        lower, upper = curve.max_velocity_time, 1.0
        branch = "decelerate"

    t = golden_section_minimize(objective, lower, upper)
    k = curve.value_scale(t, velocity)

    if not math.isfinite(k):
        logger.warning(
            f"Easing solve ({branch}) diverged for distance={distance}, velocity={velocity}; "
            "falling back to a resting start"
        )
        return _resting(distance)

    solution = EasingSolution(time_scale=t, curve_scale=sign(k) * math.sqrt(abs(k)))
    logger.debug(
        f"Easing solve ({branch}): time_scale={solution.time_scale:.6f}, "
        f"curve_scale={solution.curve_scale:.6f}"
    )
    return solution
