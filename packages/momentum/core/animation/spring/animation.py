"""Closed-form spring solver.

Solves the damped harmonic oscillator ``m*x'' + c*x' + k*x = 0`` with
``x(0) = from - to`` and ``x'(0) = velocity`` for each damping regime.
The reported position is ``to + x(t)``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, PrivateAttr

from momentum.core.animation.models import AnimationRange, AnimationValue
from momentum.core.animation.spring.description import SpringDescription, SpringType

logger = logging.getLogger(__name__)

# Offset and velocity below which a spring counts as settled
COMPLETION_EPSILON = 0.001


@dataclass(frozen=True, slots=True)
class SpringSolution:
    """Integration constants of one oscillator solution.

    For OVER_DAMPED ``r1``/``r2`` are the two real roots. For UNDER_DAMPED and
    CRITICALLY_DAMPED ``r1`` is the decay rate and ``omega`` the angular
    frequency (0 when critical).
    """

    type: SpringType
    c1: float
    c2: float
    r1: float
    r2: float = 0.0
    omega: float = 0.0

    def displacement(self, t: float) -> tuple[float, float]:
        """Return (x(t), x'(t)) at t seconds."""
        c1, c2, r1, r2, w = self.c1, self.c2, self.r1, self.r2, self.omega

        match self.type:
            case SpringType.OVER_DAMPED:
                e1 = math.exp(r1 * t)
                e2 = math.exp(r2 * t)
                return c1 * e1 + c2 * e2, c1 * r1 * e1 + c2 * r2 * e2
            case SpringType.UNDER_DAMPED:
                decay = math.exp(r1 * t)
                cos = math.cos(w * t)
                sin = math.sin(w * t)
                position = decay * (c1 * cos + c2 * sin)
                velocity = decay * (c2 * w * cos - c1 * w * sin) + r1 * decay * (c2 * sin + c1 * cos)
                return position, velocity
            case SpringType.CRITICALLY_DAMPED:
                decay = math.exp(r1 * t)
                return (c1 + c2 * t) * decay, r1 * (c1 + c2 * t) * decay + c2 * decay

    def envelope(self, t: float) -> tuple[float, float]:
        """Return non-increasing upper bounds of (|x|, |x'|) from t seconds on."""
        c1, c2, r1, r2, w = self.c1, self.c2, self.r1, self.r2, self.omega

        match self.type:
            case SpringType.OVER_DAMPED:
                e1 = math.exp(r1 * t)
                e2 = math.exp(r2 * t)
                return (
                    abs(c1) * e1 + abs(c2) * e2,
                    abs(c1 * r1) * e1 + abs(c2 * r2) * e2,
                )
            case SpringType.UNDER_DAMPED:
                amplitude = math.hypot(c1, c2) * math.exp(r1 * t)
                return amplitude, amplitude * math.hypot(w, r1)
            case SpringType.CRITICALLY_DAMPED:
                return (
                    _linear_decay_bound(abs(c1), abs(c2), r1, t),
                    _linear_decay_bound(abs(c2 + r1 * c1), abs(r1 * c2), r1, t),
                )


def _linear_decay_bound(a: float, b: float, r: float, t: float) -> float:
    """Non-increasing bound of ``(a + b*t) * exp(r*t)`` for a, b >= 0, r < 0."""
    if b > 0:
        # (a + b*t) * exp(r*t) peaks at t = 1/-r - a/b
        t = max(t, 1 / -r - a / b)
    return (a + b * t) * math.exp(r * t)


def solve_spring(
    description: SpringDescription, animation_range: AnimationRange
) -> SpringSolution:
    """Compute the oscillator constants for a spring over a range.

    Args:
        description: Spring parameters
        animation_range: Start, target and initial velocity

    Returns:
        SpringSolution for the spring's damping regime
    """
    mass = description.mass
    damping = description.damping
    stiffness = description.stiffness
    distance = animation_range.from_ - animation_range.to
    velocity = animation_range.velocity

    match description.type:
        case SpringType.OVER_DAMPED:
            sqrt_mck = math.sqrt(damping * damping - 4 * mass * stiffness)
            r1 = (-damping - sqrt_mck) / (2 * mass)
            r2 = (-damping + sqrt_mck) / (2 * mass)
            c2 = (velocity - r1 * distance) / (r2 - r1)
            return SpringSolution(
                type=SpringType.OVER_DAMPED, c1=distance - c2, c2=c2, r1=r1, r2=r2
            )
        case SpringType.UNDER_DAMPED:
            omega = math.sqrt(4 * mass * stiffness - damping * damping) / (2 * mass)
            r = -damping / (2 * mass)
            return SpringSolution(
                type=SpringType.UNDER_DAMPED,
                c1=distance,
                c2=(velocity - r * distance) / omega,
                r1=r,
                omega=omega,
            )
        case SpringType.CRITICALLY_DAMPED:
            r = -damping / (2 * mass)
            return SpringSolution(
                type=SpringType.CRITICALLY_DAMPED,
                c1=distance,
                c2=velocity - r * distance,
                r1=r,
            )


class SpringAnimation(BaseModel):
    """Spring-driven animation over a range.

    Example:
        >>> spring = SpringDescription.physical(mass=1, damping=20, stiffness=100)
        >>> anim = SpringAnimation(range=AnimationRange(from_=0, to=100), description=spring)
        >>> evaluate_spring(anim, 5000).position
        100.0
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["spring"] = "spring"
    range: AnimationRange
    description: SpringDescription

    _solution: SpringSolution = PrivateAttr()

    def model_post_init(self, __context: object) -> None:
        self._solution = solve_spring(self.description, self.range)
        logger.debug(
            f"Spring solved: type={self.description.type.value}, "
            f"zeta={self.description.damping_ratio:.4f}, range={self.range.from_}->{self.range.to}"
        )

    @property
    def solution(self) -> SpringSolution:
        return self._solution


def evaluate_spring(animation: SpringAnimation, elapsed_time: float) -> AnimationValue:
    """Sample a spring animation at ``elapsed_time`` milliseconds."""
    seconds = elapsed_time / 1000
    solution = animation.solution
    offset_bound, velocity_bound = solution.envelope(seconds)

    if offset_bound < COMPLETION_EPSILON and velocity_bound < COMPLETION_EPSILON:
        return AnimationValue(position=animation.range.to, velocity=0.0, completed=True)

    offset, velocity = solution.displacement(seconds)
    return AnimationValue(position=animation.range.to + offset, velocity=velocity, completed=False)
