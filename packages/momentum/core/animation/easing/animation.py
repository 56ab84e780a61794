"""Easing-curve animation with velocity hand-over."""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from momentum.core.animation.easing.curve import EasingCurve, EasingSolution, solve_easing
from momentum.core.animation.easing.description import EasingDescription
from momentum.core.animation.models import AnimationRange, AnimationValue
from momentum.core.utils.math import clamp

logger = logging.getLogger(__name__)


class EasingAnimation(BaseModel):
    """Animation following an ease-in-out curve for a fixed duration.

    A non-zero initial velocity is carried into the curve: the solver picks
    the part of the curve whose slope matches it, so a running animation can
    be retargeted without a velocity jump.

    Attributes:
        range: Start, target and initial velocity (units per second)
        description: Ease-in half of the curve
        duration: Duration in milliseconds
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["easing"] = "easing"
    range: AnimationRange
    description: EasingDescription
    duration: float = Field(..., gt=0.0, description="Duration in milliseconds")

    _curve: EasingCurve = PrivateAttr()
    _solution: EasingSolution = PrivateAttr()

    def model_post_init(self, __context: object) -> None:
        self._curve = EasingCurve.from_description(self.description)
        # Velocity in units per duration, the curve's time unit
        normalized_velocity = self.range.velocity * self.duration / 1000
        self._solution = solve_easing(self._curve, self.range.distance, normalized_velocity)

    @property
    def curve(self) -> EasingCurve:
        return self._curve

    @property
    def solution(self) -> EasingSolution:
        return self._solution


def evaluate_easing(animation: EasingAnimation, elapsed_time: float) -> AnimationValue:
    """Sample an easing animation at ``elapsed_time`` milliseconds."""
    to = animation.range.to

    if elapsed_time >= animation.duration:
        return AnimationValue(
            position=to,
            velocity=_velocity_at(animation, 1.0),
            completed=True,
        )

    time_scale = animation.solution.time_scale
    progress = clamp(elapsed_time / animation.duration, 0.0, 1.0)
    curve_time = time_scale + progress * (1 - time_scale)

    return AnimationValue(
        position=to - animation.solution.value_scale * animation.curve.remaining(curve_time),
        velocity=_velocity_at(animation, curve_time),
        completed=False,
    )


def _velocity_at(animation: EasingAnimation, curve_time: float) -> float:
    """Velocity in units per second at a curve time."""
    span = 1 - animation.solution.time_scale
    return (
        animation.solution.value_scale
        * animation.curve.velocity(curve_time)
        * span
        / (animation.duration / 1000)
    )
