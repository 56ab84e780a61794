"""Constant-acceleration ("gravity") animation."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from momentum.core.animation.models import AnimationRange, AnimationValue


class GravityAnimation(BaseModel):
    """Accelerate towards the target until it is reached.

    The acceleration points towards ``to``. Once the travelled distance
    reaches the range, the position is clamped to ``to`` while the velocity
    keeps extrapolating, so a follow-up spring can absorb it.

    Attributes:
        range: Start, target and initial velocity (units per second)
        acceleration: Acceleration magnitude in units per second squared
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["gravity"] = "gravity"
    range: AnimationRange
    acceleration: float = Field(..., ge=0.0, description="Units per second squared")


def evaluate_gravity(animation: GravityAnimation, elapsed_time: float) -> AnimationValue:
    """Sample a gravity animation at ``elapsed_time`` milliseconds."""
    seconds = elapsed_time / 1000
    from_, to, initial_velocity = (
        animation.range.from_,
        animation.range.to,
        animation.range.velocity,
    )

    direction = 1.0 if to > from_ else -1.0
    acceleration = animation.acceleration * direction
    delta = initial_velocity * seconds + 0.5 * acceleration * seconds * seconds
    velocity = initial_velocity + acceleration * seconds
    # Progress is measured along the direction of the target
    completed = delta * direction >= abs(to - from_)

    return AnimationValue(
        position=to if completed else from_ + delta,
        velocity=velocity,
        completed=completed,
    )
