"""Motion solvers as a closed set of animation kinds.

Every animation is one of SpringAnimation, EasingAnimation or
GravityAnimation, discriminated by ``kind``. ``evaluate`` dispatches on the
kind and returns the AnimationValue at an elapsed time.
"""

from __future__ import annotations

from typing import assert_never

from momentum.core.animation.easing.animation import EasingAnimation, evaluate_easing
from momentum.core.animation.gravity import GravityAnimation, evaluate_gravity
from momentum.core.animation.models import AnimationFrame, AnimationValue
from momentum.core.animation.spring.animation import SpringAnimation, evaluate_spring

Animation = SpringAnimation | EasingAnimation | GravityAnimation


def evaluate(animation: Animation, elapsed_time: float) -> AnimationValue:
    """Return position, velocity and completion at ``elapsed_time`` ms.

    Args:
        animation: Any supported animation
        elapsed_time: Milliseconds since the start of the run (negative is
            treated as zero)

    Returns:
        AnimationValue at that time
    """
    elapsed_time = max(0.0, elapsed_time)

    match animation:
        case SpringAnimation():
            return evaluate_spring(animation, elapsed_time)
        case EasingAnimation():
            return evaluate_easing(animation, elapsed_time)
        case GravityAnimation():
            return evaluate_gravity(animation, elapsed_time)
        case _:
            assert_never(animation)


def evaluate_frame(animation: Animation, frame: AnimationFrame) -> AnimationValue:
    """Evaluate an animation at a sampled frame."""
    return evaluate(animation, frame.elapsed_time)
