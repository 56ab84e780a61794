"""Offline trajectory sampling.

Samples an animation on a uniform frame grid without a frame host, e.g.
to plot position/velocity curves or export them as JSON.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from momentum.core.animation.frames import DEFAULT_FRAME_RATE
from momentum.core.animation.solvers import Animation, evaluate

DEFAULT_MAX_DURATION_MS = 10_000.0


@dataclass(frozen=True)
class AnimationTrace:
    """Sampled trajectory of an animation.

    Attributes:
        times: Elapsed times in milliseconds
        positions: Position at each time
        velocities: Velocity at each time (units per second)
        completed_at: Elapsed time of the first completed sample, None if the
            animation did not complete within the sampled window
    """

    times: np.ndarray
    positions: np.ndarray
    velocities: np.ndarray
    completed_at: float | None

    def __len__(self) -> int:
        return len(self.times)

    @property
    def completed(self) -> bool:
        return self.completed_at is not None

    def to_dict(self) -> dict[str, object]:
        return {
            "times": self.times,
            "positions": self.positions,
            "velocities": self.velocities,
            "completed_at": self.completed_at,
        }


def sample_animation(
    animation: Animation,
    frame_rate: float = DEFAULT_FRAME_RATE,
    max_duration: float = DEFAULT_MAX_DURATION_MS,
) -> AnimationTrace:
    """Sample an animation every frame until it completes.

    Args:
        animation: Animation to sample
        frame_rate: Frames per second
        max_duration: Upper bound of the sampled window in milliseconds

    Returns:
        AnimationTrace ending with the first completed sample (inclusive)

    Raises:
        ValueError: If frame_rate or max_duration is not positive.
    """
    if frame_rate <= 0:
        raise ValueError(f"frame_rate must be > 0, got {frame_rate}")
    if max_duration <= 0:
        raise ValueError(f"max_duration must be > 0, got {max_duration}")

    interval = 1000 / frame_rate
    grid = np.arange(0.0, max_duration + interval / 2, interval)

    positions = np.empty_like(grid)
    velocities = np.empty_like(grid)
    completed_at: float | None = None
    count = len(grid)

    for i, elapsed in enumerate(grid):
        value = evaluate(animation, float(elapsed))
        positions[i] = value.position
        velocities[i] = value.velocity
        if value.completed:
            completed_at = float(elapsed)
            count = i + 1
            break

    return AnimationTrace(
        times=grid[:count],
        positions=positions[:count],
        velocities=velocities[:count],
        completed_at=completed_at,
    )
