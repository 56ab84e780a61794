"""Core animation data types.

- AnimationRange: boundary condition of a run (from, to, initial velocity)
- AnimationFrame: timing snapshot of one sampled tick
- AnimationValue: solver output at an elapsed time
- AnimationProgress: frame + value + originating animation, passed to observers

Timestamps and elapsed times are milliseconds. Velocities are units per second.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from momentum.core.animation.solvers import Animation


class AnimationRange(BaseModel):
    """Start position, target position and initial velocity of an animation.

    ``from`` is a Python keyword, so the field is named ``from_`` and accepts
    ``from`` as an alias when validating mappings.

    Example:
        >>> r = AnimationRange(from_=0.0, to=100.0)
        >>> r.velocity
        0.0
        >>> AnimationRange.model_validate({"from": 1, "to": 2}).from_
        1.0
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    from_: float = Field(..., alias="from", description="Start position")
    to: float = Field(..., description="Target position")
    velocity: float = Field(default=0.0, description="Initial velocity in units per second")

    @field_validator("velocity", mode="before")
    @classmethod
    def _default_velocity(cls, value: object) -> object:
        """Treat a missing initial velocity as zero."""
        return 0.0 if value is None else value

    @property
    def distance(self) -> float:
        """Signed distance from start to target."""
        return self.to - self.from_


@dataclass(frozen=True, slots=True)
class AnimationFrame:
    """Timing of a single sampled tick."""

    start_time: float
    time: float
    elapsed_time: float
    frame: int

    @classmethod
    def at(cls, start_time: float, time: float, frame: int = 0) -> AnimationFrame:
        """Build a frame, clamping elapsed time at zero."""
        return cls(
            start_time=start_time,
            time=time,
            elapsed_time=max(0.0, time - start_time),
            frame=frame,
        )


@dataclass(frozen=True, slots=True)
class AnimationValue:
    """Position and velocity of a solver at an elapsed time."""

    position: float
    velocity: float
    completed: bool


@dataclass(frozen=True, slots=True)
class AnimationProgress:
    """Full snapshot of a run at one sampled instant."""

    animation: Animation
    start_time: float
    time: float
    elapsed_time: float
    frame: int
    position: float
    velocity: float
    completed: bool

    @property
    def first(self) -> bool:
        """Whether this is the first sample of the run."""
        return self.frame == 0

    @property
    def last(self) -> bool:
        """Whether this is the final sample of a completed run."""
        return self.completed

    @classmethod
    def of(
        cls, animation: Animation, frame: AnimationFrame, value: AnimationValue
    ) -> AnimationProgress:
        return cls(
            animation=animation,
            start_time=frame.start_time,
            time=frame.time,
            elapsed_time=frame.elapsed_time,
            frame=frame.frame,
            position=value.position,
            velocity=value.velocity,
            completed=value.completed,
        )
