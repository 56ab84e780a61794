"""Easing descriptions and the built-in easing library.

An EasingDescription describes the ease-in half of a symmetric ease-in-out
shape on the normalized domain [0, 1]: ``position(0) == 0``,
``position(1) == 1`` and ``velocity`` is its derivative. The full curve is
assembled by EasingCurve, which joins the ease-in half and its mirrored
ease-out half at ``peak_velocity_time``.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from enum import Enum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

EasingFunction = Callable[[float], float]

# Step for the numeric acceleration fallback
_DIFF_STEP = 1e-5


class EasingNotFoundError(KeyError):
    """Raised when an easing is not found in the library."""

    pass


class EasingDescription(BaseModel):
    """Immutable pair of pure functions describing an ease-in shape.

    Attributes:
        position: Normalized position of the ease-in half, f(0)=0 and f(1)=1.
        velocity: Derivative of ``position``.
        acceleration: Derivative of ``velocity``. Approximated by finite
            differences when omitted.
        peak_velocity_time: Normalized time at which the ease-in half hands
            over to the ease-out half (where velocity peaks).

    Example:
        >>> quad = EasingDescription.curve(lambda t: t * t, lambda t: 2 * t)
        >>> quad.acceleration_at(0.5)  # doctest: +ELLIPSIS
        2.0...
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    position: EasingFunction
    velocity: EasingFunction
    acceleration: EasingFunction | None = None
    peak_velocity_time: float = Field(default=0.5, gt=0.0, lt=1.0)

    @classmethod
    def curve(
        cls,
        position: EasingFunction,
        velocity: EasingFunction,
        acceleration: EasingFunction | None = None,
        peak_velocity_time: float = 0.5,
    ) -> EasingDescription:
        """Describe an easing by its position and velocity functions."""
        return cls(
            position=position,
            velocity=velocity,
            acceleration=acceleration,
            peak_velocity_time=peak_velocity_time,
        )

    @model_validator(mode="after")
    def _validate_endpoints(self) -> Self:
        """The ease-in half must run from 0 to 1."""
        start = self.position(0.0)
        end = self.position(1.0)
        if not (math.isclose(start, 0.0, abs_tol=1e-9) and math.isclose(end, 1.0, abs_tol=1e-9)):
            raise ValueError(f"Easing position must map 0->0 and 1->1, got {start} and {end}")
        return self

    def position_at(self, t: float) -> float:
        return self.position(t)

    def velocity_at(self, t: float) -> float:
        return self.velocity(t)

    def acceleration_at(self, t: float) -> float:
        if self.acceleration is not None:
            return self.acceleration(t)
        if t < _DIFF_STEP:
            return (self.velocity(t + _DIFF_STEP) - self.velocity(t)) / _DIFF_STEP
        return (self.velocity(t + _DIFF_STEP) - self.velocity(t - _DIFF_STEP)) / (2 * _DIFF_STEP)


class EasingLibrary(str, Enum):
    """Identifiers for built-in easings."""

    QUAD = "quad"
    CUBIC = "cubic"
    SINE = "sine"


_HALF_PI = math.pi / 2

_BUILTIN_EASINGS: dict[EasingLibrary, EasingDescription] = {
    EasingLibrary.QUAD: EasingDescription.curve(
        position=lambda t: t * t,
        velocity=lambda t: 2 * t,
        acceleration=lambda t: 2.0,
    ),
    EasingLibrary.CUBIC: EasingDescription.curve(
        position=lambda t: t**3,
        velocity=lambda t: 3 * t * t,
        acceleration=lambda t: 6 * t,
    ),
    EasingLibrary.SINE: EasingDescription.curve(
        position=lambda t: 1 - math.cos(_HALF_PI * t),
        velocity=lambda t: _HALF_PI * math.sin(_HALF_PI * t),
        acceleration=lambda t: _HALF_PI * _HALF_PI * math.cos(_HALF_PI * t),
    ),
}


def get_easing(name: EasingLibrary | str) -> EasingDescription:
    """Look up a built-in easing by name.

    Raises:
        EasingNotFoundError: If no easing with that name exists.
    """
    try:
        return _BUILTIN_EASINGS[EasingLibrary(name)]
    except ValueError as exc:
        raise EasingNotFoundError(f"Easing '{name}' is not registered") from exc


def list_easings() -> list[str]:
    """Return the names of all built-in easings."""
    return [easing.value for easing in EasingLibrary]
