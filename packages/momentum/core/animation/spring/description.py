"""Spring descriptions in physical and visual terms.

A spring can be described physically by mass (m), damping (c) and
stiffness (k), or visually by a duration and a bounce. Both views are kept
on every SpringDescription and convert into each other:

    zeta     = c / (2 * sqrt(k * m))
    duration = sqrt(4 * pi^2 * m / k)
    bounce   = 1 - zeta        if zeta < 1
               1 / zeta - 1    otherwise
"""

from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Tolerance for classifying a spring as critically damped
CRITICAL_TOLERANCE = 1e-9


class SpringType(str, Enum):
    """Damping regime of a spring."""

    UNDER_DAMPED = "under_damped"
    CRITICALLY_DAMPED = "critically_damped"
    OVER_DAMPED = "over_damped"


class PhysicalSpringParameters(BaseModel):
    """Physical spring parameters.

    Attributes:
        mass: The greater the mass, the larger the amplitude of oscillation
            and the longer it takes to settle.
        damping: Damping coefficient. Larger values mean fewer oscillations.
        stiffness: A stiff spring applies more force to the attached object.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    mass: float = Field(default=1.0, gt=0.0)
    damping: float = Field(..., ge=0.0)
    stiffness: float = Field(..., gt=0.0)


class VisualSpringParameters(BaseModel):
    """Visual spring parameters.

    Attributes:
        duration: Visual duration of the spring in seconds.
        bounce: How bouncy the spring is. ``1`` oscillates indefinitely,
            ``0`` is critically damped, negative values are over-damped.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    duration: float = Field(..., gt=0.0)
    bounce: float = Field(default=0.0, gt=-1.0, le=1.0)


class SpringDescription(BaseModel):
    """Spring description holding both the physical and the visual view.

    Build instances with :meth:`physical` or :meth:`visual`.

    Example:
        >>> spring = SpringDescription.physical(mass=1, damping=20, stiffness=100)
        >>> spring.type
        <SpringType.CRITICALLY_DAMPED: 'critically_damped'>
        >>> round(SpringDescription.visual(duration=0.5, bounce=0.3).bounce, 6)
        0.3
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    damping_ratio: float = Field(..., ge=0.0, description="Damping ratio (zeta)")
    physical_parameters: PhysicalSpringParameters
    visual_parameters: VisualSpringParameters

    @classmethod
    def physical(
        cls, *, mass: float = 1.0, damping: float, stiffness: float
    ) -> SpringDescription:
        """Describe a spring by mass, damping and stiffness."""
        params = PhysicalSpringParameters(mass=mass, damping=damping, stiffness=stiffness)
        damping_ratio = params.damping / (2 * math.sqrt(params.stiffness * params.mass))
        bounce = 1 - damping_ratio if damping_ratio < 1 else 1 / damping_ratio - 1

        return cls(
            damping_ratio=damping_ratio,
            physical_parameters=params,
            visual_parameters=VisualSpringParameters(
                duration=math.sqrt(4 * math.pi**2 * params.mass / params.stiffness),
                bounce=bounce,
            ),
        )

    @classmethod
    def visual(cls, *, duration: float, bounce: float = 0.0) -> SpringDescription:
        """Describe a spring by its visual duration (seconds) and bounce."""
        params = VisualSpringParameters(duration=duration, bounce=bounce)
        damping_ratio = 1 - params.bounce if params.bounce > 0 else 1 / (params.bounce + 1)
        mass = 1.0
        stiffness = 4 * math.pi**2 * mass / params.duration**2
        damping = damping_ratio * 2 * math.sqrt(mass * stiffness)

        return cls(
            damping_ratio=damping_ratio,
            physical_parameters=PhysicalSpringParameters(
                mass=mass, damping=damping, stiffness=stiffness
            ),
            visual_parameters=params,
        )

    @property
    def type(self) -> SpringType:
        """Spring type derived from the damping ratio."""
        if math.isclose(self.damping_ratio, 1.0, rel_tol=0.0, abs_tol=CRITICAL_TOLERANCE):
            return SpringType.CRITICALLY_DAMPED
        if self.damping_ratio < 1:
            return SpringType.UNDER_DAMPED
        return SpringType.OVER_DAMPED

    @property
    def mass(self) -> float:
        return self.physical_parameters.mass

    @property
    def damping(self) -> float:
        return self.physical_parameters.damping

    @property
    def stiffness(self) -> float:
        return self.physical_parameters.stiffness

    @property
    def duration(self) -> float:
        return self.visual_parameters.duration

    @property
    def bounce(self) -> float:
        return self.visual_parameters.bounce
