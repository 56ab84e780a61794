"""Serializable animation specs.

A spec names an animation kind and its parameters without a range. Specs
come from config files or the CLI and are turned into animations with
``build_animation`` once the range is known.

Example:
    >>> spec = EasingSpec(easing="cubic", duration=300)
    >>> anim = build_animation(spec, AnimationRange(from_=0, to=1))
    >>> anim.kind
    'easing'
"""

from __future__ import annotations

from typing import Annotated, Literal, assert_never

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from momentum.core.animation.easing.animation import EasingAnimation
from momentum.core.animation.easing.description import EasingLibrary, get_easing
from momentum.core.animation.gravity import GravityAnimation
from momentum.core.animation.models import AnimationRange
from momentum.core.animation.solvers import Animation
from momentum.core.animation.spring.animation import SpringAnimation
from momentum.core.animation.spring.description import (
    PhysicalSpringParameters,
    SpringDescription,
    VisualSpringParameters,
)

SpringParameters = VisualSpringParameters | PhysicalSpringParameters


def describe_spring(parameters: SpringParameters) -> SpringDescription:
    """Build a SpringDescription from either parameter set."""
    match parameters:
        case VisualSpringParameters():
            return SpringDescription.visual(duration=parameters.duration, bounce=parameters.bounce)
        case PhysicalSpringParameters():
            return SpringDescription.physical(
                mass=parameters.mass,
                damping=parameters.damping,
                stiffness=parameters.stiffness,
            )
        case _:
            assert_never(parameters)


class SpringSpec(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["spring"] = "spring"
    spring: SpringParameters = Field(
        default_factory=lambda: VisualSpringParameters(duration=0.5, bounce=0.0)
    )


class EasingSpec(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["easing"] = "easing"
    easing: EasingLibrary = EasingLibrary.QUAD
    duration: float = Field(default=300.0, gt=0.0, description="Duration in milliseconds")


class GravitySpec(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["gravity"] = "gravity"
    acceleration: float = Field(default=2000.0, ge=0.0, description="Units per second squared")


AnimationSpec = Annotated[SpringSpec | EasingSpec | GravitySpec, Field(discriminator="kind")]

_SPEC_ADAPTER: TypeAdapter[SpringSpec | EasingSpec | GravitySpec] = TypeAdapter(AnimationSpec)


def parse_spec(data: dict) -> SpringSpec | EasingSpec | GravitySpec:
    """Validate a raw mapping into an animation spec."""
    return _SPEC_ADAPTER.validate_python(data)


def build_animation(
    spec: SpringSpec | EasingSpec | GravitySpec, animation_range: AnimationRange
) -> Animation:
    """Create the animation a spec describes over a range."""
    match spec:
        case SpringSpec():
            return SpringAnimation(range=animation_range, description=describe_spring(spec.spring))
        case EasingSpec():
            return EasingAnimation(
                range=animation_range,
                description=get_easing(spec.easing),
                duration=spec.duration,
            )
        case GravitySpec():
            return GravityAnimation(range=animation_range, acceleration=spec.acceleration)
        case _:
            assert_never(spec)
