"""Tests for serialisable animation specs."""

from __future__ import annotations

from pydantic import ValidationError
import pytest

from momentum.core.animation.easing.animation import EasingAnimation
from momentum.core.animation.easing.description import EasingLibrary, get_easing
from momentum.core.animation.gravity import GravityAnimation
from momentum.core.animation.models import AnimationRange
from momentum.core.animation.specs import (
    EasingSpec,
    GravitySpec,
    SpringSpec,
    build_animation,
    describe_spring,
    parse_spec,
)
from momentum.core.animation.spring.animation import SpringAnimation
from momentum.core.animation.spring.description import (
    PhysicalSpringParameters,
    SpringType,
    VisualSpringParameters,
)

RANGE = AnimationRange(from_=0, to=10, velocity=2)


class TestParseSpec:
    """Tests for parse_spec."""

    def test_spring_visual(self) -> None:
        """Visual spring parameters are recognised."""
        spec = parse_spec({"kind": "spring", "spring": {"duration": 0.4, "bounce": 0.2}})

        assert isinstance(spec, SpringSpec)
        assert isinstance(spec.spring, VisualSpringParameters)

    def test_spring_physical(self) -> None:
        """Physical spring parameters are recognised."""
        spec = parse_spec({"kind": "spring", "spring": {"damping": 20, "stiffness": 100}})

        assert isinstance(spec, SpringSpec)
        assert isinstance(spec.spring, PhysicalSpringParameters)
        assert spec.spring.mass == 1.0

    def test_easing(self) -> None:
        """Easing specs carry a library name and duration."""
        spec = parse_spec({"kind": "easing", "easing": "sine", "duration": 250})

        assert isinstance(spec, EasingSpec)
        assert spec.easing == EasingLibrary.SINE
        assert spec.duration == 250.0

    def test_gravity_defaults(self) -> None:
        """Gravity specs default their acceleration."""
        spec = parse_spec({"kind": "gravity"})
        assert isinstance(spec, GravitySpec)
        assert spec.acceleration > 0

    @pytest.mark.parametrize(
        "data",
        [
            {"kind": "bezier"},
            {"kind": "easing", "easing": "elastic"},
            {"kind": "easing", "duration": 0},
            {"kind": "gravity", "acceleration": 1, "extra": True},
        ],
    )
    def test_invalid(self, data: dict) -> None:
        """Unknown kinds and bad parameters fail validation."""
        with pytest.raises(ValidationError):
            parse_spec(data)


class TestBuildAnimation:
    """Tests for build_animation."""

    def test_spring(self) -> None:
        """Spring specs build spring animations over the range."""
        animation = build_animation(
            SpringSpec(spring=PhysicalSpringParameters(damping=20, stiffness=100)), RANGE
        )

        assert isinstance(animation, SpringAnimation)
        assert animation.range == RANGE
        assert animation.description.type == SpringType.CRITICALLY_DAMPED

    def test_easing(self) -> None:
        """Easing specs resolve the library easing."""
        animation = build_animation(EasingSpec(easing=EasingLibrary.CUBIC, duration=120), RANGE)

        assert isinstance(animation, EasingAnimation)
        assert animation.description is get_easing(EasingLibrary.CUBIC)
        assert animation.duration == 120.0

    def test_gravity(self) -> None:
        """Gravity specs keep their acceleration."""
        animation = build_animation(GravitySpec(acceleration=50), RANGE)

        assert isinstance(animation, GravityAnimation)
        assert animation.acceleration == 50.0


class TestDescribeSpring:
    """Tests for describe_spring."""

    def test_visual(self) -> None:
        """Visual parameters keep duration and bounce."""
        description = describe_spring(VisualSpringParameters(duration=0.8, bounce=0.25))
        assert description.duration == pytest.approx(0.8)
        assert description.bounce == pytest.approx(0.25)

    def test_physical(self) -> None:
        """Physical parameters keep mass, damping and stiffness."""
        description = describe_spring(PhysicalSpringParameters(mass=2, damping=5, stiffness=80))
        assert (description.mass, description.damping, description.stiffness) == (2, 5, 80)
