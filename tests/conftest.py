"""Shared pytest fixtures for momentum tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
import logging

import pytest

from momentum.core.animation.easing.animation import EasingAnimation
from momentum.core.animation.easing.description import EasingLibrary, get_easing
from momentum.core.animation.frames import ManualFrameHost
from momentum.core.animation.models import AnimationRange
from momentum.core.animation.spring.animation import SpringAnimation
from momentum.core.animation.spring.description import SpringDescription

# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_root_logger() -> Iterator[None]:
    """Drop handlers installed by configure_logging during a test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


# ============================================================================
# Frame Host Fixtures
# ============================================================================


@pytest.fixture
def host() -> ManualFrameHost:
    """Manual frame host with a 10ms frame interval starting at t=0."""
    return ManualFrameHost(start_time=0.0, frame_interval=10.0)


# ============================================================================
# Spring Fixtures
# ============================================================================


@pytest.fixture
def critical_spring() -> SpringDescription:
    """Critically damped spring (mass=1, damping=20, stiffness=100)."""
    return SpringDescription.physical(mass=1, damping=20, stiffness=100)


@pytest.fixture
def under_damped_spring() -> SpringDescription:
    """Under-damped spring (mass=1, damping=10, stiffness=100)."""
    return SpringDescription.physical(mass=1, damping=10, stiffness=100)


@pytest.fixture
def over_damped_spring() -> SpringDescription:
    """Over-damped spring (mass=1, damping=30, stiffness=100)."""
    return SpringDescription.physical(mass=1, damping=30, stiffness=100)


@pytest.fixture
def spring_factory(
    under_damped_spring: SpringDescription,
) -> Callable[[AnimationRange], SpringAnimation]:
    """Factory building under-damped spring animations for a range."""

    def factory(animation_range: AnimationRange) -> SpringAnimation:
        return SpringAnimation(range=animation_range, description=under_damped_spring)

    return factory


# ============================================================================
# Easing Fixtures
# ============================================================================


@pytest.fixture
def five_frame_easing() -> EasingAnimation:
    """Quad easing 0 -> 100 that completes on its 5th sample at 10ms frames."""
    return EasingAnimation(
        range=AnimationRange(from_=0.0, to=100.0),
        description=get_easing(EasingLibrary.QUAD),
        duration=40.0,
    )
