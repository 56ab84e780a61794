"""Tests for the constant-acceleration solver."""

from __future__ import annotations

from pydantic import ValidationError
import pytest

from momentum.core.animation.gravity import GravityAnimation
from momentum.core.animation.models import AnimationRange
from momentum.core.animation.solvers import evaluate


def _gravity(from_: float, to: float, velocity: float = 0.0, acceleration: float = 1000.0):
    return GravityAnimation(
        range=AnimationRange(from_=from_, to=to, velocity=velocity), acceleration=acceleration
    )


class TestGravityKinematics:
    """Tests for position and velocity before completion."""

    def test_accelerates_towards_target(self) -> None:
        """dx = v0*t + a*t^2/2 with the acceleration pointing at `to`."""
        value = evaluate(_gravity(0.0, 1000.0, velocity=100.0), 500.0)

        assert value.position == pytest.approx(100 * 0.5 + 0.5 * 1000 * 0.25)
        assert value.velocity == pytest.approx(100 + 1000 * 0.5)
        assert not value.completed

    def test_negative_direction(self) -> None:
        """Acceleration follows the sign of to - from."""
        value = evaluate(_gravity(0.0, -1000.0), 200.0)

        assert value.position == pytest.approx(-20.0)
        assert value.velocity == pytest.approx(-200.0)

    def test_initial_sample(self) -> None:
        """At t=0 the solver reports the range start."""
        value = evaluate(_gravity(5.0, 50.0, velocity=-30.0), 0.0)

        assert value.position == 5.0
        assert value.velocity == -30.0


class TestGravityCompletion:
    """Tests for completion and the overshoot clamp."""

    def test_clamps_to_target(self) -> None:
        """Position is exactly `to` once the distance is covered."""
        value = evaluate(_gravity(0.0, 100.0), 1000.0)

        assert value.completed
        assert value.position == 100.0

    def test_velocity_keeps_extrapolating(self) -> None:
        """Velocity is not zeroed on completion."""
        value = evaluate(_gravity(0.0, 100.0), 1000.0)
        assert value.velocity == pytest.approx(1000.0)

    def test_completion_time(self) -> None:
        """From rest the target is reached at t = sqrt(2d/a)."""
        animation = _gravity(0.0, 50.0, acceleration=100.0)  # t = 1s

        assert not evaluate(animation, 990.0).completed
        assert evaluate(animation, 1000.0).completed

    def test_moving_away_does_not_complete_on_wrong_side(self) -> None:
        """Travelling away from the target never counts as arrival."""
        animation = _gravity(0.0, 10.0, velocity=-500.0, acceleration=100.0)

        # 2s in: dx = -1000 + 200 = -800, far beyond |to - from| on the wrong side
        value = evaluate(animation, 2000.0)
        assert not value.completed
        assert value.position == pytest.approx(-800.0)

    def test_turns_back_and_completes(self) -> None:
        """Velocity away from the target is eventually reversed."""
        animation = _gravity(0.0, 10.0, velocity=-500.0, acceleration=100.0)
        assert evaluate(animation, 11_000.0).completed

    @pytest.mark.parametrize("velocity", [0.0, 40.0, -40.0])
    def test_completion_is_monotonic(self, velocity: float) -> None:
        """Once completed, every later sample is completed."""
        animation = _gravity(-3.0, 7.0, velocity=velocity, acceleration=50.0)
        flags = [evaluate(animation, float(t)).completed for t in range(0, 5000, 10)]

        first = flags.index(True)
        assert all(flags[first:])

    def test_zero_distance_completes_immediately(self) -> None:
        """A range without distance is complete at t=0."""
        value = evaluate(_gravity(4.0, 4.0), 0.0)
        assert value.completed
        assert value.position == 4.0

    def test_rejects_negative_acceleration(self) -> None:
        """Acceleration is a magnitude."""
        with pytest.raises(ValidationError):
            _gravity(0.0, 1.0, acceleration=-1.0)
