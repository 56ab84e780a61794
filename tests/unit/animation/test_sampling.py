"""Tests for offline trajectory sampling."""

from __future__ import annotations

import numpy as np
import pytest

from momentum.core.animation.easing.animation import EasingAnimation
from momentum.core.animation.models import AnimationRange
from momentum.core.animation.sampling import sample_animation
from momentum.core.animation.spring.animation import SpringAnimation
from momentum.core.animation.spring.description import SpringDescription


class TestSampleAnimation:
    """Tests for sample_animation."""

    def test_stops_at_first_completed_sample(self, five_frame_easing: EasingAnimation) -> None:
        """The trace ends with the completing sample."""
        trace = sample_animation(five_frame_easing, frame_rate=100)

        assert len(trace) == 5
        np.testing.assert_allclose(trace.times, [0.0, 10.0, 20.0, 30.0, 40.0])
        assert trace.completed
        assert trace.completed_at == pytest.approx(40.0)
        assert trace.positions[0] == 0.0
        assert trace.positions[-1] == 100.0

    def test_uncompleted_window(self) -> None:
        """An animation outlasting the window is sampled to its end."""
        spring = SpringDescription.visual(duration=0.5, bounce=1.0)
        animation = SpringAnimation(range=AnimationRange(from_=0, to=1), description=spring)

        trace = sample_animation(animation, frame_rate=50, max_duration=1000)

        assert not trace.completed
        assert trace.completed_at is None
        assert len(trace) == 51
        assert trace.times[-1] == pytest.approx(1000.0)

    def test_spring_trace(self, critical_spring: SpringDescription) -> None:
        """A critically damped spring approaches its target without overshoot."""
        animation = SpringAnimation(range=AnimationRange(from_=0, to=100), description=critical_spring)

        trace = sample_animation(animation)

        assert trace.completed
        assert np.all(np.diff(trace.positions) >= 0)
        assert trace.positions[-1] == 100.0
        assert trace.velocities[-1] == 0.0

    def test_to_dict(self, five_frame_easing: EasingAnimation) -> None:
        """to_dict exposes arrays and completion time."""
        data = sample_animation(five_frame_easing, frame_rate=100).to_dict()

        assert set(data) == {"times", "positions", "velocities", "completed_at"}
        assert isinstance(data["times"], np.ndarray)

    @pytest.mark.parametrize("kwargs", [{"frame_rate": 0}, {"max_duration": -1}])
    def test_rejects_bad_arguments(self, five_frame_easing: EasingAnimation, kwargs: dict) -> None:
        """frame_rate and max_duration must be positive."""
        with pytest.raises(ValueError):
            sample_animation(five_frame_easing, **kwargs)
