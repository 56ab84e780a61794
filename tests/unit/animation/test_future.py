"""Tests for futures with explicit resolvers and stop reasons."""

from __future__ import annotations

from concurrent.futures import Future, InvalidStateError

import pytest

from momentum.core.animation.future import MissingResolversError, create_future_with_resolvers
from momentum.core.animation.stop_reason import (
    COMPLETED,
    STOPPED,
    Completed,
    Stopped,
    StopReasonType,
    Succeeded,
)


class TestCreateFutureWithResolvers:
    """Tests for create_future_with_resolvers."""

    def test_resolve(self) -> None:
        """resolve settles the future with a result."""
        resolvers = create_future_with_resolvers()
        resolvers.resolve(42)

        assert isinstance(resolvers.future, Future)
        assert resolvers.future.result(timeout=0) == 42

    def test_reject(self) -> None:
        """reject settles the future with an exception."""
        resolvers = create_future_with_resolvers()
        resolvers.reject(RuntimeError("boom"))

        with pytest.raises(RuntimeError, match="boom"):
            resolvers.future.result(timeout=0)

    def test_resolves_only_once(self) -> None:
        """A settled future cannot be resolved again."""
        resolvers = create_future_with_resolvers()
        resolvers.resolve(1)

        with pytest.raises(InvalidStateError):
            resolvers.resolve(2)

    def test_callbacks_run_on_resolve(self) -> None:
        """Done callbacks observe the result."""
        seen = []
        resolvers = create_future_with_resolvers()
        resolvers.future.add_done_callback(lambda f: seen.append(f.result()))

        resolvers.resolve("done")

        assert seen == ["done"]

    def test_missing_resolvers_fail_fast(self) -> None:
        """A factory producing futures without resolvers is rejected."""

        class Opaque:
            pass

        with pytest.raises(MissingResolversError, match="Opaque"):
            create_future_with_resolvers(Opaque)

    def test_custom_factory(self) -> None:
        """Any future type with set_result/set_exception is accepted."""

        class RecordingFuture(Future):
            pass

        resolvers = create_future_with_resolvers(RecordingFuture)
        assert isinstance(resolvers.future, RecordingFuture)


class TestStopReason:
    """Tests for AnimationStopReason variants."""

    def test_types(self) -> None:
        """Each variant carries its discriminator."""
        assert STOPPED.type == StopReasonType.STOPPED
        assert COMPLETED.type == StopReasonType.COMPLETED
        assert Succeeded(pending=Future()).type == StopReasonType.SUCCEEDED

    def test_value_equality(self) -> None:
        """Stop reasons compare by value."""
        assert Stopped() == STOPPED
        assert Completed() == COMPLETED
        assert Stopped() != Completed()
