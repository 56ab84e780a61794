"""Succession controller: hand a running animation over to a new one.

The controller owns at most one FrameScheduler. ``animate`` stops the active
run with a Succeeded reason carrying the new run's future, asks the selector
for the next animation (passing the last progress of the outgoing run so it
can continue from the same position and velocity) and starts it.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import dataclass, replace

from momentum.core.animation.frames import FrameHost
from momentum.core.animation.future import create_future_with_resolvers
from momentum.core.animation.models import AnimationProgress, AnimationRange
from momentum.core.animation.scheduler import AnimationOptions, FrameScheduler, SchedulerState
from momentum.core.animation.solvers import Animation
from momentum.core.animation.stop_reason import STOPPED, AnimationStopReason, Succeeded
from momentum.core.utils.logging import get_logger


@dataclass(frozen=True)
class AnimateParameters:
    """Animation to run next and its options."""

    animation: Animation
    options: AnimationOptions | None = None


@dataclass(frozen=True)
class AnimateResult:
    """Outcome of one controller run.

    Attributes:
        animation: The animation of the run
        completed: Whether the run completed on its own
        stop_reason: Why the run ended
        stop_progress: Progress of the last sampled frame, None if the run
            was stopped before its first frame
    """

    animation: Animation
    completed: bool
    stop_reason: AnimationStopReason
    stop_progress: AnimationProgress | None


Selector = Callable[[AnimationProgress | None], AnimateParameters]


class AnimationController:
    """Run animations one at a time with seamless hand-over.

    Example:
        controller = AnimationController(host)
        controller.animate(
            lambda progress: AnimateParameters(
                animation=SpringAnimation(
                    range=AnimationRange(
                        from_=progress.position if progress else 0.0,
                        to=target,
                        velocity=progress.velocity if progress else 0.0,
                    ),
                    description=spring,
                ),
                options=AnimationOptions(progress=progress, on_frame=draw),
            )
        )
    """

    def __init__(self, host: FrameHost, name: str | None = None):
        self._host = host
        self._progress: AnimationProgress | None = None
        self._scheduler: FrameScheduler | None = None
        self._pending: Future[AnimateResult] | None = None
        self._log = get_logger(__name__, controller=name) if name else get_logger(__name__)

    @property
    def animating(self) -> bool:
        return self._scheduler is not None and self._scheduler.animating

    @property
    def progress(self) -> AnimationProgress | None:
        """Progress a successor would continue from, None when at rest."""
        return self._progress

    def stop(self, reason: AnimationStopReason = STOPPED) -> None:
        """Stop the active run. Does nothing when idle."""
        scheduler = self._scheduler
        if scheduler is None:
            return

        scheduler.stop(reason)
        self._settle_unsampled(scheduler, reason)

    def animate(self, selector: AnimateParameters | Selector) -> Future[AnimateResult]:
        """Replace the active run with a new animation.

        Args:
            selector: The next animation, or a callable receiving the progress
                of the active run (None if there is none) and returning it.

        Returns:
            Future resolving with the AnimateResult of the new run once it stops
        """
        resolvers = create_future_with_resolvers()

        self.stop(Succeeded(pending=resolvers.future))

        try:
            parameters = selector(self._progress) if callable(selector) else selector
        except Exception as exc:
            resolvers.reject(exc)
            raise
        animation = parameters.animation
        options = parameters.options or AnimationOptions()

        def on_stop(progress: AnimationProgress, reason: AnimationStopReason) -> None:
            # Settled before on_stop, which may start a successor
            self._progress = None if progress.completed else progress
            if options.on_stop:
                options.on_stop(progress, reason)

            resolvers.resolve(
                AnimateResult(
                    animation=animation,
                    completed=progress.completed,
                    stop_reason=reason,
                    stop_progress=progress,
                )
            )

        def on_frame(progress: AnimationProgress) -> None:
            self._progress = progress
            if options.on_frame:
                options.on_frame(progress)

        scheduler = FrameScheduler(
            animation,
            replace(options, on_frame=on_frame, on_stop=on_stop),
            host=self._host,
        )
        self._scheduler = scheduler
        self._pending = resolvers.future
        self._log.debug(
            f"Starting {animation.kind} animation "
            f"{animation.range.from_}->{animation.range.to} (v={animation.range.velocity})"
        )
        scheduler.start()

        return resolvers.future

    async def animate_async(self, selector: AnimateParameters | Selector) -> AnimateResult:
        """Like animate, but await the result on the running event loop."""
        return await asyncio.wrap_future(self.animate(selector))

    def _settle_unsampled(self, scheduler: FrameScheduler, reason: AnimationStopReason) -> None:
        """Resolve the future of a run that stopped before its first frame."""
        pending = self._pending
        if pending is None or pending.done() or scheduler is not self._scheduler:
            return
        if scheduler.state is SchedulerState.STOPPED and scheduler.latest_progress is None:
            pending.set_result(
                AnimateResult(
                    animation=scheduler.animation,
                    completed=False,
                    stop_reason=reason,
                    stop_progress=None,
                )
            )


def follow(
    controller: AnimationController,
    to: float,
    factory: Callable[[AnimationRange], Animation],
    *,
    start: float = 0.0,
    options: AnimationOptions | None = None,
) -> Future[AnimateResult]:
    """Retarget a controller towards ``to``, continuing from its live progress.

    The new range starts at the last sampled position and velocity of the
    active run, or at ``start`` at rest when nothing is running.

    Args:
        controller: Controller to retarget
        to: New target position
        factory: Builds the animation for the seeded range
        start: Start position when the controller is at rest
        options: Observer callbacks for the new run

    Returns:
        Future of the new run's AnimateResult
    """

    def select(progress: AnimationProgress | None) -> AnimateParameters:
        animation_range = AnimationRange(
            from_=progress.position if progress else start,
            to=to,
            velocity=progress.velocity if progress else 0.0,
        )
        return AnimateParameters(
            animation=factory(animation_range),
            options=replace(options or AnimationOptions(), progress=progress),
        )

    return controller.animate(select)
