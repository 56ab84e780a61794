"""Frame scheduler: samples one animation once per display frame.

A scheduler run goes idle -> running -> completed | stopped. While
running, exactly one frame request is pending at a time. Every sampled frame
builds an AnimationProgress and notifies the observers:

- on_start: first sample only, before its on_frame
- on_frame: every sample, frame counter 0, 1, 2, ... without gaps
- on_stop: once per run that produced at least one sample, always last

An observer that raises stops its run before the error reaches the frame host.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from enum import Enum

from momentum.core.animation.frames import FrameHost
from momentum.core.animation.models import AnimationFrame, AnimationProgress
from momentum.core.animation.solvers import Animation, evaluate
from momentum.core.animation.stop_reason import COMPLETED, STOPPED, AnimationStopReason

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[AnimationProgress], None]
StopCallback = Callable[[AnimationProgress, AnimationStopReason], None]


class SchedulerState(str, Enum):
    """Lifecycle state of the current run."""

    IDLE = "idle"
    RUNNING = "running"
    COMPLETED = "completed"
    STOPPED = "stopped"


@dataclass(frozen=True)
class AnimationOptions:
    """Options for a scheduler run.

    Attributes:
        progress: Progress of a previous run. Elapsed time is measured from
            its ``time`` so the new run continues seamlessly.
        on_start: Called with the first sampled progress
        on_frame: Called with every sampled progress
        on_stop: Called with the last progress and the stop reason
    """

    progress: AnimationProgress | None = None
    on_start: ProgressCallback | None = None
    on_frame: ProgressCallback | None = None
    on_stop: StopCallback | None = None


@dataclass
class _Run:
    """Mutable bookkeeping of one run."""

    start_time: float | None = None
    latest: AnimationProgress | None = None
    token: Hashable | None = None


class FrameScheduler:
    """Drive one animation frame by frame.

    Example:
        host = ManualFrameHost()
        scheduler = FrameScheduler(animation, AnimationOptions(on_frame=draw), host=host)
        scheduler.start()
        host.run_until_idle()
    """

    def __init__(
        self,
        animation: Animation,
        options: AnimationOptions | None = None,
        *,
        host: FrameHost,
    ):
        self.animation = animation
        self._options = options or AnimationOptions()
        self._host = host
        self._run: _Run | None = None
        self._last_run: _Run | None = None
        self._state = SchedulerState.IDLE

    @property
    def state(self) -> SchedulerState:
        return self._state

    @property
    def animating(self) -> bool:
        return self._run is not None

    @property
    def latest_progress(self) -> AnimationProgress | None:
        """Last sampled progress of the most recent run, kept after it ends."""
        return self._last_run.latest if self._last_run else None

    def start(self) -> None:
        """Start a new run, stopping a running one first."""
        self.stop(STOPPED)

        run = self._run = self._last_run = _Run()
        seed = self._options.progress
        if seed is not None:
            run.start_time = seed.time

        self._state = SchedulerState.RUNNING
        run.token = self._host.request_frame(lambda _timestamp: self._sample(run))
        logger.debug(f"Scheduler started {self.animation.kind} animation")

    def stop(self, reason: AnimationStopReason = STOPPED) -> None:
        """Stop the current run.

        Cancels the pending frame and notifies on_stop with the last sampled
        progress. Does nothing when not running.
        """
        run = self._run
        if run is None:
            return

        self._run = None
        self._state = SchedulerState.STOPPED
        if run.token is not None:
            self._host.cancel_frame(run.token)
            run.token = None

        logger.debug(f"Scheduler stopped ({reason.type.value}) after {_frames(run)} frames")
        if run.latest is not None and self._options.on_stop:
            self._options.on_stop(run.latest, reason)

    def _sample(self, run: _Run) -> None:
        if run is not self._run:
            return
        run.token = None

        time = self._host.now()
        if run.start_time is None:
            run.start_time = time

        previous = run.latest
        frame = AnimationFrame.at(
            start_time=run.start_time,
            time=time,
            frame=previous.frame + 1 if previous else 0,
        )
        value = evaluate(self.animation, frame.elapsed_time)
        progress = AnimationProgress.of(self.animation, frame, value)
        run.latest = progress

        try:
            if previous is None and self._options.on_start:
                self._options.on_start(progress)
            if run is self._run and self._options.on_frame:
                self._options.on_frame(progress)
        except Exception:
            # A failed observer ends the run
            if run is self._run:
                logger.warning("Observer callback failed, stopping the run")
                self.stop(STOPPED)
            raise

        # A callback may have stopped or restarted the scheduler
        if run is not self._run:
            return

        if progress.completed:
            self._complete(run)
            return

        run.token = self._host.request_frame(lambda _timestamp: self._sample(run))

    def _complete(self, run: _Run) -> None:
        self._run = None
        self._state = SchedulerState.COMPLETED
        logger.debug(f"Scheduler completed after {_frames(run)} frames")
        if run.latest is not None and self._options.on_stop:
            self._options.on_stop(run.latest, COMPLETED)


def _frames(run: _Run) -> int:
    return run.latest.frame + 1 if run.latest else 0
