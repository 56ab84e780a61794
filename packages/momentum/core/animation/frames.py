"""Frame and clock collaborators for the frame scheduler.

The scheduler never talks to a display loop directly. It asks a FrameHost
for "one callback before the next repaint" and reads timestamps from the
host's clock. Two hosts are provided:

- ManualFrameHost: fake clock, frames are stepped explicitly (tests, offline use)
- AsyncioFrameHost: frames are scheduled on the running asyncio loop at a fixed rate
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from collections.abc import Callable, Hashable
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

FrameCallback = Callable[[float], None]

DEFAULT_FRAME_RATE = 60.0


@runtime_checkable
class FrameHost(Protocol):
    """Source of display frames and timestamps."""

    def request_frame(self, callback: FrameCallback) -> Hashable:
        """Run ``callback(timestamp)`` once before the next repaint.

        Returns:
            Token accepted by cancel_frame
        """
        ...

    def cancel_frame(self, token: Hashable) -> None:
        """Cancel a pending frame request. Unknown tokens are ignored."""
        ...

    def now(self) -> float:
        """Current time in milliseconds."""
        ...


class ManualFrameHost:
    """Frame host driven by explicit steps over a fake clock.

    Example:
        >>> host = ManualFrameHost(frame_interval=10)
        >>> seen = []
        >>> _ = host.request_frame(seen.append)
        >>> host.step()
        1
        >>> seen
        [10.0]
    """

    def __init__(self, start_time: float = 0.0, frame_interval: float = 1000 / DEFAULT_FRAME_RATE):
        self._time = float(start_time)
        self.frame_interval = frame_interval
        self._pending: dict[int, FrameCallback] = {}
        self._tokens = itertools.count()

    def now(self) -> float:
        return self._time

    def request_frame(self, callback: FrameCallback) -> int:
        token = next(self._tokens)
        self._pending[token] = callback
        return token

    def cancel_frame(self, token: Hashable) -> None:
        self._pending.pop(token, None)  # type: ignore[call-overload]

    @property
    def pending(self) -> int:
        """Number of frame requests waiting for the next step."""
        return len(self._pending)

    def advance(self, ms: float) -> None:
        """Move the clock forward without running frames."""
        self._time += ms

    def step(self, dt: float | None = None) -> int:
        """Advance the clock by one frame and run the callbacks queued before it.

        Callbacks requested while stepping run on the next step. Callbacks
        cancelled while stepping do not run.

        Args:
            dt: Milliseconds to advance (defaults to frame_interval)

        Returns:
            Number of callbacks run
        """
        self._time += self.frame_interval if dt is None else dt
        ran = 0
        for token in list(self._pending):
            callback = self._pending.pop(token, None)
            if callback is None:
                continue
            callback(self._time)
            ran += 1
        return ran

    def run_until_idle(self, max_frames: int = 10_000, dt: float | None = None) -> int:
        """Step until no frames are pending or max_frames steps ran.

        Returns:
            Number of steps taken
        """
        steps = 0
        while self._pending and steps < max_frames:
            self.step(dt)
            steps += 1
        return steps


class AsyncioFrameHost:
    """Frame host scheduling callbacks on an asyncio event loop.

    Args:
        frame_rate: Frames per second
        loop: Event loop to use (defaults to the running loop at request time)
    """

    def __init__(
        self,
        frame_rate: float = DEFAULT_FRAME_RATE,
        loop: asyncio.AbstractEventLoop | None = None,
    ):
        if frame_rate <= 0:
            raise ValueError(f"frame_rate must be > 0, got {frame_rate}")
        self.frame_rate = frame_rate
        self._loop = loop
        self._handles: dict[int, asyncio.TimerHandle] = {}
        self._tokens = itertools.count()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def now(self) -> float:
        return self.loop.time() * 1000

    def request_frame(self, callback: FrameCallback) -> int:
        token = next(self._tokens)

        def run() -> None:
            self._handles.pop(token, None)
            callback(self.now())

        self._handles[token] = self.loop.call_later(1 / self.frame_rate, run)
        return token

    def cancel_frame(self, token: Hashable) -> None:
        handle = self._handles.pop(token, None)  # type: ignore[call-overload]
        if handle is not None:
            handle.cancel()
