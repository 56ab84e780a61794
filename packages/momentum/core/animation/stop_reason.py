"""Reasons why an animation run ended."""

from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from momentum.core.animation.controller import AnimateResult


class StopReasonType(str, Enum):
    """Discriminator for AnimationStopReason variants."""

    STOPPED = "stopped"  # Stopped externally
    COMPLETED = "completed"  # Solver reported completion
    SUCCEEDED = "succeeded"  # Replaced by a successor run


@dataclass(frozen=True, slots=True)
class Stopped:
    type: StopReasonType = field(default=StopReasonType.STOPPED, init=False)


@dataclass(frozen=True, slots=True)
class Completed:
    type: StopReasonType = field(default=StopReasonType.COMPLETED, init=False)


@dataclass(frozen=True, slots=True)
class Succeeded:
    """The run was taken over by a successor.

    Attributes:
        pending: Future for the successor run's AnimateResult. It resolves
            once the successor itself stops.
    """

    pending: Future[AnimateResult]
    type: StopReasonType = field(default=StopReasonType.SUCCEEDED, init=False)


AnimationStopReason = Stopped | Completed | Succeeded

STOPPED = Stopped()
COMPLETED = Completed()
