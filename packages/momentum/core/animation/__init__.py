"""Interruptible value animations.

- Motion solvers: SpringAnimation, EasingAnimation, GravityAnimation + evaluate
- FrameScheduler: samples one animation per display frame
- AnimationController: hands a running animation over to a new one
"""

from momentum.core.animation.controller import (
    AnimateParameters,
    AnimateResult,
    AnimationController,
    follow,
)
from momentum.core.animation.easing import (
    EasingAnimation,
    EasingDescription,
    EasingLibrary,
    get_easing,
)
from momentum.core.animation.frames import AsyncioFrameHost, FrameHost, ManualFrameHost
from momentum.core.animation.future import MissingResolversError, create_future_with_resolvers
from momentum.core.animation.gravity import GravityAnimation
from momentum.core.animation.models import (
    AnimationFrame,
    AnimationProgress,
    AnimationRange,
    AnimationValue,
)
from momentum.core.animation.sampling import AnimationTrace, sample_animation
from momentum.core.animation.scheduler import AnimationOptions, FrameScheduler, SchedulerState
from momentum.core.animation.solvers import Animation, evaluate
from momentum.core.animation.spring import SpringAnimation, SpringDescription, SpringType
from momentum.core.animation.stop_reason import (
    AnimationStopReason,
    Completed,
    Stopped,
    StopReasonType,
    Succeeded,
)

__all__ = [
    "AnimateParameters",
    "AnimateResult",
    "Animation",
    "AnimationController",
    "AnimationFrame",
    "AnimationOptions",
    "AnimationProgress",
    "AnimationRange",
    "AnimationStopReason",
    "AnimationTrace",
    "AnimationValue",
    "AsyncioFrameHost",
    "Completed",
    "EasingAnimation",
    "EasingDescription",
    "EasingLibrary",
    "FrameHost",
    "FrameScheduler",
    "GravityAnimation",
    "ManualFrameHost",
    "MissingResolversError",
    "SchedulerState",
    "SpringAnimation",
    "SpringDescription",
    "SpringType",
    "StopReasonType",
    "Stopped",
    "Succeeded",
    "create_future_with_resolvers",
    "evaluate",
    "follow",
    "get_easing",
    "sample_animation",
]
