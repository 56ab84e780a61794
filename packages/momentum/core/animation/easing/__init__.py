"""Easing animations."""

from momentum.core.animation.easing.animation import EasingAnimation, evaluate_easing
from momentum.core.animation.easing.curve import EasingCurve, EasingSolution, solve_easing
from momentum.core.animation.easing.description import (
    EasingDescription,
    EasingLibrary,
    EasingNotFoundError,
    get_easing,
    list_easings,
)

__all__ = [
    "EasingAnimation",
    "EasingCurve",
    "EasingDescription",
    "EasingLibrary",
    "EasingNotFoundError",
    "EasingSolution",
    "evaluate_easing",
    "get_easing",
    "list_easings",
    "solve_easing",
]
