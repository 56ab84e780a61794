"""Spring animations."""

from momentum.core.animation.spring.animation import (
    COMPLETION_EPSILON,
    SpringAnimation,
    SpringSolution,
    evaluate_spring,
    solve_spring,
)
from momentum.core.animation.spring.description import (
    PhysicalSpringParameters,
    SpringDescription,
    SpringType,
    VisualSpringParameters,
)

__all__ = [
    "COMPLETION_EPSILON",
    "PhysicalSpringParameters",
    "SpringAnimation",
    "SpringDescription",
    "SpringSolution",
    "SpringType",
    "VisualSpringParameters",
    "evaluate_spring",
    "solve_spring",
]
