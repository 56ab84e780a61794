"""Configuration models for Momentum."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from momentum.core.animation.frames import DEFAULT_FRAME_RATE
from momentum.core.animation.specs import (
    EasingSpec,
    GravitySpec,
    SpringParameters,
    SpringSpec,
)
from momentum.core.animation.spring.description import VisualSpringParameters


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Log level",
    )
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string (ignored when structured)",
    )
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file (stdout if None)")


class AnimationDefaults(BaseModel):
    """Defaults used when an animation is built without explicit parameters."""

    frame_rate: float = Field(default=DEFAULT_FRAME_RATE, gt=0.0, description="Frames per second")
    spring: SpringSpec = Field(default_factory=SpringSpec)
    easing: EasingSpec = Field(default_factory=EasingSpec)
    gravity: GravitySpec = Field(default_factory=GravitySpec)


def _default_spring_presets() -> dict[str, SpringParameters]:
    return {
        "smooth": VisualSpringParameters(duration=0.5, bounce=0.0),
        "snappy": VisualSpringParameters(duration=0.3, bounce=0.15),
        "bouncy": VisualSpringParameters(duration=0.5, bounce=0.3),
    }


class AppConfig(BaseModel):
    """Application configuration.

    Example:
        >>> config = AppConfig()
        >>> sorted(config.springs)
        ['bouncy', 'smooth', 'snappy']
    """

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    animation: AnimationDefaults = Field(default_factory=AnimationDefaults)
    springs: dict[str, SpringParameters] = Field(
        default_factory=_default_spring_presets,
        description="Named spring presets (visual or physical parameters)",
    )

    def spring_preset(self, name: str) -> SpringSpec:
        """Return a SpringSpec for a named preset.

        Raises:
            KeyError: If the preset does not exist.
        """
        try:
            return SpringSpec(spring=self.springs[name])
        except KeyError as exc:
            raise KeyError(
                f"Unknown spring preset '{name}', available: {sorted(self.springs)}"
            ) from exc
