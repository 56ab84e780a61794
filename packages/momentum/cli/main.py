"""Command-line interface for Momentum.

Samples animations offline and prints or exports their trajectories.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from momentum.core.animation.easing.description import EasingLibrary
from momentum.core.animation.models import AnimationRange
from momentum.core.animation.sampling import AnimationTrace, sample_animation
from momentum.core.animation.specs import (
    EasingSpec,
    GravitySpec,
    SpringSpec,
    build_animation,
    describe_spring,
)
from momentum.core.animation.spring.description import (
    PhysicalSpringParameters,
    SpringDescription,
    VisualSpringParameters,
)
from momentum.core.config.loader import configure_logging, load_app_config
from momentum.core.config.models import AppConfig
from momentum.core.utils.json import write_json

console = Console()
logger = logging.getLogger(__name__)


def _spring_spec(args: argparse.Namespace, config: AppConfig) -> SpringSpec:
    if args.preset:
        return config.spring_preset(args.preset)
    if args.stiffness is not None or args.damping is not None:
        return SpringSpec(
            spring=PhysicalSpringParameters(
                mass=args.mass,
                damping=args.damping if args.damping is not None else 10.0,
                stiffness=args.stiffness if args.stiffness is not None else 100.0,
            )
        )
    if args.duration is not None or args.bounce is not None:
        defaults = config.animation.spring.spring
        duration = getattr(defaults, "duration", 0.5)
        bounce = getattr(defaults, "bounce", 0.0)
        return SpringSpec(
            spring=VisualSpringParameters(
                duration=args.duration if args.duration is not None else duration,
                bounce=args.bounce if args.bounce is not None else bounce,
            )
        )
    return config.animation.spring


def build_spec(
    args: argparse.Namespace, config: AppConfig
) -> SpringSpec | EasingSpec | GravitySpec:
    """Resolve the animation spec for the sample command.

    CLI flags override the defaults in the app config.
    """
    if args.kind == "spring":
        return _spring_spec(args, config)
    if args.kind == "easing":
        defaults = config.animation.easing
        return EasingSpec(
            easing=EasingLibrary(args.easing) if args.easing else defaults.easing,
            duration=args.easing_duration or defaults.duration,
        )
    defaults_gravity = config.animation.gravity
    return GravitySpec(
        acceleration=(
            args.acceleration if args.acceleration is not None else defaults_gravity.acceleration
        )
    )


def render_trace(trace: AnimationTrace, every: int = 1) -> Table:
    """Render a sampled trace as a rich table."""
    table = Table(title="Trajectory")
    table.add_column("t (ms)", justify="right")
    table.add_column("position", justify="right")
    table.add_column("velocity (/s)", justify="right")

    last = len(trace) - 1
    for i in range(len(trace)):
        if i % every and i != last:
            continue
        table.add_row(
            f"{trace.times[i]:.1f}",
            f"{trace.positions[i]:.4f}",
            f"{trace.velocities[i]:.4f}",
        )
    return table


def run_sample(args: argparse.Namespace) -> int:
    """Sample an animation and print or export the trajectory."""
    try:
        config = load_app_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: Could not load config: {e}[/red]")
        return 1

    if args.log_level:
        config = config.model_copy(
            update={"logging": config.logging.model_copy(update={"level": args.log_level})}
        )
    configure_logging(config)

    try:
        spec = build_spec(args, config)
        animation_range = AnimationRange(
            from_=getattr(args, "from"), to=args.to, velocity=args.velocity
        )
        animation = build_animation(spec, animation_range)
    except (KeyError, ValidationError) as e:
        console.print(f"[red]ERROR: Invalid animation parameters: {e}[/red]")
        return 1

    frame_rate = args.fps or config.animation.frame_rate
    logger.debug(f"Sampling {animation.kind} animation at {frame_rate} fps")
    trace = sample_animation(animation, frame_rate=frame_rate, max_duration=args.max_duration)

    if args.json:
        output = Path(args.json).resolve()
        write_json(output, {"kind": animation.kind, **trace.to_dict()})
        console.print(f"[green]Wrote {len(trace)} samples to[/green] {output}")
    else:
        console.print(render_trace(trace, every=max(1, args.every)))

    if trace.completed:
        console.print(f"Completed at [bold]{trace.completed_at:.1f}ms[/bold]")
    else:
        console.print(f"[yellow]Not completed within {args.max_duration:.0f}ms[/yellow]")
    return 0


def run_describe_spring(args: argparse.Namespace) -> int:
    """Print both parameterizations of a spring."""
    try:
        if args.stiffness is not None:
            description = SpringDescription.physical(
                mass=args.mass, damping=args.damping or 0.0, stiffness=args.stiffness
            )
        else:
            description = describe_spring(
                VisualSpringParameters(duration=args.duration, bounce=args.bounce)
            )
    except ValidationError as e:
        console.print(f"[red]ERROR: Invalid spring parameters: {e}[/red]")
        return 1

    table = Table(title=f"Spring ({description.type.value})")
    table.add_column("parameter")
    table.add_column("value", justify="right")
    for name, value in (
        ("mass", description.mass),
        ("stiffness", description.stiffness),
        ("damping", description.damping),
        ("damping_ratio", description.damping_ratio),
        ("duration (s)", description.duration),
        ("bounce", description.bounce),
    ):
        table.add_row(name, f"{value:.6g}")
    console.print(table)
    return 0


def _add_spring_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--duration", type=float, help="Spring visual duration in seconds")
    p.add_argument("--bounce", type=float, help="Spring bounce in (-1, 1]")
    p.add_argument("--mass", type=float, default=1.0, help="Spring mass (default: 1)")
    p.add_argument("--damping", type=float, help="Spring damping coefficient")
    p.add_argument("--stiffness", type=float, help="Spring stiffness")


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="momentum",
        description="Momentum - interruptible spring, easing and gravity animations",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    sample = sub.add_parser("sample", help="Sample an animation trajectory")
    sample.add_argument(
        "--kind", choices=["spring", "easing", "gravity"], default="spring", help="Animation kind"
    )
    sample.add_argument("--from", type=float, default=0.0, help="Start value (default: 0)")
    sample.add_argument("--to", type=float, default=1.0, help="Target value (default: 1)")
    sample.add_argument(
        "--velocity", type=float, default=0.0, help="Initial velocity in units/s (default: 0)"
    )
    _add_spring_arguments(sample)
    sample.add_argument("--preset", help="Named spring preset from the app config")
    sample.add_argument(
        "--easing", choices=[e.value for e in EasingLibrary], help="Easing curve name"
    )
    sample.add_argument("--easing-duration", type=float, help="Easing duration in milliseconds")
    sample.add_argument("--acceleration", type=float, help="Gravity acceleration in units/s^2")
    sample.add_argument("--fps", type=float, help="Frames per second (default: from config)")
    sample.add_argument(
        "--max-duration",
        type=float,
        default=10_000.0,
        help="Sampling window in milliseconds (default: 10000)",
    )
    sample.add_argument("--every", type=int, default=1, help="Print every Nth frame")
    sample.add_argument("--json", help="Write the trajectory to a JSON file")
    sample.add_argument("--config", help="Path to app config (.json, .yaml, .yml)")
    sample.add_argument(
        "--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], help="Log level"
    )

    describe = sub.add_parser("describe-spring", help="Convert between spring parameterizations")
    _add_spring_arguments(describe)
    describe.set_defaults(duration=0.5, bounce=0.0)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    if args.cmd == "sample":
        return run_sample(args)
    if args.cmd == "describe-spring":
        return run_describe_spring(args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
