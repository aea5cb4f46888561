from __future__ import annotations

import argparse
import time
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence

from canvas import Canvas
from typings.color import Color
from typings.tuples import Point, Vector

DEFAULT_WIDTH: int = 900
DEFAULT_HEIGHT: int = 550
DEFAULT_STRENGTH: float = 11.25
DEFAULT_MAX_TICKS: int = 10_000
CANNON_COLOR = Color(1.0, 0.5, 0.5)


@dataclass(frozen=True, slots=True)
class Environment:
    gravity: Vector
    wind: Vector


@dataclass(frozen=True, slots=True)
class Projectile:
    position: Point
    velocity: Vector


@dataclass(slots=True)
class CannonSettings:
    output_image: str | None = None
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    strength: float = DEFAULT_STRENGTH
    max_ticks: int = DEFAULT_MAX_TICKS
    quiet: bool = False


def default_environment() -> Environment:
    return Environment(gravity=Vector(0.0, -0.1, 0.0), wind=Vector(-0.01, 0.0, 0.0))


def launch(strength: float) -> Projectile:
    return Projectile(
        position=Point(0.0, 1.0, 0.0),
        velocity=Vector(0.3, 1.0, 0.0).normalize() * strength,
    )


def tick(environment: Environment, projectile: Projectile) -> Projectile:
    position = projectile.position + projectile.velocity
    velocity = projectile.velocity + environment.gravity + environment.wind
    return Projectile(position=position, velocity=velocity)


def simulate(environment: Environment, projectile: Projectile, max_ticks: int = DEFAULT_MAX_TICKS) -> Iterator[Projectile]:
    """Yields the projectile once per tick until it falls below the ground or max_ticks states were produced."""
    for _ in range(max_ticks):
        if projectile.position.y < 0.0:
            return
        yield projectile
        projectile = tick(environment, projectile)


def plot_trajectory(states: Iterable[Projectile], canvas: Canvas, color: Color = CANNON_COLOR) -> int:
    """Plots every state with the y axis flipped so the ground is the bottom row. Returns the number of pixels drawn."""
    drawn = 0
    for state in states:
        x = int(round(state.position.x))
        y = canvas.height - 1 - int(round(state.position.y))
        if not canvas.contains(x, y):
            continue
        canvas.write_pixel((x, y), color)
        drawn += 1
    return drawn


def run(settings: CannonSettings) -> List[Projectile]:
    def log_phase(label: str, seconds: float) -> None:
        print(f"[phase] {label}: {seconds:.2f}s")

    simulate_start = time.perf_counter()
    states = list(simulate(default_environment(), launch(settings.strength), settings.max_ticks))
    log_phase("simulate", time.perf_counter() - simulate_start)

    if not settings.quiet:
        for count, state in enumerate(states):
            print(f"{count}: {state}")

    if settings.output_image is not None:
        plot_start = time.perf_counter()
        canvas = Canvas(settings.width, settings.height)
        drawn = plot_trajectory(states, canvas)
        log_phase("plot", time.perf_counter() - plot_start)

        save_start = time.perf_counter()
        canvas.save(settings.output_image)
        log_phase("save_image", time.perf_counter() - save_start)
        print(f"[stats] ticks={len(states)}, pixels={drawn}")
    else:
        print(f"[stats] ticks={len(states)}")

    return states


def parse_args(argv: Sequence[str] | None = None) -> CannonSettings:
    parser = argparse.ArgumentParser(description='Cannon trajectory simulation')
    parser.add_argument('output_image', type=str, nargs='?', default=None,
                        help='Optional output image; .ppm is written as plain PPM text, other extensions via Pillow')
    parser.add_argument('--width', type=int, default=DEFAULT_WIDTH, help='Canvas width')
    parser.add_argument('--height', type=int, default=DEFAULT_HEIGHT, help='Canvas height')
    parser.add_argument('--strength', type=float, default=DEFAULT_STRENGTH, help='Launch speed multiplier')
    parser.add_argument('--max-ticks', type=int, default=DEFAULT_MAX_TICKS, help='Upper bound on simulated ticks')
    parser.add_argument('--quiet', action='store_true', help='Do not print every tick')
    args = parser.parse_args(argv)

    if args.width < 1 or args.height < 1:
        parser.error("--width and --height must be positive")
    if args.max_ticks < 0:
        parser.error("--max-ticks must not be negative")

    return CannonSettings(
        output_image=args.output_image,
        width=args.width,
        height=args.height,
        strength=args.strength,
        max_ticks=args.max_ticks,
        quiet=args.quiet,
    )


def main(argv: Sequence[str] | None = None) -> None:
    run(parse_args(argv))


if __name__ == '__main__':
    program_start = time.time()
    readable_start = time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(program_start))
    print(f"[timer] Program started at {readable_start}")
    try:
        main()
    finally:
        program_end = time.time()
        readable_end = time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(program_end))
        elapsed = program_end - program_start
        print(f"[timer] Program ended at {readable_end} (elapsed {elapsed:.2f}s)")
