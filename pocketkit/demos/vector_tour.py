"""Print a short report of vector operations to the terminal."""

from __future__ import annotations

import argparse
from pathlib import Path

from pocketkit.math.vector2 import Vector2
from pocketkit.settings_schema import load_settings, save_settings
from pocketkit.terminal.console import Console

LABEL_COLOR = 0x0B
VALUE_COLOR = 0x0F


def _line(console: Console, label: str, value: object) -> None:
    console.set_color(LABEL_COLOR)
    console.print(f"{label:<18}")
    console.set_color(VALUE_COLOR)
    console.print(value)
    console.reset_color()
    console.print("\n")


def run(console: Console, vector: Vector2[float], target: Vector2[float]) -> None:
    size = console.size()
    console.print("-" * min(size.width, 60), "\n")
    _line(console, "vector", vector)
    _line(console, "target", target)
    _line(console, "length", f"{vector.length():.4f}")
    _line(console, "normalized", vector.normalized())
    _line(console, "angle", f"{vector.angle():.4f} rad")
    _line(console, "distance_to", f"{vector.distance_to(target):.4f}")
    _line(console, "direction_to", vector.direction_to(target))
    _line(console, "dot", vector.dot(target))
    _line(console, "cross", vector.cross(target))
    _line(console, "lerp(0.5)", vector.lerp(target, 0.5))
    _line(console, "bounce(DOWN)", vector.bounce(Vector2.DOWN))
    _line(console, "finite", vector.is_finite())


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Vector2 operations report")
    parser.add_argument("x", type=float, help="vector x component")
    parser.add_argument("y", type=float, help="vector y component")
    parser.add_argument("--to", type=float, nargs=2, default=(0.0, 0.0), metavar=("X", "Y"), help="target point")
    parser.add_argument("--settings", type=Path, default=None, help="console settings JSON")
    parser.add_argument("--no-color", action="store_true", help="disable colored output")
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="write the effective console settings back to the settings file",
    )
    args = parser.parse_args(argv)

    settings = load_settings(args.settings)
    if args.no_color:
        settings.use_color = False
    if args.save_settings:
        save_settings(settings, args.settings)

    console = Console(settings=settings)
    run(console, Vector2(args.x, args.y), Vector2.from_tuple(tuple(args.to)))


if __name__ == "__main__":
    main()
