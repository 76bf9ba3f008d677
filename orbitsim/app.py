"""The interactive simulation state and a text front end for it."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from enum import Enum

from orbitsim.guide import guide_text
from orbitsim.system import EarthMoonSystem

ESCAPE = "\x1b"
MIN_DELTA_T = 500
MAX_DELTA_T = 15000
CAMERA_STEP = 0.1


class SpecialKey(Enum):
    """Keys without a character: arrows and function keys."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    F1 = "f1"
    F2 = "f2"
    F3 = "f3"
    F4 = "f4"
    F5 = "f5"
    F6 = "f6"


@dataclass
class Simulation:
    """The Earth-Moon system together with the viewer's display state."""

    system: EarthMoonSystem = field(default_factory=EarthMoonSystem)
    schematic_mode: bool = False
    running: bool = True

    def handle_key(self, key: str) -> None:
        """React to a character key; unknown keys are ignored."""
        system = self.system
        match key:
            case "\x1b":
                self.running = False
            case "s":
                system.camera.reset()
                self.schematic_mode = not self.schematic_mode
            case "-":
                system.delta_t = max(int(system.delta_t * 0.9), MIN_DELTA_T)
            case "+":
                system.delta_t = min(int(system.delta_t * 1.1), MAX_DELTA_T)
            case "n":
                self.system = EarthMoonSystem()

    def handle_special_key(self, key: SpecialKey) -> None:
        """React to an arrow or function key."""
        system = self.system
        match key:
            case SpecialKey.LEFT:
                system.camera.rotate_horizontal(-CAMERA_STEP)
            case SpecialKey.RIGHT:
                system.camera.rotate_horizontal(CAMERA_STEP)
            case SpecialKey.UP:
                system.camera.rotate_vertical(-CAMERA_STEP)
            case SpecialKey.DOWN:
                system.camera.rotate_vertical(CAMERA_STEP)
            case SpecialKey.F1:
                system.lune.scale_velocity(0.9)
            case SpecialKey.F2:
                system.lune.scale_velocity(1.1)
            case SpecialKey.F3:
                system.terre.mass *= 0.5
            case SpecialKey.F4:
                system.terre.mass *= 2
            case SpecialKey.F5:
                system.lune.mass *= 0.5
            case SpecialKey.F6:
                system.lune.mass *= 2

    def tick(self) -> None:
        """Advance the simulation by one time step."""
        self.system.update_rotation_angle(self.system.terre)
        self.system.spend_time()

    def status_lines(self) -> list[str]:
        """Return the labels of the schematic view, Moon first, time last."""
        lines: list[str] = []
        for planet in (self.system.lune, self.system.terre):
            lines.extend((planet.name, planet.mass_label(), planet.speed_label()))
        lines.append(self.system.time_label())
        return lines


def _positive(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def main(argv: list[str] | None = None) -> int:
    """Run the simulation for a number of steps and print its status."""
    parser = argparse.ArgumentParser(
        prog="orbitsim",
        description="Simulate the Moon orbiting the Earth.",
    )
    parser.add_argument("--steps", type=_non_negative, default=720,
                        help="number of time steps to run")
    parser.add_argument("--delta-t", type=_positive, default=None,
                        help="seconds per step, between 500 and 15000")
    parser.add_argument("--report-every", type=_positive, default=24,
                        help="print the status every this many steps")
    parser.add_argument("--guide", action="store_true",
                        help="print the controls guide first")
    args = parser.parse_args(argv)

    simulation = Simulation()
    if args.delta_t is not None:
        simulation.system.delta_t = min(max(args.delta_t, MIN_DELTA_T), MAX_DELTA_T)

    if args.guide:
        print(guide_text())
        print()

    for step in range(1, args.steps + 1):
        simulation.tick()
        if step % args.report_every == 0:
            print("\n".join(simulation.status_lines()))
            print()

    if args.steps == 0 or args.steps % args.report_every:
        print("\n".join(simulation.status_lines()))
    return 0