"""Bouncing lines and triangles spread over four viewports."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

ESCAPE = "\x1b"
LOWER_BOUND = -1.0
UPPER_BOUND = 1.0


@dataclass
class MovingPoint:
    """A point drifting by a fixed step and bouncing off the unit square."""

    x: float
    y: float
    dx: float
    dy: float
    color: tuple[float, float, float] = (1.0, 1.0, 1.0)

    @staticmethod
    def random(rng: random.Random) -> MovingPoint:
        """Return a point at a random grid spot with a random step and colour.

        Coordinates are one of -1.0, -0.8, ..., 1.0; steps lie between 0.003
        and 0.03; colour components lie between 0 and 1 in thousandths.
        """
        x = rng.randrange(11) * 0.1 * 2 - 1
        y = rng.randrange(11) * 0.1 * 2 - 1
        dx = (rng.randrange(10) + 1) * 0.003
        dy = (rng.randrange(10) + 1) * 0.003
        color = tuple(rng.randrange(1001) * 0.001 for _ in range(3))
        return MovingPoint(x, y, dx, dy, color)

    def step(self) -> None:
        """Move by one step, reversing each direction that left the square."""
        self.x += self.dx
        self.y += self.dy
        if self.x < LOWER_BOUND or self.x > UPPER_BOUND:
            self.dx = -self.dx
        if self.y < LOWER_BOUND or self.y > UPPER_BOUND:
            self.dy = -self.dy


@dataclass
class Shape:
    """Three moving points: a line uses the first two, a triangle all three."""

    points: tuple[MovingPoint, MovingPoint, MovingPoint]

    def vertices(self, triangles: bool) -> tuple[MovingPoint, ...]:
        """Return the points drawn in line or triangle mode."""
        return self.points if triangles else self.points[:2]


def _random_shape(rng: random.Random) -> Shape:
    return Shape(tuple(MovingPoint.random(rng) for _ in range(3)))


@dataclass
class LineScene:
    """A set of shapes that always holds at least one, and its display mode."""

    rng: random.Random = field(default_factory=random.Random)
    shapes: list[Shape] = field(default_factory=list)
    triangles: bool = False
    running: bool = True
    width: int = 600
    height: int = 600

    def __post_init__(self) -> None:
        if not self.shapes:
            self.shapes.append(_random_shape(self.rng))

    def add_line(self) -> Shape:
        """Append a new random shape and return it."""
        shape = _random_shape(self.rng)
        self.shapes.append(shape)
        return shape

    def remove_line(self) -> None:
        """Drop the last shape unless it is the only one left."""
        if len(self.shapes) > 1:
            self.shapes.pop()

    def toggle_triangles(self) -> None:
        """Switch between drawing lines and drawing triangles."""
        self.triangles = not self.triangles

    def step(self) -> None:
        """Move every point of every shape by one step."""
        for shape in self.shapes:
            for point in shape.points:
                point.step()

    def handle_key(self, key: str) -> None:
        """React to a key: '+' or 'up' adds, '-' or 'down' removes,
        space toggles triangles, escape stops. Other keys are ignored."""
        match key:
            case "\x1b":
                self.running = False
            case "+" | "up":
                self.add_line()
            case "-" | "down":
                self.remove_line()
            case " ":
                self.toggle_triangles()

    def resize(self, width: int, height: int) -> None:
        """Record a new window size."""
        self.width = width
        self.height = height

    def viewports(self) -> list[tuple[int, int, int, int]]:
        """Return the viewport of each shape, in order."""
        return [viewport(index, self.width, self.height)
                for index in range(len(self.shapes))]


def viewport(index: int, width: int, height: int) -> tuple[int, int, int, int]:
    """Return (x, y, width, height) of the quarter window for shape ``index``.

    Shapes cycle through top-left, top-right, bottom-right, bottom-left.
    """
    half_w = width // 2
    half_h = height // 2
    origins = ((0, half_h), (half_w, half_h), (half_w, 0), (0, 0))
    x, y = origins[index % 4]
    return (x, y, half_w, half_h)