"""Celestial bodies and the gravitational pull between them."""

from __future__ import annotations

from dataclasses import dataclass, field

from orbitsim.color import Color
from orbitsim.vector import Vect

GRAVITATIONAL_CONSTANT = 6.67408e-11
"""Universal gravitational constant, in m^3 kg^-1 s^-2."""

SCALE_SIZE_PLANET = 2e-7
"""Factor from a body's radius in metres to its drawn size."""

SCALE_DISTANCE = 1.5e-8
"""Factor from positions in metres to drawn coordinates."""


@dataclass
class Planet:
    """A body with a mass, a radius, a position, a velocity and a spin."""

    name: str = ""
    color: Color = field(default_factory=Color)
    mass: float = 0.0
    radius: float = 0.0
    position: Vect = field(default_factory=Vect)
    velocity: Vect = field(default_factory=Vect)
    rotation_speed: float = 0.0
    rotation_angle: float = 0.0
    texture: int | None = None

    def gravitational_force(self, other: Planet) -> Vect:
        """Return the force with which ``other`` pulls on this body.

        Raises ``ValueError`` when both bodies share the same position.
        """
        offset = other.position - self.position
        distance = offset.norm()
        if distance == 0.0:
            raise ValueError(
                f"{self.name!r} and {other.name!r} are at the same position"
            )
        direction = offset / distance
        magnitude = GRAVITATIONAL_CONSTANT * self.mass * other.mass / (distance * distance)
        return direction * magnitude

    def scale_velocity(self, factor: float) -> None:
        """Multiply the body's velocity by ``factor``."""
        self.velocity = self.velocity.scaled(factor)

    def move(self, other: Planet, h: float, force: Vect) -> None:
        """Advance the body by one velocity Verlet step of ``h`` seconds.

        ``force`` is the pull of ``other`` at the current position; the pull
        at the new position is computed from ``other``.
        """
        accel_before = force / self.mass
        self.position = (
            self.position + self.velocity * h + accel_before * (0.5 * h * h)
        )
        accel_after = self.gravitational_force(other) / self.mass
        self.velocity = self.velocity + (accel_before + accel_after) * (0.5 * h)

    def mass_label(self) -> str:
        """Return the mass as shown in the schematic view."""
        return f"Masse : {self.mass / 1e22:f}e22 kg"

    def speed_label(self) -> str:
        """Return the speed as shown in the schematic view."""
        return f"Vitesse : {self.velocity.norm():f} m/s"