"""The Earth-Moon system stepped through time."""

from __future__ import annotations

from dataclasses import dataclass, field

from orbitsim.camera import Camera
from orbitsim.color import Color
from orbitsim.planet import Planet
from orbitsim.vector import Vect

SECONDS_PER_DAY = 86400
FULL_TURN_LIMIT = 6.28


def _make_earth() -> Planet:
    return Planet(
        name="Terre",
        color=Color(0, 0, 255),
        mass=5.972e24,
        radius=6.371e6,
        position=Vect(0.0, 0.0, 0.0),
        velocity=Vect(0.0, 0.0, 0.0),
        rotation_speed=7.29211e-5,
        rotation_angle=0.0,
        texture=1,
    )


def _make_moon() -> Planet:
    # The starting position is the Moon's mean distance at perigee.
    return Planet(
        name="Lune",
        color=Color(200, 200, 200),
        mass=7.345e22,
        radius=1.738e6,
        position=Vect(3.633e8, 0.0, 0.0),
        velocity=Vect(0.0, 0.0, -1076),
        rotation_speed=2.693180e-6,
        rotation_angle=0.0,
        texture=2,
    )


@dataclass
class EarthMoonSystem:
    """The Earth, the Moon, the elapsed time, the time step and the camera."""

    terre: Planet = field(default_factory=_make_earth)
    lune: Planet = field(default_factory=_make_moon)
    time: int = 0
    delta_t: int = 3600
    camera: Camera = field(default_factory=Camera)

    def update_rotation_angle(self, planet: Planet) -> None:
        """Spin ``planet`` on itself by one time step, wrapping past a turn."""
        if planet.rotation_angle > FULL_TURN_LIMIT:
            planet.rotation_angle = 0.0
        else:
            planet.rotation_angle += planet.rotation_speed * self.delta_t

    def spend_time(self) -> None:
        """Move the Moon by one time step around the Earth."""
        self.lune.move(self.terre, self.delta_t, self.lune.gravitational_force(self.terre))
        self.time += self.delta_t

    def time_label(self) -> str:
        """Return the elapsed time in whole days as shown on screen."""
        return f"Temps : {self.time // SECONDS_PER_DAY} jours"