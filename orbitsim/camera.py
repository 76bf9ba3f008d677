"""The viewing camera and its orbiting moves around the origin."""

from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_X = 0.0
DEFAULT_Y = 1.0
DEFAULT_Z = 17.0
DEFAULT_LOOK_X = 0.0
DEFAULT_LOOK_Z = -1.0


@dataclass
class Camera:
    """A camera position, the point it looks at and its rotation angle."""

    x: float = DEFAULT_X
    y: float = DEFAULT_Y
    z: float = DEFAULT_Z
    look_x: float = DEFAULT_LOOK_X
    look_z: float = DEFAULT_LOOK_Z
    angle: float = 0.0
    look_y: float = 1.0
    up: tuple[float, float, float] = (0.0, 1.0, 0.0)

    def reset(self) -> None:
        """Put position and look-at point back to their defaults."""
        self.x = DEFAULT_X
        self.y = DEFAULT_Y
        self.z = DEFAULT_Z
        self.look_x = DEFAULT_LOOK_X
        self.look_z = DEFAULT_LOOK_Z

    def rotate_horizontal(self, angle: float) -> None:
        """Turn the camera about the vertical axis by ``angle`` radians.

        The old x coordinate enters the new z truncated toward zero, as the
        simulator has always done.
        """
        self.angle = angle
        old_x = int(self.x)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        self.x = self.x * cos_a + self.z * sin_a
        self.z = -old_x * sin_a + self.z * cos_a

    def rotate_vertical(self, angle: float) -> None:
        """Tilt the camera about the horizontal x axis by ``angle`` radians.

        The old y coordinate enters the new z truncated toward zero.
        """
        self.angle = angle
        old_y = int(self.y)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        self.y = self.y * cos_a - self.z * sin_a
        self.z = old_y * sin_a + self.z * cos_a