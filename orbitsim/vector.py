"""Three-dimensional vectors of floats."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vect:
    """An immutable vector in three-dimensional space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def norm(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def scaled(self, factor: float) -> Vect:
        """Return this vector with every component multiplied by ``factor``."""
        return Vect(self.x * factor, self.y * factor, self.z * factor)

    def __add__(self, other: Vect) -> Vect:
        if not isinstance(other, Vect):
            return NotImplemented
        return Vect(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vect) -> Vect:
        if not isinstance(other, Vect):
            return NotImplemented
        return Vect(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vect:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return self.scaled(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vect:
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        return Vect(self.x / divisor, self.y / divisor, self.z / divisor)

    def __neg__(self) -> Vect:
        return Vect(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z