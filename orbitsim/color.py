"""RGBA colours for bodies."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """A colour made of non-negative red, green, blue and alpha components."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"colour component {name} must be an int")
            if value < 0:
                raise ValueError(f"colour component {name} must not be negative")

    def rgb(self) -> tuple[int, int, int]:
        """Return the red, green and blue components as a tuple."""
        return (self.r, self.g, self.b)