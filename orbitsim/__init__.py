"""Earth-Moon orbital simulation, BMP reading and a bouncing-lines scene."""

__version__ = "0.1.0"