"""Reading uncompressed 24-bit BMP images into RGBA pixel maps."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

# File header followed by the 40-byte info header, all little-endian.
_HEADER = struct.Struct("<2sIHHIIIIHHIIIIII")
_COLUMNS_FIELD = 6
_ROWS_FIELD = 7
_BITS_PER_PIXEL_FIELD = 9

OPAQUE = 255
TRANSPARENT = 0


class BmpError(Exception):
    """Raised when a BMP file cannot be opened or is not supported."""


@dataclass(frozen=True)
class Pixel:
    """One RGBA pixel with components from 0 to 255."""

    r: int
    g: int
    b: int
    a: int = OPAQUE


@dataclass(frozen=True)
class Pixmap:
    """An image of ``rows`` by ``cols`` pixels stored row after row."""

    rows: int
    cols: int
    pixels: tuple[Pixel, ...]

    def __post_init__(self) -> None:
        if len(self.pixels) != self.rows * self.cols:
            raise ValueError("pixel count does not match the image size")


def read_bmp(path: str | PathLike[str], has_alpha: bool = False) -> Pixmap:
    """Read an uncompressed 24-bit BMP file.

    Pixels are kept in the order the file stores them. With ``has_alpha``,
    pure white pixels become fully transparent; every other pixel is opaque.
    Raises ``BmpError`` when the file cannot be read, is not 24 bits per
    pixel, or is too short for its declared size.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise BmpError(f"can't open file: {path}") from exc

    if len(data) < _HEADER.size:
        raise BmpError(f"truncated header in {path}")

    fields = _HEADER.unpack_from(data)
    cols = fields[_COLUMNS_FIELD]
    rows = fields[_ROWS_FIELD]
    if fields[_BITS_PER_PIXEL_FIELD] != 24:
        raise BmpError("not a 24 bit/pixel image, or is compressed")

    # Each stored row is padded to a multiple of four bytes.
    row_bytes = (3 * cols + 3) // 4 * 4
    needed = _HEADER.size + (row_bytes * (rows - 1) + 3 * cols if rows else 0)
    if len(data) < needed:
        raise BmpError(f"truncated pixel data in {path}")

    pixels: list[Pixel] = []
    for row in range(rows):
        start = _HEADER.size + row * row_bytes
        line = data[start:start + 3 * cols]
        for b, g, r in zip(line[0::3], line[1::3], line[2::3]):
            transparent = has_alpha and r == g == b == 255
            pixels.append(Pixel(r, g, b, TRANSPARENT if transparent else OPAQUE))

    return Pixmap(rows=rows, cols=cols, pixels=tuple(pixels))