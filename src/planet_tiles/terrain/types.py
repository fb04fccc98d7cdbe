"""Type definitions for tile rendering."""

from dataclasses import dataclass
from typing import NamedTuple

import numpy as np
from numpy.typing import NDArray

# Tile edge length in pixels
TILE_SIZE = 256

# RGBA, indexed [row, column], origin top-left
PixelBuffer = NDArray[np.uint8]


@dataclass(frozen=True)
class TileCoord:
    """Tile coordinates in the zoom/column/row pyramid.

    Only coordinates with 0 <= x, y < 2**z address a tile; construction does
    not check this, see ``is_valid``.
    """

    z: int
    x: int
    y: int

    @property
    def tiles_per_axis(self) -> int:
        return 1 << self.z

    def is_valid(self) -> bool:
        """Return True if the coordinate addresses a tile in the pyramid."""
        if self.z < 0:
            return False
        size = self.tiles_per_axis
        return 0 <= self.x < size and 0 <= self.y < size

    def __str__(self) -> str:
        return f"{self.z}/{self.x}/{self.y}"


class Color(NamedTuple):
    """An 8-bit RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255
