"""Mapping from tile coordinates to world space.

The world is the square [-2, 2] x [-2, 2]. Zoom 0 covers all of it with a
single tile, and every zoom level halves the tile edge along both axes.
"""

import numpy as np
from numpy.typing import NDArray

from planet_tiles.terrain.geometry import Extent, Vector
from planet_tiles.terrain.types import TILE_SIZE, TileCoord

# Centre of the normalized [0, 1) square, moved to the world origin
WORLD_CENTRE = Vector(0.5, 0.5)
# Edge length of the world square
WORLD_SIZE = 4.0


def tile_extent(coords: TileCoord) -> Extent:
    """Return the world-space rectangle covered by a tile.

    Args:
        coords: A valid tile coordinate

    Returns:
        Extent whose width and height are both 4 / 2**z
    """
    size = float(coords.tiles_per_axis)
    extent = Extent(
        min=Vector(coords.x / size, coords.y / size),
        max=Vector((coords.x + 1) / size, (coords.y + 1) / size),
    )
    return extent.sub(WORLD_CENTRE).scale(WORLD_SIZE)


def pixel_coordinates(
    extent: Extent, tile_size: int = TILE_SIZE
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """World coordinates of each pixel column and row of a tile.

    Both axes are stepped by the extent's x span. Tile extents are square so
    this matches stepping y by its own span.

    Returns:
        (xs, ys) where xs[px] and ys[py] are the world coordinates of pixel
        column px and pixel row py
    """
    span = extent.max.x - extent.min.x
    steps = np.arange(tile_size, dtype=np.float64)
    xs = extent.min.x + span * steps / tile_size
    ys = extent.min.y + span * steps / tile_size
    return xs, ys
