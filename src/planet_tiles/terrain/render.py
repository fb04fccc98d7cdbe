"""Tile rasterizer: evaluates the field over a pixel grid and colours it."""

import io
import logging
import time

import numpy as np
from PIL import Image

from planet_tiles.terrain.field import FieldVariant, elevation_grid
from planet_tiles.terrain.noise import SeededNoise, get_noise
from planet_tiles.terrain.palette import Palette, colourise
from planet_tiles.terrain.tiles import pixel_coordinates, tile_extent
from planet_tiles.terrain.types import TILE_SIZE, PixelBuffer, TileCoord

logger = logging.getLogger(__name__)


def render_tile(
    coords: TileCoord,
    *,
    noise: SeededNoise | None = None,
    variant: FieldVariant = FieldVariant.TORUS,
    palette: Palette = Palette.ELEVATION,
    tile_size: int = TILE_SIZE,
) -> PixelBuffer:
    """Render one tile of the planet.

    Args:
        coords: A valid tile coordinate (0 <= x, y < 2**z)
        noise: Noise primitive, defaults to the seed-0 process-wide instance
        variant: Elevation field to sample
        palette: Colour mapping for elevation values
        tile_size: Pixels per tile edge

    Returns:
        uint8 array of shape (tile_size, tile_size, 4), indexed [row, column]
    """
    if noise is None:
        noise = get_noise(0)

    extent = tile_extent(coords)
    xs, ys = pixel_coordinates(extent, tile_size)
    tile = np.zeros((tile_size, tile_size, 4), dtype=np.uint8)

    values = elevation_grid(xs, ys, coords.z, noise, variant)
    for py, row in enumerate(values.tolist()):
        for px, value in enumerate(row):
            tile[py, px] = colourise(value, palette)

    return tile


def encode_png(tile: PixelBuffer) -> bytes:
    """Encode an RGBA pixel buffer as PNG."""
    img = Image.fromarray(tile)
    img_bytes = io.BytesIO()
    img.save(img_bytes, format="PNG")
    return img_bytes.getvalue()


def render_tile_png(
    coords: TileCoord,
    *,
    noise: SeededNoise | None = None,
    variant: FieldVariant = FieldVariant.TORUS,
    palette: Palette = Palette.ELEVATION,
) -> bytes:
    """Render a tile and encode it as PNG."""
    t_start = time.perf_counter()
    tile = render_tile(coords, noise=noise, variant=variant, palette=palette)
    t_render = time.perf_counter()
    content = encode_png(tile)
    t_end = time.perf_counter()

    logger.debug(
        "[Tiles] %s rendered in %.1fms, encoded in %.1fms (%d bytes, %s/%s)",
        coords,
        (t_render - t_start) * 1000,
        (t_end - t_render) * 1000,
        len(content),
        variant,
        palette,
    )
    return content
