"""Procedural planet terrain: tile mapping, elevation fields and palettes."""

from planet_tiles.terrain.field import FieldVariant, elevation, elevation_grid
from planet_tiles.terrain.geometry import Extent, Vector
from planet_tiles.terrain.noise import SeededNoise, get_noise
from planet_tiles.terrain.palette import Palette, colourise
from planet_tiles.terrain.render import encode_png, render_tile, render_tile_png
from planet_tiles.terrain.tiles import pixel_coordinates, tile_extent
from planet_tiles.terrain.types import TILE_SIZE, Color, PixelBuffer, TileCoord

__all__ = [
    "Color",
    "Extent",
    "FieldVariant",
    "Palette",
    "PixelBuffer",
    "SeededNoise",
    "TILE_SIZE",
    "TileCoord",
    "Vector",
    "colourise",
    "elevation",
    "elevation_grid",
    "encode_png",
    "get_noise",
    "pixel_coordinates",
    "render_tile",
    "render_tile_png",
    "tile_extent",
]
