"""API routes for the planet tile server."""

from planet_tiles.routes.tiles import router as tiles_router

__all__ = [
    "tiles_router",
]
