"""Tile image endpoint."""

import asyncio
import logging
import re

from fastapi import APIRouter, HTTPException, Response, status

from planet_tiles.config import settings
from planet_tiles.terrain import TileCoord, get_noise, render_tile_png

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tiles"])

_DIGITS = re.compile(r"[0-9]+")


def parse_tile_coords(z: str, x: str, y: str, max_zoom: int | None = None) -> TileCoord:
    """Parse and validate the z/x/y segments of a tile path.

    Args:
        z, x, y: Raw path segments, each a string of decimal digits
        max_zoom: Deepest zoom accepted, defaults to ``settings.max_zoom``

    Returns:
        TileCoord with 0 <= x, y < 2**z

    Raises:
        ValueError: If a segment is not a number or the tile is out of range
    """
    if max_zoom is None:
        max_zoom = settings.max_zoom

    for name, raw in (("z", z), ("x", x), ("y", y)):
        if not _DIGITS.fullmatch(raw):
            raise ValueError(f"extracting {name}: {raw!r} is not a tile index")

    coords = TileCoord(z=int(z), x=int(x), y=int(y))
    if coords.z > max_zoom:
        raise ValueError(f"zoom {coords.z} exceeds maximum of {max_zoom}")
    if not coords.is_valid():
        raise ValueError(f"invalid tile coordinates: {coords}")
    return coords


@router.get(
    "/{z}/{x}/{y}.png",
    response_class=Response,
    responses={200: {"content": {"image/png": {}}}},
)
async def get_tile(z: str, x: str, y: str) -> Response:
    """Render a 256x256 PNG tile of the planet."""
    try:
        coords = parse_tile_coords(z, x, y)
    except ValueError as e:
        logger.warning("Rejected tile request /%s/%s/%s.png: %s", z, x, y, e)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="bad request",
        ) from e

    content = await asyncio.to_thread(
        render_tile_png,
        coords,
        noise=get_noise(settings.noise_seed),
        variant=settings.field_variant,
        palette=settings.palette,
    )
    return Response(content=content, media_type="image/png")
