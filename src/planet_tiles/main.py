"""FastAPI application entry point."""

import logging
import sys
import traceback

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from planet_tiles import __version__
from planet_tiles.config import settings
from planet_tiles.routes import tiles_router

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Planet Tiles",
    description="Slippy-map tiles of a procedurally generated, seamlessly wrapping planet",
    version=__version__,
)

# Tiles are fetched cross-origin by map viewers
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(tiles_router)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "planet-tiles"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Log unhandled errors, including PNG encoding failures, and return JSON 500."""
    logger.error(
        f"Unhandled exception on {request.method} {request.url}: {exc}\n"
        f"{traceback.format_exc()}"
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_type": type(exc).__name__,
        },
    )


def setup_logging() -> None:
    """Configure logging for the tile server."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )


def run() -> None:
    """Entry point for the tile server."""
    setup_logging()
    logger.info(
        "Planet Tiles listening on %s:%d (seed=%d, field=%s, palette=%s)",
        settings.host,
        settings.port,
        settings.noise_seed,
        settings.field_variant,
        settings.palette,
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
