"""Pytest configuration and fixtures for planet tile tests."""

import math

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from planet_tiles.main import app
from planet_tiles.terrain.noise import SeededNoise, get_noise


class StubNoise:
    """Cheap smooth stand-in for the noise primitive.

    Evaluates trigonometric polynomials, so full-size renders stay fast.
    """

    def sample_3d(self, x: float, y: float, z: float) -> float:
        return 0.5 * math.sin(3 * x + y) * math.cos(2 * z)

    def sample_4d(self, x: float, y: float, z: float, w: float) -> float:
        return 0.6 * math.sin(2 * x + z) * math.cos(y - 3 * w)


@pytest.fixture
def noise() -> SeededNoise:
    """The seed-0 process-wide noise instance."""
    return get_noise(0)


@pytest.fixture
def seed_zero_corners() -> dict[tuple[int, int], tuple[int, int, int, int]]:
    """RGBA of the corner pixels of tile 0/0/0 for seed 0, keyed by (row, column)."""
    return {
        (0, 0): (34, 34, 136, 255),
        (0, 255): (62, 62, 164, 255),
        (255, 0): (51, 51, 153, 255),
        (255, 255): (67, 67, 169, 255),
    }


@pytest.fixture
def stub_noise() -> StubNoise:
    return StubNoise()


@pytest_asyncio.fixture
async def client():
    """Async test client for the FastAPI app."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
