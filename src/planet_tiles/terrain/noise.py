"""Noise primitive for the elevation field, backed by OpenSimplex."""

from functools import lru_cache

from opensimplex import OpenSimplex


class SeededNoise:
    """Deterministic 3D and 4D gradient noise with a fixed seed.

    The permutation tables are built once in the constructor and only read
    afterwards, so one instance can be shared between threads.
    """

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._simplex = OpenSimplex(seed=seed)

    def sample_3d(self, x: float, y: float, z: float) -> float:
        """Sample 3D noise at the given coordinates. Returns value in about [-1, 1]."""
        return self._simplex.noise3(x, y, z)

    def sample_4d(self, x: float, y: float, z: float, w: float) -> float:
        """Sample 4D noise at the given coordinates. Returns value in about [-1, 1]."""
        return self._simplex.noise4(x, y, z, w)


@lru_cache(maxsize=8)
def get_noise(seed: int) -> SeededNoise:
    """Return the process-wide noise instance for a seed."""
    return SeededNoise(seed)
