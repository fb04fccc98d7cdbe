"""Elevation fields sampled at world-space points.

World coordinates run from -2.0 to +2.0 along both axes. Dividing by 2 and
multiplying by pi turns a coordinate into an angle in [-pi, pi], so the
world edge lands on a full turn and the noise input repeats with period 4.

The default field wraps x around one circle and y around a second circle and
samples 4D noise on the resulting torus, which is seamless along both axes.
"""

import math
from enum import StrEnum

import numpy as np
from numpy.typing import NDArray

from planet_tiles.terrain.geometry import Vector
from planet_tiles.terrain.noise import SeededNoise

# Refinement octaves added on top of the zoom level
EXTRA_OCTAVES = 16

# Iteration cap for the Mandelbrot field
MANDELBROT_MAX_ITER = 1000


class FieldVariant(StrEnum):
    """Available elevation fields."""

    TORUS = "torus"
    SPHERE = "sphere"
    MANDELBROT = "mandelbrot"


def _circle(coordinate: float, scale: float) -> tuple[float, float]:
    angle = coordinate / 2 * scale * math.pi
    return math.cos(angle), math.sin(angle)


def _torus_point(c: Vector, scale: float) -> tuple[float, float, float, float]:
    """Project c onto two unit circles at the given angular frequency."""
    cos_x, sin_x = _circle(c.x, scale)
    cos_y, sin_y = _circle(c.y, scale)
    return cos_x, cos_y, sin_x, sin_y


def _octave_scales(zoom: int) -> list[float]:
    """Frequency of each octave, base octave first."""
    scales = [1.0]
    for _ in range(zoom + EXTRA_OCTAVES):
        scales.append(scales[-1] * 2)
    return scales


def torus_elevation(c: Vector, zoom: int, noise: SeededNoise) -> float:
    """Fractal 4D noise on a torus, seamless in both directions.

    Args:
        c: World-space point
        zoom: Zoom level of the tile being rendered; the field sums
            zoom + 16 refinement octaves on top of the base octave
        noise: Noise primitive

    Returns:
        Elevation, mostly in [-1.0, 1.4]
    """
    scales = _octave_scales(zoom)
    value = noise.sample_4d(*_torus_point(c, scales[0]))
    for scale in scales[1:]:
        value += noise.sample_4d(*_torus_point(c, scale)) / scale

    return value


def sphere_elevation(c: Vector, zoom: int, noise: SeededNoise) -> float:
    """Single-octave 3D noise with x wrapped around a circle.

    Seamless horizontally only; y is passed through linearly.
    """
    nx = math.cos(c.x / 2 * math.pi)
    nz = math.sin(c.x / 2 * math.pi)
    ny = c.y / 2
    return noise.sample_3d(nx, ny, nz)


def mandelbrot_elevation(c: Vector, zoom: int, noise: SeededNoise) -> float:
    """Smoothed escape-time count of c, or 0 for points in the Mandelbrot set."""
    point = complex(c.x, c.y)
    z = 0j
    for i in range(MANDELBROT_MAX_ITER):
        z = z * z + point
        if z.real * z.real + z.imag * z.imag > 4:
            # Two extra iterations reduce the smoothing error
            z = z * z + point
            z = z * z + point
            return i - math.log(math.log(abs(z))) / math.log(2)
    return 0.0


_FIELDS = {
    FieldVariant.TORUS: torus_elevation,
    FieldVariant.SPHERE: sphere_elevation,
    FieldVariant.MANDELBROT: mandelbrot_elevation,
}


def elevation(
    c: Vector,
    zoom: int,
    noise: SeededNoise,
    variant: FieldVariant = FieldVariant.TORUS,
) -> float:
    """Evaluate the selected elevation field at a world-space point.

    Raises:
        ValueError: If c is not finite
    """
    if not (math.isfinite(c.x) and math.isfinite(c.y)):
        raise ValueError(f"World coordinate must be finite, got {c}")
    return _FIELDS[variant](c, zoom, noise)


def torus_elevation_grid(
    xs: NDArray[np.float64], ys: NDArray[np.float64], zoom: int, noise: SeededNoise
) -> NDArray[np.float64]:
    """Evaluate torus_elevation at every (xs[px], ys[py]) pair.

    Each circle projection depends on a single axis, so it is computed once
    per column and row for every octave and only the noise lookups run per
    pixel. Values are identical to the per-point field.

    Returns:
        float64 array of shape (len(ys), len(xs))
    """
    scales = _octave_scales(zoom)
    columns = [[_circle(float(x), scale) for scale in scales] for x in xs]
    values = np.empty((len(ys), len(xs)), dtype=np.float64)
    sample = noise.sample_4d

    for py, y in enumerate(ys):
        row = [_circle(float(y), scale) for scale in scales]
        cos_y, sin_y = row[0]
        for px, column in enumerate(columns):
            cos_x, sin_x = column[0]
            value = sample(cos_x, cos_y, sin_x, sin_y)
            for scale, (cx, sx), (cy, sy) in zip(scales[1:], column[1:], row[1:]):
                value += sample(cx, cy, sx, sy) / scale
            values[py, px] = value

    return values


def elevation_grid(
    xs: NDArray[np.float64],
    ys: NDArray[np.float64],
    zoom: int,
    noise: SeededNoise,
    variant: FieldVariant = FieldVariant.TORUS,
) -> NDArray[np.float64]:
    """Evaluate the selected field over a pixel grid, indexed [row, column].

    Raises:
        ValueError: If any coordinate is not finite
    """
    if not (np.isfinite(xs).all() and np.isfinite(ys).all()):
        raise ValueError("World coordinates must be finite")
    if variant == FieldVariant.TORUS:
        return torus_elevation_grid(xs, ys, zoom, noise)

    field = _FIELDS[variant]
    values = np.empty((len(ys), len(xs)), dtype=np.float64)
    for py, y in enumerate(ys):
        for px, x in enumerate(xs):
            values[py, px] = field(Vector(float(x), float(y)), zoom, noise)
    return values
