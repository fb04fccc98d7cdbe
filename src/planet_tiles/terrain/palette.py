"""Colour palettes mapping elevation values to RGBA.

Channels are computed as fractions and converted with ``int(channel * 255)``.
Fractions are not clamped first: at a few band edges a channel lands a hair
outside [0, 1] and truncation toward zero absorbs it.
"""

import math
from enum import StrEnum

from planet_tiles.terrain.types import Color

# Multiplier spreading elevation over the hue wheel
HUE_MULTIPLIER = 215


class Palette(StrEnum):
    """Available palettes."""

    ELEVATION = "elevation"
    HUE = "hue"


def _to_color(r: float, g: float, b: float) -> Color:
    return Color(int(r * 0xFF), int(g * 0xFF), int(b * 0xFF), 0xFF)


def colourise_by_value(value: float) -> Color:
    """Map elevation to a biome colour.

    Bands, by exclusive upper bound: deep water (-0.1), shallow water (0.2),
    sand (0.201), grassland (0.40), greenery (0.60), mountains (0.90),
    pale snow (1.2), white snow above.
    """
    if value < -0.1:
        # Dark blue water
        r, g, b = 0.0, 0.0, 0.4
    elif value < 0.2:
        # Blue water
        r = 0.1 + value
        g = 0.1 + value
        b = 0.5 + value
    elif value < 0.201:
        # Yellow sand
        r = 500 * (0.202 - value)
        g = 500 * (0.202 - value)
        b = 250 * (0.202 - value)
    elif value < 0.40:
        # Grasslands
        maximum = 0.60
        r = 1.2 * (maximum - value)
        g = 1.6 * (maximum - value)
        b = 0.8 * (maximum - value)
    elif value < 0.60:
        # Greenery
        maximum = 0.90
        r = 0.2 * (maximum - value)
        g = 0.8 * (maximum - value)
        b = 0.1 * (maximum - value)
    elif value < 0.90:
        # Mountains
        maximum = 0.90
        minimum = 0.10
        diff = maximum - minimum
        r = 0.8 / diff * (value - minimum)
        g = 0.7 / diff * (value - minimum)
        b = 0.6 / diff * (value - minimum)
    elif value < 1.2:
        # Pale snow
        r = g = b = 0.8 * value
    else:
        # White snow
        r = g = b = 1.0
    return _to_color(r, g, b)


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> Color:
    """Convert an HSL colour to RGBA.

    Inputs in range always give channel fractions in [0, 1], so the output
    channels are not checked again after the lightness offset is added.

    Args:
        hue: Degrees in [0, 360]
        saturation: Fraction in [0, 1]
        lightness: Fraction in [0, 1]

    Raises:
        ValueError: If any argument is out of range
    """
    if not 0 <= hue <= 360:
        raise ValueError(f"hue must be from 0 to 360, got {hue}")
    if not 0 <= saturation <= 1:
        raise ValueError(f"saturation must be between 0 and 1, got {saturation}")
    if not 0 <= lightness <= 1:
        raise ValueError(f"lightness must be between 0 and 1, got {lightness}")

    chroma = (1 - abs(2 * lightness - 1)) * saturation
    sextant = hue / 60
    x = chroma * (1 - abs(math.fmod(sextant, 2) - 1))

    if sextant <= 1:
        r, g, b = chroma, x, 0.0
    elif sextant <= 2:
        r, g, b = x, chroma, 0.0
    elif sextant <= 3:
        r, g, b = 0.0, chroma, x
    elif sextant <= 4:
        r, g, b = 0.0, x, chroma
    elif sextant <= 5:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    m = lightness - 0.5 * chroma
    return _to_color(r + m, g + m, b + m)


def colourise_by_hue(value: float) -> Color:
    """Map a value onto the hue wheel at half saturation and lightness."""
    value *= HUE_MULTIPLIER
    return hsl_to_rgb(math.fmod(value + 360, 360), 0.5, 0.5)


_PALETTES = {
    Palette.ELEVATION: colourise_by_value,
    Palette.HUE: colourise_by_hue,
}


def colourise(value: float, palette: Palette = Palette.ELEVATION) -> Color:
    """Map a value to a colour with the selected palette."""
    return _PALETTES[palette](value)
