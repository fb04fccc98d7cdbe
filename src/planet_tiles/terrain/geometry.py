"""Vector and extent arithmetic for world-space coordinates."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """A point or displacement in continuous world space."""

    x: float
    y: float

    def sub(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> "Vector":
        return Vector(self.x * factor, self.y * factor)


@dataclass(frozen=True)
class Extent:
    """An axis-aligned world-space rectangle."""

    min: Vector
    max: Vector

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    def sub(self, offset: Vector) -> "Extent":
        """Translate both corners by -offset."""
        return Extent(self.min.sub(offset), self.max.sub(offset))

    def scale(self, factor: float) -> "Extent":
        """Scale both corners about the origin."""
        return Extent(self.min.scale(factor), self.max.scale(factor))
