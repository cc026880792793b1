"""A soup of small random triangles spread over a sphere or a bowl."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

Vector3 = tuple[float, float, float]
Color = tuple[int, int, int, int]


@dataclass(frozen=True)
class Triangle:
    """Three vertex positions and an RGBA colour."""

    position1: Vector3
    position2: Vector3
    position3: Vector3
    color: Color

    @property
    def vertices(self) -> tuple[Vector3, Vector3, Vector3]:
        return (self.position1, self.position2, self.position3)


def _normalize(vector: Vector3) -> Vector3:
    length = math.sqrt(sum(c * c for c in vector))
    if length == 0:
        return vector
    return (vector[0] / length, vector[1] / length, vector[2] / length)


@dataclass
class TriangleSoup:
    """Triangles scattered around a sphere, or its lower half (the bowl)."""

    capacity: int = 2500
    triangle_radius: float = 16.0
    soup_proportion: float = 0.4
    bowl_or_ball: bool = True
    rng: random.Random = field(default_factory=random.Random, repr=False)
    triangles: list[Triangle] = field(init=False, default_factory=list)
    center: tuple[float, float] = field(init=False, default=(0.0, 0.0))
    soup_radius: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValueError("capacity must be positive")

    def _jitter(self, origin: Vector3) -> Vector3:
        r = self.triangle_radius
        return (
            origin[0] + self.rng.uniform(-r, r),
            origin[1] + self.rng.uniform(-r, r),
            origin[2] + self.rng.uniform(-r, r),
        )

    def dispatch(self, count: int, extent: float) -> list[Triangle]:
        """Place count triangles around a sphere of radius extent.

        Requests with a non-positive count or extent, or more triangles than
        the capacity, leave the soup as it is.
        """
        if count <= 0 or extent <= 0 or count > self.capacity:
            return self.triangles
        triangles = []
        for _ in range(count):
            x, y, z = _normalize(
                (
                    self.rng.uniform(-1.0, 1.0),
                    self.rng.uniform(-1.0, 1.0),
                    self.rng.uniform(-1.0, 1.0),
                )
            )
            if self.bowl_or_ball:
                z = -abs(z)
            origin = (x * extent, y * extent, z * extent)
            p1 = self._jitter(origin)
            p2 = self._jitter(origin)
            p3 = self._jitter(origin)
            color = (
                int(self.rng.uniform(0, 255)),
                int(self.rng.uniform(0, 255)),
                int(self.rng.uniform(0, 255)),
                255,
            )
            triangles.append(Triangle(p1, p2, p3, color))
        self.triangles = triangles
        return self.triangles

    def reset(self, width: float, height: float) -> list[Triangle]:
        """Refill the soup to capacity, sized to the viewport."""
        self.center = (width / 2.0, height / 2.0)
        self.soup_radius = min(width, height) * self.soup_proportion
        return self.dispatch(self.capacity, self.soup_radius)

    def toggle_shape(self, width: float, height: float) -> list[Triangle]:
        """Switch between bowl and ball, then refill the soup."""
        self.bowl_or_ball = not self.bowl_or_ball
        return self.reset(width, height)