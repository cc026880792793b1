"""Plane geometry helpers: equilateral triangles, regular polygons, oscillation."""

from __future__ import annotations

import math
from dataclasses import dataclass

_SQRT3 = math.sqrt(3.0)

_POLYGONS = {
    49: (3, "triangle"),
    50: (4, "carré"),
    51: (5, "pentagone"),
    52: (6, "hexagone"),
    53: (7, "heptagone"),
    54: (8, "octogone"),
    55: (9, "nonagone"),
    56: (10, "décagone"),
    57: (11, "hendécagone"),
    48: (12, "dodécagone"),
}


@dataclass(frozen=True)
class EquilateralTriangle:
    """An upright equilateral triangle centred on a point."""

    center_x: float
    center_y: float
    edge_half: float

    @classmethod
    def from_viewport(cls, width: float, height: float) -> "EquilateralTriangle":
        """Triangle centred in a viewport, its edge two thirds of the short side."""
        return cls(width / 2.0, height / 2.0, min(width, height) / 3.0)

    @property
    def edge(self) -> float:
        return self.edge_half * 2.0

    @property
    def inner_radius(self) -> float:
        return self.edge * _SQRT3 / 6.0

    @property
    def circum_radius(self) -> float:
        return self.edge * _SQRT3 / 3.0

    @property
    def altitude(self) -> float:
        return self.edge_half * _SQRT3

    @property
    def perimeter(self) -> float:
        return self.edge * 3.0

    @property
    def area(self) -> float:
        return self.edge * self.edge * (_SQRT3 / 4.0)

    @property
    def origin(self) -> tuple[float, float]:
        """Foot of the median from the top vertex on the opposite edge."""
        return (self.center_x, self.center_y + self.inner_radius)

    @property
    def vertices(self) -> tuple[tuple[float, float], ...]:
        """Top vertex first, then the right and left base vertices."""
        ox, oy = self.origin
        return (
            (ox, oy - self.altitude),
            (ox + self.edge_half, oy),
            (ox - self.edge_half, oy),
        )


def regular_polygon_vertices(
    side: int, center_x: float, center_y: float, radius: float
) -> list[tuple[float, float]]:
    """Vertices of a regular polygon, the first one straight above the centre."""
    if side < 3:
        raise ValueError(f"a regular polygon needs at least 3 sides, got {side}")
    start = math.radians(-90.0)
    offset = math.radians(360.0 / side)
    return [
        (
            center_x + math.cos(start + k * offset) * radius,
            center_y + math.sin(start + k * offset) * radius,
        )
        for k in range(side)
    ]


def polygon_for_key(key: int) -> tuple[int, str] | None:
    """Side count and name selected by a digit key, or None for other keys."""
    return _POLYGONS.get(key)


def oscillate(time: float, amplitude: float, frequency: float) -> float:
    """Sinusoidal offset with the given amplitude and period."""
    if frequency == 0:
        return math.nan
    return amplitude * math.sin(time * 2.0 * math.pi / frequency)


@dataclass
class Oscillator:
    """Two independent oscillations moving a point around a viewport centre."""

    amplitude_x: float = 127.0
    amplitude_y: float = 63.0
    frequency_x: float = 3.0
    frequency_y: float = 6.0

    def position(self, time: float, width: float, height: float) -> tuple[float, float]:
        """Position of the animated point at the given time."""
        return (
            width / 2.0 - oscillate(time, self.amplitude_x, self.frequency_x),
            height / 2.0 - oscillate(time, self.amplitude_y, self.frequency_y),
        )