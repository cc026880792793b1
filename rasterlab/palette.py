"""A random background colour and its inverse used as a tint."""

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass

RGB = tuple[int, int, int]

_MAX = 255


def _check(color: Sequence[int]) -> None:
    for component in color:
        if not 0 <= component <= _MAX:
            raise ValueError(f"colour component out of range: {component}")


def inverse_color(color: Sequence[int]) -> tuple[int, ...]:
    """Complement of each 8-bit component."""
    _check(color)
    return tuple(_MAX - component for component in color)


def normalized(color: Sequence[int]) -> tuple[float, ...]:
    """8-bit components scaled to the range 0.0-1.0."""
    _check(color)
    return tuple(component / float(_MAX) for component in color)


@dataclass
class ColorScheme:
    """Random colour used as background, with its inverse as tint."""

    random: RGB = (0, 0, 0)
    background: RGB = (0, 0, 0)
    tint: RGB = (_MAX, _MAX, _MAX)

    def randomize(self, rng: random.Random | None = None) -> RGB:
        """Pick a new random colour and derive background and tint from it."""
        rng = rng if rng is not None else random.Random()
        self.random = (
            int(rng.uniform(0, _MAX)),
            int(rng.uniform(0, _MAX)),
            int(rng.uniform(0, _MAX)),
        )
        self.background = self.random
        r, g, b = inverse_color(self.random)
        self.tint = (r, g, b)
        return self.random

    @property
    def tint_uniform(self) -> tuple[float, float, float, float]:
        """Tint as a normalized opaque RGBA value."""
        r, g, b = normalized(self.tint)
        return (r, g, b, 1.0)