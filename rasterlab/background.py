"""Background clear colour chosen from a set of modes."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, auto

RGB = tuple[int, int, int]


class ClearMode(Enum):
    """Ways of choosing the background colour."""

    NONE = auto()
    BLACK = auto()
    WHITE = auto()
    GRAY = auto()
    COLOR = auto()
    RANDOM = auto()


_KEY_MODES = {
    49: ClearMode.NONE,  # key 1
    50: ClearMode.BLACK,  # key 2
    51: ClearMode.WHITE,  # key 3
    52: ClearMode.GRAY,  # key 4
    53: ClearMode.COLOR,  # key 5
}

_GRAY_LEVEL = 223
_FIXED_COLOR: RGB = (127, 0, 63)


@dataclass
class Background:
    """Background state; a new colour is only picked after a mode change."""

    clear_mode: ClearMode = ClearMode.NONE
    color: RGB = (127, 63, 31)
    gray: int = 0
    has_changed: bool = True
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def clear_color(self) -> RGB:
        """Colour the framebuffer is cleared to for the current frame."""
        mode = self.clear_mode
        if mode is ClearMode.BLACK:
            return (0, 0, 0)
        if mode is ClearMode.WHITE:
            return (255, 255, 255)
        if mode is ClearMode.GRAY:
            if self.has_changed:
                self.has_changed = False
                self.gray = _GRAY_LEVEL
            return (self.gray, self.gray, self.gray)
        if mode is ClearMode.COLOR:
            if self.has_changed:
                self.has_changed = False
                self.color = _FIXED_COLOR
        elif mode is ClearMode.RANDOM:
            if self.has_changed:
                self.has_changed = False
                self.color = (
                    int(self.rng.uniform(0, 255)),
                    int(self.rng.uniform(0, 255)),
                    int(self.rng.uniform(0, 255)),
                )
        return self.color

    def key_released(self, key: int) -> ClearMode:
        """Keys 1-5 pick a mode; any other key picks random. Marks a change."""
        self.clear_mode = _KEY_MODES.get(key, ClearMode.RANDOM)
        self.has_changed = True
        return self.clear_mode