"""Keyboard-driven movement over time and a per-frame clock."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum


class Key(IntEnum):
    """Key codes that drive movement."""

    LEFT = 57356
    UP = 57357
    RIGHT = 57358
    DOWN = 57359
    X = 120
    Z = 122


_VERTICAL_KEYS = frozenset({Key.X, Key.Z})


@dataclass
class Navigator:
    """Scene offsets moved at a constant speed while arrow keys are held.

    Up/down move along Z, left/right along X. With ``vertical`` set, the
    z and x keys also move along Y. Releasing any other key resets the
    offsets when ``reset_on_other_key`` is set.
    """

    speed: float = 100.0
    vertical: bool = False
    reset_on_other_key: bool = True
    offset_x: float = 0.0
    offset_y: float = 0.0
    offset_z: float = 0.0
    held: set[Key] = field(default_factory=set)

    def _movement_key(self, key: int) -> Key | None:
        try:
            code = Key(key)
        except ValueError:
            return None
        if code in _VERTICAL_KEYS and not self.vertical:
            return None
        return code

    def key_pressed(self, key: int) -> bool:
        """Start moving for a movement key; return whether the key was one."""
        code = self._movement_key(key)
        if code is None:
            return False
        self.held.add(code)
        return True

    def key_released(self, key: int) -> bool:
        """Stop moving for a movement key; other keys may reset the offsets."""
        code = self._movement_key(key)
        if code is None:
            if self.reset_on_other_key:
                self.reset()
            return False
        self.held.discard(code)
        return True

    def advance(self, elapsed: float) -> tuple[float, float, float]:
        """Move for ``elapsed`` seconds according to the held keys."""
        step = self.speed * elapsed
        if Key.UP in self.held:
            self.offset_z += step
        if Key.DOWN in self.held:
            self.offset_z -= step
        if Key.LEFT in self.held:
            self.offset_x += step
        if Key.RIGHT in self.held:
            self.offset_x -= step
        if Key.Z in self.held:
            self.offset_y += step
        if Key.X in self.held:
            self.offset_y -= step
        return (self.offset_x, self.offset_y, self.offset_z)

    def reset(self) -> None:
        """Bring the offsets back to the origin."""
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.offset_z = 0.0


@dataclass
class FrameClock:
    """Time since the previous frame, frame count and derived values."""

    time_last: float = 0.0
    time_current: float = 0.0
    time_elapsed: float = 0.0
    frame: int = 0

    def tick(self, now: float) -> float:
        """Record a new frame at time ``now``; return the elapsed seconds."""
        self.time_current = now
        self.time_elapsed = now - self.time_last
        self.time_last = now
        self.frame += 1
        return self.time_elapsed

    @property
    def fps(self) -> float:
        """Frame rate implied by the last elapsed time."""
        if self.time_elapsed == 0:
            return math.inf
        return 1.0 / self.time_elapsed

    @property
    def gray(self) -> int:
        """Background gray level cycling with the frame number."""
        return self.frame % 255