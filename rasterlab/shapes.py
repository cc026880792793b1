"""A ring buffer of vector primitives drawn with mouse gestures."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum, auto

Color = tuple[int, int, int, int]

_KEY_MODES = {
    49: "PIXEL",  # key 1
    50: "POINT",  # key 2
    51: "LINE",  # key 3
    52: "RECTANGLE",  # key 4
    53: "ELLIPSE",  # key 5
}
_KEY_FILL = 102  # key f
_KEY_RESET = 114  # key r
_KEY_STROKE = 115  # key s


class VectorPrimitiveType(Enum):
    """Kinds of vector primitive; NONE marks an empty slot."""

    NONE = auto()
    PIXEL = auto()
    POINT = auto()
    LINE = auto()
    RECTANGLE = auto()
    ELLIPSE = auto()


@dataclass
class VectorPrimitive:
    """One primitive: two corner positions, a stroke width and two colours."""

    type: VectorPrimitiveType = VectorPrimitiveType.NONE
    position1: tuple[float, float] = (0.0, 0.0)
    position2: tuple[float, float] = (0.0, 0.0)
    stroke_width: float = 0.0
    stroke_color: Color = (0, 0, 0, 0)
    fill_color: Color = (0, 0, 0, 0)


def pixel_cell(x: float, y: float) -> tuple[int, int]:
    """Integer coordinates of the pixel containing the position (x, y)."""
    return (math.floor(x), math.floor(y))


def ellipse_bounds(
    x1: float, y1: float, x2: float, y2: float
) -> tuple[float, float, float, float]:
    """Centre and diameters (cx, cy, dx, dy) of the ellipse inscribed in a box."""
    diameter_x = x2 - x1
    diameter_y = y2 - y1
    return (x1 + diameter_x / 2.0, y1 + diameter_y / 2.0, diameter_x, diameter_y)


def _random_color(rng: random.Random) -> Color:
    return (
        int(rng.uniform(0, 255)),
        int(rng.uniform(0, 255)),
        int(rng.uniform(0, 255)),
        255,
    )


@dataclass
class ShapeBuffer:
    """Fixed-size ring of primitives; the oldest is overwritten when full."""

    capacity: int = 100
    draw_mode: VectorPrimitiveType = VectorPrimitiveType.RECTANGLE
    stroke_width_default: float = 2.0
    rng: random.Random = field(default_factory=random.Random, repr=False)
    shapes: list[VectorPrimitive] = field(init=False, default_factory=list)
    head: int = field(init=False, default=0)
    stroke_color: Color = field(init=False, default=(0, 0, 0, 255))
    fill_color: Color = field(init=False, default=(0, 0, 0, 255))
    mouse_press: tuple[int, int] = field(init=False, default=(0, 0))
    mouse_current: tuple[int, int] = field(init=False, default=(0, 0))
    is_mouse_button_pressed: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValueError("capacity must be positive")
        self.shapes = [VectorPrimitive() for _ in range(self.capacity)]
        self.random_color_stroke()
        self.random_color_fill()

    def reset(self) -> None:
        """Empty every slot and start again from the first one."""
        for shape in self.shapes:
            shape.type = VectorPrimitiveType.NONE
        self.head = 0

    def add_shape(self, kind: VectorPrimitiveType) -> VectorPrimitive:
        """Store a primitive spanning the press and current positions."""
        if kind is VectorPrimitiveType.POINT:
            width = self.rng.uniform(1, 64)
        elif kind is VectorPrimitiveType.LINE:
            width = self.rng.uniform(1, 16)
        else:
            width = self.stroke_width_default
        shape = VectorPrimitive(
            type=kind,
            position1=(float(self.mouse_press[0]), float(self.mouse_press[1])),
            position2=(float(self.mouse_current[0]), float(self.mouse_current[1])),
            stroke_width=width,
            stroke_color=self.stroke_color,
            fill_color=self.fill_color,
        )
        self.shapes[self.head] = shape
        self.head = (self.head + 1) % self.capacity
        return shape

    def random_color_stroke(self) -> Color:
        """Pick a new random opaque stroke colour."""
        self.stroke_color = _random_color(self.rng)
        return self.stroke_color

    def random_color_fill(self) -> Color:
        """Pick a new random opaque fill colour."""
        self.fill_color = _random_color(self.rng)
        return self.fill_color

    def press(self, x: int, y: int) -> None:
        """Mouse button pressed: the start of a new primitive."""
        self.is_mouse_button_pressed = True
        self.mouse_current = (x, y)
        self.mouse_press = (x, y)

    def move(self, x: int, y: int) -> None:
        """Pointer moved or dragged."""
        self.mouse_current = (x, y)

    def release(self, x: int, y: int) -> VectorPrimitive:
        """Mouse button released: add a primitive of the current draw mode."""
        self.is_mouse_button_pressed = False
        self.mouse_current = (x, y)
        return self.add_shape(self.draw_mode)

    def key_released(self, key: int) -> None:
        """Keys 1-5 choose the mode; f and s recolour; r clears the buffer."""
        if key in _KEY_MODES:
            self.draw_mode = VectorPrimitiveType[_KEY_MODES[key]]
        elif key == _KEY_FILL:
            self.random_color_fill()
        elif key == _KEY_RESET:
            self.reset()
        elif key == _KEY_STROKE:
            self.random_color_stroke()

    def active(self) -> list[VectorPrimitive]:
        """Stored primitives in slot order, empty slots left out."""
        return [s for s in self.shapes if s.type is not VectorPrimitiveType.NONE]