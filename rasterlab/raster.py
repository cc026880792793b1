"""Line rasterization on a grid of enlarged ("fat") pixels, with DDA and Bresenham."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto

Color = tuple[int, int, int, int]

_KEY_DDA = 49  # key 1
_KEY_BRESENHAM = 50  # key 2
_KEY_RESET = 114  # key r

_COLOR_START: Color = (255, 0, 0, 255)
_COLOR_END: Color = (0, 255, 0, 255)


class PixelState(Enum):
    """States a fat pixel can be in."""

    NONE = auto()
    ON = auto()
    OFF = auto()
    START = auto()
    END = auto()
    PREVIEW = auto()


class LineRenderer(Enum):
    """Available line rasterization algorithms."""

    NONE = auto()
    DDA = auto()
    BRESENHAM = auto()


_TITLES = {
    LineRenderer.DDA: "rastérisation de lignes (DDA)",
    LineRenderer.BRESENHAM: "rastérisation de lignes (Bresenham)",
}


@dataclass
class FatPixel:
    """One cell of the grid: its state, top-left corner and RGBA colour."""

    state: PixelState = PixelState.NONE
    position: tuple[float, float] = (0.0, 0.0)
    color: Color = (0, 0, 0, 0)


def is_position_inside_rectangle(
    x: float, y: float, x1: float, y1: float, x2: float, y2: float
) -> bool:
    """Whether (x, y) lies in the rectangle, borders included."""
    return x1 <= x <= x2 and y1 <= y <= y2


@dataclass
class FatPixelGrid:
    """A square-celled grid covering a framebuffer, drawn into by mouse gestures."""

    framebuffer_width: int = 512
    framebuffer_height: int = 512
    pixel_count: int = 16
    line_renderer: LineRenderer = LineRenderer.BRESENHAM
    color_on: Color = (255, 255, 255, 255)
    color_off: Color = (63, 63, 63, 255)
    color_preview: Color = (127, 127, 127, 255)
    pixels: list[FatPixel] = field(init=False, default_factory=list)
    mouse_press: tuple[int, int] = field(init=False, default=(0, 0))
    mouse_current: tuple[int, int] = field(init=False, default=(0, 0))
    is_mouse_button_pressed: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        if self.pixel_count <= 0:
            raise ValueError("pixel_count must be positive")
        if self.framebuffer_width < self.pixel_count or self.framebuffer_height <= 0:
            raise ValueError("framebuffer too small for the requested pixel count")
        self.resolution = self.framebuffer_width // self.pixel_count
        if self.framebuffer_height < self.resolution:
            raise ValueError("framebuffer too small for the requested pixel count")
        self.grid_width = self.framebuffer_width // self.resolution
        self.grid_height = self.framebuffer_height // self.resolution
        self.reset()

    @property
    def title(self) -> str:
        """Window title naming the active algorithm."""
        return _TITLES.get(self.line_renderer, "")

    def reset(self) -> None:
        """Turn every fat pixel off and place it on the grid."""
        count = self.grid_width * self.grid_height
        self.pixels = []
        for index in range(count):
            index_x = index % self.grid_width
            index_y = index // self.grid_width
            self.pixels.append(
                FatPixel(
                    position=(
                        float(index_x * self.resolution),
                        float(index_y * self.resolution),
                    )
                )
            )
            self.change_state(index, PixelState.OFF)

    def change_state(self, index: int, state: PixelState) -> None:
        """Set a fat pixel's state and the colour that goes with it."""
        if not 0 <= index < len(self.pixels):
            raise IndexError(f"fat pixel index out of range: {index}")
        pixel = self.pixels[index]
        pixel.state = state
        if state is PixelState.ON:
            pixel.color = self.color_on
        elif state is PixelState.OFF:
            index_x = index % self.grid_width
            index_y = index // self.grid_width
            r, g, b, a = self.color_off
            if (index_x + index_y) % 2 == 0:
                pixel.color = (63 + r, 63 + g, 63 + b, a)
            else:
                pixel.color = self.color_off
        elif state is PixelState.START:
            pixel.color = _COLOR_START
        elif state is PixelState.END:
            pixel.color = _COLOR_END
        elif state is PixelState.PREVIEW:
            pixel.color = self.color_preview

    def index_by_coord(self, x: int, y: int) -> int:
        """Index of the fat pixel at grid coordinates (x, y)."""
        return y * self.grid_width + x

    def index_by_position(self, x: float, y: float) -> int:
        """Index of the fat pixel under a framebuffer position."""
        index_x = math.floor(x / self.resolution)
        index_y = math.floor(y / self.resolution)
        return index_y * self.grid_width + index_x

    def raster_line_dda(self, x1: int, y1: int, x2: int, y2: int) -> list[int]:
        """Light a line with the DDA algorithm; return the indices lit, in order."""
        delta_x = x2 - x1
        delta_y = y2 - y1
        length = max(abs(delta_x), abs(delta_y))
        if length < 1:
            return []
        step_x = delta_x / length
        step_y = delta_y / length
        x = x1 + 0.5
        y = y1 + 0.5
        lit = []
        for _ in range(length):
            index = self.index_by_coord(int(x), int(y))
            self.change_state(index, PixelState.ON)
            lit.append(index)
            x += step_x
            y += step_y
        return lit

    def raster_line_bresenham(self, x1: int, y1: int, x2: int, y2: int) -> list[int]:
        """Light a line with Bresenham's algorithm; return the indices lit, in order."""
        delta_x = abs(x2 - x1)
        delta_y = abs(y2 - y1)
        step_x = 1 if x1 < x2 else -1
        step_y = 1 if y1 < y2 else -1
        error = delta_x // 2 if delta_x > delta_y else -(delta_y // 2)
        x, y = x1, y1
        lit = []
        while True:
            index = self.index_by_coord(x, y)
            self.change_state(index, PixelState.ON)
            lit.append(index)
            if x == x2 and y == y2:
                break
            previous = error
            if previous > -delta_x:
                error -= delta_y
                x += step_x
            if previous < delta_y:
                error += delta_x
                y += step_y
        return lit

    def _inside(self, x: float, y: float) -> bool:
        return is_position_inside_rectangle(
            x, y, 0, 0, self.framebuffer_width, self.framebuffer_height
        )

    def press(self, x: int, y: int) -> None:
        """Mouse button pressed: remember the position and light the pixel under it."""
        self.is_mouse_button_pressed = True
        self.mouse_current = (x, y)
        self.mouse_press = (x, y)
        if self._inside(x, y):
            self.change_state(self.index_by_position(x, y), PixelState.ON)

    def release(self, x: int, y: int) -> list[int]:
        """Mouse button released: rasterize from the press point; return indices lit."""
        self.is_mouse_button_pressed = False
        self.mouse_current = (x, y)
        if not self._inside(x, y):
            return []
        index1 = self.index_by_position(*self.mouse_press)
        index2 = self.index_by_position(*self.mouse_current)
        x1 = index1 % self.grid_height
        y1 = index1 // self.grid_width
        x2 = index2 % self.grid_height
        y2 = index2 // self.grid_width
        if self.line_renderer is LineRenderer.DDA:
            lit = self.raster_line_dda(x1, y1, x2, y2)
        elif self.line_renderer is LineRenderer.BRESENHAM:
            lit = self.raster_line_bresenham(x1, y1, x2, y2)
        else:
            lit = []
        self.change_state(index1, PixelState.START)
        self.change_state(index2, PixelState.END)
        return lit

    def key_released(self, key: int) -> None:
        """Keys 1 and 2 choose the algorithm, r clears the grid."""
        if key == _KEY_DDA:
            self.line_renderer = LineRenderer.DDA
        elif key == _KEY_BRESENHAM:
            self.line_renderer = LineRenderer.BRESENHAM
        elif key == _KEY_RESET:
            self.reset()