"""Pointer state, the selection zone it spans, and a cross-hair cursor."""

from __future__ import annotations

from dataclasses import dataclass

Point = tuple[float, float]
Segment = tuple[Point, Point]


def clamp_zone(
    x1: float, y1: float, x2: float, y2: float, width: float, height: float
) -> tuple[float, float, float, float]:
    """Zone corners with the moving corner (x2, y2) kept inside the canvas."""
    x2_clamp = min(max(0.0, x2), float(width))
    y2_clamp = min(max(0.0, y2), float(height))
    return (x1, y1, x2_clamp, y2_clamp)


def cursor_segments(
    x: float, y: float, length: float = 10.0, offset: float = 5.0
) -> list[Segment]:
    """Four strokes of a cross-hair centred on (x, y), leaving a gap of offset."""
    return [
        ((x + offset, y), (x + offset + length, y)),
        ((x - offset, y), (x - offset - length, y)),
        ((x, y + offset), (x, y + offset + length)),
        ((x, y - offset), (x, y - offset - length)),
    ]


@dataclass
class Pointer:
    """Where the button was pressed, where the pointer is, and whether it is down."""

    press: tuple[int, int] = (0, 0)
    current: tuple[int, int] = (0, 0)
    is_mouse_button_pressed: bool = False

    def moved(self, x: int, y: int) -> None:
        """Pointer moved, dragged, entered or left the window."""
        self.current = (x, y)

    def pressed(self, x: int, y: int) -> None:
        """Button pressed: the zone starts here."""
        self.is_mouse_button_pressed = True
        self.current = (x, y)
        self.press = (x, y)

    def released(self, x: int, y: int) -> None:
        """Button released: the zone is no longer shown."""
        self.is_mouse_button_pressed = False
        self.current = (x, y)

    def zone(self, width: float, height: float) -> tuple[float, float, float, float] | None:
        """Selection zone while the button is held, clamped to the canvas."""
        if not self.is_mouse_button_pressed:
            return None
        return clamp_zone(*self.press, *self.current, width, height)