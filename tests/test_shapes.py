import random

import pytest

from rasterlab.shapes import (
    ShapeBuffer,
    VectorPrimitiveType,
    ellipse_bounds,
    pixel_cell,
)


def make_buffer(capacity=100):
    return ShapeBuffer(capacity=capacity, rng=random.Random(1))


def test_pixel_cell_floors():
    assert pixel_cell(3.7, 2.2) == (3, 2)
    assert pixel_cell(-0.5, 0.0) == (-1, 0)


def test_ellipse_bounds_centre_is_midpoint():
    cx, cy, dx, dy = ellipse_bounds(10, 20, 30, 60)
    assert (cx - dx / 2, cy - dy / 2) == (10, 20)
    assert (cx + dx / 2, cy + dy / 2) == (30, 60)


def test_initial_state():
    buffer = make_buffer()
    assert buffer.draw_mode is VectorPrimitiveType.RECTANGLE
    assert buffer.active() == []
    assert len(buffer.shapes) == 100
    assert buffer.stroke_color[3] == 255
    assert buffer.fill_color[3] == 255


def test_release_adds_shape_from_press_to_release():
    buffer = make_buffer()
    buffer.press(5, 6)
    buffer.move(7, 8)
    assert buffer.is_mouse_button_pressed
    shape = buffer.release(15, 16)
    assert not buffer.is_mouse_button_pressed
    assert shape.type is VectorPrimitiveType.RECTANGLE
    assert shape.position1 == (5.0, 6.0)
    assert shape.position2 == (15.0, 16.0)
    assert shape.stroke_width == buffer.stroke_width_default
    assert shape.stroke_color == buffer.stroke_color
    assert shape.fill_color == buffer.fill_color
    assert buffer.active() == [shape]


@pytest.mark.parametrize(
    "key, mode",
    [
        (49, VectorPrimitiveType.PIXEL),
        (50, VectorPrimitiveType.POINT),
        (51, VectorPrimitiveType.LINE),
        (52, VectorPrimitiveType.RECTANGLE),
        (53, VectorPrimitiveType.ELLIPSE),
    ],
)
def test_keys_select_mode(key, mode):
    buffer = make_buffer()
    buffer.key_released(key)
    assert buffer.draw_mode is mode


def test_point_and_line_widths_are_random_in_range():
    buffer = make_buffer()
    for _ in range(20):
        assert 1 <= buffer.add_shape(VectorPrimitiveType.POINT).stroke_width <= 64
        assert 1 <= buffer.add_shape(VectorPrimitiveType.LINE).stroke_width <= 16


def test_ring_wraps_and_overwrites_oldest():
    buffer = make_buffer(capacity=3)
    for x in range(4):
        buffer.press(x, x)
        buffer.release(x, x)
    assert buffer.head == 1
    assert buffer.shapes[0].position1 == (3.0, 3.0)
    assert len(buffer.active()) == 3


def test_reset_clears():
    buffer = make_buffer()
    buffer.release(1, 1)
    buffer.key_released(114)
    assert buffer.active() == []
    assert buffer.head == 0


def test_colour_keys_change_colours_within_range():
    buffer = make_buffer()
    for _ in range(10):
        buffer.key_released(102)
        buffer.key_released(115)
        assert all(0 <= c < 255 for c in buffer.fill_color[:3])
        assert all(0 <= c < 255 for c in buffer.stroke_color[:3])


def test_unknown_key_changes_nothing():
    buffer = make_buffer()
    before = (buffer.draw_mode, buffer.stroke_color, buffer.fill_color)
    buffer.key_released(120)
    assert (buffer.draw_mode, buffer.stroke_color, buffer.fill_color) == before


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        ShapeBuffer(capacity=0)