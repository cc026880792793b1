import math
import random

import pytest

from rasterlab.soup import TriangleSoup


def _soup(seed=7, **kwargs):
    return TriangleSoup(rng=random.Random(seed), **kwargs)


def test_reset_fills_to_capacity():
    soup = _soup()
    triangles = soup.reset(500, 1000)
    assert len(triangles) == soup.capacity
    assert soup.soup_radius == pytest.approx(soup.soup_proportion * 500)
    assert (soup.center[0] * 2, soup.center[1] * 2) == (500, 1000)


def test_vertices_lie_near_the_sphere():
    soup = _soup()
    soup.reset(400, 400)
    slack = soup.triangle_radius * math.sqrt(3.0) + 1e-6
    for triangle in soup.triangles:
        for vertex in triangle.vertices:
            distance = math.sqrt(sum(c * c for c in vertex))
            assert soup.soup_radius - slack <= distance <= soup.soup_radius + slack


def test_bowl_keeps_triangles_below_the_plane():
    soup = _soup()
    soup.reset(400, 400)
    assert soup.bowl_or_ball
    for triangle in soup.triangles:
        for vertex in triangle.vertices:
            assert vertex[2] <= soup.triangle_radius


def test_toggle_shape_gives_a_full_ball():
    soup = _soup()
    soup.reset(400, 400)
    soup.toggle_shape(400, 400)
    assert soup.bowl_or_ball is False
    assert len(soup.triangles) == soup.capacity
    assert any(
        vertex[2] > soup.triangle_radius
        for triangle in soup.triangles
        for vertex in triangle.vertices
    )


def test_colors_are_opaque_bytes():
    soup = _soup()
    soup.dispatch(50, 100.0)
    for triangle in soup.triangles:
        r, g, b, a = triangle.color
        assert all(0 <= c <= 255 for c in (r, g, b))
        assert a == 255


@pytest.mark.parametrize("count, extent", [(0, 10.0), (5, 0.0), (5, -1.0), (2501, 10.0)])
def test_invalid_dispatch_leaves_soup_unchanged(count, extent):
    soup = _soup()
    before = soup.dispatch(10, 50.0)
    after = soup.dispatch(count, extent)
    assert after == before
    assert len(soup.triangles) == 10


def test_same_seed_gives_same_soup():
    first = _soup(seed=3)
    second = _soup(seed=3)
    assert first.dispatch(20, 80.0) == second.dispatch(20, 80.0)


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        TriangleSoup(capacity=0)