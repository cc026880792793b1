import random

import pytest

from rasterlab.locators import (
    Locator,
    LocatorScene,
    MeshRenderMode,
    locator_scene,
    teapot_scene,
)


def _within(locators, half, scale_min, scale_max):
    for locator in locators:
        assert all(-half <= c <= half for c in locator.position)
        assert locator.rotation[0] == 0.0 and locator.rotation[2] == 0.0
        assert 0.0 <= locator.rotation[1] <= 360.0
        sx, sy, sz = locator.proportion
        assert sx == sy == sz
        assert scale_min <= sx <= scale_max


def test_locator_scene_defaults_and_bounds():
    scene = locator_scene(512, 256, random.Random(1))
    assert len(scene.locators) == 100
    assert scene.is_active_translation is True
    assert scene.is_active_rotation is False
    assert scene.is_active_proportion is False
    assert scene.is_flip_axis_y is False
    _within(scene.locators, 128, 0.1, 2.0)


def test_teapot_scene_defaults_and_bounds():
    scene = teapot_scene(200, 100, random.Random(2))
    assert len(scene.locators) == 100
    assert scene.is_active_rotation is True
    assert scene.is_active_proportion is True
    assert scene.mesh_render_mode is MeshRenderMode.FILL
    _within(scene.locators, 30, 0.05, 0.35)


def test_same_seed_gives_same_scene():
    a = locator_scene(400, 400, random.Random(7))
    b = locator_scene(400, 400, random.Random(7))
    assert a.locators == b.locators


@pytest.mark.parametrize("count, extent", [(0, 10), (-1, 10), (5, 0), (101, 10)])
def test_invalid_dispatch_keeps_scene(count, extent):
    scene = locator_scene(300, 300, random.Random(3))
    before = list(scene.locators)
    assert scene.dispatch(count, extent) == before
    assert scene.locators == before


def test_dispatch_count():
    scene = LocatorScene(rng=random.Random(4))
    result = scene.dispatch(5, 10)
    assert len(result) == 5
    _within(result, 5, 0.1, 2.0)


def test_transforms_apply_identity_for_inactive():
    scene = locator_scene(300, 300, random.Random(5))
    drawn = scene.transforms()
    for raw, shown in zip(scene.locators, drawn):
        assert shown.position == raw.position
        assert shown.rotation == (0.0, 0.0, 0.0)
        assert shown.proportion == (1.0, 1.0, 1.0)
    scene.is_active_translation = False
    assert all(t.position == (0.0, 0.0, 0.0) for t in scene.transforms())


def test_teapot_transforms_keep_everything():
    scene = teapot_scene(300, 300, random.Random(6))
    assert scene.transforms() == scene.locators


def test_toggle_keys():
    scene = locator_scene(300, 300, random.Random(8))
    scene.key_released(101)
    assert scene.is_active_rotation is True
    scene.key_released(102)
    assert scene.is_flip_axis_y is True
    scene.key_released(114)
    assert scene.is_active_proportion is True
    scene.key_released(119)
    assert scene.is_active_translation is False


def test_locator_scene_other_key_resets():
    scene = locator_scene(300, 300, random.Random(9))
    before = list(scene.locators)
    scene.key_released(32)
    assert scene.locators != before
    assert len(scene.locators) == 100


def test_arrow_key_does_not_reset():
    scene = locator_scene(300, 300, random.Random(10))
    before = list(scene.locators)
    scene.key_released(57356)
    assert scene.locators == before


def test_teapot_mesh_keys_and_no_reset():
    scene = teapot_scene(300, 300, random.Random(11))
    before = list(scene.locators)
    scene.key_released(50)
    assert scene.mesh_render_mode is MeshRenderMode.WIREFRAME
    scene.key_released(51)
    assert scene.mesh_render_mode is MeshRenderMode.VERTEX
    scene.key_released(49)
    assert scene.mesh_render_mode is MeshRenderMode.FILL
    scene.key_released(32)
    assert scene.locators == before


def test_locator_scene_ignores_mesh_keys():
    scene = locator_scene(300, 300, random.Random(12))
    scene.key_released(50)
    assert scene.mesh_render_mode is MeshRenderMode.FILL


def test_default_locator_is_identity():
    locator = Locator()
    assert locator.position == (0.0, 0.0, 0.0)
    assert locator.proportion == (1.0, 1.0, 1.0)


def test_invalid_construction():
    with pytest.raises(ValueError):
        LocatorScene(capacity=0)
    with pytest.raises(ValueError):
        LocatorScene(scale_min=2.0, scale_max=1.0)