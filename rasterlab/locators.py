"""Scenes of randomly placed transform locators, with per-attribute toggles."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum, auto

Vector3 = tuple[float, float, float]

_KEY_ROTATION = 101  # key e
_KEY_FLIP = 102  # key f
_KEY_PROPORTION = 114  # key r
_KEY_TRANSLATION = 119  # key w

# Arrow keys drive camera movement elsewhere; they never reset the scene.
_ARROW_KEYS = frozenset({57356, 57357, 57358, 57359})

_ORIGIN: Vector3 = (0.0, 0.0, 0.0)
_UNIT: Vector3 = (1.0, 1.0, 1.0)


class MeshRenderMode(Enum):
    """How a mesh instance is drawn."""

    FILL = auto()
    WIREFRAME = auto()
    VERTEX = auto()


_KEY_MESH_MODES = {
    49: MeshRenderMode.FILL,  # key 1
    50: MeshRenderMode.WIREFRAME,  # key 2
    51: MeshRenderMode.VERTEX,  # key 3
}


@dataclass(frozen=True)
class Locator:
    """Translation, rotation (degrees) and proportion of one instance."""

    position: Vector3 = _ORIGIN
    rotation: Vector3 = _ORIGIN
    proportion: Vector3 = _UNIT


@dataclass
class LocatorScene:
    """A bounded set of locators scattered in a cube around the origin."""

    capacity: int = 100
    scale_min: float = 0.1
    scale_max: float = 2.0
    extent_factor: float = 1.0
    reset_on_other_key: bool = True
    mesh_keys: bool = False
    is_flip_axis_y: bool = False
    is_active_translation: bool = True
    is_active_rotation: bool = False
    is_active_proportion: bool = False
    mesh_render_mode: MeshRenderMode = MeshRenderMode.FILL
    rng: random.Random = field(default_factory=random.Random, repr=False)
    locators: list[Locator] = field(init=False, default_factory=list)
    width: float = field(init=False, default=0.0)
    height: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        if self.capacity <= 0:
            raise ValueError("capacity must be positive")
        if self.scale_min > self.scale_max:
            raise ValueError("scale_min must not exceed scale_max")

    def dispatch(self, count: int, extent: float) -> list[Locator]:
        """Scatter count locators in a cube of side extent.

        Requests with a non-positive count or extent, or more locators than
        the capacity, leave the scene as it is.
        """
        if count <= 0 or extent <= 0 or count > self.capacity:
            return self.locators
        half = extent / 2.0
        locators = []
        for _ in range(count):
            position = (
                self.rng.uniform(-half, half),
                self.rng.uniform(-half, half),
                self.rng.uniform(-half, half),
            )
            rotation = (0.0, self.rng.uniform(0.0, 360.0), 0.0)
            scale = self.rng.uniform(self.scale_min, self.scale_max)
            locators.append(Locator(position, rotation, (scale, scale, scale)))
        self.locators = locators
        return self.locators

    def reset(self, width: float, height: float) -> list[Locator]:
        """Refill the scene to capacity, sized to the visible viewport."""
        self.width = width
        self.height = height
        extent = min(width * self.extent_factor, height * self.extent_factor)
        return self.dispatch(self.capacity, extent)

    def transforms(self) -> list[Locator]:
        """Locators as drawn: inactive attributes replaced by the identity."""
        return [
            Locator(
                locator.position if self.is_active_translation else _ORIGIN,
                locator.rotation if self.is_active_rotation else _ORIGIN,
                locator.proportion if self.is_active_proportion else _UNIT,
            )
            for locator in self.locators
        ]

    def key_released(self, key: int) -> None:
        """Toggle attributes (w, e, r), flip Y (f), pick a mesh mode (1-3)."""
        if self.mesh_keys and key in _KEY_MESH_MODES:
            self.mesh_render_mode = _KEY_MESH_MODES[key]
        elif key == _KEY_ROTATION:
            self.is_active_rotation = not self.is_active_rotation
        elif key == _KEY_FLIP:
            self.is_flip_axis_y = not self.is_flip_axis_y
        elif key == _KEY_PROPORTION:
            self.is_active_proportion = not self.is_active_proportion
        elif key == _KEY_TRANSLATION:
            self.is_active_translation = not self.is_active_translation
        elif key in _ARROW_KEYS:
            return
        elif self.reset_on_other_key:
            self.reset(self.width, self.height)


def locator_scene(
    width: float, height: float, rng: random.Random | None = None
) -> LocatorScene:
    """Scene of 100 locators with translation only, filling the viewport."""
    scene = LocatorScene(rng=rng if rng is not None else random.Random())
    scene.reset(width, height)
    return scene


def teapot_scene(
    width: float, height: float, rng: random.Random | None = None
) -> LocatorScene:
    """Scene of 100 small teapot instances with every attribute active."""
    scene = LocatorScene(
        scale_min=0.05,
        scale_max=0.35,
        extent_factor=0.6,
        reset_on_other_key=False,
        mesh_keys=True,
        is_active_translation=True,
        is_active_rotation=True,
        is_active_proportion=True,
        rng=rng if rng is not None else random.Random(),
    )
    scene.reset(width, height)
    return scene