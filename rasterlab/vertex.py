"""Vertex layout, indexed triangle meshes, vertex buffers and buffer swapping."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, NamedTuple, TypeVar

_VERTEX_FORMAT = struct.Struct("<3f3f2f4B")
VERTEX_SIZE = _VERTEX_FORMAT.size

Vector3 = tuple[float, float, float]
Vector2 = tuple[float, float]
Color = tuple[int, int, int, int]


@dataclass(frozen=True)
class Vertex:
    """Position, normal, texture coordinates and RGBA colour of one vertex."""

    position: Vector3 = (0.0, 0.0, 0.0)
    normal: Vector3 = (0.0, 0.0, 0.0)
    texcoord: Vector2 = (0.0, 0.0)
    color: Color = (255, 255, 255, 255)

    def pack(self) -> bytes:
        """Interleaved little-endian bytes: 8 floats then 4 unsigned bytes."""
        try:
            return _VERTEX_FORMAT.pack(
                *self.position, *self.normal, *self.texcoord, *self.color
            )
        except struct.error as error:
            raise ValueError(f"vertex cannot be packed: {error}") from error

    @classmethod
    def unpack(cls, data: bytes) -> "Vertex":
        """Vertex read back from its packed bytes."""
        if len(data) != VERTEX_SIZE:
            raise ValueError(f"a vertex takes {VERTEX_SIZE} bytes, got {len(data)}")
        values = _VERTEX_FORMAT.unpack(data)
        return cls(
            position=values[0:3],
            normal=values[3:6],
            texcoord=values[6:8],
            color=values[8:12],
        )


class AttributeType(Enum):
    """Component type of a vertex attribute, with its size in bytes."""

    FLOAT = 4
    UNSIGNED_BYTE = 1


@dataclass(frozen=True)
class Attribute:
    """Where one attribute sits in the interleaved vertex structure."""

    name: str
    location: int
    components: int
    kind: AttributeType
    normalized: bool
    offset: int
    stride: int = VERTEX_SIZE

    @property
    def size(self) -> int:
        return self.components * self.kind.value


def attribute_layout() -> list[Attribute]:
    """Attributes of a vertex in location order, with their byte offsets."""
    specs = (
        ("position", 3, AttributeType.FLOAT, False),
        ("normal", 3, AttributeType.FLOAT, False),
        ("texcoord", 2, AttributeType.FLOAT, False),
        ("color", 4, AttributeType.UNSIGNED_BYTE, True),
    )
    layout = []
    offset = 0
    for location, (name, components, kind, normalized) in enumerate(specs):
        attribute = Attribute(name, location, components, kind, normalized, offset)
        layout.append(attribute)
        offset += attribute.size
    return layout


@dataclass
class Mesh:
    """Triangles indexed by their three vertices."""

    vertices: list[Vertex] = field(default_factory=list)
    triangles: list[tuple[int, int, int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        count = len(self.vertices)
        for triangle in self.triangles:
            if len(triangle) != 3:
                raise ValueError(f"a triangle needs 3 vertex indices: {triangle}")
            for index in triangle:
                if not 0 <= index < count:
                    raise IndexError(f"vertex index out of range: {index}")

    @property
    def indices(self) -> list[int]:
        """Flat index array, three per triangle."""
        return [index for triangle in self.triangles for index in triangle]

    def triangle_vertices(self, index: int) -> tuple[Vertex, Vertex, Vertex]:
        """The three vertices of a triangle."""
        if not 0 <= index < len(self.triangles):
            raise IndexError(f"triangle index out of range: {index}")
        a, b, c = self.triangles[index]
        return (self.vertices[a], self.vertices[b], self.vertices[c])


class VertexBuffer:
    """Packed vertex data; only a dynamic buffer may be updated after creation."""

    def __init__(self, vertices: list[Vertex], dynamic: bool = False) -> None:
        self.dynamic = dynamic
        self.data = bytearray(b"".join(vertex.pack() for vertex in vertices))

    def __len__(self) -> int:
        return len(self.data) // VERTEX_SIZE

    @property
    def size(self) -> int:
        """Size of the buffer in bytes."""
        return len(self.data)

    def update(self, offset: int, vertices: list[Vertex]) -> None:
        """Overwrite a continuous run of vertices starting at offset."""
        if not self.dynamic:
            raise ValueError("a static vertex buffer cannot be updated")
        if offset < 0 or offset + len(vertices) > len(self):
            raise IndexError("update range falls outside the buffer")
        start = offset * VERTEX_SIZE
        payload = b"".join(vertex.pack() for vertex in vertices)
        self.data[start:start + len(payload)] = payload

    def vertex(self, index: int) -> Vertex:
        """Vertex stored at index."""
        if not 0 <= index < len(self):
            raise IndexError(f"vertex index out of range: {index}")
        start = index * VERTEX_SIZE
        return Vertex.unpack(bytes(self.data[start:start + VERTEX_SIZE]))


T = TypeVar("T")


class FrameBuffers(NamedTuple):
    """Buffer written this frame (None when nothing changed) and buffer drawn."""

    update: object
    draw: object


@dataclass
class BufferSwap(Generic[T]):
    """Two buffers alternating between update and draw roles across frames."""

    alpha: T
    beta: T
    is_ready_to_swap: bool = True
    is_in_order: bool = True
    update_buffer: T | None = field(init=False, default=None)
    draw_buffer: T | None = field(init=False, default=None)

    def frame(self, updated: bool) -> FrameBuffers:
        """Swap if a previous update asked for it, then report the frame's buffers."""
        if self.is_ready_to_swap:
            if self.is_in_order:
                self.update_buffer, self.draw_buffer = self.alpha, self.beta
                self.is_in_order = False
            else:
                self.update_buffer, self.draw_buffer = self.beta, self.alpha
                self.is_in_order = True
            self.is_ready_to_swap = False
        if updated:
            self.is_ready_to_swap = True
            return FrameBuffers(self.update_buffer, self.draw_buffer)
        return FrameBuffers(None, self.draw_buffer)