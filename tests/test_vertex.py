import pytest

from rasterlab.vertex import (
    VERTEX_SIZE,
    AttributeType,
    BufferSwap,
    Mesh,
    Vertex,
    VertexBuffer,
    attribute_layout,
)


def _vertex(k):
    return Vertex(
        position=(float(k), 0.5, -1.25),
        normal=(0.0, 1.0, 0.0),
        texcoord=(0.25, 0.75),
        color=(k % 256, 10, 20, 255),
    )


def test_packed_size_is_36_bytes():
    assert len(_vertex(1).pack()) == 36
    assert VERTEX_SIZE == 36


def test_pack_unpack_round_trip():
    vertex = _vertex(3)
    assert Vertex.unpack(vertex.pack()) == vertex


def test_unpack_rejects_wrong_length():
    with pytest.raises(ValueError):
        Vertex.unpack(b"\x00" * 35)


def test_pack_rejects_bad_color():
    with pytest.raises(ValueError):
        Vertex(color=(256, 0, 0, 0)).pack()


def test_attribute_layout_is_contiguous():
    layout = attribute_layout()
    assert [a.name for a in layout] == ["position", "normal", "texcoord", "color"]
    assert [a.location for a in layout] == [0, 1, 2, 3]
    expected = 0
    for attribute in layout:
        assert attribute.offset == expected
        assert attribute.stride == VERTEX_SIZE
        expected += attribute.size
    assert expected == VERTEX_SIZE


def test_color_attribute_is_normalized_bytes():
    color = attribute_layout()[3]
    assert color.kind is AttributeType.UNSIGNED_BYTE
    assert color.components == 4
    assert color.normalized is True


def test_mesh_triangle_vertices():
    vertices = [_vertex(k) for k in range(4)]
    mesh = Mesh(vertices, [(0, 1, 2), (2, 3, 0)])
    assert mesh.triangle_vertices(1) == (vertices[2], vertices[3], vertices[0])
    assert mesh.indices == [0, 1, 2, 2, 3, 0]


def test_mesh_rejects_bad_index():
    with pytest.raises(IndexError):
        Mesh([_vertex(0)], [(0, 0, 1)])
    mesh = Mesh([_vertex(0)], [(0, 0, 0)])
    with pytest.raises(IndexError):
        mesh.triangle_vertices(1)


def test_vertex_buffer_round_trip():
    vertices = [_vertex(k) for k in range(5)]
    buffer = VertexBuffer(vertices)
    assert len(buffer) == 5
    assert buffer.size == 5 * VERTEX_SIZE
    assert [buffer.vertex(k) for k in range(5)] == vertices


def test_dynamic_buffer_update():
    vertices = [_vertex(k) for k in range(5)]
    buffer = VertexBuffer(vertices, dynamic=True)
    replacement = [_vertex(100), _vertex(101)]
    buffer.update(2, replacement)
    assert [buffer.vertex(k) for k in range(5)] == vertices[:2] + replacement + vertices[4:]


def test_static_buffer_cannot_update():
    buffer = VertexBuffer([_vertex(0)])
    with pytest.raises(ValueError):
        buffer.update(0, [_vertex(1)])


def test_update_out_of_range():
    buffer = VertexBuffer([_vertex(0), _vertex(1)], dynamic=True)
    with pytest.raises(IndexError):
        buffer.update(1, [_vertex(2), _vertex(3)])
    with pytest.raises(IndexError):
        buffer.vertex(2)


def test_buffer_swap_alternates():
    swap = BufferSwap("alpha", "beta")
    first = swap.frame(True)
    assert (first.update, first.draw) == ("alpha", "beta")
    second = swap.frame(False)
    assert (second.update, second.draw) == (None, "alpha")
    third = swap.frame(True)
    assert (third.update, third.draw) == ("beta", "alpha")
    fourth = swap.frame(False)
    assert fourth.draw == "beta"


def test_buffer_swap_never_draws_updated_buffer():
    swap = BufferSwap(1, 2)
    for _ in range(6):
        buffers = swap.frame(True)
        assert buffers.update != buffers.draw
        assert {buffers.update, buffers.draw} == {1, 2}