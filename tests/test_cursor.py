import pytest

from kaboom.cursor import Cursor, _buffer_layout

FLOAT_SIZE = 4


def test_crosshair_layout():
    assert _buffer_layout(Cursor.VERTICES, (2,)) == (8, 4, (0,))


def test_interleaved_layout_offsets():
    vertices = [0.0] * 30
    assert _buffer_layout(vertices, (3, 2)) == (20, 6, (0, 12))


@pytest.mark.parametrize("components", [(2,), (3, 2), (1,), (4, 1)])
def test_layout_covers_every_float(components):
    vertices = [0.0] * 40
    stride, count, offsets = _buffer_layout(vertices, components)
    assert stride * count == len(vertices) * FLOAT_SIZE
    assert len(offsets) == len(components)
    assert offsets[0] == 0


def test_layout_rejects_leftover_floats():
    with pytest.raises(ValueError):
        _buffer_layout(Cursor.VERTICES, (3,))


@pytest.mark.parametrize("components", [(), (0,), (2, -1)])
def test_layout_rejects_bad_components(components):
    with pytest.raises(ValueError):
        _buffer_layout(Cursor.VERTICES, components)


def test_crosshair_lines_meet_at_centre():
    _, count, _ = _buffer_layout(Cursor.VERTICES, (2,))
    points = list(zip(Cursor.VERTICES[0::2], Cursor.VERTICES[1::2]))
    assert len(points) == count
    for start, end in zip(points[0::2], points[1::2]):
        assert start[0] + end[0] == pytest.approx(0.0)
        assert start[1] + end[1] == pytest.approx(0.0)