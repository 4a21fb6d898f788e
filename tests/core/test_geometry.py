from __future__ import annotations

import numpy as np
import pytest

from engine.core.geometry import Geometry


def test_from_lines_pads_2d_and_builds_offsets() -> None:
    g = Geometry.from_lines([[(0, 0), (1, 0), (1, 1)], np.array([[2, 2, 1], [3, 2, 1]])])
    assert g.coords.dtype == np.float32
    assert g.offsets.dtype == np.int32
    assert g.coords.shape == (5, 3)
    assert g.offsets.tolist() == [0, 3, 5]
    assert np.all(g.coords[:3, 2] == 0.0)
    assert len(g) == 2 and g.n_vertices == 5


def test_empty_and_invalid_inputs() -> None:
    g = Geometry.from_lines([])
    assert g.is_empty
    assert g.coords.shape == (0, 3)
    assert g.offsets.tolist() == [0]
    with pytest.raises(ValueError):
        Geometry.from_lines([np.array([1.0, 2.0])])  # 長さが 3 の倍数でない
    with pytest.raises(ValueError):
        Geometry(np.zeros((2, 3)), np.array([0, 3]))


def test_as_arrays_views_are_read_only() -> None:
    g = Geometry.from_lines([[(0, 0, 0), (1, 1, 1)]])
    coords, offsets = g.as_arrays()
    with pytest.raises(ValueError):
        coords[0, 0] = 5.0
    c2, _ = g.as_arrays(copy=True)
    c2[0, 0] = 5.0
    assert g.coords[0, 0] == 0.0


def test_transforms_are_pure() -> None:
    g = Geometry.from_lines([[(1, 0, 0), (2, 0, 0)]])
    moved = g.translate(1.0, 2.0, 3.0)
    scaled = g.scale(2.0)

    assert np.allclose(moved.coords[0], [2.0, 2.0, 3.0])
    assert np.allclose(scaled.coords[1], [4.0, 0.0, 0.0])
    assert np.allclose(g.coords[0], [1.0, 0.0, 0.0])


def test_concat_shifts_offsets() -> None:
    a = Geometry.from_lines([[(0, 0), (1, 0)]])
    b = Geometry.from_lines([[(0, 1), (1, 1), (2, 1)]])
    c = a.concat(b)
    assert c.offsets.tolist() == [0, 2, 5]
    assert [line.shape[0] for line in c.iter_lines()] == [2, 3]


def test_concat_many_skips_empty_parts() -> None:
    a = Geometry.from_lines([[(0, 0), (1, 0)], [(5, 5), (6, 6)]])
    empty = Geometry.from_lines([])
    b = Geometry.from_lines([[(0, 1), (1, 1), (2, 1)]])
    c = a.concat(empty, b)
    assert c.offsets.tolist() == [0, 2, 4, 7]
    assert np.allclose(c.coords[4], [0.0, 1.0, 0.0])
    assert a.concat().offsets.tolist() == a.offsets.tolist()
