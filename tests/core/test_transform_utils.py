from __future__ import annotations

import math

import numpy as np

from effects.radial_repeat import radial_repeat
from engine.core.geometry import Geometry
from engine.core.transform_utils import (
    apply_transform,
    clone_matrices,
    instance_matrices,
    instantiate,
    transforms_to_arrays,
)
from fractal.types import RadialClone, Transform


def test_instance_matrices_layout() -> None:
    ts = [Transform((1.0, 2.0, 3.0), 0.5), Transform((0.0, 0.0, 0.0), 2.0)]
    mats = instance_matrices(ts)
    assert mats.shape == (2, 4, 4)
    assert mats.dtype == np.float32
    assert np.allclose(np.diag(mats[0])[:3], 0.5)
    assert np.allclose(mats[0, :3, 3], [1.0, 2.0, 3.0])
    assert mats[0, 3, 3] == 1.0

    # 同次座標で原点を変換すると位置に一致する
    p = mats[0] @ np.array([0.0, 0.0, 0.0, 1.0], dtype=np.float32)
    assert np.allclose(p[:3], [1.0, 2.0, 3.0])


def test_transforms_to_arrays_empty() -> None:
    positions, sizes = transforms_to_arrays([])
    assert positions.shape == (0, 3)
    assert sizes.shape == (0,)
    assert instance_matrices([]).shape == (0, 4, 4)


def test_clone_matrix_matches_radial_repeat() -> None:
    clone = RadialClone(index=1, rotation_deg=90.0, rotation_rad=math.pi / 2, scale=2.0)
    g = Geometry.from_lines([[(1, 0, 0), (0, 1, 1)]])

    mat = clone_matrices([clone])[0]
    homog = np.hstack([g.coords, np.ones((2, 1), dtype=np.float32)])
    via_matrix = (homog @ mat.T)[:, :3]
    # count=2 の 2 本目が index=1 の複製
    via_effect = radial_repeat(g, count=2, rotation_deg=90.0, scale=2.0).coords[2:]

    assert np.allclose(via_matrix, via_effect, atol=1e-5)
    assert np.allclose(via_matrix[0], [0.0, 2.0, 0.0], atol=1e-6)


def test_apply_transform_scales_then_translates() -> None:
    g = Geometry.from_lines([[(1, 1, 1), (-1, -1, -1)]])
    out = apply_transform(g, Transform((10.0, 0.0, 0.0), 0.5))
    assert np.allclose(out.coords, [[10.5, 0.5, 0.5], [9.5, -0.5, -0.5]])
    assert np.allclose(g.coords[0], [1.0, 1.0, 1.0])


def test_instantiate_matches_instance_matrices() -> None:
    g = Geometry.from_lines([[(1, 0, 0), (0, 1, 0), (0, 0, 1)]])
    ts = [Transform((1.0, 2.0, 3.0), 0.5), Transform((-4.0, 0.0, 0.0), 2.0)]
    out = instantiate(g, ts)

    assert out.offsets.tolist() == [0, 3, 6]
    homog = np.hstack([g.coords, np.ones((3, 1), dtype=np.float32)])
    for i, mat in enumerate(instance_matrices(ts)):
        expected = (homog @ mat.T)[:, :3]
        assert np.allclose(out.coords[3 * i : 3 * i + 3], expected, atol=1e-6)


def test_instantiate_without_transforms_is_empty() -> None:
    g = Geometry.from_lines([[(1, 0, 0), (0, 1, 0)]])
    out = instantiate(g, [])
    assert out.is_empty
    assert out.offsets.tolist() == [0]
