from __future__ import annotations

import math

import numpy as np
import pytest

from fractal.instancer import compute_instance_transforms
from fractal.menger import MENGER_COPIES, menger_sponge
from fractal.stats import compute_stats, hausdorff_dimension
from fractal.types import InstancerConfig, RetentionConfig


def test_cube_vertices_dimension(keep_vertices: RetentionConfig) -> None:
    stats = compute_stats("cube", keep_vertices, 1.0 / 3.0)
    assert stats.n == 8
    assert stats.d == pytest.approx(math.log(8) / math.log(3))
    assert stats.d == pytest.approx(1.8928, abs=1e-4)
    assert stats.r == "0.333"
    assert stats.name == "Custom Cube Fractal"
    assert stats.components == "Keeps: Vertices"


def test_menger_like_dimension() -> None:
    stats = compute_stats("cube", RetentionConfig(), 1.0 / 3.0)
    assert stats.n == 20
    assert stats.d == pytest.approx(2.7268, abs=1e-4)
    assert stats.components == "Keeps: Vertices, Edges"


def test_empty_retention_stats(keep_none: RetentionConfig) -> None:
    stats = compute_stats("octahedron", keep_none, 0.4)
    assert stats.n == 0
    assert stats.d == 0.0
    assert stats.components == "Keeps: Nothing (Empty)"


def test_arrangement_counts_in_stats(keep_vertices: RetentionConfig) -> None:
    assert compute_stats("cube", keep_vertices, 0.3, "spiral").n == 32
    assert compute_stats("cube", keep_vertices, 0.3, "random").n == 20


@pytest.mark.parametrize(("n", "r"), [(0, 0.5), (5, 1.0), (5, 0.0), (5, 1.5)])
def test_dimension_undefined_is_zero(n: int, r: float) -> None:
    assert hausdorff_dimension(n, r) == 0.0


@pytest.mark.parametrize("depth", [0, 1, 2])
def test_menger_matches_generic_engine(depth: int) -> None:
    ref = menger_sponge(1.0, depth)
    generic = compute_instance_transforms(
        InstancerConfig(geometry="cube", retention=RetentionConfig(), depth=depth, scale=1.0 / 3.0)
    )
    assert len(ref) == len(generic) == MENGER_COPIES**depth

    def _key(leaves):
        arr = np.round(np.array([(*t.position, t.size) for t in leaves]), 9)
        return arr[np.lexsort(arr.T[::-1])]

    assert np.allclose(_key(ref), _key(generic))


def test_menger_depth_is_budgeted() -> None:
    assert len(menger_sponge(1.0, 9)) == 8000
