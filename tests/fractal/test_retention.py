from __future__ import annotations

import numpy as np
import pytest

from fractal.retention import count_copies, get_fractal_positions, select_features
from fractal.types import RetentionConfig
from shapes.polyhedron import SOLIDS, polyhedron_features


def test_order_is_vertices_edges_faces_center(keep_all: RetentionConfig) -> None:
    fs = polyhedron_features("cube")
    pos = get_fractal_positions("cube", keep_all, 0.5)
    assert pos.shape == (8 + 12 + 6 + 1, 3)
    assert np.allclose(pos[:8], fs.vertices * 0.5)
    assert np.allclose(pos[8:20], fs.edges * 0.5)
    assert np.allclose(pos[20:26], fs.faces * 0.5)
    assert np.array_equal(pos[-1], [0.0, 0.0, 0.0])


def test_nothing_kept_is_empty(keep_none: RetentionConfig) -> None:
    pos = get_fractal_positions("icosahedron", keep_none, 0.3)
    assert pos.shape == (0, 3)
    assert count_copies("icosahedron", keep_none) == 0


@pytest.mark.parametrize("solid", SOLIDS)
@pytest.mark.parametrize("r", [0.1, 0.33, 0.5])
def test_offsets_are_features_times_one_minus_r(solid: str, r: float, keep_all: RetentionConfig) -> None:
    unscaled = select_features(polyhedron_features(solid), keep_all)
    pos = get_fractal_positions(solid, keep_all, r)
    assert np.allclose(pos, unscaled * (1.0 - r))
    assert len(pos) == count_copies(solid, keep_all)


def test_scale_one_collapses_to_origin(keep_vertices: RetentionConfig) -> None:
    pos = get_fractal_positions("cube", keep_vertices, 1.0)
    assert pos.shape == (8, 3)
    assert np.allclose(pos, 0.0)


def test_retention_from_camel_case_mapping() -> None:
    rc = RetentionConfig.from_mapping({"keepVertices": False, "keepFaces": True, "unknown": 1})
    assert rc == RetentionConfig(keep_vertices=False, keep_edges=True, keep_faces=True)
    assert rc.kept_components() == ["Edges", "Faces"]


def test_retention_from_mapping_parses_string_flags() -> None:
    prev = RetentionConfig(keep_vertices=True, keep_edges=True, keep_faces=False, keep_center=True)
    rc = RetentionConfig.from_mapping(
        {"keepEdges": "false", "keepFaces": "yes", "keepCenter": "maybe"}, previous=prev
    )
    assert rc == RetentionConfig(keep_vertices=True, keep_edges=False, keep_faces=True, keep_center=True)
    assert get_fractal_positions("cube", rc, 0.5).shape == (8 + 6 + 1, 3)
