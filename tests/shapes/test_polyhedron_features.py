from __future__ import annotations

import itertools

import numpy as np
import pytest

from shapes.polyhedron import (
    PHI,
    canonical_solid,
    feature_table,
    list_solids,
    polyhedron_features,
)


@pytest.mark.parametrize(
    ("solid", "counts"),
    [
        ("cube", (8, 12, 6)),
        ("tetrahedron", (4, 6, 4)),
        ("octahedron", (6, 12, 8)),
        ("icosahedron", (12, 30, 20)),
        ("dodecahedron", (20, 30, 12)),
    ],
)
def test_feature_counts(solid: str, counts: tuple[int, int, int]) -> None:
    assert polyhedron_features(solid).counts == counts


def test_cube_coordinates() -> None:
    fs = polyhedron_features("cube")
    assert np.all(np.abs(fs.vertices) == 1.0)
    # 辺中点はちょうど 1 成分が 0、面重心は 2 成分が 0
    assert np.all((fs.edges == 0.0).sum(axis=1) == 1)
    assert np.all((fs.faces == 0.0).sum(axis=1) == 2)


def test_tetrahedron_vertices_have_positive_sign_product() -> None:
    fs = polyhedron_features("tetrahedron")
    assert np.all(np.prod(fs.vertices, axis=1) == 1.0)
    assert np.allclose(fs.vertices.sum(axis=0), 0.0)


def test_icosahedron_edges_and_faces_geometry() -> None:
    fs = polyhedron_features("icosahedron")
    v = fs.vertices
    assert np.allclose(np.linalg.norm(v, axis=1), np.sqrt(1.0 + PHI * PHI))
    # 辺中点・面重心は原点から等距離
    edge_r = np.linalg.norm(fs.edges, axis=1)
    face_r = np.linalg.norm(fs.faces, axis=1)
    assert np.allclose(edge_r, edge_r[0])
    assert np.allclose(face_r, face_r[0])


def test_dodecahedron_is_dual_of_icosahedron() -> None:
    ico = polyhedron_features("icosahedron")
    dod = polyhedron_features("dodecahedron")
    assert np.allclose(dod.vertices, ico.faces)
    assert np.allclose(dod.faces, ico.vertices)
    # 頂点はすべて異なる
    for i, j in itertools.combinations(range(len(dod.vertices)), 2):
        assert np.linalg.norm(dod.vertices[i] - dod.vertices[j]) > 1e-6


def test_feature_table_is_built_once_and_read_only() -> None:
    t1 = feature_table()
    t2 = feature_table()
    assert t1 is t2
    assert polyhedron_features("cube") is t1["cube"]
    with pytest.raises(TypeError):
        t1["cube"] = t1["octahedron"]  # type: ignore[index]
    with pytest.raises(ValueError):
        polyhedron_features("cube").vertices[0, 0] = 9.0


def test_aliases_and_unknown() -> None:
    assert canonical_solid("Hexahedron") == "cube"
    assert canonical_solid(20) == "icosahedron"
    assert canonical_solid("freehand") == "cube"
    assert canonical_solid("sphere") is None
    assert canonical_solid(True) is None
    assert polyhedron_features(6) is polyhedron_features("cube")
    with pytest.raises(ValueError):
        polyhedron_features("torus")
    assert list_solids() == ["cube", "tetrahedron", "octahedron", "icosahedron", "dodecahedron"]
