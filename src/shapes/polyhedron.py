"""
どこで: `shapes.polyhedron`
何を: 5 種の正多面体について、頂点 / 辺中点 / 面重心の代表点（特徴点）を与える。
なぜ: 自己相似コピーの配置先を立体ごとの特徴から決めるため。

- 座標は各立体の自然なスケール（立方体は (±1, ±1, ±1)、二十面体は辺長 2）で持ち、
  単位球への正規化はしない。
- 二十面体/十二面体の辺・面は距離 2（または最小距離）との差が `FEATURE_EPS` 未満の
  組を総当りで拾う。√5 を含む無理数座標のため、厳密演算ではなくこの許容誤差で判定する。
- テーブルはプロセス内で 1 度だけ構築し、以後は読み取り専用。
"""

from __future__ import annotations

import itertools
import logging
import threading
from types import MappingProxyType
from typing import Mapping

import numpy as np

from fractal.types import FeatureSet

logger = logging.getLogger(__name__)

PHI = (1.0 + np.sqrt(5.0)) / 2.0
FEATURE_EPS = 0.01
ICOSAHEDRON_EDGE = 2.0

SOLIDS = ("cube", "tetrahedron", "octahedron", "icosahedron", "dodecahedron")

_TYPE_MAP: dict[str | int, str] = {
    "cube": "cube",
    "hexahedron": "cube",
    "hexa": "cube",
    "box": "cube",
    6: "cube",
    "tetrahedron": "tetrahedron",
    "tetra": "tetrahedron",
    4: "tetrahedron",
    "octahedron": "octahedron",
    "octa": "octahedron",
    8: "octahedron",
    "icosahedron": "icosahedron",
    "icosa": "icosahedron",
    20: "icosahedron",
    "dodecahedron": "dodecahedron",
    "dodeca": "dodecahedron",
    12: "dodecahedron",
    # 手描き形状は配置特徴を持たないため立方体の特徴で代用する
    "freehand": "cube",
}

_feature_table: Mapping[str, FeatureSet] | None = None
_feature_lock = threading.Lock()


def canonical_solid(solid: str | int) -> str | None:
    """別名を正規の立体名へ解決する。未知なら None。"""
    if isinstance(solid, str):
        return _TYPE_MAP.get(solid.strip().lower())
    if isinstance(solid, int) and not isinstance(solid, bool):
        return _TYPE_MAP.get(solid)
    return None


def _midpoints(vertices: np.ndarray, pairs: list[tuple[int, int]]) -> np.ndarray:
    return np.array([(vertices[i] + vertices[j]) * 0.5 for i, j in pairs])


def _centroids(vertices: np.ndarray, triples: list[tuple[int, int, int]]) -> np.ndarray:
    return np.array([vertices[list(t)].sum(axis=0) / 3.0 for t in triples])


def _close(d: float, target: float) -> bool:
    return abs(d - target) < FEATURE_EPS


def _cube() -> FeatureSet:
    signs = (-1.0, 1.0)
    vertices = [(x, y, z) for x in signs for y in signs for z in signs]
    edges = (
        [(0.0, y, z) for y in signs for z in signs]
        + [(x, 0.0, z) for x in signs for z in signs]
        + [(x, y, 0.0) for x in signs for y in signs]
    )
    faces = [
        (1.0, 0.0, 0.0),
        (-1.0, 0.0, 0.0),
        (0.0, 1.0, 0.0),
        (0.0, -1.0, 0.0),
        (0.0, 0.0, 1.0),
        (0.0, 0.0, -1.0),
    ]
    return FeatureSet(vertices=vertices, edges=edges, faces=faces)


def _tetrahedron() -> FeatureSet:
    # 立方体に内接し、符号の積が +1 になる 4 頂点
    vertices = np.array(
        [(1.0, 1.0, 1.0), (1.0, -1.0, -1.0), (-1.0, 1.0, -1.0), (-1.0, -1.0, 1.0)]
    )
    edges = _midpoints(vertices, list(itertools.combinations(range(4), 2)))
    faces = _centroids(vertices, list(itertools.combinations(range(4), 3)))
    return FeatureSet(vertices=vertices, edges=edges, faces=faces)


def _octahedron() -> FeatureSet:
    vertices = [
        (1.0, 0.0, 0.0),
        (-1.0, 0.0, 0.0),
        (0.0, 1.0, 0.0),
        (0.0, -1.0, 0.0),
        (0.0, 0.0, 1.0),
        (0.0, 0.0, -1.0),
    ]
    edges = []
    for i in (-0.5, 0.5):
        for j in (-0.5, 0.5):
            edges.extend([(i, j, 0.0), (i, 0.0, j), (0.0, i, j)])
    third = 1.0 / 3.0
    faces = [
        (x * third, y * third, z * third)
        for x in (-1.0, 1.0)
        for y in (-1.0, 1.0)
        for z in (-1.0, 1.0)
    ]
    return FeatureSet(vertices=vertices, edges=edges, faces=faces)


def _icosahedron_vertices() -> np.ndarray:
    t = PHI
    return np.array(
        [
            # (0, ±1, ±φ)
            (0.0, 1.0, t),
            (0.0, 1.0, -t),
            (0.0, -1.0, t),
            (0.0, -1.0, -t),
            # (±1, ±φ, 0)
            (1.0, t, 0.0),
            (1.0, -t, 0.0),
            (-1.0, t, 0.0),
            (-1.0, -t, 0.0),
            # (±φ, 0, ±1)
            (t, 0.0, 1.0),
            (t, 0.0, -1.0),
            (-t, 0.0, 1.0),
            (-t, 0.0, -1.0),
        ]
    )


def _icosahedron() -> FeatureSet:
    vertices = _icosahedron_vertices()
    n = len(vertices)
    dist = np.linalg.norm(vertices[:, None, :] - vertices[None, :, :], axis=-1)

    pairs = [
        (i, j)
        for i, j in itertools.combinations(range(n), 2)
        if _close(dist[i, j], ICOSAHEDRON_EDGE)
    ]
    # 3 頂点すべてが辺で結ばれる組 = 三角形の面（12 点なので総当りで十分）
    triples = [
        (i, j, k)
        for i, j, k in itertools.combinations(range(n), 3)
        if _close(dist[i, j], ICOSAHEDRON_EDGE)
        and _close(dist[j, k], ICOSAHEDRON_EDGE)
        and _close(dist[k, i], ICOSAHEDRON_EDGE)
    ]
    return FeatureSet(
        vertices=vertices,
        edges=_midpoints(vertices, pairs),
        faces=_centroids(vertices, triples),
    )


def _dodecahedron(icosahedron: FeatureSet) -> FeatureSet:
    """二十面体の双対。頂点 = 二十面体の面重心、面 = 二十面体の頂点。"""
    vertices = np.array(icosahedron.faces)
    dist = np.linalg.norm(vertices[:, None, :] - vertices[None, :, :], axis=-1)
    # 辺長は頂点 0 から他頂点への最小距離
    edge_len = float(dist[0, 1:].min())
    pairs = [
        (i, j)
        for i, j in itertools.combinations(range(len(vertices)), 2)
        if _close(dist[i, j], edge_len)
    ]
    return FeatureSet(
        vertices=vertices,
        edges=_midpoints(vertices, pairs),
        faces=np.array(icosahedron.vertices),
    )


def _build_feature_table() -> Mapping[str, FeatureSet]:
    icosahedron = _icosahedron()
    table = {
        "cube": _cube(),
        "tetrahedron": _tetrahedron(),
        "octahedron": _octahedron(),
        "icosahedron": icosahedron,
        "dodecahedron": _dodecahedron(icosahedron),
    }
    for name, fs in table.items():
        logger.debug("feature set built: %s vertices=%d edges=%d faces=%d", name, *fs.counts)
    return MappingProxyType(table)


def feature_table() -> Mapping[str, FeatureSet]:
    """全立体の特徴点テーブル（読み取り専用）を返す。初回呼び出し時に構築する。"""
    global _feature_table
    if _feature_table is None:
        with _feature_lock:
            if _feature_table is None:
                _feature_table = _build_feature_table()
    return _feature_table


def polyhedron_features(solid: str | int = "cube") -> FeatureSet:
    """立体の特徴点集合を返す。

    Parameters
    ----------
    solid : str | int, default "cube"
        立体名または別名（"hexahedron"、面数の整数 6 など）。

    Raises
    ------
    ValueError
        未知の立体名の場合。
    """
    name = canonical_solid(solid)
    if name is None:
        raise ValueError(f"solid が不正です: {solid!r}")
    return feature_table()[name]


def list_solids() -> list[str]:
    return list(SOLIDS)


__all__ = [
    "FEATURE_EPS",
    "PHI",
    "SOLIDS",
    "canonical_solid",
    "feature_table",
    "polyhedron_features",
    "list_solids",
]
