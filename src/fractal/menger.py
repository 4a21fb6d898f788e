"""
どこで: `fractal.menger`
何を: 古典的なメンガーのスポンジ（27 分割のうち 20 個を残す、r = 1/3）の葉変換。
なぜ: 汎用エンジン（立方体・頂点+辺・r=1/3）と同じ多重集合になる参照実装として用いる。
"""

from __future__ import annotations

import itertools

from common.param_utils import clamp_int
from common.types import ORIGIN, Point3
from fractal.instancer import effective_depth
from fractal.types import DEPTH_MAX, DEPTH_MIN, SIZE_MIN, Transform

MENGER_COPIES = 20


def _kept_cells() -> list[tuple[int, int, int]]:
    # 0 座標が 2 つ以上のセル（面中心と体中心）を除く
    return [
        cell
        for cell in itertools.product((-1, 0, 1), repeat=3)
        if sum(1 for c in cell if c == 0) < 2
    ]


def menger_sponge(size: float = 1.0, depth: int = 1) -> list[Transform]:
    """メンガーのスポンジの葉変換を返す。深さは [0, 5] かつ予算内に丸める。"""
    size = max(SIZE_MIN, float(size))
    depth = effective_depth(MENGER_COPIES, clamp_int(depth, DEPTH_MIN, DEPTH_MAX))
    cells = _kept_cells()

    leaves: list[Transform] = []
    stack: list[tuple[Point3, float, int]] = [(ORIGIN, size, depth)]
    while stack:
        (px, py, pz), s, level = stack.pop()
        if level <= 0:
            leaves.append(Transform((px, py, pz), s))
            continue
        child = s / 3.0
        for x, y, z in cells:
            stack.append(((px + x * child, py + y * child, pz + z * child), child, level - 1))
    return leaves


__all__ = ["menger_sponge", "MENGER_COPIES"]
