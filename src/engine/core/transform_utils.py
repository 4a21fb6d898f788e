"""
どこで: `engine.core` の変換ユーティリティ。
何を: 生成結果（葉インスタンス変換 / 放射複製記述子）をレンダラ向けの配列・行列へ変換する。
なぜ: インスタンス描画（1 メッシュ + 変換列）とポリライン描画の双方へ同じ形式で渡すため。

行列は列ベクトル規約の 4x4（平行移動は最終列）。
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from fractal.types import RadialClone, Transform

from .geometry import Geometry


def transforms_to_arrays(transforms: Sequence[Transform]) -> tuple[np.ndarray, np.ndarray]:
    """`(positions (n,3) float64, sizes (n,) float64)` を返す。"""
    positions = np.array([t.position for t in transforms], dtype=np.float64).reshape(-1, 3)
    sizes = np.array([t.size for t in transforms], dtype=np.float64)
    return positions, sizes


def instance_matrices(transforms: Sequence[Transform]) -> np.ndarray:
    """平行移動 × 一様スケールの `(n, 4, 4) float32` 行列列を返す。"""
    positions, sizes = transforms_to_arrays(transforms)
    n = len(sizes)
    mats = np.zeros((n, 4, 4), dtype=np.float32)
    idx = np.arange(3)
    mats[:, idx, idx] = sizes[:, None]
    mats[:, :3, 3] = positions
    mats[:, 3, 3] = 1.0
    return mats


def clone_matrices(clones: Sequence[RadialClone]) -> np.ndarray:
    """Z 回転 × 一様スケールの `(n, 4, 4) float32` 行列列を返す。"""
    mats = np.zeros((len(clones), 4, 4), dtype=np.float32)
    for i, c in enumerate(clones):
        ca, sa = np.cos(c.rotation_rad), np.sin(c.rotation_rad)
        mats[i, 0, 0] = ca * c.scale
        mats[i, 0, 1] = -sa * c.scale
        mats[i, 1, 0] = sa * c.scale
        mats[i, 1, 1] = ca * c.scale
        mats[i, 2, 2] = c.scale
        mats[i, 3, 3] = 1.0
    return mats


def transform_combined(
    g: Geometry,
    center: tuple[float, float, float] = (0.0, 0.0, 0.0),
    scale_factors: tuple[float, float, float] = (1.0, 1.0, 1.0),
) -> Geometry:
    """スケール → 平行移動の順で `Geometry` に適用する。恒等成分は省略する。"""
    result = g
    if scale_factors != (1.0, 1.0, 1.0):
        result = result.scale(*scale_factors)
    if center != (0.0, 0.0, 0.0):
        result = result.translate(*center)
    return result


def apply_transform(g: Geometry, transform: Transform) -> Geometry:
    """葉インスタンス変換を `Geometry` に適用する（一様スケール → 平行移動）。"""
    s = float(transform.size)
    return transform_combined(g, center=transform.position, scale_factors=(s, s, s))


def instantiate(g: Geometry, transforms: Sequence[Transform]) -> Geometry:
    """`g` を各葉変換で複製し、1 つの `Geometry` に連結する。

    インスタンス描画を持たない出力先（ポリライン出力など）向け。変換列の順に
    線が並び、変換が空なら空の `Geometry` を返す。
    """
    parts = [apply_transform(g, t) for t in transforms]
    if not parts:
        return Geometry.from_lines([])
    return parts[0].concat(*parts[1:])


__all__ = [
    "transforms_to_arrays",
    "instance_matrices",
    "clone_matrices",
    "transform_combined",
    "apply_transform",
    "instantiate",
]
