"""
radial_repeat エフェクト（放射複製）

- 1 本の共有ベース曲線に対し、複製 i ごとに Z 回転 i·θ と一様スケール s^i（複利）を与える。
- `radial_clones()` は変換記述子だけを返し、点列は再計算しない（レンダラ側でインスタンス化）。
- `radial_repeat()` はインスタンス化できない消費側のために、全複製を 1 つの `Geometry` に実体化する。

主なパラメータ:
- count: 複製数。許容 [1, 64]。
- rotation_deg: 1 複製あたりの回転角 [deg]。許容 [0, 360]。
- scale: 1 複製あたりの倍率。許容 [0.5, 2.0]。

使用例: `radial_repeat(generate_curve(CurveConfig()), count=4, rotation_deg=90.0)`
"""

from __future__ import annotations

import math

import numpy as np
from numba import njit  # type: ignore[attr-defined]

from engine.core.geometry import Geometry
from fractal.types import RadialClone, RepeatConfig

from .registry import effect

PARAM_META = {
    "count": {"type": "integer", "min": 1, "max": 64, "step": 1},
    "rotation_deg": {"type": "number", "min": 0.0, "max": 360.0, "step": 1.0},
    "scale": {"type": "number", "min": 0.5, "max": 2.0, "step": 0.01},
}


def radial_clones(config: RepeatConfig) -> list[RadialClone]:
    """複製ごとの回転/スケール記述子を返す（設定はクランプしてから使う）。"""
    cfg = config.clamped()
    clones: list[RadialClone] = []
    for i in range(cfg.count):
        deg = cfg.rotation_deg * i
        clones.append(
            RadialClone(
                index=i,
                rotation_deg=deg,
                rotation_rad=(cfg.rotation_deg * i * math.pi) / 180.0,
                scale=cfg.scale**i,
            )
        )
    return clones


@effect()
def radial_repeat(
    g: Geometry,
    *,
    count: int = 1,
    rotation_deg: float = 15.0,
    scale: float = 1.0,
) -> Geometry:
    """ベースのポリライン群を原点中心に放射複製して連結する。

    Parameters
    ----------
    g : Geometry
        ベース曲線。
    count : int, default 1
        複製数（ベース自身を含む）。1 で入力と同じ形状。
    rotation_deg : float, default 15.0
        1 複製あたりの Z 回転 [deg]。
    scale : float, default 1.0
        1 複製あたりの倍率。i 番目の複製は scale**i 倍。
    """
    clones = radial_clones(RepeatConfig(count=count, rotation_deg=rotation_deg, scale=scale))
    coords, offsets = g.as_arrays(copy=False)
    if g.is_empty:
        return Geometry(coords.copy(), offsets.copy())

    angles = np.array([c.rotation_rad for c in clones], dtype=np.float64)
    factors = np.array([c.scale for c in clones], dtype=np.float64)
    out = _apply_clone_transforms(np.array(coords, dtype=np.float32), angles, factors)

    n = coords.shape[0]
    shifts = np.arange(len(clones), dtype=np.int32) * n
    new_offsets = np.concatenate(
        [np.zeros(1, dtype=np.int32), (offsets[1:][None, :] + shifts[:, None]).ravel()]
    )
    return Geometry(out, new_offsets)


# UI 表示のためのメタ情報
radial_repeat.__param_meta__ = PARAM_META


@njit(fastmath=False, cache=True)
def _apply_clone_transforms(
    coords: np.ndarray,
    angles: np.ndarray,
    factors: np.ndarray,
) -> np.ndarray:
    """各複製について「一様スケール → Z 回転」を適用し、縦に積んだ配列を返す。"""
    n = coords.shape[0]
    m = angles.shape[0]
    out = np.empty((n * m, 3), dtype=np.float32)
    for c in range(m):
        ca = math.cos(angles[c])
        sa = math.sin(angles[c])
        s = factors[c]
        base = c * n
        for i in range(n):
            x = coords[i, 0] * s
            y = coords[i, 1] * s
            out[base + i, 0] = x * ca - y * sa
            out[base + i, 1] = x * sa + y * ca
            out[base + i, 2] = coords[i, 2] * s
    return out


__all__ = ["radial_clones", "radial_repeat", "PARAM_META"]
