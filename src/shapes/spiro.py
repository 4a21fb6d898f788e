"""
どこで: `shapes.spiro`
何を: バラ曲線（rose）とスピログラフ族（hypotrochoid / epitrochoid）の 2D ポリライン生成。
なぜ: 放射複製（`effects.radial_repeat`）のベース曲線を純関数で与えるため。

共通仕様:
- パラメータは `CurveConfig.clamped()` の値域に丸めてから使う（例外にしない）。
- サンプル数は `segments + 1`、媒介変数 t は [0, 20π]（10 周分）を等分する。
  k によらず自己交差パターンを十分に覆うため周回数は固定。
- 出力は 0.5 倍に縮め、Z=0 に置く。同一入力に対してビット単位で同一の結果を返す。
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from engine.core.geometry import Geometry
from fractal.types import CurveConfig

from .registry import get_shape, shape

logger = logging.getLogger(__name__)

TURNS = 10
OUTPUT_SCALE = 0.5


def _sample_t(segments: int) -> np.ndarray:
    steps = int(segments)
    i = np.arange(steps + 1, dtype=np.float64)
    return (i / steps) * (2.0 * np.pi) * TURNS


def clamp_curve_config(cfg: CurveConfig) -> CurveConfig:
    """値域へ丸めた設定を返す。入力から変化した場合は DEBUG ログを出す。"""
    safe = cfg.clamped()
    if safe != cfg:
        logger.debug("curve parameters clamped: %s -> %s", cfg, safe)
    return safe


def _to_geometry(x: np.ndarray, y: np.ndarray) -> Geometry:
    xy = np.stack([x, y], axis=1) * OUTPUT_SCALE
    return Geometry.from_lines([xy])


@shape
def rose(*, segments: int = 512, a: float = 1.0, k: float = 6.0, **params: Any) -> Geometry:
    """バラ曲線 r(t) = a·cos(k·t) を生成します。

    Parameters
    ----------
    segments : int, default 512
        分割数。許容 [64, 4096]。
    a : float, default 1.0
        振幅。許容 [0.1, 10]。
    k : float, default 6.0
        花弁係数。許容 [0.5, 32]。
    """
    cfg = clamp_curve_config(CurveConfig(type="rose", segments=segments, a=a, k=k))
    t = _sample_t(cfg.segments)
    radius = cfg.a * np.cos(cfg.k * t)
    return _to_geometry(radius * np.cos(t), radius * np.sin(t))


@shape
def hypotrochoid(
    *,
    segments: int = 512,
    R: float = 1.0,
    r: float = 0.25,
    d: float = 0.5,
    **params: Any,
) -> Geometry:
    """内転トロコイド（半径 r の円が半径 R の円の内側を転がる）を生成します。

    r は [0.1, R−0.1]、d は [0.1, r] に丸められる。
    """
    cfg = clamp_curve_config(CurveConfig(type="hypotrochoid", segments=segments, R=R, r=r, d=d))
    t = _sample_t(cfg.segments)
    diff = cfg.R - cfg.r
    ratio = diff / cfg.r
    x = diff * np.cos(t) + cfg.d * np.cos(ratio * t)
    y = diff * np.sin(t) - cfg.d * np.sin(ratio * t)
    return _to_geometry(x, y)


@shape
def epitrochoid(
    *,
    segments: int = 512,
    R: float = 1.0,
    r: float = 0.25,
    d: float = 0.5,
    **params: Any,
) -> Geometry:
    """外転トロコイド（半径 r の円が半径 R の円の外側を転がる）を生成します。"""
    cfg = clamp_curve_config(CurveConfig(type="epitrochoid", segments=segments, R=R, r=r, d=d))
    t = _sample_t(cfg.segments)
    total = cfg.R + cfg.r
    ratio = total / cfg.r
    x = total * np.cos(t) - cfg.d * np.cos(ratio * t)
    y = total * np.sin(t) - cfg.d * np.sin(ratio * t)
    return _to_geometry(x, y)


def generate_curve(config: CurveConfig) -> Geometry:
    """`CurveConfig.type` に対応する曲線を生成する。

    Raises
    ------
    ValueError
        未知の曲線種別の場合。
    """
    try:
        fn = get_shape(config.type)
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"curve type が不正です: {config.type!r}") from exc
    return fn(segments=config.segments, a=config.a, k=config.k, R=config.R, r=config.r, d=config.d)


_SEGMENTS_META = {"type": "integer", "min": 64, "max": 4096}
_RADIUS_META = {"type": "number", "min": 0.1, "max": 10.0}

rose.__param_meta__ = {
    "segments": _SEGMENTS_META,
    "a": {"type": "number", "min": 0.1, "max": 10.0},
    "k": {"type": "number", "min": 0.5, "max": 32.0},
}
hypotrochoid.__param_meta__ = {
    "segments": _SEGMENTS_META,
    "R": _RADIUS_META,
    "r": _RADIUS_META,
    "d": _RADIUS_META,
}
epitrochoid.__param_meta__ = hypotrochoid.__param_meta__


__all__ = ["rose", "hypotrochoid", "epitrochoid", "generate_curve", "clamp_curve_config"]
