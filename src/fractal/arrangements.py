"""
どこで: `fractal.arrangements`
何を: 配置パターン（5 正多面体 + フィボナッチ球面螺旋 + 球面ランダム点群）の登録と解決。
なぜ: 形状種別と配置パターンを独立に選べるようにし、特徴点集合の取得経路を一本化するため。

解決順:
1. 配置パターン名が与えられ、登録済みならその生成関数。
2. それ以外は形状種別（別名可）に対応する正多面体の特徴点。
3. どちらにも該当しなければ立方体。
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Callable

import numpy as np

from common import settings
from common.base_registry import BaseRegistry
from fractal.types import FeatureSet
from shapes.polyhedron import canonical_solid, polyhedron_features

logger = logging.getLogger(__name__)

SPIRAL_POINTS = 32
RANDOM_POINTS = 20

ArrangementFn = Callable[..., FeatureSet]

_arrangement_registry = BaseRegistry()


# 生成関数は `rng: numpy.random.Generator | None` をキーワードで受け取り `FeatureSet` を返す。
arrangement = _arrangement_registry.decorator("@arrangement")


def get_arrangement(name: str) -> ArrangementFn:
    """登録された生成関数を取得（未登録は KeyError）。"""
    return _arrangement_registry.get(name)


def list_arrangements() -> list[str]:
    return sorted(_arrangement_registry.list_all())


def is_arrangement_registered(name: str) -> bool:
    return _arrangement_registry.is_registered(name)


# ---- 正多面体 -------------------------------------------------------------


@arrangement(aliases=("hexahedron", "box"))
def cube(*, rng: np.random.Generator | None = None) -> FeatureSet:
    return polyhedron_features("cube")


@arrangement
def tetrahedron(*, rng: np.random.Generator | None = None) -> FeatureSet:
    return polyhedron_features("tetrahedron")


@arrangement
def octahedron(*, rng: np.random.Generator | None = None) -> FeatureSet:
    return polyhedron_features("octahedron")


@arrangement
def icosahedron(*, rng: np.random.Generator | None = None) -> FeatureSet:
    return polyhedron_features("icosahedron")


@arrangement
def dodecahedron(*, rng: np.random.Generator | None = None) -> FeatureSet:
    return polyhedron_features("dodecahedron")


# ---- 手続き的な点配置 ------------------------------------------------------


@lru_cache(maxsize=1)
def _fibonacci_sphere(n: int) -> FeatureSet:
    i = np.arange(n, dtype=np.float64)
    y = 1.0 - (i / (n - 1)) * 2.0
    radius = np.sqrt(1.0 - y * y)
    theta = i * (np.pi * (3.0 - np.sqrt(5.0)))  # 黄金角
    pts = np.stack([np.cos(theta) * radius, y, np.sin(theta) * radius], axis=1)
    return FeatureSet.from_points(pts)


@arrangement(aliases=("fibonacci", "fibonacci_spiral"))
def spiral(*, rng: np.random.Generator | None = None) -> FeatureSet:
    """単位球面上のフィボナッチ螺旋 32 点。すべて頂点として扱う。"""
    return _fibonacci_sphere(SPIRAL_POINTS)


def default_rng() -> np.random.Generator:
    """`FXG_RANDOM_SEED` が設定されていればシード付き、なければ OS エントロピーの乱数源。"""
    return np.random.default_rng(settings.get().RANDOM_SEED)


@arrangement("random", aliases=("random_cloud", "cloud"))
def random_cloud(*, rng: np.random.Generator | None = None) -> FeatureSet:
    """単位球面上の一様乱数 20 点（逆関数法: θ=2πu, φ=acos(2v−1)）。

    点数は固定なので、位置が毎回変わってもインスタンス数は決定的。
    """
    gen = rng if rng is not None else default_rng()
    u = gen.random(RANDOM_POINTS)
    v = gen.random(RANDOM_POINTS)
    theta = 2.0 * np.pi * u
    phi = np.arccos(2.0 * v - 1.0)
    pts = np.stack(
        [np.sin(phi) * np.cos(theta), np.sin(phi) * np.sin(theta), np.cos(phi)], axis=1
    )
    return FeatureSet.from_points(pts)


# ---- 解決 ------------------------------------------------------------------


def resolve_feature_set(
    geometry: str | int = "cube",
    arrangement_name: str | None = None,
    *,
    rng: np.random.Generator | None = None,
) -> FeatureSet:
    """形状種別と配置パターンから特徴点集合を決める（未知の名前は立方体へフォールバック）。"""
    if arrangement_name:
        try:
            fn = get_arrangement(arrangement_name)
        except (KeyError, TypeError, ValueError):
            logger.debug("unknown arrangement %r; falling back to cube", arrangement_name)
            return polyhedron_features("cube")
        return fn(rng=rng)

    solid = canonical_solid(geometry)
    if solid is None:
        logger.debug("unknown geometry %r; falling back to cube", geometry)
        solid = "cube"
    return polyhedron_features(solid)


__all__ = [
    "arrangement",
    "get_arrangement",
    "list_arrangements",
    "is_arrangement_registered",
    "resolve_feature_set",
    "default_rng",
    "spiral",
    "random_cloud",
    "SPIRAL_POINTS",
    "RANDOM_POINTS",
]
