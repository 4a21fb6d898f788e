"""
どこで: `fractal.retention`
何を: 保持ルールで特徴点を選び、縮小率に応じた自己相似オフセット列を返す。
なぜ: 子インスタンスの配置を「特徴点 × (1 − r)」に統一するため。

半径 1 の親の特徴点 P に対し、子（縮小率 r）の中心を P·(1 − r) に置くと、
子自身の対応する特徴点 P·(1 − r) + P·r がちょうど P に重なる。どの立体でも継ぎ目なく
自己相似に接続される。

並び順: 頂点 → 辺 → 面 → （keep_center のとき）原点 1 点。全フラグ False なら空。
"""

from __future__ import annotations

import numpy as np

from fractal.arrangements import resolve_feature_set
from fractal.types import FeatureSet, RetentionConfig


def select_features(features: FeatureSet, retention: RetentionConfig) -> np.ndarray:
    """保持対象の特徴点を規定順に連結した `(N, 3) float64` 配列を返す（未縮小）。"""
    parts: list[np.ndarray] = []
    if retention.keep_vertices:
        parts.append(features.vertices)
    if retention.keep_edges:
        parts.append(features.edges)
    if retention.keep_faces:
        parts.append(features.faces)
    if retention.keep_center:
        parts.append(np.zeros((1, 3), dtype=np.float64))
    if not parts:
        return np.empty((0, 3), dtype=np.float64)
    return np.concatenate(parts, axis=0)


def get_fractal_positions(
    geometry: str | int,
    retention: RetentionConfig,
    scale: float,
    arrangement: str | None = None,
    *,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """自己相似オフセット列 `(N, 3) float64` を返す。

    Parameters
    ----------
    geometry : str | int
        形状種別（別名可。未知なら立方体）。
    retention : RetentionConfig
        保持する特徴カテゴリ。
    scale : float
        縮小率 r。各特徴点に (1 − r) を掛ける。クランプはしない（統計計算で r=1 を使うため）。
    arrangement : str | None
        配置パターン名。指定時は形状種別より優先する。
    rng : numpy.random.Generator | None
        `random` 配置の乱数源。
    """
    features = resolve_feature_set(geometry, arrangement, rng=rng)
    return select_features(features, retention) * (1.0 - float(scale))


def count_copies(
    geometry: str | int,
    retention: RetentionConfig,
    arrangement: str | None = None,
) -> int:
    """1 世代あたりのコピー数 N（縮小率に依存しない）。"""
    features = resolve_feature_set(geometry, arrangement)
    v, e, f = features.counts
    return (
        (v if retention.keep_vertices else 0)
        + (e if retention.keep_edges else 0)
        + (f if retention.keep_faces else 0)
        + (1 if retention.keep_center else 0)
    )


__all__ = ["select_features", "get_fractal_positions", "count_copies"]
