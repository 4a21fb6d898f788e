"""
どこで: `api.fractals`（フラクタル配置の高レベル API）。
何を: 自己相似オフセット・葉インスタンス変換・統計値を返す薄いファサード。
なぜ: 外部レンダラ/UI が単一名前空間から、文字列や辞書の設定のまま呼び出せるようにするため。

- 保持ルールは `RetentionConfig` のほか `{"keepVertices": True, ...}` 形式の辞書も受け付ける。
- 設定の既定値は `configs/default.yaml` の `fractal:` セクション（`load_instancer_config`）。
- `materialize_instances` はインスタンス描画を持たない出力先向けに、ベース形状を全葉へ複製した 1 つの `Geometry` を返す。
"""

from __future__ import annotations

from typing import Any, Mapping

import numpy as np

from engine.core.geometry import Geometry
from engine.core.transform_utils import instantiate
from fractal import instancer as _instancer
from fractal import retention as _retention
from fractal import stats as _stats
from fractal.types import FractalStats, InstancerConfig, RetentionConfig, Transform
from util.utils import config_section

RetentionLike = RetentionConfig | Mapping[str, Any]


def _as_retention(retention: RetentionLike) -> RetentionConfig:
    if isinstance(retention, RetentionConfig):
        return retention
    return RetentionConfig.from_mapping(retention)


def load_instancer_config(
    overrides: Mapping[str, Any] | None = None,
    cfg: Mapping[str, Any] | None = None,
) -> InstancerConfig:
    """YAML の `fractal:` セクションに `overrides` を重ねた設定を返す。"""
    base = InstancerConfig.from_mapping(config_section("fractal", None if cfg is None else dict(cfg)))
    return InstancerConfig.from_mapping(overrides, previous=base) if overrides else base


def get_fractal_positions(
    geometry: str | int,
    retention: RetentionLike,
    scale: float,
    arrangement: str | None = None,
    *,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """縮小率 `scale` に対する自己相似オフセット `(N, 3)` を返す。"""
    return _retention.get_fractal_positions(
        geometry, _as_retention(retention), scale, arrangement, rng=rng
    )


def compute_instance_transforms(
    config: InstancerConfig | Mapping[str, Any],
    *,
    rng: np.random.Generator | None = None,
) -> list[Transform]:
    """葉インスタンス変換の列を返す（辞書は既定値に重ねて解釈する）。"""
    if not isinstance(config, InstancerConfig):
        config = InstancerConfig.from_mapping(config)
    return _instancer.compute_instance_transforms(config, rng=rng)


def materialize_instances(
    base: Geometry,
    config: InstancerConfig | Mapping[str, Any],
    *,
    rng: np.random.Generator | None = None,
) -> Geometry:
    """`base` を全葉インスタンス変換で複製し、連結した `Geometry` を返す。"""
    return instantiate(base, compute_instance_transforms(config, rng=rng))


def compute_stats(
    geometry: str | int,
    retention: RetentionLike,
    scale: float,
    arrangement: str | None = None,
) -> FractalStats:
    """コピー数 N とハウスドルフ次元 D を返す。"""
    return _stats.compute_stats(geometry, _as_retention(retention), scale, arrangement)


__all__ = [
    "get_fractal_positions",
    "compute_instance_transforms",
    "compute_stats",
    "materialize_instances",
    "load_instancer_config",
]
