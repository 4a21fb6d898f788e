"""
どこで: `fractal` パッケージ。
何を: 自己相似フラクタルの配置計算（特徴点の選択・再帰インスタンス化・次元計算）。

主な入口:
- `get_fractal_positions(geometry, retention, scale, arrangement)` → `(N, 3)` オフセット
- `compute_instance_transforms(InstancerConfig)` → 葉インスタンス変換の列
- `compute_stats(geometry, retention, scale, arrangement)` → `FractalStats`
"""

from .arrangements import arrangement, get_arrangement, list_arrangements, resolve_feature_set
from .instancer import compute_instance_transforms, effective_depth
from .menger import menger_sponge
from .retention import get_fractal_positions
from .stats import compute_stats, hausdorff_dimension
from .types import (
    CurveConfig,
    FeatureSet,
    FractalStats,
    InstancerConfig,
    InstanceNode,
    RadialClone,
    RepeatConfig,
    RetentionConfig,
    Transform,
)

__all__ = [
    "arrangement",
    "get_arrangement",
    "list_arrangements",
    "resolve_feature_set",
    "compute_instance_transforms",
    "effective_depth",
    "menger_sponge",
    "get_fractal_positions",
    "compute_stats",
    "hausdorff_dimension",
    "CurveConfig",
    "FeatureSet",
    "FractalStats",
    "InstancerConfig",
    "InstanceNode",
    "RadialClone",
    "RepeatConfig",
    "RetentionConfig",
    "Transform",
]
