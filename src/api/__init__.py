"""
どこで: `api` 入口（高レベル公開 API）。
何を: フラクタル配置・放射曲線の生成関数と、拡張用デコレータ・主要型を再輸出。
なぜ: 利用者（レンダラ/UI）が単一名前空間から設定→変換列/点列の取得まで完結できるようにするため。

Usage:
    from api import compute_instance_transforms, generate_curve_points, InstancerConfig

    leaves = compute_instance_transforms(InstancerConfig(geometry="cube", depth=3))
    pts = generate_curve_points({"type": "rose", "k": 6})
"""

from effects.registry import effect as effect
from engine.core.geometry import Geometry
from engine.core.transform_utils import clone_matrices, instance_matrices
from fractal.arrangements import arrangement as arrangement
from fractal.types import (
    CurveConfig,
    FractalStats,
    InstancerConfig,
    RadialClone,
    RepeatConfig,
    RetentionConfig,
    Transform,
)
from shapes.registry import shape as shape

from .curves import (
    G,
    ShapesAPI,
    curve_geometry,
    generate_curve_points,
    load_curve_config,
    load_repeat_config,
    radial_clones,
    radial_geometry,
)
from .fractals import (
    compute_instance_transforms,
    compute_stats,
    get_fractal_positions,
    load_instancer_config,
    materialize_instances,
)

__all__ = [
    # フラクタル配置
    "get_fractal_positions",
    "compute_instance_transforms",
    "compute_stats",
    "load_instancer_config",
    "materialize_instances",
    # 放射曲線
    "generate_curve_points",
    "curve_geometry",
    "radial_clones",
    "radial_geometry",
    "load_curve_config",
    "load_repeat_config",
    "G",
    "ShapesAPI",
    # レンダラ受け渡し
    "instance_matrices",
    "clone_matrices",
    # 拡張用デコレータ
    "shape",
    "effect",
    "arrangement",
    # 型
    "Geometry",
    "CurveConfig",
    "FractalStats",
    "InstancerConfig",
    "RadialClone",
    "RepeatConfig",
    "RetentionConfig",
    "Transform",
]

__version__ = "0.1.0"
