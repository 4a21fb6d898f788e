"""
どこで: `shapes` パッケージ。
何を: 正多面体の特徴点（`polyhedron`）と、曲線生成関数（`spiro`、import 副作用で登録）。
なぜ: 配置パターンと放射曲線の「素の形状」を一箇所に集約するため。
"""

from . import spiro as _register_spiro  # noqa: F401
from .polyhedron import feature_table, list_solids, polyhedron_features
from .registry import get_shape, is_shape_registered, list_shapes, shape  # re-export
from .spiro import clamp_curve_config, generate_curve

__all__ = [
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
    "generate_curve",
    "clamp_curve_config",
    "feature_table",
    "list_solids",
    "polyhedron_features",
]
