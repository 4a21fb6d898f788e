"""
どこで: `api.curves`（放射曲線の高レベル API）。
何を: 曲線点列の生成、放射複製記述子の生成、`G.rose(...)` 形式の関数的呼び出し。
なぜ: 曲線生成（shapes）と複製（effects）を分離したまま、1 か所から利用できるようにするため。
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

import numpy as np

import effects  # noqa: F401  (登録目的の副作用)
import shapes  # noqa: F401  (登録目的の副作用)
from effects.radial_repeat import radial_clones as _radial_clones
from effects.radial_repeat import radial_repeat
from engine.core.geometry import Geometry
from fractal.types import CurveConfig, RadialClone, RepeatConfig
from shapes.registry import get_shape, is_shape_registered, list_shapes
from shapes.spiro import generate_curve
from util.utils import config_section


def _as_curve_config(config: CurveConfig | Mapping[str, Any]) -> CurveConfig:
    if isinstance(config, CurveConfig):
        return config.clamped()
    return CurveConfig.from_mapping(config)


def _as_repeat_config(config: RepeatConfig | Mapping[str, Any]) -> RepeatConfig:
    if isinstance(config, RepeatConfig):
        return config.clamped()
    return RepeatConfig.from_mapping(config)


def generate_curve_points(config: CurveConfig | Mapping[str, Any]) -> np.ndarray:
    """曲線の点列 `(segments + 1, 3) float32`（Z=0）を返す。"""
    return generate_curve(_as_curve_config(config)).coords


def curve_geometry(config: CurveConfig | Mapping[str, Any]) -> Geometry:
    return generate_curve(_as_curve_config(config))


def radial_clones(config: RepeatConfig | Mapping[str, Any]) -> list[RadialClone]:
    """放射複製の記述子列（回転 i·θ、スケール s^i）を返す。"""
    return _radial_clones(_as_repeat_config(config))


def radial_geometry(
    curve: CurveConfig | Mapping[str, Any],
    repeat: RepeatConfig | Mapping[str, Any],
) -> Geometry:
    """ベース曲線を放射複製して 1 つの `Geometry` に実体化する。"""
    rc = _as_repeat_config(repeat)
    return radial_repeat(
        curve_geometry(curve), count=rc.count, rotation_deg=rc.rotation_deg, scale=rc.scale
    )


def load_curve_config(cfg: Mapping[str, Any] | None = None) -> CurveConfig:
    return CurveConfig.from_mapping(config_section("curve", None if cfg is None else dict(cfg)))


def load_repeat_config(cfg: Mapping[str, Any] | None = None) -> RepeatConfig:
    return RepeatConfig.from_mapping(config_section("repeat", None if cfg is None else dict(cfg)))


class ShapesAPI:
    """登録済み曲線を `G.<name>(**params)` の形で呼び出す薄いファサード。

    未登録名は `AttributeError`。
    """

    def __getattr__(self, name: str) -> Callable[..., Geometry]:
        if name.startswith("_") or not is_shape_registered(name):
            raise AttributeError(f"未登録の shape です: {name}")
        return get_shape(name)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(list_shapes()))


G = ShapesAPI()


__all__ = [
    "generate_curve_points",
    "curve_geometry",
    "radial_clones",
    "radial_geometry",
    "load_curve_config",
    "load_repeat_config",
    "ShapesAPI",
    "G",
]
