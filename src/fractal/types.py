"""
どこで: `fractal.types`
何を: 特徴点集合・保持ルール・インスタンス変換・曲線/複製設定などのデータモデル。
なぜ: 生成系の入出力を不変の値オブジェクトに揃え、取り込み時点でクランプを済ませるため。

- 数値は `clamped()` / `from_mapping()` で有効域へ丸める（例外にしない）。
- `from_mapping()` は数値として解釈できない入力を「直前の有効値」（既定では既定値）で置き換える。
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping, NamedTuple

import numpy as np

from common.param_utils import clamp, clamp_int, coerce_bool, coerce_number
from common.types import Point3

# 値域（取り込み境界でのクランプ）
SCALE_MIN, SCALE_MAX = 0.1, 0.5
SIZE_MIN = 0.1
DEPTH_MIN, DEPTH_MAX = 0, 5
SEGMENTS_MIN, SEGMENTS_MAX = 64, 4096
A_MIN, A_MAX = 0.1, 10.0
K_MIN, K_MAX = 0.5, 32.0
R_MIN, R_MAX = 0.1, 10.0
SMALL_R_MIN = 0.1
D_MIN = 0.1
# 転円半径は固定円半径よりこの分だけ小さく保つ
RADIUS_GAP = 0.1
REPEAT_COUNT_MIN, REPEAT_COUNT_MAX = 1, 64
ROTATION_MIN, ROTATION_MAX = 0.0, 360.0
CLONE_SCALE_MIN, CLONE_SCALE_MAX = 0.5, 2.0

CURVE_TYPES = ("rose", "hypotrochoid", "epitrochoid")


def _frozen_array(values: Any) -> np.ndarray:
    arr = np.array(values, dtype=np.float64).reshape(-1, 3)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class FeatureSet:
    """立体 1 つ分の代表点（頂点 / 辺中点 / 面重心）。

    各配列は `(k, 3) float64` の読み取り専用配列。
    """

    vertices: np.ndarray
    edges: np.ndarray
    faces: np.ndarray

    def __post_init__(self) -> None:
        for name in ("vertices", "edges", "faces"):
            object.__setattr__(self, name, _frozen_array(getattr(self, name)))

    @classmethod
    def from_points(cls, vertices: Any, edges: Any = (), faces: Any = ()) -> "FeatureSet":
        return cls(vertices=vertices, edges=edges, faces=faces)

    @property
    def counts(self) -> tuple[int, int, int]:
        """(頂点数, 辺数, 面数)"""
        return (len(self.vertices), len(self.edges), len(self.faces))


@dataclass(frozen=True)
class RetentionConfig:
    """自己相似コピーを置く特徴カテゴリの選択。"""

    keep_vertices: bool = True
    keep_edges: bool = True
    keep_faces: bool = False
    keep_center: bool = False

    _CAMEL = {
        "keepVertices": "keep_vertices",
        "keepEdges": "keep_edges",
        "keepFaces": "keep_faces",
        "keepCenter": "keep_center",
    }

    @classmethod
    def none(cls) -> "RetentionConfig":
        return cls(False, False, False, False)

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any] | None, previous: "RetentionConfig | None" = None
    ) -> "RetentionConfig":
        """`keep_vertices` / `keepVertices` いずれのキーも受け付ける。

        値は `coerce_bool` で解釈し（"false" などの文字列も可）、解釈できない値と
        欠けたキーは `previous`（既定では既定値）を引き継ぐ。
        """
        prev = previous or cls()
        names = {f.name for f in fields(cls)}
        values = {name: getattr(prev, name) for name in names}
        for key, val in (data or {}).items():
            name = cls._CAMEL.get(key, key)
            if name in names:
                values[name] = coerce_bool(val, values[name])
        return cls(**values)

    def kept_components(self) -> list[str]:
        names = []
        if self.keep_vertices:
            names.append("Vertices")
        if self.keep_edges:
            names.append("Edges")
        if self.keep_faces:
            names.append("Faces")
        if self.keep_center:
            names.append("Center")
        return names


class InstanceNode(NamedTuple):
    """展開途中のノード（スタック上でのみ生存）。"""

    position: Point3
    size: float
    level_remaining: int


@dataclass(frozen=True)
class Transform:
    """葉インスタンスの平行移動 + 一様スケール。"""

    position: Point3
    size: float


def _geometry_key(raw: Any, previous: str | int) -> str | int:
    """形状種別の入力を正規化する。面数の整数別名（4/6/8/12/20）は int のまま残す。"""
    if raw is None or isinstance(raw, bool):
        return previous
    if isinstance(raw, int):
        return raw
    return str(raw)


@dataclass(frozen=True)
class InstancerConfig:
    """再帰インスタンス化の入力。`clamped()` で有効域に丸めたコピーを得る。"""

    geometry: str | int = "cube"
    retention: RetentionConfig = field(default_factory=RetentionConfig)
    arrangement: str | None = None
    base_size: float = 1.0
    depth: int = 1
    scale: float = 0.33

    def clamped(self) -> "InstancerConfig":
        return replace(
            self,
            base_size=max(SIZE_MIN, float(self.base_size)),
            depth=clamp_int(self.depth, DEPTH_MIN, DEPTH_MAX),
            scale=clamp(self.scale, SCALE_MIN, SCALE_MAX),
        )

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any] | None, previous: "InstancerConfig | None" = None
    ) -> "InstancerConfig":
        prev = previous or cls()
        data = data or {}
        retention = prev.retention
        if isinstance(data.get("retention"), Mapping):
            retention = RetentionConfig.from_mapping(data["retention"], previous=prev.retention)
        arrangement = data.get("arrangement", prev.arrangement)
        return cls(
            geometry=_geometry_key(data.get("geometry"), prev.geometry),
            retention=retention,
            arrangement=None if arrangement is None else str(arrangement),
            base_size=coerce_number(data.get("base_size"), prev.base_size),
            depth=coerce_number(data.get("depth"), prev.depth),  # type: ignore[arg-type]
            scale=coerce_number(data.get("scale"), prev.scale),
        ).clamped()


@dataclass(frozen=True)
class CurveConfig:
    """パラメトリック曲線（rose / hypotrochoid / epitrochoid）の設定。"""

    type: str = "rose"
    segments: int = 512
    a: float = 1.0
    k: float = 6.0
    R: float = 1.0
    r: float = 0.25
    d: float = 0.5

    def clamped(self) -> "CurveConfig":
        """値域へ丸めたコピー。転円半径 r は R−0.1 以下、ペン距離 d は r 以下。"""
        big_r = clamp(self.R, R_MIN, R_MAX)
        small_r = max(SMALL_R_MIN, min(big_r - RADIUS_GAP, float(self.r)))
        pen = max(D_MIN, min(small_r, float(self.d)))
        return replace(
            self,
            segments=clamp_int(self.segments, SEGMENTS_MIN, SEGMENTS_MAX),
            a=clamp(self.a, A_MIN, A_MAX),
            k=clamp(self.k, K_MIN, K_MAX),
            R=big_r,
            r=small_r,
            d=pen,
        )

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any] | None, previous: "CurveConfig | None" = None
    ) -> "CurveConfig":
        prev = previous or cls()
        data = data or {}
        return cls(
            type=str(data.get("type", prev.type)),
            segments=coerce_number(data.get("segments"), prev.segments),  # type: ignore[arg-type]
            a=coerce_number(data.get("a"), prev.a),
            k=coerce_number(data.get("k"), prev.k),
            R=coerce_number(data.get("R"), prev.R),
            r=coerce_number(data.get("r"), prev.r),
            d=coerce_number(data.get("d"), prev.d),
        ).clamped()


@dataclass(frozen=True)
class RepeatConfig:
    """放射複製の設定（複製数 / 1 複製あたりの回転角[deg] / 1 複製あたりの倍率）。"""

    count: int = 1
    rotation_deg: float = 15.0
    scale: float = 1.0

    def clamped(self) -> "RepeatConfig":
        return replace(
            self,
            count=clamp_int(self.count, REPEAT_COUNT_MIN, REPEAT_COUNT_MAX),
            rotation_deg=clamp(self.rotation_deg, ROTATION_MIN, ROTATION_MAX),
            scale=clamp(self.scale, CLONE_SCALE_MIN, CLONE_SCALE_MAX),
        )

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Any] | None, previous: "RepeatConfig | None" = None
    ) -> "RepeatConfig":
        prev = previous or cls()
        data = data or {}
        return cls(
            count=coerce_number(data.get("count"), prev.count),  # type: ignore[arg-type]
            rotation_deg=coerce_number(data.get("rotation_deg"), prev.rotation_deg),
            scale=coerce_number(data.get("scale"), prev.scale),
        ).clamped()


@dataclass(frozen=True)
class RadialClone:
    """共有ベース曲線に適用する 1 複製分の Z 回転 + 一様スケール。"""

    index: int
    rotation_deg: float
    rotation_rad: float
    scale: float


@dataclass(frozen=True)
class FractalStats:
    """表示用の統計値。`d` はハウスドルフ次元（算出不能なら 0）。"""

    n: int
    d: float
    r: str
    name: str
    components: str


__all__ = [
    "FeatureSet",
    "RetentionConfig",
    "InstanceNode",
    "Transform",
    "InstancerConfig",
    "CurveConfig",
    "RepeatConfig",
    "RadialClone",
    "FractalStats",
    "CURVE_TYPES",
]
