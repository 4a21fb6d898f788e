"""
どこで: `engine.core.geometry`
何を: 曲線出力の共通表現 `Geometry`（ポリライン集合）。
なぜ: `shapes.spiro` の曲線と `effects.radial_repeat` の実体化結果を、レンダラが
連続ストリップとしてそのまま描ける 1 つの配列対にまとめるため。

表現:
    coords  : float32 (N, 3)   全ポリラインの頂点を連結したもの
    offsets : int32   (M+1,)   i 本目は coords[offsets[i]:offsets[i+1]]、offsets[0]=0, offsets[-1]=N

    # 3 点の線と 2 点の線
    #   coords  = [[0,0,0],[1,0,0],[1,1,0],[2,2,0],[3,2,0]]
    #   offsets = [0, 3, 5]

空は `coords.shape == (0, 3)`, `offsets == [0]`。変換メソッドは新しいインスタンスを返す。
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Sequence

import numpy as np

from common.types import Vec3

PolylineLike = np.ndarray | Sequence[float] | Sequence[Sequence[float]]


def _as_xyz(line: PolylineLike) -> np.ndarray:
    """1 本分の入力を `(K, 3) float32` にそろえる（2D は Z=0、平坦な 1 次元は xyz 並び）。"""
    arr = np.asarray(line, dtype=np.float32)
    if arr.ndim == 1 and arr.size % 3 == 0:
        return arr.reshape(-1, 3)
    if arr.ndim == 2 and arr.shape[1] == 3:
        return arr
    if arr.ndim == 2 and arr.shape[1] == 2:
        return np.column_stack([arr, np.zeros(len(arr), dtype=np.float32)])
    raise ValueError(f"ポリラインは (K,2) / (K,3) / (3K,) のいずれかである必要があります: {arr.shape}")


class Geometry:
    """ポリライン集合（`coords` と `offsets` の組）。"""

    __slots__ = ("coords", "offsets")

    coords: np.ndarray
    offsets: np.ndarray

    def __init__(self, coords: np.ndarray, offsets: np.ndarray) -> None:
        coords = np.ascontiguousarray(coords, dtype=np.float32)
        offsets = np.ascontiguousarray(offsets, dtype=np.int32)
        if coords.ndim != 2 or coords.shape[1] != 3:
            raise ValueError(f"coords の形状は (N, 3) である必要があります: {coords.shape}")
        if offsets.ndim != 1 or offsets.size == 0 or offsets[0] != 0:
            raise ValueError("offsets は 0 で始まる 1 次元配列である必要があります")
        if offsets[-1] != len(coords) or np.any(np.diff(offsets) < 0):
            raise ValueError("offsets は単調非減少で、末尾が頂点数と一致する必要があります")
        self.coords = coords
        self.offsets = offsets

    @classmethod
    def from_lines(cls, lines: Iterable[PolylineLike]) -> "Geometry":
        """ポリライン列から生成する。

        Raises
        ------
        ValueError
            いずれかの線の形状が (K,2) / (K,3) / (3K,) に当てはまらない場合。
        """
        parts = [_as_xyz(line) for line in lines]
        if not parts:
            return cls(np.empty((0, 3), dtype=np.float32), np.zeros(1, dtype=np.int32))
        offsets = np.concatenate([[0], np.cumsum([len(p) for p in parts])])
        return cls(np.concatenate(parts, axis=0), offsets)

    # ── 参照 ──────────────────────────
    def as_arrays(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]:
        """`(coords, offsets)`。既定は書き込み不可のビュー、`copy=True` で独立コピー。"""
        if copy:
            return self.coords.copy(), self.offsets.copy()
        views = self.coords.view(), self.offsets.view()
        for v in views:
            v.flags.writeable = False
        return views

    def iter_lines(self) -> Iterator[np.ndarray]:
        for start, stop in zip(self.offsets[:-1], self.offsets[1:]):
            yield self.coords[start:stop]

    @property
    def is_empty(self) -> bool:
        return len(self.coords) == 0

    @property
    def n_vertices(self) -> int:
        return len(self.coords)

    @property
    def n_lines(self) -> int:
        return len(self.offsets) - 1

    def __len__(self) -> int:
        return self.n_lines

    # ── 変換（純関数） ─────────────────
    def _map(self, fn: Callable[[np.ndarray], np.ndarray]) -> "Geometry":
        coords = self.coords.copy() if self.is_empty else fn(self.coords)
        return Geometry(coords, self.offsets.copy())

    def translate(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> "Geometry":
        delta = np.array([dx, dy, dz], dtype=np.float32)
        return self._map(lambda c: c + delta)

    def scale(
        self,
        sx: float = 1.0,
        sy: float | None = None,
        sz: float | None = None,
        center: Vec3 = (0.0, 0.0, 0.0),
    ) -> "Geometry":
        """`center` 基準の拡大縮小。`sy`/`sz` 省略時は `sx` で等方。"""
        factors = np.array([sx, sx if sy is None else sy, sx if sz is None else sz], dtype=np.float32)
        pivot = np.asarray(center, dtype=np.float32)
        return self._map(lambda c: (c - pivot) * factors + pivot)

    def concat(self, *others: "Geometry") -> "Geometry":
        """`others` の線を順に後ろへ連結する（offsets は先行頂点数だけずらす）。"""
        parts = (self, *others)
        coords = np.concatenate([g.coords for g in parts], axis=0)
        starts = np.cumsum([0] + [g.n_vertices for g in parts[:-1]])
        offsets = np.concatenate([[0]] + [g.offsets[1:] + s for g, s in zip(parts, starts)])
        return Geometry(coords, offsets)

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        return f"Geometry(N={self.n_vertices}, M={self.n_lines})"


__all__ = ["Geometry"]
