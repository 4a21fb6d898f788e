"""
どこで: `fractal.stats`
何を: コピー数 N とハウスドルフ次元 D = ln(N) / ln(1/r) を求める（表示専用、副作用なし）。
"""

from __future__ import annotations

import math

from fractal.retention import get_fractal_positions
from fractal.types import FractalStats, RetentionConfig
from shapes.polyhedron import canonical_solid


def hausdorff_dimension(n: int, r: float) -> float:
    """N > 0 かつ 0 < r < 1 のとき ln(N)/ln(1/r)、それ以外は 0。"""
    if n > 0 and 0.0 < r < 1.0:
        return math.log(n) / math.log(1.0 / r)
    return 0.0


def compute_stats(
    geometry: str | int,
    retention: RetentionConfig,
    scale: float,
    arrangement: str | None = None,
) -> FractalStats:
    """統計値を返す。N は縮小率 1 でのオフセット数。"""
    n = len(get_fractal_positions(geometry, retention, 1.0, arrangement))
    kept = retention.kept_components()
    # 面数の整数別名は立体名で表示する
    label = (canonical_solid(geometry) or str(geometry)) if isinstance(geometry, int) else str(geometry)
    return FractalStats(
        n=n,
        d=hausdorff_dimension(n, float(scale)),
        r=f"{float(scale):.3f}",
        name=f"Custom {label[:1].upper()}{label[1:]} Fractal",
        components=f"Keeps: {', '.join(kept)}" if kept else "Keeps: Nothing (Empty)",
    )


__all__ = ["hausdorff_dimension", "compute_stats"]
