"""
どこで: `common` のパラメータ正規化ユーティリティ。
何を: 数値入力のクランプと「直前の有効値を保持する」数値変換。
なぜ: 生成系が受け取る値を取り込み時点で有効域に収め、内部で不正状態を表現しないため。
"""

from __future__ import annotations

import math
from typing import Any


def clamp(x: float, lo: float, hi: float) -> float:
    """`x` を [lo, hi] に収める。`lo > hi` のときは `lo` が優先される。"""
    return max(lo, min(hi, float(x)))


def clamp_int(x: float, lo: int, hi: int) -> int:
    """四捨五入してから [lo, hi] に収める（JS の Math.round と同じく .5 は切り上げ）。"""
    return int(max(lo, min(hi, math.floor(float(x) + 0.5))))


def is_finite_number(raw: Any) -> bool:
    if isinstance(raw, bool):
        return False
    try:
        return math.isfinite(float(raw))
    except (TypeError, ValueError):
        return False


def coerce_number(raw: Any, previous: float) -> float:
    """数値へ変換する。数値として解釈できない入力は `previous` を返す。

    - 文字列は `float()` で解釈（前後空白は許容）。
    - NaN/inf、bool、None は不正扱い。
    """
    if not is_finite_number(raw):
        return float(previous)
    return float(raw)


_TRUE_WORDS = frozenset({"true", "t", "yes", "y", "on", "1"})
_FALSE_WORDS = frozenset({"false", "f", "no", "n", "off", "0"})


def coerce_bool(raw: Any, previous: bool) -> bool:
    """真偽値へ変換する。解釈できない入力は `previous` を返す。

    - bool はそのまま、整数 0/1 と "true"/"false"/"yes"/"no"/"on"/"off" 等の文字列を受け付ける。
    """
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int) and raw in (0, 1):
        return bool(raw)
    if isinstance(raw, str):
        word = raw.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    return bool(previous)


__all__ = [
    "clamp",
    "clamp_int",
    "is_finite_number",
    "coerce_number",
    "coerce_bool",
]
