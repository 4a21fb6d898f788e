"""
どこで: `common.env`
何を: `FXG_*` 環境変数の型付き読み取り（未設定・不正値は既定値）。
"""

from __future__ import annotations

import os
from typing import Optional


def _raw(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def env_int(
    name: str,
    default: Optional[int] = None,
    *,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> Optional[int]:
    """整数の環境変数を返す。

    Parameters
    ----------
    name : str
        環境変数名（例: `FXG_MAX_INSTANCES`）。
    default : Optional[int]
        未設定・空文字・整数として解釈できない場合の値。
    min_value, max_value : Optional[int]
        指定時は境界へ丸める（例外にしない）。
    """
    raw = _raw(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    if min_value is not None:
        value = max(min_value, value)
    if max_value is not None:
        value = min(max_value, value)
    return value


def env_str(name: str, default: str) -> str:
    """文字列の環境変数を返す（前後空白は除去、空なら既定値）。"""
    raw = _raw(name)
    return default if raw is None else raw


__all__ = ["env_int", "env_str"]
