"""
どこで: `common.logging`
何を: スクリプト/デモ用に、ルートロガーへ最小構成を 1 度だけ当てる。

ライブラリ側の各モジュールは `logging.getLogger(__name__)` を使うだけで、構成はしない。
出力されるイベント:
- `fractal.instancer` INFO: 予算による深さの切り詰め
- `fractal.arrangements` DEBUG: 未知の形状/配置名から立方体へのフォールバック
- `shapes.polyhedron` DEBUG: 特徴点テーブルの構築
- `shapes.spiro` DEBUG: 曲線パラメータのクランプ
"""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        from . import settings

        level = settings.get().LOG_LEVEL
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        return value if isinstance(value, int) else logging.INFO
    return int(level)


def setup_default_logging(level: int | str | None = None) -> None:
    """ルートロガーが未構成なら `basicConfig` を適用する。

    `level` 省略時は `FXG_LOG_LEVEL`（`common.settings`）に従う。
    既にハンドラがあれば呼び出し側の構成を尊重して何もしない。
    """
    if logging.getLogger().handlers:
        return
    logging.basicConfig(level=_resolve_level(level), format=_FORMAT)


__all__ = ["setup_default_logging"]
