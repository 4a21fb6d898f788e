"""
どこで: `common` パッケージ。
何を: 名前登録表・環境変数設定・値域クランプ・ロギング初期化など、
shapes / effects / fractal が依存する下位ユーティリティ。標準ライブラリのみで書く。
"""

from .base_registry import BaseRegistry
from .param_utils import clamp, clamp_int, coerce_number

__all__ = ["BaseRegistry", "clamp", "clamp_int", "coerce_number"]
