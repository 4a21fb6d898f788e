"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_int, env_str

# インスタンス数の絶対上限。環境変数でもこれを超えることはできない。
HARD_MAX_INSTANCES = 20_000


@dataclass
class _Settings:
    # 再帰インスタンス化
    MAX_INSTANCES: int = HARD_MAX_INSTANCES

    # random 配置（None のとき非決定的）
    RANDOM_SEED: int | None = None

    # ロギング
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - int は `env_int`、文字列は `env_str` を使用。
    - `MAX_INSTANCES` は [1, HARD_MAX_INSTANCES] に丸める。
    """
    _settings.MAX_INSTANCES = (
        env_int(
            "FXG_MAX_INSTANCES",
            HARD_MAX_INSTANCES,
            min_value=1,
            max_value=HARD_MAX_INSTANCES,
        )
        or HARD_MAX_INSTANCES
    )
    _settings.RANDOM_SEED = env_int("FXG_RANDOM_SEED", None)
    _settings.LOG_LEVEL = env_str("FXG_LOG_LEVEL", "INFO").upper()


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "HARD_MAX_INSTANCES", "_Settings"]
