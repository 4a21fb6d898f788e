"""共通フィクスチャ。

- 乱数シード固定
- 保持ルール/設定の小さな試料
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from common import settings
from fractal.types import RetentionConfig


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy の乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(2024)


@pytest.fixture()
def keep_vertices() -> RetentionConfig:
    return RetentionConfig(keep_vertices=True, keep_edges=False, keep_faces=False, keep_center=False)


@pytest.fixture()
def keep_all() -> RetentionConfig:
    return RetentionConfig(True, True, True, True)


@pytest.fixture()
def keep_none() -> RetentionConfig:
    return RetentionConfig.none()


@pytest.fixture()
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """環境変数を差し替えた後に `settings.reload_from_env()` を呼べるようにし、終了時に戻す。"""
    for name in ("FXG_MAX_INSTANCES", "FXG_RANDOM_SEED", "FXG_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch
    monkeypatch.undo()
    settings.reload_from_env()
