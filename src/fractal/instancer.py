"""
どこで: `fractal.instancer`
何を: 深さ制限付きの再帰インスタンス化で、葉インスタンスの変換（位置 + 一様スケール）列を生成する。
なぜ: 1 つの共有メッシュをインスタンス描画するレンダラへ、自己相似配置をそのまま渡すため。

アルゴリズム:
1. 縮小率 1 でオフセットを求め、1 世代あたりのコピー数 N を得る。
2. 予算クランプ: N^depth が上限（既定 20000）を超える間、深さを 1 ずつ減らす。
   保持ルール（N）は変えない。
3. 明示スタックによる深さ優先展開。葉（残り段数 0）はそのまま出力し、それ以外は
   現在の縮小率のオフセット cp ごとに子 {位置 = 親位置 + cp·(親サイズ/2), サイズ = 親サイズ·r}
   を積む。特徴座標は半径 1（全幅 2）で定義されるため /2 する。
4. 葉が 1 つも無ければ、根の位置/サイズで 1 つだけ代替の変換を出す。

出力順は規定しない（変換の多重集合のみが決定的）。`random` 配置では位置が毎回変わるが、
点数は固定なので出力数は決定的。
"""

from __future__ import annotations

import logging

import numpy as np

from common import settings
from common.settings import HARD_MAX_INSTANCES
from common.types import ORIGIN, as_point3
from fractal.retention import count_copies, get_fractal_positions
from fractal.types import InstanceNode, InstancerConfig, Transform

logger = logging.getLogger(__name__)


def max_instances() -> int:
    """現在のインスタンス上限（設定値、ただし 20000 を超えない）。"""
    return max(1, min(HARD_MAX_INSTANCES, int(settings.get().MAX_INSTANCES)))


def effective_depth(n: int, depth: int, limit: int | None = None) -> int:
    """N^d ≤ limit を満たす最大の d（d ≤ depth）を返す。

    N ≤ 1 のときは葉数が増えないので depth をそのまま返す。
    """
    if limit is None:
        limit = max_instances()
    if n <= 1:
        return depth
    estimate = n**depth
    eff = depth
    while estimate > limit and eff > 0:
        estimate //= n
        eff -= 1
    return eff


def compute_instance_transforms(
    config: InstancerConfig,
    *,
    rng: np.random.Generator | None = None,
) -> list[Transform]:
    """葉インスタンスの変換列を返す（長さは常に 1 以上、上限以下）。

    Parameters
    ----------
    config : InstancerConfig
        形状種別・保持ルール・配置パターン・基準サイズ・深さ・縮小率。
        取り込み時に `clamped()` される（深さ [0, 5]、縮小率 [0.1, 0.5]）。
    rng : numpy.random.Generator | None
        `random` 配置の乱数源（省略時は設定に従う）。
    """
    cfg = config.clamped()
    n = count_copies(cfg.geometry, cfg.retention, cfg.arrangement)
    depth = effective_depth(n, cfg.depth)
    if depth < cfg.depth:
        logger.info(
            "instance budget: depth %d -> %d (N=%d, limit=%d)",
            cfg.depth,
            depth,
            n,
            max_instances(),
        )

    leaves: list[Transform] = []
    stack: list[InstanceNode] = [InstanceNode(ORIGIN, cfg.base_size, depth)]
    while stack:
        node = stack.pop()
        if node.level_remaining <= 0:
            leaves.append(Transform(node.position, node.size))
            continue
        offsets = get_fractal_positions(
            cfg.geometry, cfg.retention, cfg.scale, cfg.arrangement, rng=rng
        )
        children = np.asarray(node.position) + offsets * (node.size / 2.0)
        child_size = node.size * cfg.scale
        level = node.level_remaining - 1
        stack.extend(InstanceNode(as_point3(p), child_size, level) for p in children)

    if not leaves:
        leaves.append(Transform(ORIGIN, cfg.base_size))
    return leaves


__all__ = ["compute_instance_transforms", "effective_depth", "max_instances"]
