from __future__ import annotations

import logging
from dataclasses import replace

from api import (
    compute_instance_transforms,
    compute_stats,
    curve_geometry,
    generate_curve_points,
    instance_matrices,
    load_curve_config,
    load_instancer_config,
    load_repeat_config,
    materialize_instances,
    radial_clones,
)
from common.logging import setup_default_logging

logger = logging.getLogger("main")


def main() -> None:
    """既定設定（configs/default.yaml）で配置と曲線を計算し、概要をログに出す。"""
    setup_default_logging()

    cfg = load_instancer_config()
    leaves = compute_instance_transforms(cfg)
    stats = compute_stats(cfg.geometry, cfg.retention, cfg.scale, cfg.arrangement)
    mats = instance_matrices(leaves)
    logger.info("%s: N=%d D=%.4f r=%s (%s)", stats.name, stats.n, stats.d, stats.r, stats.components)
    logger.info("depth=%d leaves=%d matrices=%s", cfg.depth, len(leaves), mats.shape)

    curve = load_curve_config()
    pts = generate_curve_points(curve)
    clones = radial_clones(load_repeat_config())
    logger.info("curve=%s points=%d clones=%d", curve.type, len(pts), len(clones))

    # 曲線を各葉へ置いたポリライン出力（浅い深さで確認）
    flowers = materialize_instances(curve_geometry(curve), replace(cfg, depth=min(cfg.depth, 2)))
    logger.info("flowers: lines=%d vertices=%d", flowers.n_lines, flowers.n_vertices)


if __name__ == "__main__":
    main()
