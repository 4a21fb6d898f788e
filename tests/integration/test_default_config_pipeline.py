from __future__ import annotations

import importlib

import pytest

from api import (
    compute_instance_transforms,
    generate_curve_points,
    instance_matrices,
    load_curve_config,
    load_instancer_config,
    load_repeat_config,
    radial_clones,
)
from util.utils import load_config


@pytest.mark.integration
def test_repository_defaults_drive_the_whole_pipeline() -> None:
    cfg = load_config()
    assert {"fractal", "curve", "repeat"} <= set(cfg)

    inst = load_instancer_config()
    leaves = compute_instance_transforms(inst)
    assert len(leaves) == 20  # 立方体・頂点+辺・深さ 1
    assert instance_matrices(leaves).shape == (20, 4, 4)

    pts = generate_curve_points(load_curve_config())
    assert pts.shape == (513, 3)
    assert len(radial_clones(load_repeat_config())) == 1


@pytest.mark.integration
def test_src_packages_importable() -> None:
    for name in ("api", "common", "effects", "engine.core", "fractal", "shapes", "util.utils"):
        importlib.import_module(name)
