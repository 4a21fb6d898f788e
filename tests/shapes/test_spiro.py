from __future__ import annotations

import numpy as np
import pytest

from fractal.types import CurveConfig
from shapes import generate_curve, list_shapes
from shapes.registry import get_registry, get_shape, is_shape_registered
from shapes.spiro import epitrochoid, hypotrochoid, rose


def test_curve_shapes_are_registered() -> None:
    for name in ("rose", "hypotrochoid", "epitrochoid"):
        assert is_shape_registered(name)
    assert set(list_shapes()) >= {"rose", "hypotrochoid", "epitrochoid"}
    assert get_shape("Rose") is rose
    assert get_registry()["rose"] is rose


def test_rose_sample_count_and_first_point() -> None:
    g = generate_curve(CurveConfig(type="rose", segments=512, a=1.0, k=6.0))
    assert g.coords.shape == (513, 3)
    assert len(g) == 1
    assert np.allclose(g.coords[0], [0.5, 0.0, 0.0])
    assert np.all(g.coords[:, 2] == 0.0)


def test_trochoid_first_points() -> None:
    hypo = hypotrochoid(segments=64, R=1.0, r=0.25, d=0.5)
    epi = epitrochoid(segments=64, R=1.0, r=0.25, d=0.5)
    # d は r 以下に丸められる（0.5 -> 0.25）
    assert np.allclose(hypo.coords[0], [(0.75 + 0.25) * 0.5, 0.0, 0.0])
    assert np.allclose(epi.coords[0], [(1.25 - 0.25) * 0.5, 0.0, 0.0])
    assert hypo.coords.shape == (65, 3)


def test_output_is_bit_identical_for_same_input() -> None:
    cfg = CurveConfig(type="hypotrochoid", segments=777, R=3.0, r=1.3, d=0.9)
    a = generate_curve(cfg).coords
    b = generate_curve(cfg).coords
    assert a.tobytes() == b.tobytes()


def test_parameters_are_clamped() -> None:
    g = rose(segments=10, a=100.0, k=0.0)
    assert g.coords.shape == (65, 3)
    ref = rose(segments=64, a=10.0, k=0.5)
    assert np.array_equal(g.coords, ref.coords)

    cfg = CurveConfig(R=1.0, r=5.0, d=9.0).clamped()
    assert cfg.r == pytest.approx(0.9)
    assert cfg.d == pytest.approx(0.9)


def test_unknown_curve_type_raises() -> None:
    with pytest.raises(ValueError):
        generate_curve(CurveConfig(type="cardioid"))


def test_clamp_curve_config_logs_changes(caplog: pytest.LogCaptureFixture) -> None:
    import logging

    from shapes import clamp_curve_config

    with caplog.at_level(logging.DEBUG, logger="shapes.spiro"):
        safe = clamp_curve_config(CurveConfig(type="rose", segments=99999, a=0.0))
    assert safe.segments == 4096
    assert safe.a == 0.1
    assert any("clamped" in r.getMessage() for r in caplog.records)
