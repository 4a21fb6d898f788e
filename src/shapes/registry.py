"""
どこで: `shapes.registry`
何を: 曲線生成関数（`Geometry` を返す）の登録と検索。
なぜ: `CurveConfig.type` の文字列から生成関数を引けるようにするため。

    @shape
    def rose(*, segments=512, a=1.0, k=6.0, **params) -> Geometry: ...
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from common.base_registry import BaseRegistry

ShapeFn = Callable[..., Any]

_shape_registry = BaseRegistry()

shape = _shape_registry.decorator("@shape")


def get_shape(name: str) -> ShapeFn:
    """曲線関数を返す（未登録は KeyError）。"""
    return _shape_registry.get(name)


def list_shapes() -> list[str]:
    return sorted(_shape_registry.list_all())


def is_shape_registered(name: str) -> bool:
    return _shape_registry.is_registered(name)


def unregister(name: str) -> None:
    _shape_registry.unregister(name)


def get_registry() -> Mapping[str, Any]:
    return _shape_registry.registry


__all__ = [
    "shape",
    "get_shape",
    "list_shapes",
    "is_shape_registered",
    "unregister",
    "get_registry",
]
