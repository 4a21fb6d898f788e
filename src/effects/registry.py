"""
どこで: `effects.registry`
何を: `Geometry -> Geometry` の加工関数（現状は放射複製）の登録と検索。
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from common.base_registry import BaseRegistry

EffectFn = Callable[..., Any]

_effect_registry = BaseRegistry()

effect = _effect_registry.decorator("@effect")


def get_effect(name: str) -> EffectFn:
    return _effect_registry.get(name)


def list_effects() -> list[str]:
    return sorted(_effect_registry.list_all())


def is_effect_registered(name: str) -> bool:
    return _effect_registry.is_registered(name)


def get_registry() -> Mapping[str, Any]:
    return _effect_registry.registry


__all__ = ["effect", "get_effect", "list_effects", "is_effect_registered", "get_registry"]
