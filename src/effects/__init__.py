"""
どこで: `effects` パッケージ。
何を: `Geometry` 加工関数（import 副作用で登録）。
"""

from . import radial_repeat as _register_radial_repeat  # noqa: F401
from .radial_repeat import radial_clones
from .registry import effect, get_effect, is_effect_registered, list_effects

__all__ = ["effect", "get_effect", "list_effects", "is_effect_registered", "radial_clones"]
