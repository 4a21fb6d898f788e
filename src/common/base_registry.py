"""
どこで: `common.base_registry`
何を: 名前→関数の登録表。`@shape`（曲線）/`@effect`（複製）/`@arrangement`（配置パターン）が共有する。

キーの扱い:
- 前後空白を除き、`-` を `_` に、CamelCase を snake_case にして小文字化する。
  例: "FibonacciSpiral" → "fibonacci_spiral"、"random-cloud" → "random_cloud"
- 別名（aliases）は正規名へ解決される。一覧 `list_all()` には正規名だけが並ぶ。
"""

from __future__ import annotations

import inspect
import re
from typing import Any, Callable, Iterable

_CAMEL_WORD = re.compile(r"(.)([A-Z][a-z]+)")
_CAMEL_TAIL = re.compile(r"([a-z0-9])([A-Z])")


class BaseRegistry:
    """正規化キーで関数を保持する登録表。

    例外:
    - TypeError: キーが str でない場合。
    - ValueError: キーが空、または別オブジェクトが同じキーで登録済みの場合。
    - KeyError: `get` で未登録名を引いた場合。
    """

    def __init__(self) -> None:
        self._registry: dict[str, Any] = {}
        self._aliases: dict[str, str] = {}

    @staticmethod
    def _normalize_key(name: str) -> str:
        if not isinstance(name, str):
            raise TypeError("レジストリキーは str である必要があります")
        key = name.strip().replace("-", "_")
        if not key:
            raise ValueError("レジストリキーは空であってはなりません")
        if any(c.isupper() for c in key):
            key = _CAMEL_TAIL.sub(r"\1_\2", _CAMEL_WORD.sub(r"\1_\2", key))
        return key.lower()

    def _resolve(self, name: str) -> str:
        key = self._normalize_key(name)
        return self._aliases.get(key, key)

    def register(self, name: str | None = None, aliases: Iterable[str] = ()) -> Callable:
        """`obj` を `name`（省略時は `obj.__name__`）と別名で登録するデコレータ。"""
        alias_keys = [self._normalize_key(a) for a in aliases]

        def decorator(obj: Any) -> Any:
            key = self._normalize_key(name if name else obj.__name__)
            current = self._registry.get(key)
            if current is not None and current is not obj:
                raise ValueError(f"'{key}' は既に登録されています")
            self._registry[key] = obj
            self._aliases.update({alias: key for alias in alias_keys})
            return obj

        return decorator

    def decorator(self, label: str) -> Callable:
        """`@label` / `@label()` / `@label("name", aliases=...)` の 3 形式を受け付けるデコレータを作る。

        登録対象は関数のみ（クラスや callable インスタンスは TypeError）。
        """

        def _checked(obj: Any, name: str | None, aliases: Iterable[str]) -> Any:
            if not inspect.isfunction(obj):
                raise TypeError(f"{label} は関数のみ登録可能です: got {obj!r}")
            return self.register(name, aliases=aliases)(obj)

        def deco(arg: Any | None = None, /, name: str | None = None, aliases: Iterable[str] = ()):
            if inspect.isfunction(arg) and name is None:
                return _checked(arg, None, aliases)
            resolved = arg if isinstance(arg, str) and name is None else name
            return lambda obj: _checked(obj, resolved, aliases)

        return deco

    def get(self, name: str) -> Any:
        key = self._resolve(name)
        try:
            return self._registry[key]
        except KeyError:
            raise KeyError(f"'{name}' は登録されていません") from None

    def canonical(self, name: str) -> str | None:
        """別名を解決した正規名。未登録なら None。"""
        key = self._resolve(name)
        return key if key in self._registry else None

    def list_all(self) -> list[str]:
        """正規名の一覧（登録順）。"""
        return list(self._registry)

    def is_registered(self, name: str) -> bool:
        return self._resolve(name) in self._registry

    def unregister(self, name: str) -> None:
        """登録と、その正規名を指す別名を外す。未登録名は無視。"""
        key = self._resolve(name)
        if self._registry.pop(key, None) is not None:
            self._aliases = {a: k for a, k in self._aliases.items() if k != key}

    def clear(self) -> None:
        self._registry.clear()
        self._aliases.clear()

    @property
    def registry(self) -> dict[str, Any]:
        """登録表のコピー。"""
        return dict(self._registry)
