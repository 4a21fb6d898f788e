"""
どこで: `common` の型定義。
何を: Vec3/Point3 などの軽量エイリアス（組込みジェネリックで記述）。
なぜ: 依存の少ない場所に配置して循環と分散定義を避けるため。
"""

Vec3 = tuple[float, float, float]

# 不変の (x, y, z)。特徴点・配置位置の受け渡しに用いる。
Point3 = tuple[float, float, float]

ORIGIN: Point3 = (0.0, 0.0, 0.0)


def as_point3(v: object) -> Point3:
    """シーケンス/ndarray 行を `Point3`（float の 3 タプル）へ変換する。"""
    x, y, z = v  # type: ignore[misc]
    return (float(x), float(y), float(z))


__all__ = ["Vec3", "Point3", "ORIGIN", "as_point3"]
