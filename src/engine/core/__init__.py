"""
どこで: `engine.core` サブパッケージ。
何を: 曲線の `Geometry` と、葉変換・放射複製を 4x4 行列へ落とすレンダラ受け渡し用ユーティリティ。
"""
