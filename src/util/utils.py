"""
どこで: `util.utils`
何を: YAML 設定（`configs/default.yaml` → ルート `config.yaml`）の読み込みとセクション取得。
なぜ: フラクタル/曲線/複製の既定値をコード外で差し替えられるようにするため。
"""

from pathlib import Path
from typing import Any, Dict

import yaml

# プロジェクトルートの目印（いずれか 1 つがあればルートとみなす）
_ROOT_MARKERS = (".git", "pyproject.toml", "configs")

# 読み込み順。後の層がトップレベルキー単位で前の層を上書きする。
_CONFIG_LAYERS = (Path("configs") / "default.yaml", Path("config.yaml"))


def _safe_load_yaml(path: Path) -> Dict[str, Any]:
    """YAML を辞書として読む。読めない/壊れている/辞書でない場合は空辞書。"""
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError):
        return {}
    return data if isinstance(data, dict) else {}


def _find_project_root(start: Path) -> Path:
    """`start` から親方向にたどり、目印を持つ最初のディレクトリを返す。

    見つからなければ `start.parent.parent`（`<repo>/src/util` を想定）。
    """
    here = start.resolve()
    for candidate in (here, *here.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return here.parent.parent


def load_config(project_root: Path | None = None) -> Dict[str, Any]:
    """設定層を順に重ねた辞書を返す（フェイルソフト）。

    Parameters
    ----------
    project_root : Path | None
        設定を探すルート。省略時はこのファイルの位置から推定する。

    Notes
    -----
    ネストした辞書はマージしない。`config.yaml` に `fractal:` を書くと
    `default.yaml` の `fractal:` セクション全体が置き換わる。
    """
    root = project_root if project_root is not None else _find_project_root(Path(__file__).parent)
    merged: Dict[str, Any] = {}
    for rel in _CONFIG_LAYERS:
        path = root / rel
        if path.is_file():
            merged.update(_safe_load_yaml(path))
    return merged


def config_section(name: str, cfg: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """`fractal` / `curve` / `repeat` などのセクションを返す（欠落・型違いは空辞書）。"""
    source = load_config() if cfg is None else cfg
    section = source.get(name)
    return dict(section) if isinstance(section, dict) else {}


__all__ = ["load_config", "config_section"]
