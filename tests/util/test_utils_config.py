from __future__ import annotations

from pathlib import Path

from util.utils import _find_project_root, config_section, load_config


def test_find_project_root_fallback(tmp_path: Path) -> None:
    # tmp_path/a/b のような構造（上流に .git/pyproject.toml/configs が無い）では
    # フォールバックで start.parent.parent を返す
    a = tmp_path / "a" / "b"
    a.mkdir(parents=True)
    got = _find_project_root(a)
    assert got == a.parent.parent


def test_root_config_overrides_top_level_sections(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text(
        "fractal:\n  depth: 1\n  scale: 0.33\ncurve:\n  type: rose\n", encoding="utf-8"
    )
    (tmp_path / "config.yaml").write_text("fractal:\n  depth: 3\n", encoding="utf-8")

    cfg = load_config(tmp_path)
    # トップレベル単位の上書き（ディープマージしない）
    assert cfg["fractal"] == {"depth": 3}
    assert cfg["curve"] == {"type": "rose"}
    assert config_section("repeat", cfg) == {}


def test_broken_yaml_is_ignored(tmp_path: Path) -> None:
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("fractal: [unclosed\n", encoding="utf-8")
    (tmp_path / "config.yaml").write_text("- just\n- a list\n", encoding="utf-8")
    assert load_config(tmp_path) == {}
