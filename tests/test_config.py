from __future__ import annotations

import json
from pathlib import Path

import pytest

from commits_tilewall.config import Settings, build_settings, load_config
from commits_tilewall.layout import LayoutConfig
from commits_tilewall.themes import DARK, GITHUB, LIGHT, get_theme


def test_load_config_missing_file(tmp_path: Path) -> None:
    assert load_config(tmp_path / "config.json") == {}


def test_load_config_invalid_json(tmp_path: Path) -> None:
    p = tmp_path / "config.json"
    p.write_text("{nope", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(p)
    p.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(p)


def test_defaults() -> None:
    s = build_settings({})
    assert s == Settings()
    assert s.theme is LIGHT
    assert s.min_commits == 5
    assert s.layout == LayoutConfig()
    assert s.output_dir == Path(".")


def test_file_values_and_overrides(tmp_path: Path) -> None:
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"theme": "dark", "min_commits": 3, "output_dir": "out", "unrelated": 1}), encoding="utf-8")
    s = build_settings(load_config(p))
    assert s.theme is DARK
    assert s.min_commits == 3
    assert s.output_dir == Path("out")

    s2 = build_settings(load_config(p), theme="GitHub", font_path=None, output_dir="")
    assert s2.theme is GITHUB
    assert s2.output_dir == Path("out")


def test_bad_min_commits() -> None:
    for bad in (0, -2, "5", True, 2.5):
        with pytest.raises(ValueError):
            build_settings({"min_commits": bad})


def test_unknown_override_key() -> None:
    with pytest.raises(TypeError):
        build_settings({}, colour="red")


def test_settings_are_frozen() -> None:
    s = Settings()
    with pytest.raises(AttributeError):
        s.min_commits = 1  # type: ignore[misc]


def test_theme_lookup() -> None:
    assert get_theme("dark") is DARK
    assert get_theme(" GITHUB ") is GITHUB
    assert get_theme("solarized") is LIGHT
    assert get_theme("") is LIGHT
    for theme in (LIGHT, DARK, GITHUB):
        assert len(theme.commit_colors) == 6
        assert theme.commit_color(0) == theme.commit_colors[0]
