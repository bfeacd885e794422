from __future__ import annotations

from pathlib import Path

import pytest

from commits_tilewall import surface as surface_mod
from commits_tilewall.surface import FontCache, FontLoadError, PillowSurface, find_font_path, new_image


def test_fill_rect_clips_to_image() -> None:
    img = new_image((20, 10), (0, 0, 0, 255))
    s = PillowSurface(img, FontCache(None))
    s.fill_rect(15, 5, 10, 10, (255, 0, 0, 255))
    assert img.getpixel((15, 5)) == (255, 0, 0, 255)
    assert img.getpixel((19, 9)) == (255, 0, 0, 255)
    assert img.getpixel((14, 5)) == (0, 0, 0, 255)
    s.fill_rect(-5, -5, 3, 3, (0, 255, 0, 255))
    s.fill_rect(0, 0, 0, 4, (0, 255, 0, 255))
    assert img.getpixel((0, 0)) == (0, 0, 0, 255)


def test_draw_text_with_default_font() -> None:
    img = new_image((80, 20), (255, 255, 255, 255))
    s = PillowSurface(img, FontCache(None))
    s.draw_text(2, 2, "2024", 16.0, (0, 0, 0, 255))
    assert img.getbbox() is not None
    colors = {c for _n, c in img.getcolors(maxcolors=80 * 20) or []}
    assert len(colors) > 1


def test_placeholder_image_is_transparent() -> None:
    img = new_image((1, 1))
    assert img.size == (1, 1)
    assert img.getpixel((0, 0)) == (0, 0, 0, 0)


def test_explicit_font_must_exist(tmp_path: Path) -> None:
    with pytest.raises(FontLoadError):
        find_font_path(tmp_path / "missing.ttf")


def test_explicit_font_is_returned(tmp_path: Path) -> None:
    font = tmp_path / "x.ttf"
    font.write_bytes(b"not really a font")
    assert find_font_path(str(font)) == font
    with pytest.raises(FontLoadError):
        FontCache(font).get(10)


def test_no_font_anywhere_is_fatal(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("PATH", str(tmp_path))
    monkeypatch.setattr(surface_mod, "FONT_CANDIDATES", [tmp_path / "nope.ttf"])
    with pytest.raises(FontLoadError):
        find_font_path(None)


def test_fc_match_result_is_used(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    font = tmp_path / "Sans-Bold.ttf"
    font.write_bytes(b"")
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    fake = bin_dir / "fc-match"
    fake.write_text(f"#!/bin/sh\nprintf '%s' '{font}'\n", encoding="utf-8")
    fake.chmod(0o755)
    monkeypatch.setenv("PATH", str(bin_dir))
    assert find_font_path() == font
