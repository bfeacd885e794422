from __future__ import annotations

import dataclasses

Color = tuple[int, int, int, int]


@dataclasses.dataclass(frozen=True)
class Theme:
    name: str
    background: Color
    text_primary: Color
    text_secondary: Color
    separator: Color
    commit_colors: tuple[Color, Color, Color, Color, Color, Color]  # no commits, 1, 2-4, 5-9, 10-19, 20+

    def commit_color(self, bucket: int) -> Color:
        return self.commit_colors[bucket]


LIGHT = Theme(
    name="light",
    background=(255, 255, 255, 255),
    text_primary=(50, 50, 50, 255),
    text_secondary=(100, 100, 100, 255),
    separator=(220, 220, 220, 255),
    commit_colors=(
        (240, 240, 240, 255),
        (140, 240, 140, 255),
        (100, 220, 100, 255),
        (60, 200, 60, 255),
        (40, 180, 40, 255),
        (20, 160, 20, 255),
    ),
)

DARK = Theme(
    name="dark",
    background=(30, 30, 30, 255),
    text_primary=(255, 255, 255, 255),
    text_secondary=(200, 200, 200, 255),
    separator=(70, 70, 70, 255),
    commit_colors=(
        (50, 50, 50, 255),
        (40, 160, 40, 255),
        (60, 200, 60, 255),
        (80, 240, 80, 255),
        (120, 255, 120, 255),
        (160, 255, 160, 255),
    ),
)

GITHUB = Theme(
    name="github",
    background=(255, 255, 255, 255),
    text_primary=(24, 23, 23, 255),
    text_secondary=(87, 96, 106, 255),
    separator=(235, 237, 240, 255),
    commit_colors=(
        (235, 237, 240, 255),
        (155, 233, 168, 255),
        (100, 220, 123, 255),
        (64, 196, 99, 255),
        (48, 161, 78, 255),
        (33, 110, 57, 255),
    ),
)

THEMES: dict[str, Theme] = {t.name: t for t in (LIGHT, DARK, GITHUB)}
DEFAULT_THEME = "light"


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive); unknown names get the light theme."""
    return THEMES.get((name or "").strip().lower(), THEMES[DEFAULT_THEME])
