from __future__ import annotations

import dataclasses
import json
from pathlib import Path

from .layout import LayoutConfig
from .selection import MIN_ACTIVE_COMMITS
from .themes import DEFAULT_THEME, THEMES, Theme, get_theme

CONFIG_KEYS = ("theme", "min_commits", "font_path", "output_dir")


@dataclasses.dataclass(frozen=True)
class Settings:
    theme: Theme = THEMES[DEFAULT_THEME]
    layout: LayoutConfig = LayoutConfig()
    min_commits: int = MIN_ACTIVE_COMMITS
    font_path: str = ""
    output_dir: Path = Path(".")


def load_config(config_path: Path) -> dict:
    if not config_path.exists():
        return {}
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"invalid JSON in {config_path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{config_path} must contain a JSON object")
    return data


def build_settings(config: dict, **overrides: object) -> Settings:
    """
    Merge a loaded config dict with command line overrides (None/"" means "not given")
    into immutable Settings. Unknown config keys are ignored.
    """
    merged: dict[str, object] = {k: config.get(k) for k in CONFIG_KEYS if config.get(k) not in (None, "")}
    for k, v in overrides.items():
        if k not in CONFIG_KEYS:
            raise TypeError(f"unknown setting: {k}")
        if v not in (None, ""):
            merged[k] = v

    theme = get_theme(str(merged.get("theme", DEFAULT_THEME)))

    min_commits_raw = merged.get("min_commits", MIN_ACTIVE_COMMITS)
    if isinstance(min_commits_raw, bool) or not isinstance(min_commits_raw, int) or min_commits_raw < 1:
        raise ValueError(f"min_commits must be a positive integer, got {min_commits_raw!r}")

    font_path = str(merged.get("font_path", "") or "")
    output_dir = Path(str(merged.get("output_dir", ".") or "."))

    return Settings(
        theme=theme,
        min_commits=min_commits_raw,
        font_path=font_path,
        output_dir=output_dir,
    )
