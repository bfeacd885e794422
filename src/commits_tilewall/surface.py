from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Protocol

from PIL import Image, ImageDraw, ImageFont

from .themes import Color

FONT_CANDIDATES = [
    Path("/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf"),
    Path("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"),
    Path("/usr/share/fonts/dejavu/DejaVuSans-Bold.ttf"),
    Path("/usr/share/fonts/TTF/DejaVuSans-Bold.ttf"),
    Path("/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf"),
    Path("/Library/Fonts/Arial Bold.ttf"),
    Path("/System/Library/Fonts/Supplemental/Arial Bold.ttf"),
    Path(r"C:/Windows/Fonts/arialbd.ttf"),
    Path(r"C:/Windows/Fonts/arial.ttf"),
]


class FontLoadError(RuntimeError):
    pass


class DrawingSurface(Protocol):
    def fill_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None: ...

    def draw_text(self, x: int, y: int, text: str, size: float, color: Color) -> None: ...


def _fc_match(pattern: str) -> Path | None:
    try:
        proc = subprocess.run(["fc-match", "-f", "%{file}", pattern], capture_output=True, text=True)
    except OSError:
        return None
    if proc.returncode != 0:
        return None
    out = proc.stdout.strip()
    if not out:
        return None
    p = Path(out)
    return p if p.is_file() else None


def find_font_path(explicit: str | Path | None = None) -> Path:
    """
    Resolve the TrueType font used for all labels.

    Order: an explicit path, fontconfig's match for "sans:bold" then "sans",
    then a few well-known install locations.
    """
    if explicit:
        p = Path(explicit).expanduser()
        if not p.is_file():
            raise FontLoadError(f"font file not found: {p}")
        return p
    for pattern in ("sans:bold", "sans"):
        p = _fc_match(pattern)
        if p is not None:
            return p
    for p in FONT_CANDIDATES:
        if p.is_file():
            return p
    raise FontLoadError("could not find a sans font on the system (install fontconfig or pass --font)")


class FontCache:
    """Fonts by pixel size. With no path, Pillow's built-in bitmap font is used for every size."""

    def __init__(self, path: Path | None) -> None:
        self.path = path
        self._fonts: dict[int, ImageFont.ImageFont | ImageFont.FreeTypeFont] = {}

    def get(self, size: float) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
        px = max(1, int(round(size)))
        font = self._fonts.get(px)
        if font is not None:
            return font
        if self.path is None:
            font = ImageFont.load_default()
        else:
            try:
                font = ImageFont.truetype(str(self.path), px)
            except OSError as e:
                raise FontLoadError(f"failed to load font {self.path}: {e}") from e
        self._fonts[px] = font
        return font


class PillowSurface:
    def __init__(self, image: Image.Image, fonts: FontCache) -> None:
        self.image = image
        self.fonts = fonts
        self._draw = ImageDraw.Draw(image)

    def fill_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        if w <= 0 or h <= 0:
            return
        # Pillow clips shapes to the image bounds.
        self._draw.rectangle((x, y, x + w - 1, y + h - 1), fill=color)

    def draw_text(self, x: int, y: int, text: str, size: float, color: Color) -> None:
        self._draw.text((x, y), text, fill=color, font=self.fonts.get(size))


def new_image(size: tuple[int, int], background: Color | None = None) -> Image.Image:
    if background is None:
        return Image.new("RGBA", size)
    return Image.new("RGBA", size, background)
