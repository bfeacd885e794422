from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import build_settings, load_config
from .git import HistorySourceError
from .render import generate_commit_image, output_filename
from .surface import FontLoadError
from .themes import THEMES


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commits-tilewall",
        usage="%(prog)s <author> <repo1> [repo2...] [--theme <theme>]",
        description="Render a per-year commit calendar image for one author across git repos.",
        epilog="Available themes: light (default), dark, github",
    )
    parser.add_argument("author", nargs="?", help="Author filter passed to `git log --author`.")
    parser.add_argument("repos", nargs="*", type=Path, help="Repository directories to read history from.")
    parser.add_argument("--theme", type=str, default=None, help="Color theme: light, dark or github.")
    parser.add_argument("--config", type=Path, default=None, help="JSON config file (default: none).")
    parser.add_argument("--font", type=str, default=None, help="TrueType font file for labels (default: fontconfig lookup).")
    parser.add_argument("--output-dir", type=Path, default=None, help="Directory to write the image into (default: cwd).")
    return parser


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser()
    args = parser.parse_intermixed_args(argv)
    if not args.author or not args.repos:
        parser.print_usage(sys.stderr)
        print("Available themes: light (default), dark, github", file=sys.stderr)
        return 1

    try:
        config = load_config(args.config) if args.config is not None else {}
        settings = build_settings(
            config,
            theme=args.theme,
            font_path=args.font,
            output_dir=str(args.output_dir) if args.output_dir is not None else None,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    requested_theme = str(args.theme or config.get("theme", "") or "").strip().lower()
    if requested_theme and requested_theme not in THEMES:
        print(f"Warning: unknown theme {requested_theme!r}; using {settings.theme.name}.", file=sys.stderr)

    try:
        img = generate_commit_image(args.author, list(args.repos), settings)
    except (HistorySourceError, FontLoadError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output_path = settings.output_dir / output_filename(args.author)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        img.save(output_path)
    except OSError as e:
        print(f"Error: failed to save the image to {output_path}: {e}", file=sys.stderr)
        return 1

    print(f"Wrote {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
