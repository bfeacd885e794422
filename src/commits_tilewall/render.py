from __future__ import annotations

import datetime as dt
from pathlib import Path

from PIL import Image

from .aggregate import aggregate_logs, summarize_year, year_totals
from .config import Settings
from .git import read_repo_logs
from .intensity import classify, legend_text
from .layout import MONTH_ABBRS, CalendarLayout
from .models import Aggregate, YearSummary
from .selection import format_year_counts, select_active_years
from .surface import DrawingSurface, FontCache, PillowSurface, find_font_path, new_image
from .themes import Theme


def summary_lines(summary: YearSummary) -> list[str]:
    return [
        f"{summary.commits} commits total",
        f"{summary.stats.files_changed} files changed",
        f"{summary.stats.insertions} insertions(+)",
        f"{summary.stats.deletions} deletions(-)",
    ]


def render_year(
    surface: DrawingSurface,
    layout: CalendarLayout,
    theme: Theme,
    agg: Aggregate,
    year_index: int,
    year: int,
) -> None:
    spot = layout.year_label(year_index)
    surface.draw_text(spot.x, spot.y, str(year), spot.size, theme.text_primary)

    for month in range(1, 13):
        spot = layout.month_label(year_index, month)
        surface.draw_text(spot.x, spot.y, MONTH_ABBRS[month - 1], spot.size, theme.text_secondary)
        for day, rect in layout.iter_day_blocks(year_index, year, month):
            count = agg.daily_index.get(dt.date(year, month, day), 0)
            surface.fill_rect(rect.x, rect.y, rect.w, rect.h, theme.commit_color(classify(count)))

    sep = layout.separator(year_index)
    if sep is not None:
        surface.fill_rect(sep.x, sep.y, sep.w, sep.h, theme.separator)

    summary = summarize_year(agg, year)
    for i, text in enumerate(summary_lines(summary)):
        spot = layout.summary_line(year_index, i)
        surface.draw_text(spot.x, spot.y, text, spot.size, theme.text_primary)

    for row, days in enumerate(summary.bucket_days):
        if days <= 0:
            continue
        square = layout.legend_square(year_index, row)
        spot = layout.legend_text(year_index, row)
        # square and text are drawn together or not at all
        if square is None or spot is None:
            continue
        bucket = row + 1
        surface.fill_rect(square.x, square.y, square.w, square.h, theme.commit_color(bucket))
        surface.draw_text(spot.x, spot.y, legend_text(bucket, days), spot.size, theme.text_secondary)


def render_calendar(
    surface: DrawingSurface,
    layout: CalendarLayout,
    theme: Theme,
    agg: Aggregate,
    years: list[int],
) -> None:
    """Draw the whole calendar; `years` must be ordered most recent first and match the layout's year count."""
    if len(years) != layout.years_count:
        raise ValueError(f"layout sized for {layout.years_count} years, got {len(years)}")
    surface.fill_rect(0, 0, layout.width, layout.height, theme.background)
    for year_index, year in enumerate(years):
        render_year(surface, layout, theme, agg, year_index, year)


def render_image(agg: Aggregate, settings: Settings) -> Image.Image:
    totals = year_totals(agg.daily_index)
    years = select_active_years(totals, settings.min_commits)

    print(f"Found commits in years: {years}")
    print(f"Commit counts per year: {format_year_counts(years, totals)}")

    if not years:
        print("No commits found!")
        return new_image((1, 1))

    fonts = FontCache(find_font_path(settings.font_path or None))
    layout = CalendarLayout(settings.layout, len(years))
    img = new_image(layout.size, settings.theme.background)
    render_calendar(PillowSurface(img, fonts), layout, settings.theme, agg, years)
    return img


def collect_aggregate(author: str, repos: list[Path]) -> Aggregate:
    return aggregate_logs(read_repo_logs(repo, author) for repo in repos)


def generate_commit_image(author: str, repos: list[Path], settings: Settings) -> Image.Image:
    return render_image(collect_aggregate(author, repos), settings)


def output_filename(author: str, ext: str = "png") -> str:
    return f"commit_image_{author.replace(' ', '_')}.{ext}"
