from __future__ import annotations

MIN_ACTIVE_COMMITS = 5


def select_active_years(year_totals: dict[int, int], min_commits: int = MIN_ACTIVE_COMMITS) -> list[int]:
    """Years with at least `min_commits` commits, most recent first."""
    return sorted((year for year, total in year_totals.items() if total >= min_commits), reverse=True)


def format_year_counts(years: list[int], year_totals: dict[int, int]) -> list[tuple[int, int]]:
    return [(year, int(year_totals.get(year, 0))) for year in years]
