from __future__ import annotations

import datetime as dt
from collections import Counter, defaultdict
from functools import reduce
from typing import Iterable, Iterator

from .intensity import classify
from .models import Aggregate, ChangeStats, CommitEvent, YearSummary


def parse_date(line: str) -> dt.date | None:
    s = (line or "").strip()
    # git --date=short always emits zero-padded YYYY-MM-DD
    if len(s) != 10 or s[4:5] != "-" or s[7:8] != "-":
        return None
    if not (s[:4].isdecimal() and s[5:7].isdecimal() and s[8:].isdecimal()):
        return None
    try:
        return dt.date(int(s[:4]), int(s[5:7]), int(s[8:]))
    except ValueError:
        return None


def parse_numstat_line(line: str) -> ChangeStats | None:
    """
    Parse one `git log --numstat` line ("<added> <deleted> <path>").

    Returns None for anything else, including binary entries ("-\t-\tpath")
    and paths containing whitespace, which do not split into exactly three fields.
    """
    parts = (line or "").split()
    if len(parts) != 3:
        return None
    added_s, deleted_s = parts[0], parts[1]
    if not (added_s.isdecimal() and deleted_s.isdecimal()):
        return None
    return ChangeStats(files_changed=1, insertions=int(added_s), deletions=int(deleted_s))


def iter_date_events(text: str) -> Iterator[CommitEvent]:
    for line in (text or "").splitlines():
        d = parse_date(line)
        if d is not None:
            yield CommitEvent(date=d)


def iter_numstat_events(text: str) -> Iterator[CommitEvent]:
    current_date: dt.date | None = None
    for line in (text or "").splitlines():
        d = parse_date(line)
        if d is not None:
            current_date = d
            continue
        if current_date is None:
            continue
        st = parse_numstat_line(line)
        if st is not None:
            yield CommitEvent(date=current_date, stats=st)


def parse_commit_dates(text: str) -> dict[dt.date, int]:
    counts: Counter[dt.date] = Counter(ev.date for ev in iter_date_events(text))
    return dict(counts)


def parse_numstat_log(text: str) -> dict[dt.date, ChangeStats]:
    stats: dict[dt.date, ChangeStats] = {}
    for ev in iter_numstat_events(text):
        assert ev.stats is not None
        stats[ev.date] = stats.get(ev.date, ChangeStats()) + ev.stats
    return stats


def aggregate_repo(dates_text: str, numstat_text: str) -> Aggregate:
    return Aggregate(daily_index=parse_commit_dates(dates_text), daily_stats=parse_numstat_log(numstat_text))


def merge_daily_index(a: dict[dt.date, int], b: dict[dt.date, int]) -> dict[dt.date, int]:
    out = dict(a)
    for d, n in b.items():
        out[d] = int(out.get(d, 0)) + int(n)
    return out


def merge_daily_stats(a: dict[dt.date, ChangeStats], b: dict[dt.date, ChangeStats]) -> dict[dt.date, ChangeStats]:
    out = dict(a)
    for d, st in b.items():
        cur = out.get(d)
        out[d] = st if cur is None else cur + st
    return out


def merge_aggregates(a: Aggregate, b: Aggregate) -> Aggregate:
    return Aggregate(
        daily_index=merge_daily_index(a.daily_index, b.daily_index),
        daily_stats=merge_daily_stats(a.daily_stats, b.daily_stats),
    )


def aggregate_logs(logs: Iterable[tuple[str, str]]) -> Aggregate:
    """Fold (dates_text, numstat_text) pairs, one per repository, into a single Aggregate."""
    return reduce(merge_aggregates, (aggregate_repo(dates, numstat) for dates, numstat in logs), Aggregate())


def year_totals(daily_index: dict[dt.date, int]) -> dict[int, int]:
    totals: dict[int, int] = defaultdict(int)
    for d, n in daily_index.items():
        totals[d.year] += int(n)
    return dict(totals)


def summarize_year(agg: Aggregate, year: int) -> YearSummary:
    commits = 0
    bucket_days = [0, 0, 0, 0, 0]
    for d, n in agg.daily_index.items():
        if d.year != year:
            continue
        commits += int(n)
        bucket = classify(int(n))
        if bucket > 0:
            bucket_days[bucket - 1] += 1

    stats = ChangeStats()
    for d, st in agg.daily_stats.items():
        if d.year == year:
            stats = stats + st

    return YearSummary(
        year=year,
        commits=commits,
        stats=stats,
        bucket_days=(bucket_days[0], bucket_days[1], bucket_days[2], bucket_days[3], bucket_days[4]),
    )
