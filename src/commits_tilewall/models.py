from __future__ import annotations

import dataclasses
import datetime as dt


@dataclasses.dataclass(frozen=True)
class ChangeStats:
    files_changed: int = 0
    insertions: int = 0
    deletions: int = 0

    def __add__(self, other: ChangeStats) -> ChangeStats:
        return ChangeStats(
            files_changed=self.files_changed + other.files_changed,
            insertions=self.insertions + other.insertions,
            deletions=self.deletions + other.deletions,
        )


@dataclasses.dataclass(frozen=True)
class CommitEvent:
    date: dt.date
    stats: ChangeStats | None = None


@dataclasses.dataclass(frozen=True)
class Aggregate:
    daily_index: dict[dt.date, int] = dataclasses.field(default_factory=dict)  # date -> commits (>= 1)
    daily_stats: dict[dt.date, ChangeStats] = dataclasses.field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.daily_index and not self.daily_stats


@dataclasses.dataclass(frozen=True)
class YearSummary:
    year: int
    commits: int
    stats: ChangeStats
    bucket_days: tuple[int, int, int, int, int]  # days in buckets 1..5
