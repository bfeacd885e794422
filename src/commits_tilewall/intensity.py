from __future__ import annotations

_BUCKET_LABELS = {
    1: "1 commit",
    2: "2-4 commits",
    3: "5-9 commits",
    4: "10-19 commits",
    5: "20+ commits",
}


def classify(count: int) -> int:
    """
    Map a day's commit count to an intensity bucket:
      0 -> 0, 1 -> 1, 2-4 -> 2, 5-9 -> 3, 10-19 -> 4, 20+ -> 5
    """
    if count < 0:
        raise ValueError(f"commit count must be non-negative, got {count}")
    if count == 0:
        return 0
    if count == 1:
        return 1
    if count <= 4:
        return 2
    if count <= 9:
        return 3
    if count <= 19:
        return 4
    return 5


def bucket_label(bucket: int) -> str:
    try:
        return _BUCKET_LABELS[bucket]
    except KeyError:
        raise ValueError(f"no legend label for bucket {bucket!r}") from None


def legend_text(bucket: int, days: int) -> str:
    return f"{days} days with {bucket_label(bucket)}"
