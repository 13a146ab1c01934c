"""Category aggregation into a time distribution."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

import numpy as np

from time_analyzer.schema import CategoryBucket, ClassifiedEntry, DistributionRecord


class EmptyDistributionError(ValueError):
    """Raised when there is no positive time to distribute."""


def round_half_up(value: float, digits: int = 1) -> float:
    """Round the exact binary value of ``value``, ties away from zero.

    ``round()`` would give 46.8 for 46.875 and 0.2 for 0.25; reports show
    46.9 and 0.3.
    """

    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def group_entries(entries: list[ClassifiedEntry]) -> list[CategoryBucket]:
    """Group entries by category in order of first appearance."""

    buckets: dict = {}
    for entry in entries:
        bucket = buckets.get(entry.category)
        if bucket is None:
            bucket = buckets[entry.category] = CategoryBucket(category=entry.category)
        bucket.entries.append(entry)
        bucket.total_minutes += entry.minutes
    return list(buckets.values())


def total_minutes(entries) -> float:
    """Sum entry minutes in input order, the way bucket totals accumulate."""

    if not entries:
        return 0.0
    minutes = np.fromiter((entry.minutes for entry in entries), dtype=float, count=len(entries))
    return float(np.cumsum(minutes)[-1])


def aggregate(entries: list[ClassifiedEntry]) -> list[DistributionRecord]:
    """Compute each category's share of the grand total and its hours."""

    if not entries:
        raise EmptyDistributionError("no entries to aggregate")

    minutes = np.fromiter((entry.minutes for entry in entries), dtype=float, count=len(entries))
    if not np.all(np.isfinite(minutes)):
        raise ValueError("entry durations must be finite")

    grand_total = total_minutes(entries)
    if not np.isfinite(grand_total):
        raise ValueError("total duration overflowed")
    if grand_total == 0:
        raise EmptyDistributionError("total duration is zero")

    return [
        DistributionRecord(
            category=bucket.category,
            percentage=round_half_up(bucket.total_minutes / grand_total * 100),
            hours=round_half_up(bucket.total_minutes / 60),
        )
        for bucket in group_entries(entries)
    ]
