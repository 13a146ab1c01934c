"""Plain-text and tabular rendering of distribution records."""

from __future__ import annotations

from time_analyzer.schema import DistributionRecord


def summary_rows(records: list[DistributionRecord]) -> list[dict]:
    return [
        {"Category": record.category.value, "Hours": record.hours, "Share (%)": record.percentage}
        for record in records
    ]


def format_table(records: list[DistributionRecord]) -> str:
    """One "<category>: <hours> hours (<pct>%)" line per record."""

    return "\n".join(f"{record.category.value}: {record.hours} hours ({record.percentage}%)" for record in records)
