"""End-to-end analysis of a task log."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from time_analyzer.aggregator import EmptyDistributionError, aggregate, total_minutes
from time_analyzer.classifier import classify_entries
from time_analyzer.extractor import extract_entries
from time_analyzer.schema import AnalysisResult, ErrorKind

logger = logging.getLogger(__name__)

NO_VALID_ENTRIES_MESSAGE = (
    "No valid time entries found. Make sure each task includes time in [X mins] or [X hours] format."
)
PROCESSING_ERROR_MESSAGE = "Error processing time data. Please check the format."


def split_lines(text: str) -> list[str]:
    """Split a log into lines, dropping blank ones."""

    return [line for line in text.split("\n") if line.strip()]


def analyze_lines(lines: Iterable[str]) -> AnalysisResult:
    """Run extraction, classification and aggregation over task lines."""

    kept: list[str] = []
    try:
        for line in lines:
            if line.strip():
                kept.append(line)
        lines = kept
        entries = extract_entries(lines)
        if not entries:
            logger.warning("No valid time entries in %d lines", len(lines))
            return AnalysisResult(
                error=ErrorKind.NO_VALID_ENTRIES,
                message=NO_VALID_ENTRIES_MESSAGE,
                lines_read=len(lines),
            )

        classified = classify_entries(entries)
        grand_total = total_minutes(entries)
        try:
            records = aggregate(classified)
        except EmptyDistributionError:
            logger.warning("All %d time entries have zero duration", len(entries))
            return AnalysisResult(
                error=ErrorKind.NO_VALID_ENTRIES,
                message=NO_VALID_ENTRIES_MESSAGE,
                lines_read=len(lines),
                entries_parsed=len(entries),
            )
    except Exception:  # noqa: BLE001
        logger.exception("Failed to analyze task log")
        return AnalysisResult(
            error=ErrorKind.PROCESSING_ERROR,
            message=PROCESSING_ERROR_MESSAGE,
            lines_read=len(kept),
        )

    logger.info(
        "Analyzed %d/%d lines into %d categories (%.1f minutes)",
        len(entries),
        len(lines),
        len(records),
        grand_total,
    )
    return AnalysisResult(
        records=records,
        lines_read=len(lines),
        entries_parsed=len(entries),
        total_minutes=grand_total,
    )


def analyze(text: str) -> AnalysisResult:
    """Analyze a full multi-line task log."""

    return analyze_lines(split_lines(text))
