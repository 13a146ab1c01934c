"""Duration tag extraction."""

from __future__ import annotations

import logging
import math
import re
from typing import Optional

from time_analyzer.schema import DurationUnit, TimeEntry

logger = logging.getLogger(__name__)

DURATION_TAG = re.compile(
    r"\[([0-9]+(?:\.[0-9]+)?)[\s\ufeff]*(hours?|hrs?|h|minutes?|mins?|m)\]",
    re.IGNORECASE,
)


def _normalize_unit(unit: str) -> DurationUnit:
    return DurationUnit.HOUR if unit.lower().startswith("h") else DurationUnit.MINUTE


def extract(line: str) -> Optional[TimeEntry]:
    """Parse the leftmost duration tag in ``line``.

    Returns ``None`` when the line carries no tag or the number does not
    resolve to a finite value; such lines are not time entries.
    """

    match = DURATION_TAG.search(line)
    if match is None:
        logger.debug("No duration tag in line %r", line)
        return None

    try:
        value = float(match.group(1))
    except ValueError:
        logger.debug("Unparseable duration %r in line %r", match.group(1), line)
        return None
    if not math.isfinite(value):
        logger.debug("Non-finite duration %r in line %r", match.group(1), line)
        return None

    unit = _normalize_unit(match.group(2))
    minutes = value * 60 if unit is DurationUnit.HOUR else value

    return TimeEntry(
        minutes=minutes,
        description=(line[: match.start()] + line[match.end():]).strip(),
        source_value=value,
        source_unit=unit,
    )


def extract_entries(lines: list[str]) -> list[TimeEntry]:
    """Extract entries from lines, silently dropping the ones without a tag."""

    entries = []
    for line in lines:
        entry = extract(line)
        if entry is not None:
            entries.append(entry)
    return entries
