"""JSON adapter for task logs stored as a list of lines."""

from __future__ import annotations

import json
import logging

logger = logging.getLogger(__name__)


def _parse_item(item, index: int) -> str:
    if not isinstance(item, str):
        raise ValueError(f"Item {index}: expected a string, got {type(item).__name__}")
    return item


def parse(file_path: str) -> list[str]:
    """Parse a JSON array of task lines, dropping blank ones."""

    with open(file_path, encoding="utf-8") as handle:
        try:
            payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{file_path}: malformed JSON") from exc

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of strings")

    lines = [_parse_item(item, i) for i, item in enumerate(payload, start=1)]
    lines = [line for line in lines if line.strip()]
    logger.debug("Read %d task lines from %s", len(lines), file_path)
    return lines
