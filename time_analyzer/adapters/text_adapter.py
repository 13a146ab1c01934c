"""Plain-text adapter for task logs."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def parse(file_path: str) -> list[str]:
    """Read a UTF-8 task log and return its non-blank lines."""

    try:
        with open(file_path, encoding="utf-8") as handle:
            text = handle.read()
    except UnicodeDecodeError as exc:
        raise ValueError(f"{file_path}: task log is not valid UTF-8") from exc

    lines = [line for line in text.split("\n") if line.strip()]
    logger.debug("Read %d task lines from %s", len(lines), file_path)
    return lines
