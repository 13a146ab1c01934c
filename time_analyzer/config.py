"""Runtime settings for the analyzer, read from the environment."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

LOG_LEVEL = os.environ.get("TIME_ANALYZER_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

DEFAULT_OUTPUT_DIR = Path(os.environ.get("TIME_ANALYZER_OUTPUT_DIR", "outputs"))
REPORT_FILENAME = "time_distribution.json"


def configure_logging(level: Optional[str] = None) -> None:
    """Install a root handler for scripts and the demo UI."""

    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)
