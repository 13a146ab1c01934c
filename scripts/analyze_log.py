"""Analyze a task log and report the time distribution per category."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from time_analyzer.adapters import json_adapter, text_adapter
from time_analyzer.config import DEFAULT_OUTPUT_DIR, REPORT_FILENAME, configure_logging
from time_analyzer.pipeline import analyze_lines
from time_analyzer.sample import DEMO_LINES


def _load_lines(path: Path) -> list[str]:
    suffix = path.suffix.lower()
    if suffix in (".txt", ".log", ""):
        return text_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse(str(path))
    raise ValueError("Unsupported input format, expected .txt, .log or .json")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Summarize where the time in a task log went")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--data", help="Path to a .txt/.log/.json task log")
    source.add_argument("--demo", action="store_true", help="Analyze the built-in example log")
    parser.add_argument("--output-dir", default=str(DEFAULT_OUTPUT_DIR), help="Where to save the JSON report")
    parser.add_argument("--log-level", default=None, help="Logging level (default from TIME_ANALYZER_LOG_LEVEL)")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    try:
        lines = list(DEMO_LINES) if args.demo else _load_lines(Path(args.data))
    except (OSError, ValueError) as exc:
        print(f"Input error: {exc}", file=sys.stderr)
        return 2

    result = analyze_lines(lines)
    report = result.to_dict()
    print(json.dumps(report, indent=2))

    if not result.ok:
        print(result.message, file=sys.stderr)
        return 1

    outputs_dir = Path(args.output_dir)
    outputs_dir.mkdir(parents=True, exist_ok=True)
    out_path = outputs_dir / REPORT_FILENAME
    out_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
    print(f"Saved time distribution to {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
