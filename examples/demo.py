"""Demo script for task-time-analyzer."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from time_analyzer.adapters.text_adapter import parse
from time_analyzer.config import configure_logging
from time_analyzer.pipeline import analyze_lines
from time_analyzer.report import format_table


def main() -> None:
    configure_logging("INFO")
    lines = parse("examples/sample_log.txt")
    result = analyze_lines(lines)
    if not result.ok:
        print("Error:", result.message)
        return
    print(f"Parsed {result.entries_parsed} of {result.lines_read} lines, {result.total_minutes / 60:.1f} hours total")
    print(format_table(result.records))


if __name__ == "__main__":
    main()
