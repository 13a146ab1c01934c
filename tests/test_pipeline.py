from time_analyzer.pipeline import (
    NO_VALID_ENTRIES_MESSAGE,
    PROCESSING_ERROR_MESSAGE,
    analyze,
    analyze_lines,
    split_lines,
)
from time_analyzer.report import format_table, summary_rows
from time_analyzer.sample import DEMO_LOG
from time_analyzer.schema import Category, ErrorKind


def test_two_entry_log():
    result = analyze("[1 hour] Weekly team sync meeting\n[30 mins] Code review")
    assert result.ok
    assert result.entries_parsed == 2
    assert result.total_minutes == 90
    assert [r.to_dict() for r in result.records] == [
        {"category": "Meetings & Calls", "percentage": 66.7, "hours": 1.0},
        {"category": "Research & Documentation", "percentage": 33.3, "hours": 0.5},
    ]


def test_log_without_tags_reports_no_valid_entries():
    result = analyze("Planning session\nCode review\n")
    assert not result.ok
    assert result.error is ErrorKind.NO_VALID_ENTRIES
    assert result.message == NO_VALID_ENTRIES_MESSAGE
    assert result.records == []
    assert result.lines_read == 2


def test_blank_input_reports_no_valid_entries():
    result = analyze("  \n\n\t")
    assert result.error is ErrorKind.NO_VALID_ENTRIES
    assert result.lines_read == 0


def test_all_zero_durations_report_no_valid_entries():
    result = analyze("[0 mins] Idle time")
    assert result.error is ErrorKind.NO_VALID_ENTRIES
    assert result.message == NO_VALID_ENTRIES_MESSAGE
    assert result.entries_parsed == 1


def test_overflowing_total_reports_processing_error():
    result = analyze("[" + "9" * 307 + " hours] Forever")
    assert result.error is ErrorKind.PROCESSING_ERROR
    assert result.message == PROCESSING_ERROR_MESSAGE
    assert result.records == []


def test_demo_log_order_and_rounding():
    result = analyze(DEMO_LOG)
    assert result.ok
    assert result.total_minutes == 480
    assert [(r.category, r.percentage, r.hours) for r in result.records] == [
        (Category.MEETINGS, 46.9, 3.8),
        (Category.RESEARCH, 18.8, 1.5),
        (Category.PLANNING, 18.8, 1.5),
        (Category.ADMINISTRATION, 6.3, 0.5),
        (Category.COMMUNICATION, 9.4, 0.8),
    ]
    total_pct = sum(r.percentage for r in result.records)
    assert abs(total_pct - 100) <= 0.1 * len(result.records)


def test_pipeline_is_idempotent():
    assert analyze(DEMO_LOG).records == analyze(DEMO_LOG).records


def test_malformed_lines_are_skipped():
    result = analyze("[1 hour] Sprint planning\nlunch\n[1 day] offsite\r\n[30 m] Blog post\r")
    assert result.lines_read == 4
    assert result.entries_parsed == 2
    assert [r.category for r in result.records] == [Category.PLANNING, Category.MARKETING]


def test_split_lines_drops_blank_lines():
    assert split_lines("a\n\n  \nb\n") == ["a", "b"]


def test_analyze_lines_filters_blank_lines():
    result = analyze_lines(["", "[2 h] Onboarding"])
    assert result.lines_read == 1
    assert result.records[0].category is Category.LEARNING


def test_result_to_dict_shape():
    payload = analyze("[1 h] Lunch").to_dict()
    assert payload["ok"] is True
    assert payload["error"] is None
    assert payload["distribution"] == [{"category": "Miscellaneous", "percentage": 100.0, "hours": 1.0}]

    failure = analyze("nothing here").to_dict()
    assert failure["ok"] is False
    assert failure["error"] == "no_valid_entries"


def test_report_rendering():
    records = analyze("[1 hour] Weekly team sync meeting\n[30 mins] Code review").records
    assert format_table(records) == (
        "Meetings & Calls: 1.0 hours (66.7%)\nResearch & Documentation: 0.5 hours (33.3%)"
    )
    assert summary_rows(records)[0] == {"Category": "Meetings & Calls", "Hours": 1.0, "Share (%)": 66.7}


def test_non_string_line_reports_processing_error():
    result = analyze_lines(["[1 h] Sync", None])
    assert result.error is ErrorKind.PROCESSING_ERROR
    assert result.message == PROCESSING_ERROR_MESSAGE
    assert result.lines_read == 1


def test_failing_line_source_reports_processing_error():
    def lines():
        yield "[1 h] Sync"
        yield "[2 h] Planning"
        raise OSError("log went away")

    result = analyze_lines(lines())
    assert result.error is ErrorKind.PROCESSING_ERROR
    assert result.lines_read == 2
