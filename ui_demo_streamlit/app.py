"""Streamlit demo UI for task-time-analyzer."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Any

from time_analyzer.adapters import json_adapter, text_adapter
from time_analyzer.config import configure_logging
from time_analyzer.pipeline import analyze
from time_analyzer.report import summary_rows
from time_analyzer.sample import DEMO_LOG, SUPPORTED_FORMATS


def _read_uploaded(uploaded_file) -> str:
    suffix = Path(uploaded_file.name).suffix.lower()
    if suffix not in (".txt", ".log", ".json"):
        raise ValueError("Unsupported file type. Please use .txt, .log or .json")
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    try:
        adapter = json_adapter if suffix == ".json" else text_adapter
        return "\n".join(adapter.parse(temp_path))
    finally:
        os.unlink(temp_path)


def _load_upload(state, uploaded_file) -> bool:
    """Copy a newly uploaded log into the text area state.

    The same upload is only loaded once, so edits made afterwards survive
    reruns while the file stays in the uploader.
    """

    file_id = getattr(uploaded_file, "file_id", uploaded_file.name)
    if state.get("upload_id") == file_id:
        return False
    state["log_text"] = _read_uploaded(uploaded_file)
    state["upload_id"] = file_id
    return True


def run_analysis(text: str) -> dict[str, Any]:
    """Run the analyzer and return a UI-friendly result payload."""

    result = analyze(text)
    return {
        "ok": result.ok,
        "message": result.message,
        "rows": summary_rows(result.records),
        "chart": {record.category.value: record.hours for record in result.records},
        "total_hours": result.total_minutes / 60,
        "entries_parsed": result.entries_parsed,
        "lines_read": result.lines_read,
    }


def main() -> None:
    import streamlit as st

    configure_logging()
    st.set_page_config(page_title="Time Tracker Analysis", layout="wide")
    st.title("Time Tracker Analysis")

    if "log_text" not in st.session_state:
        st.session_state["log_text"] = ""

    with st.sidebar:
        st.header("Input")
        if st.button("Load example data"):
            st.session_state["log_text"] = DEMO_LOG
        uploaded = st.file_uploader("Upload task log", type=["txt", "log", "json"])
        st.markdown("**Supported formats:**")
        for line in SUPPORTED_FORMATS:
            st.markdown(f"- {line}")

    if uploaded is not None:
        try:
            _load_upload(st.session_state, uploaded)
        except ValueError as exc:
            st.error(f"Input error: {exc}")
            return

    text = st.text_area(
        "Enter your time entries (one per line)",
        key="log_text",
        height=260,
    )
    run = st.button("Generate chart", type="primary")

    if not run:
        st.info("Enter task lines with a duration tag and click **Generate chart**.")
        return

    result = run_analysis(text)
    if not result["ok"]:
        st.error(result["message"])
        return

    st.subheader("Time Distribution")
    c1, c2, c3 = st.columns(3)
    c1.metric("Total hours", f"{result['total_hours']:.1f}")
    c2.metric("Entries parsed", result["entries_parsed"])
    c3.metric("Lines skipped", result["lines_read"] - result["entries_parsed"])
    st.bar_chart(result["chart"])

    st.subheader("Summary")
    st.table(result["rows"])


if __name__ == "__main__":
    main()
