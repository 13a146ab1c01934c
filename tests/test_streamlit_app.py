import importlib.util
import os
from pathlib import Path

import pytest

from time_analyzer.adapters import text_adapter

APP = Path(__file__).resolve().parents[1] / "ui_demo_streamlit" / "app.py"


def load_app():
    spec = importlib.util.spec_from_file_location("streamlit_app", APP)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class FakeUpload:
    def __init__(self, name, data, file_id="upload-1"):
        self.name = name
        self.file_id = file_id
        self._data = data

    def getbuffer(self):
        return memoryview(self._data)


def test_read_uploaded_removes_temp_file(monkeypatch):
    app = load_app()
    seen = []
    real_parse = text_adapter.parse

    def recording_parse(path):
        seen.append(path)
        return real_parse(path)

    monkeypatch.setattr(text_adapter, "parse", recording_parse)

    text = app._read_uploaded(FakeUpload("log.txt", b"[1 hour] Sync\n\n[30 mins] Code review\n"))

    assert text == "[1 hour] Sync\n[30 mins] Code review"
    assert len(seen) == 1
    assert not os.path.exists(seen[0])


def test_read_uploaded_rejects_unknown_suffix():
    with pytest.raises(ValueError):
        load_app()._read_uploaded(FakeUpload("log.csv", b"x"))


def test_same_upload_does_not_overwrite_edits():
    app = load_app()
    state = {}
    upload = FakeUpload("log.txt", b"[1 hour] Sync\n")

    assert app._load_upload(state, upload) is True
    assert state["log_text"] == "[1 hour] Sync"

    state["log_text"] = "[2 hours] Edited by hand"
    assert app._load_upload(state, upload) is False
    assert state["log_text"] == "[2 hours] Edited by hand"

    assert app._load_upload(state, FakeUpload("log.txt", b"[5 mins] New\n", file_id="upload-2")) is True
    assert state["log_text"] == "[5 mins] New"


def test_run_analysis_payload():
    payload = load_app().run_analysis("[1 hour] Weekly team sync meeting\n[30 mins] Code review")
    assert payload["ok"] is True
    assert payload["chart"] == {"Meetings & Calls": 1.0, "Research & Documentation": 0.5}
    assert payload["total_hours"] == 1.5
