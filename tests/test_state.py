# File: tests/test_state.py
import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

from tennis_results.models import FetchRecord, HtmlHints, PersistedState
from tennis_results.report.json_report import render_json
from tennis_results.state import load_state, merge_run, utc_timestamp

DEFAULT = {"lastUpdated": None, "sources": [], "matches": []}


def write_file(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "results.json"
    path.write_text(content, encoding="utf-8")
    return path


def test_missing_file_gives_default(tmp_path):
    assert load_state(tmp_path / "nope.json").to_dict() == DEFAULT


@pytest.mark.parametrize(
    "content",
    ["", "{not json", "[1, 2, 3]", "null", "42", '"text"'],
)
def test_malformed_file_gives_default(tmp_path, content):
    assert load_state(write_file(tmp_path, content)).to_dict() == DEFAULT


def test_undecodable_file_gives_default(tmp_path):
    path = tmp_path / "results.json"
    path.write_bytes(b"\xff\xfe\x00garbage")
    assert load_state(path).to_dict() == DEFAULT


def test_directory_instead_of_file_gives_default(tmp_path):
    path = tmp_path / "results.json"
    path.mkdir()
    assert load_state(path).to_dict() == DEFAULT


@pytest.mark.parametrize("matches", ["oops", 7, None, {"a": 1}])
def test_matches_is_always_a_list(tmp_path, matches):
    path = write_file(tmp_path, json.dumps({"lastUpdated": "x", "matches": matches}))
    state = load_state(path)
    assert state.matches == []
    assert state.last_updated == "x"


def test_matches_absent_is_coerced(tmp_path):
    state = load_state(write_file(tmp_path, json.dumps({"sources": ["http://a"]})))
    assert state.matches == []
    assert state.sources == ["http://a"]


def test_valid_file_round_trips_with_unknown_keys(tmp_path):
    doc = {
        "lastUpdated": "2026-01-01T00:00:00.000Z",
        "sources": ["https://example.com/r/1"],
        "matches": [{"home": "A", "away": "B"}],
        "debug": [{"url": "https://example.com/r/1", "error": "boom"}],
        "note": "kept",
    }
    state = load_state(write_file(tmp_path, json.dumps(doc)))
    assert state.extra == {"note": "kept"}
    assert state.to_dict() == doc


def test_utc_timestamp_format():
    moment = datetime(2026, 10, 19, 8, 15, 0, 123456, tzinfo=timezone.utc)
    assert utc_timestamp(moment) == "2026-10-19T08:15:00.123Z"


def test_merge_run_overwrites_sources_and_debug():
    state = PersistedState(sources=["old"], debug=[{"url": "old"}], matches=[{"m": 1}])
    record = FetchRecord(
        url="https://example.com/r/1",
        http_status=200,
        has_next_data=False,
        html_hints=HtmlHints(length=3, has_next_data_tag=False, has_nuxt=False, title=None),
    )
    now = datetime(2026, 10, 19, tzinfo=timezone.utc)
    merge_run(state, ["https://example.com/r/1"], [record], now=now)

    assert state.last_updated == "2026-10-19T00:00:00.000Z"
    assert state.sources == ["https://example.com/r/1"]
    assert state.debug == [record.to_dict()]
    assert state.matches == [{"m": 1}]


def test_merge_run_without_records_keeps_debug():
    state = PersistedState(debug=[{"url": "kept"}])
    merge_run(state, ["https://example.com"])
    assert state.debug == [{"url": "kept"}]
    assert state.last_updated is not None


def test_failed_record_serializes_error_only():
    assert FetchRecord.failed("https://x", "ClientConnectorError: refused").to_dict() == {
        "url": "https://x",
        "error": "ClientConnectorError: refused",
    }


def test_render_json_pretty_with_trailing_newline(tmp_path):
    state = PersistedState(last_updated="t", sources=["https://é.example"])
    out = render_json(state, tmp_path / "nested" / "results.json")

    text = out.read_text(encoding="utf-8")
    assert text.endswith("}\n")
    assert text.startswith('{\n  "lastUpdated": "t",')
    assert "https://é.example" in text
    assert json.loads(text) == {"lastUpdated": "t", "sources": ["https://é.example"], "matches": []}


def test_render_json_write_failure_propagates(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a dir", encoding="utf-8")
    with pytest.raises(OSError):
        render_json(PersistedState(), blocker / "results.json")


def test_state_file_with_nan_gives_default(tmp_path):
    path = write_file(tmp_path, '{"lastUpdated": "x", "matches": [], "score": NaN}')
    assert load_state(path).to_dict() == DEFAULT


def test_permission_error_gives_default(tmp_path, monkeypatch):
    path = write_file(tmp_path, json.dumps({"matches": [1]}))

    def denied(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "read_text", denied)
    assert load_state(path).to_dict() == DEFAULT


def test_render_json_refuses_nan_and_keeps_previous_file(tmp_path):
    path = write_file(tmp_path, json.dumps({"lastUpdated": "old", "sources": [], "matches": [{"keep": 1}]}))
    state = load_state(path)
    state.debug = [{"url": "https://x", "nextDataTopLevel": {"score": float("inf")}}]

    with pytest.raises(ValueError):
        render_json(state, path)

    assert load_state(path).matches == [{"keep": 1}]


def test_render_json_escapes_lone_surrogates(tmp_path):
    path = write_file(tmp_path, json.dumps({"lastUpdated": "old", "sources": [], "matches": [{"keep": 1}]}))
    state = load_state(path)
    state.debug = [{"url": "https://x", "nextDataTopLevel": {"title": "\ud83d", "city": "Zürich 🎾"}}]

    render_json(state, path)

    text = path.read_text(encoding="utf-8")
    assert "\\ud83d" in text
    assert "Zürich 🎾" in text
    reloaded = load_state(path)
    assert reloaded.matches == [{"keep": 1}]
    assert reloaded.debug[0]["nextDataTopLevel"] == {"title": "\ud83d", "city": "Zürich 🎾"}
