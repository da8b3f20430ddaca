"""Tests for common.local_io module."""

import json

import pytest

from common.local_io import write_json_snapshot


class TestWriteJsonSnapshot:
    def test_creates_missing_directories(self, tmp_path) -> None:
        path = tmp_path / "nested" / "data" / "articles.json"
        result = write_json_snapshot([{"title": "Zażółć"}], path)

        assert result == path
        assert json.loads(path.read_text(encoding="utf-8")) == [{"title": "Zażółć"}]

    def test_keeps_non_ascii_characters(self, tmp_path) -> None:
        path = tmp_path / "articles.json"
        write_json_snapshot({"title": "Gęślą jaźń"}, path)
        assert "Gęślą jaźń" in path.read_text(encoding="utf-8")

    def test_replaces_previous_contents(self, tmp_path) -> None:
        path = tmp_path / "daily-art.json"
        path.write_text('{"old": true, "extra": 1}', encoding="utf-8")

        write_json_snapshot({"new": True}, path)

        assert json.loads(path.read_text(encoding="utf-8")) == {"new": True}
        assert list(tmp_path.iterdir()) == [path]

    def test_unwritable_location_raises(self, tmp_path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(OSError):
            write_json_snapshot([], blocker / "articles.json")
