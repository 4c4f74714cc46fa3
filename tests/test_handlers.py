"""
Tests for the UI handlers
"""
import json

import pandas as pd
import pytest

from tabular_editor import handlers
from tabular_editor.settings import settings


@pytest.fixture
def export_dir(tmp_path, monkeypatch):
    out = tmp_path / "out"
    out.mkdir()
    monkeypatch.setattr(settings, "EXPORT_DIR", str(out))
    return out


class TestFrameConversion:
    """Dataframe value <-> headers + rows"""

    def test_short_rows_padded(self):
        frame = handlers.table_to_frame(["a", "b"], [["1"], ["2", "3"]])
        assert list(frame.columns) == ["a", "b"]
        assert handlers.frame_to_table(frame) == (["a", "b"], [["1", ""], ["2", "3"]])

    def test_missing_and_numeric_cells_become_text(self):
        frame = pd.DataFrame({"a": [1, None], "b": ["x", float("nan")]})
        headers, rows = handlers.frame_to_table(frame)
        assert headers == ["a", "b"]
        assert rows[0][1] == "x"
        assert rows[1] == ["", ""]

    def test_dict_value(self):
        value = {"headers": ["a"], "data": [["1"]]}
        assert handlers.frame_to_table(value) == (["a"], [["1"]])

    def test_none(self):
        assert handlers.frame_to_table(None) == ([], [])


class TestLoadHandler:
    """Uploading a file"""

    def test_load_csv(self, people_csv):
        meta, frame, status, info, types, _ = handlers.load_table_handler(str(people_csv))
        assert meta["file_type"] == "csv"
        assert meta["json_format"] == "array"
        assert handlers.frame_to_table(frame) == (["name", "age"], [["Alice", "30"], ["Bob", ""]])
        assert status == "Loaded 2 rows"
        assert info == "people.csv | CSV | 2 rows | 2 cols | Saved"
        assert types == "name: string, age: number"

    def test_load_error_reported(self, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("x", encoding="utf-8")
        meta, frame, status, *_ = handlers.load_table_handler(str(path))
        assert meta is None
        assert frame is None
        assert status.startswith("Error loading file:")
        assert "txt" in status

    def test_no_upload(self):
        meta, _, status, *_ = handlers.load_table_handler(None)
        assert meta is None
        assert "No file uploaded" in status

    def test_new_table_is_unsaved(self):
        meta, frame, status, info, *_ = handlers.new_table_handler()
        assert status == "New file"
        assert info.endswith("Modified")
        assert handlers.frame_to_table(frame)[0] == ["column1", "column2", "column3"]


class TestSaveAndExportHandlers:
    """Saving and exporting through the UI"""

    def test_save_keeps_format_and_shape(self, settings_json, export_dir):
        meta, frame, *_ = handlers.load_table_handler(str(settings_json))
        path, meta, status, info = handlers.save_table_handler(meta, frame)
        assert path == str(export_dir / "settings.json")
        assert json.loads(open(path, encoding="utf-8").read()) == {"a": 1, "b": "x"}
        assert status.startswith("Saved to")
        assert info.endswith("Saved")

    def test_save_without_data(self):
        path, meta, status, _ = handlers.save_table_handler(None, None)
        assert path is None
        assert status == "No data loaded."

    def test_export_jsonl(self, people_csv, export_dir):
        meta, frame, *_ = handlers.load_table_handler(str(people_csv))
        path, status = handlers.export_table_handler(meta, frame, "jsonl", "people")
        assert path == str(export_dir / "people.jsonl")
        assert open(path, encoding="utf-8").read() == '{"name":"Alice","age":30}\n{"name":"Bob","age":null}\n'
        assert status.startswith("Export successful!")

    def test_export_default_name(self, people_csv, export_dir):
        meta, frame, *_ = handlers.load_table_handler(str(people_csv))
        path, _ = handlers.export_table_handler(meta, frame, "json", "  ")
        assert path == str(export_dir / "output.json")

    def test_export_unsupported(self, people_csv, export_dir):
        meta, frame, *_ = handlers.load_table_handler(str(people_csv))
        path, status = handlers.export_table_handler(meta, frame, "xml", "out")
        assert path is None
        assert "xml" in status


class TestEditHandlers:
    """Row/column buttons and search"""

    def test_add_and_delete_row(self, people_csv):
        meta, frame, *_ = handlers.load_table_handler(str(people_csv))
        frame, status, info, *_ = handlers.add_row_handler(meta, frame)
        assert status == "Row added"
        assert handlers.frame_to_table(frame)[1][-1] == ["", ""]
        assert info.endswith("Modified")

        frame, status, *_ = handlers.delete_row_handler(meta, frame, 3)
        assert status == "Row deleted"
        assert len(handlers.frame_to_table(frame)[1]) == 2

    def test_delete_row_out_of_range_reported(self, people_csv):
        meta, frame, *_ = handlers.load_table_handler(str(people_csv))
        new_frame, status, *_ = handlers.delete_row_handler(meta, frame, 10)
        assert "out of range" in status
        assert handlers.frame_to_table(new_frame) == handlers.frame_to_table(frame)

    def test_column_buttons(self, people_csv):
        meta, frame, *_ = handlers.load_table_handler(str(people_csv))
        frame, *_ = handlers.add_column_handler(meta, frame, "city")
        assert handlers.frame_to_table(frame)[0] == ["name", "age", "city"]

        frame, *_ = handlers.rename_column_handler(meta, frame, "3: city", "town")
        assert handlers.frame_to_table(frame)[0] == ["name", "age", "town"]

        frame, *_ = handlers.delete_column_handler(meta, frame, "2: age")
        assert handlers.frame_to_table(frame) == (["name", "town"], [["Alice", ""], ["Bob", ""]])

    def test_search(self, people_csv):
        _, frame, *_ = handlers.load_table_handler(str(people_csv))
        results = handlers.search_handler(frame, "bob")
        assert list(results.columns) == ["#", "name", "age"]
        assert results.values.tolist() == [[2, "Bob", ""]]
        assert handlers.search_handler(frame, "") is None
        assert handlers.search_handler(frame, "zzz") is None
