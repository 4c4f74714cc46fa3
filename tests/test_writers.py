"""
Tests for the CSV, JSON and JSON Lines writers
"""
import json

import pytest

from tabular_editor.errors import TableIOError
from tabular_editor.readers import parse_csv, parse_json
from tabular_editor.table import JsonShape
from tabular_editor.writers import (
    serialize_csv,
    serialize_json,
    serialize_jsonl,
    write_csv,
    write_json,
)


class TestSerializeCsv:
    """headers + rows -> CSV text"""

    @pytest.mark.parametrize(
        "text",
        [
            "name,age\nAlice,30\nBob,\n",
            'a,b\n"x, y","line1\nline2"\n"say ""hi""",2\n',
            "only\n007\n",
        ],
    )
    def test_read_write_is_exact(self, text):
        headers, rows = parse_csv(text)
        assert serialize_csv(headers, rows) == text

    def test_large_cell_round_trip(self):
        text = "a,b\n" + "y" * 200000 + ",1\n"
        headers, rows = parse_csv(text)
        assert serialize_csv(headers, rows) == text

    def test_short_rows_written_as_is(self):
        assert serialize_csv(["a", "b"], [["1"]]) == "a,b\n1\n"


class TestSerializeJson:
    """headers + rows + shape -> JSON text"""

    def test_array_with_coercion(self):
        text = serialize_json(["name", "age"], [["Alice", "30"], ["Bob", ""]])
        assert json.loads(text) == [{"name": "Alice", "age": 30}, {"name": "Bob", "age": None}]

    def test_pretty_printed(self):
        text = serialize_json(["a"], [["1"]])
        assert text == '[\n  {\n    "a": 1\n  }\n]'

    def test_array_round_trip(self):
        source = [{"id": 1, "name": "x", "ok": True, "score": 2.5}, {"id": 2, "name": "y", "ok": False, "score": None}]
        headers, rows, shape = parse_json(json.dumps(source))
        assert json.loads(serialize_json(headers, rows, shape)) == source

    def test_missing_cells_become_null(self):
        assert json.loads(serialize_json(["a", "b"], [["1"]])) == [{"a": 1, "b": None}]

    def test_object_round_trip_keeps_order(self):
        headers, rows, shape = parse_json('{"a":1,"b":"x"}')
        text = serialize_json(headers, rows, shape)
        assert json.loads(text) == {"a": 1, "b": "x"}
        assert list(json.loads(text)) == ["a", "b"]

    def test_object_rows_with_empty_key_skipped(self):
        text = serialize_json(["Key", "Value"], [["a", "1"], ["", "2"], ["b", ""]], JsonShape.OBJECT)
        assert json.loads(text) == {"a": 1, "b": None}

    def test_key_value_headers_with_array_shape(self):
        text = serialize_json(["Key", "Value"], [["a", "1"]], JsonShape.ARRAY)
        assert json.loads(text) == [{"Key": "a", "Value": 1}]

    def test_object_shape_needs_key_value_headers(self):
        text = serialize_json(["k", "v"], [["a", "1"]], JsonShape.OBJECT)
        assert json.loads(text) == [{"k": "a", "v": 1}]

    def test_nested_cells_decoded(self):
        text = serialize_json(["tags"], [['["x","y"]']])
        assert json.loads(text) == [{"tags": ["x", "y"]}]

    def test_non_ascii_not_escaped(self):
        assert "café" in serialize_json(["a"], [["café"]])

    def test_empty_table(self):
        assert serialize_json([], []) == "[]"


class TestSerializeJsonl:
    """headers + rows -> JSON Lines text"""

    def test_one_compact_object_per_line(self):
        text = serialize_jsonl(["a", "b"], [["1", "x"], ["2", ""]])
        assert text == '{"a":1,"b":"x"}\n{"a":2,"b":null}\n'

    def test_no_rows(self):
        assert serialize_jsonl(["a"], []) == ""


class TestWriteFiles:
    """Writing to disk"""

    def test_write_csv(self, tmp_path):
        path = tmp_path / "out.csv"
        write_csv(str(path), ["a"], [["1"]])
        assert path.read_text(encoding="utf-8") == "a\n1\n"

    def test_write_json_object(self, tmp_path):
        path = tmp_path / "out.json"
        write_json(str(path), ["Key", "Value"], [["a", "1"]], JsonShape.OBJECT)
        assert json.loads(path.read_text(encoding="utf-8")) == {"a": 1}

    def test_unwritable_path(self, tmp_path):
        path = tmp_path / "missing" / "out.csv"
        with pytest.raises(TableIOError, match="Failed to write file"):
            write_csv(str(path), ["a"], [["1"]])
