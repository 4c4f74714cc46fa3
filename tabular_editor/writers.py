from __future__ import annotations

import csv
import io
import json
from typing import List

from .coercion import dumps_compact
from .errors import SerializeError
from .io_utils import write_text
from .records import rows_to_object, rows_to_records
from .table import JsonShape, is_key_value_table

Rows = List[List[str]]


def serialize_csv(headers: List[str], rows: Rows) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator='\n')
    try:
        writer.writerow(headers)
        writer.writerows(['' if c is None else c for c in row] for row in rows)
    except csv.Error as e:
        raise SerializeError(f"Failed to write CSV: {e}") from e
    return buffer.getvalue()


def serialize_json(headers: List[str], rows: Rows, shape: JsonShape = JsonShape.ARRAY) -> str:
    """Pretty-printed JSON.

    The Key/Value table of an object-shaped document is rebuilt into a single
    object; every other table becomes an array of records.
    """
    if shape is JsonShape.OBJECT and is_key_value_table(headers):
        payload = rows_to_object(rows)
    else:
        payload = rows_to_records(headers, rows)
    try:
        return json.dumps(payload, indent=2, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializeError(f"Failed to serialize JSON: {e}") from e


def serialize_jsonl(headers: List[str], rows: Rows) -> str:
    lines = []
    for record in rows_to_records(headers, rows):
        try:
            lines.append(dumps_compact(record) + '\n')
        except (TypeError, ValueError) as e:
            raise SerializeError(f"Failed to serialize JSON: {e}") from e
    return ''.join(lines)


def write_csv(path: str, headers: List[str], rows: Rows) -> None:
    write_text(path, serialize_csv(headers, rows))


def write_json(path: str, headers: List[str], rows: Rows, shape: JsonShape = JsonShape.ARRAY) -> None:
    write_text(path, serialize_json(headers, rows, shape))


def write_jsonl(path: str, headers: List[str], rows: Rows) -> None:
    write_text(path, serialize_jsonl(headers, rows))
