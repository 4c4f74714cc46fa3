from __future__ import annotations

import csv
import io
import logging
import sys
from typing import Any, List, Tuple

from .coercion import encode_value, loads_strict
from .errors import ParseError
from .io_utils import sanitize_json_text
from .records import collect_headers, records_to_rows
from .table import KEY_VALUE_HEADERS, JsonShape

logger = logging.getLogger(__name__)

Rows = List[List[str]]


def _lift_field_size_limit():
    # No cap on cell size; sys.maxsize overflows a C long on some platforms.
    limit = sys.maxsize
    while True:
        try:
            csv.field_size_limit(limit)
            return
        except OverflowError:
            limit //= 10


def parse_csv(text: str) -> Tuple[List[str], Rows]:
    """Read CSV text: first record is the header, every other record a row.

    Rows narrower than the header are kept as they are; cells past the
    header width are dropped. Blank lines and a leading UTF-8 BOM are skipped.
    """
    _lift_field_size_limit()
    if text.startswith('\ufeff'):
        text = text[1:]
    reader = csv.reader(io.StringIO(text))
    try:
        headers = next((record for record in reader if record), None)
    except csv.Error as e:
        raise ParseError(f"Failed to read CSV headers: {e}") from e
    if headers is None:
        return [], []

    width = len(headers)
    rows: Rows = []
    try:
        for record in reader:
            if record:
                rows.append(record[:width])
    except csv.Error as e:
        raise ParseError(f"Failed to read CSV row {reader.line_num}: {e}") from e
    return headers, rows


def parse_json(text: str) -> Tuple[List[str], Rows, JsonShape]:
    try:
        data = loads_strict(sanitize_json_text(text))
    except ValueError as e:
        raise ParseError(f"Failed to parse JSON: {e}") from e

    if isinstance(data, list):
        headers = collect_headers(data)
        return headers, records_to_rows(data, headers), JsonShape.ARRAY

    if isinstance(data, dict):
        rows = [[key, encode_value(value)] for key, value in data.items()]
        return list(KEY_VALUE_HEADERS), rows, JsonShape.OBJECT

    raise ParseError("JSON must be an object or array")


def _jsonl_objects(text: str) -> List[dict]:
    objects = []
    skipped = 0
    for line in text.split('\n'):
        line = line.strip()
        if not line:
            continue
        try:
            value: Any = loads_strict(line)
        except ValueError:
            skipped += 1
            continue
        if isinstance(value, dict):
            objects.append(value)
        else:
            skipped += 1
    if skipped:
        logger.debug("Skipped %d JSON Lines entries that are not objects", skipped)
    return objects


def parse_jsonl(text: str) -> Tuple[List[str], Rows]:
    objects = _jsonl_objects(sanitize_json_text(text))
    headers = collect_headers(objects)
    return headers, records_to_rows(objects, headers)
