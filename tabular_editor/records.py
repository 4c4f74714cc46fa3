from __future__ import annotations

from typing import Any, Dict, Iterable, List

from .coercion import decode_value, encode_value


def collect_headers(records: Iterable[Any]) -> List[str]:
    """Union of the keys of every dict in `records`, in first-seen order.

    Non-dict entries contribute nothing.
    """
    headers: List[str] = []
    seen = set()
    for record in records:
        if not isinstance(record, dict):
            continue
        for key in record:
            if key not in seen:
                seen.add(key)
                headers.append(key)
    return headers


def record_to_row(record: Dict[str, Any], headers: List[str]) -> List[str]:
    return [encode_value(record[h]) if h in record else '' for h in headers]


def records_to_rows(records: Iterable[Any], headers: List[str]) -> List[List[str]]:
    return [record_to_row(rec, headers) for rec in records if isinstance(rec, dict)]


def cell(row: List[str], index: int) -> str:
    """Cell text at `index`, empty when the row is short."""
    if index < len(row):
        value = row[index]
        return '' if value is None else value
    return ''


def row_to_record(headers: List[str], row: List[str]) -> Dict[str, Any]:
    return {header: decode_value(cell(row, i)) for i, header in enumerate(headers)}


def rows_to_records(headers: List[str], rows: List[List[str]]) -> List[Dict[str, Any]]:
    return [row_to_record(headers, row) for row in rows]


def rows_to_object(rows: List[List[str]]) -> Dict[str, Any]:
    """Rebuild a single object from Key/Value rows; rows with an empty key are dropped."""
    obj: Dict[str, Any] = {}
    for row in rows:
        key = cell(row, 0)
        if key:
            obj[key] = decode_value(cell(row, 1))
    return obj
