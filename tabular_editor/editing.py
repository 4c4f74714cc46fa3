"""Row and column edits applied by the UI between load and save.

Each function returns new lists and leaves its arguments untouched.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

from .paths import display_name
from .settings import settings
from .table import FileFormat, JsonShape, TableData

Rows = List[List[str]]


def new_table(columns: Optional[int] = None) -> TableData:
    """Blank, unsaved JSON table with `column1..columnN` and one empty row."""
    columns = settings.NEW_FILE_COLUMNS if columns is None else columns
    columns = max(1, int(columns))
    headers = [f"column{i}" for i in range(1, columns + 1)]
    return TableData(
        headers=headers,
        rows=[[''] * columns],
        file_type=FileFormat.JSON,
        file_path='',
        json_format=JsonShape.ARRAY,
    )


def normalize_rows(headers: List[str], rows: Rows) -> Rows:
    """Pad short rows with empty cells so every row matches the header width."""
    width = len(headers)
    return [list(row[:width]) + [''] * (width - len(row)) for row in rows]


def add_row(headers: List[str], rows: Rows) -> Rows:
    return [list(r) for r in rows] + [[''] * len(headers)]


def _check_index(index: int, size: int, what: str) -> int:
    index = int(index)
    if index < 0 or index >= size:
        raise IndexError(f"{what} index {index} out of range")
    return index


def delete_row(rows: Rows, index: int) -> Rows:
    if len(rows) <= 1:
        raise ValueError("Cannot delete last row")
    index = _check_index(index, len(rows), 'Row')
    return [list(r) for i, r in enumerate(rows) if i != index]


def duplicate_row(rows: Rows, index: int) -> Rows:
    index = _check_index(index, len(rows), 'Row')
    out = [list(r) for r in rows]
    out.insert(index + 1, list(rows[index]))
    return out


def add_column(headers: List[str], rows: Rows, name: str = '') -> Tuple[List[str], Rows]:
    name = (name or '').strip() or f"column{len(headers) + 1}"
    return list(headers) + [name], [list(r) + [''] for r in normalize_rows(headers, rows)]


def delete_column(headers: List[str], rows: Rows, index: int) -> Tuple[List[str], Rows]:
    if len(headers) <= 1:
        raise ValueError("Cannot delete last column")
    index = _check_index(index, len(headers), 'Column')
    new_headers = [h for i, h in enumerate(headers) if i != index]
    new_rows = [[c for i, c in enumerate(r) if i != index] for r in rows]
    return new_headers, new_rows


def rename_column(headers: List[str], index: int, name: str) -> List[str]:
    index = _check_index(index, len(headers), 'Column')
    name = (name or '').strip()
    if not name:
        raise ValueError("Column name cannot be empty")
    out = list(headers)
    out[index] = name
    return out


def filter_rows(rows: Rows, query: str) -> List[Tuple[int, List[str]]]:
    """Rows containing `query` in any cell (case-insensitive), with their original index."""
    needle = (query or '').lower()
    return [
        (index, row)
        for index, row in enumerate(rows)
        if not needle or any(needle in str(c).lower() for c in row)
    ]


def is_modified(headers: List[str], rows: Rows, original_headers: List[str], original_rows: Rows) -> bool:
    return list(headers) != list(original_headers) or [list(r) for r in rows] != [list(r) for r in original_rows]


def describe_table(table: TableData) -> str:
    file_type = table.file_type.value.upper() if table.file_type else 'NEW'
    return f"{display_name(table.file_path)} | {file_type} | {len(table.rows)} rows | {len(table.headers)} cols"
