from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

import gradio as gr
import pandas as pd

from . import editing
from .column_types import detect_types
from .documents import export_file, load_file, save_file
from .errors import TableError
from .io_utils import source_path
from .paths import display_name, with_extension
from .settings import settings
from .table import FileFormat, JsonShape, SaveRequest, TableData

logger = logging.getLogger(__name__)

Rows = List[List[str]]


def _cell_text(value: Any) -> str:
    if value is None:
        return ''
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return ''
    return value if isinstance(value, str) else str(value)


def table_to_frame(headers: List[str], rows: Rows) -> pd.DataFrame:
    return pd.DataFrame(editing.normalize_rows(headers, rows), columns=list(headers), dtype=object)


def frame_to_table(frame) -> Tuple[List[str], Rows]:
    """Headers and text rows from the Dataframe component's value."""
    if frame is None:
        return [], []
    if isinstance(frame, dict):
        frame = pd.DataFrame(frame.get('data') or [], columns=frame.get('headers') or [])
    headers = [str(c) for c in frame.columns]
    rows = [[_cell_text(v) for v in rec] for rec in frame.itertuples(index=False, name=None)]
    return headers, rows


def table_meta(table: TableData) -> Dict[str, Any]:
    return {
        'file_path': table.file_path,
        'file_type': table.file_type.value,
        'json_format': table.json_format.value,
        'original_headers': list(table.headers),
        # Compared against the Dataframe, which always shows full-width rows.
        'original_rows': editing.normalize_rows(table.headers, table.rows),
    }


def _table_from_state(meta: Optional[Dict[str, Any]], frame) -> TableData:
    meta = meta or {}
    headers, rows = frame_to_table(frame)
    return TableData(
        headers=headers,
        rows=rows,
        file_type=FileFormat.from_name(meta.get('file_type') or FileFormat.JSON.value),
        file_path=meta.get('file_path') or '',
        json_format=JsonShape.from_name(meta.get('json_format')),
    )


def describe_state(meta: Optional[Dict[str, Any]], frame) -> str:
    if not meta:
        return ""
    table = _table_from_state(meta, frame)
    text = editing.describe_table(table)
    modified = meta.get('original_rows') is None or editing.is_modified(
        table.headers, table.rows, meta.get('original_headers') or [], meta.get('original_rows') or [],
    )
    return f"{text} | {'Modified' if modified else 'Saved'}"


def column_types_text(frame) -> str:
    headers, rows = frame_to_table(frame)
    types = detect_types(editing.normalize_rows(headers, rows))
    return ", ".join(f"{h}: {t}" for h, t in zip(headers, types))


def column_choices(frame) -> List[str]:
    headers, _ = frame_to_table(frame)
    return [f"{i + 1}: {h}" for i, h in enumerate(headers)]


def _column_index(choice) -> int:
    if choice is None or choice == '':
        raise ValueError("Select a column first.")
    return int(str(choice).split(':', 1)[0]) - 1


def _row_index(value) -> int:
    # Row numbers shown to the user start at 1.
    if value is None or value == '':
        raise ValueError("Enter a row number first.")
    return int(value) - 1


def _loaded_outputs(table: TableData, message: str, saved: bool = True):
    meta = table_meta(table)
    if not saved:
        meta['original_rows'] = None
    frame = table_to_frame(table.headers, table.rows)
    return (
        meta,
        frame,
        message,
        describe_state(meta, frame),
        column_types_text(frame),
        gr.update(choices=column_choices(frame), value=None),
    )


def load_table_handler(file_obj):
    try:
        table = load_file(source_path(file_obj))
    except TableError as e:
        logger.warning("Load failed: %s", e)
        return None, None, f"Error loading file: {str(e)}", "", "", gr.update(choices=[], value=None)

    logger.info("Loaded %s (%d rows, %d cols)", table.file_path, len(table.rows), len(table.headers))
    return _loaded_outputs(table, f"Loaded {len(table.rows)} rows")


def new_table_handler():
    return _loaded_outputs(editing.new_table(), "New file", saved=False)


def _output_path(file_name: str, file_format: FileFormat) -> str:
    file_name = os.path.basename((file_name or '').strip()) or 'output'
    return os.path.join(settings.EXPORT_DIR, with_extension(file_name, file_format))


def save_table_handler(meta, frame):
    if not meta:
        return None, meta, "No data loaded.", ""

    table = _table_from_state(meta, frame)
    name = display_name(table.file_path)
    path = _output_path(name if table.file_path else 'untitled', table.file_type)
    request = SaveRequest(
        file_path=path,
        file_type=table.file_type,
        headers=table.headers,
        rows=table.rows,
        json_format=table.json_format,
    )
    try:
        save_file(request)
    except TableError as e:
        logger.warning("Save failed: %s", e)
        return None, meta, f"Error saving: {str(e)}", describe_state(meta, frame)

    logger.info("Saved %s", path)
    meta = dict(meta)
    meta['original_headers'] = list(table.headers)
    meta['original_rows'] = [list(r) for r in table.rows]
    return path, meta, f"Saved to {path}", describe_state(meta, frame)


def export_table_handler(meta, frame, export_format, file_name):
    if not meta:
        return None, "No data loaded."

    table = _table_from_state(meta, frame)
    try:
        target_format = FileFormat.from_name(export_format)
        path = _output_path(file_name, target_format)
        export_file(table.to_save_request(), path, target_format)
    except TableError as e:
        logger.warning("Export failed: %s", e)
        return None, f"Error during export: {str(e)}"

    logger.info("Exported %s", path)
    return path, f"Export successful! Saved to {path}"


def _edited_outputs(meta, headers: List[str], rows: Rows, message: str):
    frame = table_to_frame(headers, rows)
    return (
        frame,
        message,
        describe_state(meta, frame),
        column_types_text(frame),
        gr.update(choices=column_choices(frame), value=None),
    )


def _unchanged_outputs(meta, frame, message: str):
    return frame, message, describe_state(meta, frame), column_types_text(frame), gr.update()


def add_row_handler(meta, frame):
    headers, rows = frame_to_table(frame)
    return _edited_outputs(meta, headers, editing.add_row(headers, rows), "Row added")


def delete_row_handler(meta, frame, row_number):
    headers, rows = frame_to_table(frame)
    try:
        rows = editing.delete_row(rows, _row_index(row_number))
    except (ValueError, IndexError) as e:
        return _unchanged_outputs(meta, frame, str(e))
    return _edited_outputs(meta, headers, rows, "Row deleted")


def duplicate_row_handler(meta, frame, row_number):
    headers, rows = frame_to_table(frame)
    try:
        rows = editing.duplicate_row(rows, _row_index(row_number))
    except (ValueError, IndexError) as e:
        return _unchanged_outputs(meta, frame, str(e))
    return _edited_outputs(meta, headers, rows, "Row duplicated")


def add_column_handler(meta, frame, name):
    headers, rows = frame_to_table(frame)
    headers, rows = editing.add_column(headers, rows, name)
    return _edited_outputs(meta, headers, rows, "Column added")


def delete_column_handler(meta, frame, column):
    headers, rows = frame_to_table(frame)
    try:
        headers, rows = editing.delete_column(headers, rows, _column_index(column))
    except (ValueError, IndexError) as e:
        return _unchanged_outputs(meta, frame, str(e))
    return _edited_outputs(meta, headers, rows, "Column deleted")


def rename_column_handler(meta, frame, column, name):
    headers, rows = frame_to_table(frame)
    try:
        headers = editing.rename_column(headers, _column_index(column), name)
    except (ValueError, IndexError) as e:
        return _unchanged_outputs(meta, frame, str(e))
    return _edited_outputs(meta, headers, rows, "Column renamed")


def search_handler(frame, query):
    headers, rows = frame_to_table(frame)
    if not (query or '').strip():
        return None
    matches = editing.filter_rows(editing.normalize_rows(headers, rows), query)
    if not matches:
        return None
    return pd.DataFrame(
        [[index + 1] + row for index, row in matches],
        columns=['#'] + headers,
        dtype=object,
    )


def refresh_status_handler(meta, frame):
    return describe_state(meta, frame), column_types_text(frame)
