"""Load, save and export table files.

Every call reads or writes one file and returns; nothing is cached between
calls. Failures are raised as `TableError` subclasses for the caller to show.
"""
from __future__ import annotations

import logging

from .io_utils import read_text
from .paths import format_from_path
from .readers import parse_csv, parse_json, parse_jsonl
from .table import FileFormat, JsonShape, SaveRequest, TableData
from .writers import write_csv, write_json, write_jsonl

logger = logging.getLogger(__name__)


def load_file(file_path: str) -> TableData:
    file_type = format_from_path(file_path)
    content = read_text(file_path)
    logger.debug("Loading %s as %s", file_path, file_type.value)

    if file_type is FileFormat.JSON:
        headers, rows, shape = parse_json(content)
    elif file_type is FileFormat.JSONL:
        headers, rows = parse_jsonl(content)
        shape = JsonShape.ARRAY
    elif file_type is FileFormat.CSV:
        headers, rows = parse_csv(content)
        shape = JsonShape.ARRAY
    else:
        raise AssertionError(f"Unhandled file type: {file_type}")

    return TableData(
        headers=headers,
        rows=rows,
        file_type=file_type,
        file_path=file_path,
        json_format=shape,
    )


def save_file(request: SaveRequest) -> None:
    file_type = FileFormat.from_name(request.file_type)
    shape = JsonShape.from_name(request.json_format)
    logger.debug("Saving %s as %s (%s)", request.file_path, file_type.value, shape.value)

    if file_type is FileFormat.JSON:
        write_json(request.file_path, request.headers, request.rows, shape)
    elif file_type is FileFormat.JSONL:
        write_jsonl(request.file_path, request.headers, request.rows)
    elif file_type is FileFormat.CSV:
        write_csv(request.file_path, request.headers, request.rows)
    else:
        raise AssertionError(f"Unhandled file type: {file_type}")


def export_file(request: SaveRequest, export_path: str, export_type) -> None:
    """Save `request` under another path and format, always as an array of records."""
    save_file(request.with_target(export_path, export_type))


def save_table(table: TableData) -> None:
    save_file(table.to_save_request())
