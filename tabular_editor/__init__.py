"""Core logic for the CSV / JSON / JSON Lines table editor.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- read CSV, JSON and JSON Lines text into headers + string rows
- convert cell text to JSON values and back
- write edited tables back to any of the three formats
- load, save and export files on disk
"""
from .documents import export_file, load_file, save_file, save_table
from .errors import (
    ParseError,
    SerializeError,
    TableError,
    TableIOError,
    UnsupportedFormatError,
)
from .table import FileFormat, JsonShape, SaveRequest, TableData

__all__ = [
    'FileFormat',
    'JsonShape',
    'ParseError',
    'SaveRequest',
    'SerializeError',
    'TableData',
    'TableError',
    'TableIOError',
    'UnsupportedFormatError',
    'export_file',
    'load_file',
    'save_file',
    'save_table',
]
