from __future__ import annotations

import os

from .table import FileFormat


def file_extension(path: str) -> str:
    """Lower-cased extension of `path` without the dot ('' when missing)."""
    if not path:
        return ''
    _, ext = os.path.splitext(os.path.basename(path))
    return ext[1:].lower()


def format_from_path(path: str) -> FileFormat:
    return FileFormat.from_name(file_extension(path))


def display_name(path: str) -> str:
    if not path:
        return 'Untitled'
    return os.path.basename(path.replace('\\', '/')) or 'Untitled'


def with_extension(file_name: str, file_format: FileFormat) -> str:
    """Append the format's extension unless `file_name` already ends with it."""
    ext = f".{file_format.value}"
    if not file_name.lower().endswith(ext):
        file_name += ext
    return file_name
