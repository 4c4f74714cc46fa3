from __future__ import annotations

import re

from .errors import TableIOError

# Unicode "Cc" characters except tab, line feed and carriage return.
_CONTROL_CHARS_RE = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]')


def sanitize_json_text(content: str) -> str:
    """Replace stray control characters with spaces before JSON parsing."""
    return _CONTROL_CHARS_RE.sub(' ', content)


def source_path(file_obj) -> str:
    """Path of an uploaded file object, or the value itself when it is a path."""
    if file_obj is None:
        raise TableIOError("No file uploaded.")
    return file_obj.name if hasattr(file_obj, 'name') else str(file_obj)


def read_text(path: str) -> str:
    # newline='' keeps CR/LF inside quoted CSV fields intact.
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise TableIOError(f"Failed to read file: {e}") from e


def write_text(path: str, content: str) -> None:
    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
    except OSError as e:
        raise TableIOError(f"Failed to write file: {e}") from e
