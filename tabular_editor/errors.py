from __future__ import annotations


class TableError(Exception):
    """Base class for every failure surfaced by load, save and export."""


class TableIOError(TableError):
    """The file could not be read or written."""


class ParseError(TableError):
    """Source text is not valid CSV / JSON, or the JSON root is a scalar."""


class SerializeError(TableError):
    """The table could not be encoded into the target format."""


class UnsupportedFormatError(TableError):
    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"Unsupported file type: {extension}")
