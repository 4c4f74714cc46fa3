from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Union

from .errors import UnsupportedFormatError


class FileFormat(str, Enum):
    CSV = 'csv'
    JSON = 'json'
    JSONL = 'jsonl'

    @classmethod
    def from_name(cls, name: Union[str, 'FileFormat', None]) -> 'FileFormat':
        """Resolve an extension or format name, ignoring case and a leading dot."""
        if isinstance(name, FileFormat):
            return name
        normalized = (name or '').strip().lstrip('.').lower()
        try:
            return cls(normalized)
        except ValueError:
            raise UnsupportedFormatError(normalized) from None


class JsonShape(str, Enum):
    ARRAY = 'array'
    OBJECT = 'object'

    @classmethod
    def from_name(cls, name: Union[str, 'JsonShape', None]) -> 'JsonShape':
        # Anything other than "object" rebuilds as an array of records.
        if isinstance(name, JsonShape):
            return name
        if (name or '').strip().lower() == cls.OBJECT.value:
            return cls.OBJECT
        return cls.ARRAY


KEY_VALUE_HEADERS = ['Key', 'Value']


@dataclass
class TableData:
    headers: List[str]
    rows: List[List[str]]
    file_type: FileFormat
    file_path: str
    json_format: JsonShape = JsonShape.ARRAY

    def to_save_request(self) -> 'SaveRequest':
        return SaveRequest(
            file_path=self.file_path,
            file_type=self.file_type,
            headers=list(self.headers),
            rows=[list(row) for row in self.rows],
            json_format=self.json_format,
        )


@dataclass
class SaveRequest:
    file_path: str
    file_type: Union[FileFormat, str]
    headers: List[str] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)
    json_format: Union[JsonShape, str] = JsonShape.ARRAY

    def with_target(self, file_path: str, file_type: Union[FileFormat, str]) -> 'SaveRequest':
        """Copy of this request aimed at another path/format, flattened to an array."""
        return replace(
            self,
            file_path=file_path,
            file_type=file_type,
            headers=list(self.headers),
            rows=[list(row) for row in self.rows],
            json_format=JsonShape.ARRAY,
        )


def is_key_value_table(headers: List[str]) -> bool:
    return list(headers) == KEY_VALUE_HEADERS
