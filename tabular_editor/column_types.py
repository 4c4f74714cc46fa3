from __future__ import annotations

import math
from typing import List, Optional

from .settings import settings

NUMBER = 'number'
BOOLEAN = 'boolean'
STRING = 'string'


def _is_number(text: str) -> bool:
    try:
        return math.isfinite(float(text))
    except ValueError:
        return False


def detect_types(
    rows: List[List[str]],
    sample_size: Optional[int] = None,
    threshold: Optional[float] = None,
) -> List[str]:
    """Guess a display type per column from the first rows.

    A column is a number (or boolean) column when more than `threshold` of its
    non-empty sampled cells look like one. Column count follows the first row.
    """
    if not rows:
        return []
    sample_size = settings.TYPE_SAMPLE_SIZE if sample_size is None else sample_size
    threshold = settings.TYPE_THRESHOLD if threshold is None else threshold

    sample = rows[:max(0, int(sample_size))]
    width = len(rows[0])
    types = [STRING] * width

    for col in range(width):
        non_empty = 0
        numbers = 0
        booleans = 0
        for row in sample:
            value = row[col] if col < len(row) else ''
            if value is None or value == '':
                continue
            non_empty += 1
            if _is_number(value.strip()):
                numbers += 1
            if value.strip().lower() in ('true', 'false'):
                booleans += 1

        if non_empty:
            if numbers / non_empty > threshold:
                types[col] = NUMBER
            elif booleans / non_empty > threshold:
                types[col] = BOOLEAN
    return types
