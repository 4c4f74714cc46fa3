"""Conversion between JSON values and the text shown in table cells.

Cells are always edited as text. Reading a JSON document turns every value
into its cell text with `encode_value`; writing it back guesses the value
type from the text with `decode_value`:

- ``""`` -> ``None``
- anything the JSON parser accepts (objects, arrays, quoted strings,
  numbers, ``true``/``false``/``null``)
- a signed 64-bit integer literal such as ``+5``
- a finite decimal literal such as ``.5`` or ``5.``
- otherwise the text itself

Digit-only text therefore comes back as a number even when it started life
as a string (``"007"`` -> ``7``).
"""
from __future__ import annotations

import json
import math
import re
from typing import Any

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
UINT64_MAX = 2 ** 64 - 1

_INT_RE = re.compile(r'[+-]?[0-9]+')
_FLOAT_RE = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def _finite_float(text: str) -> float:
    number = float(text)
    if not math.isfinite(number):
        raise ValueError(f"Number out of range: {text}")
    return number


def _fits_int_literal(text: str) -> bool:
    # Short enough for int() and for a 64-bit range check.
    return len(text.lstrip('+-').lstrip('0')) <= 20


def _json_int(text: str):
    """Integers wider than 64 bits become floats, as in double-based JSON parsers."""
    if _fits_int_literal(text):
        number = int(text)
        if INT64_MIN <= number <= UINT64_MAX:
            return number
    return _finite_float(text)


def loads_strict(text: str) -> Any:
    """`json.loads` without NaN / Infinity, whether spelled out or overflowing."""
    return json.loads(
        text,
        parse_constant=_reject_constant,
        parse_float=_finite_float,
        parse_int=_json_int,
    )


def dumps_compact(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(',', ':'), allow_nan=False)


def encode_value(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return json.dumps(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (list, dict)):
        return dumps_compact(value)
    return str(value)


def decode_value(text: str) -> Any:
    if text is None or text == '':
        return None

    try:
        return loads_strict(text)
    except ValueError:
        pass

    if text == 'true':
        return True
    if text == 'false':
        return False

    if _INT_RE.fullmatch(text) and _fits_int_literal(text):
        number = int(text)
        if INT64_MIN <= number <= INT64_MAX:
            return number

    if _FLOAT_RE.fullmatch(text):
        number = float(text)
        if math.isfinite(number):
            return number

    return text
