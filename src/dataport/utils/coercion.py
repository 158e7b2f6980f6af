from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any, Optional

_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\Z")
_PREFIXED = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)\Z")
_INFINITIES = {
    "Infinity": math.inf,
    "+Infinity": math.inf,
    "-Infinity": -math.inf,
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _parse_number(text: str) -> Optional[float]:
    """
    Numeric reading of a string, for coercive comparison: trimmed,
    '' -> 0, unsigned 0x/0o/0b literals, signed Infinity, otherwise
    a plain decimal literal. Unparsable text -> None.
    """
    stripped = text.strip()
    if stripped == "":
        return 0.0
    if stripped in _INFINITIES:
        return _INFINITIES[stripped]
    if _PREFIXED.match(stripped):
        try:
            return float(int(stripped, 0))
        except OverflowError:
            return math.inf
    if _DECIMAL.match(stripped):
        return float(stripped)
    return None


def loose_equals(left: Any, right: Any) -> bool:
    """
    Coercive equality used by pattern conditions.

    - None only equals None
    - booleans compare as 0/1
    - a number and a string compare numerically
    - NaN equals nothing
    - anything else falls back to ``==``
    """
    if left is None or right is None:
        return left is None and right is None

    if isinstance(left, bool) and isinstance(right, bool):
        return left == right
    if isinstance(left, bool):
        return loose_equals(int(left), right)
    if isinstance(right, bool):
        return loose_equals(left, int(right))

    if _is_nan(left) or _is_nan(right):
        return False

    if _is_number(left) and isinstance(right, str):
        parsed = _parse_number(right)
        return parsed is not None and left == parsed
    if isinstance(left, str) and _is_number(right):
        parsed = _parse_number(left)
        return parsed is not None and parsed == right

    return bool(left == right)


def is_truthy(value: Any) -> bool:
    """
    Truthiness of handler and predicate results.

    None, False, 0, NaN and "" are falsy. Containers are always truthy,
    so a handler returning ``{}`` still replaces the in-flight data.
    """
    if value is None or isinstance(value, bool):
        return bool(value)
    if _is_number(value):
        return value != 0 and not _is_nan(value)
    if isinstance(value, str):
        return value != ""
    return True


def read_field(data: Any, key: str) -> Any:
    """Field lookup for patterns: mappings by key, other objects by attribute."""
    if data is None:
        return None
    if isinstance(data, Mapping):
        return data.get(key)
    # attribute access needs a str name; other keys are looked up by their str form
    return getattr(data, key if isinstance(key, str) else str(key), None)
