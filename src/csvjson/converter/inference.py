"""Per-cell scalar type inference.

Each cell is typed on its own: the trimmed text is offered to an ordered list
of parsers and the first one that accepts it decides the value. Empty cells
become ``None`` and anything no parser accepts stays as the trimmed text.
"""

from __future__ import annotations

import math
import re
from typing import Any, Callable

from csvjson.core.types import FieldValue

NO_MATCH: Any = object()

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1

TRUE_LITERALS = frozenset({"true", "t"})
FALSE_LITERALS = frozenset({"false", "f"})
INFINITY_LITERALS = frozenset({"inf", "infinity"})


def parse_int(text: str) -> Any:
    """Base-10 integer within the signed 64-bit range."""
    if not _INT_PATTERN.fullmatch(text):
        return NO_MATCH
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return NO_MATCH
    return value


def parse_float(text: str) -> Any:
    """Decimal or exponent float, plus inf/infinity/nan spellings."""
    # float() also takes digit-group underscores and non-ASCII digits
    if "_" in text or not text.isascii():
        return NO_MATCH
    try:
        value = float(text)
    except ValueError:
        return NO_MATCH
    # overflowing literals such as 1e400 stay text; only spelled-out inf is infinite
    if math.isinf(value) and text.lstrip("+-").lower() not in INFINITY_LITERALS:
        return NO_MATCH
    return value


def parse_bool(text: str) -> Any:
    lowered = text.lower()
    if lowered in TRUE_LITERALS:
        return True
    if lowered in FALSE_LITERALS:
        return False
    return NO_MATCH


# Order matters: "1" and "0" must stay integers.
PARSERS: tuple[Callable[[str], Any], ...] = (parse_int, parse_float, parse_bool)


def infer(cell: str) -> FieldValue:
    """Return the typed value for a single CSV cell."""
    text = cell.strip()
    if not text:
        return None
    for parser in PARSERS:
        value = parser(text)
        if value is not NO_MATCH:
            return value
    return text
