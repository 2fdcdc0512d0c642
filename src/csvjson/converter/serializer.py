"""JSON encoding of converted documents."""

from __future__ import annotations

import json

from csvjson.core.exceptions import SerializationError
from csvjson.core.types import Document

INDENT = 2


def serialize(document: Document) -> bytes:
    # NaN and infinities are valid floats but not valid JSON
    try:
        text = json.dumps(document, indent=INDENT, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(str(exc)) from exc
    return text.encode("utf-8")
