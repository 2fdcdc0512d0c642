"""Type aliases used across csvjson."""

from __future__ import annotations

from typing import Union

FieldValue = Union[int, float, bool, str, None]
Row = list[str]
Record = dict[str, FieldValue]
Document = list[Record]
