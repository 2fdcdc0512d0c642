"""Row to record transformation."""

from __future__ import annotations

from collections.abc import Sequence

from csvjson.converter.inference import infer
from csvjson.core.exceptions import EmptyInputError
from csvjson.core.types import Document, Record, Row


def build_record(header: Sequence[str], row: Sequence[str]) -> Record:
    """Zip header names with row cells by position.

    Missing trailing cells map to ``None`` and cells past the header are
    dropped. With duplicate header names the later column wins.
    """
    record: Record = {}
    for index, name in enumerate(header):
        record[name.strip()] = infer(row[index]) if index < len(row) else None
    return record


def convert(rows: Sequence[Row]) -> Document:
    """Turn parsed rows into records, treating the first row as the header."""
    if not rows:
        raise EmptyInputError()
    header = rows[0]
    return [build_record(header, row) for row in rows[1:]]
