"""Reads delimited text into rows of cells."""

from __future__ import annotations

import csv
import io
import sys
from collections.abc import Iterable, Iterator
from typing import IO, AnyStr

from csvjson.core.exceptions import MalformedInputError
from csvjson.core.types import Row

BOM = "\ufeff"
QUOTE = '"'

# Cell size is bounded by the upload limit, not by the csv module.
csv.field_size_limit(min(sys.maxsize, 2**31 - 1))


def _read_text(stream: IO[AnyStr]) -> str:
    data = stream.read()
    if isinstance(data, bytes):
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise MalformedInputError(f"input is not valid UTF-8 (byte offset {exc.start})") from exc
    return data[len(BOM):] if data.startswith(BOM) else data


def _tap(lines: Iterable[str], consumed: list[str]) -> Iterator[str]:
    for line in lines:
        consumed.append(line)
        yield line


def has_bare_quote(raw: str) -> bool:
    """True when a quote appears inside a field that did not open with one.

    ``raw`` is the source text of one record, already accepted by the strict
    reader, so quoted fields are known to be well formed.
    """
    in_quotes = quoted = False
    field_start = True
    for char in raw:
        if in_quotes:
            if char == QUOTE:
                in_quotes = False
            continue
        if char == QUOTE:
            if field_start or quoted:
                # opening quote, or the second half of an escaped ""
                in_quotes = quoted = True
                field_start = False
                continue
            return True
        if char in ",\r\n":
            field_start, quoted = True, False
        else:
            field_start = False
    return False


def parse_rows(stream: IO[AnyStr]) -> list[Row]:
    """Read the whole stream and return its non-blank rows.

    Raises:
        MalformedInputError: on undecodable bytes or a CSV grammar violation,
            such as an unterminated quoted field or a bare quote in an
            unquoted field.
    """
    text = _read_text(stream)
    consumed: list[str] = []
    reader = csv.reader(_tap(io.StringIO(text, newline=""), consumed), strict=True)
    rows: list[Row] = []
    try:
        for row in reader:
            raw = "".join(consumed)
            consumed.clear()
            if has_bare_quote(raw):
                raise MalformedInputError('bare " in non-quoted field', line=reader.line_num)
            if row:
                rows.append(row)
    except csv.Error as exc:
        raise MalformedInputError(str(exc), line=reader.line_num) from exc
    return rows
