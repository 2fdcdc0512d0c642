"""CSV to JSON conversion: parse, infer, build records, serialize."""

from __future__ import annotations

import logging
from typing import IO, AnyStr

from csvjson.converter.inference import infer
from csvjson.converter.parser import parse_rows
from csvjson.converter.records import build_record, convert
from csvjson.converter.serializer import serialize

logger = logging.getLogger(__name__)


def csv_to_json(stream: IO[AnyStr]) -> bytes:
    """Convert a CSV stream into an indented JSON array of records.

    Raises:
        MalformedInputError: the CSV text could not be parsed.
        EmptyInputError: the stream holds no rows at all.
        SerializationError: a value has no JSON representation.
    """
    rows = parse_rows(stream)
    document = convert(rows)
    payload = serialize(document)
    logger.debug(
        "Converted %d data rows x %d columns into %d bytes",
        len(document),
        len(rows[0]),
        len(payload),
    )
    return payload


__all__ = ["build_record", "convert", "csv_to_json", "infer", "parse_rows", "serialize"]
