"""CSV upload conversion endpoint."""

from __future__ import annotations

import logging
from pathlib import PurePosixPath
from urllib.parse import quote

from fastapi import APIRouter, File, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response

from csvjson.converter import csv_to_json
from csvjson.core.exceptions import FormParseError, UnsupportedFileTypeError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["convert"])

CSV_EXTENSION = ".csv"


def split_extension(filename: str) -> tuple[str, str]:
    """Split at the last dot of the final path element; ext keeps its dot."""
    dot = filename.rfind(".")
    if dot == -1 or "/" in filename[dot:]:
        return filename, ""
    return filename[:dot], filename[dot:]


def content_disposition(filename: str) -> str:
    escaped = filename.replace("\\", "\\\\").replace('"', '\\"')
    if escaped.isascii():
        return f'attachment; filename="{escaped}"'
    fallback = escaped.encode("ascii", "replace").decode("ascii")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"


@router.post("/convert")
async def convert_upload(request: Request, csvfile: UploadFile | None = File(None)) -> Response:
    """Convert an uploaded CSV file and return it as a JSON attachment."""
    if csvfile is None or not csvfile.filename:
        raise FormParseError("Error retrieving file")

    limit = request.app.state.settings.server.max_upload_bytes
    if csvfile.size is not None and csvfile.size > limit:
        logger.warning("Upload %r is %d bytes, limit is %d", csvfile.filename, csvfile.size, limit)
        raise FormParseError("Error parsing form")

    # clients may send a path; only its last element names the download
    filename = PurePosixPath(csvfile.filename).name
    base, extension = split_extension(filename)
    if extension != CSV_EXTENSION:
        raise UnsupportedFileTypeError(filename)

    try:
        payload = await run_in_threadpool(csv_to_json, csvfile.file)
    finally:
        await csvfile.close()

    json_filename = base + ".json"
    logger.info("Converted %s to %s (%d bytes)", filename, json_filename, len(payload))
    return Response(
        content=payload,
        media_type="application/json",
        headers={
            "Content-Disposition": content_disposition(json_filename),
            "Content-Length": str(len(payload)),
        },
    )
